"""
Read accessors on the marketplace contract
"""
from typing import Protocol

from web3 import Web3

from artgraph.ethereum.model import Address, TokenId

# only the read accessor used while indexing
TOKEN_URI_ABI = [
    {
        "inputs": [{"internalType": "uint256", "name": "tokenId", "type": "uint256"}],
        "name": "tokenURI",
        "outputs": [{"internalType": "string", "name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    }
]


class TokenUriReader(Protocol):
    """
    Looks up the descriptor URI for a token on the contract that emitted the event
    """

    def token_uri(self, contract_address: Address, token_id: TokenId) -> str:
        """
        :exception Exception: if the contract call fails
        """


class Web3TokenUriReader:
    """
    Calls `tokenURI(uint256)` on the contract through a web3 provider
    """

    def __init__(self, web3: Web3):
        self._web3 = web3

    @classmethod
    def from_rpc_url(cls, rpc_url: str) -> "Web3TokenUriReader":
        """
        Connects to the Ethereum node over HTTP
        """
        return cls(Web3(Web3.HTTPProvider(rpc_url)))

    def token_uri(self, contract_address: Address, token_id: TokenId) -> str:
        contract = self._web3.eth.contract(
            address=Web3.to_checksum_address(contract_address),
            abi=TOKEN_URI_ABI,
        )
        return contract.functions.tokenURI(token_id).call()
