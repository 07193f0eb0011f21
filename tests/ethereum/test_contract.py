import unittest
from unittest.mock import MagicMock

from web3 import Web3

from artgraph.ethereum.contract import TOKEN_URI_ABI, Web3TokenUriReader
from artgraph.ethereum.model import TokenId
from tests.test_support import CONTRACT, DESCRIPTOR_HASH


class Web3TokenUriReaderTestCase(unittest.TestCase):
    def test_token_uri(self):
        web3 = MagicMock()
        contract = web3.eth.contract.return_value
        contract.functions.tokenURI.return_value.call.return_value = f"ipfs://ipfs/{DESCRIPTOR_HASH}"

        reader = Web3TokenUriReader(web3)
        self.assertEqual(f"ipfs://ipfs/{DESCRIPTOR_HASH}", reader.token_uri(CONTRACT, TokenId(7)))

        web3.eth.contract.assert_called_once_with(
            address=Web3.to_checksum_address(CONTRACT),
            abi=TOKEN_URI_ABI,
        )
        contract.functions.tokenURI.assert_called_once_with(7)


if __name__ == "__main__":
    unittest.main()
