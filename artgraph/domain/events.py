"""
Marketplace contract events

Events are delivered already decoded and finalized. Each event carries the `EventContext` of the log that
emitted it.
"""

from dataclasses import dataclass

from artgraph.ethereum.model import Address, BlockTimestamp, TokenId, Wei

# (block number, log index) - orders events within the chain
EventPosition = tuple[int, int]


@dataclass(frozen=True, slots=True)
class EventContext:
    """
    Where and when the event was emitted
    """

    block_number: int
    log_index: int
    block_timestamp: BlockTimestamp
    # contract that emitted the event
    contract_address: Address
    transaction_hash: str | None = None

    @property
    def position(self) -> EventPosition:
        """
        Events must be applied in ascending position order
        """
        return (self.block_number, self.log_index)


@dataclass(frozen=True, slots=True)
class Transfer:
    """
    ERC-721 Transfer(from, to, tokenId)
    """

    context: EventContext
    sender: Address
    recipient: Address
    token_id: TokenId


@dataclass(frozen=True, slots=True)
class Bid:
    """
    Bid(tokenId, bidder, amount)
    """

    context: EventContext
    token_id: TokenId
    bidder: Address
    amount: Wei


@dataclass(frozen=True, slots=True)
class AcceptBid:
    """
    AcceptBid(tokenId, bidder)
    """

    context: EventContext
    token_id: TokenId
    bidder: Address


@dataclass(frozen=True, slots=True)
class CancelBid:
    """
    CancelBid(tokenId, bidder)
    """

    context: EventContext
    token_id: TokenId
    bidder: Address


@dataclass(frozen=True, slots=True)
class Sold:
    """
    Sold(tokenId, buyer, seller, amount)
    """

    context: EventContext
    token_id: TokenId
    buyer: Address
    seller: Address
    amount: Wei


@dataclass(frozen=True, slots=True)
class SalePriceSet:
    """
    SalePriceSet(tokenId, price)
    """

    context: EventContext
    token_id: TokenId
    price: Wei


@dataclass(frozen=True, slots=True)
class Approval:
    """
    ERC-721 Approval(owner, approved, tokenId) - not indexed
    """

    context: EventContext
    owner: Address
    approved: Address
    token_id: TokenId


@dataclass(frozen=True, slots=True)
class WhitelistCreator:
    """
    WhitelistCreator(creator) - not indexed
    """

    context: EventContext
    creator: Address


MarketplaceEvent = (
    Transfer
    | Bid
    | AcceptBid
    | CancelBid
    | Sold
    | SalePriceSet
    | Approval
    | WhitelistCreator
)
