"""
Bid ledger

A bid is tracked per (token, bidder). A new bid from a bidder replaces the bidder's previous bid on the token.
"""

from artgraph.commands.accounts import resolve_account
from artgraph.commands.events import EventArgs, EventHandler
from artgraph.data.bid_log import TBidLog
from artgraph.data.store import EntityStore
from artgraph.domain.artwork import bid_log_id
from artgraph.domain.events import AcceptBid, Bid, CancelBid
from artgraph.ethereum.model import Address, TokenId


class HandleBid(EventHandler[Bid]):
    """
    Logs the bid, and makes it the artwork's current bid
    """

    def __call__(self, args: EventArgs[Bid]):
        store, event = args.store, args.event
        artwork = self.load_artwork(store, event.token_id)
        if artwork is None:
            return

        bidder = resolve_account(store, event.bidder)
        key = bid_log_id(event.token_id, bidder.id)

        existing_bid = store.load(TBidLog, key)
        if existing_bid is not None and not existing_bid.resolved:
            self._logger.warning(
                "open bid replaced [%s]: amount %s -> %s",
                key,
                existing_bid.amount,
                event.amount,
            )

        bid = store.save(
            TBidLog(
                id=key,
                amount=event.amount,
                bidder_id=bidder.id,
                item_id=artwork.id,
                timestamp=event.context.block_timestamp,
                resolved=False,
                is_accepted=None,
            )
        )

        artwork.append_bid(bid.id)
        store.save(artwork)
        artwork.current_bid_id = bid.id
        store.save(artwork)


class _ResolveBid(EventHandler):
    """
    Accepting or cancelling requires the bid to have been placed. Resolving an unknown bid is logged and skipped.
    """

    def load_bid(
        self, store: EntityStore, token_id: TokenId, bidder: Address
    ) -> TBidLog | None:
        account = resolve_account(store, bidder)
        key = bid_log_id(token_id, account.id)
        bid = store.load(TBidLog, key)
        if bid is None:
            self._logger.warning("BidLog does not exist [%s]", key)
        return bid


class HandleAcceptBid(_ResolveBid):
    """
    Accepts the bid, which records the bid amount as the artwork's last sold price and takes it off sale
    """

    def __call__(self, args: EventArgs[AcceptBid]):
        store, event = args.store, args.event
        artwork = self.load_artwork(store, event.token_id)
        if artwork is None:
            return

        bid = self.load_bid(store, event.token_id, event.bidder)
        if bid is None:
            return

        bid.accept()
        store.save(bid)

        artwork.last_sold_price = bid.amount
        artwork.current_bid_id = bid.id
        artwork.on_sale = False
        store.save(artwork)


class HandleCancelBid(_ResolveBid):
    """
    Cancels the bid. The artwork is not changed.
    """

    def __call__(self, args: EventArgs[CancelBid]):
        store, event = args.store, args.event
        if self.load_artwork(store, event.token_id) is None:
            return

        bid = self.load_bid(store, event.token_id, event.bidder)
        if bid is None:
            return

        bid.cancel()
        store.save(bid)
