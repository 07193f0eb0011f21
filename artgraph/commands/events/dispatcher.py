"""
Routes marketplace events to their handlers
"""
from dataclasses import dataclass
from typing import Iterable

from sqlalchemy.orm import sessionmaker

from artgraph.commands.events import EventArgs
from artgraph.commands.events.bids import HandleAcceptBid, HandleBid, HandleCancelBid
from artgraph.commands.events.sales import HandleSalePriceSet, HandleSold
from artgraph.commands.events.transfer import HandleTransfer
from artgraph.core.command import Command
from artgraph.data.store import EntityStore
from artgraph.domain.events import (
    AcceptBid,
    Approval,
    Bid,
    CancelBid,
    EventPosition,
    MarketplaceEvent,
    SalePriceSet,
    Sold,
    Transfer,
    WhitelistCreator,
)


@dataclass
class EventOrderError(Exception):
    """
    Raised when an event is delivered before an event that was already applied.

    The caller guarantees events are delivered in emission order.
    """

    position: EventPosition
    last_applied_position: EventPosition

    def __str__(self) -> str:
        return (
            f"event at position {self.position} was delivered after the event at position "
            f"{self.last_applied_position}"
        )


class UnsupportedEventError(TypeError):
    """
    Raised when the object to dispatch is not a marketplace event
    """


class EventDispatcher(Command[MarketplaceEvent, bool]):
    """
    Applies each event in its own database transaction.

    Notes
    -----
    - Events must be delivered one at a time, in ascending (block number, log index) order. An event that is
      positioned before the last applied event raises an EventOrderError and is not applied.
    - Delivering the last applied event again is a replay, and is applied again.
    - Approval and WhitelistCreator events are not indexed.
    """

    # pylint: disable=too-many-arguments

    def __init__(
        self,
        session_factory: sessionmaker,
        handle_transfer: HandleTransfer,
        handle_bid: HandleBid,
        handle_accept_bid: HandleAcceptBid,
        handle_cancel_bid: HandleCancelBid,
        handle_sold: HandleSold,
        handle_sale_price_set: HandleSalePriceSet,
    ):
        self._session_factory = session_factory
        self._handle_transfer = handle_transfer
        self._handle_bid = handle_bid
        self._handle_accept_bid = handle_accept_bid
        self._handle_cancel_bid = handle_cancel_bid
        self._handle_sold = handle_sold
        self._handle_sale_price_set = handle_sale_price_set

        self._last_applied_position: EventPosition | None = None
        self._logger = super().get_logger()

    @property
    def last_applied_position(self) -> EventPosition | None:
        return self._last_applied_position

    def __call__(self, event: MarketplaceEvent) -> bool:
        """
        :return: True if the event was applied, False if the event type is not indexed
        :exception EventOrderError: if the event is delivered out of order
        :exception UnsupportedEventError: if the object is not a marketplace event
        """
        self.__check_order(event)

        match event:
            case Approval() | WhitelistCreator():
                self._logger.debug("skipping %s", type(event).__name__)
                applied = False
            case Transfer() | Bid() | AcceptBid() | CancelBid() | Sold() | SalePriceSet():
                with self._session_factory.begin() as session:
                    self.__handler(event)(EventArgs(EntityStore(session), event))
                self._logger.debug("applied %s at %s", type(event).__name__, event.context.position)
                applied = True
            case _:
                raise UnsupportedEventError(f"not a marketplace event: {event!r}")

        self._last_applied_position = event.context.position
        return applied

    def apply_all(self, events: Iterable[MarketplaceEvent]) -> int:
        """
        Applies the events in order

        :return: number of events that were applied
        """
        return sum(1 for event in events if self(event))

    def __handler(self, event: MarketplaceEvent):
        match event:
            case Transfer():
                return self._handle_transfer
            case Bid():
                return self._handle_bid
            case AcceptBid():
                return self._handle_accept_bid
            case CancelBid():
                return self._handle_cancel_bid
            case Sold():
                return self._handle_sold
            case SalePriceSet():
                return self._handle_sale_price_set
        raise UnsupportedEventError(f"not a marketplace event: {event!r}")

    def __check_order(self, event: MarketplaceEvent):
        context = getattr(event, "context", None)
        if context is None:
            raise UnsupportedEventError(f"not a marketplace event: {event!r}")

        if (
            self._last_applied_position is not None
            and context.position < self._last_applied_position
        ):
            raise EventOrderError(context.position, self._last_applied_position)
