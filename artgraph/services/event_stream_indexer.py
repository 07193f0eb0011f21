"""
Applies marketplace events published on an Observable stream
"""
from reactivex import Observable, Subject
from reactivex.abc import DisposableBase

from artgraph.commands.events.dispatcher import EventDispatcher
from artgraph.core.logging import get_logger
from artgraph.domain.events import MarketplaceEvent


class EventStreamIndexer:
    """
    Subscribes the dispatcher to an event stream.

    Notes
    -----
    - Events are applied on the thread that publishes them, one at a time, in the order they are published.
      The upstream source must publish from a single thread.
    - Applied events are republished on `applied_events`.
    - If an event fails to apply, then the subscription is disposed and the error is published on
      `applied_events`. Events that follow a failed event are not applied.
    """

    def __init__(self, dispatcher: EventDispatcher):
        self._dispatcher = dispatcher
        self._subject: Subject[MarketplaceEvent] = Subject()
        self._subscription: DisposableBase | None = None
        # set when the stream completes or fails
        self._stopped = False
        self._logger = get_logger(self)

    @property
    def applied_events(self) -> Observable[MarketplaceEvent]:
        return self._subject

    @property
    def stopped(self) -> bool:
        return self._stopped

    def subscribe(self, events: Observable[MarketplaceEvent]):
        """
        :exception AssertionError: if already subscribed to a stream
        """
        if self._subscription is not None or self._stopped:
            raise AssertionError("an event stream has already been subscribed to")

        subscription = events.subscribe(
            on_next=self.__on_next,
            on_error=self.__on_error,
            on_completed=self.__on_completed,
        )
        # cold streams may have been fully consumed while subscribing
        if self._stopped:
            subscription.dispose()
        else:
            self._subscription = subscription

    def dispose(self):
        self._stopped = True
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None

    def __on_next(self, event: MarketplaceEvent):
        if self._stopped:
            return
        try:
            applied = self._dispatcher(event)
        except Exception as err:  # pylint: disable=broad-exception-caught
            self._logger.exception("failed to apply event: %s", event)
            self.__on_error(err)
            return

        if applied:
            self._subject.on_next(event)

    def __on_error(self, error: Exception):
        if self._stopped:
            return
        self._logger.error("event stream failed: %s", error)
        self.dispose()
        self._subject.on_error(error)

    def __on_completed(self):
        if self._stopped:
            return
        self._logger.info("event stream completed")
        self.dispose()
        self._subject.on_completed()
