"""
Event handlers

Each handler applies one event type to the entity store. Handlers load the entities they need by key, mutate
them, and write them back. Handlers are run one at a time, in event emission order.
"""
from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

from artgraph.core.command import Command
from artgraph.data.artwork import TArtwork
from artgraph.data.store import EntityStore
from artgraph.domain.artwork import DEFAULT_ARTWORK_VERSION, artwork_id
from artgraph.ethereum.model import TokenId

Event = TypeVar("Event")


@dataclass(slots=True)
class EventArgs(Generic[Event]):
    """
    The event to apply, and the store for the transaction it is applied in
    """

    store: EntityStore
    event: Event


class EventHandler(Command[EventArgs[Event], None], ABC):
    """
    Base class for event handlers
    """

    def __init__(self, artwork_version: str = DEFAULT_ARTWORK_VERSION):
        self._artwork_version = artwork_version
        self._logger = super().get_logger()

    def artwork_id(self, token_id: TokenId) -> str:
        return artwork_id(token_id, self._artwork_version)

    def load_artwork(self, store: EntityStore, token_id: TokenId) -> TArtwork | None:
        """
        Artworks are only created by a mint. Events for unknown tokens are expected, e.g., tokens that were
        minted before indexing started, and are logged and skipped.
        """
        key = self.artwork_id(token_id)
        artwork = store.load(TArtwork, key)
        if artwork is None:
            self._logger.warning("Artwork #%s does not exist [%s]", token_id, key)
        return artwork
