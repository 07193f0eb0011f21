"""
Artwork lifecycle: mint, burn and transfer
"""

from artgraph.commands.accounts import resolve_account
from artgraph.commands.events import EventArgs, EventHandler
from artgraph.commands.metadata.read_artwork_metadata import (
    ReadArtworkMetadata,
    enrich_artwork,
)
from artgraph.data.account import TAccount
from artgraph.data.artwork import TArtwork
from artgraph.data.store import EntityStore
from artgraph.domain.artwork import DEFAULT_ARTWORK_VERSION, MetadataUnavailable
from artgraph.domain.events import Transfer
from artgraph.ethereum.contract import TokenUriReader
from artgraph.ethereum.model import is_zero_address


class HandleTransfer(EventHandler[Transfer]):
    """
    | sender | recipient | action                                                       |
    |--------|-----------|--------------------------------------------------------------|
    | zero   | *         | mint: create the artwork once, owned by its creator          |
    | *      | zero      | burn: soft delete, ownership and sale fields are left as is  |
    | *      | *         | transfer: new owner, taken off sale                          |

    Burns and transfers for unknown artworks are logged and skipped.
    """

    def __init__(
        self,
        token_uri_reader: TokenUriReader,
        read_metadata: ReadArtworkMetadata,
        artwork_version: str = DEFAULT_ARTWORK_VERSION,
    ):
        super().__init__(artwork_version)
        self._token_uri_reader = token_uri_reader
        self._read_metadata = read_metadata

    def __call__(self, args: EventArgs[Transfer]):
        store, event = args.store, args.event
        recipient = resolve_account(store, event.recipient)

        if is_zero_address(event.sender):
            self.__mint(store, event, recipient)
            return

        artwork = self.load_artwork(store, event.token_id)
        if artwork is None:
            return

        if is_zero_address(event.recipient):
            artwork.burn(event.context.block_timestamp)
            self._logger.debug("burned: %s", artwork.id)
        else:
            artwork.owner_id = recipient.id
            artwork.modified = event.context.block_timestamp
            artwork.on_sale = False
            artwork.sale_price = None
            self._logger.debug("transferred: %s -> %s", artwork.id, recipient.id)

        store.save(artwork)

    def __mint(self, store: EntityStore, event: Transfer, creator: TAccount):
        key = self.artwork_id(event.token_id)
        if store.load(TArtwork, key) is not None:
            self._logger.warning("Artwork #%s is already minted [%s]", event.token_id, key)
            return

        artwork = TArtwork(
            id=key,
            token_id=event.token_id,
            version=self._artwork_version,
            creator_id=creator.id,
            owner_id=creator.id,
            created=event.context.block_timestamp,
            on_sale=False,
            descriptor_uri=self.__token_uri(event),
        )

        result = enrich_artwork(artwork, self._read_metadata)
        if isinstance(result, MetadataUnavailable):
            self._logger.info(
                "Artwork #%s metadata unavailable: %s", event.token_id, result.reason
            )

        store.save(artwork)
        self._logger.debug("minted: %s", artwork.id)

    def __token_uri(self, event: Transfer) -> str | None:
        try:
            return self._token_uri_reader.token_uri(
                event.context.contract_address, event.token_id
            )
        except Exception as err:  # pylint: disable=broad-exception-caught
            self._logger.error(
                "tokenURI(%s) call failed on contract %s: %s",
                event.token_id,
                event.context.contract_address,
                err,
            )
            return None
