"""
Artwork data model
"""

from sqlalchemy import ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column

from artgraph.data import Base
from artgraph.domain.artwork import (
    Active,
    ArtworkId,
    ArtworkLifecycle,
    ArtworkMetadata,
    BidLogId,
    Burned,
    SaleLogId,
)
from artgraph.ethereum.model import Address, BlockTimestamp, TokenId, Wei


class TArtwork(Base):
    """
    Artwork database table model

    Notes
    -----
    - created exactly once, when the token is minted
    - burned artworks are soft deleted: `removed` is set, and the record is kept
    - `bids` and `sales` are append-only, ordered lists of log IDs. JSON columns are not mutation tracked, thus
      the lists must be reassigned, not appended to in place
    """

    # pylint: disable=too-many-instance-attributes

    __tablename__ = "artwork"

    id: Mapped[ArtworkId] = mapped_column(primary_key=True)
    token_id: Mapped[TokenId] = mapped_column(index=True)
    version: Mapped[str] = mapped_column()

    creator_id: Mapped[Address] = mapped_column(ForeignKey("account.id"), index=True)
    owner_id: Mapped[Address] = mapped_column(ForeignKey("account.id"), index=True)

    created: Mapped[BlockTimestamp] = mapped_column(index=True)
    on_sale: Mapped[bool] = mapped_column(index=True, default=False)

    descriptor_uri: Mapped[str | None] = mapped_column(default=None)
    descriptor_hash: Mapped[str | None] = mapped_column(default=None)

    # descriptor document fields
    name: Mapped[str | None] = mapped_column(default=None)
    description: Mapped[str | None] = mapped_column(default=None)
    year_created: Mapped[str | None] = mapped_column(default=None)
    created_by: Mapped[str | None] = mapped_column(default=None)
    image_uri: Mapped[str | None] = mapped_column(default=None)
    image_hash: Mapped[str | None] = mapped_column(default=None)
    tags: Mapped[list[str] | None] = mapped_column(JSON, default=None)

    sale_price: Mapped[Wei | None] = mapped_column(default=None)
    last_sold_price: Mapped[Wei | None] = mapped_column(default=None)

    current_bid_id: Mapped[BidLogId | None] = mapped_column(default=None)
    bids: Mapped[list[BidLogId]] = mapped_column(JSON, default_factory=list)
    sales: Mapped[list[SaleLogId]] = mapped_column(JSON, default_factory=list)

    modified: Mapped[BlockTimestamp | None] = mapped_column(default=None)
    removed: Mapped[BlockTimestamp | None] = mapped_column(default=None)

    @property
    def lifecycle(self) -> ArtworkLifecycle:
        if self.removed is None:
            return Active()
        return Burned(self.removed)

    def burn(self, timestamp: BlockTimestamp):
        """
        Soft deletes the artwork. Ownership and sale fields are kept as the last known state.
        """
        self.removed = timestamp

    def set_metadata(self, metadata: ArtworkMetadata):
        """
        Copies the fields that are set. Fields that are None are left as is.
        """
        for field_name in (
            "name",
            "description",
            "year_created",
            "created_by",
            "image_uri",
            "image_hash",
            "tags",
        ):
            value = getattr(metadata, field_name)
            if value is not None:
                setattr(self, field_name, value)

    def append_bid(self, bid_id: BidLogId):
        """
        A bid that is already the most recent entry is not appended again.
        """
        if self.bids and self.bids[-1] == bid_id:
            return
        self.bids = [*self.bids, bid_id]

    def append_sale(self, sale_id: SaleLogId):
        """
        Sale log IDs are unique per sale. Thus, a sale that is already listed is not appended again.
        """
        if sale_id in self.sales:
            return
        self.sales = [*self.sales, sale_id]
