"""
SaleLog data model
"""

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from artgraph.data import Base
from artgraph.domain.artwork import ArtworkId, SaleLogId
from artgraph.ethereum.model import Address, BlockTimestamp, Wei


class TSaleLog(Base):
    """
    SaleLog database table model. Sale logs are immutable once created.
    """

    __tablename__ = "sale_log"

    # see `artgraph.domain.artwork.sale_log_id()`
    id: Mapped[SaleLogId] = mapped_column(primary_key=True)
    amount: Mapped[Wei] = mapped_column()
    buyer_id: Mapped[Address] = mapped_column(ForeignKey("account.id"), index=True)
    seller_id: Mapped[Address] = mapped_column(ForeignKey("account.id"), index=True)
    item_id: Mapped[ArtworkId] = mapped_column(ForeignKey("artwork.id"), index=True)
    timestamp: Mapped[BlockTimestamp] = mapped_column(index=True)
