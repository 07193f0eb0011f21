"""
BidLog data model
"""

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from artgraph.data import Base
from artgraph.domain.artwork import ArtworkId, BidLogId
from artgraph.ethereum.model import Address, BlockTimestamp, Wei


class TBidLog(Base):
    """
    BidLog database table model

    Lifecycle: open (resolved=False) -> accepted (resolved=True, is_accepted=True)
                                    -> cancelled (resolved=True, is_accepted=False)
    """

    __tablename__ = "bid_log"

    # see `artgraph.domain.artwork.bid_log_id()`
    id: Mapped[BidLogId] = mapped_column(primary_key=True)
    amount: Mapped[Wei] = mapped_column()
    bidder_id: Mapped[Address] = mapped_column(ForeignKey("account.id"), index=True)
    item_id: Mapped[ArtworkId] = mapped_column(ForeignKey("artwork.id"), index=True)
    timestamp: Mapped[BlockTimestamp] = mapped_column(index=True)
    resolved: Mapped[bool] = mapped_column(index=True, default=False)
    # only set when the bid is resolved
    is_accepted: Mapped[bool | None] = mapped_column(default=None)

    def accept(self):
        self.resolved = True
        self.is_accepted = True

    def cancel(self):
        self.resolved = True
        self.is_accepted = False
