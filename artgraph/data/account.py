"""
Account data model
"""

from sqlalchemy import LargeBinary
from sqlalchemy.orm import Mapped, mapped_column

from artgraph.data import Base
from artgraph.ethereum.model import Address, address_bytes


class TAccount(Base):
    """
    Account database table model.

    Accounts are immutable once created and are never deleted.
    """

    __tablename__ = "account"

    # lower-case hex address
    id: Mapped[Address] = mapped_column(primary_key=True)
    # raw 20-byte address
    address: Mapped[bytes] = mapped_column(LargeBinary(20))

    @classmethod
    def create(cls, address: Address) -> "TAccount":
        return cls(id=address, address=address_bytes(address))
