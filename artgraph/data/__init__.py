"""
Entity data model

Notes
-----
Data model class names are prefixed with a 'T', which identifies them as classes that map to database tables,
e.g. `TArtwork` is a data model class vs `ArtworkMetadata` which is a domain model class.

uint256 values (token IDs, wei amounts) do not fit into 64-bit integer columns, and are stored as decimal strings.
"""

from sqlalchemy import BigInteger, String, event, Engine
from sqlalchemy.orm import DeclarativeBase, MappedAsDataclass
from sqlalchemy.types import TypeDecorator

from artgraph.ethereum.model import Address, BlockTimestamp, TokenId, Wei, UINT256_MAX


class Uint256(TypeDecorator):
    """
    Stores uint256 values losslessly as decimal strings
    """

    # pylint: disable=too-many-ancestors

    impl = String(78)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = int(value)
        if value < 0 or value > UINT256_MAX:
            raise ValueError(f"value is out of uint256 range: {value}")
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return int(value)


class Base(MappedAsDataclass, DeclarativeBase):
    """
    Data model base class.

    All data model classes should extend Base.
    """

    # pylint: disable=too-few-public-methods

    type_annotation_map = {
        Address: String(42),
        TokenId: Uint256(),
        Wei: Uint256(),
        BlockTimestamp: BigInteger,
    }


@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, _connection_record):
    """
    Enables foreign keys in sqlite
    """
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
