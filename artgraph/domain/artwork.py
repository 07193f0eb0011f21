"""
Artwork domain model
"""

from dataclasses import dataclass, field
from enum import StrEnum

from artgraph.ethereum.model import Address, BlockTimestamp, TokenId

ArtworkId = str
BidLogId = str
SaleLogId = str

DEFAULT_ARTWORK_VERSION = "V1"


def artwork_id(token_id: TokenId, version: str = DEFAULT_ARTWORK_VERSION) -> ArtworkId:
    """
    Artwork keys are version prefixed, e.g. "V1-7", which leaves room to index a future contract version
    side by side.
    """
    return f"{version}-{token_id}"


def bid_log_id(token_id: TokenId, bidder: Address) -> BidLogId:
    """
    At most one bid per (token, bidder) can be tracked at a time.
    """
    return f"{token_id}-{bidder}"


def sale_log_id(
    token_id: TokenId, buyer: Address, seller: Address, timestamp: BlockTimestamp
) -> SaleLogId:
    return f"{token_id}-{buyer}-{seller}-{timestamp}"


@dataclass(frozen=True, slots=True)
class Active:
    """
    Artwork has been minted and not burned
    """


@dataclass(frozen=True, slots=True)
class Burned:
    """
    Artwork was burned at the specified block timestamp. Burned artworks are kept, i.e., soft deleted.
    """

    at: BlockTimestamp


ArtworkLifecycle = Active | Burned


@dataclass(slots=True)
class ArtworkMetadata:
    """
    Fields parsed from the artwork descriptor document.

    Fields that are not present in the document are None.
    """

    name: str | None = None
    description: str | None = None
    year_created: str | None = None
    created_by: str | None = None
    image_uri: str | None = None
    image_hash: str | None = None
    tags: list[str] | None = field(default=None)


class MetadataUnavailableReason(StrEnum):
    """
    Why the descriptor document could not be used
    """

    # descriptor URI is not set or does not reference IPFS content
    NO_CONTENT_HASH = "no_content_hash"
    NOT_FOUND = "not_found"
    FETCH_FAILED = "fetch_failed"
    INVALID_JSON = "invalid_json"
    # valid JSON, but not a JSON object
    NOT_AN_OBJECT = "not_an_object"


@dataclass(frozen=True, slots=True)
class MetadataFound:
    metadata: ArtworkMetadata


@dataclass(frozen=True, slots=True)
class MetadataUnavailable:
    reason: MetadataUnavailableReason
    detail: str | None = None


MetadataResult = MetadataFound | MetadataUnavailable
