"""
Provides a command that retrieves and parses the artwork descriptor document.
"""
import json
from dataclasses import dataclass
from typing import Any

from artgraph.commands.metadata import extract_content_hash
from artgraph.core.command import Command
from artgraph.data.artwork import TArtwork
from artgraph.domain.artwork import (
    ArtworkMetadata,
    MetadataFound,
    MetadataResult,
    MetadataUnavailable,
    MetadataUnavailableReason,
)
from artgraph.ipfs.client import ContentFetcher


@dataclass(slots=True)
class ReadArtworkMetadataResult:
    """
    ReadArtworkMetadataResult
    """

    # None if the descriptor URI does not reference IPFS content
    content_hash: str | None
    result: MetadataResult


def to_string(value: Any) -> str:
    """
    JSON strings are used as is, any other JSON value is serialized
    """
    if isinstance(value, str):
        return value
    return json.dumps(value)


def parse_metadata(data: dict[str, Any]) -> ArtworkMetadata:
    """
    Copies the fields that are present in the descriptor document. Absent fields are left unset.
    """
    metadata = ArtworkMetadata()

    if "name" in data:
        metadata.name = to_string(data["name"])
    if "description" in data:
        metadata.description = to_string(data["description"])
    if "yearCreated" in data:
        metadata.year_created = to_string(data["yearCreated"])
    if "createdBy" in data:
        metadata.created_by = to_string(data["createdBy"])
    if "image" in data:
        metadata.image_uri = to_string(data["image"])
        metadata.image_hash = extract_content_hash(metadata.image_uri)
    if isinstance(data.get("tags"), list):
        metadata.tags = [to_string(tag) for tag in data["tags"]]

    return metadata


class ReadArtworkMetadata(Command[str | None, ReadArtworkMetadataResult]):
    """
    Reads the artwork descriptor document referenced by the descriptor URI.

    Never raises: a missing hash, fetch failure, invalid JSON or unexpected document shape are reported as
    `MetadataUnavailable`.
    """

    def __init__(self, fetcher: ContentFetcher):
        self._fetcher = fetcher
        self._logger = super().get_logger()

    def __call__(self, descriptor_uri: str | None) -> ReadArtworkMetadataResult:
        content_hash = extract_content_hash(descriptor_uri)
        if content_hash is None:
            return ReadArtworkMetadataResult(
                content_hash=None,
                result=MetadataUnavailable(MetadataUnavailableReason.NO_CONTENT_HASH),
            )

        return ReadArtworkMetadataResult(
            content_hash=content_hash,
            result=self.__read(content_hash),
        )

    def __read(self, content_hash: str) -> MetadataResult:
        try:
            raw = self._fetcher.fetch(content_hash)
        except Exception as err:  # pylint: disable=broad-exception-caught
            self._logger.warning("failed to fetch descriptor [%s]: %s", content_hash, err)
            return MetadataUnavailable(MetadataUnavailableReason.FETCH_FAILED, str(err))

        if raw is None:
            self._logger.warning("descriptor not found: %s", content_hash)
            return MetadataUnavailable(MetadataUnavailableReason.NOT_FOUND)

        try:
            data = json.loads(raw)
        except ValueError as err:
            self._logger.error("ReadMetaData Error [%s]: %s", content_hash, err)
            return MetadataUnavailable(MetadataUnavailableReason.INVALID_JSON, str(err))

        if not isinstance(data, dict):
            return MetadataUnavailable(
                MetadataUnavailableReason.NOT_AN_OBJECT, type(data).__name__
            )

        return MetadataFound(parse_metadata(data))


def enrich_artwork(artwork: TArtwork, read_metadata: ReadArtworkMetadata) -> MetadataResult:
    """
    Sets `descriptor_hash` whenever the descriptor URI references IPFS content, and copies the descriptor
    document fields when the document was read.
    """
    read_result = read_metadata(artwork.descriptor_uri)
    if read_result.content_hash is not None:
        artwork.descriptor_hash = read_result.content_hash

    match read_result.result:
        case MetadataFound(metadata):
            artwork.set_metadata(metadata)

    return read_result.result
