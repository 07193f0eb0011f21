import json
import unittest

from artgraph.commands.metadata.read_artwork_metadata import (
    ReadArtworkMetadata,
    enrich_artwork,
)
from artgraph.data.artwork import TArtwork
from artgraph.domain.artwork import (
    ArtworkMetadata,
    MetadataFound,
    MetadataUnavailable,
    MetadataUnavailableReason,
)
from artgraph.ipfs.client import IpfsFetchError
from tests.test_support import ALICE, DESCRIPTOR_HASH, IMAGE_HASH, StubFetcher

DESCRIPTOR_URI = f"ipfs://ipfs/{DESCRIPTOR_HASH}"


def new_artwork(descriptor_uri: str | None = DESCRIPTOR_URI) -> TArtwork:
    return TArtwork(
        id="V1-7",
        token_id=7,
        version="V1",
        creator_id=ALICE,
        owner_id=ALICE,
        created=1_600_000_000,
        descriptor_uri=descriptor_uri,
    )


class ReadArtworkMetadataTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.fetcher = StubFetcher()
        self.read_metadata = ReadArtworkMetadata(self.fetcher)

    def read(self, document) -> MetadataFound | MetadataUnavailable:
        self.fetcher.content[DESCRIPTOR_HASH] = (
            document if isinstance(document, (bytes, Exception)) else json.dumps(document).encode()
        )
        result = self.read_metadata(DESCRIPTOR_URI)
        self.assertEqual(DESCRIPTOR_HASH, result.content_hash)
        return result.result

    def test_all_fields(self):
        result = self.read(
            {
                "name": "Sunflowers",
                "description": "still life",
                "yearCreated": "1888",
                "createdBy": "Vincent",
                "image": f"https://ipfs.io/ipfs/{IMAGE_HASH}",
                "tags": ["painting", "flowers"],
            }
        )
        self.assertEqual(
            MetadataFound(
                ArtworkMetadata(
                    name="Sunflowers",
                    description="still life",
                    year_created="1888",
                    created_by="Vincent",
                    image_uri=f"https://ipfs.io/ipfs/{IMAGE_HASH}",
                    image_hash=IMAGE_HASH,
                    tags=["painting", "flowers"],
                )
            ),
            result,
        )

    def test_absent_fields_are_not_set(self):
        result = self.read({"name": "Sunflowers"})
        self.assertEqual(MetadataFound(ArtworkMetadata(name="Sunflowers")), result)

    def test_image_without_content_hash(self):
        result = self.read({"image": "https://example.com/7.png"})
        self.assertEqual(
            MetadataFound(ArtworkMetadata(image_uri="https://example.com/7.png")),
            result,
        )

    def test_non_string_values(self):
        result = self.read({"yearCreated": 1888, "tags": ["a", 1], "name": None})
        self.assertEqual(
            MetadataFound(ArtworkMetadata(name="null", year_created="1888", tags=["a", "1"])),
            result,
        )

    def test_tags_that_are_not_a_list(self):
        result = self.read({"tags": "painting"})
        self.assertEqual(MetadataFound(ArtworkMetadata()), result)

    def test_no_content_hash(self):
        result = self.read_metadata("https://example.com/metadata/7.json")
        self.assertIsNone(result.content_hash)
        self.assertEqual(
            MetadataUnavailable(MetadataUnavailableReason.NO_CONTENT_HASH), result.result
        )
        self.assertEqual([], self.fetcher.requests)

    def test_not_found(self):
        result = self.read_metadata(DESCRIPTOR_URI)
        self.assertEqual(DESCRIPTOR_HASH, result.content_hash)
        self.assertEqual(MetadataUnavailable(MetadataUnavailableReason.NOT_FOUND), result.result)

    def test_fetch_failed(self):
        with self.assertLogs("ReadArtworkMetadata", level="WARNING"):
            result = self.read(IpfsFetchError(DESCRIPTOR_HASH, "connection refused"))
        self.assertIsInstance(result, MetadataUnavailable)
        self.assertEqual(MetadataUnavailableReason.FETCH_FAILED, result.reason)
        self.assertIn("connection refused", result.detail)

    def test_invalid_json(self):
        with self.assertLogs("ReadArtworkMetadata", level="ERROR"):
            result = self.read(b"{'name': 'not json'}")
        self.assertEqual(MetadataUnavailableReason.INVALID_JSON, result.reason)

    def test_invalid_utf8(self):
        result = self.read(b"\xff\xfe\x00")
        self.assertEqual(MetadataUnavailableReason.INVALID_JSON, result.reason)

    def test_not_an_object(self):
        for document in [["name"], "name", 7, None]:
            with self.subTest(document=document):
                result = self.read(document)
                self.assertEqual(MetadataUnavailableReason.NOT_AN_OBJECT, result.reason)


class EnrichArtworkTestCase(unittest.TestCase):
    def test_enrich(self):
        fetcher = StubFetcher({DESCRIPTOR_HASH: json.dumps({"name": "Sunflowers"}).encode()})
        artwork = new_artwork()
        result = enrich_artwork(artwork, ReadArtworkMetadata(fetcher))

        self.assertIsInstance(result, MetadataFound)
        self.assertEqual(DESCRIPTOR_HASH, artwork.descriptor_hash)
        self.assertEqual("Sunflowers", artwork.name)
        self.assertIsNone(artwork.description)

    def test_descriptor_hash_is_set_when_metadata_is_unavailable(self):
        artwork = new_artwork()
        result = enrich_artwork(artwork, ReadArtworkMetadata(StubFetcher()))

        self.assertIsInstance(result, MetadataUnavailable)
        self.assertEqual(DESCRIPTOR_HASH, artwork.descriptor_hash)
        self.assertIsNone(artwork.name)

    def test_artwork_is_unchanged_without_content_hash(self):
        artwork = new_artwork("https://example.com/metadata/7.json")
        enrich_artwork(artwork, ReadArtworkMetadata(StubFetcher()))
        self.assertEqual(new_artwork("https://example.com/metadata/7.json"), artwork)


if __name__ == "__main__":
    unittest.main()
