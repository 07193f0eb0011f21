import unittest

from artgraph.commands.metadata import extract_content_hash
from tests.test_support import DESCRIPTOR_HASH


class ExtractContentHashTestCase(unittest.TestCase):
    def test_ipfs_uris(self):
        for uri in [
            f"ipfs://ipfs/{DESCRIPTOR_HASH}",
            f"ipfs://{DESCRIPTOR_HASH}",
            f"https://ipfs.io/ipfs/{DESCRIPTOR_HASH}",
            DESCRIPTOR_HASH,
        ]:
            with self.subTest(uri=uri):
                content_hash = extract_content_hash(uri)
                self.assertEqual(DESCRIPTOR_HASH, content_hash)
                self.assertEqual(46, len(content_hash))

    def test_uris_without_content_hash(self):
        for uri in [
            None,
            "",
            "https://example.com/metadata/7.json",
            # CIDv1
            "ipfs://bafybeigdyrzt5sfp7udm7hu76uh7y26nf3efuylqabf3oclgtqy55fbzdi",
            # hash is not the last path segment
            f"ipfs://ipfs/{DESCRIPTOR_HASH}/metadata.json",
            f"ipfs://ipfs/{DESCRIPTOR_HASH}/",
        ]:
            with self.subTest(uri=uri):
                self.assertIsNone(extract_content_hash(uri))


if __name__ == "__main__":
    unittest.main()
