import tempfile
import unittest
from pathlib import Path

from artgraph.core.config import ConfigError, IndexerConfig

CONFIG = """
[database]
url = "sqlite:///artgraph.db"

[ipfs]
gateway_url = "https://ipfs.io"
timeout_seconds = 10

[ethereum]
rpc_url = "http://127.0.0.1:8545"

[indexer]
artwork_version = "V2"
log_level = "INFO"
"""


class IndexerConfigTestCase(unittest.TestCase):
    def write_config(self, content: str) -> Path:
        directory = tempfile.TemporaryDirectory()
        self.addCleanup(directory.cleanup)
        file = Path(directory.name) / "artgraph.toml"
        file.write_text(content, encoding="utf-8")
        return file

    def test_from_config_file(self):
        config = IndexerConfig.from_config_file(self.write_config(CONFIG))
        self.assertEqual(
            IndexerConfig(
                database_url="sqlite:///artgraph.db",
                ipfs_gateway_url="https://ipfs.io",
                ethereum_rpc_url="http://127.0.0.1:8545",
                ipfs_timeout_seconds=10.0,
                artwork_version="V2",
                log_level="INFO",
            ),
            config,
        )

    def test_defaults(self):
        config = IndexerConfig.from_dict(
            {
                "database": {"url": "sqlite://"},
                "ipfs": {"gateway_url": "https://ipfs.io"},
                "ethereum": {"rpc_url": "http://127.0.0.1:8545"},
            }
        )
        self.assertEqual(30.0, config.ipfs_timeout_seconds)
        self.assertEqual("V1", config.artwork_version)
        self.assertEqual("WARNING", config.log_level)

    def test_missing_setting(self):
        with self.assertRaises(ConfigError) as context:
            IndexerConfig.from_dict({"database": {"url": "sqlite://"}})
        self.assertIn("[ipfs] gateway_url", str(context.exception))

    def test_invalid_timeout(self):
        with self.assertRaises(ConfigError):
            IndexerConfig.from_dict(
                {
                    "database": {"url": "sqlite://"},
                    "ipfs": {"gateway_url": "https://ipfs.io", "timeout_seconds": 0},
                    "ethereum": {"rpc_url": "http://127.0.0.1:8545"},
                }
            )

    def test_invalid_toml(self):
        with self.assertRaises(ConfigError):
            IndexerConfig.from_config_file(self.write_config("[database"))


if __name__ == "__main__":
    unittest.main()
