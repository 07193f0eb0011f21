"""
Indexer configuration, loaded from a TOML file

Example
-------
::

    [database]
    url = "sqlite:///artgraph.db"

    [ipfs]
    gateway_url = "https://ipfs.io"
    timeout_seconds = 30

    [ethereum]
    rpc_url = "http://127.0.0.1:8545"

    [indexer]
    artwork_version = "V1"
    log_level = "INFO"
"""
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any


class ConfigError(Exception):
    """
    Raised when the config is missing a required setting or a setting is invalid
    """


@dataclass(slots=True)
class IndexerConfig:
    """
    IndexerConfig
    """

    # SQLAlchemy database URL
    database_url: str
    ipfs_gateway_url: str
    ethereum_rpc_url: str

    ipfs_timeout_seconds: float = 30.0
    # prefix used for Artwork keys, e.g. "V1-7"
    artwork_version: str = "V1"
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "IndexerConfig":
        """
        :param config: parsed TOML document
        """

        def required(section: str, key: str) -> Any:
            try:
                return config[section][key]
            except KeyError as err:
                raise ConfigError(f"missing required setting: [{section}] {key}") from err

        indexer = config.get("indexer", {})
        timeout = config.get("ipfs", {}).get("timeout_seconds", 30.0)
        if not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError(f"[ipfs] timeout_seconds must be a positive number: {timeout}")

        return cls(
            database_url=required("database", "url"),
            ipfs_gateway_url=required("ipfs", "gateway_url"),
            ethereum_rpc_url=required("ethereum", "rpc_url"),
            ipfs_timeout_seconds=float(timeout),
            artwork_version=indexer.get("artwork_version", "V1"),
            log_level=indexer.get("log_level", "WARNING"),
        )

    @classmethod
    def from_config_file(cls, file: Path) -> "IndexerConfig":
        """
        Loads the config from the specified TOML config file
        """
        with open(file, "rb") as config_file:
            try:
                config = tomllib.load(config_file)
            except tomllib.TOMLDecodeError as err:
                raise ConfigError(f"invalid TOML config file: {file}") from err
        return cls.from_dict(config)
