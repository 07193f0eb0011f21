"""
Wires the indexer together from its config
"""
from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker

from artgraph.commands.events.bids import HandleAcceptBid, HandleBid, HandleCancelBid
from artgraph.commands.events.dispatcher import EventDispatcher
from artgraph.commands.events.sales import HandleSalePriceSet, HandleSold
from artgraph.commands.events.transfer import HandleTransfer
from artgraph.commands.metadata.read_artwork_metadata import ReadArtworkMetadata
from artgraph.core.config import IndexerConfig
from artgraph.core.health_check import HealthCheck
from artgraph.core.logging import configure_logging
from artgraph.data import Base
from artgraph.ethereum.contract import TokenUriReader, Web3TokenUriReader
from artgraph.healthchecks.database_healthcheck import DatabaseHealthCheck
from artgraph.healthchecks.ipfs_gateway_healthcheck import IpfsGatewayHealthCheck
from artgraph.ipfs.client import ContentFetcher, IpfsGatewayClient
from artgraph.services.event_stream_indexer import EventStreamIndexer


def create_dispatcher(
    session_factory: sessionmaker,
    fetcher: ContentFetcher,
    token_uri_reader: TokenUriReader,
    artwork_version: str,
) -> EventDispatcher:
    """
    Creates the dispatcher with its event handlers
    """
    return EventDispatcher(
        session_factory=session_factory,
        handle_transfer=HandleTransfer(
            token_uri_reader=token_uri_reader,
            read_metadata=ReadArtworkMetadata(fetcher),
            artwork_version=artwork_version,
        ),
        handle_bid=HandleBid(artwork_version),
        handle_accept_bid=HandleAcceptBid(artwork_version),
        handle_cancel_bid=HandleCancelBid(artwork_version),
        handle_sold=HandleSold(artwork_version),
        handle_sale_price_set=HandleSalePriceSet(artwork_version),
    )


class Indexer:
    """
    Indexer app
    """

    def __init__(
        self,
        config: IndexerConfig,
        engine: Engine,
        ipfs_client: IpfsGatewayClient,
        token_uri_reader: TokenUriReader,
    ):
        self.config = config
        self.engine = engine
        self.session_factory = sessionmaker(engine)
        self.ipfs_client = ipfs_client

        Base.metadata.create_all(engine)

        self.dispatcher = create_dispatcher(
            session_factory=self.session_factory,
            fetcher=ipfs_client,
            token_uri_reader=token_uri_reader,
            artwork_version=config.artwork_version,
        )
        self.stream_indexer = EventStreamIndexer(self.dispatcher)
        self.healthchecks: list[HealthCheck] = [
            DatabaseHealthCheck(self.session_factory),
            IpfsGatewayHealthCheck(ipfs_client.http_client),
        ]

    @classmethod
    def from_config(cls, config: IndexerConfig) -> "Indexer":
        configure_logging(level=config.log_level)
        return cls(
            config=config,
            engine=create_engine(config.database_url),
            ipfs_client=IpfsGatewayClient(
                gateway_url=config.ipfs_gateway_url,
                timeout_seconds=config.ipfs_timeout_seconds,
            ),
            token_uri_reader=Web3TokenUriReader.from_rpc_url(config.ethereum_rpc_url),
        )

    @classmethod
    def from_config_file(cls, file: Path) -> "Indexer":
        """
        Constructs a new indexer from the specified TOML config file
        """
        return cls.from_config(IndexerConfig.from_config_file(file))

    def close(self):
        self.stream_indexer.dispose()
        self.ipfs_client.close()
        self.engine.dispose()
