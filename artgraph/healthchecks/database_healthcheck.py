"""
Entity database healthcheck
"""
from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from artgraph.core.health_check import HealthCheck, HealthCheckImpact
from artgraph.data.account import TAccount
from artgraph.data.artwork import TArtwork
from artgraph.data.bid_log import TBidLog
from artgraph.data.sale_log import TSaleLog


class DatabaseHealthCheck(HealthCheck):
    def __init__(self, session_factory: sessionmaker):
        super().__init__(
            name="entity_database",
            impact=HealthCheckImpact.HIGH,
            description="Queries each of the entity tables",
            tags={"database"},
        )

        self.__session_factory = session_factory

    def execute(self):
        with self.__session_factory() as session:
            session.scalar(select(TAccount).limit(1))
            session.scalar(select(TArtwork).limit(1))
            session.scalar(select(TBidLog).limit(1))
            session.scalar(select(TSaleLog).limit(1))
