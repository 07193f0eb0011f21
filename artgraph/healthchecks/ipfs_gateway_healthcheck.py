"""
IPFS gateway healthcheck
"""
from dataclasses import dataclass

import httpx

from artgraph.core.health_check import (
    HealthCheck,
    HealthCheckImpact,
    RedHealthCheck,
    YellowHealthCheck,
)

# empty unixfs directory, which every gateway can serve
PROBE_CONTENT_HASH = "QmUNLLsPACCz1vLxQVkXqqLX5R1X345qqfHbsf67hvA3Nn"


@dataclass
class IpfsGatewayErrorStatus(YellowHealthCheck):
    """
    Indicates the gateway is reachable but responded with an error status.
    Descriptor documents may be missing from newly minted artworks while the gateway is failing.
    """

    status_code: int


@dataclass
class IpfsGatewayUnreachable(RedHealthCheck):
    """
    Indicates the gateway could not be reached
    """

    cause: str


class IpfsGatewayHealthCheck(HealthCheck):
    """
    Probes the IPFS gateway used to retrieve artwork descriptor documents
    """

    def __init__(self, client: httpx.Client):
        super().__init__(
            name="ipfs_gateway",
            impact=HealthCheckImpact.MEDIUM,
            description="Requests a well known IPFS object from the gateway",
            tags={"ipfs"},
        )

        self.__client = client

    def execute(self):
        try:
            response = self.__client.head(f"/ipfs/{PROBE_CONTENT_HASH}")
        except httpx.HTTPError as err:
            raise IpfsGatewayUnreachable(str(err)) from err

        if response.is_error:
            raise IpfsGatewayErrorStatus(response.status_code)
