"""
IPFS gateway client
"""
from dataclasses import dataclass
from typing import Protocol

import httpx

from artgraph.core.logging import get_logger


class ContentFetcher(Protocol):
    """
    Retrieves content by its content address
    """

    def fetch(self, content_hash: str) -> bytes | None:
        """
        :return: None if the content was not found
        :exception Exception: if the content could not be retrieved
        """


@dataclass
class IpfsFetchError(Exception):
    """
    Raised when the gateway could not be reached or responded with an error
    """

    content_hash: str
    cause: Exception | str

    def __str__(self) -> str:
        return f"failed to fetch IPFS content [{self.content_hash}]: {self.cause}"


class IpfsGatewayClient:
    """
    Fetches IPFS content through an HTTP gateway: GET {gateway_url}/ipfs/{content_hash}

    The underlying httpx client is owned by this instance, unless it is passed in.
    """

    def __init__(
        self,
        gateway_url: str,
        timeout_seconds: float = 30.0,
        client: httpx.Client | None = None,
    ):
        self._client = client or httpx.Client(
            base_url=gateway_url,
            timeout=timeout_seconds,
            follow_redirects=True,
        )
        self._logger = get_logger(self)

    @property
    def http_client(self) -> httpx.Client:
        return self._client

    def fetch(self, content_hash: str) -> bytes | None:
        try:
            response = self._client.get(f"/ipfs/{content_hash}")
        except httpx.HTTPError as err:
            raise IpfsFetchError(content_hash, err) from err

        if response.status_code == httpx.codes.NOT_FOUND:
            self._logger.debug("content not found: %s", content_hash)
            return None

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as err:
            raise IpfsFetchError(content_hash, err) from err

        return response.content

    def close(self):
        self._client.close()

    def __enter__(self) -> "IpfsGatewayClient":
        return self

    def __exit__(self, *args):
        self.close()
