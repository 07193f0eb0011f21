import unittest

import httpx

from artgraph.ipfs.client import IpfsFetchError, IpfsGatewayClient
from tests.test_support import DESCRIPTOR_HASH

GATEWAY_URL = "https://gateway.test"


def gateway_client(handler) -> IpfsGatewayClient:
    return IpfsGatewayClient(
        GATEWAY_URL,
        client=httpx.Client(base_url=GATEWAY_URL, transport=httpx.MockTransport(handler)),
    )


class IpfsGatewayClientTestCase(unittest.TestCase):
    def test_fetch(self):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, content=b'{"name": "Sunflowers"}')

        with gateway_client(handler) as client:
            self.assertEqual(b'{"name": "Sunflowers"}', client.fetch(DESCRIPTOR_HASH))

        self.assertEqual(1, len(requests))
        self.assertEqual(f"{GATEWAY_URL}/ipfs/{DESCRIPTOR_HASH}", str(requests[0].url))

    def test_not_found(self):
        with gateway_client(lambda request: httpx.Response(404)) as client:
            self.assertIsNone(client.fetch(DESCRIPTOR_HASH))

    def test_error_status(self):
        with gateway_client(lambda request: httpx.Response(502)) as client:
            with self.assertRaises(IpfsFetchError) as context:
                client.fetch(DESCRIPTOR_HASH)
        self.assertEqual(DESCRIPTOR_HASH, context.exception.content_hash)
        self.assertIsInstance(context.exception.__cause__, httpx.HTTPStatusError)

    def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        with gateway_client(handler) as client:
            with self.assertRaises(IpfsFetchError) as context:
                client.fetch(DESCRIPTOR_HASH)
        self.assertIn("timed out", str(context.exception))


if __name__ == "__main__":
    unittest.main()
