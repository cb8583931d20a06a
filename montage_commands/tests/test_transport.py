from __future__ import annotations

import unittest

import httpx

from montage_commands.errors import EmptyResponseError, TransportError
from montage_commands.transport import HttpTransport
from montage_commands.tests.test_helpers import refusing_transport


def _request() -> httpx.Request:
    return httpx.Request("POST", "http://localhost:4774/graphql", content=b"{}")


def _replying(status_code: int, body: str) -> HttpTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=body)

    return HttpTransport(transport=httpx.MockTransport(handler))


class TestHttpTransport(unittest.IsolatedAsyncioTestCase):
    async def test_returns_body(self) -> None:
        body = await _replying(200, '{"data": {}}').send(_request())

        self.assertEqual(body, '{"data": {}}')

    async def test_connection_failure_is_transport_error(self) -> None:
        with self.assertRaises(TransportError) as ctx:
            await refusing_transport().send(_request(), failure_title="Problem starting session in Montage")

        self.assertEqual(ctx.exception.title, "Problem starting session in Montage")
        self.assertIsInstance(ctx.exception.__cause__, httpx.ConnectError)

    async def test_empty_success_body_is_empty_response(self) -> None:
        with self.assertRaises(EmptyResponseError):
            await _replying(200, "").send(_request())

    async def test_error_status_without_body_is_transport_error(self) -> None:
        with self.assertRaises(TransportError) as ctx:
            await _replying(502, "").send(_request())

        self.assertIn("502", str(ctx.exception))

    async def test_error_status_with_body_is_passed_through(self) -> None:
        body = '{"errors": [{"message": "bad duration"}]}'

        self.assertEqual(await _replying(400, body).send(_request()), body)


if __name__ == "__main__":
    unittest.main()
