import unittest

import httpx

from moodjournal import remote
from moodjournal.errors import ConfigurationError, RemoteCallError
from helpers import RecordingTransport

URL = "https://journal.test/get"


class TestRequireEndpoint(unittest.TestCase):

    def test_returns_configured_url(self):
        self.assertEqual(remote.require_endpoint(URL, "JOURNAL_GET_URL"), URL)

    def test_missing_url_names_variable(self):
        with self.assertRaises(ConfigurationError) as ctx:
            remote.require_endpoint("", "JOURNAL_GET_URL")
        self.assertIn("JOURNAL_GET_URL", str(ctx.exception))


class TestCall(unittest.IsolatedAsyncioTestCase):

    async def _call(self, route, body=None, headers=None):
        transport = RecordingTransport({URL: route})
        async with transport.client() as client:
            result = await remote.call(URL, "POST", body, headers=headers, client=client)
        return result, transport

    async def test_missing_url_fails_before_io(self):
        transport = RecordingTransport()
        async with transport.client() as client:
            with self.assertRaises(ConfigurationError):
                await remote.call("", "POST", {"userId": "u1"}, client=client)
        self.assertEqual(transport.requests, [])

    async def test_sends_json_body_and_content_type(self):
        result, transport = await self._call((200, {"ok": True}), body={"userId": "u1"})
        self.assertEqual(result, {"ok": True})
        url, body, headers = transport.requests[0]
        self.assertEqual(body, {"userId": "u1"})
        self.assertEqual(headers["content-type"], "application/json")

    async def test_caller_headers_are_merged(self):
        _, transport = await self._call((200, {}), body={}, headers={"X-Trace": "abc"})
        headers = transport.requests[0][2]
        self.assertEqual(headers["x-trace"], "abc")
        self.assertEqual(headers["content-type"], "application/json")

    async def test_success_with_plain_text_returns_text(self):
        result, _ = await self._call((200, "Accepted, thanks"))
        self.assertEqual(result, "Accepted, thanks")

    async def test_success_with_empty_body_returns_none(self):
        result, _ = await self._call((202, None))
        self.assertIsNone(result)

    async def test_failure_uses_message_field(self):
        with self.assertRaises(RemoteCallError) as ctx:
            await self._call((500, {"message": "Cosmos write failed"}))
        self.assertEqual(str(ctx.exception), "Cosmos write failed")
        self.assertEqual(ctx.exception.status_code, 500)

    async def test_failure_without_message_uses_raw_text(self):
        with self.assertRaises(RemoteCallError) as ctx:
            await self._call((404, {"error": "nope"}))
        # raw JSON text, whatever separators the server used
        self.assertIn('"error"', str(ctx.exception))
        self.assertIn('"nope"', str(ctx.exception))
        self.assertEqual(ctx.exception.status_code, 404)

    async def test_failure_with_invalid_json_uses_raw_text(self):
        with self.assertRaises(RemoteCallError) as ctx:
            await self._call((400, "bad request <html>"))
        self.assertEqual(str(ctx.exception), "bad request <html>")

    async def test_failure_with_empty_body_uses_status(self):
        with self.assertRaises(RemoteCallError) as ctx:
            await self._call((502, None))
        self.assertEqual(str(ctx.exception), "Request failed: 502")

    async def test_failure_status_wins_over_valid_json(self):
        with self.assertRaises(RemoteCallError):
            await self._call((401, {"entries": []}))

    async def test_transport_error_is_wrapped(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with self.assertRaises(RemoteCallError) as ctx:
            await self._call(refuse)
        self.assertIn("connection refused", str(ctx.exception))
        self.assertIsNone(ctx.exception.status_code)

    async def test_failures_are_logged_at_debug_only(self):
        with self.assertLogs("moodjournal.remote", level="DEBUG") as logs:
            with self.assertRaises(RemoteCallError):
                await self._call((500, {"message": "Cosmos write failed"}))
        # the caller reports the failure, the adapter only traces it
        self.assertTrue(logs.records)
        self.assertTrue(all(r.levelname == "DEBUG" for r in logs.records))


if __name__ == "__main__":
    unittest.main()
