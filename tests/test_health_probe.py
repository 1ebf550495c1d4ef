import unittest

import httpx

from teachify_admin.exceptions import HealthCheckFailed
from teachify_admin.services.health_probe import check_health


def client_for(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestCheckHealth(unittest.TestCase):
    def test_returns_payload_when_ok(self):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json={"status": "OK", "message": "running"})

        payload = check_health("http://backend:5000/", client=client_for(handler))

        self.assertEqual(payload["message"], "running")
        self.assertEqual(seen, ["http://backend:5000/api/health"])

    def test_http_error_status(self):
        client = client_for(lambda request: httpx.Response(500, text="boom"))

        with self.assertRaises(HealthCheckFailed) as ctx:
            check_health("http://backend:5000", client=client)

        self.assertEqual(ctx.exception.status_code, 500)

    def test_unreachable_backend(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with self.assertRaises(HealthCheckFailed) as ctx:
            check_health("http://backend:5000", client=client_for(handler))

        self.assertIsNone(ctx.exception.status_code)

    def test_non_json_body(self):
        client = client_for(lambda request: httpx.Response(200, text="<html></html>"))

        with self.assertRaises(HealthCheckFailed):
            check_health("http://backend:5000", client=client)

    def test_non_object_json_body(self):
        client = client_for(lambda request: httpx.Response(200, json=[]))

        with self.assertRaises(HealthCheckFailed) as ctx:
            check_health("http://backend:5000", client=client)

        self.assertIn("expected a JSON object", str(ctx.exception))

    def test_unhealthy_status(self):
        client = client_for(lambda request: httpx.Response(200, json={"status": "DEGRADED"}))

        with self.assertRaises(HealthCheckFailed):
            check_health("http://backend:5000", client=client)


if __name__ == "__main__":
    unittest.main()
