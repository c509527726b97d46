"""In-memory transport and fixed values shared by the client tests."""
import base64

from gdax_gateway.transport import Transport

FIXED_TS = 1500000000
SECRET = base64.b64encode(b"super-secret-key-bytes").decode()


class FakeTransport(Transport):
    """Records every request and replays queued (status, body) responses."""

    def __init__(self, responses=None):
        self.calls = []
        self.responses = list(responses or [])
        self.closed = False

    def queue(self, status, body):
        if isinstance(body, str):
            body = body.encode()
        self.responses.append((status, body))

    def fail(self, exc):
        self.responses.append(exc)

    def execute(self, method, url, headers, body=""):
        self.calls.append({"method": method, "url": url,
                           "headers": dict(headers), "body": body})
        if not self.responses:
            raise AssertionError(f"unexpected request {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True

    @property
    def last(self):
        return self.calls[-1]
