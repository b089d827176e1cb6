import sys
from pathlib import Path
from urllib.parse import parse_qs

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from smarteru.client import Client  # noqa: E402

ACCOUNT_API = "account-key"
USER_API = "user-key"


def envelope(info="", result="Success", errors=()):
    """Build a SmarterU response body."""
    error_xml = "".join(
        f"<Error><ErrorID>{code}</ErrorID><ErrorMessage>{message}</ErrorMessage></Error>"
        for code, message in errors
    )
    return (
        f"<SmarterU><Result>{result}</Result><Info>{info}</Info>"
        f"<Errors>{error_xml}</Errors></SmarterU>"
    )


class FakeSmarterU:
    """Stands in for the SmarterU endpoint and records every request."""

    def __init__(self):
        self.body = envelope()
        self.status_code = 200
        self.requests = []

    def respond(self, body, status_code=200):
        self.body = body
        self.status_code = status_code

    def handler(self, request):
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    def package(self, index=-1):
        form = parse_qs(self.requests[index].content.decode())
        return form["Package"][0]


@pytest.fixture
def api():
    return FakeSmarterU()


@pytest.fixture
def client(api):
    http_client = httpx.Client(transport=httpx.MockTransport(api.handler))
    with Client(ACCOUNT_API, USER_API, http_client=http_client) as smarteru:
        yield smarteru
    http_client.close()
