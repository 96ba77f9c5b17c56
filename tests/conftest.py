"""Shared fixtures."""

import json

import pytest

from deskpro_gql.core.client import Client
from deskpro_gql.core.transport import TransportResponse


class FakeTransport:
    """Transport that records requests and replays queued responses."""

    def __init__(self):
        self.requests: list[dict] = []
        self._responses: list[TransportResponse] = []
        self.closed = False

    def respond(self, body, status_code: int = 200) -> "FakeTransport":
        """Queue a response. Non-string bodies are JSON encoded."""
        if not isinstance(body, str):
            body = json.dumps(body)
        self._responses.append(TransportResponse(status_code=status_code, body=body))
        return self

    def send(self, method, url, headers, body):
        self.requests.append({"method": method, "url": url, "headers": headers, "body": body})
        if not self._responses:
            return TransportResponse(status_code=200, body='{"data": {}}')
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]

    def close(self):
        self.closed = True

    @property
    def last_request(self) -> dict:
        return self.requests[-1]

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1]["body"])


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return Client("https://support.example.com/", transport)
