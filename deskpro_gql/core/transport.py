"""HTTP transport used by the client.

The client only needs something that sends one request and returns the
status, headers and body. `HttpxTransport` is the implementation over httpx;
tests and applications may supply any object following `HTTPTransport`.
"""

from typing import Protocol, runtime_checkable

import httpx
from pydantic import BaseModel, Field


class TransportResponse(BaseModel):
    """Raw HTTP response handed back to the client."""
    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = ""


@runtime_checkable
class HTTPTransport(Protocol):
    """Protocol for HTTP transports.

    Implementations must return a response for every HTTP status and raise
    only for transport failures (connection, TLS, timeout).
    """

    def send(self, method: str, url: str, headers: dict[str, str], body: str) -> TransportResponse:
        ...


class HttpxTransport:
    """Transport backed by `httpx.Client`.

    Examples:
        transport = HttpxTransport(timeout=10.0)

        # Reuse a configured client (proxies, TLS, pooling)
        transport = HttpxTransport(client=httpx.Client(verify=False))
    """

    def __init__(self, client: httpx.Client | None = None, timeout: float = 30.0):
        """Initialize the transport.

        Args:
            client: Existing httpx client. The transport will not close it.
            timeout: Request timeout in seconds, used when creating a client
        """
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def send(self, method: str, url: str, headers: dict[str, str], body: str) -> TransportResponse:
        response = self._client.request(method, url, headers=headers, content=body.encode("utf-8"))
        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.text,
        )

    def close(self):
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info):
        self.close()
