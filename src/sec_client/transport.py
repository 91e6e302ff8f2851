"""HTTP transports the client sends its GET requests through.

Two implementations share one ``Transport`` protocol:

``AsyncHttpTransport``
    ``httpx.AsyncClient`` on the caller's event loop. Single-threaded and
    cooperative; suits hosts that run everything on one loop.

``ThreadedHttpTransport``
    a blocking ``httpx.Client`` driven from a thread pool, for hosts that
    already spread work across OS threads.

The client picks one at construction time via ``make_transport``.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Protocol

import httpx

from sec_client.errors import NetworkError, RequestError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass
class HttpResponse:
    """Status, lower-cased headers and raw body of a completed exchange."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "HttpResponse":
        return cls(
            status=response.status_code,
            headers={k.lower(): v for k, v in response.headers.items()},
            body=response.content,
        )


class Transport(Protocol):
    async def send(self, url: str, headers: dict[str, str]) -> HttpResponse: ...

    async def aclose(self) -> None: ...


def _client_options(timeout, verify_ssl):
    # trust_env picks up HTTP_PROXY / HTTPS_PROXY / NO_PROXY.
    return {
        "timeout": httpx.Timeout(timeout),
        "verify": verify_ssl,
        "trust_env": True,
        "follow_redirects": True,
    }


def _translate(url, exc):
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol, UnicodeEncodeError)):
        return RequestError(f"Cannot send request to {url}: {exc}")
    return NetworkError(f"{type(exc).__name__} while requesting {url}: {exc}")


class AsyncHttpTransport:
    def __init__(self, timeout: float = DEFAULT_TIMEOUT, verify_ssl: bool = True, client: httpx.AsyncClient | None = None):
        self._client = client or httpx.AsyncClient(**_client_options(timeout, verify_ssl))

    async def send(self, url: str, headers: dict[str, str]) -> HttpResponse:
        try:
            response = await self._client.get(url, headers=headers)
        except (httpx.RequestError, httpx.InvalidURL, UnicodeEncodeError) as e:
            raise _translate(url, e) from e
        return HttpResponse.from_httpx(response)

    async def aclose(self) -> None:
        await self._client.aclose()


class ThreadedHttpTransport:
    """Runs blocking ``httpx.Client`` requests on a worker pool."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, verify_ssl: bool = True, max_workers: int = 4, client: httpx.Client | None = None):
        self._client = client or httpx.Client(**_client_options(timeout, verify_ssl))
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="sec-http")

    def _send_blocking(self, url, headers):
        try:
            response = self._client.get(url, headers=headers)
        except (httpx.RequestError, httpx.InvalidURL, UnicodeEncodeError) as e:
            raise _translate(url, e) from e
        return HttpResponse.from_httpx(response)

    async def send(self, url: str, headers: dict[str, str]) -> HttpResponse:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self._send_blocking, url, headers)

    async def aclose(self) -> None:
        self._executor.shutdown(wait=True)
        self._client.close()


def make_transport(config) -> Transport:
    """Build the transport named by ``config.transport``."""
    if config.transport == "threaded":
        logger.debug("Using threaded HTTP transport")
        return ThreadedHttpTransport(timeout=config.timeout, verify_ssl=config.verify_ssl)
    if config.transport == "async":
        return AsyncHttpTransport(timeout=config.timeout, verify_ssl=config.verify_ssl)
    raise ValueError(f"Unknown transport {config.transport!r}")
