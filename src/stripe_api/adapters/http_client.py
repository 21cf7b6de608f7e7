"""Wrapper de httpx.

- Estandariza timeouts y headers comunes para todas las llamadas.
- `HttpxTransport` implementa `TransportExecutor`: devuelve `(status, bytes)`
  y traduce los fallos de red de httpx a `TransportFailure`.
- Para tests se puede inyectar un `httpx.AsyncClient` con `MockTransport`.
"""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from stripe_api.core.config import AppSettings
from stripe_api.core.errors import TransportFailure


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros (timeout, UA, Accept JSON)."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """Ejecutor de transporte sobre un `httpx.AsyncClient` compartido."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or build_async_client(settings)

    async def execute(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> tuple[int, bytes]:
        try:
            response = await self._client.request(method, url, headers=dict(headers), content=body)
        except httpx.HTTPError as exc:
            raise TransportFailure(f"{method} {url} failed: {exc}", method=method, url=url) from exc
        return response.status_code, response.content

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
