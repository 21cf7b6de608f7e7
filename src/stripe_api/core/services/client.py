"""`StripeClient`: facade over the generic executor.

Bundles a transport, a credential provider and the settings-derived options
(base URL, raw response hook) so call sites only deal with request values.
The client holds no per-request state; any number of `send` calls may be in
flight at once.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from stripe_api.core.config import AppSettings
from stripe_api.core.domain.listing import ListObject
from stripe_api.core.interfaces.credentials import CredentialProvider
from stripe_api.core.interfaces.request import StripeRequest
from stripe_api.core.interfaces.transport import TransportExecutor
from stripe_api.core.requests import CollectionListRequest, ListRequest
from stripe_api.core.services import pagination
from stripe_api.core.services.executor import RawResponseHook, execute, log_raw_response

ResponseT = TypeVar("ResponseT")
ItemT = TypeVar("ItemT")


class StripeClient:
    def __init__(
        self,
        *,
        transport: TransportExecutor,
        credentials: CredentialProvider,
        settings: AppSettings | None = None,
        on_raw_response: RawResponseHook | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport
        self._credentials = credentials
        if on_raw_response is None and self._settings.log_raw_responses:
            on_raw_response = log_raw_response
        self._on_raw_response = on_raw_response

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> "StripeClient":
        """Client with the default httpx transport and settings-backed credentials."""

        from stripe_api.adapters.credentials import SettingsCredentials
        from stripe_api.adapters.http_client import HttpxTransport

        settings = settings or AppSettings()
        return cls(
            transport=HttpxTransport(settings),
            credentials=SettingsCredentials(settings),
            settings=settings,
        )

    @property
    def settings(self) -> AppSettings:
        return self._settings

    async def send(self, request: StripeRequest[ResponseT]) -> ResponseT:
        return await execute(
            request,
            transport=self._transport,
            credentials=self._credentials,
            base_url=self._settings.api_base_url,
            on_raw_response=self._on_raw_response,
        )

    async def fetch_first_page(self, request: ListRequest[ItemT]) -> ListObject[ItemT]:
        return await pagination.fetch_first_page(self.send, request)

    async def fetch_next_page(self, current: ListObject[ItemT]) -> ListObject[ItemT]:
        return await pagination.fetch_next_page(self.send, current)

    async def list(
        self,
        path: str,
        item_type: type[ItemT],
        filters: BaseModel | Mapping[str, Any] | None = None,
    ) -> ListObject[ItemT]:
        """First page of the collection at `path` with the given filters."""

        request = CollectionListRequest(collection=path, element=item_type, params=filters)
        return await self.fetch_first_page(request)

    def iterate(self, request: ListRequest[ItemT], *, max_pages: int | None = None) -> AsyncIterator[ItemT]:
        return pagination.iterate_items(self.send, request, max_pages=max_pages)

    def iterate_pages(
        self,
        request: ListRequest[ItemT],
        *,
        max_pages: int | None = None,
    ) -> AsyncIterator[ListObject[ItemT]]:
        return pagination.iterate_pages(self.send, request, max_pages=max_pages)

    async def aclose(self) -> None:
        close = getattr(self._transport, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "StripeClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
