"""Cursor-based pagination over `ListObject` envelopes.

Every function takes a `send` coroutine (usually `StripeClient.send`) so the
paging logic stays independent from transport and credentials.

Known limitation: the cursor assumes the remote order is stable for a fixed
filter set. If the collection changes between fetches, items may be
duplicated or skipped.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any, Awaitable, Callable, TypeVar

from stripe_api.core.domain.listing import ListObject
from stripe_api.core.requests import CollectionListRequest, ListRequest

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")

Sender = Callable[[Any], Awaitable[Any]]

_API_VERSION_PREFIX = "/v1"


async def fetch_first_page(send: Sender, request: ListRequest[ItemT]) -> ListObject[ItemT]:
    """Issue the list request as given; always starts a fresh traversal."""

    return await send(request)


async def fetch_next_page(send: Sender, current: ListObject[ItemT]) -> ListObject[ItemT]:
    """Page following `current`, or an empty terminal page without I/O."""

    if not current.has_more:
        return current.terminal()

    cursor = current.last_id
    if cursor is None:
        logger.warning("page at %s reports has_more without a usable cursor; stopping", current.url)
        return current.terminal()

    request = current.request or request_for_embedded(current)
    return await send(request.with_cursor(cursor))


def request_for_embedded(page: ListObject[Any]) -> CollectionListRequest[Any]:
    """List request rebuilt from an embedded list's `url` (e.g. `Customer.sources`)."""

    path = page.url
    if path.startswith(_API_VERSION_PREFIX + "/"):
        path = path[len(_API_VERSION_PREFIX):]
    element = type(page).item_type() or dict
    return CollectionListRequest(collection=path, element=element)


async def iterate_pages(
    send: Sender,
    request: ListRequest[ItemT],
    *,
    max_pages: int | None = None,
) -> AsyncIterator[ListObject[ItemT]]:
    """Lazily yield pages until `has_more` is false (or `max_pages` is hit)."""

    page = await fetch_first_page(send, request)
    fetched = 1
    yield page
    while page.has_more:
        if max_pages is not None and fetched >= max_pages:
            return
        page = await fetch_next_page(send, page)
        if not page.data and not page.has_more:
            return
        fetched += 1
        yield page


async def iterate_items(
    send: Sender,
    request: ListRequest[ItemT],
    *,
    max_pages: int | None = None,
) -> AsyncIterator[ItemT]:
    """Lazily yield every item across pages, in remote order."""

    async for page in iterate_pages(send, request, max_pages=max_pages):
        for item in page.data:
            yield item


async def collect_items(
    send: Sender,
    request: ListRequest[ItemT],
    *,
    max_pages: int | None = None,
) -> list[ItemT]:
    return [item async for item in iterate_items(send, request, max_pages=max_pages)]
