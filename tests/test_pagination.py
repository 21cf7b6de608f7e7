from __future__ import annotations

import json

import pytest

from stripe_api.adapters.resources import ListCharges, RetrieveCustomer
from stripe_api.core.domain.models import Card, Charge
from stripe_api.core.domain.parameters import ChargeListParams
from stripe_api.core.services import pagination
from tests.support import charge_payload, customer_payload, list_payload

pytestmark = pytest.mark.anyio


def _charges_request() -> ListCharges:
    return ListCharges(params=ChargeListParams(customer="cus_1", limit=2))


async def test_first_and_next_page_follow_the_cursor(client, transport):
    transport.queue(200, list_payload("/v1/charges", [charge_payload("c1"), charge_payload("c2")], has_more=True))
    transport.queue(200, list_payload("/v1/charges", [charge_payload("c3")], has_more=False))

    first = await client.fetch_first_page(_charges_request())
    second = await client.fetch_next_page(first)

    assert first.has_more is True
    assert [c.id for c in first.data] == ["c1", "c2"]
    assert second.has_more is False
    assert [c.id for c in second.data] == ["c3"]
    assert second is not first

    first_call, next_call = transport.calls
    assert first_call.method == next_call.method == "GET"
    assert first_call.path == next_call.path == "/v1/charges"
    assert first_call.query == [("limit", "2"), ("customer", "cus_1")]
    assert next_call.query == [("limit", "2"), ("starting_after", "c2"), ("customer", "cus_1")]
    assert first_call.body is None and next_call.body is None


async def test_terminal_page_returns_empty_page_without_network(client, transport):
    transport.queue(200, list_payload("/v1/charges", [charge_payload("c1")], has_more=False))

    last = await client.fetch_first_page(_charges_request())
    after = await client.fetch_next_page(last)
    again = await client.fetch_next_page(after)

    assert len(transport.calls) == 1
    assert after.data == [] and after.has_more is False
    assert again.data == [] and again.has_more is False
    assert after is not last
    assert last.data[0].id == "c1"


async def test_repeated_next_page_terminates(client, transport):
    for index in range(3):
        has_more = index < 2
        transport.queue(200, list_payload("/v1/charges", [charge_payload(f"c{index}")], has_more=has_more))

    page = await client.fetch_first_page(_charges_request())
    fetched = 1
    while page.has_more:
        page = await client.fetch_next_page(page)
        fetched += 1

    assert fetched == 3
    assert (await client.fetch_next_page(page)).data == []
    assert len(transport.calls) == 3


async def test_has_more_without_items_stops(client, transport):
    transport.queue(200, list_payload("/v1/charges", [], has_more=True))

    page = await client.fetch_first_page(_charges_request())
    following = await client.fetch_next_page(page)

    assert following.data == []
    assert following.has_more is False
    assert len(transport.calls) == 1


async def test_iterate_yields_items_lazily_across_pages(client, transport):
    transport.queue(200, list_payload("/v1/charges", [charge_payload("c1"), charge_payload("c2")], has_more=True))
    transport.queue(200, list_payload("/v1/charges", [charge_payload("c3")], has_more=False))

    iterator = client.iterate(_charges_request())
    first = await iterator.__anext__()

    assert first.id == "c1"
    assert len(transport.calls) == 1

    rest = [charge.id async for charge in iterator]

    assert rest == ["c2", "c3"]
    assert len(transport.calls) == 2


async def test_iteration_is_restartable(client, transport):
    for _ in range(2):
        transport.queue(200, list_payload("/v1/charges", [charge_payload("c1")], has_more=True))
        transport.queue(200, list_payload("/v1/charges", [charge_payload("c2")], has_more=False))

    first_run = await pagination.collect_items(client.send, _charges_request())
    second_run = await pagination.collect_items(client.send, _charges_request())

    assert [c.id for c in first_run] == [c.id for c in second_run] == ["c1", "c2"]
    assert "starting_after" not in dict(transport.calls[2].query)


async def test_max_pages_bounds_iteration(client, transport):
    transport.queue(200, list_payload("/v1/charges", [charge_payload("c1")], has_more=True))
    transport.queue(200, list_payload("/v1/charges", [charge_payload("c2")], has_more=True))

    pages = [page async for page in client.iterate_pages(_charges_request(), max_pages=2)]

    assert [[c.id for c in page.data] for page in pages] == [["c1"], ["c2"]]
    assert len(transport.calls) == 2


async def test_list_by_path_and_filters(client, transport):
    transport.queue(200, list_payload("/v1/charges", [charge_payload("c1")], has_more=True))
    transport.queue(200, list_payload("/v1/charges", [charge_payload("c2")], has_more=False))

    first = await client.list("/charges", Charge, {"customer": "cus_1"})
    second = await client.fetch_next_page(first)

    assert isinstance(first.data[0], Charge)
    assert [c.id for c in second.data] == ["c2"]
    assert transport.calls[1].query == [("customer", "cus_1"), ("starting_after", "c1")]


async def test_embedded_list_pages_through_its_url(client, transport):
    sources = list_payload(
        "/v1/customers/cus_1/sources",
        [{"id": "card_1", "object": "card", "last4": "4242"}],
        has_more=True,
    )
    transport.queue(200, customer_payload(sources=sources))
    transport.queue(
        200,
        list_payload("/v1/customers/cus_1/sources", [{"id": "card_2", "object": "card"}], has_more=False),
    )

    customer = await client.send(RetrieveCustomer(id="cus_1"))
    following = await client.fetch_next_page(customer.sources)

    assert customer.sources.request is None
    assert isinstance(following.data[0], Card)
    assert following.data[0].id == "card_2"
    assert transport.calls[1].path == "/v1/customers/cus_1/sources"
    assert transport.calls[1].query == [("starting_after", "card_1")]


async def test_pages_are_decoded_idempotently(client, transport):
    body = json.dumps(list_payload("/v1/charges", [charge_payload("c1")], has_more=False)).encode()
    transport.queue(200, body).queue(200, body)

    request = _charges_request()
    assert await client.fetch_first_page(request) == await client.fetch_first_page(request)
