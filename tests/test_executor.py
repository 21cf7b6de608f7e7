from __future__ import annotations

import base64
import logging

import httpx
import pytest

from stripe_api.adapters.credentials import StaticCredentials
from stripe_api.adapters.http_client import HttpxTransport, build_async_client
from stripe_api.adapters.resources import CreateCustomer, DeleteCustomer, ListCharges, RetrieveCustomer
from stripe_api.core.domain.models import Customer, DeletedObject
from stripe_api.core.domain.parameters import ChargeListParams, CustomerParams
from stripe_api.core.errors import DecodeError, MalformedPayload, RemoteError, TransportFailure
from stripe_api.core.services.client import StripeClient
from stripe_api.core.services.executor import RawResponse, build_auth_headers, execute
from tests.support import SECRET_KEY, customer_payload

pytestmark = pytest.mark.anyio


class CountingCredentials:
    def __init__(self, keys: list[str]) -> None:
        self._keys = keys
        self.reads = 0

    def current_secret_key(self) -> str:
        key = self._keys[min(self.reads, len(self._keys) - 1)]
        self.reads += 1
        return key


def _basic(key: str) -> str:
    return "Basic " + base64.b64encode(f"{key}:".encode()).decode()


def test_auth_header_is_basic_key_with_colon():
    headers = build_auth_headers(StaticCredentials(SECRET_KEY))

    assert headers == {"authorization": _basic(SECRET_KEY)}


async def test_create_customer_posts_form_body(client, transport):
    transport.queue(200, customer_payload(email="a@example.com"))

    customer = await client.send(CreateCustomer(params=CustomerParams(email="a@example.com")))

    call = transport.calls[0]
    assert call.method == "POST"
    assert call.url == "https://api.stripe.com/v1/customers"
    assert call.body == b"email=a%40example.com"
    assert call.headers["content-type"] == "application/x-www-form-urlencoded"
    assert call.headers["authorization"] == _basic(SECRET_KEY)
    assert isinstance(customer, Customer)
    assert customer.email == "a@example.com"
    assert "deleted" not in Customer.model_fields


async def test_delete_customer_sends_no_body(client, transport):
    transport.queue(200, {"id": "cus_1", "deleted": True})

    result = await client.send(DeleteCustomer(id="cus_1"))

    call = transport.calls[0]
    assert call.method == "DELETE"
    assert call.path == "/v1/customers/cus_1"
    assert call.body is None
    assert call.query == []
    assert "content-type" not in call.headers
    assert result == DeletedObject(id="cus_1", deleted=True)


async def test_get_parameters_go_to_query_string(client, transport):
    transport.queue(200, {"object": "list", "url": "/v1/charges", "has_more": False, "data": []})

    await client.send(ListCharges(params=ChargeListParams(customer="cus_1", limit=3)))

    call = transport.calls[0]
    assert call.body is None
    assert call.query == [("limit", "3"), ("customer", "cus_1")]


async def test_payment_required_is_a_remote_error(client, transport):
    body = b'{"error": {"type": "card_error", "code": "card_declined", "message": "Your card was declined."}}'
    transport.queue(402, body)

    with pytest.raises(RemoteError) as excinfo:
        await client.send(RetrieveCustomer(id="cus_1"))

    error = excinfo.value
    assert not isinstance(error, DecodeError)
    assert (error.method, error.path, error.status, error.body) == ("GET", "/customers/cus_1", 402, body)
    assert error.error_type == "card_error"
    assert error.code == "card_declined"
    assert error.message == "Your card was declined."


async def test_remote_error_with_non_json_body(client, transport):
    transport.queue(502, b"<html>Bad gateway</html>")

    with pytest.raises(RemoteError) as excinfo:
        await client.send(RetrieveCustomer(id="cus_1"))

    assert excinfo.value.status == 502
    assert excinfo.value.message is None


async def test_encoding_failure_happens_before_network(client, transport):
    with pytest.raises(MalformedPayload):
        await client.send(CreateCustomer(params={"email": object()}))

    assert transport.calls == []


async def test_secret_key_is_read_on_every_call(transport, settings):
    credentials = CountingCredentials(["sk_test_first", "sk_test_second"])
    client = StripeClient(transport=transport, credentials=credentials, settings=settings)
    transport.queue(200, customer_payload()).queue(200, customer_payload())

    await client.send(RetrieveCustomer(id="cus_1"))
    await client.send(RetrieveCustomer(id="cus_1"))

    assert credentials.reads == 2
    assert transport.calls[0].headers["authorization"] == _basic("sk_test_first")
    assert transport.calls[1].headers["authorization"] == _basic("sk_test_second")


async def test_raw_response_hook_receives_every_response(transport, credentials):
    seen: list[RawResponse] = []
    transport.queue(200, b'{"id": "cus_1"}').queue(404, b'{"error": {"message": "No such customer"}}')

    await execute(RetrieveCustomer(id="cus_1"), transport=transport, credentials=credentials, on_raw_response=seen.append)
    with pytest.raises(RemoteError):
        await execute(
            RetrieveCustomer(id="cus_2"),
            transport=transport,
            credentials=credentials,
            on_raw_response=seen.append,
        )

    assert [(r.path, r.status) for r in seen] == [("/customers/cus_1", 200), ("/customers/cus_2", 404)]
    assert seen[0].body == b'{"id": "cus_1"}'


async def test_failing_hook_never_breaks_the_result(transport, credentials, caplog):
    def broken_hook(response: RawResponse) -> None:
        raise RuntimeError("boom")

    transport.queue(200, customer_payload())

    with caplog.at_level(logging.WARNING, logger="stripe_api"):
        customer = await execute(
            RetrieveCustomer(id="cus_1"),
            transport=transport,
            credentials=credentials,
            on_raw_response=broken_hook,
        )

    assert customer.id == "cus_1"
    assert "raw response hook failed" in caplog.text


async def test_log_raw_responses_setting_installs_logging_hook(transport, credentials, settings, caplog):
    verbose = settings.model_copy(update={"log_raw_responses": True})
    client = StripeClient(transport=transport, credentials=credentials, settings=verbose)
    transport.queue(200, customer_payload(email="raw@example.com"))

    with caplog.at_level(logging.DEBUG, logger="stripe_api"):
        await client.send(RetrieveCustomer(id="cus_1"))

    assert "raw@example.com" in caplog.text


async def test_custom_base_url(transport, credentials):
    transport.queue(200, customer_payload())

    await execute(
        RetrieveCustomer(id="cus_1"),
        transport=transport,
        credentials=credentials,
        base_url="http://localhost:12111/v1/",
    )

    assert transport.calls[0].url == "http://localhost:12111/v1/customers/cus_1"


async def test_httpx_transport_end_to_end(settings, credentials):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=customer_payload(email="a@example.com"))

    http_client = build_async_client(settings, transport=httpx.MockTransport(handler))
    async with StripeClient(
        transport=HttpxTransport(settings, client=http_client),
        credentials=credentials,
        settings=settings,
    ) as client:
        customer = await client.send(CreateCustomer(params=CustomerParams(email="a@example.com")))
    await http_client.aclose()

    request = seen[0]
    assert customer.email == "a@example.com"
    assert request.method == "POST"
    assert str(request.url) == "https://api.stripe.com/v1/customers"
    assert request.content == b"email=a%40example.com"
    assert request.headers["authorization"] == _basic(SECRET_KEY)
    assert request.headers["user-agent"] == settings.user_agent
    assert request.headers["accept"] == "application/json"


async def test_httpx_connection_errors_become_transport_failures(settings, credentials):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    http_client = build_async_client(settings, transport=httpx.MockTransport(handler))
    transport = HttpxTransport(settings, client=http_client)

    with pytest.raises(TransportFailure) as excinfo:
        await execute(RetrieveCustomer(id="cus_1"), transport=transport, credentials=credentials)
    await http_client.aclose()

    assert excinfo.value.method == "GET"
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)

