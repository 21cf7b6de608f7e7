from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qsl, urlsplit

SECRET_KEY = "sk_test_4eC39HqLyjWDarjtT1zdp7dc"


@dataclass
class RecordedCall:
    method: str
    url: str
    headers: dict[str, str]
    body: bytes | None

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    @property
    def query(self) -> list[tuple[str, str]]:
        return parse_qsl(urlsplit(self.url).query, keep_blank_values=True)


@dataclass
class FakeTransport:
    """Transport double: replays queued `(status, body)` pairs and records calls."""

    responses: list[tuple[int, Any]] = field(default_factory=list)
    calls: list[RecordedCall] = field(default_factory=list)

    def queue(self, status: int, body: Any) -> "FakeTransport":
        self.responses.append((status, body))
        return self

    async def execute(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> tuple[int, bytes]:
        self.calls.append(RecordedCall(method=method, url=url, headers=dict(headers), body=body))
        if not self.responses:
            raise AssertionError(f"unexpected call: {method} {url}")
        status, payload = self.responses.pop(0)
        if isinstance(payload, bytes):
            return status, payload
        return status, json.dumps(payload).encode("utf-8")


def customer_payload(customer_id: str = "cus_1", **extra: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": customer_id,
        "object": "customer",
        "account_balance": 0,
        "created": 1507000000,
        "currency": None,
        "default_source": None,
        "delinquent": False,
        "description": None,
        "discount": None,
        "email": None,
        "livemode": False,
        "metadata": {},
        "shipping": None,
    }
    payload.update(extra)
    return payload


def charge_payload(charge_id: str, *, customer: str = "cus_1", amount: int = 1000) -> dict[str, Any]:
    return {
        "id": charge_id,
        "object": "charge",
        "amount": amount,
        "currency": "usd",
        "customer": customer,
        "paid": True,
        "status": "succeeded",
        "metadata": {},
    }


def list_payload(url: str, data: list[dict[str, Any]], *, has_more: bool, total_count: int | None = None) -> dict[str, Any]:
    payload: dict[str, Any] = {"object": "list", "url": url, "has_more": has_more, "data": data}
    if total_count is not None:
        payload["total_count"] = total_count
    return payload
