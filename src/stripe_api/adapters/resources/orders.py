"""Orders: `/orders`. Los pedidos no se borran; se cancelan vía `status`."""

from __future__ import annotations

from dataclasses import dataclass

from stripe_api.core.domain.models import Order
from stripe_api.core.domain.parameters import OrderCreateParams, OrderListParams, OrderUpdateParams
from stripe_api.core.requests import CreateRequest, ListRequest, RetrieveRequest, UpdateRequest

PATH = "/orders"


@dataclass(frozen=True, kw_only=True)
class CreateOrder(CreateRequest[Order]):
    collection_path = PATH
    response_type = Order

    params: OrderCreateParams


@dataclass(frozen=True, kw_only=True)
class RetrieveOrder(RetrieveRequest[Order]):
    collection_path = PATH
    response_type = Order


@dataclass(frozen=True, kw_only=True)
class UpdateOrder(UpdateRequest[Order]):
    collection_path = PATH
    response_type = Order

    params: OrderUpdateParams | None = None


@dataclass(frozen=True, kw_only=True)
class ListOrders(ListRequest[Order]):
    collection_path = PATH
    item_type = Order

    params: OrderListParams | None = None
