"""Recursos remotos de Stripe (Pydantic v2).

- Cada modelo es un valor inmutable decodificado de un objeto JSON.
- Los campos opcionales modelan atributos opcionales del lado remoto; los
  campos desconocidos se ignoran.
- Las referencias cruzadas (`Customer.default_source`, `Charge.customer`,
  `SKU.product`) son ids opacos o valores embebidos, nunca back-references.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from stripe_api.core.domain.listing import ListObject


class StripeModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)


class Address(StripeModel):
    line1: str | None = None
    line2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None


class Shipping(StripeModel):
    address: Address | None = None
    name: str | None = None
    phone: str | None = None
    carrier: str | None = None
    tracking_number: str | None = None


class Coupon(StripeModel):
    id: str
    object: str = "coupon"
    amount_off: int | None = None
    percent_off: float | None = None
    currency: str | None = None
    duration: str | None = None
    valid: bool = True


class Discount(StripeModel):
    object: str = "discount"
    coupon: Coupon | None = None
    customer: str | None = None
    start: int | None = None
    end: int | None = None
    subscription: str | None = None


class Subscription(StripeModel):
    id: str
    object: str = "subscription"
    customer: str | None = None
    status: str | None = None
    current_period_start: int | None = None
    current_period_end: int | None = None
    cancel_at_period_end: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)


class Card(StripeModel):
    """Tarjeta asociada a un customer (`/customers/{id}/sources`)."""

    id: str
    object: str = "card"
    brand: str | None = None
    last4: str | None = None
    exp_month: int | None = None
    exp_year: int | None = None
    country: str | None = None
    funding: str | None = None
    fingerprint: str | None = None
    customer: str | None = None
    name: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    address_city: str | None = None
    address_state: str | None = None
    address_zip: str | None = None
    address_country: str | None = None
    cvc_check: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)


class Customer(StripeModel):
    id: str
    object: str = "customer"
    account_balance: int = 0
    created: int | None = None
    currency: str | None = None
    default_source: str | Card | None = Field(
        default=None,
        description="Id de la fuente por defecto, o la fuente expandida.",
    )
    delinquent: bool = False
    description: str | None = None
    discount: Discount | None = None
    email: str | None = None
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    shipping: Shipping | None = None
    sources: ListObject[Card] | None = None
    subscriptions: ListObject[Subscription] | None = None


class Outcome(StripeModel):
    network_status: str | None = None
    reason: str | None = None
    risk_level: str | None = None
    seller_message: str | None = None
    type: str | None = None


class Charge(StripeModel):
    id: str
    object: str = "charge"
    amount: int
    amount_refunded: int = 0
    currency: str
    captured: bool = False
    created: int | None = None
    customer: str | None = None
    description: str | None = None
    failure_code: str | None = None
    failure_message: str | None = None
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    order: str | None = None
    outcome: Outcome | None = None
    paid: bool = False
    receipt_email: str | None = None
    refunded: bool = False
    shipping: Shipping | None = None
    source: Card | dict[str, Any] | None = None
    statement_descriptor: str | None = None
    status: str | None = None


class PackageDimensions(StripeModel):
    height: float
    length: float
    weight: float
    width: float


class Product(StripeModel):
    id: str
    object: str = "product"
    active: bool = True
    attributes: list[str] = Field(default_factory=list)
    caption: str | None = None
    created: int | None = None
    description: str | None = None
    images: list[str] = Field(default_factory=list)
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    name: str
    package_dimensions: PackageDimensions | None = None
    shippable: bool | None = None
    type: str | None = None
    updated: int | None = None
    url: str | None = None


class Inventory(StripeModel):
    type: str
    quantity: int | None = None
    value: str | None = None


class SKU(StripeModel):
    id: str
    object: str = "sku"
    active: bool = True
    attributes: dict[str, str] = Field(default_factory=dict)
    created: int | None = None
    currency: str
    image: str | None = None
    inventory: Inventory | None = None
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    package_dimensions: PackageDimensions | None = None
    price: int
    product: str | Product = Field(
        ...,
        description="Id del producto padre, o el producto expandido.",
    )
    updated: int | None = None


class OrderItem(StripeModel):
    object: str = "order_item"
    amount: int
    currency: str
    description: str
    parent: str | None = None
    quantity: int | None = None
    type: str


class Order(StripeModel):
    id: str
    object: str = "order"
    amount: int
    amount_returned: int | None = None
    charge: str | None = None
    created: int | None = None
    currency: str
    customer: str | None = None
    email: str | None = None
    items: list[OrderItem] = Field(default_factory=list)
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    selected_shipping_method: str | None = None
    shipping: Shipping | None = None
    status: str | None = None
    updated: int | None = None


class DeletedObject(StripeModel):
    """Respuesta de un DELETE: `{"id": ..., "deleted": true}`."""

    id: str
    object: str | None = None
    deleted: bool
