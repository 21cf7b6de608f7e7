"""Parámetros tipados por operación.

Cada operación declara sus campos conocidos; el codec
(`stripe_api.core.encoding`) los aplana a `clave[sub]=valor`. Los campos en
`None` se omiten y el orden de emisión es el orden de declaración.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Parameters(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class AddressParams(Parameters):
    line1: str
    line2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None


class ShippingParams(Parameters):
    address: AddressParams
    name: str
    phone: str | None = None
    carrier: str | None = None
    tracking_number: str | None = None


# Customers

class CustomerParams(Parameters):
    """Campos de creación y actualización parcial de un customer."""

    account_balance: int | None = None
    business_vat_id: str | None = None
    coupon: str | None = None
    default_source: str | None = None
    description: str | None = None
    email: str | None = None
    metadata: dict[str, str] | None = None
    shipping: ShippingParams | None = None
    source: str | None = Field(
        default=None,
        description="Token de tarjeta (tok_...) a adjuntar como fuente.",
    )


# Cards (customer sources)

class CardCreateParams(Parameters):
    source: str = Field(..., min_length=1, description="Token o id de la fuente.")
    metadata: dict[str, str] | None = None


class CardUpdateParams(Parameters):
    address_city: str | None = None
    address_country: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    address_state: str | None = None
    address_zip: str | None = None
    exp_month: int | None = Field(default=None, ge=1, le=12)
    exp_year: int | None = None
    metadata: dict[str, str] | None = None
    name: str | None = None


# Charges

class ChargeCreateParams(Parameters):
    amount: int = Field(..., gt=0, description="Importe en la unidad mínima de la moneda.")
    currency: str = Field(..., min_length=3, max_length=3)
    customer: str | None = None
    source: str | None = None
    description: str | None = None
    capture: bool | None = None
    metadata: dict[str, str] | None = None
    receipt_email: str | None = None
    shipping: ShippingParams | None = None
    statement_descriptor: str | None = Field(default=None, max_length=22)


class ChargeUpdateParams(Parameters):
    description: str | None = None
    metadata: dict[str, str] | None = None
    receipt_email: str | None = None
    shipping: ShippingParams | None = None


# Products & SKUs

class ProductType(str, Enum):
    GOOD = "good"
    SERVICE = "service"


class PackageDimensionsParams(Parameters):
    height: float
    length: float
    weight: float
    width: float


class ProductCreateParams(Parameters):
    name: str = Field(..., min_length=1)
    type: ProductType | None = None
    id: str | None = None
    active: bool | None = None
    attributes: list[str] | None = None
    caption: str | None = None
    description: str | None = None
    images: list[str] | None = None
    metadata: dict[str, str] | None = None
    package_dimensions: PackageDimensionsParams | None = None
    shippable: bool | None = None
    url: str | None = None


class ProductUpdateParams(Parameters):
    active: bool | None = None
    attributes: list[str] | None = None
    caption: str | None = None
    description: str | None = None
    images: list[str] | None = None
    metadata: dict[str, str] | None = None
    name: str | None = None
    package_dimensions: PackageDimensionsParams | None = None
    shippable: bool | None = None
    url: str | None = None


class InventoryParams(Parameters):
    type: str = Field(..., description="finite | bucket | infinite")
    quantity: int | None = Field(default=None, ge=0)
    value: str | None = None


class SKUCreateParams(Parameters):
    currency: str = Field(..., min_length=3, max_length=3)
    inventory: InventoryParams
    price: int = Field(..., ge=0)
    product: str
    id: str | None = None
    active: bool | None = None
    attributes: dict[str, str] | None = None
    image: str | None = None
    metadata: dict[str, str] | None = None
    package_dimensions: PackageDimensionsParams | None = None


class SKUUpdateParams(Parameters):
    active: bool | None = None
    attributes: dict[str, str] | None = None
    currency: str | None = None
    image: str | None = None
    inventory: InventoryParams | None = None
    metadata: dict[str, str] | None = None
    package_dimensions: PackageDimensionsParams | None = None
    price: int | None = Field(default=None, ge=0)
    product: str | None = None


# Orders

class OrderItemParams(Parameters):
    type: str | None = None
    parent: str | None = None
    quantity: int | None = Field(default=None, ge=1)
    amount: int | None = None
    currency: str | None = None
    description: str | None = None


class OrderCreateParams(Parameters):
    currency: str = Field(..., min_length=3, max_length=3)
    coupon: str | None = None
    customer: str | None = None
    email: str | None = None
    items: list[OrderItemParams] | None = None
    metadata: dict[str, str] | None = None
    shipping: ShippingParams | None = None


class OrderUpdateParams(Parameters):
    coupon: str | None = None
    metadata: dict[str, str] | None = None
    selected_shipping_method: str | None = None
    shipping: ShippingParams | None = None
    status: str | None = None


# List filters

class ListParams(Parameters):
    """Filtros comunes de paginación por cursor."""

    limit: int | None = Field(default=None, ge=1, le=100)
    starting_after: str | None = None
    ending_before: str | None = None


class CustomerListParams(ListParams):
    email: str | None = None


class CardListParams(ListParams):
    object: str = "card"


class ChargeListParams(ListParams):
    customer: str | None = None


class ProductListParams(ListParams):
    active: bool | None = None
    ids: list[str] | None = None
    shippable: bool | None = None


class SKUListParams(ListParams):
    active: bool | None = None
    product: str | None = None


class OrderListParams(ListParams):
    customer: str | None = None
    status: str | None = None
