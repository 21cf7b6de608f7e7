"""Recursos de Stripe (requests concretas).

Cada módulo declara las variantes Create / Retrieve / Update / Delete / List
de un recurso sobre las bases genéricas de `stripe_api.core.requests`.
"""

from stripe_api.adapters.resources.cards import CreateCard, DeleteCard, ListCards, RetrieveCard, UpdateCard
from stripe_api.adapters.resources.charges import CreateCharge, ListCharges, RetrieveCharge, UpdateCharge
from stripe_api.adapters.resources.customers import (
    CreateCustomer,
    DeleteCustomer,
    ListCustomers,
    RetrieveCustomer,
    UpdateCustomer,
)
from stripe_api.adapters.resources.orders import CreateOrder, ListOrders, RetrieveOrder, UpdateOrder
from stripe_api.adapters.resources.products import (
    CreateProduct,
    DeleteProduct,
    ListProducts,
    RetrieveProduct,
    UpdateProduct,
)
from stripe_api.adapters.resources.skus import CreateSKU, DeleteSKU, ListSKUs, RetrieveSKU, UpdateSKU

__all__ = [
    "CreateCard",
    "CreateCharge",
    "CreateCustomer",
    "CreateOrder",
    "CreateProduct",
    "CreateSKU",
    "DeleteCard",
    "DeleteCustomer",
    "DeleteProduct",
    "DeleteSKU",
    "ListCards",
    "ListCharges",
    "ListCustomers",
    "ListOrders",
    "ListProducts",
    "ListSKUs",
    "RetrieveCard",
    "RetrieveCharge",
    "RetrieveCustomer",
    "RetrieveOrder",
    "RetrieveProduct",
    "RetrieveSKU",
    "UpdateCard",
    "UpdateCharge",
    "UpdateCustomer",
    "UpdateOrder",
    "UpdateProduct",
    "UpdateSKU",
]
