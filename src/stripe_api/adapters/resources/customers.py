"""Customers: `/customers`."""

from __future__ import annotations

from dataclasses import dataclass

from stripe_api.core.domain.models import Customer
from stripe_api.core.domain.parameters import CustomerListParams, CustomerParams
from stripe_api.core.requests import CreateRequest, DeleteRequest, ListRequest, RetrieveRequest, UpdateRequest

PATH = "/customers"


@dataclass(frozen=True, kw_only=True)
class CreateCustomer(CreateRequest[Customer]):
    collection_path = PATH
    response_type = Customer

    params: CustomerParams | None = None


@dataclass(frozen=True, kw_only=True)
class RetrieveCustomer(RetrieveRequest[Customer]):
    collection_path = PATH
    response_type = Customer


@dataclass(frozen=True, kw_only=True)
class UpdateCustomer(UpdateRequest[Customer]):
    collection_path = PATH
    response_type = Customer

    params: CustomerParams | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteCustomer(DeleteRequest):
    collection_path = PATH


@dataclass(frozen=True, kw_only=True)
class ListCustomers(ListRequest[Customer]):
    collection_path = PATH
    item_type = Customer

    params: CustomerListParams | None = None
