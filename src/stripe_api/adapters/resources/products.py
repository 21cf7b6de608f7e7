"""Products: `/products`."""

from __future__ import annotations

from dataclasses import dataclass

from stripe_api.core.domain.models import Product
from stripe_api.core.domain.parameters import ProductCreateParams, ProductListParams, ProductUpdateParams
from stripe_api.core.requests import CreateRequest, DeleteRequest, ListRequest, RetrieveRequest, UpdateRequest

PATH = "/products"


@dataclass(frozen=True, kw_only=True)
class CreateProduct(CreateRequest[Product]):
    collection_path = PATH
    response_type = Product

    params: ProductCreateParams


@dataclass(frozen=True, kw_only=True)
class RetrieveProduct(RetrieveRequest[Product]):
    collection_path = PATH
    response_type = Product


@dataclass(frozen=True, kw_only=True)
class UpdateProduct(UpdateRequest[Product]):
    collection_path = PATH
    response_type = Product

    params: ProductUpdateParams | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteProduct(DeleteRequest):
    collection_path = PATH


@dataclass(frozen=True, kw_only=True)
class ListProducts(ListRequest[Product]):
    collection_path = PATH
    item_type = Product

    params: ProductListParams | None = None
