"""SKUs: `/skus`."""

from __future__ import annotations

from dataclasses import dataclass

from stripe_api.core.domain.models import SKU
from stripe_api.core.domain.parameters import SKUCreateParams, SKUListParams, SKUUpdateParams
from stripe_api.core.requests import CreateRequest, DeleteRequest, ListRequest, RetrieveRequest, UpdateRequest

PATH = "/skus"


@dataclass(frozen=True, kw_only=True)
class CreateSKU(CreateRequest[SKU]):
    collection_path = PATH
    response_type = SKU

    params: SKUCreateParams


@dataclass(frozen=True, kw_only=True)
class RetrieveSKU(RetrieveRequest[SKU]):
    collection_path = PATH
    response_type = SKU


@dataclass(frozen=True, kw_only=True)
class UpdateSKU(UpdateRequest[SKU]):
    collection_path = PATH
    response_type = SKU

    params: SKUUpdateParams | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteSKU(DeleteRequest):
    collection_path = PATH


@dataclass(frozen=True, kw_only=True)
class ListSKUs(ListRequest[SKU]):
    collection_path = PATH
    item_type = SKU

    params: SKUListParams | None = None
