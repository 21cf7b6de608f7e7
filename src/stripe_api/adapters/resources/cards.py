"""Fuentes (tarjetas) de un customer: `/customers/{customer}/sources`."""

from __future__ import annotations

from dataclasses import dataclass, field

from stripe_api.adapters.resources.customers import PATH as CUSTOMERS_PATH
from stripe_api.core.domain.models import Card
from stripe_api.core.domain.parameters import CardCreateParams, CardListParams, CardUpdateParams
from stripe_api.core.requests import (
    CreateRequest,
    DeleteRequest,
    ListRequest,
    RetrieveRequest,
    UpdateRequest,
    quote_id,
)


def sources_path(customer: str) -> str:
    return f"{CUSTOMERS_PATH}/{quote_id(customer)}/sources"


@dataclass(frozen=True, kw_only=True)
class _CustomerSources:
    customer: str

    @property
    def root(self) -> str:
        return sources_path(self.customer)


@dataclass(frozen=True, kw_only=True)
class CreateCard(_CustomerSources, CreateRequest[Card]):
    """Adjunta un token de tarjeta al customer."""

    response_type = Card

    params: CardCreateParams


@dataclass(frozen=True, kw_only=True)
class RetrieveCard(_CustomerSources, RetrieveRequest[Card]):
    response_type = Card


@dataclass(frozen=True, kw_only=True)
class UpdateCard(_CustomerSources, UpdateRequest[Card]):
    response_type = Card

    params: CardUpdateParams | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteCard(_CustomerSources, DeleteRequest):
    pass


@dataclass(frozen=True, kw_only=True)
class ListCards(_CustomerSources, ListRequest[Card]):
    item_type = Card

    params: CardListParams | None = field(default_factory=CardListParams)
