"""Charges: `/charges`. La API no permite borrar cargos."""

from __future__ import annotations

from dataclasses import dataclass

from stripe_api.core.domain.models import Charge
from stripe_api.core.domain.parameters import ChargeCreateParams, ChargeListParams, ChargeUpdateParams
from stripe_api.core.requests import CreateRequest, ListRequest, RetrieveRequest, UpdateRequest

PATH = "/charges"


@dataclass(frozen=True, kw_only=True)
class CreateCharge(CreateRequest[Charge]):
    collection_path = PATH
    response_type = Charge

    params: ChargeCreateParams


@dataclass(frozen=True, kw_only=True)
class RetrieveCharge(RetrieveRequest[Charge]):
    collection_path = PATH
    response_type = Charge


@dataclass(frozen=True, kw_only=True)
class UpdateCharge(UpdateRequest[Charge]):
    collection_path = PATH
    response_type = Charge

    params: ChargeUpdateParams | None = None


@dataclass(frozen=True, kw_only=True)
class ListCharges(ListRequest[Charge]):
    collection_path = PATH
    item_type = Charge

    params: ChargeListParams | None = None
