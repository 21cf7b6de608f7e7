"""Variantes genéricas de request (Create / Retrieve / Update / Delete / List).

Cada recurso concreto (`stripe_api.adapters.resources`) solo declara su
colección, su tipo de respuesta y sus parámetros; método, path, codec y
decodificación salen de aquí.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar
from urllib.parse import quote

from pydantic import BaseModel

from stripe_api.core.decoding import decode_object, decode_payload, parse_json
from stripe_api.core.domain.listing import ListObject
from stripe_api.core.domain.models import DeletedObject
from stripe_api.core.interfaces.request import HTTPMethod

ResponseT = TypeVar("ResponseT")
ItemT = TypeVar("ItemT")

CURSOR_PARAMETER = "starting_after"


def quote_id(value: str) -> str:
    """Percent-encode de un identificador embebido en un path."""

    if not isinstance(value, str) or not value:
        raise ValueError("resource identifiers must be non-empty strings")
    return quote(value, safe="")


@dataclass(frozen=True, kw_only=True)
class BaseRequest(Generic[ResponseT]):
    method: ClassVar[HTTPMethod] = HTTPMethod.GET
    collection_path: ClassVar[str] = ""
    response_type: ClassVar[Any] = None

    @property
    def root(self) -> str:
        return self.collection_path

    @property
    def path(self) -> str:
        return self.root

    @property
    def parameters(self) -> Any:
        return None

    @property
    def response_shape(self) -> Any:
        return self.response_type

    def decode_response(self, raw: bytes) -> ResponseT:
        return decode_payload(raw, self.response_shape)


@dataclass(frozen=True, kw_only=True)
class CreateRequest(BaseRequest[ResponseT]):
    method = HTTPMethod.POST

    params: BaseModel | Mapping[str, Any] | None = None

    @property
    def parameters(self) -> Any:
        return self.params


@dataclass(frozen=True, kw_only=True)
class ResourceRequest(BaseRequest[ResponseT]):
    """Request dirigida a un único recurso: `root/{id}`."""

    id: str

    def __post_init__(self) -> None:
        quote_id(self.id)

    @property
    def path(self) -> str:
        return f"{self.root}/{quote_id(self.id)}"


@dataclass(frozen=True, kw_only=True)
class RetrieveRequest(ResourceRequest[ResponseT]):
    method = HTTPMethod.GET


@dataclass(frozen=True, kw_only=True)
class UpdateRequest(ResourceRequest[ResponseT]):
    method = HTTPMethod.POST

    params: BaseModel | Mapping[str, Any] | None = None

    @property
    def parameters(self) -> Any:
        return self.params


@dataclass(frozen=True, kw_only=True)
class DeleteRequest(ResourceRequest[DeletedObject]):
    """DELETE `root/{id}`.

    Tolera cuerpos vacíos o parciales en respuestas 2xx: el id se completa
    con el de la request y `deleted` se asume verdadero.
    """

    method = HTTPMethod.DELETE
    response_type = DeletedObject

    def decode_response(self, raw: bytes) -> DeletedObject:
        if not raw or not raw.strip():
            return DeletedObject(id=self.id, deleted=True)
        payload = parse_json(raw)
        if isinstance(payload, dict):
            payload = {"id": self.id, "deleted": True, **payload}
        return decode_object(payload, DeletedObject, raw=raw)


@dataclass(frozen=True, kw_only=True)
class ListRequest(BaseRequest[Any], Generic[ItemT]):
    """GET sobre la raíz de la colección con filtros y cursor."""

    method = HTTPMethod.GET
    item_type: ClassVar[Any] = None

    params: BaseModel | Mapping[str, Any] | None = None

    @property
    def parameters(self) -> Any:
        return self.params

    @property
    def element_shape(self) -> Any:
        return self.item_type

    @property
    def response_shape(self) -> Any:
        return ListObject[self.element_shape]

    def decode_response(self, raw: bytes) -> ListObject[ItemT]:
        page = decode_payload(raw, self.response_shape)
        return page.bind(self)

    def with_cursor(self, cursor: str) -> "ListRequest[ItemT]":
        """Misma request (mismos filtros) con `starting_after=cursor`."""

        params = self.params
        if isinstance(params, BaseModel):
            updated: Any = params.model_copy(update={CURSOR_PARAMETER: cursor, "ending_before": None})
        elif isinstance(params, Mapping):
            updated = {k: v for k, v in params.items() if k not in (CURSOR_PARAMETER, "ending_before")}
            updated[CURSOR_PARAMETER] = cursor
        else:
            updated = {CURSOR_PARAMETER: cursor}
        return dataclasses.replace(self, params=updated)


@dataclass(frozen=True, kw_only=True)
class CollectionListRequest(ListRequest[ItemT]):
    """Listado sobre un path arbitrario (p.ej. listas embebidas en otro recurso)."""

    collection: str
    element: Any = dict

    @property
    def root(self) -> str:
        return self.collection

    @property
    def element_shape(self) -> Any:
        return self.element
