"""Sobre de paginación (`ListObject`).

Forma JSON consumida:
    {"object": "list", "url": str, "has_more": bool, "total_count": int?, "data": [...]}

Reglas:
- Inmutable: avanzar de página siempre produce una instancia nueva.
- Cada página decodificada recuerda la request que la produjo (`request`),
  de modo que la siguiente página reutiliza los mismos filtros.
"""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

ItemT = TypeVar("ItemT")


class ListObject(BaseModel, Generic[ItemT]):
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    object: Literal["list"] = Field(
        default="list",
        description="Discriminador constante del sobre.",
    )
    url: str = Field(
        ...,
        description="Path de la colección tal como lo devuelve la API (p.ej. '/v1/charges').",
    )
    has_more: bool = Field(
        ...,
        description="Indica si existen más elementos después de esta página.",
    )
    total_count: int | None = Field(
        default=None,
        ge=0,
        description="Total de elementos de la colección (solo si se solicitó).",
    )
    data: list[ItemT] = Field(
        default_factory=list,
        description="Elementos de la página, en el orden devuelto por la API.",
    )

    _request: Any = PrivateAttr(default=None)

    @model_validator(mode="after")
    def _data_within_total(self) -> "ListObject[ItemT]":
        if self.total_count is not None and len(self.data) > self.total_count:
            raise ValueError("list envelope holds more items than total_count")
        return self

    @classmethod
    def item_type(cls) -> Any:
        """Tipo de elemento de una especialización (`ListObject[Charge]` -> `Charge`)."""

        args = cls.__pydantic_generic_metadata__.get("args") or ()
        return args[0] if args else None

    @property
    def request(self) -> Any:
        """Request de listado que produjo esta página (None en listas embebidas)."""

        return self._request

    def bind(self, request: Any) -> "ListObject[ItemT]":
        """Copia de esta página asociada a `request`; la instancia original no cambia."""

        bound = self.model_copy()
        bound._request = request
        return bound

    @property
    def last_id(self) -> str | None:
        if not self.data:
            return None
        last = self.data[-1]
        if isinstance(last, dict):
            value = last.get("id")
        else:
            value = getattr(last, "id", None)
        return value if isinstance(value, str) else None

    def terminal(self) -> "ListObject[ItemT]":
        """Página vacía y final que sucede a esta (sin I/O)."""

        empty = type(self)(url=self.url, has_more=False, total_count=self.total_count, data=[])
        return empty.bind(self._request)
