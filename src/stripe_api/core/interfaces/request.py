"""Contrato de request.

Cada endpoint es un valor inmutable que expone método, path, parámetros y
cómo decodificar su respuesta. La autenticación y el codec son comunes y
viven fuera del contrato (`stripe_api.core.services.executor`).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, TypeVar, runtime_checkable

ResponseT_co = TypeVar("ResponseT_co", covariant=True)


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"

    @property
    def prefers_query_parameters(self) -> bool:
        """GET/DELETE llevan los parámetros en la query string."""

        return self in (HTTPMethod.GET, HTTPMethod.DELETE)


@runtime_checkable
class StripeRequest(Protocol[ResponseT_co]):
    """Contrato mínimo de un endpoint.

    - `path` es relativo a la base URL y ya viene percent-encoded.
    - `parameters` es un modelo, un mapping o `None`.
    - `decode_response` lanza `DecodeError` si los bytes no encajan.
    """

    @property
    def method(self) -> HTTPMethod: ...

    @property
    def path(self) -> str: ...

    @property
    def parameters(self) -> Any: ...

    def decode_response(self, raw: bytes) -> ResponseT_co: ...
