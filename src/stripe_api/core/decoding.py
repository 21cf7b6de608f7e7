"""Decodificador de respuestas: bytes crudos -> modelo tipado o `DecodeError`.

Mapeo de fallos:
- bytes vacíos / JSON inválido -> `MalformedPayload`
- JSON válido sin la estructura requerida -> `UnexpectedShape`
- campo con tipo incorrecto (o elemento de lista inválido) -> `FieldTypeMismatch`

Los modelos validan en modo estricto: `"1000"` no es un entero ni `"false"`
un booleano.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from stripe_api.core.domain.listing import ListObject
from stripe_api.core.errors import DecodeError, FieldTypeMismatch, MalformedPayload, UnexpectedShape

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_json(raw: bytes) -> Any:
    if not raw or not raw.strip():
        raise MalformedPayload("empty response body", raw=raw)
    try:
        return json.loads(raw)
    except (ValueError, UnicodeDecodeError) as exc:
        raise MalformedPayload(f"response body is not valid JSON: {exc}", raw=raw) from exc


def is_list_shape(shape: Any) -> bool:
    return isinstance(shape, type) and issubclass(shape, ListObject)


def decode_payload(raw: bytes, shape: type[ModelT]) -> ModelT:
    try:
        payload = parse_json(raw)
        return decode_object(payload, shape, raw=raw)
    except DecodeError as exc:
        logger.debug("Decode of %s failed: %s", getattr(shape, "__name__", shape), exc)
        raise


def decode_object(payload: Any, shape: type[ModelT], *, raw: bytes | None = None) -> ModelT:
    """Valida un objeto JSON ya parseado contra `shape`."""

    if not isinstance(payload, dict):
        raise UnexpectedShape(
            f"expected a JSON object, got {type(payload).__name__}",
            raw=raw,
        )

    list_shape = is_list_shape(shape)
    if list_shape:
        _check_envelope(payload, raw=raw)

    try:
        return shape.model_validate(payload)
    except ValidationError as exc:
        raise _translate(exc, list_shape=list_shape, raw=raw) from exc


def _check_envelope(payload: dict[str, Any], *, raw: bytes | None) -> None:
    if payload.get("object") != "list":
        raise UnexpectedShape("expected a list envelope (object == 'list')", raw=raw)
    if not isinstance(payload.get("data"), list):
        raise UnexpectedShape("list envelope without a 'data' array", raw=raw)


def _translate(exc: ValidationError, *, list_shape: bool, raw: bytes | None) -> DecodeError:
    errors = exc.errors()
    if not errors:
        return UnexpectedShape(str(exc), raw=raw)

    first = errors[0]
    loc = tuple(first.get("loc") or ())
    field = ".".join(str(part) for part in loc)
    message = first.get("msg") or str(exc)

    if not loc:
        return UnexpectedShape(message, raw=raw)
    if list_shape and loc[0] == "data" and len(loc) > 1:
        return FieldTypeMismatch(field, f"list element {field!r} is invalid: {message}", raw=raw)
    if first.get("type") == "missing":
        return UnexpectedShape(f"missing required field {field!r}", raw=raw)
    return FieldTypeMismatch(field, f"field {field!r}: {message}", raw=raw)
