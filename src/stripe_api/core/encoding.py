"""Codec de parámetros: objeto estructurado -> query string o cuerpo form-urlencoded.

Reglas de aplanado:
- Mappings y modelos anidados: `shipping[address][city]=...`.
- Listas: claves indexadas, `items[0][type]=...`.
- `None` se omite por completo (nunca se emite como token vacío).
- Una lista o un mapping vacíos tampoco emiten claves: el formato form no
  tiene forma de expresar "vaciar este campo" con un contenedor vacío.
- El orden es el de los campos de origen, así que la salida es determinista.

Un valor de forma no soportada (callable, objeto arbitrario, estructura
cíclica) falla con `MalformedPayload` antes de cualquier I/O.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from types import UnionType
from typing import Annotated, Any, Union, get_args, get_origin
from urllib.parse import urlencode

from pydantic import BaseModel

from stripe_api.core.errors import MalformedPayload
from stripe_api.core.interfaces.request import HTTPMethod

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_KEY_PART_RE = re.compile(r"\[([^\[\]]*)\]")


@dataclass(frozen=True)
class EncodedBody:
    """Parámetros listos para el transporte.

    Exactamente uno de los dos lados lleva los parámetros: `query` para
    métodos que prefieren query string, `body` para el resto.
    """

    query: list[tuple[str, str]] = field(default_factory=list)
    body: bytes | None = None
    content_type: str | None = None

    @property
    def query_string(self) -> str:
        return urlencode(self.query)


def encode_parameters(method: HTTPMethod, parameters: Any) -> EncodedBody:
    pairs = flatten_parameters(parameters)
    if method.prefers_query_parameters:
        return EncodedBody(query=pairs)
    if parameters is None:
        return EncodedBody()
    return EncodedBody(body=urlencode(pairs).encode("ascii"), content_type=FORM_CONTENT_TYPE)


def flatten_parameters(parameters: Any) -> list[tuple[str, str]]:
    """Aplana un modelo o mapping a una lista ordenada de pares clave/valor."""

    if parameters is None:
        return []
    root = _as_mapping(parameters)
    if root is None:
        raise MalformedPayload(f"parameters must be a mapping or a model, got {type(parameters).__name__}")

    pairs: list[tuple[str, str]] = []
    _flatten_into(pairs, root, prefix=None, active=set())
    return pairs


def _as_mapping(value: Any) -> Mapping[Any, Any] | None:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="python", exclude_none=True, by_alias=True)
    if isinstance(value, Mapping):
        return value
    return None


def _flatten_into(
    pairs: list[tuple[str, str]],
    value: Any,
    *,
    prefix: str | None,
    active: set[int],
) -> None:
    if value is None:
        return

    nested = _as_mapping(value)
    if nested is not None or _is_sequence(value):
        marker = id(value)
        if marker in active:
            raise MalformedPayload(f"cyclic structure in parameter {prefix!r}")
        active.add(marker)
        try:
            if nested is not None:
                for raw_key, item in nested.items():
                    name = str(raw_key.value if isinstance(raw_key, Enum) else raw_key)
                    _flatten_into(pairs, item, prefix=f"{prefix}[{name}]" if prefix else name, active=active)
            else:
                for index, item in enumerate(value):
                    _flatten_into(pairs, item, prefix=f"{prefix}[{index}]", active=active)
        finally:
            active.discard(marker)
        return

    if prefix is None:
        raise MalformedPayload("parameter values require a key")
    pairs.append((prefix, _scalar_to_str(value, key=prefix)))


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _scalar_to_str(value: Any, *, key: str) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _scalar_to_str(value.value, key=key)
    if isinstance(value, datetime):
        return str(int(value.timestamp()))
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (str, int, float, Decimal)):
        return str(value)
    raise MalformedPayload(f"unsupported value for parameter {key!r}: {type(value).__name__}")


def unflatten_pairs(pairs: Sequence[tuple[str, str]], shape: Any = None) -> dict[str, Any]:
    """Inversa de `flatten_parameters` (los valores vuelven como strings).

    `shape` (normalmente el modelo de parámetros destino) decide qué nodos
    son listas: un campo declarado como mapping conserva sus claves aunque
    sean `"0".."n"`. Donde el tipo no se conoce, las claves numéricas
    consecutivas desde 0 se reconstruyen como listas.
    """

    tree: dict[str, Any] = {}
    for key, value in pairs:
        parts = _split_key(key)
        node = tree
        for part in parts[:-1]:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                raise MalformedPayload(f"conflicting parameter key {key!r}")
            node = child
        if isinstance(node.get(parts[-1]), dict):
            raise MalformedPayload(f"conflicting parameter key {key!r}")
        node[parts[-1]] = value
    return {key: _rebuild(value, _child_shape(shape, key)) for key, value in tree.items()}


def _split_key(key: str) -> list[str]:
    head, _, rest = key.partition("[")
    if not head:
        raise MalformedPayload(f"invalid parameter key {key!r}")
    parts = [head]
    if rest:
        tail = "[" + rest
        found = _KEY_PART_RE.findall(tail)
        if "".join(f"[{p}]" for p in found) != tail:
            raise MalformedPayload(f"invalid parameter key {key!r}")
        parts.extend(found)
    return parts


_MAPPING = "mapping"
_SEQUENCE = "sequence"


def _rebuild(node: Any, shape: Any) -> Any:
    if not isinstance(node, dict):
        return node
    converted = {k: _rebuild(v, _child_shape(shape, k)) for k, v in node.items()}
    if _container_kind(shape) == _MAPPING:
        return converted
    keys = list(converted)
    if keys and all(k.isdigit() for k in keys) and sorted(int(k) for k in keys) == list(range(len(keys))):
        return [converted[str(i)] for i in range(len(keys))]
    return converted


def _resolve(shape: Any) -> Any:
    """Quita `Optional[...]` y `Annotated[...]`; las uniones ambiguas quedan como están."""

    origin = get_origin(shape)
    if origin is Annotated:
        return _resolve(get_args(shape)[0])
    if origin is Union or origin is UnionType:
        candidates = [arg for arg in get_args(shape) if arg is not type(None)]
        if len(candidates) == 1:
            return _resolve(candidates[0])
    return shape


def _container_kind(shape: Any) -> str | None:
    shape = _resolve(shape)
    if shape is None or shape is Any:
        return None
    origin = get_origin(shape) or shape
    if not isinstance(origin, type) or issubclass(origin, (str, bytes, bytearray)):
        return None
    if issubclass(origin, (BaseModel, Mapping)):
        return _MAPPING
    if issubclass(origin, Sequence):
        return _SEQUENCE
    return None


def _child_shape(shape: Any, key: str) -> Any:
    shape = _resolve(shape)
    if isinstance(shape, type) and issubclass(shape, BaseModel):
        for name, info in shape.model_fields.items():
            if key in (name, info.alias):
                return info.annotation
        return None
    args = get_args(shape)
    kind = _container_kind(shape)
    if kind == _MAPPING and len(args) == 2:
        return args[1]
    if kind == _SEQUENCE and args:
        return args[0]
    return None
