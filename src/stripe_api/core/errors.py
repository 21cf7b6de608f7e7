"""Taxonomía de errores del binding.

Reglas:
- Todo error es una subclase de `StripeAPIError`: el llamador puede capturar
  la familia completa o una variante concreta.
- Los errores de decodificación conservan el payload crudo (`raw`) para
  diagnóstico.
- `RemoteError` y `DecodeError` son ramas distintas: un 402 nunca se confunde
  con un JSON mal formado.
"""

from __future__ import annotations

import json
from typing import Any


class StripeAPIError(Exception):
    """Raíz de la jerarquía."""


class ConfigError(StripeAPIError):
    """Configuración ausente o inválida (p.ej. sin secret key)."""


class TransportFailure(StripeAPIError):
    """Fallo de red/conexión reportado por el transporte."""

    def __init__(self, message: str, *, method: str | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class RemoteError(StripeAPIError):
    """Respuesta HTTP fuera del rango 2xx."""

    def __init__(self, *, method: str, path: str, status: int, body: bytes) -> None:
        self.method = method
        self.path = path
        self.status = status
        self.body = body
        self.error = _parse_error_envelope(body)
        super().__init__(f"{method} {path} failed with HTTP {status}: {self.message or 'no message'}")

    @property
    def error_type(self) -> str | None:
        return _as_str(self.error.get("type"))

    @property
    def code(self) -> str | None:
        return _as_str(self.error.get("code"))

    @property
    def message(self) -> str | None:
        return _as_str(self.error.get("message"))

    @property
    def param(self) -> str | None:
        return _as_str(self.error.get("param"))


class DecodeError(StripeAPIError):
    """Base de los fallos de (de)serialización."""

    def __init__(self, message: str, *, raw: bytes | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class MalformedPayload(DecodeError):
    """Bytes que no son JSON válido, o parámetros imposibles de codificar."""


class UnexpectedShape(DecodeError):
    """JSON bien formado al que le falta la estructura requerida."""


class FieldTypeMismatch(DecodeError):
    """Un campo no coincide con su tipo declarado."""

    def __init__(self, field: str, message: str | None = None, *, raw: bytes | None = None) -> None:
        super().__init__(message or f"field {field!r} has an unexpected type", raw=raw)
        self.field = field


def _parse_error_envelope(body: bytes) -> dict[str, Any]:
    # Stripe: {"error": {"type": ..., "code": ..., "message": ..., "param": ...}}
    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return {}
    if not isinstance(payload, dict):
        return {}
    error = payload.get("error")
    return error if isinstance(error, dict) else {}


def _as_str(value: object) -> str | None:
    return value if isinstance(value, str) else None
