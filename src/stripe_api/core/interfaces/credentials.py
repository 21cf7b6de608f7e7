"""Contrato del proveedor de credenciales."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CredentialProvider(Protocol):
    """Fuente de la secret key; solo lectura, segura para lecturas concurrentes."""

    def current_secret_key(self) -> str:
        ...
