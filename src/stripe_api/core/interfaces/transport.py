"""Contrato del ejecutor de transporte (I/O de red)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class TransportExecutor(Protocol):
    """Ejecuta una llamada HTTP y devuelve `(status, bytes crudos)`.

    Reglas:
    - Es asíncrono: el Core solo se suspende aquí.
    - Los fallos de red se lanzan como `TransportFailure`; un status no-2xx
      NO es un fallo de transporte.
    - Timeouts y cancelación son responsabilidad del transporte.
    """

    async def execute(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: bytes | None = None,
    ) -> tuple[int, bytes]:
        ...
