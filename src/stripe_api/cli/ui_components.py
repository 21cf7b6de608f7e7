"""Componentes de UI para la CLI (Rich).

Tablas y paneles reutilizables; los comandos solo deciden qué mostrar.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from stripe_api.core.errors import DecodeError, RemoteError, StripeAPIError


def configure_logging(level: str, console: Console | None = None) -> None:
    """Instala un `RichHandler` en el logger raíz del paquete."""

    handler = RichHandler(console=console or Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger("stripe_api")
    logger.handlers[:] = [handler]
    logger.setLevel(level)


def print_model(console: Console, value: BaseModel) -> None:
    console.print_json(value.model_dump_json(exclude_none=True))


def build_list_table(title: str, columns: Sequence[str], items: Iterable[Any]) -> Table:
    """Tabla con una fila por elemento; celdas vacías para atributos ausentes."""

    table = Table(title=title)
    for index, column in enumerate(columns):
        table.add_column(column, style="cyan" if index == 0 else "white", no_wrap=index == 0)
    for item in items:
        row = []
        for column in columns:
            value = item.get(column) if isinstance(item, dict) else getattr(item, column, None)
            row.append("" if value is None else str(value))
        table.add_row(*row)
    return table


def build_error_panel(error: StripeAPIError) -> Panel:
    body = Text(str(error))
    if isinstance(error, RemoteError):
        body.append(f"\n\nstatus: {error.status}", style="bold")
        if error.error_type:
            body.append(f"\ntype: {error.error_type}")
        if error.code:
            body.append(f"\ncode: {error.code}")
        if error.param:
            body.append(f"\nparam: {error.param}")
    elif isinstance(error, DecodeError) and error.raw:
        preview = error.raw[:500].decode("utf-8", errors="replace")
        body.append(f"\n\nraw: {preview}", style="dim")
    title = Text(type(error).__name__, style="bold red")
    return Panel(body, title=title, border_style="red")
