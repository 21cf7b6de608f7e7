"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from stripe_api.adapters.resources import ListCustomers
from stripe_api.core.config import AppSettings, get_user_env_file, write_user_env_vars
from stripe_api.core.domain.parameters import CustomerListParams
from stripe_api.core.errors import RemoteError, StripeAPIError
from stripe_api.core.services.client import StripeClient

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _mask(secret: str) -> str:
    if len(secret) <= 12:
        return "***"
    return f"{secret[:8]}...{secret[-4:]}"


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """Smallest authenticated call: the first customer page with limit=1."""

    try:
        async with StripeClient.from_settings(settings) as client:
            page = await client.send(ListCustomers(params=CustomerListParams(limit=1)))
        return True, f"OK ({page.url})"
    except RemoteError as exc:
        return False, f"HTTP {exc.status}: {exc.message or 'no message'}"
    except StripeAPIError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="stripe-api Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    secret = settings.secret_key.get_secret_value() if settings.secret_key else ""
    if secret:
        mode = "test" if secret.startswith(("sk_test_", "rk_test_")) else "live"
        table.add_row("Secret key", "OK", f"{_mask(secret)} ({mode} mode)")
    else:
        table.add_row("Secret key", "MISSING", "Set STRIPE_API_SECRET_KEY or run `stripe-api doctor setup-key`")
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "ABSENT", str(get_user_env_file()))

    # Connectivity + auth (best-effort)
    if secret:
        ok_api, detail_api = asyncio.run(_check_api(settings))
        table.add_row("API access", "OK" if ok_api else "FAIL", detail_api)
    else:
        table.add_row("API access", "SKIPPED", "No secret key")

    _console.print(table)


@app.command(name="setup-key")
def setup_key() -> None:
    """Interactive setup: stores the secret key in the user config .env."""

    secret = typer.prompt("Stripe secret key", hide_input=True, confirmation_prompt=False).strip()
    if not secret.startswith(("sk_", "rk_")):
        raise typer.BadParameter("expected a secret (sk_...) or restricted (rk_...) key")

    base_url = typer.prompt("API base URL", default=AppSettings().api_base_url, show_default=True).strip()

    env_path = write_user_env_vars(
        {
            "STRIPE_API_SECRET_KEY": secret,
            "STRIPE_API_API_BASE_URL": base_url,
        }
    )

    _console.print(f"[green]Saved Stripe config to:[/green] {env_path}")
