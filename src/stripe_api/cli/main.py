"""Entry point of the `stripe-api` command line.

Each command builds one request value, runs it through `StripeClient` and
prints the decoded result. Generic `-p key[sub]=value` options go through
the parameter codec (`unflatten_pairs`) and are validated into the
operation's parameter model.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console

from stripe_api.adapters.resources import (
    CreateCard,
    CreateCharge,
    CreateCustomer,
    DeleteCard,
    DeleteCustomer,
    ListCards,
    ListCharges,
    ListCustomers,
    ListOrders,
    ListProducts,
    ListSKUs,
    RetrieveCard,
    RetrieveCharge,
    RetrieveCustomer,
    RetrieveOrder,
    RetrieveProduct,
    RetrieveSKU,
    UpdateCustomer,
)
from stripe_api.cli import doctor
from stripe_api.cli.ui_components import build_error_panel, build_list_table, configure_logging, print_model
from stripe_api.core.config import AppSettings
from stripe_api.core.domain.parameters import (
    CardCreateParams,
    CardListParams,
    ChargeCreateParams,
    ChargeListParams,
    CustomerListParams,
    CustomerParams,
    OrderListParams,
    ProductListParams,
    SKUListParams,
)
from stripe_api.core.encoding import unflatten_pairs
from stripe_api.core.errors import StripeAPIError
from stripe_api.core.requests import ListRequest
from stripe_api.core.services.client import StripeClient

T = TypeVar("T")
ParamsT = TypeVar("ParamsT", bound=BaseModel)

app = typer.Typer(no_args_is_help=True, help="Typed client for the Stripe REST API.")
customers_app = typer.Typer(no_args_is_help=True, help="Customers (/customers).")
cards_app = typer.Typer(no_args_is_help=True, help="Customer cards (/customers/{id}/sources).")
charges_app = typer.Typer(no_args_is_help=True, help="Charges (/charges).")
products_app = typer.Typer(no_args_is_help=True, help="Products (/products).")
skus_app = typer.Typer(no_args_is_help=True, help="SKUs (/skus).")
orders_app = typer.Typer(no_args_is_help=True, help="Orders (/orders).")

app.add_typer(customers_app, name="customers")
app.add_typer(cards_app, name="cards")
app.add_typer(charges_app, name="charges")
app.add_typer(products_app, name="products")
app.add_typer(skus_app, name="skus")
app.add_typer(orders_app, name="orders")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

_PARAM_HELP = "Extra parameter as key=value; nested keys use brackets (shipping[address][city]=Paris)."


def build_client(settings: AppSettings) -> StripeClient:
    return StripeClient.from_settings(settings)


def _call(operation: Callable[[StripeClient], Awaitable[T]]) -> T:
    settings = AppSettings()

    async def runner() -> T:
        async with build_client(settings) as client:
            return await operation(client)

    try:
        return asyncio.run(runner())
    except StripeAPIError as exc:
        _err_console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc


def _parse_params(raw: list[str] | None, model: type[ParamsT], **known: Any) -> ParamsT:
    pairs: list[tuple[str, str]] = []
    for item in raw or []:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got {item!r}", param_hint="--param")
        pairs.append((key.strip(), value))

    try:
        values = unflatten_pairs(pairs, model)
    except StripeAPIError as exc:
        raise typer.BadParameter(str(exc), param_hint="--param") from exc
    values.update({k: v for k, v in known.items() if v is not None})

    try:
        return model.model_validate(values)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--param") from exc


def _show(value: BaseModel) -> None:
    print_model(_console, value)


def _show_list(title: str, columns: list[str], request: ListRequest[Any], *, fetch_all: bool, max_pages: int | None) -> None:
    if fetch_all:

        async def collect(client: StripeClient) -> list[Any]:
            return [item async for item in client.iterate(request, max_pages=max_pages)]

        items = _call(collect)
        has_more = False
    else:
        page = _call(lambda client: client.fetch_first_page(request))
        items = page.data
        has_more = page.has_more

    _console.print(build_list_table(title, columns, items))
    if has_more:
        _console.print("[dim]More results available; use --all to fetch every page.[/dim]")


def _limit(limit: int | None) -> int | None:
    return limit if limit is not None else AppSettings().default_page_size


# Customers

@customers_app.command("get")
def customers_get(customer_id: str = typer.Argument(..., help="Customer id (cus_...).")) -> None:
    """Retrieve a customer."""

    _show(_call(lambda client: client.send(RetrieveCustomer(id=customer_id))))


@customers_app.command("create")
def customers_create(
    email: str | None = typer.Option(None, "--email", help="Customer email."),
    description: str | None = typer.Option(None, "--description", help="Free-form description."),
    source: str | None = typer.Option(None, "--source", help="Card token (tok_...)."),
    param: list[str] | None = typer.Option(None, "--param", "-p", help=_PARAM_HELP),
) -> None:
    """Create a customer."""

    params = _parse_params(param, CustomerParams, email=email, description=description, source=source)
    _show(_call(lambda client: client.send(CreateCustomer(params=params))))


@customers_app.command("update")
def customers_update(
    customer_id: str = typer.Argument(..., help="Customer id (cus_...)."),
    param: list[str] | None = typer.Option(None, "--param", "-p", help=_PARAM_HELP),
) -> None:
    """Update a customer with the given fields."""

    params = _parse_params(param, CustomerParams)
    _show(_call(lambda client: client.send(UpdateCustomer(id=customer_id, params=params))))


@customers_app.command("delete")
def customers_delete(customer_id: str = typer.Argument(..., help="Customer id (cus_...).")) -> None:
    """Delete a customer."""

    _show(_call(lambda client: client.send(DeleteCustomer(id=customer_id))))


@customers_app.command("list")
def customers_list(
    email: str | None = typer.Option(None, "--email", help="Filter by email."),
    limit: int | None = typer.Option(None, "--limit", min=1, max=100, help="Page size."),
    fetch_all: bool = typer.Option(False, "--all", help="Follow the cursor through every page."),
    max_pages: int | None = typer.Option(None, "--max-pages", min=1, help="Stop after N pages."),
) -> None:
    """List customers."""

    params = CustomerListParams(email=email, limit=_limit(limit))
    _show_list(
        "Customers",
        ["id", "email", "description", "created"],
        ListCustomers(params=params),
        fetch_all=fetch_all,
        max_pages=max_pages,
    )


# Cards

@cards_app.command("get")
def cards_get(
    customer_id: str = typer.Argument(..., help="Customer id (cus_...)."),
    card_id: str = typer.Argument(..., help="Card id (card_...)."),
) -> None:
    """Retrieve a customer's card."""

    _show(_call(lambda client: client.send(RetrieveCard(customer=customer_id, id=card_id))))


@cards_app.command("add")
def cards_add(
    customer_id: str = typer.Argument(..., help="Customer id (cus_...)."),
    source: str = typer.Argument(..., help="Card token (tok_...)."),
) -> None:
    """Attach a card token to a customer."""

    request = CreateCard(customer=customer_id, params=CardCreateParams(source=source))
    _show(_call(lambda client: client.send(request)))


@cards_app.command("delete")
def cards_delete(
    customer_id: str = typer.Argument(..., help="Customer id (cus_...)."),
    card_id: str = typer.Argument(..., help="Card id (card_...)."),
) -> None:
    """Detach a card from a customer."""

    _show(_call(lambda client: client.send(DeleteCard(customer=customer_id, id=card_id))))


@cards_app.command("list")
def cards_list(
    customer_id: str = typer.Argument(..., help="Customer id (cus_...)."),
    limit: int | None = typer.Option(None, "--limit", min=1, max=100, help="Page size."),
    fetch_all: bool = typer.Option(False, "--all", help="Follow the cursor through every page."),
    max_pages: int | None = typer.Option(None, "--max-pages", min=1, help="Stop after N pages."),
) -> None:
    """List a customer's cards."""

    request = ListCards(customer=customer_id, params=CardListParams(limit=_limit(limit)))
    _show_list(
        "Cards",
        ["id", "brand", "last4", "exp_month", "exp_year"],
        request,
        fetch_all=fetch_all,
        max_pages=max_pages,
    )


# Charges

@charges_app.command("get")
def charges_get(charge_id: str = typer.Argument(..., help="Charge id (ch_...).")) -> None:
    """Retrieve a charge."""

    _show(_call(lambda client: client.send(RetrieveCharge(id=charge_id))))


@charges_app.command("create")
def charges_create(
    amount: int = typer.Option(..., "--amount", help="Amount in the smallest currency unit."),
    currency: str = typer.Option(..., "--currency", help="Three-letter ISO currency code."),
    customer: str | None = typer.Option(None, "--customer", help="Customer id to charge."),
    description: str | None = typer.Option(None, "--description", help="Charge description."),
    param: list[str] | None = typer.Option(None, "--param", "-p", help=_PARAM_HELP),
) -> None:
    """Create a charge."""

    params = _parse_params(
        param,
        ChargeCreateParams,
        amount=amount,
        currency=currency,
        customer=customer,
        description=description,
    )
    _show(_call(lambda client: client.send(CreateCharge(params=params))))


@charges_app.command("list")
def charges_list(
    customer: str | None = typer.Option(None, "--customer", help="Filter by customer id."),
    limit: int | None = typer.Option(None, "--limit", min=1, max=100, help="Page size."),
    fetch_all: bool = typer.Option(False, "--all", help="Follow the cursor through every page."),
    max_pages: int | None = typer.Option(None, "--max-pages", min=1, help="Stop after N pages."),
) -> None:
    """List charges."""

    params = ChargeListParams(customer=customer, limit=_limit(limit))
    _show_list(
        "Charges",
        ["id", "amount", "currency", "customer", "status"],
        ListCharges(params=params),
        fetch_all=fetch_all,
        max_pages=max_pages,
    )


# Products / SKUs / Orders

@products_app.command("get")
def products_get(product_id: str = typer.Argument(..., help="Product id.")) -> None:
    """Retrieve a product."""

    _show(_call(lambda client: client.send(RetrieveProduct(id=product_id))))


@products_app.command("list")
def products_list(
    active: bool | None = typer.Option(None, "--active/--inactive", help="Filter by active flag."),
    limit: int | None = typer.Option(None, "--limit", min=1, max=100, help="Page size."),
    fetch_all: bool = typer.Option(False, "--all", help="Follow the cursor through every page."),
    max_pages: int | None = typer.Option(None, "--max-pages", min=1, help="Stop after N pages."),
) -> None:
    """List products."""

    params = ProductListParams(active=active, limit=_limit(limit))
    _show_list(
        "Products",
        ["id", "name", "type", "active"],
        ListProducts(params=params),
        fetch_all=fetch_all,
        max_pages=max_pages,
    )


@skus_app.command("get")
def skus_get(sku_id: str = typer.Argument(..., help="SKU id.")) -> None:
    """Retrieve a SKU."""

    _show(_call(lambda client: client.send(RetrieveSKU(id=sku_id))))


@skus_app.command("list")
def skus_list(
    product: str | None = typer.Option(None, "--product", help="Filter by product id."),
    limit: int | None = typer.Option(None, "--limit", min=1, max=100, help="Page size."),
    fetch_all: bool = typer.Option(False, "--all", help="Follow the cursor through every page."),
    max_pages: int | None = typer.Option(None, "--max-pages", min=1, help="Stop after N pages."),
) -> None:
    """List SKUs."""

    params = SKUListParams(product=product, limit=_limit(limit))
    _show_list(
        "SKUs",
        ["id", "product", "price", "currency"],
        ListSKUs(params=params),
        fetch_all=fetch_all,
        max_pages=max_pages,
    )


@orders_app.command("get")
def orders_get(order_id: str = typer.Argument(..., help="Order id (or_...).")) -> None:
    """Retrieve an order."""

    _show(_call(lambda client: client.send(RetrieveOrder(id=order_id))))


@orders_app.command("list")
def orders_list(
    customer: str | None = typer.Option(None, "--customer", help="Filter by customer id."),
    status: str | None = typer.Option(None, "--status", help="Filter by order status."),
    limit: int | None = typer.Option(None, "--limit", min=1, max=100, help="Page size."),
    fetch_all: bool = typer.Option(False, "--all", help="Follow the cursor through every page."),
    max_pages: int | None = typer.Option(None, "--max-pages", min=1, help="Stop after N pages."),
) -> None:
    """List orders."""

    params = OrderListParams(customer=customer, status=status, limit=_limit(limit))
    _show_list(
        "Orders",
        ["id", "amount", "currency", "status", "customer"],
        ListOrders(params=params),
        fetch_all=fetch_all,
        max_pages=max_pages,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Typed client for the Stripe REST API."""

    level = "DEBUG" if verbose else AppSettings().log_level
    configure_logging(level, _err_console)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
