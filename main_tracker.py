"""Mini README: Entry point CLI for the Expense Tracker.

This script exposes a Typer CLI that starts the FastAPI control panel and
offers the same operations from a terminal: adding and deleting
transactions, listing them with filters, printing the balance overview, and
exporting CSV or the printable report. Settings come from environment
variables or ``.env`` when available.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import uvicorn

from expensetracker.analytics import expenses_by_category, summarise_balance
from expensetracker.configuration import get_settings
from expensetracker.export import CSV_FILENAME, REPORT_FILENAME, CsvExporter, ReportExporter
from expensetracker.interface.messages import (
    CSV_EXPORTED_MESSAGE,
    DELETED_MESSAGE,
    REPORT_EXPORTED_MESSAGE,
    added_message,
)
from expensetracker.logging_utils import configure_root_logger
from expensetracker.storage import LocalStorage
from expensetracker.transactions import (
    TransactionStore,
    TransactionValidationError,
    parse_transaction_form,
)
from expensetracker.utils.formatting import format_currency, format_local_date
from expensetracker.views import TransactionQuery

cli = typer.Typer(help="Track income and expenses from the terminal or the web control panel.")


def _open_store() -> TransactionStore:
    settings = get_settings()
    configure_root_logger(settings.log_level)
    store = TransactionStore(LocalStorage(settings.storage_path), storage_key=settings.storage_key)
    if store.load_error:
        typer.secho(store.load_error, fg=typer.colors.YELLOW, err=True)
    return store


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the control panel using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # 0.0.0.0 cannot be typed into a browser, so point at loopback instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Expense Tracker on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "expensetracker.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def add(
    description: str = typer.Argument(..., help="What the money was for."),
    amount: str = typer.Argument(..., help="Positive amount; the sign comes from --type."),
    category: Optional[str] = typer.Option(None, help="Category, defaults to the configured one."),
    transaction_type: str = typer.Option("expense", "--type", help="expense or income."),
) -> None:
    """Record a new transaction."""

    store = _open_store()
    try:
        entry = parse_transaction_form(
            description,
            amount,
            category,
            transaction_type,
            default_category=get_settings().default_category,
        )
    except TransactionValidationError as error:
        typer.secho(str(error), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    transaction = store.add_transaction(entry)
    typer.secho(added_message(transaction.type), fg=typer.colors.GREEN)
    typer.echo(f"id: {transaction.id}")


@cli.command()
def delete(
    transaction_id: int = typer.Argument(..., help="Id of the transaction to delete."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Delete a transaction after confirmation."""

    store = _open_store()
    try:
        transaction = store.get_transaction(transaction_id)
    except KeyError as error:
        typer.secho(str(error.args[0]), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    if not yes:
        typer.confirm(
            f"Delete '{transaction.description}'? This action cannot be undone.", abort=True
        )
    store.delete_transaction(transaction_id)
    typer.secho(DELETED_MESSAGE, fg=typer.colors.GREEN)


@cli.command("list")
def list_transactions(
    type_filter: str = typer.Option("all", "--filter", help="all, income or expenses."),
    date_range: str = typer.Option("all", "--range", help="all, week or month."),
    sort_by: str = typer.Option("date", "--sort", help="date or amount."),
) -> None:
    """Print transactions matching the filters."""

    try:
        query = TransactionQuery.from_strings(type_filter, date_range, sort_by)
    except ValueError as error:
        raise typer.BadParameter(str(error)) from error
    store = _open_store()
    symbol = get_settings().currency_symbol
    visible = query.apply(store.transactions)
    if not visible:
        typer.echo("No transactions found.")
        return
    for transaction in visible:
        sign = "+" if transaction.amount >= 0 else "-"
        typer.echo(
            f"{transaction.id}  {format_local_date(transaction.date):>10}  "
            f"{transaction.category:<13} {sign}{format_currency(abs(transaction.amount), symbol):>14}  "
            f"{transaction.description}"
        )


@cli.command()
def summary() -> None:
    """Print the balance overview and expenses by category."""

    store = _open_store()
    symbol = get_settings().currency_symbol
    totals = summarise_balance(store.transactions)
    typer.echo(f"Total Balance:  {format_currency(totals.balance, symbol)}")
    typer.echo(f"Total Income:   {format_currency(totals.income, symbol)}")
    typer.echo(f"Total Expenses: {format_currency(abs(totals.expenses), symbol)}")
    for category, total in expenses_by_category(store.transactions).items():
        typer.echo(f"  {category:<13} {format_currency(total, symbol)}")


@cli.command("export-csv")
def export_csv(
    destination: Optional[Path] = typer.Option(None, help="Output file path."),
) -> None:
    """Write every transaction to a CSV file."""

    store = _open_store()
    target = destination or get_settings().data_directory / CSV_FILENAME
    CsvExporter().export(store.transactions, target)
    typer.secho(f"{CSV_EXPORTED_MESSAGE} ({target})", fg=typer.colors.GREEN)


@cli.command("export-report")
def export_report(
    destination: Optional[Path] = typer.Option(None, help="Output file path."),
    open_browser: bool = typer.Option(True, help="Open the report to print it."),
) -> None:
    """Write the printable HTML report and open it in the browser."""

    store = _open_store()
    settings = get_settings()
    target = destination or settings.data_directory / REPORT_FILENAME
    ReportExporter(currency_symbol=settings.currency_symbol).export(
        store.transactions, target, auto_print=open_browser
    )
    typer.secho(f"{REPORT_EXPORTED_MESSAGE} ({target})", fg=typer.colors.GREEN)
    if open_browser:
        typer.launch(target.resolve().as_uri())


if __name__ == "__main__":
    cli()
