"""Mini README: FastAPI-powered control panel for the Expense Tracker.

Structure:
    * create_application - application factory wiring routes and templates.
    * Routes - dashboard page, JSON API for transactions and totals, exports.

The dashboard renders the balance overview, the expense chart, the add form,
and the filtered transaction list. Mutations go through the JSON API so the
page can show a toast for every outcome, including rejected submissions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..analytics import build_category_chart, expenses_by_category, summarise_balance
from ..configuration import TrackerSettings, get_settings
from ..export import CSV_FILENAME, CsvExporter, ReportExporter
from ..logging_utils import get_logger
from ..storage import LocalStorage
from ..transactions import (
    TransactionStore,
    TransactionType,
    TransactionValidationError,
    parse_transaction_form,
)
from ..utils.formatting import format_currency, format_local_date
from ..views import DateRange, SortKey, TransactionQuery, TypeFilter
from .messages import (
    CONFIRMATION_REQUIRED_MESSAGE,
    DELETED_MESSAGE,
    added_message,
)

LOGGER = get_logger(__name__)


def create_application(
    settings: Optional[TrackerSettings] = None,
    store: Optional[TransactionStore] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    if store is None:
        store = TransactionStore(
            LocalStorage(settings.storage_path), storage_key=settings.storage_key
        )

    app = FastAPI(title="Expense Tracker", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    templates.env.filters["currency"] = lambda amount: format_currency(
        amount, settings.currency_symbol
    )
    templates.env.filters["local_date"] = format_local_date
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    csv_exporter = CsvExporter()
    report_exporter = ReportExporter(currency_symbol=settings.currency_symbol)

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(
        request: Request,
        type_filter: TypeFilter = TypeFilter.ALL,
        date_range: DateRange = DateRange.ALL,
        sort_by: SortKey = SortKey.DATE,
    ) -> HTMLResponse:
        """Render the balance overview, chart, form, and transaction list."""

        transactions = store.transactions
        query = TransactionQuery(type_filter=type_filter, date_range=date_range, sort_by=sort_by)
        toast = store.load_error
        store.load_error = None
        chart = build_category_chart(transactions)
        LOGGER.debug("Rendering dashboard with %s transactions", len(transactions))
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "summary": summarise_balance(transactions),
                "chart_segments": chart.segments() if chart else [],
                "transactions": query.apply(transactions),
                "query": query,
                "type_filters": list(TypeFilter),
                "date_ranges": list(DateRange),
                "sort_keys": list(SortKey),
                "categories": settings.categories,
                "default_category": settings.default_category,
                "toast": toast,
            },
        )

    @app.get("/api/transactions")
    async def list_transactions(
        type_filter: TypeFilter = TypeFilter.ALL,
        date_range: DateRange = DateRange.ALL,
        sort_by: SortKey = SortKey.DATE,
    ) -> JSONResponse:
        """Return the filtered and sorted transaction list."""

        query = TransactionQuery(type_filter=type_filter, date_range=date_range, sort_by=sort_by)
        visible = query.apply(store.transactions)
        return JSONResponse({"transactions": [transaction.as_dict() for transaction in visible]})

    @app.post("/api/transactions", status_code=201)
    async def add_transaction(
        description: str = Form(""),
        amount: str = Form(""),
        category: str = Form(""),
        transaction_type: str = Form(TransactionType.EXPENSE.value),
    ) -> JSONResponse:
        """Validate a submission and prepend it to the list."""

        try:
            entry = parse_transaction_form(
                description,
                amount,
                category,
                transaction_type,
                default_category=settings.default_category,
            )
        except TransactionValidationError as error:
            LOGGER.info("Rejected submission: %s", error)
            raise HTTPException(status_code=400, detail=str(error)) from error
        transaction = store.add_transaction(entry)
        return JSONResponse(
            {"transaction": transaction.as_dict(), "toast": added_message(transaction.type)},
            status_code=201,
        )

    @app.post("/api/transactions/{transaction_id}/delete")
    async def delete_transaction(
        transaction_id: int,
        confirm: bool = Form(False),
    ) -> JSONResponse:
        """Delete a transaction once the user has confirmed it."""

        if not confirm:
            raise HTTPException(status_code=409, detail=CONFIRMATION_REQUIRED_MESSAGE)
        try:
            removed = store.delete_transaction(transaction_id)
        except KeyError as error:
            raise HTTPException(status_code=404, detail=str(error.args[0])) from error
        return JSONResponse({"deleted": removed.id, "toast": DELETED_MESSAGE})

    @app.get("/api/summary")
    async def summary() -> JSONResponse:
        """Return balance totals and absolute expense totals per category."""

        transactions = store.transactions
        payload: Dict[str, object] = summarise_balance(transactions).as_dict()
        payload["categories"] = expenses_by_category(transactions)
        return JSONResponse(payload)

    @app.get("/api/chart")
    async def chart() -> JSONResponse:
        """Return chart labels, values, and colours (empty without expenses)."""

        category_chart = build_category_chart(store.transactions)
        if category_chart is None:
            return JSONResponse({"labels": [], "values": [], "colours": []})
        return JSONResponse(category_chart.as_dict())

    @app.get("/export/csv")
    async def export_csv() -> Response:
        """Download every transaction as CSV."""

        content = csv_exporter.render(store.transactions)
        LOGGER.info("Serving CSV export with %s transactions", len(store))
        return Response(
            content=content,
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
        )

    @app.get("/export/report", response_class=HTMLResponse)
    async def export_report(auto_print: bool = True) -> HTMLResponse:
        """Return the printable report; it opens the print dialog on load."""

        LOGGER.info("Serving printable report with %s transactions", len(store))
        return HTMLResponse(report_exporter.render(store.transactions, auto_print=auto_print))

    return app
