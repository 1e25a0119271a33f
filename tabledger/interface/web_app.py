"""Mini README: FastAPI-powered web interface for Tab Ledger.

Structure:
    * create_application - application factory wiring pages, API routes,
      templates, and the per-process ``TrackerSession``.

The HTML pages mirror the two mobile screens: the tab list and a tab's
ledger. Browser scripts call the JSON routes, show alerts for rejected
input, and ask the user before deleting a tab or resetting a ledger; the
answer arrives here as the ``confirm`` form field.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import get_settings
from ..confirmation import decision_from_flag
from ..errors import TrackerError
from ..finance import Ledger, TransactionType, format_amount
from ..logging_utils import get_logger
from ..session import TrackerSession

LOGGER = get_logger(__name__)


def create_application(session: Optional[TrackerSession] = None) -> FastAPI:
    """Create the FastAPI application with routes and session state."""

    app = FastAPI(title="Tab Ledger", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    templates.env.filters["amount"] = format_amount
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    settings = get_settings()
    app.state.session = session if session is not None else TrackerSession()

    def _session() -> TrackerSession:
        return app.state.session

    def _ledger_for(tab_name: str) -> Ledger:
        if not _session().has_tab(tab_name):
            raise HTTPException(status_code=404, detail=f"Tab '{tab_name}' not found")
        return _session().select_tab(tab_name)

    def _tabs_payload() -> JSONResponse:
        return JSONResponse({"tabs": list(_session().list_tabs())})

    @app.get("/", response_class=HTMLResponse)
    async def tab_list(request: Request) -> HTMLResponse:
        """Render the list of tabs with create and delete controls."""

        tabs = _session().list_tabs()
        LOGGER.debug("Rendering tab list with %s tabs", len(tabs))
        return templates.TemplateResponse(
            request,
            "tabs.html",
            {
                "tabs": [(tab, _session().delete_request(tab)) for tab in tabs],
            },
        )

    @app.get("/tabs/{tab_name:path}", response_class=HTMLResponse)
    async def ledger_page(request: Request, tab_name: str) -> HTMLResponse:
        """Render a tab's ledger with its net income and entries."""

        ledger = _ledger_for(tab_name)
        return templates.TemplateResponse(
            request,
            "ledger.html",
            {
                "tab_name": tab_name,
                "net_income": ledger.net_income(),
                "transactions": ledger.list_transactions(),
                "currency_symbol": settings.currency_symbol,
                "reset_request": _session().reset_request(),
            },
        )

    @app.get("/api/tabs")
    async def list_tabs() -> JSONResponse:
        return _tabs_payload()

    @app.post("/api/tabs")
    async def create_tab(name: str = Form("")) -> JSONResponse:
        """Create a tab, rejecting blank names."""

        try:
            _session().create_tab(name)
        except TrackerError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return _tabs_payload()

    @app.post("/api/tabs/delete")
    async def delete_tab(name: str = Form(...), confirm: bool = Form(False)) -> JSONResponse:
        """Delete every tab with the given name once the user confirmed."""

        decision = _session().delete_tab(name, decision_from_flag(confirm))
        return JSONResponse(
            {"decision": decision.value, "tabs": list(_session().list_tabs())}
        )

    @app.get("/api/tabs/{tab_name:path}/ledger")
    async def ledger_snapshot(tab_name: str) -> JSONResponse:
        return JSONResponse(_ledger_for(tab_name).export_snapshot())

    @app.post("/api/tabs/{tab_name:path}/transactions")
    async def add_transaction(
        tab_name: str,
        amount: str = Form(""),
        kind: TransactionType = Form(TransactionType.INCOME),
    ) -> JSONResponse:
        """Record an income or expense entry against a tab."""

        ledger = _ledger_for(tab_name)
        try:
            transaction = ledger.add_transaction(amount, kind)
        except TrackerError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(
            {
                "transaction": transaction.as_dict(),
                "net_income": format_amount(ledger.net_income()),
            },
            status_code=201,
        )

    @app.post("/api/tabs/{tab_name:path}/reset")
    async def reset_ledger(tab_name: str, confirm: bool = Form(False)) -> JSONResponse:
        """Clear a tab's transactions once the user confirmed."""

        _ledger_for(tab_name)
        decision = _session().reset_ledger(tab_name, decision_from_flag(confirm))
        payload = _session().select_tab(tab_name).export_snapshot()
        payload["decision"] = decision.value
        return JSONResponse(payload)

    return app
