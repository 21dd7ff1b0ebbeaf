"""FastAPI application factory."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from calorie_ledger.api.models import CreateFoodEntryInput, DailyTotalOut, FoodEntryOut
from calorie_ledger.app_logging import configure_logging
from calorie_ledger.config import parse_cors_origins
from calorie_ledger.containers import AppContainer
from calorie_ledger.domain.errors import StorageError, ValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Calorie Ledger")
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": _flatten_errors(exc.errors())},
        )

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError) -> JSONResponse:
        logger.exception(
            "Storage failure", exc_info=exc, extra={"path": request.url.path}
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Storage unavailable"},
        )

    @app.get("/health")
    def health(request: Request) -> dict[str, str]:
        """Simple health check endpoint."""
        state_container: AppContainer = request.app.state.container
        return {"status": "ok", "timestamp": state_container.clock().isoformat()}

    @app.post("/entries", status_code=status.HTTP_201_CREATED)
    def create_entry(payload: CreateFoodEntryInput, request: Request) -> FoodEntryOut:
        """Record a food entry."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.ledger_service.create_entry(payload.to_request())
        return FoodEntryOut.from_entry(entry)

    @app.get("/entries")
    def list_entries(request: Request) -> list[FoodEntryOut]:
        """Return all entries, most recent first."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.ledger_service.list_entries()
        return [FoodEntryOut.from_entry(entry) for entry in entries]

    @app.get("/entries/by-date")
    def list_entries_by_date(
        request: Request, date: str | None = None
    ) -> list[FoodEntryOut]:
        """Return the entries of one UTC day, earliest first."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.ledger_service.list_entries_by_date(date)
        return [FoodEntryOut.from_entry(entry) for entry in entries]

    @app.get("/totals/daily")
    def daily_total(request: Request, date: str | None = None) -> DailyTotalOut:
        """Return the calorie total for one UTC day."""
        state_container: AppContainer = request.app.state.container
        total = state_container.daily_total_service.total_for(date)
        return DailyTotalOut.from_total(total)

    return app


def _flatten_errors(errors: Sequence[Mapping[str, Any]]) -> str:
    """Join pydantic error entries into one ``field: message`` string."""
    messages = []
    for error in errors:
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part not in {"body", "query"}
        )
        message = str(error.get("msg", "Invalid value"))
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request"
