"""Translate validation, domain and persistence errors into JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ecodamage.domain.errors import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

HTTP_422_UNPROCESSABLE = 422
INVALID_DATA_MESSAGE = "The given data was invalid."

# Friendlier wording for the errors users hit most, keyed by (field, pydantic error type)
FIELD_MESSAGES = {
    ("damage_category_id", "missing"): "Please select a damage category.",
    ("location", "missing"): "Location is required.",
    ("latitude", "greater_than_equal"): "Latitude must be between -90 and 90.",
    ("latitude", "less_than_equal"): "Latitude must be between -90 and 90.",
    ("longitude", "greater_than_equal"): "Longitude must be between -180 and 180.",
    ("longitude", "less_than_equal"): "Longitude must be between -180 and 180.",
    ("affected_area", "greater_than_equal"): "Affected area must be a positive number.",
    ("pollutant_volume", "greater_than_equal"): "Pollutant volume must be a positive number.",
    ("affected_animals", "greater_than_equal"): "Number of affected animals must be a positive number.",
    ("severity_level", "missing"): "Please select a severity level.",
    ("severity_level", "enum"): "Invalid severity level selected.",
}


def _field_name(loc) -> str:
    if not loc:
        return "general"
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "header")]
    return ".".join(parts) or str(loc[0])


def validation_error_payload(errors: dict[str, list[str]]) -> dict:
    return {"success": False, "message": INVALID_DATA_MESSAGE, "errors": errors}


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = _field_name(error.get("loc", ()))
        message = FIELD_MESSAGES.get((field, error.get("type")), error.get("msg", "Invalid value."))
        errors.setdefault(field, []).append(message)
    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE,
        content=validation_error_payload(errors),
    )


async def domain_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    field = exc.field or "general"
    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE,
        content=validation_error_payload({field: [str(exc)]}),
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"success": False, "message": str(exc)},
    )


async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"success": False, "message": str(exc)},
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error while handling %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Database error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on app."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, domain_validation_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ConflictError, conflict_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
