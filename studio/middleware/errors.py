"""Exception handlers that render every error in the response envelope."""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from studio.config import settings
from studio.logging_config import get_logger
from studio.schemas.common import error_body
from studio.services.email import EmailDeliveryError

logger = get_logger("studio.errors")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = f"Route {request.url.path} not found"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(p) for p in err["loc"] if p != "body"),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Validation Error", details),
    )


def _is_foreign_key_violation(exc: IntegrityError) -> bool:
    # psycopg2 exposes pgcode, psycopg 3 sqlstate; SQLite only has the message
    code = getattr(exc.orig, "pgcode", None) or getattr(exc.orig, "sqlstate", None)
    return code == "23503" or "foreign key" in str(exc.orig).lower()


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("Constraint violation on %s %s: %s", request.method, request.url.path, exc.orig)
    if _is_foreign_key_violation(exc):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Invalid foreign key reference"),
        )
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=error_body("Resource already exists"),
    )


async def email_error_handler(request: Request, exc: EmailDeliveryError) -> JSONResponse:
    code = status.HTTP_502_BAD_GATEWAY if exc.configured else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(status_code=code, content=error_body(exc.message, exc.details))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal Server Error", str(exc) if settings.exposes_errors else None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(EmailDeliveryError, email_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
