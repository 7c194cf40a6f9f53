"""Error-to-response mapping shared by the HTTP layer.

Every error body carries a human-readable `message`: HTTPExceptions raised by
routes, request-schema failures (400, like the rest of the input checks) and
the domain exceptions handled by Protean's FastAPI integration.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from starlette.exceptions import HTTPException as StarletteHTTPException


def _first_error_message(errors: list[dict]) -> str:
    if not errors:
        return "Invalid request"
    first = errors[0]
    message = first.get("msg", "Invalid request")
    # Pydantic prefixes messages raised from validators with "Value error, ".
    return message.removeprefix("Value error, ")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": ".".join(str(part) for part in error.get("loc", ())[1:]), "message": error.get("msg")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"message": _first_error_message(exc.errors()), "errors": errors},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install domain, HTTP and request-validation handlers on `app`."""
    register_exception_handlers(app)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
