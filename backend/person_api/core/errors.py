import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred processing your request"


class PersonApiException(Exception):
    """base exception for person-api specific errors"""
    pass


class EntityNotFoundError(PersonApiException, LookupError):
    """raised by the storage layer when an id does not exist"""

    def __init__(self, entity_name: str, entity_id: Any):
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} with ID {entity_id} not found")


def _validation_errors(exc: RequestValidationError) -> List[Dict[str, str]]:
    errors = []
    for error in exc.errors():
        # drop the "body"/"query" prefix so the field reads like the json key
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        errors.append({
            "field": ".".join(loc) if loc else "request",
            "message": error.get("msg", "invalid value"),
        })
    return errors


def _status_for(exc: Exception) -> int:
    if isinstance(exc, LookupError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ValueError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI) -> None:
    """
    install the error boundary on the app

    validation and http errors get structured json bodies; everything else
    that escapes a handler is caught once in the outermost middleware,
    logged and turned into a generic error response
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        errors = _validation_errors(exc)
        logger.info(f"validation failed for {request.method} {request.url.path}: {errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "One or more validation errors occurred", "errors": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.middleware("http")
    async def handle_unexpected_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(f"unhandled exception on {request.method} {request.url.path}: {e}")
            code = _status_for(e)
            return JSONResponse(
                status_code=code,
                content={
                    "statusCode": code,
                    "message": GENERIC_ERROR_MESSAGE,
                    "details": str(e),
                },
            )
