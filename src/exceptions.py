import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class TransitError(Exception):
    """Base class for domain errors raised by the service layer"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TransitError):
    """Input violates a domain constraint (unknown enum value, negative fare, ...)"""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(TransitError):
    """Addressed record does not exist for the caller"""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(TransitError):
    """Unique value already taken, e.g. a redemption code"""

    status_code = status.HTTP_409_CONFLICT


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain and storage errors onto HTTP responses"""

    @app.exception_handler(TransitError)
    async def transit_error_handler(request: Request, exc: TransitError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Storage failure on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"}
        )
