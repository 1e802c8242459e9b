"""
common.exceptions
~~~~~~~~~~~~~~~~~
Centralised DRF exception handler and custom exception classes.
"""
import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base application error.  Subclass to define domain-specific errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_code: str = "error"
    default_detail: str = "An error occurred."

    def __init__(self, detail: str | None = None, code: str | None = None) -> None:
        self.detail = detail or self.default_detail
        self.code = code or self.default_code

    def __str__(self) -> str:
        return self.detail

    def to_payload(self) -> dict:
        return {"code": self.code, "detail": self.detail}


class BadRequestError(AppError):
    default_code = "bad_request"
    default_detail = "The request is invalid."


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_code = "not_found"
    default_detail = "The requested resource was not found."


class ModelStateError(BadRequestError):
    """
    A 400 whose body is the model-state dictionary ``{field: [messages]}``
    rather than the ``{"code", "detail"}`` envelope.
    """

    default_code = "invalid_model_state"
    default_detail = "One or more validation errors occurred."

    def __init__(self, errors: dict) -> None:
        super().__init__()
        self.errors = {
            key: list(value) if isinstance(value, (list, tuple)) else [value]
            for key, value in errors.items()
        }

    def to_payload(self) -> dict:
        return self.errors


def custom_exception_handler(exc: Exception, context: dict) -> Response | None:
    """
    Global DRF exception handler.
    Converts AppError subclasses to JSON responses and delegates everything
    else to the default DRF handler so standard DRF exceptions still work.
    """
    if isinstance(exc, AppError):
        logger.warning(
            "app_error",
            code=exc.code,
            detail=exc.detail,
            status_code=exc.status_code,
        )
        return Response(exc.to_payload(), status=exc.status_code)

    response = drf_exception_handler(exc, context)
    if response is not None:
        logger.warning(
            "drf_error",
            detail=response.data,
            status_code=response.status_code,
        )
    else:
        logger.exception("unhandled_exception", exc_info=exc)

    return response
