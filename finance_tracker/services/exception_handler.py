from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic_core import ValidationError
from starlette import status

from finance_tracker.services.errors import (
    AggregatorError,
    BaseServiceError,
    NotConfiguredError,
    get_safe_error_message,
)


class DetailJsonExceptionHandler:
    def __init__(self, status_code: int):
        self.status_code = status_code

    async def __call__(self, request: Request, exc: BaseServiceError) -> JSONResponse:
        return JSONResponse({"detail": exc.detail}, status_code=self.status_code)


async def aggregator_error_exception_handler(
    request: Request, exc: AggregatorError
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": exc.action or AggregatorError.detail,
            "message": get_safe_error_message(exc.status_code),
        },
    )


async def validation_error_exception_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.errors(include_url=False)},
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(AggregatorError, aggregator_error_exception_handler)
    app.add_exception_handler(
        NotConfiguredError,
        DetailJsonExceptionHandler(status.HTTP_503_SERVICE_UNAVAILABLE),
    )
    app.add_exception_handler(
        BaseServiceError, DetailJsonExceptionHandler(status.HTTP_400_BAD_REQUEST)
    )
    app.add_exception_handler(ValidationError, validation_error_exception_handler)
