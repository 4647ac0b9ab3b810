from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.exceptions import AppException, InvalidInputException
from src.logging_ import logger


def error_response(exc: AppException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"kind": exc.kind, "detail": exc.detail, "details": exc.details},
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{exc.kind} | {request.method} {request.url.path} detail={exc.detail} details={exc.details}")
    else:
        logger.info(f"{exc.kind} | {request.method} {request.url.path} detail={exc.detail} details={exc.details}")
    return error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for error in jsonable_encoder(exc.errors()):
        location = ".".join(str(part) for part in error["loc"] if part != "body") or "body"
        details.append(f"{location}: {error['msg']}")
    return await app_exception_handler(request, InvalidInputException("Invalid input types", details))


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
