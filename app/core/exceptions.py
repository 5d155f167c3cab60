"""
Errores de aplicación y handlers globales para respuestas consistentes.

AppError (base)
├── ValidationError      → 400 (falta un campo requerido en el body)
├── InvalidIdentifier    → 400 (id con formato inválido)
├── DuplicateName        → 400 (violación de unicidad en `name`)
├── NotFound             → 404 (respuesta genérica de no encontrado)
└── FolderInUse          → 409 (política `restrict` con notas asociadas)
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class AppError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Validation error"


class InvalidIdentifier(AppError):
    status_code = 400
    default_message = "The `id` is not valid"


class DuplicateName(AppError):
    status_code = 400
    default_message = "The name already exists"


class NotFound(AppError):
    status_code = 404
    default_message = "Not Found"


class FolderInUse(AppError):
    status_code = 409
    default_message = "The folder still has notes"


def _req_id(request: Request) -> str | None:
    return getattr(getattr(request, "state", object()), "request_id", None)


def _body(request: Request, message: str, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"message": message, **extra}
    rid = _req_id(request)
    if rid:
        body["request_id"] = rid
    return body


def register_exception_handlers(app: FastAPI) -> None:
    log = logging.getLogger("folders.errors")

    @app.exception_handler(AppError)
    async def _app_exc_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content=_body(request, exc.message))

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content=_body(request, exc.detail or "HTTP error"))

    @app.exception_handler(RequestValidationError)
    async def _validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content=_body(request, "Validation error", errors=jsonable_encoder(exc.errors())),
        )

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        rid = _req_id(request)
        log.exception("Unhandled error request_id=%s", rid)
        return JSONResponse(status_code=500, content=_body(request, "Internal server error"))
