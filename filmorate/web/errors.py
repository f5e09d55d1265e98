"""
Traduction des erreurs du domaine en reponses HTTP.

- NotFoundError -> 404
- DuplicateError, ValidationError, erreur de lecture du corps JSON -> 400
- toute autre exception -> 500, journalisee avec sa trace

Corps des reponses : {"error": ..., "message": ..., "violations": [...]}
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from filmorate.core.exceptions import (
    DuplicateError,
    FieldViolation,
    NotFoundError,
    ValidationError,
)


def _violations_payload(violations: list[FieldViolation]) -> list[dict]:
    return [{"field": v.field, "message": v.message} for v in violations]


def _request_violations(exc: RequestValidationError) -> list[FieldViolation]:
    violations = []
    for error in exc.errors():
        # loc commence par "body", "query" ou "path"
        location = [str(part) for part in error.get("loc", ())[1:]]
        violations.append(FieldViolation(".".join(location) or "body", error.get("msg", "")))
    return violations


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> 404 : {exc.message}")
    return JSONResponse(
        status_code=404,
        content={"error": "Not Found", "message": exc.message},
    )


async def duplicate_handler(request: Request, exc: DuplicateError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> 400 : {exc.message}")
    return JSONResponse(
        status_code=400,
        content={"error": "Duplicate", "message": exc.message},
    )


async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> 400 : {exc.message}")
    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation Error",
            "message": exc.message,
            "violations": _violations_payload(exc.violations),
        },
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    violations = _request_violations(exc)
    message = "Erreurs de validation: " + "; ".join(str(v) for v in violations)
    logger.warning(f"{request.method} {request.url.path} -> 400 : {message}")
    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation Error",
            "message": message,
            "violations": _violations_payload(violations),
        },
    )


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(
        f"Erreur inattendue sur {request.method} {request.url.path}"
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "message": "Une erreur inattendue est survenue.",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Enregistre les handlers d'erreurs sur l'application."""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(DuplicateError, duplicate_handler)
    app.add_exception_handler(ValidationError, validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, internal_error_handler)
