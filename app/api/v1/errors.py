"""
➡️ But : Traduire toutes les erreurs en une réponse JSON unique {"error": {"message": ...}}.

- requête mal formée (chemin inconnu, segment typé invalide, JSON invalide) → 400
- méthode hors GET/POST/DELETE sur /todo/... → 400
- TodoNotFoundError (mise à jour d'un id inexistant) → 400
- SQLAlchemyError (base indisponible, contrainte, requête) → 500, message du driver tel quel
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.db.repositories.todos import TodoNotFoundError

logger = logging.getLogger(__name__)

TODO_PREFIX = "/todo"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": {"message": message}})


def _is_todo_path(request: Request) -> bool:
    path = request.url.path
    return path == TODO_PREFIX or path.startswith(TODO_PREFIX + "/")


def _format_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    status_code = exc.status_code
    message = str(exc.detail)
    # Route ou méthode inconnue sous /todo/ : requête mal formée
    if _is_todo_path(request) and status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ):
        status_code = status.HTTP_400_BAD_REQUEST
        message = "Bad Request"
    logger.warning("%s Error: %s %s", request.method, request.url.path, message)
    return error_response(status_code, message)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    from_body = any((err.get("loc") or ("",))[0] == "body" for err in exc.errors())
    details = _format_errors(exc)
    if from_body:
        message = f"Failed to decode body: {details}"
    else:
        message = f"Argument missing or malformed: {details}"
    logger.warning("%s Error: %s %s", request.method, request.url.path, message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def not_found_exception_handler(request: Request, exc: TodoNotFoundError) -> JSONResponse:
    logger.warning("%s Error: %s %s", request.method, request.url.path, exc)
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("%s Error: %s database failure", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Database error: {exc}")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(TodoNotFoundError, not_found_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
