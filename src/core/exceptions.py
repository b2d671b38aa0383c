"""
Exceções de Domínio
===================
Hierarquia usada pelos services e traduzida em respostas JSON na borda da API.

    FranchiseError
    ├── ValidationError        → 400
    ├── AuthenticationError    → 401
    ├── PermissionDeniedError  → 403
    ├── NotFoundError          → 404
    ├── ConflictError          → 409
    └── InternalError          → 500
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class FranchiseError(Exception):
    """Exceção base do domínio"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "internal_error"

    def __init__(self, message: str = "Erro inesperado"):
        super().__init__(message)
        self.message = message


class ValidationError(FranchiseError):
    """Entrada malformada ou campo obrigatório ausente"""
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"


class AuthenticationError(FranchiseError):
    """Credenciais ou token inválidos"""
    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "unauthorized"


class PermissionDeniedError(FranchiseError):
    """Principal autenticado sem permissão para a operação"""
    status_code = status.HTTP_403_FORBIDDEN
    error_code = "forbidden"


class NotFoundError(FranchiseError):
    """Chave desconhecida"""
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"


class ConflictError(FranchiseError):
    """Violação de unicidade ou de dependência"""
    status_code = status.HTTP_409_CONFLICT
    error_code = "conflict"


class InternalError(FranchiseError):
    """Falha de banco/conexão; o texto original nunca vai para o cliente"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "internal_error"


def _correlation_id(request: Request) -> str:
    return getattr(request.state, "correlation_id", "unknown")


def _error_body(request: Request, error: str, message: str, **extra) -> dict:
    body = {
        "error": error,
        "message": message,
        "correlation_id": _correlation_id(request),
    }
    body.update(extra)
    return body


async def franchise_error_handler(request: Request, exc: FranchiseError):
    if exc.status_code >= 500:
        logger.error(f"❌ {exc.error_code} em {request.url.path}: {exc.message}")
    else:
        logger.info(f"⚠️ {exc.error_code} em {request.method} {request.url.path}: {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.error_code, exc.message),
        headers=headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Erros de validação do pydantic viram 400, como os demais erros de entrada"""
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(
            _error_body(request, ValidationError.error_code, "Dados inválidos", details=details)
        ),
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"❌ Erro de banco em {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            request,
            InternalError.error_code,
            "Ocorreu um erro interno. Por favor, tente novamente mais tarde.",
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FranchiseError, franchise_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
