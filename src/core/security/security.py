# src/core/security/security.py

import logging
import uuid
from datetime import timedelta, datetime, timezone
from typing import Optional

import jwt
from jwt import InvalidTokenError
from passlib.context import CryptContext
from fastapi.security import OAuth2PasswordBearer

from src.core.config import config
from src.core.utils.enums import PrincipalRole

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════
# CONSTANTES DE SEGURANÇA
# ═══════════════════════════════════════════════════════════

ALGORITHM = "HS256"
TOKEN_TYPE = "access"

# ✅ OAuth2 scheme para FastAPI (auto_error=False: 401 padronizado pelas dependências)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

# ✅ Context para hash de senhas (bcrypt)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# ═══════════════════════════════════════════════════════════
# FUNÇÕES DE HASHING DE SENHA
# ═══════════════════════════════════════════════════════════

def get_password_hash(password: str) -> str:
    """Gera hash bcrypt da senha"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verifica se senha corresponde ao hash"""
    return pwd_context.verify(plain_password, hashed_password)


# ═══════════════════════════════════════════════════════════
# TOKENS DE SESSÃO
# ═══════════════════════════════════════════════════════════

def create_access_token(
        subject: str,
        role: PrincipalRole,
        expires_delta: timedelta | None = None,
) -> str:
    """
    Cria um token de sessão JWT que expira.

    Args:
        subject: Chave da entidade autenticada (id do admin/fornecedor ou código da loja)
        role: Papel do principal
        expires_delta: Tempo customizado de expiração (opcional)

    Returns:
        Token JWT codificado como string
    """
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": str(subject),
        "role": role.value,
        "exp": now + expires_delta,
        "iat": now,
        "jti": str(uuid.uuid4()),
        "type": TOKEN_TYPE,
    }

    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=ALGORITHM)


def verify_access_token(token: str) -> Optional[dict]:
    """
    Decodifica e valida um token de sessão.

    Returns:
        Payload do token, ou None se inválido, expirado ou de outro tipo
    """
    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[ALGORITHM])
    except InvalidTokenError as e:
        logger.info(f"Token rejeitado: {e}")
        return None

    if payload.get("type") != TOKEN_TYPE:
        logger.warning("Token com tipo inesperado")
        return None

    if not payload.get("sub") or payload.get("role") not in {r.value for r in PrincipalRole}:
        logger.warning("Token sem claims obrigatórios")
        return None

    return payload
