import logging
from datetime import timedelta

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.api.admin.services.admin_service import admin_service
from src.api.schemas.auth.session import TokenResponse
from src.core import models
from src.core.config import config
from src.core.exceptions import AuthenticationError, ValidationError
from src.core.security.security import create_access_token
from src.core.utils.enums import PrincipalRole
from src.core.utils.validators import normalize_cnpj

logger = logging.getLogger(__name__)


def issue_token(role: PrincipalRole, subject: str, name: str) -> TokenResponse:
    expires = timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    return TokenResponse(
        access_token=create_access_token(subject, role, expires_delta=expires),
        expires_in=int(expires.total_seconds()),
        role=role,
        subject=subject,
        name=name,
    )


def login_admin(db: Session, email: str, password: str) -> TokenResponse:
    admin = admin_service.authenticate(db, email, password)
    if not admin:
        logger.warning(f"❌ Login de administrador recusado: {email}")
        raise AuthenticationError("Email ou senha incorretos")

    logger.info(f"🔐 Administrador {admin.email} autenticado")
    return issue_token(PrincipalRole.ADMIN, str(admin.id), admin.name)


def supplier_access(db: Session, cnpj: str) -> TokenResponse:
    """Acesso do fornecedor pelo CNPJ completo (qualquer pontuação)"""
    digits = normalize_cnpj(cnpj)
    if len(digits) != 14:
        raise ValidationError("CNPJ deve conter 14 dígitos")

    supplier = db.scalar(select(models.Supplier).where(models.Supplier.cnpj_digits == digits))
    if not supplier:
        raise AuthenticationError("CNPJ não cadastrado")

    logger.info(f"🔐 Fornecedor {supplier.id} acessou pelo CNPJ")
    return issue_token(PrincipalRole.SUPPLIER, str(supplier.id), supplier.name)


def store_access(db: Session, code: str) -> TokenResponse:
    store = db.scalar(select(models.Store).where(models.Store.code == code.strip()))
    if not store:
        raise AuthenticationError("Código de loja não encontrado")

    logger.info(f"🔐 Loja {store.code} acessou o sistema")
    return issue_token(PrincipalRole.STORE, store.code, store.name)
