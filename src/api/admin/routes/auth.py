from fastapi import APIRouter

from src.api.admin.services import auth as auth_service
from src.api.schemas.auth.session import (
    AdminLoginRequest,
    PrincipalResponse,
    StoreAccessRequest,
    SupplierAccessRequest,
    TokenResponse,
)
from src.core.database import GetDBDep
from src.core.dependencies import GetCurrentPrincipalDep

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=TokenResponse)
def login_for_access_token(db: GetDBDep, credentials: AdminLoginRequest):
    """Login do administrador com email e senha"""
    return auth_service.login_admin(db, credentials.email, credentials.password)


@router.post("/supplier-access", response_model=TokenResponse)
def supplier_access(db: GetDBDep, payload: SupplierAccessRequest):
    return auth_service.supplier_access(db, payload.cnpj)


@router.post("/store-access", response_model=TokenResponse)
def store_access(db: GetDBDep, payload: StoreAccessRequest):
    return auth_service.store_access(db, payload.code)


@router.get("/me", response_model=PrincipalResponse)
def read_current_principal(principal: GetCurrentPrincipalDep):
    return PrincipalResponse(role=principal.role, subject=principal.subject, name=principal.name)
