from pydantic import BaseModel, EmailStr

from src.api.schemas.base_schema import AppBaseModel, RequiredStr
from src.core.utils.enums import PrincipalRole


class AdminLoginRequest(AppBaseModel):
    email: EmailStr
    password: str


class SupplierAccessRequest(AppBaseModel):
    cnpj: RequiredStr


class StoreAccessRequest(AppBaseModel):
    code: RequiredStr


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # segundos
    role: PrincipalRole
    subject: str
    name: str


class PrincipalResponse(BaseModel):
    role: PrincipalRole
    subject: str
    name: str
