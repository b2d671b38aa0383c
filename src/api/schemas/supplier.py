from datetime import datetime
from decimal import Decimal

from pydantic import Field, field_validator

from src.api.schemas.base_schema import AppBaseModel, RequiredStr
from src.core.utils.validators import normalize_cnpj


def _check_cnpj(value: str) -> str:
    if len(normalize_cnpj(value)) != 14:
        raise ValueError("CNPJ deve ter 14 dígitos")
    return value


# Schema base com campos comuns
class SupplierBase(AppBaseModel):
    name: RequiredStr = Field(..., max_length=255)
    cnpj: RequiredStr = Field(..., max_length=18)
    responsible_name: RequiredStr = Field(..., max_length=255)
    phone: RequiredStr = Field(..., max_length=20)
    address: RequiredStr
    budget: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)


# Schema para criar um fornecedor
class SupplierCreate(SupplierBase):

    @field_validator("cnpj")
    @classmethod
    def validate_cnpj(cls, value: str) -> str:
        return _check_cnpj(value)


# Schema para atualizar um fornecedor (todos os campos opcionais)
class SupplierUpdate(AppBaseModel):
    name: RequiredStr | None = Field(None, max_length=255)
    cnpj: RequiredStr | None = Field(None, max_length=18)
    responsible_name: RequiredStr | None = Field(None, max_length=255)
    phone: RequiredStr | None = Field(None, max_length=20)
    address: RequiredStr | None = None
    budget: Decimal | None = Field(None, gt=0, max_digits=12, decimal_places=2)

    @field_validator("cnpj")
    @classmethod
    def validate_cnpj(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return _check_cnpj(value)


# Schema para exibir o fornecedor na resposta da API
class SupplierResponse(AppBaseModel):
    id: int
    name: str
    cnpj: str
    responsible_name: str
    phone: str
    address: str
    budget: float
    created_at: datetime | None = None
    updated_at: datetime | None = None
