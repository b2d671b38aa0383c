from datetime import datetime

from pydantic import Field, field_validator

from src.api.schemas.base_schema import AppBaseModel, RequiredStr
from src.core.utils.validators import normalize_state, validate_cep, validate_state


def _check_state(value: str) -> str:
    if not validate_state(value):
        raise ValueError("UF deve ser uma sigla válida de 2 letras")
    return normalize_state(value)


def _check_zip_code(value: str) -> str:
    if not validate_cep(value):
        raise ValueError("CEP deve ter 8 dígitos")
    return value


class StoreAddress(AppBaseModel):
    street: RequiredStr = Field(..., max_length=255)
    number: RequiredStr = Field(..., max_length=10)
    complement: str | None = Field(None, max_length=100)
    neighborhood: RequiredStr = Field(..., max_length=100)
    city: RequiredStr = Field(..., max_length=100)
    state: RequiredStr
    zip_code: RequiredStr = Field(..., max_length=10)


class StoreCreate(StoreAddress):
    # Vai na URL (/stores/{code}): só letras, dígitos, hífen e sublinhado
    code: RequiredStr = Field(..., max_length=20, pattern=r"^[A-Za-z0-9_-]+$")
    name: RequiredStr = Field(..., max_length=255)
    operator_name: RequiredStr = Field(..., max_length=255)
    region: RequiredStr = Field(..., max_length=50)
    phone: RequiredStr = Field(..., max_length=20)

    @field_validator("state")
    @classmethod
    def validate_state(cls, value: str) -> str:
        return _check_state(value)

    @field_validator("zip_code")
    @classmethod
    def validate_zip_code(cls, value: str) -> str:
        return _check_zip_code(value)


class StoreUpdate(AppBaseModel):
    """O código da loja é a chave pública e não pode ser alterado"""
    name: RequiredStr | None = Field(None, max_length=255)
    operator_name: RequiredStr | None = Field(None, max_length=255)
    street: RequiredStr | None = Field(None, max_length=255)
    number: RequiredStr | None = Field(None, max_length=10)
    complement: str | None = Field(None, max_length=100)
    neighborhood: RequiredStr | None = Field(None, max_length=100)
    city: RequiredStr | None = Field(None, max_length=100)
    state: RequiredStr | None = None
    zip_code: RequiredStr | None = Field(None, max_length=10)
    region: RequiredStr | None = Field(None, max_length=50)
    phone: RequiredStr | None = Field(None, max_length=20)

    @field_validator("state")
    @classmethod
    def validate_state(cls, value: str | None) -> str | None:
        return value if value is None else _check_state(value)

    @field_validator("zip_code")
    @classmethod
    def validate_zip_code(cls, value: str | None) -> str | None:
        return value if value is None else _check_zip_code(value)


class StoreFilter(AppBaseModel):
    """Critérios opcionais de busca; campos vazios são ignorados"""
    code: str | None = None
    zip_code: str | None = None
    city: str | None = None
    state: str | None = None
    region: str | None = None


class StoreResponse(AppBaseModel):
    id: int
    code: str
    name: str
    operator_name: str
    street: str
    number: str
    complement: str | None = None
    neighborhood: str
    city: str
    state: str
    zip_code: str
    region: str
    phone: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
