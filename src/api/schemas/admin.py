from datetime import datetime

from pydantic import EmailStr, Field

from src.api.schemas.base_schema import AppBaseModel, RequiredStr


class AdminCreate(AppBaseModel):
    name: RequiredStr = Field(..., max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)


class AdminUpdate(AppBaseModel):
    name: RequiredStr | None = Field(None, max_length=255)
    email: EmailStr | None = None
    password: str | None = Field(None, min_length=6, max_length=72)


class AdminResponse(AppBaseModel):
    """Nunca expõe o hash da senha"""
    id: int
    name: str
    email: str
    created_at: datetime | None = None
