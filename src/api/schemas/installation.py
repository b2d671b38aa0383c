from datetime import date, datetime

from pydantic import Field

from src.api.schemas.base_schema import AppBaseModel, RequiredStr


class InstallationCreate(AppBaseModel):
    store_code: RequiredStr = Field(..., max_length=20)
    supplier_id: int = Field(..., gt=0)
    installer_name: RequiredStr = Field(..., max_length=255)
    installation_date: date
    # Fotos em base64 ou data URL; o limite de quantidade é validado no service
    photos: list[str] = Field(default_factory=list)


class InstallationResponse(AppBaseModel):
    id: str
    store_code: str
    supplier_id: int
    installer_name: str
    installation_date: date
    photos: list[str]
    photo_count: int
    created_at: datetime
