from datetime import datetime

from pydantic import Field

from src.api.schemas.base_schema import AppBaseModel, RequiredStr


class KitCreate(AppBaseModel):
    part_name: RequiredStr = Field(..., max_length=255)
    description: RequiredStr
    image: str | None = Field(None, max_length=500)
    store_code: RequiredStr | None = Field(None, max_length=20)
    used: bool = False


class KitUpdate(AppBaseModel):
    part_name: RequiredStr | None = Field(None, max_length=255)
    description: RequiredStr | None = None
    image: str | None = Field(None, max_length=500)
    store_code: RequiredStr | None = Field(None, max_length=20)
    used: bool | None = None


class KitResponse(AppBaseModel):
    id: int
    part_name: str
    description: str
    image: str | None = None
    store_code: str | None = None
    used: bool
    created_at: datetime | None = None
