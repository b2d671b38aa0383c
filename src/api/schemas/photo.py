from datetime import datetime

from pydantic import AnyHttpUrl, Field

from src.api.schemas.base_schema import AppBaseModel, RequiredStr


class PhotoCreate(AppBaseModel):
    store_code: RequiredStr = Field(..., max_length=20)
    url: AnyHttpUrl


class PhotoResponse(AppBaseModel):
    id: int
    store_code: str
    url: str
    created_at: datetime | None = None
