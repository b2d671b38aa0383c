from datetime import datetime

from pydantic import Field

from src.api.schemas.base_schema import AppBaseModel, RequiredStr
from src.core.utils.enums import PrincipalRole, TicketStatus


class TicketCreate(AppBaseModel):
    """Todo chamado nasce aberto; status, data e autor são definidos no servidor"""
    description: RequiredStr
    store_code: RequiredStr = Field(..., max_length=20)
    supplier_id: int = Field(..., gt=0)


class TicketResponse(AppBaseModel):
    id: int
    description: str
    status: TicketStatus
    store_code: str
    supplier_id: int
    opened_by_role: PrincipalRole
    opened_by: str
    opened_by_name: str | None = None
    created_at: datetime
    resolved_at: datetime | None = None
    resolved_by: str | None = None
