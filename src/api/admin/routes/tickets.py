from fastapi import APIRouter, Query, status

from src.api.admin.services.ticket_service import ticket_service
from src.api.schemas.ticket import TicketCreate, TicketResponse
from src.core.database import GetDBDep
from src.core.dependencies import GetCurrentAdminDep, GetCurrentPrincipalDep
from src.core.utils.enums import PrincipalRole, TicketStatus

router = APIRouter(tags=["Tickets"], prefix="/tickets")


@router.get("", response_model=list[TicketResponse])
def list_tickets(
        db: GetDBDep,
        principal: GetCurrentPrincipalDep,
        status_filter: TicketStatus | None = Query(None, alias="status"),
        opener_type: PrincipalRole | None = Query(None, alias="type"),
):
    return ticket_service.list_tickets(db, status_filter, opener_type)


@router.get("/{ticket_id}", response_model=TicketResponse)
def get_ticket(db: GetDBDep, principal: GetCurrentPrincipalDep, ticket_id: int):
    return ticket_service.get_ticket_by_id(db, ticket_id)


@router.post("", response_model=TicketResponse, status_code=status.HTTP_201_CREATED)
def create_ticket(db: GetDBDep, principal: GetCurrentPrincipalDep, payload: TicketCreate):
    return ticket_service.create_ticket(db, payload, opened_by=principal)


@router.patch("/{ticket_id}/resolve", response_model=TicketResponse)
def resolve_ticket(db: GetDBDep, admin: GetCurrentAdminDep, ticket_id: int):
    # Repetir a chamada é seguro: o chamado já resolvido volta inalterado
    return ticket_service.resolve_ticket(db, ticket_id, resolved_by=admin.entity.email)
