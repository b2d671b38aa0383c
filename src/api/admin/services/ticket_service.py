import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.api.admin.services.store_service import store_service
from src.api.schemas.ticket import TicketCreate
from src.core.dependencies import Principal
from src.core.exceptions import NotFoundError, PermissionDeniedError, ValidationError
from src.core.models import Supplier, Ticket
from src.core.utils.enums import PrincipalRole, TicketStatus

logger = logging.getLogger(__name__)


class TicketService:
    """Chamados: open → resolved (terminal)"""

    def get_ticket_by_id(self, db: Session, ticket_id: int) -> Ticket:
        ticket = db.get(Ticket, ticket_id)
        if not ticket:
            raise NotFoundError(f"Chamado {ticket_id} não encontrado")
        return ticket

    def list_tickets(
            self,
            db: Session,
            status: TicketStatus | None = None,
            opened_by_role: PrincipalRole | None = None,
    ) -> list[Ticket]:
        query = select(Ticket)
        if status is not None:
            query = query.where(Ticket.status == status)
        if opened_by_role is not None:
            query = query.where(Ticket.opened_by_role == opened_by_role)
        return list(db.scalars(query.order_by(Ticket.id)))

    def _ensure_can_open(self, payload: TicketCreate, opened_by: Principal) -> None:
        """Loja só abre chamado para si mesma; fornecedor, só em seu próprio nome"""
        if opened_by.role == PrincipalRole.STORE and payload.store_code != opened_by.subject:
            raise PermissionDeniedError("Loja só pode abrir chamados para o próprio código")
        if opened_by.role == PrincipalRole.SUPPLIER and str(payload.supplier_id) != opened_by.subject:
            raise PermissionDeniedError("Fornecedor só pode abrir chamados em seu próprio nome")

    def create_ticket(self, db: Session, payload: TicketCreate, opened_by: Principal) -> Ticket:
        self._ensure_can_open(payload, opened_by)

        if not store_service.store_exists(db, payload.store_code):
            raise ValidationError(f"Loja {payload.store_code} não existe")
        if db.get(Supplier, payload.supplier_id) is None:
            raise ValidationError(f"Fornecedor {payload.supplier_id} não existe")

        ticket = Ticket(
            description=payload.description,
            store_code=payload.store_code,
            supplier_id=payload.supplier_id,
            status=TicketStatus.OPEN,
            opened_by_role=opened_by.role,
            opened_by=opened_by.subject,
            opened_by_name=opened_by.name,
            created_at=datetime.now(timezone.utc),
        )
        db.add(ticket)
        db.commit()
        db.refresh(ticket)
        logger.info(
            f"🎫 Chamado {ticket.id} aberto para a loja {ticket.store_code} "
            f"por {opened_by.role.value} {opened_by.subject}"
        )
        return ticket

    def resolve_ticket(self, db: Session, ticket_id: int, resolved_by: str | None = None) -> Ticket:
        """
        Marca o chamado como resolvido.

        Resolver um chamado já resolvido não altera nada (nem resolved_at nem
        resolved_by) e devolve o chamado como está.
        """
        ticket = self.get_ticket_by_id(db, ticket_id)

        if ticket.status == TicketStatus.RESOLVED:
            logger.info(f"Chamado {ticket_id} já estava resolvido")
            return ticket

        ticket.status = TicketStatus.RESOLVED
        ticket.resolved_at = datetime.now(timezone.utc)
        ticket.resolved_by = resolved_by
        db.commit()
        db.refresh(ticket)
        logger.info(f"✅ Chamado {ticket_id} resolvido por {resolved_by or 'desconhecido'}")
        return ticket


ticket_service = TicketService()
