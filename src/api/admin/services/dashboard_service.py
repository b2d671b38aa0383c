# src/api/admin/services/dashboard_service.py

import logging
from datetime import date

from sqlalchemy import distinct, extract, func, or_, select
from sqlalchemy.orm import Session

from src.api.schemas.analytics.dashboard import (
    DashboardMetricsSchema,
    MonthlyDataPoint,
    TicketsByStatusSchema,
)
from src.api.schemas.kit import KitResponse
from src.core import models
from src.core.config import config
from src.core.utils.enums import TicketStatus

logger = logging.getLogger(__name__)

MONTH_MAP = {
    1: "Jan", 2: "Fev", 3: "Mar", 4: "Abr", 5: "Mai", 6: "Jun",
    7: "Jul", 8: "Ago", 9: "Set", 10: "Out", 11: "Nov", 12: "Dez",
}


def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _completed_stores_subquery():
    """Lojas existentes com ao menos uma instalação com fotos"""
    return (
        select(models.Installation.store_code)
        .join(models.Store, models.Store.code == models.Installation.store_code)
        .where(models.Installation.photo_count > 0)
    )


def count_completed_installations(db: Session) -> int:
    return db.scalar(
        select(func.count(distinct(models.Installation.store_code)))
        .join(models.Store, models.Store.code == models.Installation.store_code)
        .where(models.Installation.photo_count > 0)
    ) or 0


def unused_kits_query():
    """
    Kit sem uso: não marcado como usado E não atribuído a uma loja que já
    concluiu a instalação. Kits sem loja contam como sem uso.
    """
    return select(models.Kit).where(
        models.Kit.used.is_(False),
        or_(
            models.Kit.store_code.is_(None),
            models.Kit.store_code.not_in(_completed_stores_subquery()),
        ),
    )


def get_monthly_installations(db: Session, today: date, months: int) -> list[MonthlyDataPoint]:
    """
    Instalações por mês nos últimos `months` meses-calendário (incluindo o
    atual), do mais antigo para o mais recente. Meses sem instalações
    aparecem com count=0.
    """
    start_year, start_month = _shift_month(today.year, today.month, -(months - 1))
    window_start = date(start_year, start_month, 1)

    rows = (
        db.query(
            extract('year', models.Installation.installation_date).label('year'),
            extract('month', models.Installation.installation_date).label('month'),
            func.count(models.Installation.id).label('count')
        )
        .filter(models.Installation.installation_date >= window_start,
                models.Installation.installation_date <= today)
        .group_by('year', 'month')
        .all()
    )
    counts = {(int(year), int(month)): count for year, month, count in rows}

    series = []
    for offset in range(months):
        year, month = _shift_month(start_year, start_month, offset)
        series.append(
            MonthlyDataPoint(
                month=f"{year:04d}-{month:02d}",
                label=MONTH_MAP[month],
                count=counts.get((year, month), 0),
            )
        )
    return series


def get_dashboard_metrics(db: Session, today: date | None = None) -> DashboardMetricsSchema:
    """
    Calcula as métricas agregadas do painel administrativo.

    Cada contagem é uma consulta independente; leituras concorrentes com
    escritas podem ver estados ligeiramente diferentes entre os campos.
    """
    today = today or date.today()

    total_suppliers = db.scalar(select(func.count(models.Supplier.id))) or 0
    total_stores = db.scalar(select(func.count(models.Store.id))) or 0

    # --- Chamados por status ---
    status_rows = db.execute(
        select(models.Ticket.status, func.count(models.Ticket.id)).group_by(models.Ticket.status)
    ).all()
    by_status = {status: count for status, count in status_rows}
    open_tickets = by_status.get(TicketStatus.OPEN, 0)
    resolved_tickets = by_status.get(TicketStatus.RESOLVED, 0)

    # --- Instalações e kits ---
    completed_installations = count_completed_installations(db)

    unused = unused_kits_query().subquery()
    unused_kits = db.scalar(select(func.count()).select_from(unused)) or 0
    unused_kits_list = db.scalars(
        unused_kits_query().order_by(models.Kit.id).limit(config.DASHBOARD_KIT_SAMPLE_SIZE)
    ).all()

    monthly_installations = get_monthly_installations(db, today, config.DASHBOARD_MONTHS)

    logger.debug(
        f"📊 Dashboard: {total_stores} lojas, {open_tickets + resolved_tickets} chamados, "
        f"{completed_installations} instalações concluídas, {unused_kits} kits sem uso"
    )

    return DashboardMetricsSchema(
        total_suppliers=total_suppliers,
        total_stores=total_stores,
        total_tickets=open_tickets + resolved_tickets,
        open_tickets=open_tickets,
        resolved_tickets=resolved_tickets,
        tickets_by_status=TicketsByStatusSchema(open=open_tickets, resolved=resolved_tickets),
        completed_installations=completed_installations,
        unused_kits=unused_kits,
        unused_kits_list=[KitResponse.model_validate(kit) for kit in unused_kits_list],
        monthly_installations=monthly_installations,
    )
