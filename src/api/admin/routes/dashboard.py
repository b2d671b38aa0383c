# Em: src/api/admin/routes/dashboard.py

from fastapi import APIRouter

from src.api.admin.services.dashboard_service import get_dashboard_metrics
from src.api.schemas.analytics.dashboard import DashboardMetricsSchema
from src.core.database import GetDBDep
from src.core.dependencies import GetCurrentAdminDep

router = APIRouter(
    prefix="/dashboard",
    tags=["Admin - Dashboard"],
)


@router.get("/metrics", response_model=DashboardMetricsSchema)
def get_dashboard_summary(db: GetDBDep, admin: GetCurrentAdminDep):
    """
    Retorna as métricas agregadas do painel: totais, chamados por status,
    instalações concluídas, kits sem uso e instalações por mês.
    """
    return get_dashboard_metrics(db)
