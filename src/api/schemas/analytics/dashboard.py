# src/api/schemas/analytics/dashboard.py

from pydantic import BaseModel

from src.api.schemas.kit import KitResponse


class TicketsByStatusSchema(BaseModel):
    open: int
    resolved: int


class MonthlyDataPoint(BaseModel):
    month: str  # "2026-05"
    label: str  # "Mai"
    count: int


class DashboardMetricsSchema(BaseModel):
    total_suppliers: int
    total_stores: int
    total_tickets: int
    open_tickets: int
    resolved_tickets: int
    tickets_by_status: TicketsByStatusSchema
    completed_installations: int
    unused_kits: int
    unused_kits_list: list[KitResponse]
    monthly_installations: list[MonthlyDataPoint]
