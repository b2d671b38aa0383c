# schemas/__init__.py
from .base_schema import AppBaseModel, RequiredStr
from .supplier import SupplierCreate, SupplierUpdate, SupplierResponse
from .store import StoreCreate, StoreUpdate, StoreFilter, StoreResponse
from .kit import KitCreate, KitUpdate, KitResponse
from .ticket import TicketCreate, TicketResponse
from .admin import AdminCreate, AdminUpdate, AdminResponse
from .photo import PhotoCreate, PhotoResponse
from .installation import InstallationCreate, InstallationResponse
from .analytics.dashboard import DashboardMetricsSchema
from .auth.session import (
    AdminLoginRequest, SupplierAccessRequest, StoreAccessRequest, TokenResponse, PrincipalResponse
)
