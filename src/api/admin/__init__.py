from fastapi import APIRouter

from src.api.admin.routes.auth import router as auth_router
from src.api.admin.routes.suppliers import router as suppliers_router
from src.api.admin.routes.stores import router as stores_router
from src.api.admin.routes.kits import router as kits_router
from src.api.admin.routes.tickets import router as tickets_router
from src.api.admin.routes.admins import router as admins_router
from src.api.admin.routes.photos import router as photos_router
from src.api.admin.routes.installations import router as installations_router
from src.api.admin.routes.dashboard import router as dashboard_router

router = APIRouter()

router.include_router(auth_router)
router.include_router(suppliers_router)
router.include_router(stores_router)
router.include_router(kits_router)
router.include_router(tickets_router)
router.include_router(admins_router)
router.include_router(photos_router)
router.include_router(installations_router)
router.include_router(dashboard_router)
