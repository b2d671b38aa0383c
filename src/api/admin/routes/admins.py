from fastapi import APIRouter, status

from src.api.admin.services.admin_service import admin_service
from src.api.schemas.admin import AdminCreate, AdminResponse, AdminUpdate
from src.core.database import GetDBDep
from src.core.dependencies import GetCurrentAdminDep

router = APIRouter(tags=["Admins"], prefix="/admins")


@router.get("", response_model=list[AdminResponse])
def list_admins(db: GetDBDep, admin: GetCurrentAdminDep):
    return admin_service.list_admins(db)


@router.post("", response_model=AdminResponse, status_code=status.HTTP_201_CREATED)
def create_admin(db: GetDBDep, admin: GetCurrentAdminDep, payload: AdminCreate):
    return admin_service.create_admin(db, payload)


@router.patch("/{admin_id}", response_model=AdminResponse)
def patch_admin(db: GetDBDep, admin: GetCurrentAdminDep, admin_id: int, payload: AdminUpdate):
    return admin_service.update_admin(db, admin_id, payload)


@router.delete("/{admin_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_admin(db: GetDBDep, admin: GetCurrentAdminDep, admin_id: int):
    admin_service.delete_admin(db, admin_id)
