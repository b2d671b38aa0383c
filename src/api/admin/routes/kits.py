from fastapi import APIRouter, Query, status

from src.api.admin.services.kit_service import kit_service
from src.api.schemas.kit import KitCreate, KitResponse, KitUpdate
from src.core.database import GetDBDep
from src.core.dependencies import GetCurrentAdminDep, GetCurrentPrincipalDep

router = APIRouter(tags=["Kits"], prefix="/kits")


@router.get("", response_model=list[KitResponse])
def list_kits(db: GetDBDep, principal: GetCurrentPrincipalDep, store_code: str | None = Query(None)):
    return kit_service.list_kits(db, store_code)


@router.get("/{kit_id}", response_model=KitResponse)
def get_kit(db: GetDBDep, principal: GetCurrentPrincipalDep, kit_id: int):
    return kit_service.get_kit_by_id(db, kit_id)


@router.post("", response_model=KitResponse, status_code=status.HTTP_201_CREATED)
def create_kit(db: GetDBDep, admin: GetCurrentAdminDep, payload: KitCreate):
    return kit_service.create_kit(db, payload)


@router.patch("/{kit_id}", response_model=KitResponse)
def patch_kit(db: GetDBDep, admin: GetCurrentAdminDep, kit_id: int, payload: KitUpdate):
    return kit_service.update_kit(db, kit_id, payload)


@router.delete("/{kit_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_kit(db: GetDBDep, admin: GetCurrentAdminDep, kit_id: int):
    kit_service.delete_kit(db, kit_id)
