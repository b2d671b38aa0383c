from fastapi import APIRouter, Query, status

from src.api.admin.services.installation_service import installation_service
from src.api.schemas.installation import InstallationCreate, InstallationResponse
from src.core.database import GetDBDep
from src.core.dependencies import GetCurrentPrincipalDep

router = APIRouter(tags=["Installations"], prefix="/installations")


@router.get("", response_model=list[InstallationResponse])
def list_installations(
        db: GetDBDep,
        principal: GetCurrentPrincipalDep,
        store_code: str | None = Query(None),
):
    return installation_service.list_installations(db, store_code)


@router.get("/{installation_id}", response_model=InstallationResponse)
def get_installation(db: GetDBDep, principal: GetCurrentPrincipalDep, installation_id: str):
    return installation_service.get_installation_by_id(db, installation_id)


@router.post("", response_model=InstallationResponse, status_code=status.HTTP_201_CREATED)
def create_installation(db: GetDBDep, principal: GetCurrentPrincipalDep, payload: InstallationCreate):
    return installation_service.create_installation(db, payload)
