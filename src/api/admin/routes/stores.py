from fastapi import APIRouter, status

from src.api.admin.services.store_service import store_service
from src.api.schemas.store import StoreCreate, StoreFilter, StoreResponse, StoreUpdate
from src.core.database import GetDBDep
from src.core.dependencies import GetCurrentAdminDep, GetCurrentPrincipalDep

router = APIRouter(tags=["Stores"], prefix="/stores")


@router.get("", response_model=list[StoreResponse])
def list_stores(db: GetDBDep, principal: GetCurrentPrincipalDep):
    return store_service.list_stores(db)


@router.post("/search", response_model=list[StoreResponse])
def search_stores(db: GetDBDep, principal: GetCurrentPrincipalDep, filters: StoreFilter):
    """
    Busca por código, CEP, cidade e região (substring, sem diferenciar
    maiúsculas) e UF (igualdade). Critérios vazios são ignorados.
    """
    return store_service.search_stores(db, filters)


@router.get("/{code}", response_model=StoreResponse)
def get_store(db: GetDBDep, principal: GetCurrentPrincipalDep, code: str):
    return store_service.get_store_by_code(db, code)


@router.post("", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
def create_store(db: GetDBDep, admin: GetCurrentAdminDep, payload: StoreCreate):
    return store_service.create_store(db, payload)


@router.patch("/{code}", response_model=StoreResponse)
def patch_store(db: GetDBDep, admin: GetCurrentAdminDep, code: str, payload: StoreUpdate):
    return store_service.update_store(db, code, payload)


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
def delete_store(db: GetDBDep, admin: GetCurrentAdminDep, code: str):
    store_service.delete_store(db, code)
