from fastapi import APIRouter, status

from src.api.admin.services.supplier_service import supplier_service
from src.api.schemas.supplier import SupplierCreate, SupplierResponse, SupplierUpdate
from src.core.database import GetDBDep
from src.core.dependencies import GetCurrentAdminDep, GetCurrentPrincipalDep

router = APIRouter(tags=["Suppliers"], prefix="/suppliers")


@router.get("", response_model=list[SupplierResponse])
def list_suppliers(db: GetDBDep, principal: GetCurrentPrincipalDep):
    return supplier_service.list_suppliers(db)


@router.get("/cnpj/{cnpj:path}", response_model=SupplierResponse)
def get_supplier_by_cnpj(db: GetDBDep, principal: GetCurrentPrincipalDep, cnpj: str):
    """Aceita o CNPJ com ou sem pontuação (inclusive a barra)"""
    return supplier_service.get_supplier_by_cnpj(db, cnpj)


@router.get("/{supplier_id}", response_model=SupplierResponse)
def get_supplier(db: GetDBDep, principal: GetCurrentPrincipalDep, supplier_id: int):
    return supplier_service.get_supplier_by_id(db, supplier_id)


@router.post("", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED)
def create_supplier(db: GetDBDep, admin: GetCurrentAdminDep, payload: SupplierCreate):
    return supplier_service.create_supplier(db, payload)


@router.patch("/{supplier_id}", response_model=SupplierResponse)
def patch_supplier(db: GetDBDep, admin: GetCurrentAdminDep, supplier_id: int, payload: SupplierUpdate):
    return supplier_service.update_supplier(db, supplier_id, payload)


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_supplier(db: GetDBDep, admin: GetCurrentAdminDep, supplier_id: int):
    supplier_service.delete_supplier(db, supplier_id)
