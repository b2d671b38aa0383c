from fastapi import APIRouter, status

from src.api.admin.services.photo_service import photo_service
from src.api.schemas.photo import PhotoCreate, PhotoResponse
from src.core.database import GetDBDep
from src.core.dependencies import GetCurrentPrincipalDep

router = APIRouter(tags=["Photos"], prefix="/photos")


@router.get("/{store_code}", response_model=list[PhotoResponse])
def list_store_photos(db: GetDBDep, principal: GetCurrentPrincipalDep, store_code: str):
    return photo_service.list_photos_for_store(db, store_code)


@router.post("", response_model=PhotoResponse, status_code=status.HTTP_201_CREATED)
def create_photo(db: GetDBDep, principal: GetCurrentPrincipalDep, payload: PhotoCreate):
    return photo_service.create_photo(db, payload)
