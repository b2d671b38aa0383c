import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.api.admin.services.store_service import store_service
from src.api.schemas.photo import PhotoCreate
from src.core.exceptions import ValidationError
from src.core.models import Photo

logger = logging.getLogger(__name__)


class PhotoService:

    def list_photos_for_store(self, db: Session, store_code: str) -> list[Photo]:
        # Loja inexistente → lista vazia
        return list(db.scalars(
            select(Photo).where(Photo.store_code == store_code).order_by(Photo.id)
        ))

    def create_photo(self, db: Session, payload: PhotoCreate) -> Photo:
        if not store_service.store_exists(db, payload.store_code):
            raise ValidationError(f"Loja {payload.store_code} não existe")

        photo = Photo(store_code=payload.store_code, url=str(payload.url))
        db.add(photo)
        db.commit()
        db.refresh(photo)
        logger.info(f"📷 Foto {photo.id} registrada para a loja {photo.store_code}")
        return photo


photo_service = PhotoService()
