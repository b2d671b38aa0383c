import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.api.admin.services.store_service import store_service
from src.api.schemas.installation import InstallationCreate
from src.core.config import config
from src.core.exceptions import NotFoundError, ValidationError
from src.core.models import Installation, Supplier
from src.core.utils.validators import validate_photo_payload

logger = logging.getLogger(__name__)


class InstallationService:

    def get_installation_by_id(self, db: Session, installation_id: str) -> Installation:
        installation = db.get(Installation, installation_id)
        if not installation:
            raise NotFoundError(f"Instalação {installation_id} não encontrada")
        return installation

    def list_installations(self, db: Session, store_code: str | None = None) -> list[Installation]:
        query = select(Installation)
        if store_code:
            query = query.where(Installation.store_code == store_code)
        return list(db.scalars(query.order_by(Installation.created_at, Installation.id)))

    def create_installation(self, db: Session, payload: InstallationCreate) -> Installation:
        """
        Registra o checklist de instalação de uma loja.

        A loja e o fornecedor precisam existir, e as fotos (no máximo
        INSTALLATION_MAX_PHOTOS) precisam ser base64 válido. photo_count é
        gravado junto para que o dashboard não precise ler as fotos.
        """
        if not store_service.store_exists(db, payload.store_code):
            raise ValidationError(f"Loja {payload.store_code} não existe")
        if db.get(Supplier, payload.supplier_id) is None:
            raise ValidationError(f"Fornecedor {payload.supplier_id} não existe")

        max_photos = config.INSTALLATION_MAX_PHOTOS
        if len(payload.photos) > max_photos:
            raise ValidationError(f"Máximo de {max_photos} fotos por instalação")

        for index, photo in enumerate(payload.photos, start=1):
            if not validate_photo_payload(photo):
                raise ValidationError(f"Foto {index} não é uma imagem base64 válida")

        installation = Installation(
            store_code=payload.store_code,
            supplier_id=payload.supplier_id,
            installer_name=payload.installer_name,
            installation_date=payload.installation_date,
            photos=list(payload.photos),
            photo_count=len(payload.photos),
        )
        db.add(installation)
        db.commit()
        db.refresh(installation)

        logger.info(
            f"🔧 Instalação {installation.id} registrada: loja {installation.store_code}, "
            f"{installation.photo_count} foto(s)"
        )
        return installation


installation_service = InstallationService()
