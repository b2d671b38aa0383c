import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.api.admin.services.store_service import store_service
from src.api.schemas.kit import KitCreate, KitUpdate
from src.core.exceptions import NotFoundError, ValidationError
from src.core.models import Kit

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = {"image", "store_code"}


class KitService:

    def get_kit_by_id(self, db: Session, kit_id: int) -> Kit:
        kit = db.get(Kit, kit_id)
        if not kit:
            raise NotFoundError(f"Kit {kit_id} não encontrado")
        return kit

    def list_kits(self, db: Session, store_code: str | None = None) -> list[Kit]:
        query = select(Kit)
        if store_code:
            query = query.where(Kit.store_code == store_code)
        return list(db.scalars(query.order_by(Kit.id)))

    def create_kit(self, db: Session, payload: KitCreate) -> Kit:
        self._ensure_store(db, payload.store_code)

        kit = Kit(**payload.model_dump())
        db.add(kit)
        db.commit()
        db.refresh(kit)
        logger.info(f"✅ Kit {kit.id} criado ({kit.part_name})")
        return kit

    def update_kit(self, db: Session, kit_id: int, payload: KitUpdate) -> Kit:
        kit = self.get_kit_by_id(db, kit_id)

        update_data = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }
        if update_data.get("store_code"):
            self._ensure_store(db, update_data["store_code"])

        for key, value in update_data.items():
            setattr(kit, key, value)

        db.commit()
        db.refresh(kit)
        logger.info(f"✏️ Kit {kit.id} atualizado: {sorted(update_data)}")
        return kit

    def delete_kit(self, db: Session, kit_id: int) -> None:
        kit = self.get_kit_by_id(db, kit_id)
        db.delete(kit)
        db.commit()
        logger.info(f"🗑️ Kit {kit_id} removido")

    def _ensure_store(self, db: Session, store_code: str | None) -> None:
        if store_code and not store_service.store_exists(db, store_code):
            raise ValidationError(f"Loja {store_code} não existe")


kit_service = KitService()
