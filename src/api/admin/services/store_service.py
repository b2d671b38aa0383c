import logging

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from src.api.admin.utils.input_sanitizer import LIKE_ESCAPE_CHAR, contains_pattern, sanitize_search_input
from src.api.admin.utils.persistence import commit_or_conflict
from src.api.schemas.store import StoreCreate, StoreFilter, StoreUpdate
from src.core.exceptions import ConflictError, NotFoundError
from src.core.models import Installation, Kit, Photo, Store, Ticket

logger = logging.getLogger(__name__)

# Campos da loja que aceitam ser limpos com null
NULLABLE_FIELDS = {"complement"}

# Critérios de busca por substring (case-insensitive); "state" é igualdade
SUBSTRING_FILTERS = {
    "code": Store.code,
    "zip_code": Store.zip_code,
    "city": Store.city,
    "region": Store.region,
}


class StoreService:

    def get_store_by_code(self, db: Session, code: str) -> Store:
        store = db.scalar(select(Store).where(Store.code == code))
        if not store:
            raise NotFoundError(f"Loja {code} não encontrada")
        return store

    def store_exists(self, db: Session, code: str) -> bool:
        return db.scalar(select(Store.id).where(Store.code == code)) is not None

    def list_stores(self, db: Session) -> list[Store]:
        return list(db.scalars(select(Store).order_by(Store.code)))

    def search_stores(self, db: Session, filters: StoreFilter) -> list[Store]:
        """
        Conjunção dos critérios informados; critérios vazios são ignorados e,
        sem nenhum critério, todas as lojas são devolvidas.
        """
        query = select(Store)
        criteria = filters.model_dump()

        for field, column in SUBSTRING_FILTERS.items():
            value = sanitize_search_input(criteria.get(field))
            if value:
                query = query.where(column.ilike(contains_pattern(value), escape=LIKE_ESCAPE_CHAR))

        state = sanitize_search_input(criteria.get("state"))
        if state:
            query = query.where(func.upper(Store.state) == state.upper())

        return list(db.scalars(query.order_by(Store.code)))

    def create_store(self, db: Session, payload: StoreCreate) -> Store:
        if self.store_exists(db, payload.code):
            raise ConflictError(f"Já existe uma loja com o código {payload.code}")

        store = Store(**payload.model_dump())
        db.add(store)
        commit_or_conflict(db, f"Já existe uma loja com o código {payload.code}", store)

        logger.info(f"✅ Loja {store.code} criada ({store.name})")
        return store

    def update_store(self, db: Session, code: str, payload: StoreUpdate) -> Store:
        store = self.get_store_by_code(db, code)

        update_data = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }
        for key, value in update_data.items():
            setattr(store, key, value)

        db.commit()
        db.refresh(store)
        logger.info(f"✏️ Loja {code} atualizada: {sorted(update_data)}")
        return store

    def delete_store(self, db: Session, code: str) -> None:
        store = self.get_store_by_code(db, code)

        for model in (Ticket, Installation, Photo):
            if db.scalar(select(model.id).where(model.store_code == code).limit(1)) is not None:
                raise ConflictError(f"Loja {code} possui chamados, instalações ou fotos vinculados")

        # Kits atribuídos voltam a ficar sem loja
        db.execute(update(Kit).where(Kit.store_code == code).values(store_code=None))
        db.delete(store)
        db.commit()
        logger.info(f"🗑️ Loja {code} removida")


store_service = StoreService()
