import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.api.admin.utils.input_sanitizer import LIKE_ESCAPE_CHAR, contains_pattern
from src.api.admin.utils.persistence import commit_or_conflict
from src.api.schemas.supplier import SupplierCreate, SupplierUpdate
from src.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.core.models import Installation, Supplier, Ticket
from src.core.utils.validators import normalize_cnpj

logger = logging.getLogger(__name__)


class SupplierService:

    def get_supplier_by_id(self, db: Session, supplier_id: int) -> Supplier:
        supplier = db.get(Supplier, supplier_id)
        if not supplier:
            raise NotFoundError(f"Fornecedor {supplier_id} não encontrado")
        return supplier

    def list_suppliers(self, db: Session) -> list[Supplier]:
        return list(db.scalars(select(Supplier).order_by(Supplier.id)))

    def get_supplier_by_cnpj(self, db: Session, cnpj: str) -> Supplier:
        """
        Busca tolerante a pontuação: compara apenas os dígitos.

        Tenta primeiro a igualdade exata dos dígitos; se nada for encontrado,
        cai para uma busca por substring. A segunda etapa é propositalmente
        permissiva (aceita CNPJ parcial) e pode casar mais de um fornecedor,
        caso em que o de menor id é devolvido.
        """
        digits = normalize_cnpj(cnpj)
        if not digits:
            raise ValidationError("CNPJ deve conter dígitos")

        supplier = db.scalar(select(Supplier).where(Supplier.cnpj_digits == digits))
        if supplier:
            return supplier

        logger.info(f"CNPJ {digits} sem correspondência exata, tentando busca parcial")
        supplier = db.scalar(
            select(Supplier)
            .where(Supplier.cnpj_digits.like(contains_pattern(digits), escape=LIKE_ESCAPE_CHAR))
            .order_by(Supplier.id)
            .limit(1)
        )
        if not supplier:
            raise NotFoundError("Fornecedor não encontrado")
        return supplier

    def create_supplier(self, db: Session, payload: SupplierCreate) -> Supplier:
        data = payload.model_dump()
        digits = normalize_cnpj(data["cnpj"])
        self._ensure_cnpj_available(db, digits)

        supplier = Supplier(**data, cnpj_digits=digits)
        db.add(supplier)
        commit_or_conflict(db, f"Já existe um fornecedor com o CNPJ {payload.cnpj}", supplier)

        logger.info(f"✅ Fornecedor {supplier.id} criado ({supplier.name})")
        return supplier

    def update_supplier(self, db: Session, supplier_id: int, payload: SupplierUpdate) -> Supplier:
        supplier = self.get_supplier_by_id(db, supplier_id)

        # Campos ausentes ou nulos mantêm o valor anterior
        update_data = payload.model_dump(exclude_unset=True, exclude_none=True)
        if "cnpj" in update_data:
            digits = normalize_cnpj(update_data["cnpj"])
            self._ensure_cnpj_available(db, digits, exclude_id=supplier.id)
            update_data["cnpj_digits"] = digits

        for key, value in update_data.items():
            setattr(supplier, key, value)

        commit_or_conflict(db, "Já existe um fornecedor com este CNPJ", supplier)
        logger.info(f"✏️ Fornecedor {supplier.id} atualizado: {sorted(update_data)}")
        return supplier

    def delete_supplier(self, db: Session, supplier_id: int) -> None:
        supplier = self.get_supplier_by_id(db, supplier_id)

        in_use = db.scalar(select(Ticket.id).where(Ticket.supplier_id == supplier.id).limit(1)) or \
            db.scalar(select(Installation.id).where(Installation.supplier_id == supplier.id).limit(1))
        if in_use:
            raise ConflictError("Fornecedor possui chamados ou instalações vinculados")

        db.delete(supplier)
        db.commit()
        logger.info(f"🗑️ Fornecedor {supplier_id} removido")

    def _ensure_cnpj_available(self, db: Session, digits: str, exclude_id: int | None = None) -> None:
        query = select(Supplier.id).where(Supplier.cnpj_digits == digits)
        if exclude_id is not None:
            query = query.where(Supplier.id != exclude_id)
        if db.scalar(query) is not None:
            raise ConflictError(f"Já existe um fornecedor com o CNPJ {digits}")


supplier_service = SupplierService()
