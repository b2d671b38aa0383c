import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from src.api.admin.utils.persistence import commit_or_conflict
from src.api.schemas.admin import AdminCreate, AdminUpdate
from src.core.exceptions import ConflictError, NotFoundError
from src.core.models import Admin
from src.core.security.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)


class AdminService:

    def get_admin_by_id(self, db: Session, admin_id: int) -> Admin:
        admin = db.get(Admin, admin_id)
        if not admin:
            raise NotFoundError(f"Administrador {admin_id} não encontrado")
        return admin

    def get_admin_by_email(self, db: Session, email: str) -> Admin | None:
        return db.scalar(select(Admin).where(func.lower(Admin.email) == email.strip().lower()))

    def list_admins(self, db: Session) -> list[Admin]:
        return list(db.scalars(select(Admin).order_by(Admin.id)))

    def create_admin(self, db: Session, payload: AdminCreate) -> Admin:
        email = payload.email.lower()
        if self.get_admin_by_email(db, email):
            raise ConflictError(f"Já existe um administrador com o email {email}")

        admin = Admin(
            name=payload.name,
            email=email,
            hashed_password=get_password_hash(payload.password),
        )
        db.add(admin)
        commit_or_conflict(db, f"Já existe um administrador com o email {email}", admin)
        logger.info(f"✅ Administrador {admin.id} criado ({admin.email})")
        return admin

    def update_admin(self, db: Session, admin_id: int, payload: AdminUpdate) -> Admin:
        admin = self.get_admin_by_id(db, admin_id)
        update_data = payload.model_dump(exclude_unset=True, exclude_none=True)

        if "email" in update_data:
            email = update_data["email"].lower()
            existing = self.get_admin_by_email(db, email)
            if existing and existing.id != admin.id:
                raise ConflictError(f"Já existe um administrador com o email {email}")
            admin.email = email

        if "name" in update_data:
            admin.name = update_data["name"]

        if "password" in update_data:
            admin.hashed_password = get_password_hash(update_data["password"])

        commit_or_conflict(db, "Já existe um administrador com este email", admin)
        logger.info(f"✏️ Administrador {admin.id} atualizado: {sorted(update_data)}")
        return admin

    def delete_admin(self, db: Session, admin_id: int) -> None:
        admin = self.get_admin_by_id(db, admin_id)

        if db.scalar(select(func.count(Admin.id))) <= 1:
            raise ConflictError("Não é possível remover o último administrador")

        db.delete(admin)
        db.commit()
        logger.info(f"🗑️ Administrador {admin_id} removido")

    def authenticate(self, db: Session, email: str, password: str) -> Admin | None:
        """
        Autentica um administrador verificando email e senha.

        Returns:
            Admin se autenticado, None caso contrário
        """
        admin = self.get_admin_by_email(db, email)
        if not admin:
            return None

        if not verify_password(password, admin.hashed_password):
            return None

        return admin


admin_service = AdminService()
