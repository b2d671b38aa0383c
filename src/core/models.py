from __future__ import annotations

import uuid
from datetime import datetime, date, timezone
from decimal import Decimal

from sqlalchemy import JSON, Date, DateTime, Enum, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from src.core.utils.enums import PrincipalRole, TicketStatus


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_installation_id() -> str:
    """Identificador opaco de instalação, ex.: inst_3f2a..."""
    return f"inst_{uuid.uuid4().hex}"


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        index=True
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow
    )


class Supplier(Base, TimestampMixin):
    __tablename__ = "suppliers"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))

    # CNPJ como digitado e a forma normalizada (só dígitos) usada nas buscas
    cnpj: Mapped[str] = mapped_column(String(18))
    cnpj_digits: Mapped[str] = mapped_column(String(14), unique=True, index=True)

    responsible_name: Mapped[str] = mapped_column(String(255))
    phone: Mapped[str] = mapped_column(String(20))
    address: Mapped[str] = mapped_column(Text)
    budget: Mapped[Decimal] = mapped_column(Numeric(12, 2))

    tickets: Mapped[list["Ticket"]] = relationship(back_populates="supplier")
    installations: Mapped[list["Installation"]] = relationship(back_populates="supplier")


class Store(Base, TimestampMixin):
    __tablename__ = "stores"

    id: Mapped[int] = mapped_column(primary_key=True)
    code: Mapped[str] = mapped_column(String(20), unique=True, index=True)

    name: Mapped[str] = mapped_column(String(255))
    operator_name: Mapped[str] = mapped_column(String(255))
    phone: Mapped[str] = mapped_column(String(20))

    # --- Endereço ---
    street: Mapped[str] = mapped_column(String(255))
    number: Mapped[str] = mapped_column(String(10))
    complement: Mapped[str | None] = mapped_column(String(100), nullable=True)
    neighborhood: Mapped[str] = mapped_column(String(100))
    city: Mapped[str] = mapped_column(String(100), index=True)
    state: Mapped[str] = mapped_column(String(2), index=True)
    zip_code: Mapped[str] = mapped_column(String(10))
    region: Mapped[str] = mapped_column(String(50))

    kits: Mapped[list["Kit"]] = relationship(back_populates="store")
    tickets: Mapped[list["Ticket"]] = relationship(back_populates="store")
    photos: Mapped[list["Photo"]] = relationship(back_populates="store")
    installations: Mapped[list["Installation"]] = relationship(back_populates="store")


class Kit(Base, TimestampMixin):
    __tablename__ = "kits"

    id: Mapped[int] = mapped_column(primary_key=True)
    part_name: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text)
    image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    used: Mapped[bool] = mapped_column(default=False)

    store_code: Mapped[str | None] = mapped_column(
        ForeignKey("stores.code", ondelete="SET NULL"), nullable=True, index=True
    )
    store: Mapped[Store | None] = relationship(back_populates="kits")


class Ticket(Base):
    __tablename__ = "tickets"

    id: Mapped[int] = mapped_column(primary_key=True)
    description: Mapped[str] = mapped_column(Text)
    status: Mapped[TicketStatus] = mapped_column(Enum(TicketStatus), default=TicketStatus.OPEN, index=True)

    store_code: Mapped[str] = mapped_column(ForeignKey("stores.code"), index=True)
    supplier_id: Mapped[int] = mapped_column(ForeignKey("suppliers.id"), index=True)

    # Quem abriu: papel do token e sua chave (id do admin/fornecedor ou código da loja)
    opened_by_role: Mapped[PrincipalRole] = mapped_column(Enum(PrincipalRole), index=True)
    opened_by: Mapped[str] = mapped_column(String(255))
    opened_by_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    resolved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    resolved_by: Mapped[str | None] = mapped_column(String(255), nullable=True)

    store: Mapped["Store"] = relationship(back_populates="tickets")
    supplier: Mapped["Supplier"] = relationship(back_populates="tickets")


class Admin(Base, TimestampMixin):
    __tablename__ = "admins"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255))


class Photo(Base):
    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(primary_key=True)
    store_code: Mapped[str] = mapped_column(ForeignKey("stores.code"), index=True)
    url: Mapped[str] = mapped_column(String(500))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    store: Mapped["Store"] = relationship(back_populates="photos")


class Installation(Base):
    __tablename__ = "installations"

    id: Mapped[str] = mapped_column(String(40), primary_key=True, default=generate_installation_id)
    store_code: Mapped[str] = mapped_column(ForeignKey("stores.code"), index=True)
    supplier_id: Mapped[int] = mapped_column(ForeignKey("suppliers.id"), index=True)
    installer_name: Mapped[str] = mapped_column(String(255))
    installation_date: Mapped[date] = mapped_column(Date, index=True)

    # Lista de fotos em base64 (JPEG comprimido no cliente)
    photos: Mapped[list[str]] = mapped_column(JSON, default=list)
    photo_count: Mapped[int] = mapped_column(default=0)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    store: Mapped["Store"] = relationship(back_populates="installations")
    supplier: Mapped["Supplier"] = relationship(back_populates="installations")

    __table_args__ = (
        Index('idx_installations_store_photos', 'store_code', 'photo_count'),
    )
