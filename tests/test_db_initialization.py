"""
Testes da Inicialização do Banco
================================
"""

from sqlalchemy import func, select

from src.core import models
from src.core.config import config
from src.core.db_initialization import seed_bootstrap_admin, seed_sample_data
from src.core.security.security import verify_password


def test_bootstrap_admin_created_once(db, monkeypatch):
    monkeypatch.setattr(config, "BOOTSTRAP_ADMIN_EMAIL", "Boot@Franquia.com.br")
    monkeypatch.setattr(config, "BOOTSTRAP_ADMIN_PASSWORD", "senha-inicial-123")

    admin = seed_bootstrap_admin(db)

    assert admin.email == "boot@franquia.com.br"
    assert verify_password("senha-inicial-123", admin.hashed_password)
    assert seed_bootstrap_admin(db) is None
    assert db.scalar(select(func.count(models.Admin.id))) == 1


def test_bootstrap_admin_not_configured(db):
    assert seed_bootstrap_admin(db) is None
    assert db.scalar(select(func.count(models.Admin.id))) == 0


def test_sample_data_is_idempotent(db):
    seed_sample_data(db)
    seed_sample_data(db)

    assert db.scalar(select(func.count(models.Supplier.id))) == 2
    assert db.scalar(select(func.count(models.Store.id))) == 3
    assert db.scalar(select(func.count(models.Kit.id))) == 2
    assert db.scalar(select(models.Supplier).where(models.Supplier.cnpj_digits == "12345678000190")) is not None
