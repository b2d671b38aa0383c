"""
Fixtures compartilhadas
=======================
Banco SQLite em memória por teste e TestClient com get_db sobrescrito.
"""

import os

# Precisa vir antes de qualquer import de src.*: a config é lida no import
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key-with-at-least-32-characters"
os.environ["BOOTSTRAP_ADMIN_EMAIL"] = ""
os.environ["BOOTSTRAP_ADMIN_PASSWORD"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.api.admin.services.store_service import store_service
from src.api.admin.services.supplier_service import supplier_service
from src.api.schemas.store import StoreCreate
from src.api.schemas.supplier import SupplierCreate
from src.core import models
from src.core.database import get_db
from src.core.dependencies import Principal
from src.core.security.security import get_password_hash
from src.core.utils.enums import PrincipalRole
from src.main import app

ADMIN_EMAIL = "admin@franquia.com.br"
ADMIN_PASSWORD = "senha-forte-123"


# ═══════════════════════════════════════════════════════════
# BANCO DE DADOS
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    models.Base.metadata.create_all(bind=test_engine)
    yield test_engine
    models.Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    """Sessão usada diretamente pelos testes de service"""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """TestClient com uma sessão nova por requisição, como em produção"""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ═══════════════════════════════════════════════════════════
# DADOS DE EXEMPLO
# ═══════════════════════════════════════════════════════════

def supplier_payload(**overrides) -> dict:
    data = {
        "name": "SuperTech Supplies",
        "cnpj": "12.345.678/0001-90",
        "responsible_name": "João Silva",
        "phone": "(11) 99999-9999",
        "address": "Rua das Flores, 123",
        "budget": "15000.00",
    }
    data.update(overrides)
    return data


def store_payload(code: str = "001", **overrides) -> dict:
    data = {
        "code": code,
        "name": f"Loja {code}",
        "operator_name": "Maria Santos",
        "street": "Rua Principal",
        "number": "100",
        "complement": None,
        "neighborhood": "Centro",
        "city": "São Paulo",
        "state": "SP",
        "zip_code": "01010-000",
        "region": "Sudeste",
        "phone": "(11) 1111-1111",
    }
    data.update(overrides)
    return data


@pytest.fixture
def admin(db):
    admin = models.Admin(
        name="Administrador",
        email=ADMIN_EMAIL,
        hashed_password=get_password_hash(ADMIN_PASSWORD),
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


@pytest.fixture
def supplier(db):
    return supplier_service.create_supplier(db, SupplierCreate(**supplier_payload()))


@pytest.fixture
def store(db):
    return store_service.create_store(db, StoreCreate(**store_payload("001")))


@pytest.fixture
def make_store(db):
    def _make(code: str, **overrides):
        return store_service.create_store(db, StoreCreate(**store_payload(code, **overrides)))
    return _make


@pytest.fixture
def admin_headers(client, admin):
    response = client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def store_headers(client, store):
    response = client.post("/auth/store-access", json={"code": store.code})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def supplier_headers(client, supplier):
    response = client.post("/auth/supplier-access", json={"cnpj": supplier.cnpj})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


# ═══════════════════════════════════════════════════════════
# PRINCIPAIS (testes de service)
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def admin_principal(admin):
    return Principal(role=PrincipalRole.ADMIN, subject=str(admin.id), name=admin.name, entity=admin)


@pytest.fixture
def store_principal(store):
    return Principal(role=PrincipalRole.STORE, subject=store.code, name=store.name, entity=store)


@pytest.fixture
def supplier_principal(supplier):
    return Principal(role=PrincipalRole.SUPPLIER, subject=str(supplier.id), name=supplier.name, entity=supplier)
