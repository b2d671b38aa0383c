"""
Testes do Serviço de Fornecedores
=================================
CRUD, busca por CNPJ tolerante a pontuação e integridade referencial
"""

from decimal import Decimal

import pytest
from conftest import supplier_payload

from src.api.admin.services.supplier_service import supplier_service
from src.api.admin.services.ticket_service import ticket_service
from src.api.schemas.supplier import SupplierCreate, SupplierUpdate
from src.api.schemas.ticket import TicketCreate
from src.core.exceptions import ConflictError, NotFoundError, ValidationError


class TestCnpjLookup:

    @pytest.mark.parametrize("query", [
        "12.345.678/0001-90",
        "12345678000190",
        "12.345.678/000190",
        " 12 345 678 0001-90 ",
    ])
    def test_lookup_in_any_format(self, db, supplier, query):
        found = supplier_service.get_supplier_by_cnpj(db, query)
        assert found.id == supplier.id

    def test_lookup_stored_without_punctuation(self, db):
        created = supplier_service.create_supplier(
            db, SupplierCreate(**supplier_payload(name="ABC Ferramentas", cnpj="98765432000110"))
        )

        assert supplier_service.get_supplier_by_cnpj(db, "98.765.432/0001-10").id == created.id

    def test_partial_lookup_returns_lowest_id(self, db, supplier):
        supplier_service.create_supplier(db, SupplierCreate(**supplier_payload(cnpj="12345678000271")))

        found = supplier_service.get_supplier_by_cnpj(db, "12345678")
        assert found.id == supplier.id

    def test_lookup_not_found(self, db, supplier):
        with pytest.raises(NotFoundError):
            supplier_service.get_supplier_by_cnpj(db, "99.999.999/0001-99")

    def test_lookup_without_digits(self, db):
        with pytest.raises(ValidationError):
            supplier_service.get_supplier_by_cnpj(db, "./-")


class TestSupplierCrud:

    def test_create_and_get(self, db, supplier):
        fetched = supplier_service.get_supplier_by_id(db, supplier.id)

        assert fetched.name == "SuperTech Supplies"
        assert fetched.cnpj_digits == "12345678000190"
        assert fetched.budget == Decimal("15000.00")

    def test_duplicate_cnpj_conflict(self, db, supplier):
        with pytest.raises(ConflictError):
            supplier_service.create_supplier(db, SupplierCreate(**supplier_payload(cnpj="12345678000190")))

    def test_partial_update_keeps_other_fields(self, db, supplier):
        updated = supplier_service.update_supplier(db, supplier.id, SupplierUpdate(phone="(11) 90000-0000"))

        assert updated.phone == "(11) 90000-0000"
        assert updated.name == "SuperTech Supplies"
        assert updated.budget == Decimal("15000.00")

    def test_update_cnpj_recomputes_digits(self, db, supplier):
        updated = supplier_service.update_supplier(db, supplier.id, SupplierUpdate(cnpj="11.222.333/0001-44"))

        assert updated.cnpj_digits == "11222333000144"

    def test_update_missing(self, db):
        with pytest.raises(NotFoundError):
            supplier_service.update_supplier(db, 999, SupplierUpdate(name="X"))

    def test_delete(self, db, supplier):
        supplier_service.delete_supplier(db, supplier.id)

        with pytest.raises(NotFoundError):
            supplier_service.get_supplier_by_id(db, supplier.id)

    def test_delete_with_ticket_conflict(self, db, supplier, store, admin_principal):
        ticket_service.create_ticket(
            db,
            TicketCreate(description="Painel quebrado", store_code=store.code, supplier_id=supplier.id),
            opened_by=admin_principal,
        )

        with pytest.raises(ConflictError):
            supplier_service.delete_supplier(db, supplier.id)

    def test_list_ordered_by_id(self, db, supplier):
        other = supplier_service.create_supplier(db, SupplierCreate(**supplier_payload(cnpj="98765432000110")))

        assert [s.id for s in supplier_service.list_suppliers(db)] == [supplier.id, other.id]


class TestSupplierSchema:

    def test_cnpj_must_have_14_digits(self):
        with pytest.raises(ValueError):
            SupplierCreate(**supplier_payload(cnpj="123.456"))

    def test_budget_must_be_positive(self):
        with pytest.raises(ValueError):
            SupplierCreate(**supplier_payload(budget="0"))

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError):
            SupplierCreate(**supplier_payload(name="   "))
