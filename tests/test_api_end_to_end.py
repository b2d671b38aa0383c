"""
Testes da API
=============
Fluxos completos via TestClient: autenticação, permissões, códigos HTTP
e formato dos erros.
"""

import base64

import pytest
from conftest import ADMIN_EMAIL, store_payload, supplier_payload

PHOTO = base64.b64encode(b"\xff\xd8\xff\xe0fake-jpeg").decode()


# ═══════════════════════════════════════════════════════════
# AUTENTICAÇÃO
# ═══════════════════════════════════════════════════════════

class TestAuth:

    def test_login_and_me(self, client, admin_headers):
        response = client.get("/auth/me", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["role"] == "admin"

    def test_login_wrong_password(self, client, admin):
        response = client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": "errada"})

        assert response.status_code == 401
        body = response.json()
        assert body["error"] == "unauthorized"
        assert "correlation_id" in body

    def test_supplier_access_any_punctuation(self, client, supplier):
        response = client.post("/auth/supplier-access", json={"cnpj": "12345678/0001-90"})

        assert response.status_code == 200
        assert response.json()["role"] == "supplier"
        assert response.json()["subject"] == str(supplier.id)

    def test_supplier_access_unknown(self, client, supplier):
        response = client.post("/auth/supplier-access", json={"cnpj": "99.999.999/0001-99"})

        assert response.status_code == 401

    def test_store_access(self, client, store):
        response = client.post("/auth/store-access", json={"code": "001"})

        assert response.status_code == 200
        assert response.json()["role"] == "store"

    def test_missing_token(self, client):
        response = client.get("/stores")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token(self, client):
        response = client.get("/stores", headers={"Authorization": "Bearer nao-e-um-jwt"})

        assert response.status_code == 401

    def test_store_cannot_use_admin_routes(self, client, store_headers):
        response = client.post("/stores", json=store_payload("002"), headers=store_headers)

        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

    def test_token_of_deleted_store_is_rejected(self, client, store_headers, admin_headers):
        assert client.delete("/stores/001", headers=admin_headers).status_code == 204

        assert client.get("/stores", headers=store_headers).status_code == 401


# ═══════════════════════════════════════════════════════════
# FORNECEDORES
# ═══════════════════════════════════════════════════════════

class TestSuppliersApi:

    def test_create_and_lookup_by_cnpj(self, client, admin_headers):
        created = client.post("/suppliers", json=supplier_payload(), headers=admin_headers)
        assert created.status_code == 201
        assert created.json()["budget"] == 15000.0

        for cnpj in ("12345678000190", "12.345.678/0001-90"):
            response = client.get(f"/suppliers/cnpj/{cnpj}", headers=admin_headers)
            assert response.status_code == 200
            assert response.json()["id"] == created.json()["id"]

    def test_lookup_unknown_cnpj(self, client, admin_headers):
        response = client.get("/suppliers/cnpj/99999999000199", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    def test_invalid_payload_is_400(self, client, admin_headers):
        response = client.post("/suppliers", json=supplier_payload(cnpj="123"), headers=admin_headers)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["details"][0]["field"] == "cnpj"

    def test_duplicate_cnpj_is_409(self, client, admin_headers, supplier):
        response = client.post("/suppliers", json=supplier_payload(), headers=admin_headers)

        assert response.status_code == 409

    def test_patch_partial(self, client, admin_headers, supplier):
        response = client.patch(f"/suppliers/{supplier.id}", json={"budget": "20000.50"}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["budget"] == 20000.5
        assert response.json()["name"] == "SuperTech Supplies"

    def test_get_missing_is_404(self, client, admin_headers):
        assert client.get("/suppliers/999", headers=admin_headers).status_code == 404


# ═══════════════════════════════════════════════════════════
# LOJAS
# ═══════════════════════════════════════════════════════════

class TestStoresApi:

    def test_create_delete_get(self, client, admin_headers):
        assert client.post("/stores", json=store_payload("051"), headers=admin_headers).status_code == 201
        assert client.delete("/stores/051", headers=admin_headers).status_code == 204

        response = client.get("/stores/051", headers=admin_headers)
        assert response.status_code == 404

    def test_search_by_state(self, client, admin_headers, make_store):
        make_store("001", state="SP")
        make_store("002", state="RJ", city="Rio de Janeiro", zip_code="20001-000")

        response = client.post("/stores/search", json={"state": "SP"}, headers=admin_headers)

        assert response.status_code == 200
        assert [s["code"] for s in response.json()] == ["001"]

    def test_invalid_state_is_400(self, client, admin_headers):
        response = client.post("/stores", json=store_payload("003", state="XX"), headers=admin_headers)

        assert response.status_code == 400

    def test_patch_code_is_rejected(self, client, admin_headers, store):
        response = client.patch("/stores/001", json={"code": "999"}, headers=admin_headers)

        assert response.status_code == 400

    def test_code_with_slash_is_400(self, client, admin_headers):
        response = client.post("/stores", json=store_payload("A/1"), headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "code"
        assert client.get("/stores", headers=admin_headers).json() == []

    def test_kits_filtered_by_store(self, client, admin_headers, make_store):
        make_store("001")
        make_store("002")
        for code in ("001", "002", None):
            client.post(
                "/kits", json={"part_name": "Painel", "description": "LED", "store_code": code}, headers=admin_headers
            )

        response = client.get("/kits", params={"store_code": "002"}, headers=admin_headers)

        assert response.status_code == 200
        assert [k["store_code"] for k in response.json()] == ["002"]
        assert len(client.get("/kits", headers=admin_headers).json()) == 3


# ═══════════════════════════════════════════════════════════
# CHAMADOS
# ═══════════════════════════════════════════════════════════

class TestTicketsApi:

    def test_open_and_resolve_twice(self, client, admin_headers, store_headers, supplier):
        created = client.post(
            "/tickets",
            json={"description": "Painel quebrado", "store_code": "001", "supplier_id": supplier.id},
            headers=store_headers,
        )
        assert created.status_code == 201
        assert created.json()["status"] == "open"
        ticket_id = created.json()["id"]

        first = client.patch(f"/tickets/{ticket_id}/resolve", headers=admin_headers)
        second = client.patch(f"/tickets/{ticket_id}/resolve", headers=admin_headers)

        assert first.status_code == second.status_code == 200
        assert second.json()["status"] == "resolved"
        assert second.json()["resolved_at"] == first.json()["resolved_at"]
        assert second.json()["resolved_by"] == ADMIN_EMAIL

    def test_filter_by_status(self, client, admin_headers, store, supplier):
        payload = {"description": "Chamado", "store_code": "001", "supplier_id": supplier.id}
        client.post("/tickets", json=payload, headers=admin_headers)
        client.post("/tickets", json=payload, headers=admin_headers)

        response = client.get("/tickets", params={"status": "open"}, headers=admin_headers)

        assert response.status_code == 200
        assert len(response.json()) == 2
        assert client.get("/tickets", params={"status": "resolved"}, headers=admin_headers).json() == []

    def test_unknown_store_is_400(self, client, admin_headers, supplier):
        response = client.post(
            "/tickets",
            json={"description": "X", "store_code": "nao-existe", "supplier_id": supplier.id},
            headers=admin_headers,
        )

        assert response.status_code == 400

    def test_store_cannot_resolve(self, client, store_headers, supplier):
        created = client.post(
            "/tickets",
            json={"description": "X", "store_code": "001", "supplier_id": supplier.id},
            headers=store_headers,
        )

        response = client.patch(f"/tickets/{created.json()['id']}/resolve", headers=store_headers)
        assert response.status_code == 403

    def test_opener_comes_from_token(self, client, store_headers, supplier):
        created = client.post(
            "/tickets",
            json={"description": "X", "store_code": "001", "supplier_id": supplier.id},
            headers=store_headers,
        )

        assert created.status_code == 201
        assert created.json()["opened_by_role"] == "store"
        assert created.json()["opened_by"] == "001"
        assert created.json()["opened_by_name"] == "Loja 001"

    def test_store_cannot_open_for_another_store(self, client, store_headers, make_store, supplier):
        make_store("999")

        response = client.post(
            "/tickets",
            json={"description": "X", "store_code": "999", "supplier_id": supplier.id},
            headers=store_headers,
        )

        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

    def test_supplier_cannot_open_in_another_name(self, client, supplier_headers, store, supplier, admin_headers):
        other = client.post("/suppliers", json=supplier_payload(cnpj="98765432000110"), headers=admin_headers)

        response = client.post(
            "/tickets",
            json={"description": "X", "store_code": "001", "supplier_id": other.json()["id"]},
            headers=supplier_headers,
        )

        assert response.status_code == 403

    def test_filter_by_type(self, client, admin_headers, store_headers, supplier_headers, supplier):
        payload = {"description": "Chamado", "store_code": "001", "supplier_id": supplier.id}
        client.post("/tickets", json=payload, headers=store_headers)
        client.post("/tickets", json=payload, headers=supplier_headers)
        client.post("/tickets", json=payload, headers=admin_headers)

        by_supplier = client.get("/tickets", params={"type": "supplier"}, headers=admin_headers)

        assert by_supplier.status_code == 200
        assert [t["opened_by"] for t in by_supplier.json()] == [str(supplier.id)]
        assert len(client.get("/tickets", params={"type": "store"}, headers=admin_headers).json()) == 1
        assert client.get("/tickets", params={"type": "outro"}, headers=admin_headers).status_code == 400


# ═══════════════════════════════════════════════════════════
# FOTOS, INSTALAÇÕES E DASHBOARD
# ═══════════════════════════════════════════════════════════

class TestInstallationsApi:

    def test_checklist_flow(self, client, admin_headers, store_headers, supplier):
        before = client.get("/dashboard/metrics", headers=admin_headers).json()

        response = client.post(
            "/installations",
            json={
                "store_code": "001",
                "supplier_id": supplier.id,
                "installer_name": "José Instalador",
                "installation_date": "2026-05-10",
                "photos": [PHOTO, PHOTO, PHOTO],
            },
            headers=store_headers,
        )
        assert response.status_code == 201
        assert response.json()["photo_count"] == 3

        after = client.get("/dashboard/metrics", headers=admin_headers).json()
        assert after["completed_installations"] - before["completed_installations"] <= 1
        assert after["completed_installations"] == 1

        listed = client.get("/installations", params={"store_code": "001"}, headers=store_headers)
        assert [i["id"] for i in listed.json()] == [response.json()["id"]]

    def test_too_many_photos_is_400(self, client, store_headers, supplier):
        response = client.post(
            "/installations",
            json={
                "store_code": "001",
                "supplier_id": supplier.id,
                "installer_name": "José",
                "installation_date": "2026-05-10",
                "photos": [PHOTO] * 7,
            },
            headers=store_headers,
        )

        assert response.status_code == 400

    def test_photos_for_store(self, client, store_headers):
        created = client.post(
            "/photos", json={"store_code": "001", "url": "https://cdn.exemplo.com/a.jpg"}, headers=store_headers
        )
        assert created.status_code == 201

        response = client.get("/photos/001", headers=store_headers)
        assert [p["url"] for p in response.json()] == ["https://cdn.exemplo.com/a.jpg"]
        assert client.get("/photos/999", headers=store_headers).json() == []

    def test_dashboard_requires_admin(self, client, store_headers):
        assert client.get("/dashboard/metrics", headers=store_headers).status_code == 403


# ═══════════════════════════════════════════════════════════
# ADMINISTRADORES E HEALTH
# ═══════════════════════════════════════════════════════════

class TestAdminsApi:

    def test_admin_crud(self, client, admin_headers, admin):
        created = client.post(
            "/admins",
            json={"name": "Bia", "email": "bia@franquia.com.br", "password": "segredo123"},
            headers=admin_headers,
        )
        assert created.status_code == 201
        assert "hashed_password" not in created.json()

        assert client.delete(f"/admins/{created.json()['id']}", headers=admin_headers).status_code == 204

    def test_cannot_delete_last_admin(self, client, admin_headers, admin):
        response = client.delete(f"/admins/{admin.id}", headers=admin_headers)

        assert response.status_code == 409


@pytest.mark.parametrize("path", ["/health"])
def test_health_is_public(client, path):
    response = client.get(path)

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
