"""
Tests for Admin API endpoints.
"""

import re
from unittest.mock import patch

import pytest

from apps.keys.models import ApiKey
from apps.users.models import User


@pytest.mark.django_db
class TestAdminUsersAPI:
    """Admin user management."""

    def test_list_users(self, api_client, auth_headers, jane):
        response = api_client.get("/admin/users", headers=auth_headers)
        assert response.status_code == 200
        users = response.json()["users"]
        assert len(users) == 1
        assert users[0]["email"] == "jane@x.com"
        assert users[0]["status"] == "active"
        assert users[0]["api_key"] == jane.api_key.api_key

    def test_update_user(self, api_client, auth_headers, jane):
        response = api_client.put(
            f"/admin/users/{jane.id}",
            json={"first_name": "Janet", "last_name": "Doe", "email": "janet@x.com"},
            headers=auth_headers,
        )
        assert response.status_code == 200

        jane.refresh_from_db()
        assert jane.first_name == "Janet"
        assert jane.email == "janet@x.com"

    def test_update_user_missing_fields(self, api_client, auth_headers, jane):
        response = api_client.put(
            f"/admin/users/{jane.id}",
            json={"first_name": "Janet"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    def test_update_unknown_user_succeeds(self, api_client, auth_headers):
        response = api_client.put(
            "/admin/users/9999",
            json={"first_name": "A", "last_name": "B", "email": "c@x.com"},
            headers=auth_headers,
        )
        assert response.status_code == 200

    def test_non_integer_id(self, api_client, auth_headers):
        response = api_client.delete("/admin/users/abc", headers=auth_headers)
        assert response.status_code == 400

    def test_delete_user(self, api_client, auth_headers, jane):
        response = api_client.delete(f"/admin/users/{jane.id}", headers=auth_headers)
        assert response.status_code == 200
        assert not User.objects.filter(id=jane.id).exists()
        assert ApiKey.objects.get(id=jane.api_key_id).user_id is None

    def test_delete_user_failure_is_generic(self, api_client, auth_headers, jane):
        with patch("apps.admin.api.manager._users", side_effect=RuntimeError("connection reset")):
            response = api_client.delete(f"/admin/users/{jane.id}", headers=auth_headers)
        assert response.status_code == 500
        assert response.json() == {"message": "Server error"}


@pytest.mark.django_db
class TestAdminApiKeysAPI:
    """Admin API key management."""

    def test_list_api_keys(self, api_client, auth_headers, jane):
        response = api_client.get("/admin/apikeys", headers=auth_headers)
        assert response.status_code == 200
        keys = response.json()["apiKeys"]
        assert len(keys) == 1
        assert keys[0]["user_name"] == "Jane Doe"
        assert keys[0]["user_id"] == jane.id

    def test_status(self, api_client, auth_headers, jane):
        response = api_client.get("/admin/status", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"usersCount": 1, "apiCount": 1, "activeCount": 1}

    def test_toggle(self, api_client, auth_headers, jane):
        response = api_client.post(f"/admin/apikeys/{jane.api_key_id}/toggle", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["status"] == "inactive"

    def test_toggle_missing_key(self, api_client, auth_headers):
        response = api_client.post("/admin/apikeys/9999/toggle", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Not found"

    def test_delete_api_key(self, api_client, auth_headers, jane):
        key_id = jane.api_key_id
        response = api_client.delete(f"/admin/apikeys/{key_id}", headers=auth_headers)
        assert response.status_code == 200
        assert not ApiKey.objects.filter(id=key_id).exists()

        jane.refresh_from_db()
        assert jane.api_key_id is None


@pytest.mark.django_db
class TestProtectedRoutesRejectEarly:
    """Handlers never run without a verified token."""

    @pytest.mark.parametrize("method,path", [
        ("get", "/admin/users"),
        ("get", "/admin/apikeys"),
        ("get", "/admin/status"),
        ("post", "/admin/apikeys/1/toggle"),
        ("put", "/admin/users/1"),
        ("delete", "/admin/users/1"),
        ("delete", "/admin/apikeys/1"),
    ])
    @pytest.mark.parametrize("header", [None, "Bearer not.a.token", "garbage"])
    def test_rejected(self, api_client, method, path, header):
        headers = {"HTTP_AUTHORIZATION": header} if header else None
        with patch("apps.admin.api.manager") as manager:
            response = getattr(api_client, method)(
                path,
                json={"first_name": "A", "last_name": "B", "email": "c@x.com"},
                headers=headers,
            )
        assert response.status_code == 401
        assert not manager.method_calls

    def test_bad_token_leaves_data_intact(self, api_client, jane):
        response = api_client.delete(
            f"/admin/users/{jane.id}",
            headers={"HTTP_AUTHORIZATION": "Bearer forged"},
        )
        assert response.status_code == 401
        assert User.objects.filter(id=jane.id).exists()


@pytest.mark.django_db
class TestEndToEnd:
    """Create, validate, toggle and delete through the HTTP surface."""

    def test_user_key_lifecycle(self, api_client, auth_headers):
        created = api_client.post(
            "/user/create",
            json={"first_name": "Jane", "last_name": "Doe", "email": "jane@x.com"},
        )
        assert created.status_code == 200
        api_key = created.json()["apiKey"]
        user_id = created.json()["user"]["id"]
        assert re.fullmatch(r"[0-9a-f]{64,}", api_key)

        checked = api_client.post("/cekapi", json={"apiKey": api_key})
        assert checked.status_code == 200
        assert checked.json()["valid"] is True
        assert checked.json()["row"]["email"] == "jane@x.com"
        key_id = checked.json()["row"]["id"]

        statuses = [
            api_client.post(f"/admin/apikeys/{key_id}/toggle", headers=auth_headers).json()["status"]
            for _ in range(2)
        ]
        assert statuses == ["inactive", "active"]

        deleted = api_client.delete(f"/admin/users/{user_id}", headers=auth_headers)
        assert deleted.status_code == 200

        users = api_client.get("/admin/users", headers=auth_headers).json()["users"]
        assert all(u["id"] != user_id for u in users)

        keys = api_client.get("/admin/apikeys", headers=auth_headers).json()["apiKeys"]
        former = [k for k in keys if k["id"] == key_id]
        assert len(former) == 1
        assert former[0]["user_name"] is None
        assert former[0]["user_id"] is None
