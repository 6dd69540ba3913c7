"""
Pytest configuration and fixtures.
"""

import json
import pytest
from django.test import Client

from apps.auth.models import Admin
from apps.auth.services import hash_password
from apps.keys.services import KeyLifecycleManager
from utils.auth import create_token

ADMIN_PASSWORD = "Admin@123456"


class APIClient:
    """Wrapper around Django test client for API testing."""

    def __init__(self):
        self.client = Client()

    def _make_request(self, method, path, data=None, headers=None):
        """Make HTTP request."""
        kwargs = {"content_type": "application/json"}

        if headers:
            kwargs.update(headers)

        if data is not None:
            kwargs["data"] = json.dumps(data)

        response = getattr(self.client, method.lower())(path, **kwargs)
        return APIResponse(response)

    def get(self, path, headers=None, **kwargs):
        return self._make_request("GET", path, headers=headers)

    def post(self, path, json=None, headers=None, **kwargs):
        return self._make_request("POST", path, data=json, headers=headers)

    def put(self, path, json=None, headers=None, **kwargs):
        return self._make_request("PUT", path, data=json, headers=headers)

    def delete(self, path, headers=None, **kwargs):
        return self._make_request("DELETE", path, headers=headers)


class APIResponse:
    """Wrapper around Django response for easier testing."""

    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code

    def json(self):
        return json.loads(self._response.content)


@pytest.fixture
def api_client():
    """API test client."""
    return APIClient()


@pytest.fixture
def manager():
    """Key lifecycle manager bound to the test database."""
    return KeyLifecycleManager()


@pytest.fixture
def admin(db):
    """Create admin for testing."""
    return Admin.objects.create(
        email="admin@test.com",
        password=hash_password(ADMIN_PASSWORD),
    )


@pytest.fixture
def auth_headers(admin):
    """Get auth headers for admin."""
    token = create_token(admin)
    return {"HTTP_AUTHORIZATION": f"Bearer {token}"}


@pytest.fixture
def jane(manager, db):
    """Create Jane Doe with a generated API key."""
    user, api_key = manager.create_user_with_key("Jane", "Doe", "jane@x.com")
    return user
