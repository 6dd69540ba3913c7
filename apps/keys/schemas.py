"""
API Key schemas for API.
"""

from datetime import datetime
from typing import Any
from ninja import Schema


class CheckKeyIn(Schema):
    apiKey: Any = None


class ApiKeyRowOut(Schema):
    id: int
    api_key: str
    user_id: int | None = None
    status: str
    created_at: datetime
    user_name: str | None = None


class ApiKeyListOut(Schema):
    count: int
    apiKeys: list[ApiKeyRowOut]
