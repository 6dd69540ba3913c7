"""
Admin schemas for API.
"""

from ninja import Schema

from apps.keys.schemas import ApiKeyRowOut
from apps.users.schemas import AdminUserRowOut


class UsersListOut(Schema):
    users: list[AdminUserRowOut]


class ApiKeysListOut(Schema):
    apiKeys: list[ApiKeyRowOut]


class StatusOut(Schema):
    """Dashboard counters - camelCase for frontend."""

    usersCount: int
    apiCount: int
    activeCount: int


class ToggleOut(Schema):
    message: str
    status: str


class MessageOut(Schema):
    message: str
