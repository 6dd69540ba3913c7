"""
User schemas for API.
"""

from datetime import datetime
from typing import Any
from ninja import Schema


class UserCreateIn(Schema):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    # Kept verbatim only when it is a string longer than 10 characters
    apiKey: Any = None


class UserUpdateIn(Schema):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None


class UserOut(Schema):
    id: int
    first_name: str
    last_name: str
    email: str


class UserCreateOut(Schema):
    message: str
    user: UserOut
    apiKey: str


class AdminUserRowOut(Schema):
    id: int
    first_name: str
    last_name: str
    email: str
    api_key: str | None = None
    created_at: datetime
    status: str | None = None
