"""
Admin auth schemas for API.
"""

from ninja import Schema


class AdminCredentialsIn(Schema):
    email: str | None = None
    password: str | None = None


class LoginOut(Schema):
    message: str
    token: str


class MessageOut(Schema):
    message: str
