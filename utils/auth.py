"""
JWT Authentication utilities for Django Ninja.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from django.conf import settings
from django.http import HttpRequest
from ninja.security import HttpBearer

from apps.auth.models import Admin
from core.exceptions import Unauthorized

NO_TOKEN = "No token provided"
INVALID_TOKEN = "Invalid or expired token"


@dataclass(frozen=True)
class GateResult:
    """Outcome of the admin authorization gate."""
    admitted: bool
    claims: Optional[dict[str, Any]] = None
    reason: Optional[str] = None

    @classmethod
    def admit(cls, claims: dict[str, Any]) -> "GateResult":
        return cls(admitted=True, claims=claims)

    @classmethod
    def reject(cls, reason: str) -> "GateResult":
        return cls(admitted=False, reason=reason)


def create_token(admin: Admin) -> str:
    """Create JWT token for admin."""
    now = datetime.now(timezone.utc)
    payload = {
        "id": admin.id,
        "email": admin.email,
        "exp": now + timedelta(hours=settings.JWT_EXPIRE_HOURS),
        "iat": now,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> dict[str, Any]:
    """Verify JWT token and return its claims.

    Every failure (malformed, expired, bad signature, missing claims) is
    reported with the same Unauthorized message.
    """
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp"]},
        )
    except jwt.InvalidTokenError:
        raise Unauthorized(INVALID_TOKEN)

    if payload.get("id") is None:
        raise Unauthorized(INVALID_TOKEN)
    return payload


def extract_token(header: str) -> str:
    """Take the credential part of an Authorization header.

    "Bearer <token>" yields <token>; a bare token is used as is.
    """
    parts = header.split(" ")
    if len(parts) > 1 and parts[1]:
        return parts[1]
    return header


def authorize(header: Optional[str]) -> GateResult:
    """Decide whether a request carrying this Authorization header is admitted."""
    if not header:
        return GateResult.reject(NO_TOKEN)

    try:
        claims = verify_token(extract_token(header))
    except Unauthorized as exc:
        return GateResult.reject(exc.message)
    return GateResult.admit(claims)


class AdminBearer(HttpBearer):
    """Admin JWT authentication, tolerant of tokens sent without the Bearer prefix."""

    def __call__(self, request: HttpRequest) -> Optional[dict[str, Any]]:
        result = authorize(request.headers.get(self.header))
        if not result.admitted:
            raise Unauthorized(result.reason)
        return self.authenticate(request, result.claims)

    def authenticate(self, request: HttpRequest, claims: dict[str, Any]) -> dict[str, Any]:
        request.admin = claims
        return claims


def get_current_admin(request: HttpRequest) -> dict[str, Any]:
    """Get validated admin claims from request."""
    return getattr(request, "admin", request.auth)
