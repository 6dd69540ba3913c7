"""
Admin credential handling: registration and password login.
"""

import logging

import bcrypt
from django.conf import settings
from django.db import IntegrityError, transaction

from core.exceptions import Conflict, Internal, Unauthorized, ValidationError
from utils.auth import create_token
from .models import Admin

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode()[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash password using bcrypt."""
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode()


def verify_password(password: str, hashed: str) -> bool:
    """Verify password against hash."""
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed.encode())
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def _require_credentials(email: str | None, password: str | None) -> None:
    if not email or not password:
        raise ValidationError("email and password required")


def register_admin(email: str | None, password: str | None) -> Admin:
    """Create an admin account with a bcrypt-hashed password."""
    _require_credentials(email, password)

    try:
        with transaction.atomic():
            admin = Admin.objects.create(email=email, password=hash_password(password))
    except IntegrityError:
        logger.info(f"[AdminAuth] Registration rejected, email exists: {email}")
        raise Conflict("Email already registered")
    except Exception:
        logger.exception(f"[AdminAuth] Registration failed for {email}")
        raise Internal()

    logger.info(f"[AdminAuth] Registered admin {admin.id}")
    return admin


def login(email: str | None, password: str | None) -> str:
    """Check admin credentials and issue a session token.

    Unknown email and wrong password produce the same error.
    """
    _require_credentials(email, password)

    try:
        admin = Admin.objects.filter(email=email).first()
    except Exception:
        logger.exception("[AdminAuth] Admin lookup failed")
        raise Internal()

    if not admin or not verify_password(password, admin.password):
        logger.info(f"[AdminAuth] Failed login for {email}")
        raise Unauthorized(INVALID_CREDENTIALS)

    return create_token(admin)
