"""
Key Lifecycle Manager - user/API key issuance and administration.

A user row and its API key row point at each other through two independent
foreign keys (users.api_key_id and api_keys.user_id). Every operation here
that touches both tables runs in one transaction so the pair is never seen
half-written. Nothing re-checks that the two references agree afterwards:
concurrent deletes and updates on the same rows can leave them out of step.
"""

import logging
import secrets
from typing import Any, Optional

from django.conf import settings
from django.db import IntegrityError, transaction

from apps.users.models import User
from core.exceptions import Conflict, Internal, NotFound, ValidationError
from .models import ApiKey, ApiKeyStatus

logger = logging.getLogger(__name__)

USER_FIELDS_REQUIRED = "first_name, last_name, email required"


def generate_api_key() -> str:
    """Generate a random 256-bit key, hex encoded."""
    return secrets.token_hex(settings.GENERATED_KEY_BYTES)


def select_api_key(client_key: Any) -> str:
    """Use the client's key when it is a long enough string, else generate one."""
    if isinstance(client_key, str) and len(client_key) > settings.CLIENT_KEY_MIN_LENGTH:
        return client_key
    return generate_api_key()


def _require_user_fields(first_name, last_name, email) -> None:
    if not first_name or not last_name or not email:
        raise ValidationError(USER_FIELDS_REQUIRED)


def _user_name(user: Optional[User]) -> Optional[str]:
    return user.full_name if user else None


class KeyLifecycleManager:
    """
    Business operations over users and their API keys.

    Args:
        using: database alias every query and transaction runs against
    """

    def __init__(self, using: str = "default"):
        self.using = using

    def _users(self):
        return User.objects.using(self.using)

    def _keys(self):
        return ApiKey.objects.using(self.using)

    def create_user_with_key(
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        email: Optional[str],
        client_key: Any = None,
    ) -> tuple[User, str]:
        """
        Create a user together with its API key.

        Inserts the user, inserts the key owned by that user, then points the
        user at the key. All three statements commit or roll back together.

        Returns:
            (user, api_key string)
        """
        _require_user_fields(first_name, last_name, email)
        final_key = select_api_key(client_key)

        try:
            with transaction.atomic(using=self.using):
                user = self._users().create(
                    first_name=first_name,
                    last_name=last_name,
                    email=email,
                )
                api_key = self._keys().create(api_key=final_key, user=user)
                self._users().filter(id=user.id).update(api_key=api_key)
                user.api_key = api_key
        except IntegrityError:
            if self._users().filter(email=email).exists():
                logger.info(f"[Keys] Duplicate email on user create: {email}")
                raise Conflict("Email already registered")
            logger.info("[Keys] Duplicate client supplied API key on user create")
            raise Conflict("API key already exists")
        except Exception:
            logger.exception(f"[Keys] User create failed for {email}")
            raise Internal()

        logger.info(f"[Keys] Created user {user.id} with API key {api_key.id}")
        return user, final_key

    def check_key_validity(self, api_key: str) -> dict[str, Any]:
        """Look up a key. An unknown key is reported as invalid, never raised."""
        key = self._keys().select_related("user").filter(api_key=api_key).first()
        if key is None:
            return {"valid": False, "message": "API key invalid"}

        owner = key.user
        return {
            "valid": True,
            "message": "API key valid",
            "row": {
                "id": key.id,
                "api_key": key.api_key,
                "user_id": key.user_id,
                "status": key.status,
                "created_at": key.created_at,
                "first_name": owner.first_name if owner else None,
                "last_name": owner.last_name if owner else None,
                "email": owner.email if owner else None,
            },
        }

    def toggle_key_status(self, key_id: int) -> str:
        """Flip a key between active and inactive. Ownership is untouched."""
        with transaction.atomic(using=self.using):
            key = self._keys().select_for_update().filter(id=key_id).first()
            if key is None:
                raise NotFound("Not found")

            flipped = ApiKeyStatus.INACTIVE if key.status == ApiKeyStatus.ACTIVE else ApiKeyStatus.ACTIVE
            key.status = flipped.value
            key.save(update_fields=["status"])

        logger.info(f"[Keys] API key {key_id} is now {key.status}")
        return key.status

    def update_user(
        self,
        user_id: int,
        first_name: Optional[str],
        last_name: Optional[str],
        email: Optional[str],
    ) -> None:
        """
        Replace a user's name and email. Key linkage is never touched.

        An unknown user_id updates nothing and still succeeds.
        """
        _require_user_fields(first_name, last_name, email)

        try:
            with transaction.atomic(using=self.using):
                updated = self._users().filter(id=user_id).update(
                    first_name=first_name,
                    last_name=last_name,
                    email=email,
                )
        except IntegrityError:
            logger.info(f"[Keys] Duplicate email on user {user_id} update: {email}")
            raise Conflict("Email already registered")
        except Exception:
            logger.exception(f"[Keys] Update failed for user {user_id}")
            raise Internal()

        if not updated:
            logger.warning(f"[Keys] Update matched no user with id {user_id}")

    def delete_user(self, user_id: int) -> None:
        """Detach the user's key (the key row survives), then delete the user."""
        try:
            with transaction.atomic(using=self.using):
                row = self._users().filter(id=user_id).values("api_key_id").first()
                if row and row["api_key_id"]:
                    self._keys().filter(id=row["api_key_id"]).update(user=None)
                self._users().filter(id=user_id).delete()
        except Exception:
            logger.exception(f"[Keys] Delete failed for user {user_id}")
            raise Internal()

        logger.info(f"[Keys] Deleted user {user_id}")

    def delete_api_key(self, key_id: int) -> None:
        """Clear every user reference to the key, then delete the key row."""
        try:
            with transaction.atomic(using=self.using):
                self._users().filter(api_key_id=key_id).update(api_key=None)
                self._keys().filter(id=key_id).delete()
        except Exception:
            logger.exception(f"[Keys] Delete failed for API key {key_id}")
            raise Internal()

        logger.info(f"[Keys] Deleted API key {key_id}")

    def list_api_keys(self) -> list[dict[str, Any]]:
        """All keys with their owner's display name, newest first."""
        keys = self._keys().select_related("user").order_by("-created_at", "-id")
        return [
            {
                "id": key.id,
                "api_key": key.api_key,
                "user_id": key.user_id,
                "status": key.status,
                "created_at": key.created_at,
                "user_name": _user_name(key.user),
            }
            for key in keys
        ]

    def list_users(self) -> list[dict[str, Any]]:
        """All users with the key they reference, newest first."""
        users = self._users().select_related("api_key").order_by("-created_at", "-id")
        return [
            {
                "id": user.id,
                "first_name": user.first_name,
                "last_name": user.last_name,
                "email": user.email,
                "api_key": user.api_key.api_key if user.api_key else None,
                "created_at": user.created_at,
                "status": user.api_key.status if user.api_key else None,
            }
            for user in users
        ]

    def status_summary(self) -> dict[str, int]:
        """Dashboard counters."""
        return {
            "usersCount": self._users().count(),
            "apiCount": self._keys().count(),
            "activeCount": self._keys().filter(status=ApiKeyStatus.ACTIVE).count(),
        }
