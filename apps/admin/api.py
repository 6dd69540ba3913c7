"""
Admin API endpoints - user and API key administration.

Every route sits behind AdminBearer, so handlers only run for requests
carrying a valid admin token.
"""

import logging

from django.http import HttpRequest
from ninja import Router

from utils.auth import AdminBearer, get_current_admin
from apps.keys.services import KeyLifecycleManager
from apps.users.schemas import UserUpdateIn
from .schemas import (
    ApiKeysListOut,
    MessageOut,
    StatusOut,
    ToggleOut,
    UsersListOut,
)

logger = logging.getLogger(__name__)

router = Router(auth=AdminBearer())

manager = KeyLifecycleManager()


@router.get("/users", response=UsersListOut)
def list_users(request: HttpRequest):
    """List users with their API key and its status."""
    return {"users": manager.list_users()}


@router.get("/apikeys", response=ApiKeysListOut)
def list_api_keys(request: HttpRequest):
    """List API keys with owner names."""
    return {"apiKeys": manager.list_api_keys()}


@router.get("/status", response=StatusOut)
def get_status(request: HttpRequest):
    """Get dashboard counters."""
    return manager.status_summary()


@router.post("/apikeys/{key_id}/toggle", response=ToggleOut)
def toggle_api_key(request: HttpRequest, key_id: int):
    """Activate or deactivate an API key."""
    status = manager.toggle_key_status(key_id)
    return ToggleOut(message="status updated", status=status)


@router.put("/users/{user_id}", response=MessageOut)
def update_user(request: HttpRequest, user_id: int, data: UserUpdateIn):
    """Replace a user's name and email."""
    manager.update_user(user_id, data.first_name, data.last_name, data.email)
    return MessageOut(message="User updated")


@router.delete("/users/{user_id}", response=MessageOut)
def delete_user(request: HttpRequest, user_id: int):
    """Delete a user, keeping its API key as an unowned row."""
    admin = get_current_admin(request)
    manager.delete_user(user_id)
    logger.info(f"[Admin] {admin.get('email')} deleted user {user_id}")
    return MessageOut(message="User deleted")


@router.delete("/apikeys/{key_id}", response=MessageOut)
def delete_api_key(request: HttpRequest, key_id: int):
    """Delete an API key, detaching it from any user first."""
    admin = get_current_admin(request)
    manager.delete_api_key(key_id)
    logger.info(f"[Admin] {admin.get('email')} deleted API key {key_id}")
    return MessageOut(message="API key deleted")
