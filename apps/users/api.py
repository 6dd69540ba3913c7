"""
Users API endpoints.
"""

from ninja import Router
from django.http import HttpRequest

from apps.keys.services import KeyLifecycleManager
from .schemas import UserCreateIn, UserCreateOut, UserOut

router = Router()

manager = KeyLifecycleManager()


@router.post("/create", response=UserCreateOut)
def create_user(request: HttpRequest, data: UserCreateIn):
    """Create a user and issue its API key."""
    user, api_key = manager.create_user_with_key(
        data.first_name,
        data.last_name,
        data.email,
        client_key=data.apiKey,
    )
    return UserCreateOut(
        message="User created and API key generated",
        user=UserOut(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        ),
        apiKey=api_key,
    )
