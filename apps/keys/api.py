"""
Public API key endpoints - validity check and debug listing.
"""

from django.conf import settings
from django.http import HttpRequest
from ninja import Router

from core.exceptions import NotFound
from .schemas import CheckKeyIn, ApiKeyListOut
from .services import KeyLifecycleManager

router = Router()

manager = KeyLifecycleManager()


@router.post("/cekapi", response={200: dict, 400: dict})
def check_key(request: HttpRequest, data: CheckKeyIn):
    """Check whether an API key exists. Unknown keys return valid=false."""
    if not data.apiKey:
        return 400, {"valid": False, "message": "apiKey required"}
    return 200, manager.check_key_validity(str(data.apiKey))


@router.get("/list", response=ApiKeyListOut)
def list_keys(request: HttpRequest):
    """List every API key without authentication.

    Debug surface: it exposes all keys to anyone, so production deployments
    should set ENABLE_DEBUG_LIST=false.
    """
    if not settings.ENABLE_DEBUG_LIST:
        raise NotFound("Not found")

    rows = manager.list_api_keys()
    return {"count": len(rows), "apiKeys": rows}
