"""
Admin auth endpoints - register and login.
"""

from django.http import HttpRequest
from ninja import Router

from . import services
from .schemas import AdminCredentialsIn, LoginOut, MessageOut

router = Router()


@router.post("/register", response=MessageOut)
def register(request: HttpRequest, data: AdminCredentialsIn):
    """Register a new admin."""
    services.register_admin(data.email, data.password)
    return MessageOut(message="Admin registered")


@router.post("/login", response=LoginOut)
def login(request: HttpRequest, data: AdminCredentialsIn):
    """Login with email and password."""
    token = services.login(data.email, data.password)
    return LoginOut(message="Login success", token=token)
