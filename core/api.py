"""
Django Ninja API configuration.
"""

import logging

from ninja import NinjaAPI
from ninja.errors import ValidationError, HttpError
from django.http import HttpRequest, HttpResponse
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ServiceError

logger = logging.getLogger(__name__)

api = NinjaAPI(
    title="KeyGate API",
    version="1.0.0",
    description="API key issuance, validation and administration",
)


@api.exception_handler(ServiceError)
def service_errors(request: HttpRequest, exc: ServiceError) -> HttpResponse:
    return api.create_response(
        request,
        {"message": exc.message},
        status=exc.status_code,
    )


@api.exception_handler(ValidationError)
def validation_errors(request: HttpRequest, exc: ValidationError) -> HttpResponse:
    logger.debug(f"[API] Rejected request {request.path}: {exc.errors}")
    return api.create_response(
        request,
        {"message": "Invalid request"},
        status=400,
    )


@api.exception_handler(PydanticValidationError)
def pydantic_validation_errors(request: HttpRequest, exc: PydanticValidationError) -> HttpResponse:
    logger.debug(f"[API] Rejected request {request.path}: {exc.errors()}")
    return api.create_response(
        request,
        {"message": "Invalid request"},
        status=400,
    )


@api.exception_handler(HttpError)
def http_error_handler(request: HttpRequest, exc: HttpError) -> HttpResponse:
    return api.create_response(
        request,
        {"message": str(exc)},
        status=exc.status_code,
    )


@api.exception_handler(Exception)
def generic_error_handler(request: HttpRequest, exc: Exception) -> HttpResponse:
    logger.error(f"[API] Unhandled error on {request.method} {request.path}", exc_info=exc)
    return api.create_response(
        request,
        {"message": "Server error"},
        status=500,
    )


# Health check
@api.get("/health")
def health_check(request: HttpRequest) -> dict:
    return {"status": "ok", "version": "1.0.0"}


# Import and register routers
from apps.users.api import router as users_router
from apps.keys.api import router as keys_router
from apps.auth.api import router as auth_router
from apps.admin.api import router as admin_router

api.add_router("/user", users_router, tags=["Users"])
api.add_router("/", keys_router, tags=["API Keys"])
api.add_router("/admin", auth_router, tags=["Admin Auth"])
api.add_router("/admin", admin_router, tags=["Admin"])
