import logging
from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class AuthConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.auth"
    label = "auth_app"  # Avoid conflict with django.contrib.auth

    def ready(self):
        """Called when the app is ready."""
        if settings.JWT_SECRET == settings.JWT_SECRET_PLACEHOLDER:
            logger.warning("[AdminAuth] JWT_SECRET is the insecure default, set it before deploying")
