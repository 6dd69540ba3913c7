"""
API Key model.
"""

from django.db import models


class ApiKeyStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    INACTIVE = "inactive", "Inactive"


class ApiKey(models.Model):
    """Opaque API key, optionally owned by a user."""

    api_key = models.CharField(max_length=255, unique=True)
    user = models.ForeignKey(
        "users.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="api_keys",
    )
    status = models.CharField(max_length=8, choices=ApiKeyStatus.choices, default=ApiKeyStatus.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "api_keys"

    def __str__(self) -> str:
        return f"{self.api_key[:8]}... ({self.status})"
