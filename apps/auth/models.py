"""
Admin model - dashboard operators authenticated by password + JWT.
"""

from django.db import models


class Admin(models.Model):
    """Administrator account. Only creation is exposed."""

    email = models.EmailField(max_length=255, unique=True)
    password = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "admins"

    def __str__(self) -> str:
        return self.email
