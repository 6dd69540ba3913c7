"""
URL configuration for KeyGate API.
"""

from django.urls import path

from .api import api

urlpatterns = [
    path("", api.urls),
]
