"""Cartrelay URL configuration."""

from django.urls import include, path

urlpatterns = [
    path("", include("cartrelay.api.urls")),
]
