"""URL configuration for the MQL4 Knowledge Hub."""

from __future__ import annotations

from django.urls import include, path

urlpatterns = [
    path("", include("core.urls")),
]
