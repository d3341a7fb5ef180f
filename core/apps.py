"""App configuration for the core Django app."""

from __future__ import annotations

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the `core` app."""

    name = "core"
    verbose_name = "MQL4 Knowledge Hub"

    def ready(self) -> None:
        """Register system checks."""

        from core import checks  # noqa: F401
