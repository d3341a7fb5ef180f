"""Django system checks for the static content tables."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from django.apps import AppConfig
from django.core.checks import CheckMessage, Error, register

from core.validation import collect_problems


@register()
def content_tables_check(
    app_configs: Sequence[AppConfig] | None = None,
    **kwargs: Any,
) -> list[CheckMessage]:
    """Report structural problems in the page content as system check errors."""

    return [
        Error(problem.message, obj="core.content", id=problem.code)
        for problem in collect_problems()
    ]
