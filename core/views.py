"""Views for the MQL4 Knowledge Hub page."""

from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.http import HttpRequest, HttpResponse
from django.template.loader import render_to_string
from django.views.decorators.cache import cache_control, cache_page
from django.views.decorators.http import require_safe

from core import content
from core.context_processors import site_shell

logger = logging.getLogger(__name__)

HOME_TEMPLATE = "core/home.html"


def home_context() -> dict[str, Any]:
    """Return the full template context for the home page.

    The shell values are included directly so the page renders identically
    with or without a request (the static export has none).
    """

    return {
        **site_shell(None),
        "highlight_cards": content.HIGHLIGHT_CARDS,
        "lifecycle": content.LIFECYCLE,
        "resources": content.RESOURCES,
        "faq_items": content.FAQ_ITEMS,
        "hero_features": content.HERO_FEATURES,
        "workflow_steps": content.WORKFLOW_STEPS,
        "constructs": content.CONSTRUCTS,
        "best_practices": content.BEST_PRACTICES,
        "tooling_stack": content.TOOLING_STACK,
        "footer_links": content.FOOTER_LINKS,
        "code_sample": content.CODE_SAMPLE,
    }


def render_home(request: HttpRequest | None = None) -> str:
    """Render the home page to a string.

    Args:
        request: Optional request; only used for template context processors.

    Returns:
        The complete HTML document.
    """

    html = render_to_string(HOME_TEMPLATE, home_context(), request=request)
    logger.debug("Rendered %s (%d characters).", HOME_TEMPLATE, len(html))
    return html


@require_safe
@cache_control(public=True, max_age=settings.PAGE_CACHE_SECONDS)
@cache_page(settings.PAGE_CACHE_SECONDS)
def home(request: HttpRequest) -> HttpResponse:
    """Render the MQL4 overview page."""

    return HttpResponse(render_home(request))
