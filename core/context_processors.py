"""Template context processors for the MQL4 Knowledge Hub."""

from __future__ import annotations

from django.http import HttpRequest

from core.site import THEME, SiteMetadata, ThemeTokens, site_metadata


def site_shell(request: HttpRequest | None) -> dict[str, SiteMetadata | ThemeTokens]:
    """Expose the document shell metadata and theme tokens to all templates.

    Args:
        request: Current request object (unused; the shell is static).

    Returns:
        Context dict with `site` and `theme`.
    """

    return {"site": site_metadata(), "theme": THEME}
