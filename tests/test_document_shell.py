"""Tests for the document shell metadata and theme tokens."""

from __future__ import annotations

import pytest

from core.site import SITE_DESCRIPTION, SITE_NAME, THEME, site_metadata
from core.views import render_home


@pytest.mark.unit
def test_site_metadata_defaults(settings) -> None:
    """Metadata mirrors the fixed title and description and resolves against SITE_URL."""

    settings.SITE_URL = "https://agentic-045e2028.vercel.app"
    site = site_metadata()
    assert site.title == "MQL4 Knowledge Hub"
    assert site.description.startswith("Interactive guide breaking down the MQL4 language")
    assert site.og_url == "https://agentic-045e2028.vercel.app/"
    assert site.locale == "en_US"
    assert site.og_type == "website"
    assert site.twitter_card == "summary_large_image"
    assert site.body_class == "antialiased bg-grid-light"


@pytest.mark.unit
def test_absolute_url_resolves_relative_paths(settings) -> None:
    """Relative metadata links resolve against the configured base URL."""

    settings.SITE_URL = "https://example.com/"
    site = site_metadata()
    assert site.base_url == "https://example.com"
    assert site.absolute_url("/og.png") == "https://example.com/og.png"
    assert site.absolute_url("docs/intro") == "https://example.com/docs/intro"


@pytest.mark.unit
def test_theme_tokens() -> None:
    """Brand color, foreground, and grid background are exposed as CSS variables."""

    assert dict(THEME.css_variables()) == {
        "--brand": "#0F62FE",
        "--brand-foreground": "#F4F4F4",
        "--bg-grid-light": "radial-gradient(circle at 1px 1px, rgba(15,98,254,0.15) 0, transparent 0.5px)",
    }


@pytest.mark.integration
def test_shell_emits_head_metadata(home_html: str) -> None:
    """The rendered page carries title, description, and social tags."""

    assert '<html lang="en">' in home_html
    assert f"<title>{SITE_NAME}</title>" in home_html
    assert f'<meta name="description" content="{SITE_DESCRIPTION}">' in home_html
    assert f'<meta property="og:title" content="{SITE_NAME}">' in home_html
    assert f'<meta property="og:description" content="{SITE_DESCRIPTION}">' in home_html
    assert f'<meta property="og:site_name" content="{SITE_NAME}">' in home_html
    assert '<meta property="og:locale" content="en_US">' in home_html
    assert '<meta name="twitter:card" content="summary_large_image">' in home_html
    assert '<meta name="twitter:creator" content="@agentic">' in home_html
    assert '<body class="antialiased bg-grid-light">' in home_html


@pytest.mark.integration
def test_shell_emits_theme_variables_and_assets(home_html: str) -> None:
    """Theme tokens and local static assets are referenced by the shell."""

    assert "--brand: #0F62FE;" in home_html
    assert "--brand-foreground: #F4F4F4;" in home_html
    assert "/static/core/app.css" in home_html
    assert "/static/core/app.js" in home_html


@pytest.mark.integration
def test_og_url_follows_site_url_setting(settings) -> None:
    """Changing SITE_URL moves the canonical and Open Graph URLs."""

    settings.SITE_URL = "https://mql4.example.org"
    html = render_home()
    assert '<meta property="og:url" content="https://mql4.example.org/">' in html
    assert '<link rel="canonical" href="https://mql4.example.org/">' in html
