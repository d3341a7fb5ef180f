"""Document shell metadata and theme tokens.

The shell wraps every page with a fixed title and description, Open Graph and
Twitter card tags that mirror them, and a canonical base URL used to resolve
relative links in that metadata.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final
from urllib.parse import urljoin

from django.conf import settings

SITE_NAME: Final[str] = "MQL4 Knowledge Hub"
SITE_DESCRIPTION: Final[str] = (
    "Interactive guide breaking down the MQL4 language, trading strategies, and platform tooling "
    "for algorithmic traders."
)
BODY_CLASSES: Final[tuple[str, ...]] = ("antialiased", "bg-grid-light")


@dataclass(frozen=True, slots=True)
class SiteMetadata:
    """Page-level metadata emitted into `<head>`.

    Attributes:
        title: Document title.
        description: Meta description, mirrored into social tags.
        base_url: Canonical origin used to resolve relative metadata links.
        site_name: Open Graph site name.
        locale: Open Graph locale.
        og_type: Open Graph object type.
        twitter_card: Twitter card layout.
        twitter_creator: Twitter handle credited on the card.
        language: Value for the `<html lang>` attribute.
        body_classes: Base class list for `<body>`.
    """

    title: str
    description: str
    base_url: str
    site_name: str = SITE_NAME
    locale: str = "en_US"
    og_type: str = "website"
    twitter_card: str = "summary_large_image"
    twitter_creator: str = "@agentic"
    language: str = "en"
    body_classes: tuple[str, ...] = BODY_CLASSES

    def absolute_url(self, path: str = "/") -> str:
        """Resolve `path` against the canonical base URL."""

        return urljoin(f"{self.base_url}/", path.lstrip("/"))

    @property
    def og_url(self) -> str:
        return self.absolute_url("/")

    @property
    def body_class(self) -> str:
        return " ".join(self.body_classes)


@dataclass(frozen=True, slots=True)
class ThemeTokens:
    """Named color and background tokens consumed by the stylesheet.

    Attributes:
        brand: Primary brand color.
        brand_foreground: Text color used on top of `brand`.
        grid_background: Decorative dotted-grid background image.
    """

    brand: str = "#0F62FE"
    brand_foreground: str = "#F4F4F4"
    grid_background: str = "radial-gradient(circle at 1px 1px, rgba(15,98,254,0.15) 0, transparent 0.5px)"

    def css_variables(self) -> tuple[tuple[str, str], ...]:
        """Return `(custom property, value)` pairs for the `:root` rule."""

        return (
            ("--brand", self.brand),
            ("--brand-foreground", self.brand_foreground),
            ("--bg-grid-light", self.grid_background),
        )


THEME: Final[ThemeTokens] = ThemeTokens()


def site_metadata() -> SiteMetadata:
    """Build the shell metadata from settings.

    Returns:
        Metadata using `settings.SITE_URL` as the canonical base.
    """

    return SiteMetadata(
        title=SITE_NAME,
        description=SITE_DESCRIPTION,
        base_url=str(settings.SITE_URL).rstrip("/"),
    )
