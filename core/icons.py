"""Inline SVG glyphs used by the page.

Glyphs are stored as trusted SVG fragments keyed by a short name so content
tables can reference them without importing markup. Paths follow the Lucide
icon set (24x24 viewBox, round caps and joins).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe


@dataclass(frozen=True, slots=True)
class Icon:
    """A single outline glyph.

    Attributes:
        name: Registry key (e.g. "sparkles").
        body: Inner SVG markup (paths and circles only).
        stroke_width: Stroke width applied to the outer `<svg>` element.
    """

    name: str
    body: str
    stroke_width: str = "2"


ICONS: Final[dict[str, Icon]] = {
    icon.name: icon
    for icon in (
        Icon(
            name="sparkles",
            body=(
                '<path d="M9.937 15.5A2 2 0 0 0 8.5 14.063l-6.135-1.582a.5.5 0 0 1 0-.962L8.5 9.936'
                "A2 2 0 0 0 9.937 8.5l1.582-6.135a.5.5 0 0 1 .963 0L14.063 8.5A2 2 0 0 0 15.5 9.937"
                "l6.135 1.581a.5.5 0 0 1 0 .964L15.5 14.063a2 2 0 0 0-1.437 1.437l-1.582 6.135"
                'a.5.5 0 0 1-.963 0z"/>'
                '<path d="M20 3v4"/><path d="M22 5h-4"/><path d="M4 17v2"/><path d="M5 18H3"/>'
            ),
        ),
        Icon(
            name="cog",
            body=(
                '<path d="M12 20a8 8 0 1 0 0-16 8 8 0 0 0 0 16Z"/>'
                '<path d="M12 14a2 2 0 1 0 0-4 2 2 0 0 0 0 4Z"/>'
                '<path d="M12 2v2"/><path d="M12 22v-2"/><path d="m17 20.66-1-1.73"/>'
                '<path d="M11 10.27 7 3.34"/><path d="m20.66 17-1.73-1"/><path d="m3.34 7 1.73 1"/>'
                '<path d="M14 12h8"/><path d="M2 12h2"/><path d="m20.66 7-1.73 1"/>'
                '<path d="m3.34 17 1.73-1"/><path d="m17 3.34-1 1.73"/><path d="m11 13.73-4 6.93"/>'
            ),
        ),
        Icon(
            name="line-chart",
            body='<path d="M3 3v16a2 2 0 0 0 2 2h16"/><path d="m19 9-5 5-4-4-3 3"/>',
        ),
        Icon(
            name="brain-circuit",
            body=(
                '<path d="M12 5a3 3 0 1 0-5.997.125 4 4 0 0 0-2.526 5.77 4 4 0 0 0 .556 6.588'
                'A4 4 0 1 0 12 18Z"/>'
                '<path d="M9 13a4.5 4.5 0 0 0 3-4"/><path d="M6.003 5.125A3 3 0 0 0 6.401 6.5"/>'
                '<path d="M3.477 10.896a4 4 0 0 1 .585-.396"/><path d="M6 18a4 4 0 0 1-1.967-.516"/>'
                '<path d="M12 13h4"/><path d="M12 18h6a2 2 0 0 1 2 2v1"/><path d="M12 8h8"/>'
                '<path d="M16 8V5a2 2 0 0 1 2-2"/>'
                '<circle cx="16" cy="13" r=".5"/><circle cx="18" cy="3" r=".5"/>'
                '<circle cx="20" cy="21" r=".5"/><circle cx="20" cy="8" r=".5"/>'
            ),
        ),
        Icon(
            name="book-open-check",
            body=(
                '<path d="M12 21V7"/><path d="m16 12 2 2 4-4"/>'
                '<path d="M22 6V4a1 1 0 0 0-1-1h-5a4 4 0 0 0-4 4 4 4 0 0 0-4-4H3a1 1 0 0 0-1 1v13'
                'a1 1 0 0 0 1 1h6a3 3 0 0 1 3 3 3 3 0 0 1 3-3h6a1 1 0 0 0 1-1v-1.3"/>'
            ),
        ),
        Icon(
            name="github",
            body=(
                '<path d="M15 22v-4a4.8 4.8 0 0 0-1-3.5c3 0 6-2 6-5.5.08-1.25-.27-2.48-1-3.5'
                ".28-1.15.28-2.35 0-3.5 0 0-1 0-3 1.5-2.64-.5-5.36-.5-8 0C6 2 5 2 5 2"
                "c-.3 1.15-.3 2.35 0 3.5A5.403 5.403 0 0 0 4 9c0 3.5 3 5.5 6 5.5"
                '-.39.49-.68 1.05-.85 1.65-.17.6-.22 1.23-.15 1.85v4"/>'
                '<path d="M9 18c-4.51 2-5-2-7-2"/>'
            ),
        ),
        Icon(
            name="arrow-up-right",
            body='<path d="M4.5 19.5l15-15m0 0H8.25m11.25 0v11.25"/>',
            stroke_width="1.5",
        ),
    )
}


def get_icon(name: str) -> Icon:
    """Return the registered icon for `name`.

    Raises:
        ValueError: When `name` is not a registered icon.
    """

    try:
        return ICONS[name]
    except KeyError:
        raise ValueError(f"Unknown icon {name!r}; expected one of {sorted(ICONS)}.") from None


def render_icon(name: str, *, css_class: str = "icon") -> SafeString:
    """Render an icon as an inline, decorative `<svg>` element.

    Args:
        name: Registered icon name.
        css_class: Class list applied to the `<svg>` element.

    Returns:
        Safe SVG markup ready for template output.
    """

    icon = get_icon(name)
    return format_html(
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="none" '
        'stroke="currentColor" stroke-width="{}" stroke-linecap="round" stroke-linejoin="round" '
        'class="{}" aria-hidden="true" focusable="false">{}</svg>',
        icon.stroke_width,
        css_class,
        mark_safe(icon.body),
    )
