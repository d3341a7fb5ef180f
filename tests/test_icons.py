"""Unit tests for the inline SVG icon registry."""

from __future__ import annotations

import pytest
from django.template import Context, Template

from core.icons import ICONS, get_icon, render_icon

pytestmark = pytest.mark.unit


def test_render_icon_emits_decorative_svg() -> None:
    """Rendered icons are inline, hidden from assistive tech, and carry the class list."""

    markup = render_icon("sparkles", css_class="icon icon--lg text-brand")
    assert markup.startswith("<svg ")
    assert markup.endswith("</svg>")
    assert 'class="icon icon--lg text-brand"' in markup
    assert 'aria-hidden="true"' in markup
    assert 'stroke-width="2"' in markup
    assert ICONS["sparkles"].body in markup


def test_arrow_uses_thin_stroke() -> None:
    """The outbound-link arrow keeps its lighter stroke."""

    assert 'stroke-width="1.5"' in render_icon("arrow-up-right")


def test_unknown_icon_raises() -> None:
    """Unknown names fail loudly instead of rendering nothing."""

    with pytest.raises(ValueError, match="Unknown icon 'rocket'"):
        get_icon("rocket")


def test_css_class_is_escaped() -> None:
    """Class values are attribute-escaped."""

    markup = render_icon("cog", css_class='x" onload="alert(1)')
    assert 'onload="alert(1)"' not in markup
    assert "&quot;" in markup


def test_icon_template_tag() -> None:
    """The `{% icon %}` tag renders the same markup as `render_icon`."""

    template = Template('{% load icons %}{% icon name "icon icon--sm" %}')
    rendered = template.render(Context({"name": "github"}))
    assert rendered == render_icon("github", css_class="icon icon--sm")
