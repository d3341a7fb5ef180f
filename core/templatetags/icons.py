"""Template tags for inline SVG icons."""

from __future__ import annotations

from django import template
from django.utils.safestring import SafeString

from core.icons import render_icon

register = template.Library()


@register.simple_tag
def icon(name: str, css_class: str = "icon") -> SafeString:
    """Render a registered icon, e.g. `{% icon "sparkles" "icon icon--lg text-brand" %}`."""

    return render_icon(name, css_class=css_class)
