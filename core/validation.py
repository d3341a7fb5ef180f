"""Structural checks over the static content tables.

The page has no runtime failure path, so content mistakes are caught here
instead: at `manage.py check` time, at server start, and before a static
export.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import urlsplit

from core import content
from core.icons import ICONS


class ContentError(ValueError):
    """Raised when the static content tables break a structural rule.

    Attributes:
        code: Stable identifier used for the matching system check.
    """

    def __init__(self, message: str, *, code: str) -> None:
        super().__init__(message)
        self.code = code


@dataclass(frozen=True, slots=True)
class ContentProblem:
    """A single validation failure."""

    code: str
    message: str


def is_absolute_url(value: str) -> bool:
    """Return True when `value` is an absolute http(s) URL with a host."""

    parts = urlsplit(value.strip())
    return parts.scheme in {"http", "https"} and bool(parts.netloc) and " " not in value


def duplicate_faq_values(items: Iterable[content.FaqItem]) -> list[str]:
    """Return FAQ `value` identifiers that appear more than once, in first-seen order."""

    counts = Counter(item.value for item in items)
    return [value for value, count in counts.items() if count > 1]


def missing_lifecycle_names(*, code_sample: str, stages: Iterable[content.LifecycleStage]) -> list[str]:
    """Return lifecycle stage names that do not appear in the code sample."""

    return [stage.name for stage in stages if stage.name not in code_sample]


def collect_problems() -> list[ContentProblem]:
    """Run every content rule and return the failures.

    Returns:
        Problems in rule order; empty when the content is consistent.
    """

    problems: list[ContentProblem] = []

    duplicates = duplicate_faq_values(content.FAQ_ITEMS)
    if duplicates:
        problems.append(ContentProblem("core.E001", f"FAQ values must be unique; duplicated: {duplicates}."))

    links = [resource.link for resource in content.RESOURCES] + [link.link for link in content.FOOTER_LINKS]
    invalid = [link for link in links if not is_absolute_url(link)]
    if invalid:
        problems.append(ContentProblem("core.E002", f"Outbound links must be absolute URLs: {invalid}."))

    missing = missing_lifecycle_names(code_sample=content.CODE_SAMPLE, stages=content.LIFECYCLE)
    if missing:
        problems.append(
            ContentProblem("core.E003", f"Code sample does not mention lifecycle handlers: {missing}.")
        )

    icon_names = [card.icon for card in content.HIGHLIGHT_CARDS]
    icon_names += [feature.icon for feature in content.HERO_FEATURES]
    icon_names += [link.icon for link in content.FOOTER_LINKS]
    unknown = sorted({name for name in icon_names if name not in ICONS})
    if unknown:
        problems.append(ContentProblem("core.E004", f"Content references unknown icons: {unknown}."))

    return problems


def validate_content() -> None:
    """Enforce the content rules.

    Raises:
        ContentError: For the first rule that fails.
    """

    problems = collect_problems()
    if problems:
        first = problems[0]
        raise ContentError(first.message, code=first.code)
