"""Export the rendered page as a static site.

This command writes:
- `<output>/index.html` (the rendered home page, UTF-8, LF newlines),
- `app.css` and `app.js` under the paths the page links to (hashed names when
  a manifest storage is configured) unless `--no-assets` is passed.

Content is validated first; the command refuses to write anything when a
content rule fails.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from urllib.parse import urlsplit

from django.conf import settings
from django.contrib.staticfiles import finders
from django.contrib.staticfiles.storage import staticfiles_storage
from django.core.management.base import BaseCommand, CommandError

from core.validation import ContentError, validate_content
from core.views import render_home

logger = logging.getLogger(__name__)

STATIC_ASSETS: tuple[str, ...] = ("core/app.css", "core/app.js")


def _write_text(path: Path, text: str) -> None:
    """Write `text` to `path`, creating parents and normalizing the trailing newline."""

    path.parent.mkdir(parents=True, exist_ok=True)
    if not text.endswith("\n"):
        text += "\n"
    with path.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)


def _asset_output_path(asset: str) -> str:
    """Return the output-relative path the rendered page links to for `asset`.

    Manifest storages resolve to the hashed file name, so the copied file
    matches the `{% static %}` reference in `index.html`.

    Raises:
        ValueError: When a manifest storage has no entry for `asset`.
    """

    return urlsplit(staticfiles_storage.url(asset)).path.lstrip("/")


class Command(BaseCommand):
    """Render the home page to a static directory."""

    help = "Render the home page (and its static assets) into an output directory."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument(
            "--output",
            default=str(Path(settings.BASE_DIR) / "build"),
            help="Directory to write into (default: ./build).",
        )
        parser.add_argument(
            "--no-assets",
            action="store_true",
            help="Only write index.html; skip copying CSS/JS assets.",
        )

    def handle(self, *args, **options) -> None:
        """Run the command."""

        output = Path(options["output"]).resolve()
        copy_assets = not options["no_assets"]

        try:
            validate_content()
        except ContentError as exc:
            raise CommandError(f"Refusing to export: {exc} ({exc.code})") from exc

        try:
            html = render_home()
            asset_paths = {asset: _asset_output_path(asset) for asset in STATIC_ASSETS}
        except ValueError as exc:
            # Manifest storages raise ValueError until collectstatic has run.
            raise CommandError(f"Cannot resolve static assets: {exc} Run collectstatic first.") from exc

        index_path = output / "index.html"
        _write_text(index_path, html)
        logger.info("Wrote %s", index_path)
        written = [index_path]

        if copy_assets:
            for asset, relative_path in asset_paths.items():
                source = finders.find(asset)
                if not source:
                    raise CommandError(f"Static asset not found: {asset}")
                target = output / relative_path
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.copyfile(source, target)
                logger.info("Copied %s", target)
                written.append(target)

        self.stdout.write(self.style.SUCCESS(f"Exported {len(written)} file(s) to {output}"))
