"""
Page assembly.

• Loads the content document first, then the section fragments one by one,
  then the page shell.
• Renders every section into its container. Each section runs under its
  own try/except, so one malformed section never takes the others (or the
  overlay wiring) down with it.
• Pairs zoomable images with their overlays and injects the click script.
• Validates the page (html5lib + cssutils) and writes it next to the
  site's static assets.

Usage:
    python app/page_builder.py site -o public_html [--serve]
"""

from __future__ import annotations
import argparse
import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping

import cssutils
import html5lib
from bs4 import BeautifulSoup

import config
from loader import FetchError, load_data, load_shell, load_templates
from schema_site import SECTIONS
from section_renderers import RENDERERS
from zoom_overlay import ZoomOverlays, wire_overlays

# Configure cssutils logging to be less verbose for common errors
cssutils.log.setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    html: str = ""
    rendered: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)
    overlays: ZoomOverlays | None = None
    path: Path | None = None

    @property
    def ok(self) -> bool:
        return not self.failed


def build_page(
    shell_html: str,
    templates: Mapping[str, str],
    data: Mapping[str, Any],
    min_width: int | None = None,
) -> BuildResult:
    """Render all sections into *shell_html* and wire the zoom overlays."""
    soup = BeautifulSoup(shell_html, "html.parser")
    result = BuildResult()

    for name, _key, _fname, container_id in SECTIONS:
        container = soup.find(id=container_id)
        template = templates.get(name)
        if template is None:
            logger.debug("No template for %s", name)
            result.skipped.append(name)
            continue
        try:
            done = RENDERERS[name](container, template, data)
        except Exception as e:
            logger.exception("Rendering section %s failed", name)
            result.failed[name] = f"{type(e).__name__}: {e}"
            continue
        (result.rendered if done else result.skipped).append(name)

    result.overlays = wire_overlays(soup, min_width)
    result.html = str(soup)
    return result


def validate_page(html_content: str) -> list[str]:
    """Validates HTML structure and inline CSS. Returns a list of error messages."""
    errors = []
    try:
        # html5lib in strict mode raises on the first parse error
        html5lib.HTMLParser(strict=True).parse(html_content)
    except html5lib.html5parser.ParseError as e:
        errors.append(f"HTML ParseError: {str(e)}")

    soup = BeautifulSoup(html_content, "html.parser")
    css_logger = logging.getLogger("cssutils")

    class CaptureCSSLogHandler(logging.Handler):
        def __init__(self, error_list):
            super().__init__()
            self.error_list = error_list

        def emit(self, record):
            self.error_list.append(f"CSS Error in <style> tag: {record.getMessage()}")

    for style_tag in soup.find_all("style"):
        if not style_tag.string:
            continue
        capture_handler = CaptureCSSLogHandler(errors)
        original_level = css_logger.level
        css_logger.addHandler(capture_handler)
        css_logger.setLevel(logging.INFO)  # warnings and errors
        try:
            cssutils.CSSParser(validate=True, raiseExceptions=False).parseString(style_tag.string)
        finally:
            css_logger.removeHandler(capture_handler)
            css_logger.setLevel(original_level)

    return errors


def _copy_assets(site: Path, out: Path) -> None:
    skip = {config.COMPONENTS_DIR, config.DATA_FILE, config.SHELL_FILE}
    for entry in site.iterdir():
        if entry.name in skip or entry.resolve() == out.resolve():
            continue
        if entry.is_dir():
            shutil.copytree(entry, out / entry.name, dirs_exist_ok=True)
        else:
            shutil.copy2(entry, out / entry.name)


def build_site(
    site_dir: str | Path,
    output_dir: str | Path,
    data_source: str | None = None,
    data: Mapping[str, Any] | None = None,
    status_callback: Callable[[str], None] | None = None,
) -> BuildResult:
    """Build <site_dir> into <output_dir>/index.html. Load failures raise FetchError."""
    def _status(msg: str) -> None:
        logger.info(msg)
        if status_callback:
            status_callback(msg)

    site = Path(site_dir)
    if data is None:
        source = data_source or config.get_data_source(str(site))
        _status(f"📄 Loading content document from {source}...")
        data = load_data(source)

    _status("🧩 Loading section templates...")
    templates = load_templates(site / config.COMPONENTS_DIR)
    shell = load_shell(site)

    _status("🏗️ Rendering sections...")
    result = build_page(shell, templates, data)
    for name, reason in result.failed.items():
        _status(f"❌ Section {name} failed: {reason}")

    for problem in validate_page(result.html):
        logger.warning(problem)

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    _copy_assets(site, out)
    result.path = out / config.SHELL_FILE
    result.path.write_text(result.html, encoding="utf-8")
    _status(f"✅ Wrote {result.path} ({len(result.rendered)} sections rendered)")
    return result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build the résumé page from data.json and the section templates."
    )
    parser.add_argument("site_dir", nargs="?", default=config.SITE_DIR)
    parser.add_argument("-o", "--output", default=config.OUTPUT_DIR)
    parser.add_argument("--data", help="data.json path or URL (default: <site_dir>/data.json)")
    parser.add_argument("--serve", action="store_true", help="serve the output locally after building")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        result = build_site(args.site_dir, args.output, data_source=args.data)
    except FetchError as e:
        logger.error("%s", e)
        return 1

    if args.serve:
        from temp_server import cleanup_temp_server, serve_site
        print(serve_site(args.output))
        try:
            input("Press Enter to stop the preview server...")
        finally:
            cleanup_temp_server()

    return 0 if result.ok else 2


if __name__ == "__main__":
    raise SystemExit(main())
