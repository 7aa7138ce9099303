"""
Click-to-zoom overlays for certificate and avatar images.

Each zoomable image (img.skill-img) is paired with its overlay (.more-item)
once, while the page is built. Image, overlay, overlay background (.more-inf)
and close button (.close) all get the same data-zoom-id, so neither the
browser script nor ZoomOverlays has to walk the DOM on a click.

Per overlay:  HIDDEN --image click, wide viewport--> VISIBLE
              VISIBLE --close / background click--> HIDDEN
Every click on a viewport narrower than the threshold is ignored.
"""
from __future__ import annotations
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, List

from bs4 import BeautifulSoup, Tag

import config
from template_resolver import render
from utils import stable_id

logger = logging.getLogger(__name__)

_SCRIPT_PATH = Path(__file__).parent / "templates" / "zoom.js"
ZOOM_CSS = ".more-item[data-zoom-id] { display: none; }"

_CLOSERS = {"close", "more-inf"}


class OverlayState(Enum):
    HIDDEN = "hidden"
    VISIBLE = "visible"


class ZoomOverlays:
    """zoom id → overlay state."""

    def __init__(self, min_width: int | None = None):
        self.min_width = config.ZOOM_MIN_WIDTH if min_width is None else min_width
        self._states: Dict[str, OverlayState] = {}

    def register(self, zoom_id: str) -> None:
        self._states.setdefault(zoom_id, OverlayState.HIDDEN)

    def state(self, zoom_id: str) -> OverlayState:
        return self._states[zoom_id]

    def ids(self) -> List[str]:
        return list(self._states)

    def visible(self) -> List[str]:
        return [z for z, s in self._states.items() if s is OverlayState.VISIBLE]

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, zoom_id: object) -> bool:
        return zoom_id in self._states

    def handle_click(self, target: Tag, viewport_width: int) -> OverlayState | None:
        """Apply a click on *target*; returns the overlay's new state, or None
        when the click does not concern any registered overlay."""
        zoom_id = target.get("data-zoom-id")
        if zoom_id not in self._states:
            return None
        if viewport_width < self.min_width:
            return self._states[zoom_id]

        classes = set(target.get("class") or [])
        if "skill-img" in classes:
            self._states[zoom_id] = OverlayState.VISIBLE
        elif classes & _CLOSERS:
            self._states[zoom_id] = OverlayState.HIDDEN
        return self._states[zoom_id]


def _find_overlay(img: Tag) -> Tag | None:
    sibling = img.find_next_sibling()
    if sibling is not None and "more-item" in (sibling.get("class") or []):
        return sibling
    parent = img.find_parent("div")
    return parent.select_one(".more-item") if parent is not None else None


def _inject_assets(soup: BeautifulSoup, min_width: int) -> None:
    style = soup.new_tag("style")
    style.string = ZOOM_CSS
    (soup.head or soup).append(style)

    script = soup.new_tag("script")
    script.string = render(_SCRIPT_PATH.read_text(encoding="utf-8"),
                           {"zoom": {"min_width": min_width}})
    (soup.body or soup).append(script)


def wire_overlays(soup: BeautifulSoup, min_width: int | None = None,
                  inject: bool = True) -> ZoomOverlays:
    registry = ZoomOverlays(min_width)
    for pos, img in enumerate(soup.select("img.skill-img")):
        overlay = _find_overlay(img)
        if overlay is None:
            logger.debug("No overlay for zoomable image %s", img.get("src"))
            continue
        # images sharing one overlay share its id
        zoom_id = overlay.get("data-zoom-id") or stable_id("zoom", pos, img.get("src", ""))
        img["data-zoom-id"] = zoom_id
        overlay["data-zoom-id"] = zoom_id
        for part in overlay.select(".more-inf, .close"):
            part["data-zoom-id"] = zoom_id
        registry.register(zoom_id)

    if registry and inject:
        _inject_assets(soup, registry.min_width)
    logger.info("Wired %d zoom overlays", len(registry))
    return registry
