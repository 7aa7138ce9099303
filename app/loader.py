"""
Source ➜ text
– local paths are read from disk, http(s) sources are fetched with requests
– every failure surfaces as FetchError naming the resource
"""
from __future__ import annotations
import json, logging
from pathlib import Path
from typing import Any, Dict, Mapping

import requests

import config
from schema_site import COMPONENT_FILES

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """A data document, template fragment or page shell could not be loaded."""


def _is_remote(source: str) -> bool:
    return str(source).startswith(("http://", "https://"))


def fetch_text(source: str | Path) -> str:
    source = str(source)
    if _is_remote(source):
        try:
            r = requests.get(source, timeout=config.FETCH_TIMEOUT)
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch {source}: {e}") from e
        if not r.ok:
            raise FetchError(f"Failed to fetch {source}: {r.status_code} {r.reason}")
        try:
            return r.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FetchError(f"Failed to fetch {source}: body is not UTF-8 ({e.reason})") from e
    try:
        return Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise FetchError(f"Failed to fetch {source}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise FetchError(f"Failed to fetch {source}: file is not UTF-8 ({e.reason})") from e


def load_data(source: str | Path) -> Dict[str, Any]:
    raw = fetch_text(source)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise FetchError(f"Failed to fetch {source}: invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise FetchError(f"Failed to fetch {source}: expected a JSON object, got {type(data).__name__}")
    logger.info("Loaded content document from %s", source)
    return data


def load_templates(base: str | Path, names: Mapping[str, str] = COMPONENT_FILES) -> Dict[str, str]:
    """Fetch one fragment per section, one request after the other."""
    templates = {}
    for name, fname in names.items():
        templates[name] = fetch_text(config.join_source(str(base), fname))
    logger.info("Loaded %d template fragments from %s", len(templates), base)
    return templates


def load_shell(site_dir: str | Path) -> str:
    return fetch_text(config.join_source(str(site_dir), config.SHELL_FILE))
