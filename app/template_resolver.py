"""
`{{ path }}` placeholder substitution.

A path is a run of identifiers joined by dots, each optionally followed by
`[n]` indices:  personal_info.connections[0].text
Anything that does not resolve renders as an empty string.
"""

from __future__ import annotations
import json, re
from typing import Any, Mapping, Sequence

_TOKEN = re.compile(r"\{\{(.*?)\}\}")
_INDEX = re.compile(r"\[(\d+)\]")


def split_path(path: str) -> list[str]:
    """`a.b[0].c` → ['a', 'b', '0', 'c']"""
    clean = _INDEX.sub(r".\1", path.strip())
    return [seg for seg in clean.split(".") if seg]


def _step(node: Any, key: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(key)
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        if not key.isdigit():
            return None
        idx = int(key)
        return node[idx] if idx < len(node) else None
    return None


def resolve_path(data: Any, path: str) -> Any | None:
    segments = split_path(path)
    if not segments or not data:
        return None
    node = data
    for key in segments:
        node = _step(node, key)
        if node is None:
            return None
    return node


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return json.dumps(value)
    return str(value)


def render(template: str, data: Any) -> str:
    """Replace every {{path}} in *template* with its value from *data*.

    Values are inserted as-is, markup included.
    """
    return _TOKEN.sub(lambda m: _as_text(resolve_path(data, m.group(1))), template)
