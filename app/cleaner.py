"""
Shared clean-ups applied to content values before they hit the item templates.
"""
from __future__ import annotations
import re
from typing import Any, List

_BOLD = re.compile(r"\*\*(.*?)\*\*")

# ───────────────────────────────────────── helpers ──
def bold_markdown(text: str) -> str:
    """`**word**` → `<strong>word</strong>`"""
    return _BOLD.sub(r"<strong>\1</strong>", text or "")

def as_list(value: Any) -> List[Any]:
    """Wrap a lone value so callers can always iterate."""
    return value if isinstance(value, list) else [value]

def list_or_empty(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []

def img_src(prefix: str, name: str) -> str:
    return f"{prefix}{name}"

# ───────────────────────────────────────── cleaner ──
def rich_paragraphs(value: Any) -> List[str]:
    """String-or-list of markdown-ish paragraphs → list of HTML snippets."""
    return [bold_markdown(p) for p in as_list(value)]
