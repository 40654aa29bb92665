"""
Field path helpers.

A field path is a dotted string such as "items.qty". Browsers submit nested
fields with bracketed names ("items[qty]"), DOM ids cannot contain brackets,
and labels are derived from the last segment.
"""
from __future__ import annotations

from typing import List, Optional


def split_path(path: str) -> List[str]:
    return path.split(".")


def to_wire_name(path: str) -> str:
    """Format a dotted path as a bracketed field name ("a.b.c" -> "a[b][c]")."""
    segments = split_path(path)
    if len(segments) < 2:
        return path
    return segments[0] + "".join(f"[{segment}]" for segment in segments[1:])


def to_dom_id(path: str, explicit_id: Optional[str] = None) -> str:
    """Derive the id attribute for a field; an explicit id always wins."""
    if explicit_id is not None:
        return explicit_id
    return path.replace("_", "-").replace(".", "-")


def to_label(path: str) -> str:
    last = split_path(path)[-1]
    # ucwords semantics: capitalize each word, leave the rest untouched
    return " ".join(word[:1].upper() + word[1:] for word in last.replace("_", " ").split(" "))


__all__ = ["split_path", "to_wire_name", "to_dom_id", "to_label"]
