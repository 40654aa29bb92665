"""
Submitted form data adapters.

Why:
    The renderer needs three questions answered about the current request:
    was a body submitted, what was submitted for a dotted path, and what is
    the whole submission. Keeping this behind a small protocol keeps the
    renderer free of Starlette specifics and easy to unit-test with dicts.
"""
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Tuple

from .paths import split_path


_MISSING = object()
_BRACKET_RE = re.compile(r"\[([^\]]*)\]")


class RequestData(Protocol):
    def has_body(self) -> bool:
        ...

    def get(self, path: str, default: Any = None) -> Any:
        ...

    def all(self) -> Dict[str, Any]:
        ...


def parse_wire_name(name: str) -> List[str]:
    """Split "items[0][qty]" into ["items", "0", "qty"]; "tags[]" keeps an empty segment."""
    head, bracket, _ = name.partition("[")
    if not bracket:
        return [name]
    return [head] + _BRACKET_RE.findall(name[len(head):])


def _multi_items(data: Any) -> Iterable[Tuple[str, Any]]:
    # Starlette FormData/QueryParams expose every value of repeated keys
    if hasattr(data, "multi_items"):
        return data.multi_items()
    return data.items()


def _merge(current: Any, value: Any) -> List[Any]:
    return current + [value] if isinstance(current, list) else [current, value]


def _assign(target: Dict[str, Any], segments: List[str], value: Any, repeated: bool = False) -> None:
    """Store value under segments; "[]" appends a new list slot."""
    node: Any = target
    for index, segment in enumerate(segments):
        last = index == len(segments) - 1
        if isinstance(node, list):
            if last:
                node.append(value)
                return
            slot: Any = [] if segments[index + 1] == "" else {}
            node.append(slot)
            node = slot
            continue
        if last:
            # repeated names ("colors", "prefs[colors]") come from multi-selects
            node[segment] = _merge(node[segment], value) if repeated and segment in node else value
            return
        child = node.get(segment)
        if segments[index + 1] == "":
            if not isinstance(child, list):
                child = node[segment] = [] if child is None else [child]
        elif not isinstance(child, dict):
            child = node[segment] = {}
        node = child


def nest_form_data(data: Any) -> Dict[str, Any]:
    """Turn flat bracketed keys into nested dicts/lists.

    Repeated names collapse to a list at their leaf so multi-selects
    survive; "items[][qty]" appends one mapping per occurrence.
    """
    nested: Dict[str, Any] = {}
    seen: set[str] = set()
    for key, value in _multi_items(data):
        key = str(key)
        _assign(nested, parse_wire_name(key), value, repeated=key in seen)
        seen.add(key)
    return nested


class FormRequestData:
    """RequestData backed by a submitted form (Starlette FormData or a mapping)."""

    def __init__(self, data: Optional[Any] = None, *, submitted: Optional[bool] = None) -> None:
        self._data = nest_form_data(data) if data is not None else {}
        self._submitted = bool(self._data) if submitted is None else submitted

    def has_body(self) -> bool:
        return self._submitted

    def lookup(self, path: str) -> Any:
        node: Any = self._data
        for segment in split_path(path):
            if isinstance(node, Mapping) and segment in node:
                node = node[segment]
            elif isinstance(node, list) and segment.isdigit() and int(segment) < len(node):
                node = node[int(segment)]
            else:
                return _MISSING
        return node

    def contains(self, path: str) -> bool:
        return self.lookup(path) is not _MISSING

    def get(self, path: str, default: Any = None) -> Any:
        value = self.lookup(path)
        return default if value is _MISSING else value

    def all(self) -> Dict[str, Any]:
        return dict(self._data)


EMPTY_REQUEST = FormRequestData(submitted=False)


__all__ = [
    "RequestData",
    "FormRequestData",
    "EMPTY_REQUEST",
    "nest_form_data",
    "parse_wire_name",
]
