"""
Base Component class for form markup.

Every element renderer builds HTML strings through this class so escaping
and attribute serialization behave the same everywhere.
"""

from __future__ import annotations

import codecs
import html
import re
from typing import Any, Dict, Mapping, Optional


# Entities already present in a value are kept as-is instead of being
# double-encoded ("&amp;copy;" -> "&copy;").
_ENTITY_RE = re.compile(r"&amp;(#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")

CONTAINER_SUFFIX = "_container"


def normalize_attr_name(key: str) -> str:
    """Map Python keyword names to HTML attribute names.

    Trailing underscore marks reserved names (class_ -> class, for_ -> for);
    inner underscores become hyphens (data_value -> data-value). The
    "_container" suffix used by checkbox/radio sets is preserved
    (class_container, data_role_container -> data-role_container).
    """
    if key.endswith(CONTAINER_SUFFIX) and key != CONTAINER_SUFFIX:
        return normalize_attr_name(key[: -len(CONTAINER_SUFFIX)]) + CONTAINER_SUFFIX
    if key.endswith("_"):
        return key[:-1]
    return key.replace("_", "-")


class Component:
    """Base class for all markup producers.

    Benefits:
    - Automatic HTML escaping for security
    - One place that knows the output encoding
    - Easy testing with unit tests
    """

    encoding: str = "UTF-8"

    def escape(self, text: Optional[Any]) -> str:
        """Escape HTML entities (quotes included) for the configured encoding.

        Args:
            text: Text to escape (can be None)

        Returns:
            str: Escaped text or empty string if None
        """
        if text is None:
            return ""
        escaped = _ENTITY_RE.sub(r"&\1;", html.escape(str(text), quote=True))
        if codecs.lookup(self.encoding).name != "utf-8":
            # characters the target charset cannot carry become numeric references
            escaped = escaped.encode(self.encoding, "xmlcharrefreplace").decode(self.encoding)
        return escaped

    @staticmethod
    def classes(*args: Optional[str], **conditionals: bool) -> str:
        """Helper to build CSS class strings with conditional classes

        Example:
            >>> Component.classes("btn", None, error=True, active=False)
            "btn error"
        """
        classes = [cls for cls in args if cls]
        classes.extend(key for key, value in conditionals.items() if value)
        return " ".join(classes)

    @staticmethod
    def merge_attrs(attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> Dict[str, Any]:
        """Combine an attribute mapping (HTML names) with keyword attributes (Python names)."""
        merged: Dict[str, Any] = dict(attrs or {})
        for key, value in extra.items():
            merged[normalize_attr_name(key)] = value
        return merged

    def attributes(self, attrs: Mapping[str, Any]) -> str:
        """Build an HTML attribute string with a leading space.

        True renders a bare boolean attribute; None and False are dropped.

        Example:
            >>> Component().attributes({"id": "test", "disabled": True})
            ' id="test" disabled'
        """
        result = []
        for key, value in attrs.items():
            if value is True:
                result.append(key)
            elif value is not False and value is not None:
                result.append(f'{key}="{self.escape(value)}"')
        return " " + " ".join(result) if result else ""
