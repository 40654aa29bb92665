"""
Input, textarea and button elements.

These helpers keep markup consistent across forms: names use bracket
notation for nested fields, ids are derived from the dotted path, values
come from the submitted body or the registered defaults, and fields with a
validation message get an "error" class.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from ..paths import to_dom_id, to_wire_name
from .labels import LabelElements


_RESERVED = ("type", "name", "id", "value")
# kinds that never echo a stored value back to the browser
_NO_STORED_VALUE = ("password", "file", "image")


class InputElements(LabelElements):
    """<input>, <textarea> and <button> renderers."""

    def input(
        self,
        kind: str,
        path: Optional[str],
        value: Any = None,
        attrs: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ) -> str:
        """Render an <input>.

        Parameters:
            kind: The input type ("text", "email", "hidden", ...).
            path: Dotted field path; an explicit "name" attribute wins.
            value: Explicit value; when None the current value is looked up
                (never for password, file or image inputs).

        Behavior:
            - name becomes bracket notation ("items.qty" -> "items[qty]")
            - id is derived from the path unless given explicitly
            - "error" is appended to class when the field has a message
        """
        attrs = self.merge_attrs(attrs, **extra)
        path = attrs.pop("name", None) or path
        attrs = self.add_error_class(path, attrs)

        dom_id = to_dom_id(path, attrs.get("id")) if path else attrs.get("id")
        if value is None and kind not in _NO_STORED_VALUE and path:
            value = self.state.current_value(path)

        element = {
            "type": kind,
            "name": to_wire_name(path) if path else None,
            "id": dom_id,
            "value": value,
        }
        element.update((k, v) for k, v in attrs.items() if k not in _RESERVED)
        return f"<input{self.attributes(element)}>\n"

    def text(self, path: str, value: Any = None, attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        return self.input("text", path, value, attrs, **extra)

    def password(self, path: str, attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        return self.input("password", path, None, attrs, **extra)

    def hidden(self, path: str, value: Any = None, attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        return self.input("hidden", path, value, attrs, **extra)

    def search(self, path: str, value: Any = None, attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        return self.input("search", path, value, attrs, **extra)

    def email(self, path: str, value: Any = None, attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        return self.input("email", path, value, attrs, **extra)

    def telephone(self, path: str, value: Any = None, attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        return self.input("tel", path, value, attrs, **extra)

    def url(self, path: str, value: Any = None, attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        return self.input("url", path, value, attrs, **extra)

    def number(self, path: str, value: Any = None, attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        return self.input("number", path, value, attrs, **extra)

    def date(self, path: str, value: Any = None, attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        return self.input("date", path, value, attrs, **extra)

    def file(self, path: str, attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        return self.input("file", path, None, attrs, **extra)

    def submit(self, value: str = "Submit", attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        return self.input("submit", None, value, attrs, **extra)

    def reset(self, value: Optional[str] = None, attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        return self.input("reset", None, value, attrs, **extra)

    def image(self, src: str, path: Optional[str] = None, attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        attrs = self.merge_attrs(attrs, **extra)
        attrs["src"] = src
        return self.input("image", path, None, attrs)

    def textarea(self, path: str, value: Any = None, attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        attrs = self.add_error_class(path, self.merge_attrs(attrs, **extra))
        if value is None:
            value = self.state.current_value(path)
        element = {"name": to_wire_name(path), "id": to_dom_id(path, attrs.get("id"))}
        element.update((k, v) for k, v in attrs.items() if k not in ("name", "id"))
        return f"<textarea{self.attributes(element)}>{self.escape(value)}</textarea>\n"

    def button(self, text: Optional[str] = None, attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        attrs = self.merge_attrs(attrs, **extra)
        return f"<button{self.attributes(attrs)}>{self.escape(text)}</button>\n"
