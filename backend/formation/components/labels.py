"""
Label and error message elements.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..errors import message_for
from ..paths import to_dom_id, to_label
from .base import Component


class LabelElements(Component):
    """Labels, error classes and error message blocks.

    Expects `self.state` (FormState) on the concrete builder.
    """

    def error_message(self, path: Optional[str]) -> Optional[str]:
        return message_for(self.state, path)

    def add_error_class(self, path: Optional[str], attrs: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Return attrs with "error" appended to class when the field has a message."""
        attrs = dict(attrs or {})
        if self.error_message(path):
            attrs["class"] = self.classes(attrs.get("class"), error=True)
        return attrs

    def label(
        self,
        path: Optional[str] = None,
        text: Optional[str] = None,
        attrs: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ) -> str:
        """Render a <label>.

        With a path and no text, the registered label is used or one is
        derived from the path and registered for error messages.
        """
        attrs = self.add_error_class(path, self.merge_attrs(attrs, **extra))
        if path:
            if text is None:
                text = self.state.labels.get(path) or to_label(path)
                self.state.labels.setdefault(path, text)
            attrs["for"] = to_dom_id(path, attrs.get("for"))
        elif text is None:
            text = ""
        return f"<label{self.attributes(attrs)}>{self.escape(text)}</label>\n"

    def error(self, path: str, always: bool = False) -> str:
        """Render the error block for a field.

        always=True keeps an empty hidden container with a stable id so
        client-side scripts can fill it in later.
        """
        id_attr = f' id="{self.escape(to_dom_id(path))}-error"' if always else ""
        message = self.error_message(path)
        if message:
            return f'<div class="error"{id_attr}>{self.escape(message)}</div>'
        if always:
            return f'<div class="error"{id_attr} style="display: none;"></div>'
        return ""
