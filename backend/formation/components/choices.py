"""
Select, checkbox and radio elements, including checkbox/radio sets.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ..paths import to_dom_id, to_wire_name
from .base import CONTAINER_SUFFIX
from .inputs import InputElements


def iter_options(options: Any) -> Iterable[Tuple[Any, Any]]:
    """Yield (value, display) pairs.

    In plain sequences a 2-tuple is a (value, display) pair; any other item
    is used for both.
    """
    if isinstance(options, Mapping):
        return options.items()
    return (item if isinstance(item, tuple) and len(item) == 2 else (item, item) for item in options)


def _as_text(value: Any) -> str:
    if value is True:
        return "1"
    if value is False:
        return "0"
    if value is None:
        return ""
    return str(value)


def same_value(left: Any, right: Any) -> bool:
    """Compare form values the way they travel over the wire: as strings."""
    return _as_text(left) == _as_text(right)


def is_selected(value: Any, selected: Any) -> bool:
    if isinstance(selected, (list, tuple, set, frozenset)):
        return any(same_value(value, item) for item in selected)
    return same_value(value, selected)


class ChoiceElements(InputElements):
    """<select>, checkbox and radio renderers."""

    # --- Select ---------------------------------------------------------------

    def select(
        self,
        path: str,
        options: Any = (),
        default_label: Optional[str] = None,
        selected: Any = None,
        attrs: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ) -> str:
        """Render a <select>.

        Mapping- or list-valued entries become an <optgroup> labelled by
        their key. When the current value is a sequence (multi-select),
        every contained value is marked selected.
        """
        attrs = self.add_error_class(path, self.merge_attrs(attrs, **extra))
        if selected is None:
            selected = self.state.current_value(path)

        parts = []
        if default_label is not None:
            parts.append(self._option("", default_label, selected))
        for value, display in iter_options(options):
            # only keyed entries form groups; bare items render as one option
            if isinstance(display, (Mapping, list, tuple)) and display is not value:
                parts.append(self._optgroup(display, value, selected))
            else:
                parts.append(self._option(value, display, selected))

        element = {"name": to_wire_name(path), "id": to_dom_id(path, attrs.get("id"))}
        element.update((k, v) for k, v in attrs.items() if k not in ("name", "id"))
        return f"<select{self.attributes(element)}>" + "\n".join(parts) + "\n</select>\n"

    def _optgroup(self, options: Any, label: Any, selected: Any) -> str:
        inner = "".join(self._option(value, display, selected) for value, display in iter_options(options))
        return f'<optgroup label="{self.escape(label)}">{inner}</optgroup>'

    def _option(self, value: Any, display: Any, selected: Any) -> str:
        attrs = {"value": value, "selected": "selected" if is_selected(value, selected) else None}
        return f"<option{self.attributes(attrs)}>{self.escape(display)}</option>"

    # --- Checkable inputs -----------------------------------------------------

    def checkbox(
        self,
        path: str,
        value: Any = 1,
        checked: bool = False,
        attrs: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ) -> str:
        if same_value(value, self.state.current_value(path, "checkbox")):
            checked = True
        return self._checkable("checkbox", path, value, checked, self.merge_attrs(attrs, **extra))

    def radio(
        self,
        path: str,
        value: Any = None,
        checked: bool = False,
        attrs: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ) -> str:
        if value is None:
            value = path
        if same_value(value, self.state.current_value(path)):
            checked = True
        return self._checkable("radio", path, value, checked, self.merge_attrs(attrs, **extra))

    def _checkable(self, kind: str, path: str, value: Any, checked: bool, attrs: Dict[str, Any]) -> str:
        if checked:
            attrs["checked"] = "checked"
        attrs["id"] = to_dom_id(path, attrs.get("id"))
        return self.input(kind, path, value, attrs)

    # --- Sets -----------------------------------------------------------------

    def _split_container_attrs(self, base_class: str, attrs: Mapping[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """Route attributes ending in "_container" to the wrapping <ul>."""
        container: Dict[str, Any] = {"class": base_class}
        items: Dict[str, Any] = {}
        for key, value in attrs.items():
            if key.endswith(CONTAINER_SUFFIX):
                target = key[: -len(CONTAINER_SUFFIX)]
                if target == "class":
                    container["class"] = self.classes(container["class"], value)
                else:
                    container[target] = value
            else:
                items[key] = value
        return container, items

    def checkbox_set(
        self,
        names: Any,
        name_prefix: Optional[str] = None,
        attrs: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ) -> str:
        """Render a list of checkboxes, one per name.

        names maps field name -> display text; name_prefix is prepended to
        each name (e.g. "permissions." for nested fields). Checked items get
        a "selected" class on their <li>.
        """
        if not names:
            return ""
        container, item_attrs = self._split_container_attrs("checkbox-set", self.merge_attrs(attrs, **extra))

        items = []
        for name, display in iter_options(names):
            path = f"{name_prefix}{name}" if name_prefix else str(name)
            checked = same_value(1, self.state.current_value(path, "checkbox"))
            li_attrs = {"class": "selected"} if checked else {}

            checkbox_attrs = dict(item_attrs)
            checkbox_attrs["id"] = to_dom_id(path)
            items.append(
                f"<li{self.attributes(li_attrs)}>"
                + self.checkbox(path, 1, checked, checkbox_attrs)
                + self.label(None, display, {"for": checkbox_attrs["id"]})
                + "</li>"
            )
        return f"<ul{self.attributes(container)}>" + "".join(items) + "</ul>\n"

    def radio_set(
        self,
        path: str,
        options: Any,
        selected: Any = None,
        attrs: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ) -> str:
        """Render a list of radio buttons sharing one field name.

        Each radio id is the field id plus the lower-cased option value so
        that ids stay unique within the set.
        """
        if not options:
            return ""
        container, item_attrs = self._split_container_attrs("radio-set", self.merge_attrs(attrs, **extra))
        container = self.add_error_class(path, container)

        id_prefix = to_dom_id(path, item_attrs.pop("id", None))
        if selected is None:
            selected = self.state.current_value(path)

        items = []
        for value, display in iter_options(options):
            checked = same_value(selected, value)
            li_attrs = {"class": "selected"} if checked else {}

            radio_attrs = dict(item_attrs)
            suffix = _as_text(value).lower().replace("_", "-").replace(" ", "-")
            radio_attrs["id"] = f"{id_prefix}-{suffix}"
            items.append(
                f"<li{self.attributes(li_attrs)}>"
                + self._checkable("radio", path, value, checked, radio_attrs)
                + self.label(None, display, {"for": radio_attrs["id"]})
                + "</li>"
            )
        return f"<ul{self.attributes(container)}>" + "".join(items) + "</ul>\n"
