"""
FormBuilder: request-scoped facade over the form elements.

Why:
    Views need one object that knows the current request's submitted data,
    defaults, labels and validation results, and renders form markup from
    them. Creating one builder per request keeps that state out of module
    globals so concurrent requests never see each other's values.

Usage:
    form = FormBuilder(FormState(FormRequestData(await request.form())), csrf_token=token)
    form.setup({"email": ["E-Mail", EmailStr, ""]})
    html = form.open("/register") + form.field("email") + form.submit("Save") + form.close()
"""
from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from .components.choices import ChoiceElements
from .config import FormationSettings, load_settings
from .macros import MacroNotFoundError, MacroRegistry
from .paths import to_label
from .state import FormState
from .validation import ValidationResult


logger = logging.getLogger("formation.builder")

_SPOOFED_METHODS = ("PUT", "PATCH", "DELETE")

FIELD_KINDS = ("text", "textarea", "select", "checkbox", "radio", "checkbox-set", "radio-set")


class FormBuilder(ChoiceElements):
    """Render forms for one request.

    Parameters:
        state: FormState for this request (new empty state if omitted).
        settings: Rendering settings (read from the environment if omitted).
        csrf_token: Session CSRF token emitted by token() and open().
        macros: Shared registry of custom macros.
        current_url: Used as form action when open() gets no action.
    """

    def __init__(
        self,
        state: Optional[FormState] = None,
        *,
        settings: Optional[FormationSettings] = None,
        csrf_token: Optional[str] = None,
        macros: Optional[MacroRegistry] = None,
        current_url: str = "",
    ) -> None:
        self.state = state or FormState()
        self.settings = settings or load_settings()
        self.encoding = self.settings.encoding
        self.csrf_token = csrf_token
        self.macros = macros if macros is not None else MacroRegistry()
        self.current_url = current_url

    # --- State passthrough ----------------------------------------------------

    def setup(self, form: Mapping[str, Sequence[Any]]) -> Dict[str, ValidationResult]:
        return self.state.setup(form)

    def set_defaults(self, values: Any = None) -> Dict[str, Any]:
        return self.state.set_defaults(values)

    def reset_defaults(self, values: Any = None) -> None:
        self.state.reset_defaults(values)

    def set_labels(self, values: Any = None) -> None:
        self.state.set_labels(values)

    def set_validation_rules(self, rules: Mapping[str, Any]) -> Dict[str, ValidationResult]:
        return self.state.set_validation_rules(rules)

    def validated(self, scope: Optional[str] = None) -> bool:
        return self.state.validated(scope)

    def value(self, path: str, kind: str = "standard") -> Any:
        return self.state.current_value(path, kind)

    # --- Form open/close ------------------------------------------------------

    def _action(self, action: Optional[str], https: Optional[bool]) -> str:
        uri = self.current_url if action is None else action
        if https and uri.startswith("http://"):
            uri = "https://" + uri[len("http://"):]
        return uri

    def open(
        self,
        action: Optional[str] = None,
        method: str = "POST",
        attrs: Optional[Mapping[str, Any]] = None,
        https: Optional[bool] = None,
        **extra: Any,
    ) -> str:
        """Open a <form>.

        HTML forms only know GET and POST; PUT/PATCH/DELETE are sent as POST
        with a hidden method field. The CSRF field is appended when
        auto_csrf_token is enabled.
        """
        method = method.upper()
        attrs = self.merge_attrs(attrs, **extra)
        attrs["method"] = "GET" if method == "GET" else "POST"
        attrs["action"] = self._action(action, https)
        attrs.setdefault("accept-charset", self.settings.encoding)

        spoof = self.hidden(self.settings.method_spoof_name, method) if method in _SPOOFED_METHODS else ""
        html = f"<form{self.attributes(attrs)}>{spoof}\n"
        if self.settings.auto_csrf_token:
            html += self.token()
        return html

    def open_secure(self, action: Optional[str] = None, method: str = "POST", attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        return self.open(action, method, attrs, True, **extra)

    def open_for_files(
        self,
        action: Optional[str] = None,
        method: str = "POST",
        attrs: Optional[Mapping[str, Any]] = None,
        https: Optional[bool] = None,
        **extra: Any,
    ) -> str:
        attrs = self.merge_attrs(attrs, **extra)
        attrs["enctype"] = "multipart/form-data"
        return self.open(action, method, attrs, https)

    def open_secure_for_files(self, action: Optional[str] = None, method: str = "POST", attrs: Optional[Mapping[str, Any]] = None, **extra: Any) -> str:
        return self.open_for_files(action, method, attrs, True, **extra)

    def close(self) -> str:
        return "</form>"

    def token(self) -> str:
        """Hidden input carrying the session CSRF token."""
        if not self.csrf_token:
            logger.warning("Rendering CSRF field without a session token")
        return self.hidden(self.settings.csrf_token_name, self.csrf_token or "")

    # --- Composite field ------------------------------------------------------

    def field(self, path: str, label: Optional[str] = None, kind: str = "text", options: Any = None) -> str:
        """Render label, control and error message inside the field container.

        kind: one of FIELD_KINDS. For "checkbox-set" the options are the
        checkbox names nested under path ("prefs" -> "prefs.news"). An explicit
        label is registered so the field's error message uses it too.
        """
        if kind not in FIELD_KINDS:
            raise ValueError(f"Unknown field kind: {kind!r}")
        if label is None:
            label = self.state.labels.get(path) or to_label(path)
        self.state.labels.setdefault(path, label)

        tag = self.settings.field_container
        html = f'<{tag} class="{self.escape(self.settings.field_container_class)}">\n'
        if kind == "text":
            html += self.label(path, label) + self.text(path)
        elif kind == "textarea":
            html += self.label(path, label) + self.textarea(path)
        elif kind == "select":
            html += self.label(path, label) + self.select(path, options or {})
        elif kind == "checkbox":
            html += self.checkbox(path) + self.label(path, label)
        elif kind == "radio":
            html += self.radio(path) + self.label(path, label)
        elif kind == "checkbox-set":
            html += self.label(None, label) + self.checkbox_set(options or {}, f"{path}.")
        elif kind == "radio-set":
            html += self.label(None, label) + self.radio_set(path, options or {})
        html += self.error(path) + "\n"
        html += f"</{tag}>\n"
        return html

    # --- Macros ---------------------------------------------------------------

    def macro(self, name: str, fn: Callable[..., Any]) -> None:
        """Register a macro; it is called with the builder as first argument."""
        self.macros.register(name, fn)

    def __getattr__(self, name: str) -> Any:
        # only reached for attributes not found the normal way
        if name.startswith("_"):
            raise AttributeError(name)
        macros = self.__dict__.get("macros")
        if macros is None or name not in macros:
            raise MacroNotFoundError(name)
        return functools.partial(macros.get(name), self)


__all__ = ["FormBuilder", "FIELD_KINDS"]
