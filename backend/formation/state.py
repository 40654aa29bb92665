"""
Per-request form state: defaults, labels, validation scopes and reset flag.

Why:
    Every rendering call needs the "current value" of a field and whether it
    has an error. Keeping defaults, labels and validation results on one
    object that is created per request avoids leaking state between
    requests under a threaded or async server.

Behavior:
    - Submitted data wins over defaults whenever a body was submitted, the
      reset flag is off and the field is present in the body. This keeps
      invalid submissions on screen for correction.
    - Setters replace their mapping wholesale; labels additionally
      accumulate when label() derives one during rendering.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from pydantic import BaseModel

from .paths import split_path
from .request_data import EMPTY_REQUEST, RequestData
from .validation import ROOT_SCOPE, PydanticValidator, ValidationResult, Validator, scope_for


logger = logging.getLogger("formation.state")

_MISSING = object()


def as_mapping(values: Any) -> Dict[str, Any]:
    """Convert model-like inputs into a plain dict before handing them to FormState.

    Supports mappings, pydantic models, dataclass instances and plain objects.
    """
    if values is None:
        return {}
    if isinstance(values, Mapping):
        return dict(values)
    if isinstance(values, BaseModel):
        return values.model_dump()
    if dataclasses.is_dataclass(values) and not isinstance(values, type):
        return dataclasses.asdict(values)
    if hasattr(values, "__dict__"):
        return {k: v for k, v in vars(values).items() if not k.startswith("_")}
    raise TypeError(f"Cannot use {type(values).__name__} as form values")


def _nested_get(values: Mapping[str, Any], path: str) -> Any:
    node: Any = values
    for segment in split_path(path):
        if isinstance(node, Mapping) and segment in node:
            node = node[segment]
        elif isinstance(node, (list, tuple)) and segment.isdigit() and int(segment) < len(node):
            node = node[int(segment)]
        else:
            return _MISSING
    return node


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


class FormState:
    """Holds everything rendering needs to know about one form build."""

    def __init__(
        self,
        request: Optional[RequestData] = None,
        *,
        validator: Optional[Validator] = None,
    ) -> None:
        self.request: RequestData = request or EMPTY_REQUEST
        self.validator: Validator = validator or PydanticValidator()
        self.defaults: Dict[str, Any] = {}
        self.labels: Dict[str, str] = {}
        self.validation: Dict[str, ValidationResult] = {}
        self.reset = False

    # --- Registration ---------------------------------------------------------

    def set_defaults(self, values: Any = None) -> Dict[str, Any]:
        self.defaults = as_mapping(values)
        return self.defaults

    def reset_defaults(self, values: Any = None) -> None:
        """Resolve every field to its default, ignoring the submitted body."""
        if values:
            self.set_defaults(values)
        self.reset = True
        logger.debug("Form values reset to defaults")

    def set_labels(self, values: Any = None) -> None:
        self.labels = {str(k): str(v) for k, v in as_mapping(values).items()}

    def set_validation_rules(self, rules: Mapping[str, Any]) -> Dict[str, ValidationResult]:
        """Validate the submitted body against rules grouped by scope.

        Root fields are checked against the whole body; nested fields against
        the sub-mapping at their parent path ("items.qty" -> body["items"]).
        """
        grouped: Dict[str, Dict[str, Any]] = {}
        parents: Dict[str, str] = {}
        for path, rule in rules.items():
            scope, leaf = scope_for(path)
            grouped.setdefault(scope, {})[leaf] = rule
            parents.setdefault(scope, path.rsplit(".", 1)[0] if "." in path else "")

        validation: Dict[str, ValidationResult] = {}
        for scope, scope_rules in grouped.items():
            if scope == ROOT_SCOPE:
                data = self.request.all()
            else:
                data = self.request.get(parents[scope])
                if not isinstance(data, Mapping):
                    data = {}
            validation[scope] = self.validator.validate(scope_rules, data)
        self.validation = validation
        logger.debug("Validation scopes registered: %s", list(validation))
        return self.validation

    def validated(self, scope: Optional[str] = None) -> bool:
        if scope is None:
            return all(result.passed() for result in self.validation.values())
        result = self.validation.get(scope)
        return result is not None and result.passed()

    def setup(self, form: Mapping[str, Sequence[Any]]) -> Dict[str, ValidationResult]:
        """Register labels, rules and defaults from {path: [label, rule, default]}.

        Missing, None or empty entries are skipped.
        """
        labels: Dict[str, Any] = {}
        rules: Dict[str, Any] = {}
        defaults: Dict[str, Any] = {}
        for name, row in as_mapping(form).items():
            entries = list(row or ())
            for index, target in enumerate((labels, rules, defaults)):
                if index < len(entries) and not _is_blank(entries[index]):
                    target[name] = entries[index]

        self.set_labels(labels)
        self.set_validation_rules(rules)
        self.set_defaults(defaults)
        return self.validation

    # --- Lookup ---------------------------------------------------------------

    def _lookup_default(self, path: str) -> Any:
        # flat keys first ("items.qty"), then nested defaults ({"items": {"qty": ..}})
        if path in self.defaults:
            return self.defaults[path]
        return _nested_get(self.defaults, path)

    def default_for(self, path: str) -> Any:
        value = self._lookup_default(path)
        return None if value is _MISSING else value

    def current_value(self, path: str, kind: str = "standard") -> Any:
        """Value to display for a field.

        Resolution: submitted value (body present, not reset, field present),
        then default, then "". Checkbox lookups return 0 instead of None so
        the result can go straight into a persistence write.
        """
        value: Any = _MISSING
        if self.request.has_body() and not self.reset:
            value = self.request.get(path, _MISSING)
            # browsers omit unchecked boxes; absence in a submitted body means unchecked
            if value is _MISSING and kind == "checkbox":
                return 0
        if value is _MISSING:
            value = self._lookup_default(path)

        if value is _MISSING or value is None:
            return 0 if kind == "checkbox" else ""
        return value


__all__ = ["FormState", "as_mapping"]
