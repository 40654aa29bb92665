"""
Validation ports and the default pydantic adapter.

Why:
    Form rendering only needs two answers from a validator: did the scope
    pass, and what is the first message for a short field name. Validation
    itself is delegated to pydantic so rules stay ordinary type annotations
    and `Field(...)` constraints.

Rules:
    A rule is either a bare annotation (`str`, `int`, `EmailStr`) meaning a
    required field, or an `(annotation, default_or_Field)` tuple exactly as
    accepted by `pydantic.create_model`.

Messages:
    Messages are built from pydantic error types and use the short field
    name as placeholder ("qty is required") so that the error resolver can
    substitute the display label afterwards.
"""
from __future__ import annotations

import keyword
import logging
from dataclasses import dataclass, field
from typing import Annotated, Any, Dict, List, Mapping, Optional, Protocol

from pydantic import ConfigDict, Field, ValidationError, create_model

from .paths import split_path


logger = logging.getLogger("formation.validation")

ROOT_SCOPE = "root"

DEFAULT_MESSAGES: Dict[str, str] = {
    "missing": "{field} is required",
    "string_too_short": "{field} must be at least {min_length} characters",
    "string_too_long": "{field} may not be greater than {max_length} characters",
    "string_pattern_mismatch": "{field} format is invalid",
    "int_parsing": "{field} must be an integer",
    "float_parsing": "{field} must be a number",
    "bool_parsing": "{field} must be true or false",
    "greater_than": "{field} must be greater than {gt}",
    "greater_than_equal": "{field} must be at least {ge}",
    "less_than": "{field} must be less than {lt}",
    "less_than_equal": "{field} may not be greater than {le}",
    "literal_error": "The selected {field} is invalid",
    "value_error": "{field} is invalid",
}


class ValidationResult(Protocol):
    def passed(self) -> bool:
        ...

    def first_message(self, field: str) -> Optional[str]:
        ...


class Validator(Protocol):
    def validate(self, rules: Mapping[str, Any], data: Mapping[str, Any]) -> ValidationResult:
        ...


@dataclass
class ScopeResult:
    """Outcome of validating one scope: short field name -> messages."""

    messages: Dict[str, List[str]] = field(default_factory=dict)

    def passed(self) -> bool:
        return not any(self.messages.values())

    def fails(self) -> bool:
        return not self.passed()

    def first_message(self, field: str) -> Optional[str]:
        found = self.messages.get(field)
        return found[0] if found else None


def _is_safe_field_name(name: str) -> bool:
    return name.isidentifier() and not keyword.iskeyword(name) and not name.startswith("_")


def _field_definition(leaf: str, rule: Any) -> tuple:
    if isinstance(rule, tuple) and len(rule) == 2:
        annotation, default = rule
    else:
        annotation, default = rule, ...
    if not _is_safe_field_name(leaf):
        annotation = Annotated[annotation, Field(alias=leaf)]
    return annotation, default


class PydanticValidator:
    """Validator that builds a throwaway pydantic model per scope."""

    def __init__(self, messages: Optional[Mapping[str, str]] = None, *, blank_as_missing: bool = True) -> None:
        self.messages = {**DEFAULT_MESSAGES, **(messages or {})}
        self.blank_as_missing = blank_as_missing

    def _format(self, leaf: str, error: Mapping[str, Any]) -> str:
        template = self.messages.get(error.get("type", ""))
        if template is None:
            return f"{leaf}: {error.get('msg', 'invalid')}"
        try:
            return template.format(field=leaf, **(error.get("ctx") or {}))
        except (KeyError, IndexError):
            return f"{leaf}: {error.get('msg', 'invalid')}"

    def validate(self, rules: Mapping[str, Any], data: Mapping[str, Any]) -> ScopeResult:
        definitions: Dict[str, tuple] = {}
        name_to_leaf: Dict[str, str] = {}
        for index, (leaf, rule) in enumerate(rules.items()):
            name = leaf if _is_safe_field_name(leaf) else f"field_{index}"
            definitions[name] = _field_definition(leaf, rule)
            name_to_leaf[name] = leaf

        model = create_model(
            "FormScope",
            __config__=ConfigDict(extra="ignore", populate_by_name=True),
            **definitions,
        )

        payload = dict(data) if isinstance(data, Mapping) else {}
        if self.blank_as_missing:
            payload = {k: v for k, v in payload.items() if not (isinstance(v, str) and v.strip() == "")}

        result = ScopeResult()
        try:
            model.model_validate(payload)
        except ValidationError as exc:
            for error in exc.errors():
                loc = error.get("loc") or ()
                key = str(loc[0]) if loc else ""
                leaf = name_to_leaf.get(key, key)
                result.messages.setdefault(leaf, []).append(self._format(leaf, error))
            logger.debug("Validation failed for fields: %s", sorted(result.messages))
        return result


def scope_for(path: str) -> tuple[str, str]:
    """Return (scope name, leaf key) for a dotted field path."""
    segments = split_path(path)
    if len(segments) < 2:
        return ROOT_SCOPE, segments[-1]
    return segments[-2], segments[-1]


__all__ = [
    "ROOT_SCOPE",
    "DEFAULT_MESSAGES",
    "ValidationResult",
    "Validator",
    "ScopeResult",
    "PydanticValidator",
    "scope_for",
]
