"""
Formation: server-side HTML form rendering.

Renders inputs, selects, checkbox/radio sets, labels and error messages
from dotted field paths, registered defaults and pydantic validation
results.
"""

from .builder import FormBuilder
from .config import FormationSettings, load_settings
from .errors import message_for
from .macros import MacroNotFoundError, MacroRegistry
from .paths import to_dom_id, to_label, to_wire_name
from .request_data import EMPTY_REQUEST, FormRequestData, RequestData
from .state import FormState, as_mapping
from .validation import PydanticValidator, ScopeResult, ValidationResult, Validator

__all__ = [
    "FormBuilder",
    "FormState",
    "FormRequestData",
    "RequestData",
    "EMPTY_REQUEST",
    "FormationSettings",
    "load_settings",
    "MacroRegistry",
    "MacroNotFoundError",
    "PydanticValidator",
    "ScopeResult",
    "ValidationResult",
    "Validator",
    "as_mapping",
    "message_for",
    "to_wire_name",
    "to_dom_id",
    "to_label",
]
