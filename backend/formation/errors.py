"""
Validation message lookup for dotted field paths.

Validators key their messages by short field names ("qty"), while the
renderer addresses fields by dotted paths ("items.qty"). A path with one
segment belongs to the "root" scope; longer paths belong to the scope named
by their second-to-last segment, with the last segment as the short name.
"""
from __future__ import annotations

from typing import Optional

from .state import FormState
from .validation import ROOT_SCOPE, scope_for


def message_for(state: FormState, path: Optional[str]) -> Optional[str]:
    """Return the first validation message for a field, or None.

    The short field name inside the message is replaced by the field's
    registered label. Nothing is reported before the first submission.

    Paths whose second-to-last segments coincide ("order.items.qty" and
    "invoice.items.qty") resolve to the same scope and therefore the same
    message.
    """
    if not path or not state.request.has_body():
        return None

    display = state.labels.get(path) or path
    scope, leaf = scope_for(path)
    target = path if scope == ROOT_SCOPE else leaf

    result = state.validation.get(scope)
    if result is None:
        return None
    message = result.first_message(leaf)
    if not message:
        return None
    return message.replace(target, display)


def has_error(state: FormState, path: Optional[str]) -> bool:
    return message_for(state, path) is not None


__all__ = ["message_for", "has_error"]
