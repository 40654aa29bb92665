"""
Centralized configuration for form rendering.

Intent:
    Provide a single source of truth for the few settings the renderer
    consumes verbatim (field container markup, CSRF field name, character
    encoding, auto-CSRF toggle) together with their environment-variable
    overrides.

Behavior:
    - Every setting has a hardcoded safe default; a missing or malformed
      environment value never fails a render.
    - load_settings() reads the environment on each call so tests can use
      monkeypatch.setenv without cache invalidation.

Permissions:
    Pure configuration; no external calls or privileges required.
"""
from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass


logger = logging.getLogger("formation.config")

FIELD_CONTAINER_DEFAULT = "div"
FIELD_CONTAINER_CLASS_DEFAULT = "field"
CSRF_TOKEN_NAME_DEFAULT = "csrf_token"
ENCODING_DEFAULT = "UTF-8"
METHOD_SPOOF_NAME_DEFAULT = "_method"


def _parse_bool_env(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    return default


def get_field_container() -> str:
    """Tag name wrapping label, control and error in field()."""
    return (os.getenv("FORMATION_FIELD_CONTAINER") or FIELD_CONTAINER_DEFAULT).strip()


def get_field_container_class() -> str:
    return (os.getenv("FORMATION_FIELD_CONTAINER_CLASS") or FIELD_CONTAINER_CLASS_DEFAULT).strip()


def get_csrf_token_name() -> str:
    return (os.getenv("FORMATION_CSRF_TOKEN_NAME") or CSRF_TOKEN_NAME_DEFAULT).strip()


def get_auto_csrf_token() -> bool:
    return _parse_bool_env("FORMATION_AUTO_CSRF_TOKEN", True)


def get_encoding() -> str:
    """Return the output character encoding.

    Env:
        FORMATION_ENCODING – optional override; unknown codec names fall
        back to ENCODING_DEFAULT with a warning.
    """
    raw = (os.getenv("FORMATION_ENCODING") or ENCODING_DEFAULT).strip()
    try:
        codecs.lookup(raw)
    except LookupError:
        logger.warning("Unknown FORMATION_ENCODING %r, using %s", raw, ENCODING_DEFAULT)
        return ENCODING_DEFAULT
    return raw


@dataclass(frozen=True)
class FormationSettings:
    field_container: str = FIELD_CONTAINER_DEFAULT
    field_container_class: str = FIELD_CONTAINER_CLASS_DEFAULT
    csrf_token_name: str = CSRF_TOKEN_NAME_DEFAULT
    encoding: str = ENCODING_DEFAULT
    auto_csrf_token: bool = True
    method_spoof_name: str = METHOD_SPOOF_NAME_DEFAULT


def load_settings() -> FormationSettings:
    return FormationSettings(
        field_container=get_field_container(),
        field_container_class=get_field_container_class(),
        csrf_token_name=get_csrf_token_name(),
        encoding=get_encoding(),
        auto_csrf_token=get_auto_csrf_token(),
    )


__all__ = [
    "FormationSettings",
    "load_settings",
    "get_field_container",
    "get_field_container_class",
    "get_csrf_token_name",
    "get_auto_csrf_token",
    "get_encoding",
]
