"""
FastAPI wiring: one FormBuilder per request.

Why:
    Reading the submitted body is the only async step; doing it once in a
    dependency lets every renderer stay synchronous and keeps per-request
    state out of module globals.

Usage:
    get_form = form_builder_dependency(csrf_token=lambda request: request.cookies.get("csrf"))

    @app.post("/register")
    async def register(form: FormBuilder = Depends(get_form)):
        form.setup(REGISTER_FORM)
        ...
"""
from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from fastapi import Request

from .builder import FormBuilder
from .config import FormationSettings
from .macros import MacroRegistry
from .request_data import EMPTY_REQUEST, FormRequestData, RequestData
from .state import FormState
from .validation import Validator


logger = logging.getLogger("formation.web")

_BODY_METHODS = ("POST", "PUT", "PATCH", "DELETE")
_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_request_data(request: Request) -> RequestData:
    """Parse a submitted form body; other requests count as "not submitted"."""
    if request.method.upper() not in _BODY_METHODS:
        return EMPTY_REQUEST
    content_type = (request.headers.get("content-type") or "").lower()
    if not content_type.startswith(_FORM_CONTENT_TYPES):
        logger.debug("Ignoring non-form body (%s)", content_type or "none")
        return EMPTY_REQUEST
    form = await request.form()
    return FormRequestData(form)


def form_builder_dependency(
    *,
    csrf_token: Optional[Callable[[Request], Optional[str]]] = None,
    macros: Optional[MacroRegistry] = None,
    validator: Optional[Validator] = None,
    settings: Optional[FormationSettings] = None,
) -> Callable[[Request], Awaitable[FormBuilder]]:
    """Build a FastAPI dependency yielding a fresh FormBuilder per request.

    csrf_token: callable returning the session token for the request; when
    omitted, `request.state.csrf_token` is used if a middleware set it.
    """

    async def _form_builder(request: Request) -> FormBuilder:
        data = await read_request_data(request)
        token = csrf_token(request) if csrf_token else getattr(request.state, "csrf_token", None)
        return FormBuilder(
            FormState(data, validator=validator),
            settings=settings,
            csrf_token=token,
            macros=macros,
            current_url=str(request.url),
        )

    return _form_builder


__all__ = ["read_request_data", "form_builder_dependency"]
