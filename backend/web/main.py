"""
Formation demo app.

A small FastAPI application that drives the form helpers end to end: a
registration form with nested address fields, a select, a radio set, a
checkbox set and a terms checkbox. Invalid submissions are re-rendered with
the submitted values and per-field error messages.

Security:
    CSRF uses a double-submit cookie: GET issues a token cookie and the form
    carries the same token; POST compares both in constant time.
"""
from __future__ import annotations

import hmac
import logging
import secrets
from typing import Annotated, Literal, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import Field

from backend.formation import FormBuilder
from backend.formation.components.base import Component
from backend.formation.options import states
from backend.formation.web import form_builder_dependency


logger = logging.getLogger("formation.demo")

CSRF_COOKIE_NAME = "formation_csrf"

app = FastAPI(title="Formation demo", version="0.1.0")

PLANS = {"basic": "Basic", "pro": "Professional", "team": {"team-5": "Team (5 seats)", "team-20": "Team (20 seats)"}}
CONTACT_OPTIONS = {"email": "E-Mail", "phone": "Phone", "none": "Do not contact me"}
NEWSLETTERS = {"news": "Product news", "events": "Events"}

# field path -> [label, rule, default]
REGISTER_FORM = {
    "name": ["Full Name", (Annotated[str, Field(min_length=2, max_length=100)], ...), ""],
    "email": ["E-Mail Address", (str, Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")), ""],
    "plan": ["Plan", Literal["basic", "pro", "team-5", "team-20"], "basic"],
    "contact": ["Contact Preference", Literal["email", "phone", "none"], "email"],
    "agree": ["Terms", Literal["1"], None],
    "address.city": ["City", (str, Field(min_length=2)), ""],
    "address.state": ["State", (Optional[str], None), ""],
}


def _csrf_from_cookie(request: Request) -> Optional[str]:
    return request.cookies.get(CSRF_COOKIE_NAME)


get_form = form_builder_dependency(csrf_token=_csrf_from_cookie)


def _page(title: str, content: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>{Component().escape(title)}</title>
</head>
<body>
    <main id="main-content">
        <h1>{Component().escape(title)}</h1>
        {content}
    </main>
</body>
</html>"""


def render_register_form(form: FormBuilder) -> str:
    """Assemble the registration form from field blocks."""
    parts = [
        form.open("/register", attrs={"class": "register-form"}),
        form.field("name"),
        form.field("email"),
        form.field("plan", kind="select", options=PLANS),
        form.field("contact", kind="radio-set", options=CONTACT_OPTIONS),
        form.field("newsletters", "Newsletters", kind="checkbox-set", options=NEWSLETTERS),
        form.field("agree", "I accept the terms", kind="checkbox"),
        '<fieldset class="address">',
        form.field("address.city"),
        form.label("address.state"),
        form.select("address.state", states(), "Select a state"),
        form.error("address.state", always=True),
        "</fieldset>",
        form.submit("Register", class_="btn btn-primary"),
        form.close(),
    ]
    return "\n".join(parts)


def _with_csrf_cookie(response: HTMLResponse, token: str) -> HTMLResponse:
    response.set_cookie(CSRF_COOKIE_NAME, token, httponly=True, samesite="lax", path="/")
    return response


@app.get("/register", response_class=HTMLResponse)
async def register_page(form: FormBuilder = Depends(get_form)) -> HTMLResponse:
    token = form.csrf_token or secrets.token_urlsafe(24)
    form.csrf_token = token
    form.setup(REGISTER_FORM)
    return _with_csrf_cookie(HTMLResponse(_page("Register", render_register_form(form))), token)


@app.post("/register")
async def register_submit(form: FormBuilder = Depends(get_form)):
    submitted = form.state.request.get(form.settings.csrf_token_name)
    if not form.csrf_token or not submitted or not hmac.compare_digest(form.csrf_token.encode(), str(submitted).encode()):
        logger.warning("Rejected registration without valid CSRF token")
        return HTMLResponse("", status_code=403)

    form.setup(REGISTER_FORM)
    if form.validated():
        logger.info("Registration accepted for %s", form.value("email"))
        return RedirectResponse(url="/register/done", status_code=303)

    html = _page("Register", '<p class="form-error" role="alert">Please correct the highlighted fields.</p>' + render_register_form(form))
    return HTMLResponse(html, status_code=400)


@app.get("/register/done", response_class=HTMLResponse)
async def register_done() -> HTMLResponse:
    return HTMLResponse(_page("Welcome", "<p>Your registration was received.</p>"))
