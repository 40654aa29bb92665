"""
Registration demo: render, CSRF check, redisplay with errors, PRG on success.
"""

import re
import sys
from pathlib import Path

import httpx
import pytest
from httpx import ASGITransport

REPO_ROOT = Path(__file__).resolve().parents[2]
WEB_DIR = REPO_ROOT / "backend" / "web"
sys.path.insert(0, str(WEB_DIR))
import main  # type: ignore

pytestmark = pytest.mark.anyio("asyncio")


def _extract_csrf(html: str) -> str | None:
    m = re.search(r'name="csrf_token"[^>]*value="([^"]+)"', html)
    return m.group(1) if m else None


def _valid_data(token: str) -> dict:
    return {
        "csrf_token": token,
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "plan": "team-5",
        "contact": "email",
        "agree": "1",
        "address[city]": "London",
        "address[state]": "",
    }


async def test_register_get_renders_form_and_sets_csrf_cookie():
    async with httpx.AsyncClient(transport=ASGITransport(app=main.app), base_url="http://test") as client:
        r = await client.get("/register")

    assert r.status_code == 200
    token = r.cookies.get(main.CSRF_COOKIE_NAME)
    assert token and _extract_csrf(r.text) == token
    assert '<form class="register-form" method="POST" action="/register"' in r.text
    assert '<label for="name">Full Name</label>' in r.text
    assert '<select name="address[state]" id="address-state">' in r.text
    assert 'name="newsletters[news]"' in r.text
    assert '<option value="basic" selected="selected">Basic</option>' in r.text
    # no errors before the first submission
    assert 'class="error">' not in r.text


async def test_register_post_without_csrf_is_forbidden():
    async with httpx.AsyncClient(transport=ASGITransport(app=main.app), base_url="http://test") as client:
        r = await client.post("/register", data={"name": "Ada"}, follow_redirects=False)
    assert r.status_code == 403


async def test_register_post_with_mismatched_csrf_is_forbidden():
    async with httpx.AsyncClient(transport=ASGITransport(app=main.app), base_url="http://test") as client:
        client.cookies.set(main.CSRF_COOKIE_NAME, "cookie-token")
        r = await client.post("/register", data=_valid_data("other-token"), follow_redirects=False)
    assert r.status_code == 403


async def test_register_post_invalid_redisplays_values_and_messages():
    token = "tok-abc"
    data = _valid_data(token)
    data.update({"name": "A", "email": "nope", "plan": "pro", "contact": "phone", "address[city]": "Bremen"})
    data.pop("agree")

    async with httpx.AsyncClient(transport=ASGITransport(app=main.app), base_url="http://test") as client:
        client.cookies.set(main.CSRF_COOKIE_NAME, token)
        r = await client.post("/register", data=data, follow_redirects=False)

    assert r.status_code == 400
    html = r.text
    assert "Please correct the highlighted fields." in html
    assert "Full Name must be at least 2 characters" in html
    assert "E-Mail Address format is invalid" in html
    assert "Terms is required" in html
    assert 'id="name" value="A" class="error"' in html
    assert '<option value="pro" selected="selected">Professional</option>' in html
    assert 'id="contact-phone" value="phone" checked="checked"' in html
    assert 'name="address[city]" id="address-city" value="Bremen"' in html


async def test_register_post_valid_redirects():
    token = "tok-abc"
    async with httpx.AsyncClient(transport=ASGITransport(app=main.app), base_url="http://test") as client:
        client.cookies.set(main.CSRF_COOKIE_NAME, token)
        r = await client.post("/register", data=_valid_data(token), follow_redirects=False)
        assert r.status_code == 303
        assert r.headers.get("location") == "/register/done"

        done = await client.get("/register/done")
    assert done.status_code == 200
    assert "Your registration was received." in done.text
