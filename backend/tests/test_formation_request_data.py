"""
Submitted form data: bracketed names are nested and looked up by dotted path.
"""
from __future__ import annotations

from backend.formation.request_data import EMPTY_REQUEST, FormRequestData, nest_form_data, parse_wire_name
from utils.fakes import MultiDict  # type: ignore


def test_parse_wire_name_splits_brackets():
    assert parse_wire_name("email") == ["email"]
    assert parse_wire_name("items[0][qty]") == ["items", "0", "qty"]
    assert parse_wire_name("tags[]") == ["tags", ""]


def test_nest_form_data_builds_mappings_and_append_lists():
    form = MultiDict([("address[city]", "Bremen"), ("tags[]", "a"), ("tags[]", "b"), ("name", "Ada")])
    assert nest_form_data(form) == {"address": {"city": "Bremen"}, "tags": ["a", "b"], "name": "Ada"}


def test_repeated_plain_keys_collapse_to_list():
    form = MultiDict([("colors", "red"), ("colors", "blue"), ("colors", "green")])
    assert nest_form_data(form) == {"colors": ["red", "blue", "green"]}


def test_lookup_by_dotted_path():
    data = FormRequestData({"items[0][qty]": "2", "address[city]": "Bremen"})
    assert data.has_body() is True
    assert data.get("address.city") == "Bremen"
    assert data.get("items.0.qty") == "2"
    assert data.get("items.1.qty", "n/a") == "n/a"
    assert data.contains("address") is True
    assert data.contains("address.zip") is False


def test_empty_request_is_not_submitted():
    assert EMPTY_REQUEST.has_body() is False
    assert EMPTY_REQUEST.all() == {}
    assert FormRequestData({}).has_body() is False
    assert FormRequestData({}, submitted=True).has_body() is True


def test_repeated_nested_keys_collapse_to_list():
    form = MultiDict([("prefs[colors]", "red"), ("prefs[colors]", "green"), ("prefs[size]", "m")])
    data = FormRequestData(form)
    assert data.get("prefs.colors") == ["red", "green"]
    assert data.get("prefs.size") == "m"


def test_append_segment_followed_by_keys_builds_list_of_mappings():
    form = MultiDict([("items[][qty]", "1"), ("items[][qty]", "2")])
    data = FormRequestData(form)
    assert data.all() == {"items": [{"qty": "1"}, {"qty": "2"}]}
    assert data.get("items.1.qty") == "2"
