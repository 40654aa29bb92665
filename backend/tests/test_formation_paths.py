"""
Field path encodings: bracketed wire names, DOM ids and derived labels.
"""
from __future__ import annotations

import pytest

from backend.formation.paths import split_path, to_dom_id, to_label, to_wire_name


@pytest.mark.parametrize(
    "path, expected",
    [("a", "a"), ("a.b", "a[b]"), ("a.b.c", "a[b][c]"), ("items.0.qty", "items[0][qty]")],
)
def test_wire_name_uses_bracket_notation_for_nested_paths(path, expected):
    assert to_wire_name(path) == expected


def test_dom_id_replaces_dots_and_underscores():
    assert to_dom_id("a.b_c") == "a-b-c"
    assert to_dom_id("data.first_name") == "data-first-name"
    assert to_dom_id("email") == "email"


def test_explicit_dom_id_always_wins():
    assert to_dom_id("data.first_name", "custom_id") == "custom_id"
    assert to_dom_id("data.first_name", "") == ""


def test_label_uses_last_segment_title_cased():
    assert to_label("user.first_name") == "First Name"
    assert to_label("email") == "Email"
    assert to_label("items.unit_price_eur") == "Unit Price Eur"


def test_split_path_keeps_single_segment():
    assert split_path("email") == ["email"]
    assert split_path("a.b.c") == ["a", "b", "c"]
