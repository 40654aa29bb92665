"""
PydanticValidator: rules are annotations, messages use the short field name.
"""
from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

from backend.formation.validation import ROOT_SCOPE, PydanticValidator, ScopeResult, scope_for


def test_scope_for_root_and_nested_paths():
    assert scope_for("email") == (ROOT_SCOPE, "email")
    assert scope_for("items.qty") == ("items", "qty")
    assert scope_for("order.items.qty") == ("items", "qty")


def test_missing_and_blank_values_are_required_errors():
    result = PydanticValidator().validate({"name": str, "email": str}, {"name": "  "})
    assert result.passed() is False
    assert result.first_message("name") == "name is required"
    assert result.first_message("email") == "email is required"


def test_blank_values_kept_when_configured():
    result = PydanticValidator(blank_as_missing=False).validate({"name": str}, {"name": ""})
    assert result.passed() is True


def test_constraint_messages_use_context_values():
    rules = {
        "name": (Annotated[str, Field(min_length=3)], ...),
        "qty": (int, Field(ge=1)),
        "plan": Literal["basic", "pro"],
    }
    result = PydanticValidator().validate(rules, {"name": "Al", "qty": "0", "plan": "gold"})
    assert result.first_message("name") == "name must be at least 3 characters"
    assert result.first_message("qty") == "qty must be at least 1"
    assert result.first_message("plan") == "The selected plan is invalid"


def test_int_parsing_message():
    result = PydanticValidator().validate({"qty": int}, {"qty": "many"})
    assert result.first_message("qty") == "qty must be an integer"


def test_optional_rule_passes_when_absent_and_ignores_extra_keys():
    result = PydanticValidator().validate({"nickname": (str, None)}, {"other": "x"})
    assert result.passed() is True
    assert result.first_message("nickname") is None


def test_non_identifier_leaf_names_are_validated_via_alias():
    result = PydanticValidator().validate({"first-name": str, "0": int}, {"0": "3"})
    assert result.first_message("first-name") == "first-name is required"
    assert result.first_message("0") is None


def test_custom_message_templates_override_defaults():
    validator = PydanticValidator({"missing": "Please fill in {field}"})
    result = validator.validate({"city": str}, {})
    assert result.first_message("city") == "Please fill in city"


def test_scope_result_reports_failures():
    assert ScopeResult().passed() is True
    failing = ScopeResult({"qty": ["qty is required", "qty must be an integer"]})
    assert failing.fails() is True
    assert failing.first_message("qty") == "qty is required"
    assert failing.first_message("sku") is None
