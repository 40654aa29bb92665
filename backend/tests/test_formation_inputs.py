"""
Input, textarea, label and error rendering.
"""
from __future__ import annotations


def test_text_input_uses_default_value(make_builder):
    form = make_builder()
    form.set_defaults({"email": "x@x.com"})
    assert form.text("email") == '<input type="text" name="email" id="email" value="x@x.com">\n'


def test_nested_path_renders_bracket_name_and_dashed_id(make_builder):
    form = make_builder({"user[first_name]": "Ada"})
    assert form.text("user.first_name") == '<input type="text" name="user[first_name]" id="user-first-name" value="Ada">\n'


def test_explicit_id_and_name_win(make_builder):
    form = make_builder()
    assert form.text("a.b", id="custom") == '<input type="text" name="a[b]" id="custom" value="">\n'
    assert form.text("a.b", name="other") == '<input type="text" name="other" id="other" value="">\n'


def test_password_never_echoes_submitted_value(make_builder):
    form = make_builder({"secret": "s3cret"})
    html = form.password("secret")
    assert html == '<input type="password" name="secret" id="secret">\n'
    assert "s3cret" not in form.file("secret")


def test_values_are_escaped_without_double_encoding(make_builder):
    form = make_builder()
    form.set_defaults({"title": '"Tom" & <b>', "note": "&copy; 2024"})
    assert 'value="&quot;Tom&quot; &amp; &lt;b&gt;"' in form.text("title")
    assert 'value="&copy; 2024"' in form.text("note")


def test_non_utf8_encoding_uses_numeric_references(make_builder):
    form = make_builder(encoding="ISO-8859-1")
    assert 'value="5 &#8364;"' in form.text("price", "5 €")
    assert 'value="café"' in form.text("drink", "café")


def test_error_class_appended_when_field_has_message(make_builder):
    form = make_builder({"email": ""})
    form.set_validation_rules({"email": str})
    assert form.text("email", class_="wide") == '<input type="text" name="email" id="email" value="" class="wide error">\n'


def test_keyword_attributes_are_normalized(make_builder):
    form = make_builder()
    html = form.text("q", data_role="search", required=True, disabled=False)
    assert 'data-role="search" required>' in html
    assert "disabled" not in html


def test_typed_shortcuts(make_builder):
    form = make_builder()
    assert 'type="email"' in form.email("email")
    assert 'type="tel"' in form.telephone("phone")
    assert 'type="number"' in form.number("qty", 3)
    assert form.hidden("token", "abc") == '<input type="hidden" name="token" id="token" value="abc">\n'
    assert form.submit("Save") == '<input type="submit" value="Save">\n'
    assert form.image("/btn.png") == '<input type="image" src="/btn.png">\n'


def test_textarea_escapes_body(make_builder):
    form = make_builder({"bio": "<hi>"})
    assert form.textarea("bio") == '<textarea name="bio" id="bio">&lt;hi&gt;</textarea>\n'


def test_button_escapes_text(make_builder):
    form = make_builder()
    assert form.button("Go & see", type="submit") == '<button type="submit">Go &amp; see</button>\n'


def test_label_derives_and_registers_text(make_builder):
    form = make_builder()
    assert form.label("user.first_name") == '<label for="user-first-name">First Name</label>\n'
    assert form.state.labels["user.first_name"] == "First Name"


def test_label_with_explicit_text_does_not_register(make_builder):
    form = make_builder()
    assert form.label("email", "Your E-Mail") == '<label for="email">Your E-Mail</label>\n'
    assert "email" not in form.state.labels


def test_error_block_with_message_and_hidden_placeholder(make_builder):
    form = make_builder({"email": ""})
    form.set_labels({"email": "E-Mail"})
    form.set_validation_rules({"email": str, "name": (str, None)})

    assert form.error("email") == '<div class="error">E-Mail is required</div>'
    assert form.error("email", always=True) == '<div class="error" id="email-error">E-Mail is required</div>'
    assert form.error("name") == ""
    assert form.error("name", always=True) == '<div class="error" id="name-error" style="display: none;"></div>'
