"""
Unit tests for the Form field registry, values, bulk setters and display order.
"""

import pytest

from formmaker import (
    BulmaTheme,
    CustomRenderer,
    DefaultTheme,
    FieldNotFoundError,
    FieldType,
    Form,
    InvalidCustomRendererError,
)


class StarRenderer(CustomRenderer):
    def render(self, field, view_only=False):
        return "*"


# Registry

def test_registry_tracks_added_and_removed_fields():
    form = Form()
    form.add_fields(["a", "b", "c"])
    form.add_field("d")
    form.remove_field("b")
    form.remove_fields(["c", "missing"])
    assert list(form.fields.keys()) == ["a", "d"]
    assert form.is_field("a")
    assert "d" in form
    assert not form.is_field("b")


def test_add_field_overwrites_existing_field():
    form = Form()
    form.add_field("a")
    form.set_labels({"a": "Changed"})
    form.set_value("a", "x")
    form.add_field("a")
    assert form.get_field("a").label == "A"
    assert form.get_value("a") is None


def test_new_fields_inherit_form_theme():
    form = Form(theme=BulmaTheme())
    field = form.add_field("a")
    assert field.theme is form.get_theme()


def test_remove_field_leaves_display_fields_untouched(form):
    form.remove_field("email")
    assert form.get_display_fields() == ["name", "email", "age"]
    assert [f.name for f in form.get_display_field_objects()] == ["name", "age"]


def test_get_field_unknown_raises():
    form = Form()
    with pytest.raises(FieldNotFoundError) as exc:
        form.get_field("nope")
    assert exc.value.field_name == "nope"
    assert str(exc.value) == "nope is not part of the Form"


def test_default_action_comes_from_request(stub_request):
    form = Form(request=stub_request)
    assert form.attributes.get("action") == "http://testserver/signup"
    assert form.attributes.get("method") == "post"


def test_default_action_without_request_is_configured_default():
    assert Form().attributes.get("action") == ""


# Values

def test_set_values_then_get_field_values(form):
    form.set_values({"name": "1", "email": "2"})
    assert form.get_field_values() == {"name": "1", "email": "2", "age": None}


def test_set_values_unknown_name_raises_without_changes(form):
    with pytest.raises(FieldNotFoundError):
        form.set_values({"name": "x", "unknown": "y"})
    assert form.get_value("name") is None


def test_set_values_ignore_invalid_skips_unknown_names(form):
    form.set_values({"name": "x", "unknown": "y"}, ignore_invalid=True)
    assert form.get_value("name") == "x"
    assert not form.is_field("unknown")


def test_set_value_and_set_field_value(form):
    form.set_value("name", "Ann")
    form.set_field_value("age", "30")
    assert form.get_value("name") == "Ann"
    assert form.get_value("age") == "30"
    with pytest.raises(FieldNotFoundError):
        form.set_value("unknown", "x")
    with pytest.raises(FieldNotFoundError):
        form.get_value("unknown")


# Bulk setters

def test_set_types_with_tags_and_renderers(form):
    renderer = StarRenderer()
    form.set_types({"name": FieldType.TEXTAREA, "email": "email", "age": renderer})
    assert form.get_field("name").type == "textarea"
    assert form.get_field("email").type == "email"
    assert form.get_field("age").custom_renderer is renderer


def test_set_types_rejects_non_renderer_objects(form):
    with pytest.raises(InvalidCustomRendererError):
        form.set_types({"email": "email", "name": object()})
    assert form.get_field("email").type == "text"


def test_set_types_rejects_forms(form):
    with pytest.raises(InvalidCustomRendererError):
        form.set_types({"name": Form()})
    assert form.get_field("name").custom_renderer is None


def test_set_types_unknown_field_raises(form):
    with pytest.raises(FieldNotFoundError):
        form.set_types({"unknown": "email"})


def test_bulk_setters_apply(form):
    form.set_examples({"email": "me@example.com"})
    form.set_notes({"email": "We never share it"})
    form.set_default_values({"age": 18})
    form.set_labels({"name": "Full name"})
    form.set_validation_rules({"email": "required|email"})
    form.set_required_fields(["name"])
    form.set_inline(["name", "age"])

    assert form.get_field("email").example == "me@example.com"
    assert form.get_field("email").note == "We never share it"
    assert form.get_field("age").default_value == 18
    assert form.get_labels(["name"]) == {"name": "Full name"}
    assert form.get_field("email").validation_rules == ["required", "email"]
    assert form.get_field("name").is_required()
    assert form.get_field("name").is_inline and form.get_field("age").is_inline


@pytest.mark.parametrize("setter, argument", [
    ("set_examples", {"name": "x", "unknown": "y"}),
    ("set_default_values", {"name": "x", "unknown": "y"}),
    ("set_labels", {"name": "x", "unknown": "y"}),
    ("set_validation_rules", {"name": "required", "unknown": "required"}),
    ("set_required_fields", ["name", "unknown"]),
    ("set_inline", ["name", "unknown"]),
])
def test_bulk_setters_validate_all_names_before_mutating(form, setter, argument):
    """A failing bulk setter leaves entries before the unknown name unchanged."""
    before = form.to_serializable()
    with pytest.raises(FieldNotFoundError):
        getattr(form, setter)(argument)
    assert form.to_serializable() == before


def test_get_labels_defaults_to_all_fields(form):
    assert form.get_labels() == {"name": "Name", "email": "Email", "age": "Age"}
    with pytest.raises(FieldNotFoundError):
        form.get_labels(["unknown"])


def test_add_datalist_registers_and_displays():
    form = Form()
    field = form.add_datalist("browsers", ["Chrome", "Firefox"])
    assert field.type == "datalist"
    assert field.attributes.get("id") == "browsers"
    assert field.get_options() == {"Chrome": "Chrome", "Firefox": "Firefox"}
    assert form.get_display_fields() == ["browsers"]


# Display order

def test_set_display_fields_unknown_name_leaves_list_unchanged(form):
    with pytest.raises(FieldNotFoundError):
        form.set_display_fields(["age", "unknown"])
    assert form.get_display_fields() == ["name", "email", "age"]


def test_set_display_fields_replaces_order(form):
    form.set_display_fields(["age", "name"])
    assert form.get_display_fields() == ["age", "name"]


def test_add_and_remove_display_fields_are_idempotent(form):
    form.set_display_fields(["name"])
    form.add_display_fields(["email", "name", "email", "ghost"])
    assert form.get_display_fields() == ["name", "email", "ghost"]
    form.remove_display_fields(["ghost", "ghost", "missing"])
    assert form.get_display_fields() == ["name", "email"]


def test_set_display_after_inserts_after_first_match():
    form = Form()
    form.add_fields(["a", "b", "c"])
    form.set_display_fields(["a", "c"])
    form.set_display_after("b", "a")
    assert form.get_display_fields() == ["a", "b", "c"]


def test_set_display_after_moves_existing_entry(form):
    form.set_display_after("name", "age")
    assert form.get_display_fields() == ["email", "age", "name"]


def test_set_display_after_missing_anchor_raises_and_keeps_list(form):
    form.set_display_fields(["name", "age"])
    with pytest.raises(FieldNotFoundError):
        form.set_display_after("email", "missing")
    assert form.get_display_fields() == ["name", "age"]


def test_get_display_fields_returns_a_copy(form):
    form.get_display_fields().append("x")
    assert form.get_display_fields() == ["name", "email", "age"]


# Sub-forms

def test_add_subform_appends_without_before_field(form):
    nested = Form()
    nested.add_field("street")
    field = form.add_subform("address", nested)
    assert field.is_subform
    assert field.subform is nested
    assert form.get_display_fields() == ["name", "email", "age", "address"]


def test_add_subform_inserts_before_field(form):
    nested = Form()
    form.add_subform("address", nested, "email")
    assert form.get_display_fields() == ["name", "address", "email", "age"]


def test_add_subform_missing_before_field_raises(form):
    with pytest.raises(FieldNotFoundError):
        form.add_subform("address", Form(), "x")
    assert not form.is_field("address")
    assert form.get_display_fields() == ["name", "email", "age"]


def test_add_subform_before_itself_keeps_display_slot(form):
    nested = Form()
    nested.add_field("street")
    field = form.add_subform("email", nested, "email")
    assert field.is_subform
    assert form.get_field("email").subform is nested
    assert form.get_display_fields() == ["name", "email", "age"]


def test_add_subform_moves_displayed_field_before_another(form):
    form.add_subform("age", Form(), "name")
    assert form.get_display_fields() == ["age", "name", "email"]


def test_add_subform_rejects_missing_form(form):
    with pytest.raises(ValueError):
        form.add_subform("address", None)
    assert not form.is_field("address")
    assert form.get_display_fields() == ["name", "email", "age"]


# Theme

def test_set_theme_propagates_into_subforms(form):
    nested = Form()
    nested.add_field("street")
    form.add_subform("address", nested)

    theme = BulmaTheme()
    form.set_theme(theme)

    assert form.get_theme() is theme
    assert form.get_field("name").theme is theme
    assert nested.get_theme() is theme
    assert nested.get_field("street").theme is theme


def test_default_theme():
    assert isinstance(Form().get_theme(), DefaultTheme)
