"""Test behaviour shared by all fields."""

import pytest
from pydantic import BaseModel

from hyper_forms import (
    Element,
    Form,
    FormContext,
    FormerConfig,
    Input,
    Label,
    Translator,
    UnsupportedOperationError,
)


class User(BaseModel):
    email: str
    name: str = ""


class TestRepopulation:
    """Test where a field's value comes from."""

    def test_submitted_value_wins(self):
        """Submitted data beats populated data and the given value."""
        context = FormContext(post={"email": "posted@example.com"}, populated={"email": "model@example.com"})
        field = Input("text", "email", value="default@example.com", context=context)

        assert field.get_value() == "posted@example.com"

    def test_populated_value_beats_default(self):
        """Populated data beats the given value."""
        context = FormContext(populated=User(email="model@example.com"))
        field = Input("text", "email", value="default@example.com", context=context)

        assert field.get_value() == "model@example.com"

    def test_default_value_used_last(self):
        """Without request or populated data the given value stays."""
        field = Input("text", "email", value="default@example.com")

        assert field.get_value() == "default@example.com"

    def test_empty_submitted_value_still_counts(self):
        """An empty submission clears the field rather than falling back."""
        context = FormContext(post={"email": ""}, populated={"email": "model@example.com"})
        field = Input("text", "email", context=context)

        assert field.get_value() == ""

    @pytest.mark.parametrize("post, populated", [({"secret": "posted"}, None), ({}, {"secret": "model"})])
    def test_password_never_repopulates(self, post, populated):
        """Passwords keep exactly the value they were given."""
        context = FormContext(post=post, populated=populated)
        field = Input("password", "secret", value="given", context=context)

        assert field.get_value() == "given"

    def test_repopulate_fallback(self):
        """An explicit fallback is used when nothing else is known."""
        field = Input("text", "email")

        assert field.repopulate("fallback") == "fallback"


class TestValueSetters:
    """Test soft and hard value setting."""

    def test_value_fills_empty_field(self):
        """value() sets the value when nothing is resolved yet."""
        field = Input("text", "email").value("new@example.com")

        assert field.get_value() == "new@example.com"

    def test_value_does_not_override_submitted(self):
        """value() never overrides a submitted value."""
        context = FormContext(post={"email": "posted@example.com"})
        field = Input("text", "email", context=context).value("new@example.com")

        assert field.get_value() == "posted@example.com"

    def test_value_does_not_override_current(self):
        """value() never overrides a non-empty current value."""
        field = Input("text", "email", value="first@example.com").value("second@example.com")

        assert field.get_value() == "first@example.com"

    def test_force_value_always_wins(self):
        """force_value() bypasses every other source."""
        context = FormContext(post={"email": "posted@example.com"})
        field = Input("text", "email", context=context).force_value("forced@example.com")

        assert field.get_value() == "forced@example.com"


class TestLabels:
    """Test label and name derivation."""

    def test_label_from_name(self):
        """Without a label the name is used."""
        field = Input("text", "email")

        assert field.get_label() == Label("email")

    def test_name_from_label(self):
        """Without a name the label is slugified."""
        field = Input("text", None, "Your e-mail")

        assert field.get_name() == "your-e-mail"
        assert field.get_label().text == "Your e-mail"

    def test_no_derivation_when_disabled(self, manual_config):
        """automatic_label=False leaves missing values missing."""
        field = Input("text", None, "Your e-mail", config=manual_config)

        assert field.get_name() is None

    def test_label_is_translated(self):
        """Labels go through the translator, prefixed keys first."""
        translator = Translator({"validation.attributes.email": "E-mail address"}, prefix="validation.attributes")
        field = Input("text", "email", translator=translator)

        assert field.get_label().text == "E-mail address"

    def test_label_goes_to_group(self):
        """With a group the label lives on the group."""
        field = Input("text", "email").label("Address", {"class": "big"})

        assert field.group.get_label() == Label("Address", {"class": "big"})

    def test_label_stays_on_field_without_group(self):
        """The Nude framework keeps the label on the field."""
        field = Input("text", "email", framework="Nude").label("Address")

        assert field.group is None
        assert field.get_label() == Label("Address")

    def test_rename_relabels(self):
        """Renaming derives the label from the new name."""
        field = Input("text", "email").name("phone")

        assert field.get_name() == "phone"
        assert field.get_label().text == "phone"


class TestQueries:
    """Test field predicates."""

    def test_required(self):
        assert Input("text", "email", attributes={"required": True}).is_required()
        assert not Input("text", "email").is_required()
        assert not Input("text", "email", attributes={"required": False}).is_required()

    @pytest.mark.parametrize("type", ["hidden", "submit", "button", "reset"])
    def test_unwrappable_types(self, type):
        """Hidden fields and buttons are never wrapped."""
        assert Input(type, "field").is_unwrappable()

    def test_inline_form_makes_any_field_unwrappable(self):
        """Every field of an inline form prints bare."""
        context = FormContext(form=Form("inline"))

        assert Input("text", "email", context=context).is_unwrappable()

    def test_group_settings_do_not_affect_unwrappable(self):
        """Raw or not, a text field in a horizontal form is wrappable."""
        context = FormContext(form=Form("horizontal"))

        assert not Input("text", "email", context=context).raw().is_unwrappable()

    def test_checkable(self):
        assert Input("checkboxes", "tags").is_checkable()
        assert Input("radios", "size").is_checkable()
        assert not Input("text", "email").is_checkable()

    def test_type_can_change(self):
        field = Input("text", "email").set_type("email")

        assert field.get_type() == "email"


class TestRendering:
    """Test the three ways a field prints."""

    def test_unwrappable_prints_bare(self, opened):
        """Hidden fields print only their input."""
        field = Input("hidden", "token", value="abc", context=opened)

        assert str(field) == '<input type="hidden" name="token" id="token" value="abc">'

    def test_grouped_in_open_form(self, opened):
        """Inside an open form the group wraps the field."""
        field = Input("text", "email", context=opened)

        assert str(field).startswith('<div class="control-group"><label for="email"')

    def test_raw_group_prints_bare(self, opened):
        """A raw group prints the field without any group markup."""
        field = Input("text", "email", context=opened).help("ignored").raw()

        assert str(field) == '<input type="text" name="email" id="email">'

    def test_classic_without_open_form(self, context):
        """Outside a form a plain label precedes the field."""
        field = Input("text", "email", context=context)

        assert str(field) == (
            '<label for="email" class="control-label">email</label>'
            '<input type="text" name="email" id="email">'
        )

    def test_classic_with_nude_framework(self, opened):
        """The Nude framework never wraps."""
        field = Input("text", "email", context=opened, framework="Nude")

        assert str(field) == '<label for="email">email</label><input type="text" name="email" id="email">'

    def test_render_context_can_be_passed(self, context, opened):
        """An explicit context overrides the field's own."""
        field = Input("text", "email", context=context)

        assert field.to_html(opened).startswith('<div class="control-group">')
        assert not str(field).startswith("<div")

    def test_markup_protocol(self, opened):
        """Fields can be concatenated with Markup and dropped into templates."""
        field = Input("text", "email", context=opened)

        assert field.__html__() == field.to_html()

    def test_rendering_twice_is_identical(self, opened):
        """Rendering without changes in between yields the same markup."""
        opened.with_errors({"email": "Invalid"})
        field = Input("text", "email", attributes={"required": True}, context=opened).prepend("@").help("Hint")

        assert str(field) == str(field)

    def test_value_is_escaped(self, opened):
        field = Input("text", "q", value='"><script>', context=opened).raw()

        assert str(field) == '<input type="text" name="q" id="q" value="&#34;&gt;&lt;script&gt;">'


class TestGroupForwarding:
    """Test group settings made through the field."""

    def test_calls_are_chainable(self):
        field = Input("text", "email")

        assert field.help("Hint").state("success").prepend("@") is field
        assert field.group.get_state() == "success"

    def test_nude_ignores_group_calls(self):
        """Without a group, group settings are no-ops."""
        field = Input("text", "email", framework="Nude")

        assert field.help("Hint").prepend("@").state("error") is field

    def test_nude_block_help_raises(self):
        """Block help is unsupported without Bootstrap."""
        field = Input("text", "email", framework="Nude")

        with pytest.raises(UnsupportedOperationError):
            field.block_help("Hint")


class TestLiveValidationWiring:
    """Test rules turning into attributes at construction."""

    def test_rules_applied(self):
        context = FormContext(rules={"email": "required|max:40"})
        field = Input("text", "email", context=context)

        assert field.get_attribute("required") is True
        assert field.get_attribute("maxlength") == "40"

    def test_rules_skipped_when_disabled(self):
        context = FormContext(rules={"email": "required"})
        field = Input("text", "email", context=context, config=FormerConfig(live_validation=False))

        assert field.get_attribute("required") is None


class TestElement:
    """Test the attribute bag shared by fields and forms."""

    def test_render_is_abstract(self):
        """An element that cannot render cannot be built."""

        class Bare(Element):
            pass

        with pytest.raises(TypeError):
            Bare()

    def test_setters_chain(self):
        class Span(Element):
            def render(self):
                return "<span></span>"

        span = Span({"class": "a"}).set_attribute("title", "T").add_class("b")

        assert span.attributes == {"class": "a b", "title": "T"}
        assert str(span) == "<span></span>"
