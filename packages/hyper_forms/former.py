"""Entry point binding a framework, configuration and form state together.

Usage:
    former = Former(framework="TwitterBootstrap")
    former.populate(user).with_rules({"email": "required|email"})

    html = former.horizontal_open("/users")
    html += former.text("email").help("We never share it")
    html += former.submit("Save")
    html += former.close()
"""

import logging
from collections.abc import Mapping
from functools import partialmethod

from markupsafe import Markup
from pydantic import ValidationError

from hyper_forms.config import FormerConfig
from hyper_forms.context import Form, FormContext
from hyper_forms.errors import FieldNotFoundError
from hyper_forms.field import Field
from hyper_forms.fields import Button, Checkable, Input, Select, Textarea
from hyper_forms.frameworks import Framework, get_framework
from hyper_forms.translation import Translator

__all__ = ["Former", "INPUT_TYPES"]

logger = logging.getLogger(__name__)

INPUT_TYPES = frozenset({
    "text", "password", "email", "hidden", "number", "range", "url", "tel",
    "search", "color", "date", "datetime-local", "month", "week", "time", "file",
})

BUTTON_TYPES = frozenset({"submit", "reset", "button"})


class Former:
    """Builds forms and fields sharing one framework, config and context."""

    def __init__(
        self,
        framework: Framework | str | None = None,
        *,
        config: FormerConfig | None = None,
        translator: Translator | None = None,
        context: FormContext | None = None,
    ):
        self.config = config or FormerConfig()
        self.translator = translator or Translator(prefix=self.config.translate_from)
        self.context = context if context is not None else FormContext()
        self.framework = get_framework(framework or self.config.framework)

    def use(self, framework: Framework | str):
        """Switch framework for the fields created from now on."""
        self.framework = get_framework(framework)
        return self

    ################################# STATE ##################################

    def populate(self, values):
        self.context.populate(values)
        return self

    def with_errors(self, errors: Mapping | ValidationError):
        if isinstance(errors, ValidationError):
            self.context.with_validation_error(errors)
        else:
            self.context.with_errors(errors)
        return self

    def with_rules(self, rules):
        self.context.with_rules(rules)
        return self

    ################################## FORMS #################################

    def open(
        self,
        action: str | None = None,
        method: str = "POST",
        attributes: Mapping | None = None,
        type: str = "horizontal",
    ) -> Markup:
        """Open a form; fields created until ``close`` are wrapped in groups."""
        if self.context.form is not None:
            logger.debug("Opening a form while a %s form is open", self.context.form_type)
        form = Form(type, action, method, attributes)
        self.context.form = form
        return form.open(self.framework)

    horizontal_open = partialmethod(open, type="horizontal")
    vertical_open = partialmethod(open, type="vertical")
    inline_open = partialmethod(open, type="inline")
    search_open = partialmethod(open, type="search")

    def close(self) -> Markup:
        form = self.context.form
        self.context.form = None
        if form is None:
            return Markup("</form>")
        return form.close()

    ################################# FIELDS #################################

    def field(
        self,
        type: str,
        name: str | None = None,
        label: str | None = None,
        value=None,
        attributes: Mapping | None = None,
        options=None,
    ) -> Field:
        """Create a field of ``type`` bound to this instance's dependencies.

        Raises:
            FieldNotFoundError: If ``type`` is not a known field type.
        """
        deps = {
            "framework": self.framework,
            "context": self.context,
            "config": self.config,
            "translator": self.translator,
        }

        if type in INPUT_TYPES:
            return Input(type, name, label, value, attributes, **deps)
        if type == "textarea":
            return Textarea(name, label, value, attributes, **deps)
        if type == "select":
            return Select(name, label, options, value, attributes, **deps)
        if type in ("checkboxes", "radios"):
            return Checkable(type, name, label, options, value, attributes, **deps)
        if type in BUTTON_TYPES:
            return Button(type, value if value is not None else label, attributes, **deps)

        raise FieldNotFoundError(f"No field of type {type!r}", field=name)

    def _input(self, name=None, label=None, value=None, attributes=None, *, type):
        return self.field(type, name, label, value, attributes)

    text = partialmethod(_input, type="text")
    password = partialmethod(_input, type="password")
    email = partialmethod(_input, type="email")
    hidden = partialmethod(_input, type="hidden")
    number = partialmethod(_input, type="number")
    url = partialmethod(_input, type="url")
    date = partialmethod(_input, type="date")
    file = partialmethod(_input, type="file")
    textarea = partialmethod(_input, type="textarea")

    def select(self, name=None, label=None, options=None, selected=None, attributes=None) -> Select:
        return self.field("select", name, label, selected, attributes, options=options)

    def checkboxes(self, name=None, label=None, options=None, checked=None, attributes=None) -> Checkable:
        return self.field("checkboxes", name, label, checked, attributes, options=options)

    def radios(self, name=None, label=None, options=None, checked=None, attributes=None) -> Checkable:
        return self.field("radios", name, label, checked, attributes, options=options)

    def _button(self, value=None, attributes=None, *, type):
        return self.field(type, value=value, attributes=attributes)

    submit = partialmethod(_button, type="submit")
    reset = partialmethod(_button, type="reset")
    button = partialmethod(_button, type="button")
