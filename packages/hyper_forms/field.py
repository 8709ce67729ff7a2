"""Field base class.

Holds what every form field shares (type, name, value, label, attributes)
and decides how it is printed: bare, wrapped in its group, or after a
plain label.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping

from markupsafe import Markup

from hyper_forms.config import FormerConfig
from hyper_forms.context import FormContext
from hyper_forms.element import Element, Label
from hyper_forms.errors import UnsupportedOperationError
from hyper_forms.frameworks import Framework, get_framework
from hyper_forms.group import Group
from hyper_forms.live_validation import LiveValidation
from hyper_forms.translation import Translator, slugify

__all__ = ["Field", "UNWRAPPABLE_TYPES", "CHECKABLE_TYPES", "UNREPOPULATED_TYPES"]

logger = logging.getLogger(__name__)

# Rendered without label or group
UNWRAPPABLE_TYPES = ("hidden", "submit", "button", "reset")

CHECKABLE_TYPES = ("checkboxes", "radios")

# Never filled back from submitted or populated data
UNREPOPULATED_TYPES = ("password",)


class Field(Element, ABC):
    """A form field and the group around it.

    Group settings (help, state, add-ons) are set through the field and
    passed on to its group. With the Nude framework there is no group and
    those calls are ignored.

    Subclasses implement ``render`` for their own markup.
    """

    def __init__(
        self,
        type: str,
        name: str | None = None,
        label: str | None = None,
        value=None,
        attributes: Mapping | None = None,
        *,
        framework: Framework | str | None = None,
        context: FormContext | None = None,
        config: FormerConfig | None = None,
        translator: Translator | None = None,
    ):
        super().__init__(attributes)
        self.config = config or FormerConfig()
        self.framework = get_framework(framework or self.config.framework)
        self.context = context if context is not None else FormContext()
        self.translator = translator or Translator(prefix=self.config.translate_from)

        self._type = type
        self._name = name
        self._value = value
        self._label = Label()
        self.group: Group | None = None

        if self.config.automatic_label:
            self._name, label = self._ponder(name, label)
        self.label(label)

        if type not in UNREPOPULATED_TYPES:
            self._value = self.repopulate()

        if self.config.live_validation:
            LiveValidation(self).apply(self.get_rules())

        if self.framework.isnt("Nude"):
            self.group = Group(
                self.framework,
                self._label,
                config=self.config,
                translator=self.translator,
            )

        logger.debug("Created %s field %r", type, self._name)

    ################################ RENDERING ################################

    @abstractmethod
    def render(self) -> Markup:
        """Render the field's own markup, without label or group."""

    def to_html(self, context: FormContext | None = None) -> Markup:
        """Render the field with whatever should surround it.

        Hidden fields, buttons and fields of inline forms print bare. Inside
        an open form the group wraps the field, otherwise a plain label
        precedes it.
        """
        if context is None:
            context = self.context

        if self.is_unwrappable(context):
            return self.render()

        if self.framework.isnt("Nude") and context.is_opened:
            if self.group.is_raw():
                return self.render()
            return self.group.wrap_field(self, context)

        return self.framework.create_label_of(self, self.get_label()) + self.render()

    def __html__(self) -> str:
        return self.to_html()

    ################################# QUERIES #################################

    def is_required(self) -> bool:
        return self.attributes.get("required") not in (None, False)

    def is_unwrappable(self, context: FormContext | None = None) -> bool:
        if context is None:
            context = self.context
        return context.form_type == "inline" or self._type in UNWRAPPABLE_TYPES

    def is_checkable(self) -> bool:
        return self._type in CHECKABLE_TYPES

    def get_rules(self) -> dict[str, list[str]]:
        return self.context.get_rules(self._name)

    def get_type(self) -> str:
        return self._type

    def set_type(self, type: str):
        self._type = type
        return self

    def get_name(self) -> str | None:
        return self._name

    def get_value(self):
        return self._value

    def get_id(self) -> str | None:
        id = self.attributes.get("id")
        if id:
            return id
        if self._name and self._name.endswith("[]"):
            return self._name[:-2]
        return self._name

    def get_label(self) -> Label:
        if self.group is not None:
            return self.group.get_label()
        return self._label

    ########################### SETTERS AND GETTERS ###########################

    def label(self, text: str | None, attributes: Mapping | None = None):
        """Set the label text (translated) on the group, or on the field without one."""
        label = Label(self.translator(text), dict(attributes or {}))

        if self.group is not None:
            self.group.set_label(label)
        else:
            self._label = label
        return self

    def value(self, value):
        """Set the value unless a submitted, populated or current value exists."""
        if self._type in UNREPOPULATED_TYPES:
            already = self._value
        else:
            already = self.repopulate()

        if not already:
            self._value = value
        return self

    def force_value(self, value):
        """Set the value no matter what."""
        self._value = value
        return self

    def name(self, name: str):
        """Rename the field and derive its label from the new name."""
        self._name = name
        self.label(name)
        return self

    ############################### GROUP METHODS ##############################

    def help(self, help: str, attributes: Mapping | None = None):
        return self._on_group("help", help, attributes)

    def inline_help(self, help: str, attributes: Mapping | None = None):
        return self._on_group("inline_help", help, attributes)

    def block_help(self, help: str, attributes: Mapping | None = None):
        if self.group is None:
            raise UnsupportedOperationError(
                "This method is only available on the Bootstrap framework",
                field=self._name,
                framework=self.framework.name,
                supported_by=("TwitterBootstrap",),
            )
        return self._on_group("block_help", help, attributes)

    def state(self, state: str):
        return self._on_group("state", state)

    def raw(self):
        return self._on_group("raw")

    def prepend(self, *items):
        return self._on_group("prepend", *items)

    def append(self, *items):
        return self._on_group("append", *items)

    def prepend_icon(self, icon: str, attributes: Mapping | None = None):
        return self._on_group("prepend_icon", icon, attributes)

    def append_icon(self, icon: str, attributes: Mapping | None = None):
        return self._on_group("append_icon", icon, attributes)

    ################################# HELPERS #################################

    def repopulate(self, fallback=None):
        """Resolve the value: submitted, then populated, then ``fallback``.

        ``fallback`` defaults to the field's current value.
        """
        if fallback is None:
            fallback = self._value

        post = self.context.get_post(self._name)
        if post is not None:
            logger.debug("Repopulating %r from submitted data", self._name)
            return post

        populated = self.context.get_value(self._name)
        if populated is not None:
            logger.debug("Repopulating %r from populated values", self._name)
            return populated

        return fallback

    def _ponder(self, name: str | None, label: str | None) -> tuple[str | None, str | None]:
        """Fill in a missing name from the label, or a missing label from the name."""
        if label and name is None:
            name = slugify(label)
        elif label is None and name:
            label = name
        return name, label

    def _on_group(self, method: str, *args):
        if self.group is None:
            logger.debug(
                "Ignoring %s() on %r: %s renders no group",
                method,
                self._name,
                self.framework.name,
            )
        else:
            getattr(self.group, method)(*args)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self._type!r}, name={self._name!r}, value={self._value!r})"
