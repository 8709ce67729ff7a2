"""The markup wrapped around a field: container, label, help and add-ons."""

import logging
from collections.abc import Mapping

from markupsafe import Markup, escape

from hyper_forms.config import FormerConfig
from hyper_forms.element import Label
from hyper_forms.errors import UnsupportedOperationError
from hyper_forms.html import add_class, render_class, spread_attrs, tag
from hyper_forms.translation import Translator

__all__ = ["Group"]

logger = logging.getLogger(__name__)


def _markup(item) -> Markup:
    if hasattr(item, "__html__"):
        return Markup(item.__html__())
    return Markup(str(item))


def _add_on(item, html: Markup) -> Markup:
    """Plain strings are text, anything with ``__html__`` is markup."""
    if hasattr(item, "__html__"):
        return html
    return escape(str(item))


def _is_button(item, html: Markup, button_class: str | None) -> bool:
    """Buttons sit next to the field as they are, without an add-on span."""
    if html.lstrip().startswith("<button"):
        return True
    get_attribute = getattr(item, "get_attribute", None)
    if not button_class or get_attribute is None:
        return False
    return button_class in (get_attribute("class") or "").split()


class Group:
    """Builds the container around a single field.

    A group is configured while the template is assembled (label, state,
    help, prepended and appended add-ons) and consumed by ``wrap_field``.
    """

    def __init__(
        self,
        framework,
        label: Label | str | None = None,
        attributes: Mapping | None = None,
        *,
        config: FormerConfig | None = None,
        translator: Translator | None = None,
    ):
        self.framework = framework
        self.config = config or FormerConfig()
        self.translator = translator or Translator()

        self.attributes = framework.add_group_classes(attributes)
        self._state: str | None = None
        self._raw = False
        self.label = Label()
        self._help: dict[str, Markup] = {}
        self._prepend: list[Markup] = []
        self._append: list[Markup] = []

        self.set_label(label)

    ############################## FIELD METHODS ##############################

    def set_label(self, label: Label | str | None):
        if not isinstance(label, Label):
            label = Label(label)
        self.label = label
        return self

    def get_label(self) -> Label:
        return self.label

    def state(self, state: str):
        """Set the validation state, one of the framework's known states."""
        filtered = self.framework.filter_state(state)
        if filtered is None:
            logger.warning("Ignoring state %r unknown to %s", state, self.framework.name)
            return self

        self._state = filtered
        return self

    def get_state(self) -> str | None:
        return self._state

    def raw(self):
        """Disable the group: the field renders bare."""
        self._raw = True
        return self

    def is_raw(self) -> bool:
        return self._raw

    def help(self, help: str, attributes: Mapping | None = None):
        """Alias for inline_help."""
        return self.inline_help(help, attributes)

    def inline_help(self, help: str, attributes: Mapping | None = None):
        help = self.translator(help)
        if not help:
            return self

        self._help["inline"] = self.framework.create_help(help, attributes)
        return self

    def block_help(self, help: str, attributes: Mapping | None = None):
        """Add a help block under the field.

        Raises:
            UnsupportedOperationError: Outside the Bootstrap framework.
        """
        if self.framework.isnt("TwitterBootstrap"):
            raise UnsupportedOperationError(
                "This method is only available on the Bootstrap framework",
                framework=self.framework.name,
                supported_by=("TwitterBootstrap",),
            )

        help = self.translator(help)
        if not help:
            return self

        self._help["block"] = self.framework.create_block_help(help, attributes)
        return self

    def prepend(self, *items):
        self.place_around(items, "prepend")
        return self

    def append(self, *items):
        self.place_around(items, "append")
        return self

    def prepend_icon(self, icon: str, attributes: Mapping | None = None):
        return self.prepend(self.framework.create_icon(icon, attributes))

    def append_icon(self, icon: str, attributes: Mapping | None = None):
        return self.append(self.framework.create_icon(icon, attributes))

    ################################# RENDER ##################################

    def wrap_field(self, field, context=None) -> Markup:
        """Wrap a rendered field with the group's markup.

        Args:
            field: The Field to render inside the group.
            context: Form state for this render, defaults to the field's own.
        """
        if context is None:
            context = field.context

        html = self.open(field, context)
        html += self.get_label_of(field)
        inner = self.prepend_append(field)
        inner += self.get_help(field, context)
        html += self.framework.wrap_field(inner)
        html += self.close()

        return html

    def open(self, field=None, context=None) -> Markup:
        name = field.get_name() if field is not None else None
        if context is not None and context.get_errors(name):
            logger.debug("Field %r has errors, forcing error state", name)
            self.state("error")

        attributes = add_class(self.attributes, self._state)
        if field is not None and field.is_required():
            attributes = add_class(attributes, self.config.required_class)

        return Markup(f"<div{spread_attrs(attributes)}>")

    def get_label_of(self, field) -> Markup:
        return self.framework.create_label_of(field, self.label)

    def get_help(self, field=None, context=None) -> Markup:
        """Inline help, replaced by the field's error message if any, then block help."""
        inline = self._help.get("inline")
        block = self._help.get("block")

        errors = context.get_errors(field.get_name()) if context and field else None
        if errors:
            inline = self.framework.create_help(errors)

        return Markup("").join(part for part in (inline, block) if part)

    def prepend_append(self, field) -> Markup:
        """Render the field between its prepended and appended add-ons."""
        if not self._prepend and not self._append:
            return field.render()

        container = render_class(
            self._prepend and self.framework.prepend_class,
            self._append and self.framework.append_class,
        )
        inner = Markup("").join([*self._prepend, field.render(), *self._append])
        return tag("div", inner, {"class": container})

    def close(self) -> Markup:
        return Markup("</div>")

    def place_around(self, items, place: str):
        """Store add-ons on one side of the field.

        Buttons are kept as they are; anything else is wrapped in the
        framework's add-on span. Plain strings that are not button markup
        are escaped.
        """
        target = self._prepend if place == "prepend" else self._append

        for item in items:
            html = _markup(item)
            if not _is_button(item, html, self.framework.button_class):
                html = tag("span", _add_on(item, html), {"class": self.framework.addon_class})
            target.append(html)

    def __repr__(self) -> str:
        return f"Group(label={self.label.text!r}, state={self._state!r}, raw={self._raw})"
