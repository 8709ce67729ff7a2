"""Framework adapters.

A framework decides which classes and wrappers surround a field: Bootstrap
control groups, Foundation rows, or no markup at all.
"""

import logging
from collections.abc import Mapping

from markupsafe import Markup, escape

from hyper_forms.element import Label
from hyper_forms.errors import UnknownFrameworkError, UnsupportedOperationError
from hyper_forms.html import add_class, merge_attrs, spread_attrs, tag

__all__ = [
    "Framework",
    "TwitterBootstrap",
    "ZurbFoundation",
    "Nude",
    "FRAMEWORKS",
    "get_framework",
]

logger = logging.getLogger(__name__)


class Framework:
    """Markup conventions of a CSS framework."""

    name: str = ""
    states: frozenset[str] = frozenset()

    group_class: str | None = None
    label_class: str | None = None
    help_tag: str = "span"
    help_class: str | None = "help"
    icon_prefix: str = "icon-"

    # Decorations placed around the field
    prepend_class: str = "input-prepend"
    append_class: str = "input-append"
    addon_class: str = "add-on"
    button_class: str | None = None

    form_type_classes: Mapping[str, str] = {}
    checkable_classes: Mapping[str, str] = {}

    def isnt(self, name: str) -> bool:
        return self.name != name

    def filter_state(self, state: str | None) -> str | None:
        """Return ``state`` if the framework knows it, else None."""
        if state in self.states:
            return state
        return None

    def add_group_classes(self, attributes: Mapping | None) -> dict:
        return add_class(attributes, self.group_class)

    def add_label_classes(self, attributes: Mapping | None) -> dict:
        return add_class(attributes, self.label_class)

    def form_classes(self, form_type: str | None) -> str | None:
        return self.form_type_classes.get(form_type)

    def create_help(self, text, attributes: Mapping | None = None) -> Markup:
        return tag(self.help_tag, text, add_class(attributes, self.help_class))

    def create_block_help(self, text, attributes: Mapping | None = None) -> Markup:
        raise UnsupportedOperationError(
            "Block help is only available on the Bootstrap framework",
            framework=self.name,
            supported_by=("TwitterBootstrap",),
        )

    def create_icon(self, icon: str, attributes: Mapping | None = None) -> Markup:
        attrs = merge_attrs({"class": f"{self.icon_prefix}{icon}"}, attributes)
        return Markup(f"<i{spread_attrs(attrs)}></i>")

    def create_label_of(self, field, label: Label | None = None) -> Markup:
        """Render the ``<label>`` for a field.

        Checkable fields get no ``for`` attribute since they render several
        inputs.
        """
        if label is None:
            label = field.get_label()
        if not label:
            return Markup("")

        attrs = self.add_label_classes(label.attributes)
        if not field.is_checkable() and "for" not in attrs:
            attrs = {"for": field.get_id(), **attrs}
        return tag("label", label.text, attrs)

    def wrap_field(self, html) -> Markup:
        return Markup(escape(html))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class TwitterBootstrap(Framework):
    name = "TwitterBootstrap"
    states = frozenset({"success", "warning", "error", "info"})

    group_class = "control-group"
    label_class = "control-label"
    help_class = "help-inline"
    button_class = "btn"

    checkable_classes = {"checkboxes": "checkbox", "radios": "radio"}

    form_type_classes = {
        "horizontal": "form-horizontal",
        "vertical": "form-vertical",
        "inline": "form-inline",
        "search": "form-search",
    }

    def create_block_help(self, text, attributes: Mapping | None = None) -> Markup:
        return tag("p", text, add_class(attributes, "help-block"))

    def wrap_field(self, html) -> Markup:
        return tag("div", Markup(escape(html)), {"class": "controls"})


class ZurbFoundation(Framework):
    name = "ZurbFoundation"
    states = frozenset({"error"})

    help_tag = "small"
    help_class = None
    icon_prefix = "foundicon-"
    button_class = "button"


class Nude(Framework):
    """No markup: fields render with a plain label and no group."""

    name = "Nude"


FRAMEWORKS: dict[str, type[Framework]] = {
    framework.name: framework for framework in (TwitterBootstrap, ZurbFoundation, Nude)
}


def get_framework(name: str | Framework) -> Framework:
    """Return a framework adapter by name.

    Raises:
        UnknownFrameworkError: If no adapter is registered under ``name``.
    """
    if isinstance(name, Framework):
        return name
    try:
        framework = FRAMEWORKS[name]
    except KeyError:
        raise UnknownFrameworkError(name, tuple(FRAMEWORKS)) from None
    logger.debug("Using framework %s", name)
    return framework()
