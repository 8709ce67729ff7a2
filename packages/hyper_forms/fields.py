"""Concrete field types."""

from collections.abc import Iterable, Mapping

from markupsafe import Markup

from hyper_forms.field import Field
from hyper_forms.html import add_class, render_attr, spread_attrs, tag

__all__ = ["Input", "Textarea", "Select", "Checkable", "Button"]


def _choices(options) -> list[tuple[str, str]]:
    """Normalize options given as a mapping, pairs, or bare values."""
    if isinstance(options, Mapping):
        return [(str(k), v) for k, v in options.items()]

    choices = []
    for option in options or ():
        if isinstance(option, (tuple, list)) and len(option) == 2:
            choices.append((str(option[0]), option[1]))
        else:
            choices.append((str(option), option))
    return choices


def _selected(value) -> set[str]:
    if value is None:
        return set()
    if isinstance(value, (str, int, float)):
        return {str(value)}
    if isinstance(value, Iterable):
        return {str(v) for v in value}
    return {str(value)}


class Input(Field):
    """An ``<input>`` of any type: text, password, email, hidden..."""

    def render(self) -> Markup:
        attrs = {
            "type": self._type,
            "name": self._name,
            "id": self.get_id(),
            "value": self._value,
            **self.attributes,
        }
        return Markup(f"<input{spread_attrs(attrs)}>")


class Textarea(Field):
    def __init__(self, name=None, label=None, value=None, attributes=None, **kwargs):
        super().__init__("textarea", name, label, value, attributes, **kwargs)

    def render(self) -> Markup:
        attrs = {"name": self._name, "id": self.get_id(), **self.attributes}
        return tag("textarea", "" if self._value is None else self._value, attrs)


class Select(Field):
    """A ``<select>`` whose selected option follows the field's value."""

    def __init__(self, name=None, label=None, options=None, value=None, attributes=None, **kwargs):
        self._options: list[tuple[str, str]] = _choices(options)
        self._placeholder = None
        super().__init__("select", name, label, value, attributes, **kwargs)

    def options(self, options, selected=None):
        self._options = _choices(options)
        if selected is not None:
            self.value(selected)
        return self

    def placeholder(self, text: str):
        """Add a first, unselectable option."""
        self._placeholder = self.translator(text)
        return self

    def render(self) -> Markup:
        selected = _selected(self._value)
        name = self._name
        if self.attributes.get("multiple") and name and not name.endswith("[]"):
            name += "[]"

        parts = []
        if self._placeholder:
            parts.append(
                tag("option", self._placeholder, {"value": "", "disabled": True, "selected": not selected})
            )
        for value, text in self._options:
            parts.append(tag("option", text, {"value": value, "selected": value in selected}))

        attrs = {"name": name, "id": self.get_id(), **self.attributes}
        return tag("select", Markup("").join(parts), attrs)


class Checkable(Field):
    """A set of checkboxes or radio buttons sharing one name."""

    def __init__(self, type, name=None, label=None, options=None, value=None, attributes=None, **kwargs):
        self._options: list[tuple[str, str]] = _choices(options)
        self._inline = False
        super().__init__(type, name, label, value, attributes, **kwargs)

    def checkables(self, options):
        self._options = _choices(options)
        return self

    def inline(self):
        """Lay the choices out on a single line."""
        self._inline = True
        return self

    def render(self) -> Markup:
        input_type = "checkbox" if self._type == "checkboxes" else "radio"
        name = self._name or ""
        if input_type == "checkbox" and len(self._options) > 1 and not name.endswith("[]"):
            name += "[]"

        base_id = self.get_id()
        label_attrs = add_class(
            None,
            self.framework.checkable_classes.get(self._type),
            self._inline and "inline",
        )
        checked = _selected(self._value)
        # Each input has its own id; only the first radio carries required
        shared = {key: value for key, value in self.attributes.items() if key not in ("id", "required")}
        required = input_type == "radio" and self.is_required()

        parts = []
        for index, (value, text) in enumerate(self._options):
            input_id = f"{base_id}_{index}" if base_id else None
            input_attrs = {
                "type": input_type,
                "name": name,
                "id": input_id,
                "value": value,
                "checked": value in checked,
                **shared,
                "required": required and index == 0,
            }
            box = Markup(f"<input{spread_attrs(input_attrs)}>")
            parts.append(
                Markup("<label%s%s>%s %s</label>")
                % (Markup(render_attr("for", input_id)), Markup(spread_attrs(label_attrs)), box, text)
            )
        return Markup("").join(parts)


class Button(Field):
    """A ``<button>``; its value is the text shown on it."""

    def __init__(self, type="submit", value=None, attributes=None, **kwargs):
        super().__init__(type, None, None, value, attributes, **kwargs)
        self.add_class(self.framework.button_class)

    def render(self) -> Markup:
        attrs = {"type": self._type, "name": self._name, **self.attributes}
        return tag("button", self.translator(self._value) or "", attrs)
