"""Request-scoped state a field consults while rendering.

The context carries submitted values, populated values, validation errors
and rules, and the form currently open. It is passed to fields explicitly
instead of being looked up globally.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from markupsafe import Markup
from pydantic import BaseModel, ValidationError

from hyper_forms.element import Element
from hyper_forms.errors import InvalidFormTypeError
from hyper_forms.html import add_class, render_attr, spread_attrs

__all__ = ["FORM_TYPES", "Form", "FormContext", "parse_rules", "rules_from_model"]

logger = logging.getLogger(__name__)

FORM_TYPES = ("horizontal", "vertical", "inline", "search")

# Methods browsers can submit natively; others are spoofed through _method
_NATIVE_METHODS = ("GET", "POST")


class Form(Element):
    """An HTML form and its layout type."""

    def __init__(
        self,
        type: str = "horizontal",
        action: str | None = None,
        method: str = "POST",
        attributes: Mapping | None = None,
    ):
        if type not in FORM_TYPES:
            raise InvalidFormTypeError(
                f"Unknown form type {type!r}, expected one of: {', '.join(FORM_TYPES)}"
            )
        super().__init__(attributes)
        self.type = type
        self.action = action
        self.method = method.upper()

    def open(self, framework=None) -> Markup:
        """Render the opening ``<form>`` tag.

        Methods other than GET and POST are sent as POST with a hidden
        ``_method`` input carrying the real verb.
        """
        method = self.method if self.method in _NATIVE_METHODS else "POST"
        attrs = {"method": method, "action": self.action, **self.attributes}
        if framework is not None:
            attrs = add_class(attrs, framework.form_classes(self.type))

        html = f"<form{spread_attrs(attrs)}>"
        if method != self.method:
            html += f'<input type="hidden" name="_method"{render_attr("value", self.method)}>'
        return Markup(html)

    def close(self) -> Markup:
        return Markup("</form>")

    def render(self) -> Markup:
        return self.open()


def parse_rules(rules) -> dict[str, list[str]]:
    """Normalize validation rules into ``{rule: [params]}``.

    Accepts pipe-separated strings, lists of ``rule:params`` strings, or
    mappings of rule names to parameters.

    Example:
        >>> parse_rules("required|max:20|in:a,b")
        {'required': [], 'max': ['20'], 'in': ['a', 'b']}
        >>> parse_rules({"between": (1, 5)})
        {'between': ['1', '5']}
    """
    if not rules:
        return {}

    if isinstance(rules, Mapping):
        parsed = {}
        for name, params in rules.items():
            if params is None or params is True:
                params = []
            elif isinstance(params, (str, int, float)):
                params = [params]
            parsed[name] = [str(p) for p in params]
        return parsed

    if isinstance(rules, str):
        rules = rules.split("|")

    parsed = {}
    for rule in rules:
        name, _, params = rule.partition(":")
        name = name.strip()
        if not name:
            continue
        if name in ("regex", "match"):
            parsed[name] = [params] if params else []
        else:
            parsed[name] = [p for p in params.split(",") if p] if params else []
    return parsed


def _field_key(name: str) -> str:
    # tags[] and tags submit under the same key
    return name[:-2] if name.endswith("[]") else name


def _lookup(source: Any, name: str) -> Any:
    """Read a possibly dotted name from a mapping, model or object."""
    value = source
    for part in _field_key(name).split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value


@dataclass
class FormContext:
    """Host form and request state for one render pass.

    Attributes:
        post: Values submitted with the current request.
        populated: Values to fill the form with. A mapping, a pydantic
            model or any object exposing the field names as attributes.
        errors: Validation messages keyed by field name.
        rules: Validation rules keyed by field name.
        form: The form currently open, if any.
    """

    post: Mapping = field(default_factory=dict)
    populated: Any = None
    errors: dict[str, list[str]] = field(default_factory=dict)
    rules: dict[str, Any] = field(default_factory=dict)
    form: Form | None = None

    def __post_init__(self):
        self.errors = {name: self._messages(messages) for name, messages in self.errors.items()}

    # Lookups

    def get_post(self, name: str | None) -> Any:
        if not name:
            return None
        return _lookup(self.post, name)

    def get_value(self, name: str | None) -> Any:
        if not name or self.populated is None:
            return None
        return _lookup(self.populated, name)

    def get_errors(self, name: str | None) -> str | None:
        """Return the first validation message for ``name``, if any."""
        if not name:
            return None
        messages = self.errors.get(_field_key(name))
        return messages[0] if messages else None

    def get_rules(self, name: str | None) -> dict[str, list[str]]:
        if not name:
            return {}
        return parse_rules(self.rules.get(_field_key(name)))

    @property
    def is_opened(self) -> bool:
        return self.form is not None

    @property
    def form_type(self) -> str | None:
        return self.form.type if self.form else None

    # Mutators

    def populate(self, values: Any):
        self.populated = values
        return self

    def with_errors(self, errors: Mapping[str, Any]):
        for name, messages in errors.items():
            self.errors[name] = self._messages(messages)
        return self

    def with_validation_error(self, error: ValidationError):
        """Collect messages from a pydantic ``ValidationError``.

        Nested locations are joined with dots (``address.city``); errors
        without a location are stored under ``__all__``.
        """
        for detail in error.errors():
            name = ".".join(str(part) for part in detail["loc"]) or "__all__"
            self.errors.setdefault(name, []).append(detail["msg"])
        logger.debug("Collected %d validation errors", error.error_count())
        return self

    def with_rules(self, rules: Mapping[str, Any] | type[BaseModel]):
        """Register rules by field name, or derive them from a pydantic model."""
        if isinstance(rules, type) and issubclass(rules, BaseModel):
            rules = rules_from_model(rules)
        self.rules.update(rules)
        return self

    @staticmethod
    def _messages(messages) -> list[str]:
        if isinstance(messages, str):
            return [messages]
        if isinstance(messages, Iterable):
            return [str(m) for m in messages]
        return [str(messages)]


def rules_from_model(model: type[BaseModel]) -> dict[str, dict[str, list[str]]]:
    """Derive validation rules from a pydantic model's field constraints.

    Required fields get ``required`` and ``EmailStr`` fields get ``email``.
    ``max_length``/``le`` become ``max``, ``min_length``/``ge`` become ``min``
    and ``pattern`` becomes ``regex``.
    """
    rules = {}
    for name, info in model.model_fields.items():
        field_rules: dict[str, list[str]] = {}
        if info.is_required():
            field_rules["required"] = []
        if getattr(info.annotation, "__name__", None) == "EmailStr":
            field_rules["email"] = []
        for constraint in info.metadata:
            for attr, rule in (
                ("max_length", "max"),
                ("le", "max"),
                ("min_length", "min"),
                ("ge", "min"),
                ("pattern", "regex"),
            ):
                value = getattr(constraint, attr, None)
                if value is not None:
                    field_rules[rule] = [str(value)]
        if field_rules:
            rules[name] = field_rules
    return rules
