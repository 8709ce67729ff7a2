"""Base building blocks shared by fields: attribute bag and label value."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field

from markupsafe import Markup

from hyper_forms.html import add_class, merge_attrs


@dataclass(frozen=True)
class Label:
    """A label's text and its HTML attributes."""

    text: str | None = None
    attributes: Mapping = field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.text)


class Element(ABC):
    """An HTML element described by a mutable attribute mapping.

    Setters return ``self`` so calls can be chained while a template is
    being built.
    """

    def __init__(self, attributes: Mapping | None = None):
        self.attributes: dict = dict(attributes or {})

    def set_attribute(self, name: str, value=True):
        self.attributes[name] = value
        return self

    def set_attributes(self, attributes: Mapping, merge: bool = True):
        """Replace or merge attributes. Merging concatenates classes."""
        if merge:
            self.attributes = merge_attrs(self.attributes, attributes)
        else:
            self.attributes = dict(attributes)
        return self

    def get_attribute(self, name: str, default=None):
        return self.attributes.get(name, default)

    def add_class(self, *classes):
        self.attributes = add_class(self.attributes, *classes)
        return self

    @abstractmethod
    def render(self) -> Markup:
        """Render the element's markup."""

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return str(self.__html__())
