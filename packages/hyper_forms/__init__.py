"""Hyper Forms - form fields and the markup around them.

Public API exports:
- Former entry point (from hyper_forms.former)
- Field and Group building blocks
- Framework adapters (TwitterBootstrap, ZurbFoundation, Nude)
- Form state (FormContext, Form) and configuration (FormerConfig)
"""

from hyper_forms.config import FormerConfig
from hyper_forms.context import FORM_TYPES, Form, FormContext, parse_rules, rules_from_model
from hyper_forms.element import Element, Label
from hyper_forms.errors import (
    FieldNotFoundError,
    FormerError,
    InvalidFormTypeError,
    UnknownFrameworkError,
    UnsupportedOperationError,
)
from hyper_forms.field import Field
from hyper_forms.fields import Button, Checkable, Input, Select, Textarea
from hyper_forms.former import Former
from hyper_forms.frameworks import (
    FRAMEWORKS,
    Framework,
    Nude,
    TwitterBootstrap,
    ZurbFoundation,
    get_framework,
)
from hyper_forms.group import Group
from hyper_forms.live_validation import LiveValidation
from hyper_forms.translation import Translator, slugify

__all__ = [
    # Entry point
    "Former",
    "FormerConfig",
    # Building blocks
    "Element",
    "Label",
    "Field",
    "Group",
    "Input",
    "Textarea",
    "Select",
    "Checkable",
    "Button",
    "LiveValidation",
    # Frameworks
    "Framework",
    "TwitterBootstrap",
    "ZurbFoundation",
    "Nude",
    "FRAMEWORKS",
    "get_framework",
    # Form state
    "Form",
    "FormContext",
    "FORM_TYPES",
    "parse_rules",
    "rules_from_model",
    # Translation
    "Translator",
    "slugify",
    # Errors
    "FormerError",
    "UnsupportedOperationError",
    "UnknownFrameworkError",
    "InvalidFormTypeError",
    "FieldNotFoundError",
]
