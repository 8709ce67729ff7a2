"""Configuration flags consulted while building and rendering fields."""

from pydantic import BaseModel, ConfigDict


class FormerConfig(BaseModel):
    """Immutable set of rendering options.

    Attributes:
        framework: Name of the framework adapter used by default.
        automatic_label: Derive a missing name from the label (slugified)
            or a missing label from the name.
        live_validation: Turn validation rules into HTML5 attributes.
        required_class: Class added to the group of a required field.
        translate_from: Translation key prefix tried before the bare key.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    framework: str = "TwitterBootstrap"
    automatic_label: bool = True
    live_validation: bool = True
    required_class: str = "required"
    translate_from: str = "validation.attributes"
