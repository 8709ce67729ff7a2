"""Form rendering exceptions with contextual error messages."""


class FormerError(Exception):
    """Base exception for all form rendering errors."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(f"{message}\n\n  Field: {field}" if field else message)


class UnsupportedOperationError(FormerError, NotImplementedError):
    """An operation the active framework does not provide."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        framework: str | None = None,
        supported_by: tuple[str, ...] = (),
    ):
        self.framework = framework
        self.supported_by = supported_by

        full_message = message
        if framework:
            full_message += f"\n\n  Active framework: {framework}"
        if supported_by:
            full_message += f"\n  Available on: {', '.join(supported_by)}"
        if field:
            full_message += f"\n  Field: {field}"

        Exception.__init__(self, full_message)
        self.field = field


class UnknownFrameworkError(FormerError, LookupError):
    def __init__(self, name: str, available: tuple[str, ...] = ()):
        self.name = name
        self.available = available

        full_message = f"Unknown framework {name!r}"
        if available:
            full_message += f"\n\n  Registered frameworks: {', '.join(available)}"

        Exception.__init__(self, full_message)
        self.field = None


class InvalidFormTypeError(FormerError, ValueError):
    pass


class FieldNotFoundError(FormerError, AttributeError):
    pass
