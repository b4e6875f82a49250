"""
Custom exceptions for form definition and rendering.
"""


class FormMakerError(Exception):
    """Base exception for formmaker errors."""
    pass


class FieldNotFoundError(FormMakerError, KeyError):
    """Raised when an operation references a field that is not part of the form."""

    def __init__(self, field_name: str, message: str = None):
        self.field_name = field_name
        self.message = message or f"{field_name} is not part of the Form"
        super().__init__(self.message)

    def __str__(self):
        return self.message


class InvalidCustomRendererError(FormMakerError, TypeError):
    """Raised when a type override object cannot render a field."""

    def __init__(self, field_name: str, renderer=None):
        self.field_name = field_name
        self.renderer = renderer
        super().__init__(
            f"{field_name} custom renderer must provide render(field, view_only), "
            f"got {type(renderer).__name__}"
        )


class UnknownThemeError(FormMakerError, ValueError):
    """Raised when a theme identifier is not registered."""

    def __init__(self, identifier: str, available=None):
        self.identifier = identifier
        self.available = list(available or [])
        super().__init__(
            f"Unknown theme '{identifier}'. Available themes: {self.available}"
        )


class InvalidRuleError(FormMakerError, ValueError):
    """Raised when a validation rule descriptor cannot be parsed."""

    def __init__(self, rule, field_name: str = None):
        self.rule = rule
        self.field_name = field_name
        target = f" on {field_name}" if field_name else ""
        super().__init__(f"Invalid validation rule {rule!r}{target}")
