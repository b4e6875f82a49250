from .Core import (
    Attributes,
    CustomRenderer,
    Field,
    FieldType,
    Form,
    FormSerializer,
    Options,
    FormMakerError,
    FieldNotFoundError,
    InvalidCustomRendererError,
    UnknownThemeError,
    InvalidRuleError,
)
from .Themes import Theme, DefaultTheme, BulmaTheme, ThemeRegistry
from .TemplateProcessor import FormTemplateProcessor, TemplateRenderer, jinja2TemplateRenderer, set_default_renderer
from .Validation import Validator

__version__ = "0.1.0"
