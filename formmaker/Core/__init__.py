"""
Core components: attributes, fields, forms and their serialization.
"""
from .exceptions import (
    FormMakerError,
    FieldNotFoundError,
    InvalidCustomRendererError,
    UnknownThemeError,
    InvalidRuleError,
)
from .Attributes import Attributes
from .Options import Options
from .FieldType import FieldType
from .CustomRenderer import CustomRenderer
from .Field import Field
from .Form import Form
from .FormSerializer import FormSerializer
