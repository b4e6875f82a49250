from enum import Enum


class FieldType(str, Enum):
    """Built-in HTML input kinds with dedicated or default templates."""

    TEXT = 'text'
    TEXTAREA = 'textarea'
    PASSWORD = 'password'
    EMAIL = 'email'
    URL = 'url'
    TEL = 'tel'
    NUMBER = 'number'
    DATE = 'date'
    TIME = 'time'
    DATETIME_LOCAL = 'datetime-local'
    COLOR = 'color'
    RANGE = 'range'
    SEARCH = 'search'
    HIDDEN = 'hidden'
    FILE = 'file'
    SELECT = 'select'
    RADIOS = 'radios'
    CHECKBOX = 'checkbox'
    CHECKBOXES = 'checkboxes'
    DATALIST = 'datalist'
    SUBMIT = 'submit'
    BUTTON = 'button'
    SUBFORM = 'subform'

    @classmethod
    def normalize(cls, value) -> str:
        """Return the plain string tag for a FieldType or string."""
        if isinstance(value, cls):
            return value.value
        return str(value)
