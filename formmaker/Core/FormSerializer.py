"""
Form Serializer Module

This module converts Forms and Fields to and from JSON-compatible dicts.

Form layout:
    {
        "csrf": true,
        "Attributes": {...},
        "Fields": {"<name>": <field>, ...},
        "display_fields": ["<name>", ...],
        "Theme": "<theme identifier>" | null
    }

Themes are stored by registered identifier and rebuilt through the
ThemeRegistry; unknown identifiers raise UnknownThemeError.
"""

from typing import Any, Dict, Optional

import structlog

from .Attributes import Attributes
from .Field import Field
from .Form import Form
from .Options import Options
from ..Themes.Theme import Theme

logger = structlog.get_logger(__name__)

FIELD_SCALARS = (
    'name',
    'label',
    'label_suffix',
    'label_class',
    'example',
    'note',
    'error_message',
    'default_value',
    'is_inline',
)


class FormSerializer:
    """
    Serializes form instances to JSON-compatible dicts and back.
    """

    def __init__(self, form: Form):
        """
        Initialize FormSerializer with a form instance.

        Args:
            form: Form instance to serialize
        """
        self.form = form

    @staticmethod
    def _theme_identifier(theme: Optional[Theme]) -> Optional[str]:
        if theme is None:
            return None
        return theme.identifier or None

    @staticmethod
    def _serialize_rules(rules) -> Any:
        """Keep string rules; callables cannot be stored and are dropped with a warning."""
        if isinstance(rules, str) or rules is None:
            return rules
        kept = [rule for rule in rules if isinstance(rule, str)]
        if len(kept) != len(rules):
            logger.warning("Dropped non-serializable validation rules", count=len(rules) - len(kept))
        return kept

    @classmethod
    def serialize_field(cls, field: Field) -> Dict[str, Any]:
        """
        Serialize a single field.

        Sub-form fields include the full nested form under ``subform``.
        Custom renderers are not serializable; only their presence is noted.
        """
        data = {key: getattr(field, key) for key in FIELD_SCALARS}
        data['original_name'] = field.original_name
        data['Attributes'] = field.attributes.to_serializable()
        data['Options'] = field.options.to_serializable()
        data['validation_rules'] = cls._serialize_rules(field.validation_rules)
        data['is_subform'] = field.is_subform
        data['subform'] = FormSerializer(field.subform).to_json() if field.is_subform else None
        data['has_custom_renderer'] = field.custom_renderer is not None
        data['Theme'] = cls._theme_identifier(field.theme)
        return data

    @classmethod
    def deserialize_field(cls, data: Dict[str, Any], theme: Optional[Theme] = None) -> Field:
        field = Field(data.get('original_name') or data['name'], theme=theme)
        for key in FIELD_SCALARS:
            if key in data:
                setattr(field, key, data[key])
        field.attributes = Attributes.from_serializable(data.get('Attributes'))
        field.options = Options.from_serializable(data.get('Options'))
        rules = data.get('validation_rules')
        field.validation_rules = rules if rules is not None else []

        if data.get('is_subform') and data.get('subform') is not None:
            field.subform = cls.from_json(data['subform'])
            field.subform.set_theme(field.theme)
        if data.get('has_custom_renderer'):
            logger.warning("Custom renderer not restored", field=field.name)
        return field

    def to_json(self) -> Dict[str, Any]:
        """
        Serialize the form.

        Returns:
            Dictionary with csrf flag, form attributes, fields, display order and theme
        """
        form = self.form
        return {
            'csrf': form.csrf,
            'Attributes': form.attributes.to_serializable(),
            'Fields': {name: self.serialize_field(field) for name, field in form.fields.items()},
            'display_fields': form.get_display_fields(),
            'Theme': self._theme_identifier(form.get_theme()),
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any], form: Optional[Form] = None) -> Form:
        """
        Build a form from serialized data.

        Args:
            data: Output of ``to_json``
            form: Existing form to load into; a new one is created when None

        Raises:
            UnknownThemeError: the stored theme identifier is not registered
        """
        from ..Themes.ThemeRegistry import ThemeRegistry

        form = form if form is not None else Form()

        theme_identifier = data.get('Theme')
        theme = ThemeRegistry.create(theme_identifier) if theme_identifier else form.get_theme()

        csrf = data.get('csrf', data.get('laravel_csrf'))
        if csrf is not None:
            form.csrf = bool(csrf)

        if 'Attributes' in data:
            form.attributes = Attributes.from_serializable(data['Attributes'])

        fields = {}
        for name, field_data in (data.get('Fields') or {}).items():
            field = cls.deserialize_field(field_data, theme=theme)
            fields[name] = field
        form._fields = fields
        form.set_theme(theme)

        # Stored display order is trusted as-is; it may name fields removed before serialization
        form._display_fields = list(dict.fromkeys(data.get('display_fields') or []))

        logger.debug("Loaded form from serialized data", fields=len(fields), theme=theme_identifier)
        return form
