"""
Form Module

This module provides the Form class: an ordered registry of Fields, the
ordered list of fields to display, form-level attributes, validation and
rendering through the active theme.

Architecture (SRP-compliant):
- Form: field registry, display order, bulk setters, validation orchestration
- FormTemplateProcessor: turns forms and fields into markup
- FormSerializer: JSON (de)serialization
- Validator: runs rule descriptors with Django validators

Bulk setters check every field name before changing anything, so a call
that raises FieldNotFoundError leaves the form untouched.
"""

import json
from typing import Any, Dict, Iterable, List, Optional, Union

import structlog
from markupsafe import Markup

from ..config.settings import get_settings
from ..TemplateProcessor import get_template_processor
from ..Themes.Theme import Theme
from ..Themes.ThemeRegistry import ThemeRegistry
from ..Validation import Validator, normalize_rules, rule_names
from .CustomRenderer import CustomRenderer, is_custom_renderer
from .Attributes import Attributes
from .Field import Field
from .FieldType import FieldType
from .Options import OptionsInput
from .exceptions import FieldNotFoundError, InvalidCustomRendererError

logger = structlog.get_logger(__name__)

MULTIPART = 'multipart/form-data'


class Form:
    """
    A set of named fields rendered together.

    Usage:
        form = Form(request=request)
        form.add_fields(['email', 'password'])
        form.set_types({'email': 'email', 'password': 'password'})
        form.set_validation_rules({'email': 'required|email'})
        form.set_display_fields(['email', 'password'])

        form.set_values(request.POST.dict(), ignore_invalid=True)
        if form.is_valid():
            data = form.get_field_values()
        html = form.render()
    """

    def __init__(self, request=None, theme: Optional[Theme] = None):
        """
        Initialize the form.

        Args:
            request: Current request (Django HttpRequest or compatible); its
                     absolute URL becomes the default ``action``
            theme: Theme to use; defaults to the configured default theme
        """
        settings = get_settings()

        self.csrf: bool = settings.csrf
        self.attributes = Attributes({'method': 'post'})
        self._fields: Dict[str, Field] = {}
        self._display_fields: List[str] = []
        self._errors: Dict[str, List[str]] = {}
        self._theme: Theme = theme or ThemeRegistry.create(settings.default_theme)

        if request is not None:
            self.attributes.set('action', request.build_absolute_uri(request.path))
        else:
            self.attributes.set('action', settings.default_action)

    # Field registry

    @property
    def fields(self) -> Dict[str, Field]:
        """Copy of the field registry in insertion order."""
        return dict(self._fields)

    def _require_field(self, field_name: str) -> Field:
        field = self._fields.get(field_name)
        if field is None:
            raise FieldNotFoundError(field_name)
        return field

    def _require_fields(self, field_names: Iterable[str]) -> None:
        """Raise for the first unknown name, before any mutation happens."""
        for field_name in field_names:
            self._require_field(field_name)

    def get_field(self, field_name: str) -> Field:
        return self._require_field(field_name)

    def is_field(self, field_name: str) -> bool:
        return field_name in self._fields

    def add_field(self, field_name: str) -> Field:
        """
        Add a field, replacing any existing field with the same name.

        Returns:
            Field: The new field, carrying the form's current theme
        """
        field = Field(field_name, theme=self._theme)
        self._fields[field_name] = field
        logger.debug("Added field", field=field_name)
        return field

    def add_fields(self, field_names: Iterable[str]) -> None:
        for field_name in field_names:
            self.add_field(field_name)

    def remove_field(self, field_name: str) -> None:
        """Remove a field if present. The display list is left untouched."""
        if self._fields.pop(field_name, None) is not None:
            logger.debug("Removed field", field=field_name)

    def remove_fields(self, field_names: Iterable[str]) -> None:
        for field_name in field_names:
            self.remove_field(field_name)

    def add_subform(self, name: str, form: 'Form', before_field: str = '') -> Field:
        """
        Add a nested form as a field.

        Args:
            name: Field name for the sub-form
            form: The nested form, owned by this form from now on
            before_field: Display the sub-form right before this display field;
                          appended to the display list when empty. Naming the
                          sub-form itself keeps its current display slot.

        Raises:
            FieldNotFoundError: before_field is not a display field
            ValueError: form is None
        """
        if before_field and before_field not in self._display_fields:
            raise FieldNotFoundError(before_field, f"{before_field} is not a display field")
        if form is None:
            raise ValueError(f"{name} sub-form cannot be None")

        field = self.add_field(name)
        field.make_subform(form)

        if before_field == name:
            return field

        display_fields = [display for display in self._display_fields if display != name]
        if before_field:
            display_fields.insert(display_fields.index(before_field), name)
        else:
            display_fields.append(name)
        self._display_fields = display_fields
        return field

    def add_datalist(self, name: str, options: OptionsInput) -> Field:
        """Add and display a datalist field that other inputs can reference by ``list=name``."""
        field = self.add_field(name)
        field.type = FieldType.DATALIST
        field.attributes.set('id', name)
        field.set_options(options)
        self.add_display_fields([name])
        return field

    # Values

    def set_value(self, field_name: str, value: Any) -> None:
        self._require_field(field_name).value = value

    def set_field_value(self, field_name: str, value: Any) -> None:
        self.set_value(field_name, value)

    def get_value(self, field_name: str) -> Any:
        return self._require_field(field_name).value

    def set_values(self, values: Dict[str, Any], ignore_invalid: bool = False) -> None:
        """
        Set many values at once.

        Args:
            values: Mapping of field name to value
            ignore_invalid: Skip names that are not fields instead of raising
        """
        if not ignore_invalid:
            self._require_fields(values.keys())
        for field_name, value in values.items():
            if field_name in self._fields:
                self._fields[field_name].value = value

    def get_field_values(self) -> Dict[str, Any]:
        return {name: field.value for name, field in self._fields.items()}

    # Bulk setters

    def set_types(self, types: Dict[str, Union[str, FieldType, CustomRenderer]]) -> None:
        """
        Set field types from type tags or custom renderer objects.

        Raises:
            FieldNotFoundError: a name is not a field
            InvalidCustomRendererError: an object value cannot render fields
        """
        self._require_fields(types.keys())
        for field_name, field_type in types.items():
            if not isinstance(field_type, (str, FieldType)) and not is_custom_renderer(field_type):
                raise InvalidCustomRendererError(field_name, field_type)
        for field_name, field_type in types.items():
            self._fields[field_name].set_type(field_type)

    def set_examples(self, examples: Dict[str, str]) -> None:
        self._require_fields(examples.keys())
        for field_name, example in examples.items():
            self._fields[field_name].example = example

    def set_notes(self, notes: Dict[str, str]) -> None:
        self._require_fields(notes.keys())
        for field_name, note in notes.items():
            self._fields[field_name].note = note

    def set_default_values(self, default_values: Dict[str, Any]) -> None:
        self._require_fields(default_values.keys())
        for field_name, default_value in default_values.items():
            self._fields[field_name].default_value = default_value

    def set_labels(self, labels: Dict[str, str]) -> None:
        self._require_fields(labels.keys())
        for field_name, label in labels.items():
            self._fields[field_name].label = label

    def get_labels(self, field_names: Optional[Iterable[str]] = None) -> Dict[str, str]:
        """Labels for ``field_names``, or for every field when none are given."""
        names = list(field_names) if field_names else list(self._fields.keys())
        self._require_fields(names)
        return {name: self._fields[name].label for name in names}

    def set_validation_rules(self, validation_rules: Dict[str, Any]) -> None:
        self._require_fields(validation_rules.keys())
        for field_name, rules in validation_rules.items():
            self._fields[field_name].validation_rules = normalize_rules(rules)

    def set_required_fields(self, field_names: Iterable[str]) -> None:
        field_names = list(field_names)
        self._require_fields(field_names)
        for field_name in field_names:
            self._fields[field_name].attributes.set('required', True)

    def set_inline(self, field_names: Iterable[str]) -> None:
        field_names = list(field_names)
        self._require_fields(field_names)
        for field_name in field_names:
            self._fields[field_name].is_inline = True

    # Display order

    def set_display_fields(self, field_names: Iterable[str]) -> None:
        """
        Replace the display list.

        Raises:
            FieldNotFoundError: a name is not a field; the display list is unchanged
        """
        field_names = list(field_names)
        self._require_fields(field_names)
        self._display_fields = list(dict.fromkeys(field_names))

    def add_display_fields(self, field_names: Iterable[str]) -> None:
        """Append names not already displayed. Names are not checked against the registry."""
        for field_name in field_names:
            if field_name not in self._display_fields:
                self._display_fields.append(field_name)

    def remove_display_fields(self, field_names: Iterable[str]) -> None:
        for field_name in field_names:
            if field_name in self._display_fields:
                self._display_fields.remove(field_name)

    def set_display_after(self, display_field: str, after_field: str) -> None:
        """
        Display ``display_field`` right after ``after_field``.

        A field already in the display list is moved.

        Raises:
            FieldNotFoundError: after_field is not a display field
        """
        if after_field not in self._display_fields:
            raise FieldNotFoundError(after_field, f"{after_field} is not a display field")
        if display_field == after_field:
            return
        if display_field in self._display_fields:
            self._display_fields.remove(display_field)
        self._display_fields.insert(self._display_fields.index(after_field) + 1, display_field)

    def get_display_fields(self) -> List[str]:
        return list(self._display_fields)

    def get_display_field_objects(self) -> List[Field]:
        """Fields to render in display order; names without a field are skipped."""
        fields = []
        for field_name in self._display_fields:
            field = self._fields.get(field_name)
            if field is None:
                logger.warning("Display field is not part of the form", field=field_name)
                continue
            fields.append(field)
        return fields

    # Validation

    def _build_rules(self) -> Dict[str, List[Any]]:
        rules = {}
        for field in self._fields.values():
            field_rules = normalize_rules(field.validation_rules)
            if field.is_required() and 'required' not in rule_names(field_rules):
                field_rules.append('required')
            rules[field.original_name] = field_rules
        return rules

    def is_valid(self) -> bool:
        """
        Validate field values against their rules.

        Required fields get an implicit ``required`` rule. The first error of
        every failing field is stored on its ``error_message``; passing fields
        have their message cleared.

        Returns:
            bool: True if every rule passed
        """
        by_original_name = {field.original_name: field for field in self._fields.values()}
        values = {field.original_name: field.value for field in self._fields.values()}

        validator = Validator.make(values, self._build_rules())
        self._errors = validator.errors()

        for original_name, field in by_original_name.items():
            messages = self._errors.get(original_name)
            field.error_message = messages[0] if messages else ''

        success = not self._errors
        logger.info("Form validated", valid=success, failed_fields=list(self._errors.keys()))
        return success

    def get_errors(self) -> Dict[str, List[str]]:
        """Errors of the last ``is_valid`` call, keyed by original field name."""
        return dict(self._errors)

    # Theme

    def set_theme(self, theme: Theme) -> None:
        """Use ``theme`` for this form, every field and every nested sub-form."""
        self._theme = theme
        for field in self._fields.values():
            field.set_theme(theme)
        logger.debug("Theme set", theme=theme.identifier or type(theme).__name__)

    def get_theme(self) -> Theme:
        return self._theme

    # Rendering

    def has_file_field(self) -> bool:
        """True when any field, including fields of nested sub-forms, is a file input."""
        for field in self._fields.values():
            if field.type == FieldType.FILE.value:
                return True
            if field.subform is not None and field.subform.has_file_field():
                return True
        return False

    def _ensure_enctype(self) -> None:
        if not self.attributes.get('enctype') and self.has_file_field():
            self.attributes.set('enctype', MULTIPART)

    def render(
        self,
        extends: str = '',
        section: str = 'content',
        view_only: bool = False,
        context: Optional[Dict[str, Any]] = None,
        request=None,
    ) -> Markup:
        """
        Render the form through the active theme.

        Args:
            extends: Layout template to render the form into
            section: Context key the layout reads the form markup from
            view_only: Render values as read-only text instead of inputs
            context: Extra template context
            request: Current request; supplies the CSRF token when ``csrf`` is on
        """
        self._ensure_enctype()

        csrf_token = None
        if self.csrf and request is not None:
            from django.middleware.csrf import get_token
            csrf_token = get_token(request)

        return get_template_processor().render_form(
            self,
            extends=extends,
            section=section,
            view_only=view_only,
            context=context,
            csrf_token=csrf_token,
        )

    def render_as_subform(self, view_only: bool = False, context: Optional[Dict[str, Any]] = None) -> Markup:
        return get_template_processor().render_subform(self, view_only=view_only, context=context)

    # Serialization

    def to_serializable(self) -> Dict[str, Any]:
        from .FormSerializer import FormSerializer
        return FormSerializer(self).to_json()

    @classmethod
    def from_serializable(cls, data: Dict[str, Any]) -> 'Form':
        from .FormSerializer import FormSerializer
        return FormSerializer.from_json(data, form=cls())

    def to_json(self) -> str:
        return json.dumps(self.to_serializable())

    @classmethod
    def from_json(cls, text: str) -> 'Form':
        return cls.from_serializable(json.loads(text))

    def __contains__(self, field_name: str) -> bool:
        return self.is_field(field_name)

    def __repr__(self) -> str:
        return f"Form(fields={list(self._fields)!r}, display_fields={self._display_fields!r})"
