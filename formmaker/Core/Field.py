"""
Field Module

One named input of a Form: identity, HTML attributes, label and help texts,
validation rules, options for choice-like types, an optional nested sub-form
and an optional custom renderer. The owning Form assigns the theme.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Set, Union

import structlog
from markupsafe import Markup

from ..Themes.Theme import Theme, DefaultTheme
from ..TemplateProcessor import get_template_processor
from .Attributes import Attributes
from .CustomRenderer import CustomRenderer, is_custom_renderer
from .FieldType import FieldType
from .Options import Options, OptionsInput
from .exceptions import InvalidCustomRendererError

if TYPE_CHECKING:
    from .Form import Form

logger = structlog.get_logger(__name__)


def humanize(name: str) -> str:
    """``first_name`` -> ``First Name``"""
    return name.replace('_', ' ').replace('-', ' ').strip().title()


class Field:
    """
    A single form input.

    ``name`` may be rewritten (e.g. to namespace sub-form inputs) while
    ``original_name`` stays the key used to bind validation rules and errors.
    """

    def __init__(self, name: str, theme: Optional[Theme] = None):
        self.name = name
        self._original_name = name

        self.attributes = Attributes({'name': name, 'id': name, 'type': FieldType.TEXT.value})
        self.options = Options()

        self.label: str = humanize(name)
        self.label_suffix: str = ''
        self.label_class: str = ''
        self.example: str = ''
        self.note: str = ''
        self.error_message: str = ''

        self.validation_rules: List[Any] = []
        self.default_value: Any = None
        self.is_inline: bool = False

        self.subform: Optional['Form'] = None
        self.custom_renderer: Optional[CustomRenderer] = None
        self.theme: Theme = theme or DefaultTheme()

    @property
    def original_name(self) -> str:
        return self._original_name

    @property
    def is_subform(self) -> bool:
        return self.subform is not None

    @property
    def type(self) -> str:
        return self.attributes.get('type', FieldType.TEXT.value)

    @type.setter
    def type(self, value: Union[str, FieldType]) -> None:
        self.attributes.set('type', FieldType.normalize(value))

    @property
    def value(self) -> Any:
        return self.attributes.get('value')

    @value.setter
    def value(self, value: Any) -> None:
        self.attributes.set('value', value)

    @property
    def display_value(self) -> Any:
        """The submitted value, or the default value when nothing was set."""
        value = self.value
        return self.default_value if value is None else value

    def is_required(self) -> bool:
        return bool(self.attributes.get('required'))

    def set_type(self, value: Union[str, FieldType, CustomRenderer]) -> None:
        """
        Set the field type.

        Args:
            value: A type tag (str or FieldType) or a custom renderer object

        Raises:
            InvalidCustomRendererError: value is an object that cannot render fields
        """
        if isinstance(value, (str, FieldType)):
            self.type = value
        elif is_custom_renderer(value):
            self.custom_renderer = value
        else:
            raise InvalidCustomRendererError(self.name, value)

    def render_as(self, renderer: CustomRenderer) -> None:
        if not is_custom_renderer(renderer):
            raise InvalidCustomRendererError(self.name, renderer)
        self.custom_renderer = renderer

    def make_subform(self, form: 'Form') -> None:
        """Turn this field into a container for ``form``."""
        if form is None:
            raise ValueError(f"{self.name} sub-form cannot be None")
        self.subform = form
        self.type = FieldType.SUBFORM
        form.set_theme(self.theme)

    def set_options(self, options: OptionsInput) -> None:
        """Replace the options of a choice-like field."""
        self.options.set_options(options)

    def get_options(self) -> Dict[str, Any]:
        return self.options.get_options()

    def selected_keys(self, selected_value: Any = None) -> Set[str]:
        """Option keys selected by ``selected_value`` (the field's value when None)."""
        if selected_value is None:
            selected_value = self.display_value
        if selected_value is None:
            return set()
        if isinstance(selected_value, (list, tuple, set)):
            return {str(v) for v in selected_value}
        return {str(selected_value)}

    def is_selected(self, key: Any, selected_value: Any = None) -> bool:
        return str(key) in self.selected_keys(selected_value)

    def selected_labels(self) -> List[Any]:
        selected = self.selected_keys()
        return [label for key, label in self.options.items() if key in selected]

    def is_checked(self) -> bool:
        """State of a single checkbox."""
        value = self.display_value
        if isinstance(value, str):
            return value.lower() not in ('', '0', 'false', 'off', 'no')
        return bool(value)

    def template_candidates(self) -> List[str]:
        """Template names tried in order when rendering this field."""
        return self.theme.field_template_candidates(self.type)

    def set_theme(self, theme: Theme) -> None:
        self.theme = theme
        if self.subform is not None:
            self.subform.set_theme(theme)

    def render_attributes(self, exclude=()) -> Markup:
        """
        Render HTML attributes with the theme's classes added and the default
        value used for ``value`` when nothing was set. Works on a copy, so
        rendering never changes the field.
        """
        attributes = Attributes(dict(self.attributes.items()))
        for class_name in self.theme.field_classes(self):
            attributes.add_class(class_name)
        if self.value is None and self.default_value is not None:
            attributes.set('value', self.default_value)
        return attributes.render(exclude)

    def make_view(self, prev_inline: bool = False, view_only: bool = False) -> Markup:
        """
        Render this field.

        Custom renderers win over everything; sub-form fields render their
        nested form; all other fields go through the theme's templates.
        """
        if self.custom_renderer is not None:
            return Markup(self.custom_renderer.render(self, view_only))
        if self.subform is not None:
            return self.subform.render_as_subform(view_only=view_only, context={'field': self})
        return get_template_processor().render_field(self, prev_inline=prev_inline, view_only=view_only)

    def make_option_view(self, key: str, selected_value: Any = None, view_only: bool = False) -> Markup:
        if selected_value is None:
            selected_value = self.display_value
        return get_template_processor().render_option(self, key, selected_value, view_only)

    def to_serializable(self) -> Dict[str, Any]:
        from .FormSerializer import FormSerializer
        return FormSerializer.serialize_field(self)

    @classmethod
    def from_serializable(cls, data: Dict[str, Any], theme: Optional[Theme] = None) -> 'Field':
        from .FormSerializer import FormSerializer
        return FormSerializer.deserialize_field(data, theme=theme)

    def __repr__(self) -> str:
        return f"Field({self.name!r}, type={self.type!r}, value={self.value!r})"
