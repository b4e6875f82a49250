"""
Bulma Theme

Renders fields with Bulma CSS classes (https://bulma.io). The classes are
added at render time, so fields keep their own attributes. Only the templates
under ``templates/bulma`` are overridden; the rest fall back to the defaults.
"""

from typing import TYPE_CHECKING, List

from .Theme import Theme

if TYPE_CHECKING:
    from ..Core.Field import Field


class BulmaTheme(Theme):
    identifier = 'bulma'
    view_namespace = 'bulma'

    label_class = 'label'
    container_class = 'control'
    input_class = 'input'
    error_class = 'help is-danger'

    # Bulma styles these elements with their own class instead of ``input``
    TYPE_CLASSES = {
        'textarea': 'textarea',
        'select': '',
        'checkbox': '',
        'checkboxes': '',
        'radios': '',
        'file': 'file-input',
        'submit': 'button is-primary',
        'button': 'button',
        'hidden': '',
    }

    def field_classes(self, field: 'Field') -> List[str]:
        """The Bulma element class for the field type."""
        return self.TYPE_CLASSES.get(field.type, self.input_class).split()
