"""
Theme Module

A theme maps a template name (``form.html``, ``fields/select.html``, ...) to
an ordered list of candidate template identifiers. The template engine picks
the first candidate that exists, so a theme only ships the templates it
overrides and falls back to the default templates for everything else.
"""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ..Core.Field import Field

DEFAULT_NAMESPACE = 'default'


class Theme:
    """
    Base theme.

    Subclasses set ``identifier`` (used for serialization and the registry)
    and ``view_namespace`` (the template directory holding their overrides).
    """

    identifier: str = ''
    view_namespace: str = ''

    label_class: str = ''
    container_class: str = ''
    input_class: str = ''
    error_class: str = 'error'

    def template_candidates(self, name: str) -> List[str]:
        """
        Build the ordered list of template identifiers for ``name``.

        Args:
            name: Template path relative to a theme directory

        Returns:
            list: Theme template first (when the theme has a namespace), then default
        """
        candidates = []
        if self.view_namespace and self.view_namespace != DEFAULT_NAMESPACE:
            candidates.append(f"{self.view_namespace}/{name}")
        candidates.append(f"{DEFAULT_NAMESPACE}/{name}")
        return candidates

    def field_template_candidates(self, field_type: str) -> List[str]:
        """Dedicated field template first, then the generic input template."""
        return (
            self.template_candidates(f"fields/{field_type}.html")
            + self.template_candidates("pieces/default-input.html")
        )

    def field_classes(self, field: 'Field') -> List[str]:
        """CSS classes added to the field's own element at render time."""
        return self.input_class.split()

    def label_class_for(self, field: 'Field') -> str:
        return field.label_class or self.label_class

    def container_class_for(self, field: 'Field') -> str:
        """Class of the element grouping checkbox and radio options."""
        return field.options.container_class or self.container_class

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DefaultTheme(Theme):
    """Plain markup theme using only the default templates."""

    identifier = 'default'
    view_namespace = ''
