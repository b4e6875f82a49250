from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .Field import Field


class CustomRenderer(ABC):
    """
    Interface for field renderers that replace type-driven template lookup.

    Any object exposing a callable ``render(field, view_only)`` is accepted,
    subclassing is not required.
    """

    @abstractmethod
    def render(self, field: 'Field', view_only: bool = False) -> str:
        """
        Render the field.

        Returns:
            HTML markup for the field (str or markupsafe.Markup)
        """
        ...

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is CustomRenderer:
            return callable(getattr(subclass, 'render', None))
        return NotImplemented


def is_custom_renderer(obj) -> bool:
    """
    Check whether ``obj`` is a renderer instance.

    Classes are rejected, and so are forms: ``Form.render`` renders a whole
    form and does not take ``(field, view_only)``.
    """
    from .Form import Form

    if isinstance(obj, (type, Form)):
        return False
    return isinstance(obj, CustomRenderer)
