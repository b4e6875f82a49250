"""
Theme Registry

Maps theme identifiers to theme classes. Deserialization only ever
instantiates registered themes; unknown identifiers are rejected.
"""

from typing import Dict, Optional, Type

import structlog

from ..Core.exceptions import UnknownThemeError
from .Theme import Theme, DefaultTheme
from .BulmaTheme import BulmaTheme

logger = structlog.get_logger(__name__)


class ThemeRegistry:
    """
    Registry class responsible for looking up and creating theme instances.
    """

    _themes: Dict[str, Type[Theme]] = {
        DefaultTheme.identifier: DefaultTheme,
        BulmaTheme.identifier: BulmaTheme,
    }

    @classmethod
    def register(cls, theme_class: Type[Theme]) -> Type[Theme]:
        """
        Register a theme class under its ``identifier``.

        Usable as a class decorator. Re-registering an identifier replaces
        the previous class.
        """
        if not isinstance(theme_class, type) or not issubclass(theme_class, Theme):
            raise TypeError(f"{theme_class!r} is not a Theme subclass")
        if not theme_class.identifier:
            raise ValueError(f"{theme_class.__name__} has no identifier")
        cls._themes[theme_class.identifier] = theme_class
        logger.debug("Registered theme", identifier=theme_class.identifier, theme=theme_class.__name__)
        return theme_class

    @classmethod
    def unregister(cls, identifier: str) -> None:
        cls._themes.pop(identifier, None)

    @classmethod
    def get(cls, identifier: str) -> Optional[Type[Theme]]:
        return cls._themes.get(identifier)

    @classmethod
    def create(cls, identifier: str) -> Theme:
        theme_class = cls._themes.get(identifier)
        if theme_class is None:
            raise UnknownThemeError(identifier, cls._themes.keys())
        return theme_class()

    @classmethod
    def identifiers(cls):
        return list(cls._themes.keys())
