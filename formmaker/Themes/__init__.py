"""
Themes: template resolution strategies for forms and fields.
"""
from .Theme import Theme, DefaultTheme, DEFAULT_NAMESPACE
from .BulmaTheme import BulmaTheme
from .ThemeRegistry import ThemeRegistry
