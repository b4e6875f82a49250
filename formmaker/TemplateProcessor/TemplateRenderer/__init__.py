from .TemplateRenderer import TemplateRenderer
from .jinja2TemplateRenderer import jinja2TemplateRenderer
