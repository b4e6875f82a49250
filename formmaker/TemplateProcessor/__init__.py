from .FormTemplateProcessor import FormTemplateProcessor, get_template_processor, set_default_renderer
from .TemplateRenderer import TemplateRenderer, jinja2TemplateRenderer
