"""
Form Template Processor

Single Responsibility: Turn Form and Field objects into markup through the
theme's template candidates. All HTML is produced by templates; this class
only assembles the rendering context and picks the candidate lists.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from markupsafe import Markup

from ..config.settings import get_settings
from .TemplateRenderer import TemplateRenderer, jinja2TemplateRenderer

if TYPE_CHECKING:
    from ..Core.Field import Field
    from ..Core.Form import Form

logger = structlog.get_logger(__name__)

UNWRAPPED_TYPES = ('hidden', 'datalist')


class FormTemplateProcessor:
    def __init__(self, renderer: TemplateRenderer):
        self.renderer = renderer

    def render_form(
        self,
        form: 'Form',
        extends: str = '',
        section: str = 'content',
        view_only: bool = False,
        context: Optional[Dict[str, Any]] = None,
        csrf_token: Optional[str] = None,
    ) -> Markup:
        """
        Render a whole form.

        When ``extends`` names a layout template, the form markup is passed to
        that layout under the ``section`` context key.
        """
        data = dict(context or {})
        data['Form'] = form
        data['extends'] = extends
        data['section'] = section
        data['view_only'] = view_only
        data['csrf_token'] = csrf_token

        markup = self.renderer.render(form.get_theme().template_candidates('form.html'), data)
        if not extends:
            return markup

        data[section or 'content'] = markup
        return self.renderer.render(extends, data)

    def render_subform(
        self,
        form: 'Form',
        view_only: bool = False,
        context: Optional[Dict[str, Any]] = None,
    ) -> Markup:
        data = dict(context or {})
        data['Form'] = form
        data['view_only'] = view_only
        return self.renderer.render(form.get_theme().template_candidates('subform.html'), data)

    def render_field(self, field: 'Field', prev_inline: bool = False, view_only: bool = False) -> Markup:
        """
        Render one field: the type template, then the theme's field wrapper.
        Hidden inputs and datalists are not wrapped.
        """
        data = {
            'field': field,
            'view_only': view_only,
            'prev_inline': prev_inline,
        }
        field_markup = self.renderer.render(field.template_candidates(), data)
        if field.type in UNWRAPPED_TYPES:
            return field_markup

        data['field_markup'] = field_markup
        return self.renderer.render(field.theme.template_candidates('components/field.html'), data)

    def render_option(self, field: 'Field', key: str, selected_value: Any, view_only: bool = False) -> Markup:
        data = {
            'field': field,
            'key': key,
            'label': field.options.get_label(key),
            'checked': field.is_selected(key, selected_value),
            'view_only': view_only,
        }
        return self.renderer.render(field.theme.template_candidates('pieces/option.html'), data)


_default_processor: Optional[FormTemplateProcessor] = None


def get_template_processor() -> FormTemplateProcessor:
    """Return the shared processor, creating a Jinja2 one from settings on first use."""
    global _default_processor
    if _default_processor is None:
        settings = get_settings()
        _default_processor = FormTemplateProcessor(
            jinja2TemplateRenderer(settings.template_dirs, auto_reload=settings.auto_reload)
        )
        logger.debug("Created default template processor", template_dirs=settings.template_dirs)
    return _default_processor


def set_default_renderer(renderer: Optional[TemplateRenderer]) -> None:
    """Replace the shared renderer; None resets to the settings-based default."""
    global _default_processor
    _default_processor = FormTemplateProcessor(renderer) if renderer is not None else None
