from typing import List, Optional, Sequence, Union

import structlog
from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape
from jinja2.exceptions import TemplateNotFound
from markupsafe import Markup

from .TemplateRenderer import TemplateRenderer

logger = structlog.get_logger(__name__)


class jinja2TemplateRenderer(TemplateRenderer):
    def __init__(self, template_dirs: Optional[Sequence[str]] = None, auto_reload: bool = False):
        # Override directories come first so projects can replace packaged templates
        loaders = [FileSystemLoader(list(template_dirs))] if template_dirs else []
        loaders.append(PackageLoader("formmaker", "templates"))
        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(default=True, default_for_string=True),
            auto_reload=auto_reload,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def exists(self, name: str) -> bool:
        try:
            self.env.get_template(name)
            return True
        except TemplateNotFound:
            return False

    def render(self, candidates: Union[str, List[str]], context: dict) -> Markup:
        """
        Render the first existing candidate.
        Raises jinja2.TemplatesNotFound when no candidate exists.
        """
        if isinstance(candidates, str):
            candidates = [candidates]
        template = self.env.select_template(candidates)
        logger.debug("Resolved template", template=template.name, candidates=candidates)
        return Markup(template.render(**context))
