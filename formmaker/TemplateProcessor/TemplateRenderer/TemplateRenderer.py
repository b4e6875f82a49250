from abc import ABC, abstractmethod
from typing import List, Union

from markupsafe import Markup


class TemplateRenderer(ABC):
    """Interface for resolving and rendering form templates"""

    @abstractmethod
    def exists(self, name: str) -> bool: ...

    @abstractmethod
    def render(self, candidates: Union[str, List[str]], context: dict) -> Markup:
        """
        Render the first existing template among ``candidates`` with ``context``.
        Raises when none of the candidates exists.
        """
        ...
