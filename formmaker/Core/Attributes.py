"""
Attributes Module

Single Responsibility: Hold the HTML attributes of a field or form.

Values keep their Python type so rendering can tell a boolean-presence
attribute (``required``) from a valued one (``value="x"``).
"""

import json
from typing import Any, Dict, Iterator, List, Optional, Tuple

from markupsafe import Markup, escape


class Attributes:
    """
    Ordered mapping of HTML attribute names to values.

    Values may be strings, numbers, booleans, None or a list of strings
    (multi-valued attributes such as ``class``).
    """

    def __init__(self, attributes: Optional[Dict[str, Any]] = None):
        self._attributes: Dict[str, Any] = {}
        if attributes:
            self.update(attributes)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the attribute value, or ``default`` when it is not set."""
        return self._attributes.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._attributes[key] = list(value) if isinstance(value, tuple) else value

    def has(self, key: str) -> bool:
        return key in self._attributes

    def remove(self, key: str) -> None:
        self._attributes.pop(key, None)

    def update(self, attributes: Dict[str, Any]) -> None:
        for key, value in attributes.items():
            self.set(key, value)

    def keys(self) -> List[str]:
        return list(self._attributes.keys())

    def items(self) -> List[Tuple[str, Any]]:
        return list(self._attributes.items())

    def add_class(self, class_name: str) -> None:
        """Append a CSS class, keeping ``class`` as a list without duplicates."""
        classes = self._class_list()
        if class_name not in classes:
            classes.append(class_name)
        self._attributes['class'] = classes

    def remove_class(self, class_name: str) -> None:
        classes = [c for c in self._class_list() if c != class_name]
        if classes:
            self._attributes['class'] = classes
        else:
            self.remove('class')

    def _class_list(self) -> List[str]:
        current = self._attributes.get('class')
        if current is None or current is False:
            return []
        if isinstance(current, list):
            return list(current)
        return str(current).split()

    def render(self, exclude: Tuple[str, ...] = ()) -> Markup:
        """
        Render the attributes as an HTML attribute string.

        - True renders a bare attribute name
        - False and None are omitted
        - Lists are joined with spaces

        Args:
            exclude: Attribute names to leave out (e.g. ``value`` on a textarea)

        Returns:
            Markup with a leading space per attribute, or an empty Markup
        """
        parts = []
        for key, value in self._attributes.items():
            if key in exclude or value is None or value is False:
                continue
            if value is True:
                parts.append(str(escape(key)))
            elif isinstance(value, list):
                parts.append(f'{escape(key)}="{escape(" ".join(str(v) for v in value))}"')
            else:
                parts.append(f'{escape(key)}="{escape(value)}"')
        if not parts:
            return Markup('')
        return Markup(' ' + ' '.join(parts))

    def to_serializable(self) -> Dict[str, Any]:
        return {
            key: list(value) if isinstance(value, list) else value
            for key, value in self._attributes.items()
        }

    @classmethod
    def from_serializable(cls, data: Optional[Dict[str, Any]]) -> 'Attributes':
        return cls(data or {})

    def to_json(self) -> str:
        return json.dumps(self.to_serializable())

    @classmethod
    def from_json(cls, text: str) -> 'Attributes':
        return cls.from_serializable(json.loads(text))

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._attributes))

    def __len__(self) -> int:
        return len(self._attributes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Attributes):
            return NotImplemented
        return self._attributes == other._attributes

    def __repr__(self) -> str:
        return f"Attributes({self._attributes!r})"
