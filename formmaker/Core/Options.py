"""
Options container for choice-like fields (select, radios, checkboxes, datalist).
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

OptionsInput = Union[Dict[Any, Any], Iterable[Any]]


class Options:
    """Ordered mapping of option value to option label."""

    def __init__(self, options: Optional[OptionsInput] = None, container_class: str = ''):
        self._options: Dict[str, Any] = {}
        self.container_class = container_class
        if options is not None:
            self.set_options(options)

    def set_options(self, options: OptionsInput) -> None:
        """
        Replace all options.

        Accepts a mapping of value to label, a list of (value, label) pairs,
        or a plain list where each item is used as both value and label.
        """
        normalized: Dict[str, Any] = {}
        items = options.items() if isinstance(options, dict) else options
        for item in items:
            if isinstance(item, (tuple, list)) and len(item) == 2:
                value, label = item
            else:
                value, label = item, item
            normalized[str(value)] = label
        self._options = normalized

    def get_options(self) -> Dict[str, Any]:
        return dict(self._options)

    def get_label(self, value: Any) -> Any:
        return self._options.get(str(value))

    def has(self, value: Any) -> bool:
        return str(value) in self._options

    def items(self) -> List[Tuple[str, Any]]:
        return list(self._options.items())

    def to_serializable(self) -> Dict[str, Any]:
        return {
            'options': dict(self._options),
            'container_class': self.container_class,
        }

    @classmethod
    def from_serializable(cls, data: Optional[Dict[str, Any]]) -> 'Options':
        data = data or {}
        return cls(data.get('options') or {}, data.get('container_class', ''))

    def __len__(self) -> int:
        return len(self._options)

    def __bool__(self) -> bool:
        return bool(self._options)

    def __repr__(self) -> str:
        return f"Options({self._options!r})"
