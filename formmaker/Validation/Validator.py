"""
Validator Module

Runs rule descriptors against a mapping of values using Django's validators.

Rule descriptors for one field may be:
- a pipe-separated string: ``"required|email|max:255"``
- a list of strings, one rule each, kept whole (``["regex:/^(a|b)$/"]``)
- callables mixed into the list: Django validators or any callable raising
  ``django.core.exceptions.ValidationError``
"""

from typing import Any, Callable, Dict, List, Tuple, Union

import structlog
from django.core.exceptions import ValidationError

from ..config.settings import configure_django
from ..Core.exceptions import InvalidRuleError
from .rules import RULES, IMPLICIT_RULES, RuleContext, is_empty

configure_django()

logger = structlog.get_logger(__name__)

RuleDescriptor = Union[str, Callable[[Any], Any]]
Rules = Union[str, RuleDescriptor, List[RuleDescriptor], None]


def normalize_rules(rules: Rules) -> List[RuleDescriptor]:
    """
    Flatten rule descriptors into a list.

    Only a single descriptor string is split on ``|``. Entries of a list are
    kept whole, so ``["regex:/^(a|b)$/"]`` stays one rule.

    Returns:
        list: Strings (one rule each) and callables
    """
    if rules is None:
        return []
    if isinstance(rules, str):
        return [rule for rule in rules.split('|') if rule.strip()]
    if callable(rules):
        return [rules]

    normalized: List[RuleDescriptor] = []
    for rule in rules:
        if isinstance(rule, str) and not rule.strip():
            continue
        normalized.append(rule)
    return normalized


def parse_rule(rule: str) -> Tuple[str, List[str]]:
    """Split ``"max:255"`` into ``("max", ["255"])``."""
    name, _, params = rule.strip().partition(':')
    return name.strip(), [p for p in params.split(',')] if params else []


def rule_names(rules: Rules) -> List[str]:
    return [parse_rule(r)[0] for r in normalize_rules(rules) if isinstance(r, str)]


class Validator:
    """
    Validates ``values`` against ``rules``, both keyed by field name.

    Validation runs lazily on the first call to ``fails()``, ``passes()`` or
    ``errors()``. Only the first failing rule of each field is reported,
    matching how forms display a single message per field.
    """

    def __init__(self, values: Dict[str, Any], rules: Dict[str, Rules]):
        self.values = dict(values)
        self.rules = {name: normalize_rules(field_rules) for name, field_rules in rules.items()}
        self._errors: Dict[str, List[str]] = None

    @classmethod
    def make(cls, values: Dict[str, Any], rules: Dict[str, Rules]) -> 'Validator':
        return cls(values, rules)

    def fails(self) -> bool:
        return bool(self.errors())

    def passes(self) -> bool:
        return not self.fails()

    def errors(self) -> Dict[str, List[str]]:
        if self._errors is None:
            self._errors = self._run()
        return self._errors

    def _run(self) -> Dict[str, List[str]]:
        errors: Dict[str, List[str]] = {}
        for field_name, field_rules in self.rules.items():
            messages = self._validate_field(field_name, field_rules)
            if messages:
                errors[field_name] = messages

        if errors:
            logger.debug("Validation failed", fields=list(errors.keys()))
        return errors

    def _validate_field(self, field_name: str, field_rules: List[RuleDescriptor]) -> List[str]:
        """
        Run the rules of one field in order and stop at the first failure.

        Returns:
            list: Error messages of the failing rule, empty when all pass
        """
        value = self.values.get(field_name)
        context = RuleContext(field_name, self.values, rule_names(field_rules))
        empty = is_empty(value)

        for rule in field_rules:
            try:
                if callable(rule):
                    if not empty:
                        rule(value)
                    continue

                name, params = parse_rule(rule)
                rule_function = RULES.get(name)
                if rule_function is None:
                    raise InvalidRuleError(rule, field_name)
                if empty and name not in IMPLICIT_RULES:
                    continue
                try:
                    rule_function(value, params, context)
                except ValueError as e:
                    raise InvalidRuleError(rule, field_name) from e
            except ValidationError as e:
                return [str(message) for message in e.messages]

        return []
