"""
Validation rules.

Each rule is a callable ``rule(value, params, context)`` that raises
``django.core.exceptions.ValidationError`` when the value does not pass.
``context`` is the RuleContext of the field being validated, giving access
to sibling values (``same``, ``confirmed``) and to the other rules of the
field (``min``/``max`` compare numbers when ``numeric`` or ``integer`` is present).
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from django import forms
from django.core import validators
from django.core.exceptions import ValidationError
from django.utils.dateparse import parse_date, parse_datetime
from django.utils.translation import gettext_lazy as _

RuleFunction = Callable[[Any, List[str], 'RuleContext'], None]

NUMERIC_RULES = ('numeric', 'integer')

TRUE_VALUES = (True, 1, '1', 'true', 'on', 'yes')
FALSE_VALUES = (False, 0, '0', 'false', 'off', 'no')


@dataclass
class RuleContext:
    field_name: str
    values: Dict[str, Any]
    rule_names: List[str] = field(default_factory=list)

    @property
    def is_numeric(self) -> bool:
        return any(name in self.rule_names for name in NUMERIC_RULES)


def is_empty(value: Any) -> bool:
    return value is None or value == '' or (isinstance(value, (list, tuple, dict, set)) and not value)


def _require_params(params: List[str], count: int, rule: str) -> None:
    if len(params) < count:
        raise ValueError(f"Rule '{rule}' needs {count} parameter(s)")


def _to_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(forms.FloatField.default_error_messages['invalid'], code='invalid')


def _size_validators(context: RuleContext, min_value=None, max_value=None):
    if context.is_numeric:
        checks = []
        if min_value is not None:
            checks.append(validators.MinValueValidator(float(min_value)))
        if max_value is not None:
            checks.append(validators.MaxValueValidator(float(max_value)))
        return checks, _to_number

    checks = []
    if min_value is not None:
        checks.append(validators.MinLengthValidator(int(min_value)))
    if max_value is not None:
        checks.append(validators.MaxLengthValidator(int(max_value)))
    return checks, (lambda v: v if isinstance(v, (list, tuple)) else str(v))


def required(value, params, context):
    if is_empty(value):
        raise ValidationError(forms.Field.default_error_messages['required'], code='required')


def nullable(value, params, context):
    pass


def email(value, params, context):
    validators.validate_email(str(value))


def url(value, params, context):
    validators.URLValidator()(str(value))


def numeric(value, params, context):
    _to_number(value)


def integer(value, params, context):
    try:
        validators.integer_validator(str(value))
    except ValidationError:
        raise ValidationError(forms.IntegerField.default_error_messages['invalid'], code='invalid')


def min_rule(value, params, context):
    _require_params(params, 1, 'min')
    checks, convert = _size_validators(context, min_value=params[0])
    converted = convert(value)
    for check in checks:
        check(converted)


def max_rule(value, params, context):
    _require_params(params, 1, 'max')
    checks, convert = _size_validators(context, max_value=params[0])
    converted = convert(value)
    for check in checks:
        check(converted)


def between(value, params, context):
    _require_params(params, 2, 'between')
    checks, convert = _size_validators(context, min_value=params[0], max_value=params[1])
    converted = convert(value)
    for check in checks:
        check(converted)


def _invalid_choice(value):
    return ValidationError(
        forms.ChoiceField.default_error_messages['invalid_choice'],
        code='invalid_choice',
        params={'value': value},
    )


def in_rule(value, params, context):
    values = value if isinstance(value, (list, tuple)) else [value]
    for item in values:
        if str(item) not in params:
            raise _invalid_choice(item)


def not_in(value, params, context):
    values = value if isinstance(value, (list, tuple)) else [value]
    for item in values:
        if str(item) in params:
            raise _invalid_choice(item)


def regex(value, params, context):
    _require_params(params, 1, 'regex')
    pattern = ','.join(params)
    # Accept slash delimited patterns: /^abc$/
    if len(pattern) > 1 and pattern.startswith('/') and pattern.rfind('/') > 0:
        pattern = pattern[1:pattern.rfind('/')]
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise ValueError(f"Rule 'regex' has an invalid pattern: {e}") from e
    validators.RegexValidator(compiled)(str(value))


def alpha_dash(value, params, context):
    validators.validate_slug(str(value))


def ip(value, params, context):
    validators.validate_ipv46_address(str(value))


def date(value, params, context):
    try:
        parsed = parse_date(str(value)) or parse_datetime(str(value))
    except ValueError:
        parsed = None
    if parsed is None:
        raise ValidationError(forms.DateField.default_error_messages['invalid'], code='invalid')


def boolean(value, params, context):
    if value not in TRUE_VALUES and value not in FALSE_VALUES:
        raise ValidationError(_('“%(value)s” value must be either True or False.'), code='invalid', params={'value': value})


def same(value, params, context):
    _require_params(params, 1, 'same')
    other = params[0]
    if context.values.get(other) != value:
        raise ValidationError(
            _('The %(field)s and %(other)s fields must match.'),
            code='same',
            params={'field': context.field_name, 'other': other},
        )


def confirmed(value, params, context):
    same(value, [f"{context.field_name}_confirmation"], context)


RULES: Dict[str, RuleFunction] = {
    'required': required,
    'nullable': nullable,
    'email': email,
    'url': url,
    'numeric': numeric,
    'integer': integer,
    'min': min_rule,
    'max': max_rule,
    'between': between,
    'in': in_rule,
    'not_in': not_in,
    'regex': regex,
    'alpha_dash': alpha_dash,
    'ip': ip,
    'date': date,
    'boolean': boolean,
    'same': same,
    'confirmed': confirmed,
}

# Rules that run even when the value is empty
IMPLICIT_RULES = ('required',)
