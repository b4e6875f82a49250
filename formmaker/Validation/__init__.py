"""
Validation service: rule descriptors executed with Django validators.
"""
from .Validator import Validator, normalize_rules, parse_rule, rule_names
from .rules import RULES, RuleContext, is_empty
