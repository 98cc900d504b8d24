"""Core types shared by the validator: rules and enumerations."""

from .enums import FailureKind
from .rules import Rule, as_rule, normalize_rules

__all__ = [
    "FailureKind",
    "Rule",
    "as_rule",
    "normalize_rules",
]
