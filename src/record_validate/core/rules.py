"""Rule type and normalization of the accepted rule spellings.

A rule pairs a predicate with an optional failure message. Callers may write
rules as ``Rule`` instances, as ``(predicate,)`` / ``(predicate, message)``
tuples or lists, or as a bare callable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

Predicate = Callable[[Any], Any]


@dataclass(frozen=True)
class Rule:
    """A predicate and the message reported when it fails.

    Attributes:
        predicate: Callable receiving the field value. Its result is used for
            truthiness only.
        message: Message reported when the predicate fails or the field is
            absent. ``None`` or an empty string selects the default message.

    Examples:
        >>> rule = Rule(lambda n: n == 12, "wrong number")
        >>> rule.failure_message("Invalid value for number")
        'wrong number'
    """

    predicate: Predicate
    message: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if not callable(self.predicate):
            raise TypeError(
                f"Rule predicate must be callable, got {type(self.predicate).__name__}"
            )
        if self.message is not None and not isinstance(self.message, str):
            raise TypeError(
                f"Rule message must be a string or None, got {type(self.message).__name__}"
            )

    def failure_message(self, default: str) -> str:
        """Return the custom message, or ``default`` when none was given."""
        return self.message or default


def as_rule(definition: Any, field: str = "<unknown>") -> Rule:
    """Convert one rule spelling into a ``Rule``.

    Args:
        definition: A ``Rule``, a 1- or 2-item tuple/list, or a callable.
        field: Field name, used in error messages only.

    Returns:
        The normalized ``Rule``.

    Raises:
        TypeError: If ``definition`` is not a recognized rule spelling.
    """
    if isinstance(definition, Rule):
        return definition
    if isinstance(definition, (tuple, list)):
        if len(definition) not in (1, 2):
            raise TypeError(
                f"Rule for '{field}' must have 1 or 2 items (predicate, message), "
                f"got {len(definition)}"
            )
        return Rule(*definition)
    if callable(definition):
        return Rule(definition)
    raise TypeError(
        f"Rule for '{field}' must be a Rule, a (predicate, message) pair or a callable, "
        f"got {type(definition).__name__}"
    )


def normalize_rules(rules: Mapping[str, Any]) -> Dict[str, Rule]:
    """Normalize every entry of a rule set, keeping its key order."""
    if not isinstance(rules, Mapping):
        raise TypeError(f"Rule set must be a mapping, got {type(rules).__name__}")
    return {field: as_rule(definition, field) for field, definition in rules.items()}


__all__ = ["Predicate", "Rule", "as_rule", "normalize_rules"]
