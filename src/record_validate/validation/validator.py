"""Public validator entry points.

Three spellings of the same check, all returning the list of error messages:

- ``validate(values)(rules)``: curried form
- ``check(values, rules)``: two-argument form
- ``Validator(values).check(rules)``: builder form, reusable across rule sets
"""

from __future__ import annotations

from typing import Any, Callable, List, Mapping

from .runner import run_validation

RuleSet = Mapping[str, Any]


def check(values: Any, rules: RuleSet) -> List[str]:
    """Check ``values`` against ``rules`` and return the error messages.

    Args:
        values: Mapping of field name to value (or an object with instance attributes).
        rules: Mapping of field name to ``(predicate, message?)`` rule.

    Returns:
        One message per failing field, in the rule set's key order.

    Examples:
        >>> check({"yards": 250}, {"yards": [lambda y: y > 1000, "incorrect yardage"]})
        ['incorrect yardage']
        >>> check({}, {"yards": [lambda y: y > 1000]})
        ["No value for 'yards'"]
    """
    return run_validation(values, rules).messages()


def validate(values: Any) -> Callable[[RuleSet], List[str]]:
    """Curried validator: ``validate(values)(rules)``.

    Examples:
        >>> validate({"number": 11})({"number": [lambda n: n == 12, "wrong number"]})
        ['wrong number']
    """

    def _against(rules: RuleSet) -> List[str]:
        return check(values, rules)

    return _against


class Validator:
    """Holds a record and checks it against any number of rule sets."""

    def __init__(self, values: Any) -> None:
        self.values = values

    def check(self, rules: RuleSet) -> List[str]:
        """Return the error messages for ``rules``."""
        return check(self.values, rules)

    def __call__(self, rules: RuleSet) -> List[str]:
        return self.check(rules)

    def __repr__(self) -> str:
        return f"Validator({self.values!r})"
