"""Validation data models.

This module defines core data structures for validation results:
- FieldError: One failing field and the message reported for it
- ValidationReport: Ordered failures from a single validation run
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import List

from record_validate.core.enums import FailureKind


@dataclass(frozen=True)
class FieldError:
    """A single failing field.

    Attributes:
        field: Name of the field whose rule failed.
        kind: ``FailureKind.MISSING`` if the record had no value for the field,
            ``FailureKind.INVALID`` if the predicate rejected the value.
        message: Custom rule message, or the default message for ``kind``.

    Examples:
        >>> FieldError(field="yards", kind=FailureKind.INVALID, message="Invalid value for yards")
    """

    field: str
    kind: FailureKind
    message: str

    def __post_init__(self) -> None:
        """Validate field constraints."""
        try:
            kind = FailureKind(self.kind)
        except ValueError as e:
            raise ValueError(
                f"Invalid kind: {self.kind}. Must be 'missing' or 'invalid'."
            ) from e
        object.__setattr__(self, "kind", kind)


@dataclass
class ValidationReport:
    """Ordered validation results for one record.

    Attributes:
        errors: Failures in rule-set order; passing fields have no entry.
        fields_checked: Every field named by the rule set, in rule-set order.

    Examples:
        >>> report = run_validation({"yards": 250}, {"yards": [lambda y: y > 1000]})
        >>> report.messages()
        ['Invalid value for yards']
        >>> report.is_valid()
        False
    """

    errors: List[FieldError] = field(default_factory=list)
    fields_checked: List[str] = field(default_factory=list)

    def messages(self) -> List[str]:
        """Return the error messages in rule-set order."""
        return [e.message for e in self.errors]

    def is_valid(self) -> bool:
        """True if no field failed."""
        return not self.errors

    def get_missing(self) -> List[FieldError]:
        """Failures caused by a field absent from the record."""
        return [e for e in self.errors if e.kind == FailureKind.MISSING]

    def get_invalid(self) -> List[FieldError]:
        """Failures caused by a predicate rejecting the value."""
        return [e for e in self.errors if e.kind == FailureKind.INVALID]

    def summary(self) -> str:
        """Generate a concise text summary of validation results.

        Examples:
            >>> print(report.summary())
            Validation Summary:
              Fields: 4 checked (1 passed, 3 failed)
              Issues: 0 missing, 3 invalid
        """
        total = len(self.fields_checked)
        failed = len(self.errors)
        return (
            f"Validation Summary:\n"
            f"  Fields: {total} checked ({total - failed} passed, {failed} failed)\n"
            f"  Issues: {len(self.get_missing())} missing, {len(self.get_invalid())} invalid"
        )

    def to_json(self) -> str:
        """Generate a JSON validation report.

        Returns:
            Formatted JSON string with a summary and the ordered failures.
        """
        report_data = {
            "summary": {
                "fields_checked": len(self.fields_checked),
                "passed": len(self.fields_checked) - len(self.errors),
                "missing": len(self.get_missing()),
                "invalid": len(self.get_invalid()),
            },
            "errors": [
                {"field": e.field, "kind": e.kind.value, "message": e.message}
                for e in self.errors
            ],
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)

    def to_console_summary(self) -> str:
        """Generate a summary for console output.

        Returns:
            The overall summary followed by one line per failing field.
        """
        lines = [self.summary(), ""]

        if self.is_valid():
            lines.append("✅ All fields passed validation!")
        else:
            lines.append("Field Details:")
            for error in self.errors:
                icon = "❓" if error.kind == FailureKind.MISSING else "❌"
                lines.append(f"{icon} {error.field} ({error.kind.value}): {error.message}")

        return "\n".join(lines)
