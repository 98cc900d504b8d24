"""record-validate: check records against per-field predicate rules.

``validate(values)(rules)`` returns the list of error messages for the fields
of ``values`` that are missing or fail their rule.
"""

__all__ = [
    "__version__",
    "validate",
    "check",
    "Validator",
    "Rule",
    "run_validation",
    "validate_records",
    "validate_frame",
    "print_report",
    "FieldError",
    "ValidationReport",
    "FailureKind",
    "setup_logging",
]

__version__ = "0.1.0"

from .core.rules import Rule
from .logging_config import setup_logging
from .validation import (
    FailureKind,
    FieldError,
    ValidationReport,
    Validator,
    check,
    print_report,
    run_validation,
    validate,
    validate_frame,
    validate_records,
)
