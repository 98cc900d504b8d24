"""Validation system for record-validate.

This module provides the validator and its supporting pieces:

- **Validator**: validate(), check(), Validator - return lists of error messages
- **Runner**: run_validation(), validate_records(), validate_frame(), print_report()
- **Models**: FieldError, ValidationReport - structured validation results
- **Config**: Default message templates (import from .config)

Usage:
    >>> from record_validate.validation import validate
    >>> validate({"yards": 250})({"yards": [lambda y: y > 1000]})
    ['Invalid value for yards']

For implementation details:
    - See validation/runner.py for the evaluation pass
    - See validation/config.py for the default messages
"""

from __future__ import annotations

from record_validate.core.enums import FailureKind

from .models import FieldError, ValidationReport
from .runner import print_report, run_validation, validate_frame, validate_records
from .validator import Validator, check, validate

__all__ = [
    # Entry points
    "validate",
    "check",
    "Validator",
    # Runner functions
    "run_validation",
    "validate_records",
    "validate_frame",
    "print_report",
    # Data models
    "FieldError",
    "ValidationReport",
    # Enums
    "FailureKind",
]
