"""Validation runner.

This module holds the single evaluation pass every entry point goes through:
- run_validation(): Checks one record against a rule set, returns ValidationReport
- validate_records(): Applies run_validation() to many records
- validate_frame(): Applies run_validation() to each row of a DataFrame
- print_report(): Displays validation results to console

Predicates are called without any exception handling: an exception raised by
a predicate reaches the caller unchanged.
"""

from __future__ import annotations

import logging
from collections import ChainMap
from typing import Any, Iterable, List, Mapping

import pandas as pd

from record_validate.core.enums import FailureKind
from record_validate.core.rules import normalize_rules
from .config import get_default_message
from .models import FieldError, ValidationReport

logger = logging.getLogger(__name__)


def _own_fields(values: Any) -> Mapping[str, Any]:
    """Return the mapping holding the record's own fields.

    A ``ChainMap`` only owns the keys of its first map. A pandas ``Series``
    (such as a row from ``DataFrame.iterrows()``) owns its index labels. A plain
    object owns its instance attributes, not attributes inherited from its class.
    """
    if isinstance(values, pd.Series):
        return values.to_dict()
    if isinstance(values, ChainMap):
        return values.maps[0]
    if isinstance(values, Mapping):
        return values
    try:
        return vars(values)
    except TypeError as e:
        raise TypeError(
            f"Values must be a mapping or an object with instance attributes, "
            f"got {type(values).__name__}"
        ) from e


def run_validation(values: Any, rules: Mapping[str, Any]) -> ValidationReport:
    """Check a record against a rule set.

    Rules are evaluated in the rule set's key order, without stopping at the
    first failure. A field with a value is passed to its predicate; a falsy
    result records the rule's message or ``"Invalid value for <field>"``. A
    field without a value records the rule's message or
    ``"No value for '<field>'"``.

    Args:
        values: Mapping of field name to value, a pandas Series, or an object
            whose instance attributes are the fields.
        rules: Mapping of field name to rule (see ``record_validate.core.rules``).

    Returns:
        ValidationReport with one FieldError per failing field.

    Raises:
        TypeError: If a rule is malformed or ``values`` has no own fields.
        Exception: Whatever a predicate raises, unchanged.

    Examples:
        >>> report = run_validation({"yards": 250}, {"yards": [lambda y: y > 1000]})
        >>> report.messages()
        ['Invalid value for yards']
    """
    normalized = normalize_rules(rules)
    fields = _own_fields(values)

    errors: List[FieldError] = []
    for field, rule in normalized.items():
        if field not in fields:
            kind = FailureKind.MISSING
        elif not rule.predicate(fields[field]):
            kind = FailureKind.INVALID
        else:
            continue
        errors.append(
            FieldError(
                field=field,
                kind=kind,
                message=rule.failure_message(get_default_message(kind, field)),
            )
        )

    logger.debug("Validated %d fields: %d failed", len(normalized), len(errors))
    return ValidationReport(errors=errors, fields_checked=list(normalized))


def validate_records(
    records: Iterable[Any], rules: Mapping[str, Any]
) -> List[List[str]]:
    """Validate many records against the same rule set.

    Returns:
        One list of error messages per record, in input order.
    """
    return [run_validation(record, rules).messages() for record in records]


def validate_frame(df: pd.DataFrame, rules: Mapping[str, Any]) -> pd.Series:
    """Validate each row of a DataFrame.

    Each row is a record whose fields are the frame's columns. Missing cells
    (NaN/None) count as present and are passed to the predicate as they are.

    Args:
        df: DataFrame with one record per row.
        rules: Mapping of column name to rule.

    Returns:
        Series named "errors" holding one list of messages per row, indexed like ``df``.

    Examples:
        >>> df = pd.DataFrame({"yards": [250, 1200]})
        >>> validate_frame(df, {"yards": [lambda y: y > 1000]}).tolist()
        [['Invalid value for yards'], []]
    """
    rows = df.to_dict(orient="records")
    results = [run_validation(row, rules).messages() for row in rows]
    logger.debug(
        "Validated %d rows: %d with errors", len(results), sum(1 for r in results if r)
    )
    return pd.Series(results, index=df.index, name="errors", dtype=object)


def print_report(report: ValidationReport) -> None:
    """Print validation report to console.

    Args:
        report: ValidationReport to display.

    Examples:
        >>> print_report(run_validation({"yards": 250}, {"yards": [lambda y: y > 1000]}))
        Validation Summary:
          Fields: 1 checked (0 passed, 1 failed)
          Issues: 0 missing, 1 invalid
        <BLANKLINE>
        Field Details:
        ❌ yards (invalid): Invalid value for yards
    """
    print(report.to_console_summary())
