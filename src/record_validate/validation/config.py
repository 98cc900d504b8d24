"""Validation configuration constants.

This module centralizes the default failure messages. The two templates are
kept verbatim for compatibility with existing consumers, including the
quoting of the field name in the "no value" message only.

Failure Kinds:
    - "missing": The field has a rule but no value in the record
    - "invalid": The field has a value that fails its predicate
"""

from __future__ import annotations

from record_validate.core.enums import FailureKind

# ============================================================================
# DEFAULT MESSAGE TEMPLATES
# ============================================================================

MISSING_VALUE_TEMPLATE = "No value for '{field}'"
INVALID_VALUE_TEMPLATE = "Invalid value for {field}"

_TEMPLATE_MAP = {
    FailureKind.MISSING: MISSING_VALUE_TEMPLATE,
    FailureKind.INVALID: INVALID_VALUE_TEMPLATE,
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_default_message(kind: FailureKind, field: str) -> str:
    """Get the default message for a failure kind.

    Args:
        kind: Failure kind (``FailureKind`` member or its string value).
        field: Field name interpolated into the template.

    Returns:
        The formatted default message.

    Raises:
        ValueError: If ``kind`` is not a known failure kind.

    Examples:
        >>> get_default_message(FailureKind.MISSING, "yards")
        "No value for 'yards'"
        >>> get_default_message("invalid", "yards")
        'Invalid value for yards'
    """
    try:
        template = _TEMPLATE_MAP[FailureKind(kind)]
    except ValueError as e:
        raise ValueError(f"Unknown failure kind: {kind}") from e
    return template.format(field=field)
