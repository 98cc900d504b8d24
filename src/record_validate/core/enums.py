"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class FailureKind(str, Enum):
    """Why a field failed validation.

    Values are strings to ease serialization into JSON reports.
    """

    MISSING = "missing"
    INVALID = "invalid"


__all__ = ["FailureKind"]
