"""Enumerations shared by criteria: the criterion kind and match methods."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class CriterionKind(str, Enum):
    """Interpretation of a criterion's integer state."""

    EXCLUSIVE = "Exclusive"
    INCLUSIVE = "Inclusive"

    @property
    def is_inclusive(self) -> bool:
        """Check if the state is read as a set of flags."""
        return self is CriterionKind.INCLUSIVE


class MatchMethod(str, Enum):
    """Comparison methods a rule can apply to a criterion.

    The value is the name used in rule expressions.
    """

    IS = "Is"
    IS_NOT = "IsNot"
    INCLUDES = "Includes"
    EXCLUDES = "Excludes"

    @classmethod
    def parse(cls, name: object) -> Optional["MatchMethod"]:
        """Resolve a method name (or member) to a MatchMethod, None if unknown."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return None
