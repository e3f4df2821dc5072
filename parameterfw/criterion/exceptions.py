"""Exceptions raised by selection criteria and the criteria registry.

Lookup misses are not errors: ``get_literal_value``, ``get_numerical_value``
and ``Criteria.get_selection_criterion`` return ``None``. The exceptions
below report configuration mistakes that callers are expected to surface.
"""

from __future__ import annotations

from typing import Iterable, Optional


class CriterionError(Exception):
    """Base exception for selection criterion errors."""

    pass


class UnknownMatchMethodError(CriterionError):
    """Raised when a rule asks for a match method the criterion doesn't offer."""

    def __init__(self, criterion_name: str, method: object, available: Iterable[str]):
        self.criterion_name = criterion_name
        self.method = method
        self.available = sorted(available)
        super().__init__(
            f"Unknown match method {method!r} for criterion '{criterion_name}'. "
            f"Available methods: {self.available}"
        )


class InvalidValueError(CriterionError, ValueError):
    """Raised when a value pair is rejected by a criterion."""

    def __init__(
        self,
        criterion_name: str,
        message: str,
        numerical_value: Optional[int] = None,
        literal_value: Optional[str] = None,
    ):
        self.criterion_name = criterion_name
        self.numerical_value = numerical_value
        self.literal_value = literal_value
        super().__init__(f"Criterion '{criterion_name}': {message}")


class CriterionAlreadyExistsError(CriterionError):
    """Raised when a criterion name is already registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Selection criterion already exists: {name}")


class CriterionNotFoundError(CriterionError, KeyError):
    """Raised when a criterion is required but not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Selection criterion not found: {name}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return self.args[0]
