"""Criterion interface seen by the framework clients.

Clients update states and declare value pairs through this interface; the
rule engine only needs the read side and ``match``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class CriterionInterface(ABC):
    """Client-facing contract of a selection criterion."""

    @abstractmethod
    def set_criterion_state(self, state: int) -> None:
        """Overwrite the current state."""

    @abstractmethod
    def get_criterion_state(self) -> int:
        """Current state."""

    @abstractmethod
    def get_criterion_name(self) -> str:
        """Criterion name."""

    @abstractmethod
    def is_inclusive(self) -> bool:
        """True when the state is a set of flags."""

    @abstractmethod
    def add_value_pair(self, numerical_value: int, literal_value: str) -> None:
        """
        Associate a literal with a numerical value.

        Raises:
            InvalidValueError: If the criterion rejects the pair.
        """

    @abstractmethod
    def get_literal_value(self, numerical_value: int) -> Optional[str]:
        """Literal of a numerical value, None if unknown."""

    @abstractmethod
    def get_numerical_value(self, literal_value: str) -> Optional[int]:
        """Numerical value of a literal, None if unknown."""

    @abstractmethod
    def get_formatted_state(self) -> str:
        """Current state rendered with literals."""
