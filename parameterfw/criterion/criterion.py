"""
Selection criterion: a named piece of system state used to select settings.

A criterion holds an int32 state, the literals naming its possible values,
and a modification counter for change detection. Its kind decides how the
state is read:

1. Exclusive: the state is exactly one value of the vocabulary.
2. Inclusive: the state is a bit-field, each literal names one flag.

Usage:
    mode = ExclusiveCriterion("Mode")
    mode.add_value_pair(0, "Normal")
    mode.add_value_pair(1, "InCall")
    mode.set_criterion_state(1)
    assert mode.get_formatted_state() == "InCall"
    assert mode.match("Is", 1)

    devices = InclusiveCriterion("OutputDevices")
    devices.add_value_pair(0x1, "Speaker")
    devices.add_value_pair(0x2, "Headset")
    devices.set_criterion_state(0x3)
    assert devices.get_formatted_state() == "Speaker|Headset"
    assert devices.match("Includes", 0x2)
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any, Optional, Union

from parameterfw.settings import CriterionSettings, get_settings

from .exceptions import InvalidValueError, UnknownMatchMethodError
from .formatting import format_description, format_possible_values, format_state
from .interface import CriterionInterface
from .match import available_methods, get_strategy
from .serialization import VALUE_PAIR_TAG, XmlSerializingContext, XmlSource, create_child
from .types import CriterionKind, MatchMethod
from .value_pairs import ValuePairTable, fits_32_bits, is_flag, iter_flags, to_int32


class Criterion(XmlSource, CriterionInterface):
    """
    Criterion used to apply rules based on system state.

    Attributes:
        name: Criterion name, immutable
        kind: CriterionKind, immutable
        state: Current int32 state
        modification_count: Number of state changes since the last reset
    """

    def __init__(
        self,
        name: str,
        kind: CriterionKind = CriterionKind.EXCLUSIVE,
        logger: Optional[logging.Logger] = None,
        settings: Optional[CriterionSettings] = None,
    ):
        """
        Initialize a criterion with state 0 and no value pairs.

        Args:
            name: Criterion name
            kind: Exclusive (default) or inclusive
            logger: Logger for state change events (default: module logger)
            settings: Formatting settings (default: process settings)
        """
        if not name:
            raise ValueError("Criterion name must not be empty")
        self._name = name
        self._kind = CriterionKind(kind)
        self._logger = logger if logger is not None else logging.getLogger(__name__)
        self._settings = settings if settings is not None else get_settings()
        self._value_pairs = ValuePairTable()
        self._state = 0
        self._modification_count = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, state={self._state})"

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> CriterionKind:
        return self._kind

    @property
    def state(self) -> int:
        return self._state

    @property
    def modification_count(self) -> int:
        return self._modification_count

    @property
    def value_pairs(self) -> dict[str, int]:
        """Copy of the value pairs, literal -> numerical, in insertion order."""
        return self._value_pairs.to_dict()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def set_criterion_state(self, state: int) -> None:
        """
        Overwrite the current state.

        The state isn't checked against the value pairs. Values are wrapped
        to int32. Only an actual change counts as a modification.
        """
        state = to_int32(state)
        changed = state != self._state
        self._state = state
        if not changed:
            return
        self._modification_count += 1
        if self._settings.log_state_changes:
            self._logger.info(
                f"Selection criterion changed event: "
                f"{self.get_formatted_description(False, False)}"
            )

    def get_criterion_state(self) -> int:
        return self._state

    def get_criterion_name(self) -> str:
        return self._name

    def is_inclusive(self) -> bool:
        return self._kind.is_inclusive

    def has_been_modified(self) -> bool:
        return self._modification_count != 0

    def reset_modified_status(self) -> None:
        self._modification_count = 0

    # ------------------------------------------------------------------
    # Value pairs
    # ------------------------------------------------------------------

    def add_value_pair(self, numerical_value: int, literal_value: str) -> None:
        """
        Associate a literal with a numerical value.

        Exclusive criteria accept any pair, wrapping the value to int32;
        registering a literal again replaces its value. Inclusive criteria
        require a single-bit 32-bit value that no other literal uses.

        Raises:
            InvalidValueError: If an inclusive criterion rejects the value
                or the literal.
        """
        if self._kind is CriterionKind.INCLUSIVE:
            self._check_inclusive_pair(numerical_value, literal_value)
        numerical_value = to_int32(numerical_value)

        self._value_pairs.add(literal_value, numerical_value)
        self._logger.debug(f"Criterion '{self._name}': added value pair {literal_value} = {numerical_value}")

    def _check_inclusive_pair(self, numerical_value: int, literal_value: str) -> None:
        if not literal_value:
            raise InvalidValueError(
                self._name, "literal value must not be empty", numerical_value, literal_value
            )
        if not fits_32_bits(numerical_value):
            raise InvalidValueError(
                self._name,
                f"inclusive value {numerical_value} for {literal_value!r} is out of 32-bit range",
                numerical_value,
                literal_value,
            )
        delimiter = self._settings.inclusive_delimiter
        if delimiter in literal_value:
            raise InvalidValueError(
                self._name,
                f"literal {literal_value!r} contains the flag delimiter {delimiter!r}",
                numerical_value,
                literal_value,
            )
        if literal_value == self._settings.none_literal:
            raise InvalidValueError(
                self._name,
                f"literal {literal_value!r} is reserved for the empty state",
                numerical_value,
                literal_value,
            )
        if not is_flag(numerical_value):
            raise InvalidValueError(
                self._name,
                f"inclusive value {numerical_value} for {literal_value!r} is not a power of two",
                numerical_value,
                literal_value,
            )
        owner = self._value_pairs.get_literal(to_int32(numerical_value))
        if owner is not None:
            raise InvalidValueError(
                self._name,
                f"inclusive value {numerical_value} for {literal_value!r} "
                f"is already used by {owner!r}",
                numerical_value,
                literal_value,
            )

    def get_literal_value(self, numerical_value: int) -> Optional[str]:
        return self._value_pairs.get_literal(to_int32(numerical_value))

    def get_numerical_value(self, literal_value: str) -> Optional[int]:
        """
        Numerical value of a literal, None if unknown.

        Inclusive criteria also accept delimiter-joined literals
        (``"Speaker|Headset"``) and the empty-state placeholder.
        """
        if self._kind is CriterionKind.EXCLUSIVE:
            return self._value_pairs.get_numerical(literal_value)

        if literal_value == self._settings.none_literal:
            return 0
        value = 0
        for part in literal_value.split(self._settings.inclusive_delimiter):
            flag = self._value_pairs.get_numerical(part)
            if flag is None:
                return None
            value |= flag
        return to_int32(value)

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def match(self, method: Union[MatchMethod, str], state: int) -> bool:
        """
        Match the current state against ``state`` with the given method.

        Args:
            method: MatchMethod or its rule name ("Is", "Includes", ...)
            state: Target state

        Returns:
            True if the current state satisfies the method

        Raises:
            UnknownMatchMethodError: If the method doesn't exist or isn't
                offered by this criterion's kind
        """
        resolved = self._resolve_match_method(method)
        return get_strategy(resolved)(self._state, to_int32(state))

    def is_match_method_available(self, method: Union[MatchMethod, str]) -> bool:
        resolved = MatchMethod.parse(method)
        return resolved is not None and resolved in available_methods(self._kind)

    def _resolve_match_method(self, method: Union[MatchMethod, str]) -> MatchMethod:
        available = available_methods(self._kind)
        resolved = MatchMethod.parse(method)
        if resolved is None or resolved not in available:
            raise UnknownMatchMethodError(self._name, method, [m.value for m in available])
        return resolved

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def get_formatted_state(self) -> str:
        return format_state(
            self._kind,
            self._state,
            self._value_pairs,
            self._settings.none_literal,
            self._settings.inclusive_delimiter,
        )

    def list_possible_values(self) -> str:
        """List the values this criterion can take, e.g. ``{Normal = 0, InCall = 1}``."""
        return format_possible_values(self._kind, self._value_pairs)

    def get_formatted_description(self, with_type_info: bool, human_readable: bool) -> str:
        return format_description(
            self._name,
            self._kind,
            self.get_formatted_state(),
            self.list_possible_values(),
            with_type_info,
            human_readable,
        )

    def _unnamed_state_parts(self) -> list[int]:
        """State values that have no literal. The default state 0 is never reported."""
        if self._kind is CriterionKind.EXCLUSIVE:
            if self._state == 0 or self._value_pairs.has_numerical(self._state):
                return []
            return [self._state]
        return [flag for flag in iter_flags(self._state) if not self._value_pairs.has_numerical(flag)]

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_xml(self, element: ET.Element, context: XmlSerializingContext) -> None:
        """Export name, kind, current state and value pairs."""
        element.set("Name", self._name)
        element.set("Kind", self._kind.value)
        if context.with_state:
            element.set("CurrentState", self.get_formatted_state())
            for value in self._unnamed_state_parts():
                context.append_error(
                    f"Criterion '{self._name}': state value {value} has no literal"
                )
        for literal, value in self._value_pairs.items():
            pair = create_child(element, VALUE_PAIR_TAG)
            pair.set("Literal", literal)
            pair.set("Numerical", str(value))

    def to_dict(self) -> dict[str, Any]:
        """Convert criterion to dictionary."""
        return {
            "name": self._name,
            "kind": self._kind.value,
            "state": self._state,
            "value_pairs": self._value_pairs.to_dict(),
        }

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        logger: Optional[logging.Logger] = None,
        settings: Optional[CriterionSettings] = None,
    ) -> "Criterion":
        """
        Create a criterion from dictionary.

        Value pairs go through ``add_value_pair``; the state is restored
        without counting as a modification.

        Raises:
            InvalidValueError: If a value pair is rejected
        """
        kind = CriterionKind(data.get("kind", CriterionKind.EXCLUSIVE.value))
        criterion_class = InclusiveCriterion if kind.is_inclusive else ExclusiveCriterion
        criterion = criterion_class(data["name"], logger=logger, settings=settings)
        for literal, value in data.get("value_pairs", {}).items():
            criterion.add_value_pair(value, literal)
        criterion._state = to_int32(data.get("state", 0))
        return criterion


class ExclusiveCriterion(Criterion):
    """Criterion whose state is one value of its vocabulary."""

    def __init__(
        self,
        name: str,
        logger: Optional[logging.Logger] = None,
        settings: Optional[CriterionSettings] = None,
    ):
        super().__init__(name, CriterionKind.EXCLUSIVE, logger=logger, settings=settings)


class InclusiveCriterion(Criterion):
    """Criterion whose state is a set of flags."""

    def __init__(
        self,
        name: str,
        logger: Optional[logging.Logger] = None,
        settings: Optional[CriterionSettings] = None,
    ):
        super().__init__(name, CriterionKind.INCLUSIVE, logger=logger, settings=settings)
