"""Match strategies and their availability per criterion kind.

Each strategy compares the criterion's current state with the target state
given by a rule. Which strategies a criterion offers depends only on its
kind:

- Exclusive: ``Is``, ``IsNot``
- Inclusive: ``Is``, ``IsNot``, ``Includes``, ``Excludes``

``Is``/``IsNot`` compare the whole state, including for inclusive criteria
where the state is a bit-field.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from .types import CriterionKind, MatchMethod

# (current_state, target_state) -> matched
MatchStrategy = Callable[[int, int], bool]


def match_is(state: int, target: int) -> bool:
    """Current state equals the target."""
    return state == target


def match_is_not(state: int, target: int) -> bool:
    """Current state differs from the target."""
    return state != target


def match_includes(state: int, target: int) -> bool:
    """Every bit of the target is set in the current state."""
    return (state & target) == target


def match_excludes(state: int, target: int) -> bool:
    """No bit of the target is set in the current state."""
    return (state & target) == 0


_STRATEGIES: Mapping[MatchMethod, MatchStrategy] = MappingProxyType({
    MatchMethod.IS: match_is,
    MatchMethod.IS_NOT: match_is_not,
    MatchMethod.INCLUDES: match_includes,
    MatchMethod.EXCLUDES: match_excludes,
})

AVAILABLE_METHODS: Mapping[CriterionKind, frozenset[MatchMethod]] = MappingProxyType({
    CriterionKind.EXCLUSIVE: frozenset({MatchMethod.IS, MatchMethod.IS_NOT}),
    CriterionKind.INCLUSIVE: frozenset(MatchMethod),
})


def available_methods(kind: CriterionKind) -> frozenset[MatchMethod]:
    """Match methods offered by criteria of the given kind."""
    return AVAILABLE_METHODS[kind]


def get_strategy(method: MatchMethod) -> MatchStrategy:
    """Comparison function implementing a match method."""
    return _STRATEGIES[method]
