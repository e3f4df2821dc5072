"""Text rendering of criterion states, value pairs and descriptions."""

from __future__ import annotations

from .types import CriterionKind
from .value_pairs import ValuePairTable, iter_flags


def format_state(
    kind: CriterionKind,
    state: int,
    value_pairs: ValuePairTable,
    none_literal: str,
    delimiter: str,
) -> str:
    """Render a state with the literals of its criterion.

    Exclusive states render as their literal. Inclusive states render as the
    literals of the set bits, lowest bit first; a set bit without a literal
    renders as its decimal value. ``none_literal`` stands in for an exclusive
    state without a literal and for an empty inclusive state.
    """
    if kind is CriterionKind.EXCLUSIVE:
        literal = value_pairs.get_literal(state)
        return literal if literal is not None else none_literal

    parts = []
    for flag in iter_flags(state):
        literal = value_pairs.get_literal(flag)
        parts.append(literal if literal is not None else str(flag))
    return delimiter.join(parts) if parts else none_literal


def format_possible_values(kind: CriterionKind, value_pairs: ValuePairTable) -> str:
    """Render the value pairs as ``{literal = value, ...}``.

    Inclusive flags are listed by bit position and shown in hexadecimal.
    """
    if kind is CriterionKind.EXCLUSIVE:
        entries = [f"{literal} = {value}" for literal, value in value_pairs.items()]
    else:
        entries = [
            f"{literal} = {value & 0xFFFFFFFF:#x}"
            for literal, value in value_pairs.items_by_flag()
        ]
    return "{" + ", ".join(entries) + "}"


def append_title(text: str, title: str) -> str:
    """Append an underlined title block."""
    return text + "\n" + title + "\n" + "=" * len(title) + "\n"


def format_description(
    name: str,
    kind: CriterionKind,
    formatted_state: str,
    possible_values: str,
    with_type_info: bool,
    human_readable: bool,
) -> str:
    """Summarize a criterion for listings.

    Human readable::

        Mode = Normal

        (with type info)
        \\nMode:\\n=====\\nPossible states (Exclusive): {...}\\nCurrent state = Normal

    Machine oriented::

        Criterion name: Mode, type kind: Exclusive, current state: Normal, states: {...}
    """
    if human_readable:
        if with_type_info:
            description = append_title("", name + ":")
            description += f"Possible states ({kind.value}): {possible_values}\nCurrent state"
        else:
            description = name
        return f"{description} = {formatted_state}"

    description = f"Criterion name: {name}"
    if with_type_info:
        description += f", type kind: {kind.value}"
    description += f", current state: {formatted_state}"
    if with_type_info:
        description += f", states: {possible_values}"
    return description
