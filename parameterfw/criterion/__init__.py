"""Selection criteria: state/value model and match engine.

This package implements:
- Criterion states, exclusive or inclusive (bit-field)
- Literal/numerical value pairs
- Match methods used by rules (Is, IsNot, Includes, Excludes)
- Change tracking
- The criteria registry and its XML export
"""

from .criteria import Criteria
from .criterion import Criterion, ExclusiveCriterion, InclusiveCriterion
from .exceptions import (
    CriterionAlreadyExistsError,
    CriterionError,
    CriterionNotFoundError,
    InvalidValueError,
    UnknownMatchMethodError,
)
from .interface import CriterionInterface
from .serialization import XmlSerializingContext, XmlSource, to_xml_string
from .types import CriterionKind, MatchMethod

__all__ = [
    # Registry
    "Criteria",
    # Criteria
    "Criterion",
    "CriterionInterface",
    "ExclusiveCriterion",
    "InclusiveCriterion",
    "CriterionKind",
    "MatchMethod",
    # Export
    "XmlSerializingContext",
    "XmlSource",
    "to_xml_string",
    # Errors
    "CriterionError",
    "UnknownMatchMethodError",
    "InvalidValueError",
    "CriterionAlreadyExistsError",
    "CriterionNotFoundError",
]
