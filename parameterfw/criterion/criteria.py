"""Selection criteria registry.

The registry owns every criterion of a parameter framework instance. It is
filled once while the configuration is loaded, then consulted by clients
updating states and by the rule engine evaluating them.

Usage:
    criteria = Criteria()
    mode = criteria.create_exclusive_criterion("Mode")
    devices = criteria.create_inclusive_criterion("OutputDevices")

    assert criteria.get_selection_criterion("Mode") is mode
    assert criteria.get_selection_criterion("Missing") is None
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any, Iterator, Optional

from parameterfw.settings import CriterionSettings, get_settings

from .criterion import Criterion, ExclusiveCriterion, InclusiveCriterion
from .exceptions import CriterionAlreadyExistsError, CriterionNotFoundError
from .serialization import SELECTION_CRITERION_TAG, XmlSerializingContext, XmlSource, create_child
from .types import CriterionKind

logger = logging.getLogger(__name__)


class Criteria(XmlSource):
    """
    Registry of selection criteria, indexed by name.

    Criteria are kept in creation order, which is the order used by
    listings and exports.
    """

    def __init__(self, settings: Optional[CriterionSettings] = None):
        """
        Initialize an empty registry.

        Args:
            settings: Settings handed to every created criterion
                (default: process settings)
        """
        self._settings = settings if settings is not None else get_settings()
        self._criteria: dict[str, Criterion] = {}

    def __len__(self) -> int:
        return len(self._criteria)

    def __iter__(self) -> Iterator[Criterion]:
        return iter(list(self._criteria.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._criteria

    def names(self) -> list[str]:
        return list(self._criteria)

    # =========================================================================
    # Creation
    # =========================================================================

    def create_exclusive_criterion(
        self, name: str, logger: Optional[logging.Logger] = None
    ) -> Criterion:
        """
        Create and register an exclusive criterion.

        Raises:
            CriterionAlreadyExistsError: If the name is already registered
            ValueError: If the name is empty
        """
        return self._add(name, CriterionKind.EXCLUSIVE, logger)

    def create_inclusive_criterion(
        self, name: str, logger: Optional[logging.Logger] = None
    ) -> Criterion:
        """
        Create and register an inclusive criterion.

        Raises:
            CriterionAlreadyExistsError: If the name is already registered
            ValueError: If the name is empty
        """
        return self._add(name, CriterionKind.INCLUSIVE, logger)

    def _add(
        self, name: str, kind: CriterionKind, criterion_logger: Optional[logging.Logger]
    ) -> Criterion:
        if name in self._criteria:
            logger.warning(f"Refusing to create criterion '{name}': name already registered")
            raise CriterionAlreadyExistsError(name)

        criterion_class = InclusiveCriterion if kind.is_inclusive else ExclusiveCriterion
        criterion = criterion_class(name, logger=criterion_logger, settings=self._settings)
        self._criteria[name] = criterion
        logger.info(f"Created {kind.value.lower()} criterion '{name}'")
        return criterion

    # =========================================================================
    # Lookup
    # =========================================================================

    def get_selection_criterion(self, name: str) -> Optional[Criterion]:
        """Get a criterion by name, None if it isn't registered."""
        return self._criteria.get(name)

    def get_criterion(self, name: str) -> Criterion:
        """
        Get a criterion by name.

        Raises:
            CriterionNotFoundError: If the name isn't registered
        """
        criterion = self._criteria.get(name)
        if criterion is None:
            raise CriterionNotFoundError(name)
        return criterion

    def list_selection_criteria(self, with_type_info: bool, human_readable: bool) -> list[str]:
        """Formatted description of every criterion, in registry order."""
        return [
            criterion.get_formatted_description(with_type_info, human_readable)
            for criterion in self._criteria.values()
        ]

    # =========================================================================
    # Change tracking
    # =========================================================================

    def reset_modified_status(self) -> None:
        for criterion in self._criteria.values():
            criterion.reset_modified_status()

    def get_modified_criteria(self) -> list[Criterion]:
        """Criteria whose state changed since their last reset."""
        return [c for c in self._criteria.values() if c.has_been_modified()]

    # =========================================================================
    # Export
    # =========================================================================

    def to_xml(self, element: ET.Element, context: XmlSerializingContext) -> None:
        """Export one SelectionCriterion child per criterion."""
        for criterion in self._criteria.values():
            child = create_child(element, SELECTION_CRITERION_TAG)
            criterion.to_xml(child, context)

    def to_dict(self) -> dict[str, Any]:
        """Convert registry to dictionary."""
        return {"criteria": [criterion.to_dict() for criterion in self._criteria.values()]}

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], settings: Optional[CriterionSettings] = None
    ) -> "Criteria":
        """
        Create a registry from dictionary.

        Raises:
            CriterionAlreadyExistsError: If two entries share a name
            InvalidValueError: If a value pair is rejected
        """
        criteria = cls(settings=settings)
        for entry in data.get("criteria", []):
            if entry["name"] in criteria._criteria:
                raise CriterionAlreadyExistsError(entry["name"])
            criterion = Criterion.from_dict(entry, settings=criteria._settings)
            criteria._criteria[criterion.name] = criterion
        return criteria
