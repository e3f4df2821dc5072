"""XML serialization boundary for criteria.

Criteria don't own a document: the caller hands them an
``xml.etree.ElementTree.Element`` and an ``XmlSerializingContext`` and they
fill in attributes and children.

Emitted layout::

    <SelectionCriteria>
      <SelectionCriterion Name="Mode" Kind="Exclusive" CurrentState="Normal">
        <ValuePair Literal="Normal" Numerical="0"/>
        <ValuePair Literal="InCall" Numerical="1"/>
      </SelectionCriterion>
    </SelectionCriteria>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

SELECTION_CRITERIA_TAG = "SelectionCriteria"
SELECTION_CRITERION_TAG = "SelectionCriterion"
VALUE_PAIR_TAG = "ValuePair"


@dataclass
class XmlSerializingContext:
    """
    Options and diagnostics shared across one export.

    Attributes:
        with_state: Whether current states are exported along with the
            value pairs.
        errors: Problems met while exporting. Export never stops on them.
    """

    with_state: bool = True
    errors: list[str] = field(default_factory=list)

    def append_error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


class XmlSource(ABC):
    """Something that can describe itself into an XML element."""

    @abstractmethod
    def to_xml(self, element: ET.Element, context: XmlSerializingContext) -> None:
        """Fill ``element`` with this object's attributes and children."""


def create_child(element: ET.Element, tag: str) -> ET.Element:
    return ET.SubElement(element, tag)


def to_xml_string(
    source: XmlSource,
    root_tag: str,
    context: XmlSerializingContext | None = None,
) -> str:
    """Export a source under a new root element and render it as text."""
    root = ET.Element(root_tag)
    source.to_xml(root, context if context is not None else XmlSerializingContext())
    return ET.tostring(root, encoding="unicode")
