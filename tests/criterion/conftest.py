"""Shared fixtures for selection criterion tests."""

from __future__ import annotations

import pytest

from parameterfw.criterion import Criteria, ExclusiveCriterion, InclusiveCriterion
from parameterfw.settings import CriterionSettings


@pytest.fixture
def settings() -> CriterionSettings:
    """Default settings, independent of the environment."""
    return CriterionSettings(_env_file=None)


@pytest.fixture
def mode(settings: CriterionSettings) -> ExclusiveCriterion:
    """Exclusive criterion with {"A": 1, "B": 2}."""
    criterion = ExclusiveCriterion("Mode", settings=settings)
    criterion.add_value_pair(1, "A")
    criterion.add_value_pair(2, "B")
    return criterion


@pytest.fixture
def devices(settings: CriterionSettings) -> InclusiveCriterion:
    """Inclusive criterion with {"X": 1, "Y": 2, "Z": 4}."""
    criterion = InclusiveCriterion("Devices", settings=settings)
    criterion.add_value_pair(1, "X")
    criterion.add_value_pair(2, "Y")
    criterion.add_value_pair(4, "Z")
    return criterion


@pytest.fixture
def criteria(settings: CriterionSettings) -> Criteria:
    """Empty registry."""
    return Criteria(settings=settings)
