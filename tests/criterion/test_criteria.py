"""Tests for the Criteria registry."""

from __future__ import annotations

import logging

import pytest

from parameterfw.criterion import (
    Criteria,
    CriterionAlreadyExistsError,
    CriterionError,
    CriterionNotFoundError,
    ExclusiveCriterion,
    InclusiveCriterion,
    InvalidValueError,
)
from parameterfw.settings import CriterionSettings


@pytest.fixture
def populated(criteria: Criteria) -> Criteria:
    """Registry with interleaved exclusive and inclusive criteria."""
    mode = criteria.create_exclusive_criterion("Mode")
    mode.add_value_pair(0, "Normal")
    mode.add_value_pair(1, "InCall")
    devices = criteria.create_inclusive_criterion("Devices")
    devices.add_value_pair(1, "Speaker")
    devices.add_value_pair(2, "Headset")
    criteria.create_exclusive_criterion("Ringer")
    return criteria


# =============================================================================
# Creation Tests
# =============================================================================


class TestCriteriaCreation:
    """Tests for creating criteria."""

    def test_create_exclusive(self, criteria):
        criterion = criteria.create_exclusive_criterion("Mode")
        assert isinstance(criterion, ExclusiveCriterion)
        assert criterion.is_inclusive() is False
        assert "Mode" in criteria

    def test_create_inclusive(self, criteria):
        criterion = criteria.create_inclusive_criterion("Devices")
        assert isinstance(criterion, InclusiveCriterion)
        assert criterion.is_inclusive() is True

    def test_duplicate_name_rejected(self, criteria):
        original = criteria.create_exclusive_criterion("Mode")
        with pytest.raises(CriterionAlreadyExistsError) as exc_info:
            criteria.create_inclusive_criterion("Mode")
        assert exc_info.value.name == "Mode"
        assert criteria.get_selection_criterion("Mode") is original
        assert len(criteria) == 1

    def test_duplicate_name_logged(self, criteria, caplog):
        criteria.create_exclusive_criterion("Mode")
        with caplog.at_level(logging.WARNING):
            with pytest.raises(CriterionAlreadyExistsError):
                criteria.create_exclusive_criterion("Mode")
        assert "Refusing to create criterion 'Mode'" in caplog.text

    def test_creation_logged(self, criteria, caplog):
        with caplog.at_level(logging.INFO):
            criteria.create_inclusive_criterion("Devices")
        assert "Created inclusive criterion 'Devices'" in caplog.text

    def test_empty_name_rejected(self, criteria):
        with pytest.raises(ValueError):
            criteria.create_exclusive_criterion("")
        assert len(criteria) == 0

    def test_errors_share_base_class(self):
        assert issubclass(CriterionAlreadyExistsError, CriterionError)
        assert issubclass(CriterionNotFoundError, CriterionError)

    def test_criterion_logger(self, criteria, caplog):
        custom = logging.getLogger("audio.policy")
        criterion = criteria.create_exclusive_criterion("Mode", logger=custom)
        caplog.set_level(logging.INFO, logger="audio.policy")
        criterion.set_criterion_state(1)
        assert any(record.name == "audio.policy" for record in caplog.records)

    def test_registry_settings_shared(self):
        criteria = Criteria(settings=CriterionSettings(_env_file=None, inclusive_delimiter=","))
        devices = criteria.create_inclusive_criterion("Devices")
        devices.add_value_pair(1, "Speaker")
        devices.add_value_pair(2, "Headset")
        devices.set_criterion_state(3)
        assert devices.get_formatted_state() == "Speaker,Headset"


# =============================================================================
# Lookup Tests
# =============================================================================


class TestCriteriaLookup:
    """Tests for looking criteria up."""

    def test_get_selection_criterion(self, populated):
        criterion = populated.get_selection_criterion("Devices")
        assert criterion is not None
        assert criterion.get_criterion_name() == "Devices"

    def test_get_selection_criterion_missing(self, populated):
        assert populated.get_selection_criterion("Missing") is None

    def test_get_criterion(self, populated):
        assert populated.get_criterion("Mode").get_criterion_name() == "Mode"

    def test_get_criterion_missing(self, populated):
        with pytest.raises(CriterionNotFoundError) as exc_info:
            populated.get_criterion("Missing")
        assert str(exc_info.value) == "Selection criterion not found: Missing"

    def test_get_criterion_missing_is_key_error(self, populated):
        with pytest.raises(KeyError):
            populated.get_criterion("Missing")

    def test_handles_are_live(self, populated):
        """A returned criterion is the registered one, not a copy."""
        populated.get_selection_criterion("Mode").set_criterion_state(1)
        assert populated.get_criterion("Mode").get_formatted_state() == "InCall"

    def test_container_protocol(self, populated):
        assert len(populated) == 3
        assert populated.names() == ["Mode", "Devices", "Ringer"]
        assert [c.get_criterion_name() for c in populated] == ["Mode", "Devices", "Ringer"]
        assert "Ringer" in populated
        assert "Missing" not in populated


# =============================================================================
# Listing Tests
# =============================================================================


class TestCriteriaListing:
    """Tests for list_selection_criteria."""

    def test_one_entry_per_criterion(self, populated):
        assert len(populated.list_selection_criteria(True, True)) == 3

    def test_machine_listing(self, populated):
        populated.get_criterion("Devices").set_criterion_state(2)
        assert populated.list_selection_criteria(False, False) == [
            "Criterion name: Mode, current state: Normal",
            "Criterion name: Devices, current state: Headset",
            "Criterion name: Ringer, current state: <none>",
        ]

    def test_human_listing(self, populated):
        assert populated.list_selection_criteria(False, True) == [
            "Mode = Normal",
            "Devices = <none>",
            "Ringer = <none>",
        ]

    def test_listing_with_type_info(self, populated):
        listing = populated.list_selection_criteria(True, False)
        assert listing[0].startswith("Criterion name: Mode, type kind: Exclusive")
        assert listing[1].startswith("Criterion name: Devices, type kind: Inclusive")

    def test_empty_registry(self, criteria):
        assert criteria.list_selection_criteria(True, True) == []


# =============================================================================
# Change Tracking Tests
# =============================================================================


class TestCriteriaChangeTracking:
    """Tests for registry-wide modification status."""

    def test_get_modified_criteria(self, populated):
        populated.get_criterion("Ringer").set_criterion_state(1)
        populated.get_criterion("Mode").set_criterion_state(1)
        assert [c.get_criterion_name() for c in populated.get_modified_criteria()] == [
            "Mode",
            "Ringer",
        ]

    def test_reset_modified_status(self, populated):
        for criterion in populated:
            criterion.set_criterion_state(1)
        populated.reset_modified_status()
        assert populated.get_modified_criteria() == []
        assert all(c.get_criterion_state() == 1 for c in populated)


# =============================================================================
# Dict Tests
# =============================================================================


class TestCriteriaDict:
    """Tests for registry snapshots."""

    def test_to_dict(self, populated):
        data = populated.to_dict()
        assert [entry["name"] for entry in data["criteria"]] == ["Mode", "Devices", "Ringer"]
        assert data["criteria"][1]["kind"] == "Inclusive"

    def test_from_dict(self, populated, settings):
        populated.get_criterion("Devices").set_criterion_state(3)
        restored = Criteria.from_dict(populated.to_dict(), settings=settings)
        assert restored.list_selection_criteria(True, False) == (
            populated.list_selection_criteria(True, False)
        )
        assert restored.get_modified_criteria() == []

    def test_from_dict_duplicate_name(self, settings):
        data = {"criteria": [{"name": "Mode"}, {"name": "Mode", "kind": "Inclusive"}]}
        with pytest.raises(CriterionAlreadyExistsError):
            Criteria.from_dict(data, settings=settings)

    def test_from_dict_invalid_flag(self, settings):
        data = {"criteria": [{"name": "Devices", "kind": "Inclusive", "value_pairs": {"W": 0}}]}
        with pytest.raises(InvalidValueError):
            Criteria.from_dict(data, settings=settings)
