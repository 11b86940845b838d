"""Unit tests for Achievement Catalog (readrmood/gamification/catalog.py)"""
import pytest

from readrmood.exceptions import CatalogError
from readrmood.gamification.catalog import DEFAULT_CATALOG, AchievementCatalog
from readrmood.models.achievement import (
    AchievementDefinition,
    FirstMoodRule,
    NightSessionsRule,
    TotalSessionsRule,
)
from readrmood.models.activity import MoodKind


class TestDefaultCatalog:
    """Test the shipped catalog contents"""

    def test_has_fifteen_definitions(self):
        assert len(DEFAULT_CATALOG) == 15

    def test_catalog_order(self):
        assert DEFAULT_CATALOG.codes == [
            "first_steps",
            "tiny_habit",
            "weekly_flow",
            "page_turner_100",
            "deep_diver_500",
            "time_keeper_300",
            "marathon_reader_1200",
            "library_starter",
            "library_builder",
            "focus_burst",
            "night_owl",
            "weekend_reader",
            "mood_explorer",
            "zen_chapter",
            "laser_focus",
        ]

    def test_rules(self):
        assert DEFAULT_CATALOG.definition("first_steps").rule == TotalSessionsRule(min=1)
        assert DEFAULT_CATALOG.definition("night_owl").rule == NightSessionsRule(min=3, start_hour=23, end_hour=5)
        assert DEFAULT_CATALOG.definition("zen_chapter").rule == FirstMoodRule(kind=MoodKind.CALM)
        assert DEFAULT_CATALOG.definition("laser_focus").rule == FirstMoodRule(kind=MoodKind.FOCUSED)

    def test_total_points(self):
        assert DEFAULT_CATALOG.total_points() == 295


# ============================================================================
# Lookup Tests
# ============================================================================

def test_definition_lookup_by_code():
    """Test lookup returns the matching definition"""
    definition = DEFAULT_CATALOG.definition("focus_burst")

    assert definition is not None
    assert definition.title == "Focus Burst"
    assert definition.points == 20


def test_definition_unknown_code_returns_none():
    """Test unknown codes are absent rather than an error"""
    assert DEFAULT_CATALOG.definition("does_not_exist") is None
    assert "does_not_exist" not in DEFAULT_CATALOG
    assert "first_steps" in DEFAULT_CATALOG


# ============================================================================
# Initial State Tests
# ============================================================================

def test_initial_state_all_locked_in_order():
    """Test the bootstrap state mirrors the catalog, all locked"""
    state = DEFAULT_CATALOG.initial_state()

    assert [a.code for a in state] == DEFAULT_CATALOG.codes
    assert all(not a.is_unlocked for a in state)
    assert all(a.unlocked_at is None for a in state)


def test_initial_state_copies_title_and_detail():
    """Test titles and details carry over to the state records"""
    state = DEFAULT_CATALOG.initial_state()

    for achievement, definition in zip(state, DEFAULT_CATALOG):
        assert achievement.title == definition.title
        assert achievement.description == definition.detail


# ============================================================================
# Construction Tests
# ============================================================================

def test_duplicate_codes_rejected():
    """Test a catalog cannot hold the same code twice"""
    definition = AchievementDefinition(
        code="dup",
        title="Dup",
        detail="Duplicate",
        rule=TotalSessionsRule(min=1),
        icon="star",
    )

    with pytest.raises(CatalogError) as exc_info:
        AchievementCatalog([definition, definition])

    assert exc_info.value.codes == ["dup"]
    assert exc_info.value.to_dict()["context"] == {"codes": ["dup"]}


def test_empty_catalog():
    """Test an empty catalog produces empty state"""
    catalog = AchievementCatalog([])

    assert len(catalog) == 0
    assert catalog.initial_state() == []
