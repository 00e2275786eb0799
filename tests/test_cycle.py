"""Tests for the inspector update cycle."""

import pytest

from pyqt_inspector.app.cycle import (
    EMPTY_SELECTION_MESSAGE, STALE_SELECTION_MESSAGE, DetailKind, InspectorCycle,
)
from pyqt_inspector.app.state import DetailTab, InspectorState
from pyqt_inspector.reflection import FieldPath, Index, Named
from pyqt_inspector.services import DragValueChanged
from pyqt_inspector.store import AccessPhase, Name

from conftest import Stats, Transform


@pytest.fixture
def cycle(world, player):
    return InspectorCycle(world)


def test_first_cycle_lists_objects_and_shows_empty_detail(cycle, player):
    result = cycle.run_cycle()

    assert result.list_changed
    assert [e.display_name for e in result.entries] == ["Player"]
    assert result.detail.kind is DetailKind.EMPTY
    assert result.detail.message == EMPTY_SELECTION_MESSAGE
    assert result.failures == []


def test_unchanged_world_does_not_rebuild(cycle):
    cycle.run_cycle()
    result = cycle.run_cycle()
    assert not result.list_changed
    assert result.detail is None


def test_new_object_changes_list(cycle, world):
    cycle.run_cycle()
    world.spawn(Name("Enemy"))
    result = cycle.run_cycle()
    assert result.list_changed
    assert [e.display_name for e in result.entries] == ["Player", "Enemy"]


def test_selection_rebuilds_components(cycle, player):
    cycle.run_cycle()
    cycle.state.select(player)
    result = cycle.run_cycle()

    assert result.detail.kind is DetailKind.COMPONENTS
    assert [c.name for c in result.detail.inspection.cards] == ["Name", "Transform", "Stats"]
    assert cycle.run_cycle().detail is None


def test_tab_switch_rebuilds_relationships(cycle, world, player):
    child = world.spawn(Name("Child"), parent=player)
    cycle.state.select(player)
    cycle.run_cycle()

    cycle.state.set_tab(DetailTab.RELATIONSHIPS)
    detail = cycle.run_cycle().detail

    assert detail.kind is DetailKind.RELATIONSHIPS
    assert [n.object_id for n in detail.relationships.children] == [child]


def test_queued_change_is_written_back(cycle, world, player):
    path = FieldPath(player, Transform, (Named("translation"), Index(1)))
    cycle.run_cycle()
    cycle.dispatcher.dispatch(DragValueChanged(None, path, 42.0))

    result = cycle.run_cycle()

    assert result.failures == []
    assert world.get(player, Transform).translation.y == 42.0
    assert len(cycle.dispatcher.pending) == 0


def test_failed_change_is_reported(cycle, world, player):
    path = FieldPath(player, Stats, (Named("label"),))
    cycle.dispatcher.dispatch(DragValueChanged(None, path, 1.0))
    result = cycle.run_cycle()
    assert [f.change.field_path for f in result.failures] == [path]


def test_stale_selection_shows_error_once(cycle, world, player):
    cycle.state.select(player)
    cycle.run_cycle()

    world.despawn(player)
    result = cycle.run_cycle()

    assert result.detail.kind is DetailKind.ERROR
    assert result.detail.message == STALE_SELECTION_MESSAGE
    assert result.entries == []
    assert cycle.run_cycle().detail is None


def test_filter(cycle, world):
    world.spawn(Name("Enemy"))
    cycle.set_filter("PLAY")
    result = cycle.run_cycle()
    assert [e.display_name for e in result.entries] == ["Player"]

    cycle.set_filter("")
    result = cycle.run_cycle()
    assert result.list_changed
    assert len(result.entries) == 2


def test_phases_are_closed_after_cycle(cycle, world):
    cycle.run_cycle()
    assert world._guard.phase is AccessPhase.IDLE


def test_state_rebuild_tracking():
    state = InspectorState()
    assert state.needs_rebuild
    state.mark_rebuilt()
    assert not state.needs_rebuild
    state.request_rebuild()
    assert state.needs_rebuild
