"""Tests for the in-memory World store and the phase guard."""

import pytest

from pyqt_inspector.store import (
    AccessPhase, ComponentNotFound, Name, ObjectId, ObjectNotFound, PhaseGuard,
    PhaseViolationError, StoreAccessor, World,
)

from conftest import Stats, Transform


def test_world_implements_store_accessor(world):
    assert isinstance(world, StoreAccessor)


def test_spawn_assigns_sequential_ids(world):
    first = world.spawn()
    second = world.spawn()
    assert (first, second) == (ObjectId(0, 0), ObjectId(1, 0))
    assert len(world) == 2
    assert str(second) == "1v0"


def test_despawned_index_is_reused_with_new_generation(world):
    first = world.spawn()
    world.despawn(first)
    assert not world.contains(first)

    reused = world.spawn()
    assert reused == ObjectId(0, 1)
    assert world.contains(reused)
    assert not world.contains(first)


def test_iter_objects_is_sorted_by_index(world):
    ids = [world.spawn() for _ in range(4)]
    world.despawn(ids[1])
    world.spawn()
    assert [o.index for o in world.iter_objects()] == [0, 1, 2, 3]


def test_components(world, player):
    assert world.list_components(player) == [Name, Transform, Stats]
    assert world.get(player, Name).name == "Player"
    assert world.get(player, int) is None

    removed = world.remove(player, Stats)
    assert isinstance(removed, Stats)
    assert world.list_components(player) == [Name, Transform]
    with pytest.raises(ComponentNotFound):
        world.remove(player, Stats)
    with pytest.raises(ComponentNotFound):
        world.get_reflected_component(player, Stats)


def test_insert_replaces_same_type(world, player):
    world.insert(player, Name("Hero"))
    assert str(world.get(player, Name)) == "Hero"
    assert len(world.list_components(player)) == 3


def test_component_types(world, player):
    world.spawn(Name("Other"))
    assert world.component_types() == {Name, Transform, Stats}


def test_hierarchy(world):
    parent = world.spawn(Name("Parent"))
    child_a = world.spawn(Name("A"), parent=parent)
    child_b = world.spawn(Name("B"), parent=parent)

    assert world.list_children(parent) == [child_a, child_b]
    assert world.get_parent(child_a) == parent
    assert world.get_parent(parent) is None

    world.set_parent(child_b, None)
    assert world.list_children(parent) == [child_a]
    assert world.get_parent(child_b) is None


def test_despawn_is_recursive(world):
    root = world.spawn()
    child = world.spawn(parent=root)
    grandchild = world.spawn(parent=child)
    other = world.spawn()

    world.despawn(root)

    assert [world.contains(o) for o in (root, child, grandchild, other)] == [False, False, False, True]


def test_despawn_child_detaches_from_parent(world):
    parent = world.spawn()
    child = world.spawn(parent=parent)
    world.despawn(child)
    assert world.list_children(parent) == []


def test_missing_object_raises(world):
    ghost = ObjectId(42)
    with pytest.raises(ObjectNotFound):
        world.list_components(ghost)
    with pytest.raises(ObjectNotFound):
        world.get_parent(ghost)
    assert world.get(ghost, Name) is None


def test_unreflected_types(world):
    assert world.is_reflected(Stats)
    world.register_component(Stats, reflect=False)
    assert not world.is_reflected(Stats)
    world.register_component(Stats)
    assert world.is_reflected(Stats)


def test_mutable_access_requires_write_phase(world, player):
    with pytest.raises(PhaseViolationError):
        world.get_reflected_component_mut(player, Stats)
    with pytest.raises(PhaseViolationError):
        world.replace_component(player, Stats, Stats())

    with world.write_phase():
        assert world.get_reflected_component_mut(player, Stats) is world.get(player, Stats)
        world.replace_component(player, Stats, Stats(count=9))
    assert world.get(player, Stats).count == 9


def test_replace_component_requires_existing_component(world, player):
    world.remove(player, Stats)
    with world.write_phase():
        with pytest.raises(ComponentNotFound):
            world.replace_component(player, Stats, Stats())


def test_shared_read_is_rejected_during_write_phase(world, player):
    stats = world.get(player, Stats)
    assert world.get_reflected_component(player, Stats) is stats
    with world.read_phase():
        assert world.get_reflected_component(player, Stats) is stats

    with world.write_phase():
        with pytest.raises(PhaseViolationError):
            world.get_reflected_component(player, Stats)
    assert world.get_reflected_component(player, Stats) is stats


# ========== PHASE GUARD ==========

def test_reads_nest():
    guard = PhaseGuard()
    with guard.read():
        with guard.read():
            assert guard.phase is AccessPhase.READ
        assert guard.phase is AccessPhase.READ
    assert guard.phase is AccessPhase.IDLE


def test_write_is_exclusive():
    guard = PhaseGuard()
    with guard.read():
        with pytest.raises(PhaseViolationError):
            with guard.write():
                pass
    with guard.write():
        with pytest.raises(PhaseViolationError):
            with guard.read():
                pass
        with pytest.raises(PhaseViolationError):
            with guard.write():
                pass
        assert guard.phase is AccessPhase.WRITE
    assert guard.phase is AccessPhase.IDLE


def test_write_phase_resets_after_error():
    guard = PhaseGuard()
    with pytest.raises(KeyError):
        with guard.write():
            raise KeyError("boom")
    assert guard.phase is AccessPhase.IDLE
    with pytest.raises(PhaseViolationError):
        guard.require_write("test")
