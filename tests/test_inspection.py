"""Tests for InspectionService render data."""

from pyqt_inspector.reflection import FieldPath, Index, Named
from pyqt_inspector.services import InspectionService, ObjectListEntry
from pyqt_inspector.store import ComponentMetadataMap, MemorySize, Name, ObjectId

from conftest import Stats, Transform


def _inspect(world, object_id):
    service = InspectionService()
    with world.read_phase():
        metadata = ComponentMetadataMap.generate(world)
        return service.inspect_object(world, object_id, metadata), metadata


def test_entry_label_pads_short_names():
    entry = ObjectListEntry(ObjectId(0), "Player", 3, MemorySize(24))
    assert entry.label() == "Player".ljust(20) + " 3 comp | 24 B"


def test_entry_label_truncates_long_names():
    entry = ObjectListEntry(ObjectId(0), "A" * 25, 2, MemorySize(24))
    assert entry.label() == "A" * 17 + "... 2 comp | 24 B"


def test_resolve_name(world, player):
    unnamed = world.spawn(Stats())
    assert InspectionService.resolve_name(world, player) == "Player"
    assert InspectionService.resolve_name(world, unnamed) == "Object 1v0"


def test_list_entries(world, player):
    world.spawn(Stats())
    service = InspectionService()
    with world.read_phase():
        metadata = ComponentMetadataMap.generate(world)
        entries = service.list_entries(world, metadata)

    assert [(e.display_name, e.component_count) for e in entries] == [("Player", 3), ("Object 1v0", 1)]
    assert entries[0].memory_size == metadata.total_memory(world, player)


def test_inspect_object_cards(world, player):
    inspection, metadata = _inspect(world, player)

    assert inspection.display_name == "Player"
    assert inspection.header == f"Player | 3 components | {metadata.total_memory(world, player)}"
    assert [card.name for card in inspection.cards] == ["Name", "Transform", "Stats"]

    name_card = inspection.cards[0]
    assert [(r.label, r.value_text) for r in name_card.rows] == [("name", "'Player'")]
    assert name_card.title == f"Name | {metadata.get(Name).memory_size}"


def test_card_field_path(world, player):
    inspection, _ = _inspect(world, player)
    transform_card = inspection.cards[1]
    y_row = transform_card.rows[2]

    assert y_row.label == "y"
    assert transform_card.field_path(y_row) == FieldPath(
        player, Transform, (Named("translation"), Index(1)),
    )
    assert transform_card.field_path(transform_card.rows[0]) is None


def test_unreflected_component_has_no_rows(world, player):
    world.register_component(Stats, reflect=False)
    inspection, _ = _inspect(world, player)

    stats_card = inspection.cards[2]
    assert stats_card.name == "Stats"
    assert stats_card.rows == []
    assert stats_card.component_type_id is None


def test_relationships(world):
    parent = world.spawn(Name("Parent"))
    child = world.spawn(Name("Child"), Stats(), parent=parent)
    service = InspectionService()

    with world.read_phase():
        of_parent = service.relationships(world, parent)
        of_child = service.relationships(world, child)

    assert of_parent.parent is None
    assert [node.label for node in of_parent.children] == ["Child (2 components)"]
    assert of_child.parent.object_id == parent
    assert of_child.parent.label == "Parent (1 components)"
    assert of_child.children == []
