"""Tests for the packing checklists."""

import pytest

from caretrack.model.entity_id import IdFactory
from caretrack.repository.checklist import ChecklistRepository
from caretrack.repository.store import MemoryStore


@pytest.fixture
def checklists(store: MemoryStore, id_factory: IdFactory) -> ChecklistRepository:
    return ChecklistRepository(store, id_factory=id_factory)


class TestChecklists:
    def test_seeded_lists_are_stable_across_loads(self, store: MemoryStore) -> None:
        first = ChecklistRepository(store).get_all_checklists()
        second = ChecklistRepository(store).get_all_checklists()

        assert [c["name"] for c in first] == ["Hospital Bag", "Diaper Bag"]
        assert [c["id"] for c in first] == [c["id"] for c in second]

    def test_add_list_and_items(self, checklists: ChecklistRepository) -> None:
        list_id = checklists.add_list("  Daycare  ")
        assert list_id == "id-1"

        item_id = checklists.add_item(list_id, "Spare clothes")
        assert item_id == "id-2"
        assert checklists.toggle_item(list_id, item_id) is True

        checklist = checklists.get_checklist(list_id)
        assert checklist is not None
        assert checklist["name"] == "Daycare"
        assert checklist["items"] == [
            {"id": "id-2", "text": "Spare clothes", "done": True}
        ]

    def test_blank_names_are_rejected(self, checklists: ChecklistRepository) -> None:
        assert checklists.add_list("   ") is None
        list_id = checklists.add_list("Daycare")
        assert list_id is not None
        assert checklists.add_item(list_id, "") is None
        assert checklists.add_item("missing", "Wipes") is None

    def test_delete_item_and_list(self, checklists: ChecklistRepository) -> None:
        list_id = checklists.add_list("Daycare")
        assert list_id is not None
        item_id = checklists.add_item(list_id, "Wipes")
        assert item_id is not None

        assert checklists.delete_item(list_id, item_id) is True
        assert checklists.delete_item(list_id, item_id) is False
        assert checklists.delete_list(list_id) is True
        assert checklists.delete_list(list_id) is False
        assert checklists.toggle_item(list_id, item_id) is False

    def test_changes_are_persisted(
        self, checklists: ChecklistRepository, store: MemoryStore
    ) -> None:
        list_id = checklists.add_list("Daycare")
        assert list_id is not None
        checklists.add_item(list_id, "Wipes")

        reloaded = ChecklistRepository(store).get_checklist(list_id)
        assert reloaded is not None
        assert [item["text"] for item in reloaded["items"]] == ["Wipes"]
