# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from caretrack.const import KEY_CHECKLISTS, LOGGER
from caretrack.model.checklist import Checklist, ChecklistItem
from caretrack.model.entity_id import EntityId, IdFactory, generate_entity_id
from caretrack.repository.store import KeyValueStore
from caretrack.template.checklist import get_checklist_template, get_seeded_checklists


class ChecklistRepository:
    def __init__(
        self, store: KeyValueStore, id_factory: IdFactory = generate_entity_id
    ) -> None:
        self._store = store
        self._id_factory = id_factory
        self._checklists: Optional[list[Checklist]] = None

    @property
    def checklists(self) -> list[Checklist]:
        if self._checklists is None:
            self.__load_data()
        if self._checklists is None:
            raise ValueError()
        return self._checklists

    def __load_data(self) -> None:
        raw_checklists = self._store.read(KEY_CHECKLISTS, None)
        if raw_checklists is None:
            self._checklists = get_seeded_checklists()
            self.__save_data()
            return
        try:
            self._checklists = [
                {
                    "id": str(raw["id"]),
                    "name": str(raw["name"]),
                    "items": [
                        {
                            "id": str(item["id"]),
                            "text": str(item["text"]),
                            "done": bool(item.get("done", False)),
                        }
                        for item in raw.get("items", [])
                    ],
                }
                for raw in raw_checklists
            ]
        except (AttributeError, KeyError, TypeError) as e:
            LOGGER.warning("Ignoring stored checklists: %s", e)
            self._checklists = get_seeded_checklists()
            self.__save_data()

    def __save_data(self) -> None:
        self._store.write(KEY_CHECKLISTS, self.checklists)

    def __find(self, list_id: EntityId) -> Optional[Checklist]:
        for checklist in self.checklists:
            if checklist["id"] == list_id:
                return checklist
        return None

    def get_all_checklists(self) -> list[Checklist]:
        return deepcopy(self.checklists)

    def get_checklist(self, list_id: EntityId) -> Optional[Checklist]:
        checklist = self.__find(list_id)
        return deepcopy(checklist) if checklist is not None else None

    def add_list(self, name: str) -> Optional[EntityId]:
        if not name.strip():
            return None
        checklist = get_checklist_template(name.strip())
        checklist["id"] = self._id_factory()
        self.checklists.append(checklist)
        self.__save_data()
        return checklist["id"]

    def delete_list(self, list_id: EntityId) -> bool:
        checklist = self.__find(list_id)
        if checklist is None:
            return False
        self.checklists.remove(checklist)
        self.__save_data()
        return True

    def add_item(self, list_id: EntityId, text: str) -> Optional[EntityId]:
        checklist = self.__find(list_id)
        if checklist is None or not text.strip():
            return None
        item: ChecklistItem = {
            "id": self._id_factory(),
            "text": text.strip(),
            "done": False,
        }
        checklist["items"].append(item)
        self.__save_data()
        return item["id"]

    def toggle_item(self, list_id: EntityId, item_id: EntityId) -> bool:
        checklist = self.__find(list_id)
        if checklist is None:
            return False
        for item in checklist["items"]:
            if item["id"] == item_id:
                item["done"] = not item["done"]
                self.__save_data()
                return True
        return False

    def delete_item(self, list_id: EntityId, item_id: EntityId) -> bool:
        checklist = self.__find(list_id)
        if checklist is None:
            return False
        remaining = [item for item in checklist["items"] if item["id"] != item_id]
        if len(remaining) == len(checklist["items"]):
            return False
        checklist["items"] = remaining
        self.__save_data()
        return True
