# paysync/data_access/base_repository.py

import uuid
from typing import Generic, TypeVar, Type, List, Optional, Dict, Any, Union, Iterable, TYPE_CHECKING
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from dataclasses import fields, replace, MISSING

from paysync.data_access.key_value_store import KeyValueStore
from paysync.exceptions import NotFoundError, StorageError
import logging

if TYPE_CHECKING:
    from ..business_logic.entities.base_entity import BaseEntity

logger = logging.getLogger(__name__)

T = TypeVar('T', bound='BaseEntity')


def to_storage_key(field_name: str) -> str:
    """snake_case attribute name -> camelCase key used in the stored JSON."""
    head, *rest = field_name.split('_')
    return head + ''.join(part.capitalize() for part in rest)


class BaseRepository(Generic[T]):
    """
    Whole-collection CRUD over one JSON array kept under one store key.

    Each mutating call reads the collection, changes it in memory and writes
    the full collection back. Nothing is cached between calls.
    """

    def __init__(self, store: KeyValueStore, model_type: Type[T], storage_key: str):
        if store is None: raise ValueError("store cannot be None")
        self.store = store
        self.model_type = model_type
        self._storage_key = storage_key
        self._fields = {f.name: f for f in fields(model_type) if f.init}
        logger.debug(f"BaseRepository for '{self._storage_key}' initialized. Fields: {list(self._fields)}")

    @property
    def storage_key(self) -> str:
        return self._storage_key

    # --- raw collection access ---

    def _load_records(self) -> List[Dict[str, Any]]:
        document = self.store.read(self._storage_key)
        if document is None:
            return []
        if not isinstance(document, list):
            raise StorageError(f"Stored data for '{self._storage_key}' is not a list.", key=self._storage_key)
        return document

    def _save_records(self, records: List[Dict[str, Any]]) -> None:
        self.store.write(self._storage_key, records)

    # --- conversion ---

    @staticmethod
    def _value_to_storage(value: Any) -> Any:
        if isinstance(value, Enum): return value.value
        if isinstance(value, Decimal): return float(value)
        if isinstance(value, (datetime, date)): return value.isoformat()
        return value

    def _entity_to_record(self, entity: T) -> Dict[str, Any]:
        return {to_storage_key(name): self._value_to_storage(getattr(entity, name, None))
                for name in self._fields}

    def _changes_to_record(self, changes: Dict[str, Any]) -> Dict[str, Any]:
        unknown = [name for name in changes if name not in self._fields or name == 'id']
        if unknown:
            raise ValueError(f"Cannot update field(s) {unknown} of {self.model_type.__name__}.")
        return {to_storage_key(name): self._value_to_storage(value) for name, value in changes.items()}

    def _entity_from_record(self, record: Dict[str, Any]) -> T:
        """
        Builds the entity dataclass from a stored JSON record.
        Enum, date and numeric fields are converted from their stored form;
        a missing required field means the stored collection is corrupt.
        """
        if not isinstance(record, dict):
            raise StorageError(f"Record in '{self._storage_key}' is not an object: {record!r}", key=self._storage_key)

        entity_data: Dict[str, Any] = {}
        for name, f in self._fields.items():
            stored_value = record.get(to_storage_key(name))

            if stored_value is None:
                if f.default is MISSING and f.default_factory is MISSING:
                    raise StorageError(
                        f"Integrity error: missing value for required field '{name}' "
                        f"in '{self._storage_key}' record: {record}", key=self._storage_key)
                continue

            field_type = f.type
            if getattr(field_type, '__origin__', None) is Union:
                possible_types = [arg for arg in getattr(field_type, '__args__', []) if arg is not type(None)]
                if possible_types:
                    field_type = possible_types[0]

            try:
                if isinstance(field_type, type) and issubclass(field_type, Enum):
                    entity_data[name] = field_type(stored_value)
                elif field_type is date and isinstance(stored_value, str):
                    entity_data[name] = date.fromisoformat(stored_value.split("T")[0])
                elif field_type is float:
                    entity_data[name] = float(stored_value)
                else:
                    entity_data[name] = stored_value
            except (ValueError, TypeError) as e:
                logger.error(f"Type conversion failed for field '{name}' with value '{stored_value}': {e}")
                raise StorageError(f"Invalid value for '{name}' in '{self._storage_key}': {stored_value!r}",
                                   key=self._storage_key) from e

        return self.model_type(**entity_data)

    # --- queries ---

    def get_all(self) -> List[T]:
        return [self._entity_from_record(record) for record in self._load_records()]

    def get_by_id(self, entity_id: str) -> Optional[T]:
        for record in self._load_records():
            if isinstance(record, dict) and record.get('id') == entity_id:
                return self._entity_from_record(record)
        return None

    def find_by_criteria(self, criteria: Dict[str, Any]) -> List[T]:
        """Entities whose attributes equal every value in criteria."""
        if not criteria:
            return self.get_all()
        return [entity for entity in self.get_all()
                if all(getattr(entity, name, None) == value for name, value in criteria.items())]

    # --- mutations ---

    def add(self, entity: T) -> T:
        """Appends the entity under a fresh id and returns it as read back from the stored record."""
        records = self._load_records()
        record = self._entity_to_record(replace(entity, id=str(uuid.uuid4())))
        new_entity = self._entity_from_record(record)
        self._save_records(records + [record])
        logger.debug(f"BaseRepository.add: {self.model_type.__name__} {new_entity.id} appended to '{self._storage_key}'.")
        return new_entity

    def update(self, entity_id: str, changes: Dict[str, Any]) -> T:
        records = self._load_records()
        index = next((i for i, record in enumerate(records)
                      if isinstance(record, dict) and record.get('id') == entity_id), None)
        if index is None:
            raise NotFoundError(f"{self.model_type.__name__} with id '{entity_id}' not found.", entity_id=entity_id)

        merged = {**records[index], **self._changes_to_record(changes)}
        updated_entity = self._entity_from_record(merged)
        records[index] = merged
        self._save_records(records)
        logger.debug(f"BaseRepository.update: {self.model_type.__name__} {entity_id} fields {list(changes)} updated.")
        return updated_entity

    def delete(self, entity_id: str) -> bool:
        records = self._load_records()
        remaining = [r for r in records if not (isinstance(r, dict) and r.get('id') == entity_id)]
        if len(remaining) == len(records):
            logger.debug(f"BaseRepository.delete: id '{entity_id}' not present in '{self._storage_key}'. Nothing to do.")
            return True
        self._save_records(remaining)
        logger.debug(f"BaseRepository.delete: id '{entity_id}' removed from '{self._storage_key}'.")
        return True

    def replace_all(self, entities: Iterable[T]) -> List[T]:
        """Discards the stored collection and writes the given entities with fresh ids."""
        records = [self._entity_to_record(replace(entity, id=str(uuid.uuid4()))) for entity in entities]
        new_entities = [self._entity_from_record(record) for record in records]
        self._save_records(records)
        logger.info(f"BaseRepository.replace_all: '{self._storage_key}' replaced with {len(new_entities)} records.")
        return new_entities
