# paysync/data_access/key_value_store.py

import json
import sqlite3
from typing import Any, List, Optional

from paysync.data_access.database_manager import DatabaseManager
from paysync.exceptions import StorageError
import logging

logger = logging.getLogger(__name__)

class KeyValueStore:
    """
    Named JSON documents kept in a single sqlite table.

    Every write replaces the whole document under its key in one statement,
    so a reader never sees a half-written collection. There is no locking
    between processes: the last writer wins.
    """

    def __init__(self, db_manager: DatabaseManager):
        if db_manager is None: raise ValueError("db_manager cannot be None")
        self.db_manager = db_manager
        self.table_name = "key_value_store"

    def read(self, key: str) -> Optional[Any]:
        query = f"SELECT value FROM {self.table_name} WHERE key = ?"
        try:
            row = self.db_manager.fetch_one(query, (key,))
        except sqlite3.Error as e:
            raise StorageError(f"Could not read '{key}' from storage: {e}", key=key) from e

        if row is None:
            logger.debug(f"Key '{key}' not present in store.")
            return None
        try:
            return json.loads(row['value'])
        except (TypeError, ValueError) as e:
            logger.error(f"Stored document under '{key}' is not valid JSON: {e}")
            raise StorageError(f"Stored data for '{key}' is corrupt: {e}", key=key) from e

    def write(self, key: str, document: Any) -> None:
        try:
            serialized = json.dumps(document)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Document for '{key}' cannot be serialized: {e}", key=key) from e

        query = f"INSERT OR REPLACE INTO {self.table_name} (key, value) VALUES (?, ?)"
        try:
            self.db_manager.execute_query(query, (key, serialized))
        except sqlite3.Error as e:
            raise StorageError(f"Could not write '{key}' to storage: {e}", key=key) from e
        logger.debug(f"Key '{key}' written ({len(serialized)} bytes).")

    def delete(self, key: str) -> None:
        query = f"DELETE FROM {self.table_name} WHERE key = ?"
        try:
            self.db_manager.execute_query(query, (key,))
        except sqlite3.Error as e:
            raise StorageError(f"Could not delete '{key}' from storage: {e}", key=key) from e

    def keys(self) -> List[str]:
        query = f"SELECT key FROM {self.table_name} ORDER BY key"
        try:
            rows = self.db_manager.fetch_all(query)
        except sqlite3.Error as e:
            raise StorageError(f"Could not list storage keys: {e}") from e
        return [row['key'] for row in rows]
