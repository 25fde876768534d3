import logging
import threading
from typing import Dict, List, Optional

from fastapi import Request

from string_analyzer.models import FilterSpec, PropertyRecord

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# IN-MEMORY STORE
# ------------------------------------------------------------------------------
class StringStore:
    """
    In-memory catalog of analyzed strings keyed by SHA-256 id.

    Every operation holds the same lock, so concurrent callers see one
    operation at a time. Nothing survives a restart.
    """

    def __init__(self):
        self._storage: Dict[str, PropertyRecord] = {}
        self._lock = threading.Lock()

    def exists(self, value: str) -> bool:
        with self._lock:
            return any(record.value == value for record in self._storage.values())

    def exists_by_id(self, string_id: str) -> bool:
        with self._lock:
            return string_id in self._storage

    def add(self, record: PropertyRecord) -> None:
        """Insert or replace by id. Callers check `exists` first."""
        with self._lock:
            self._storage[record.id] = record

    def get_by_value(self, value: str) -> Optional[PropertyRecord]:
        with self._lock:
            return self._find_by_value(value)

    def get_by_id(self, string_id: str) -> Optional[PropertyRecord]:
        with self._lock:
            return self._storage.get(string_id)

    def get_all(self) -> List[PropertyRecord]:
        with self._lock:
            return list(self._storage.values())

    def get_filtered(self, filters: FilterSpec) -> List[PropertyRecord]:
        with self._lock:
            return [record for record in self._storage.values() if filters.matches(record)]

    def delete(self, value: str) -> bool:
        with self._lock:
            record = self._find_by_value(value)
            if record is None:
                return False
            del self._storage[record.id]
            return True

    def count(self) -> int:
        with self._lock:
            return len(self._storage)

    __len__ = count

    def _find_by_value(self, value: str) -> Optional[PropertyRecord]:
        # caller holds the lock
        for record in self._storage.values():
            if record.value == value:
                return record
        return None


# ------------------------------------------------------------------------------
# STORE DEPENDENCY
# ------------------------------------------------------------------------------
def init_db() -> StringStore:
    """Create the store an application instance will own."""
    logger.info("Initializing in-memory string store")
    return StringStore()


def get_db(request: Request) -> StringStore:
    """Dependency to provide the application's store."""
    return request.app.state.store
