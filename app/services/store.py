import itertools
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from app.core.logger import logger
from app.models.store_models import CartItem, Appointment, ContactMessage

T = TypeVar("T")

class ResourceStore(Generic[T]):
    """
    Ordered in-memory collection of one resource type.

    Records stay in insertion order and only change through the methods below.
    Contents live for the lifetime of the process; nothing is persisted.
    """

    def __init__(self, name: str, key: Optional[Callable[[T], Any]] = None):
        self.name = name
        self._key = key
        self._records: List[T] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def next_id(self) -> int:
        """Monotonic id, unique within this store."""
        with self._lock:
            return next(self._ids)

    def append(self, record: T) -> T:
        with self._lock:
            self._records.append(record)
            size = len(self._records)
        logger.debug(f"➕ [{self.name}] appended record #{size}")
        return record

    def find_index_by_key(self, key: Any) -> Optional[int]:
        with self._lock:
            return self._find_index(key)

    def upsert_by_key(self, key: Any, record: T, merge: Callable[[T, T], T]) -> Tuple[T, bool]:
        """
        Replaces the record matching `key` with merge(existing, record),
        or appends `record` when no record matches.

        Returns the stored record and whether it was newly inserted.
        """
        with self._lock:
            index = self._find_index(key)
            if index is None:
                self._records.append(record)
                logger.debug(f"➕ [{self.name}] inserted '{key}'")
                return record, True

            merged = merge(self._records[index], record)
            self._records[index] = merged
            logger.debug(f"🔁 [{self.name}] merged into '{key}' at index {index}")
            return merged, False

    def list(self) -> List[T]:
        """Snapshot of the current records. Later mutations are not reflected."""
        with self._lock:
            return list(self._records)

    def _find_index(self, key: Any) -> Optional[int]:
        if self._key is None:
            raise TypeError(f"Store '{self.name}' has no key function")
        for index, existing in enumerate(self._records):
            if self._key(existing) == key:
                return index
        return None


@dataclass
class Stores:
    cart: ResourceStore[CartItem] = field(
        default_factory=lambda: ResourceStore("cart", key=lambda item: item.name)
    )
    appointments: ResourceStore[Appointment] = field(
        default_factory=lambda: ResourceStore("appointments")
    )
    contact_messages: ResourceStore[ContactMessage] = field(
        default_factory=lambda: ResourceStore("contact_messages")
    )


def build_stores() -> Stores:
    """Fresh, empty stores for one application instance."""
    return Stores()
