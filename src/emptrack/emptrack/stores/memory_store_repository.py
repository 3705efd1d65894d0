from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from .model import Store
from .repository import StoreRepository


class InMemoryStoreRepository(StoreRepository):
    """Process-lifetime store registry. Keeps insertion order."""

    def __init__(self, stores: Iterable[Store] = ()):
        self._lock = threading.Lock()
        self._stores: list[Store] = list(stores)

    def list_all(self) -> Sequence[Store]:
        with self._lock:
            return list(self._stores)

    def get_by_id(self, store_id: str) -> Optional[Store]:
        with self._lock:
            return next((s for s in self._stores if s.id == store_id), None)

    def add(self, store: Store) -> None:
        with self._lock:
            self._stores.append(store)

    def replace(self, store: Store) -> bool:
        with self._lock:
            for i, existing in enumerate(self._stores):
                if existing.id == store.id:
                    self._stores[i] = store
                    return True
            return False

    def delete_by_id(self, store_id: str) -> bool:
        with self._lock:
            before = len(self._stores)
            self._stores = [s for s in self._stores if s.id != store_id]
            return len(self._stores) != before
