from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Store


class StoreRepository(Protocol):
    """Repository interface for stores.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Store]:
        raise NotImplementedError

    def get_by_id(self, store_id: str) -> Optional[Store]:
        raise NotImplementedError

    def add(self, store: Store) -> None:
        raise NotImplementedError

    def replace(self, store: Store) -> bool:
        raise NotImplementedError

    def delete_by_id(self, store_id: str) -> bool:
        raise NotImplementedError
