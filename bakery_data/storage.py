"""
Storage sinks for generated entities.

One repository per entity kind. ``save`` assigns the next integer id and
returns the stored copy; nothing is ever updated or deleted.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Callable, Dict, Generic, Hashable, List, Optional, Protocol, TypeVar

from .model import Order, PickupLocation, Product, User

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StorageError(Exception):
    """A write was rejected by a repository."""


class DuplicateEntityError(StorageError):
    pass


class Repository(Protocol[T]):
    def save(self, entity: T) -> T: ...
    def count(self) -> int: ...


class InMemoryRepository(Generic[T]):
    """Insertion-ordered repository; optional ``unique_key`` rejects duplicates."""

    def __init__(self, name: str, unique_key: Optional[Callable[[T], Hashable]] = None) -> None:
        self.name = name
        self._unique_key = unique_key
        self._rows: Dict[int, T] = {}
        self._keys: set = set()
        self._next_id = 1

    def save(self, entity: T) -> T:
        if self._unique_key is not None:
            key = self._unique_key(entity)
            if key in self._keys:
                raise DuplicateEntityError(f"{self.name}: duplicate key {key!r}")
            self._keys.add(key)
        stored = dataclasses.replace(entity, id=self._next_id)  # type: ignore[type-var]
        self._rows[self._next_id] = stored
        self._next_id += 1
        return stored

    def count(self) -> int:
        return len(self._rows)

    def get(self, entity_id: int) -> Optional[T]:
        return self._rows.get(entity_id)

    def all(self) -> List[T]:
        return list(self._rows.values())


class DemoStore:
    def __init__(self) -> None:
        self.products: InMemoryRepository[Product] = InMemoryRepository("products")
        self.users: InMemoryRepository[User] = InMemoryRepository("users", unique_key=lambda u: u.email.lower())
        self.pickup_locations: InMemoryRepository[PickupLocation] = InMemoryRepository("pickup_locations")
        self.orders: InMemoryRepository[Order] = InMemoryRepository("orders")

    def counts(self) -> Dict[str, int]:
        return {
            "products": self.products.count(),
            "users": self.users.count(),
            "pickup_locations": self.pickup_locations.count(),
            "orders": self.orders.count(),
        }
