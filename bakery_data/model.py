"""
Domain entities for the bakery order store.

Every entity is immutable. ``id`` stays None until a repository saves the
entity and hands back a copy with the identity filled in.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Optional, Tuple


class Role(str, Enum):
    ADMIN = "ADMIN"
    BAKER = "BAKER"
    BARISTA = "BARISTA"


class OrderState(str, Enum):
    NEW = "NEW"
    CONFIRMED = "CONFIRMED"
    READY = "READY"
    PROBLEM = "PROBLEM"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class Product:
    name: str
    price: int  # minor currency units
    id: Optional[int] = None


@dataclass(frozen=True)
class PickupLocation:
    name: str
    id: Optional[int] = None


@dataclass(frozen=True)
class User:
    email: str
    first_name: str
    last_name: str
    password_hash: str
    role: Role
    locked: bool = False
    id: Optional[int] = None


@dataclass(frozen=True)
class Customer:
    full_name: str
    phone_number: str
    details: Optional[str] = None


@dataclass(frozen=True)
class OrderItem:
    product: Product
    quantity: int
    comment: Optional[str] = None


@dataclass(frozen=True)
class HistoryItem:
    created_by: User
    message: str
    new_state: OrderState
    timestamp: datetime


@dataclass(frozen=True)
class Order:
    created_by: User
    customer: Customer
    pickup_location: PickupLocation
    due_date: date
    due_time: time
    state: OrderState
    items: Tuple[OrderItem, ...]
    history: Tuple[HistoryItem, ...]
    id: Optional[int] = None

    @property
    def due_at(self) -> datetime:
        return datetime.combine(self.due_date, self.due_time)

    @property
    def total_price(self) -> int:
        return sum(i.product.price * i.quantity for i in self.items)
