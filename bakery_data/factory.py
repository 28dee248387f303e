"""
Builders for the catalogue entities: products, users, pickup locations and
the customers embedded in orders.
"""
from __future__ import annotations

from typing import List

from . import vocabulary as vocab
from .model import Customer, PickupLocation, Product, Role, User
from .random_stream import RandomStream
from .security import PasswordHasher
from .storage import Repository


def random_product_name(rng: RandomStream) -> str:
    first = rng.choice(vocab.FILLING)
    if rng.next_bool():
        second = rng.choice(vocab.FILLING)
        while second == first:
            second = rng.choice(vocab.FILLING)
        name = f"{first} {second}"
    else:
        name = first
    return f"{name} {rng.choice(vocab.TYPE)}"


def make_product(rng: RandomStream) -> Product:
    name = random_product_name(rng)
    return Product(name=name, price=200 + int(rng.next_double() * 10000))


def create_products(repo: Repository[Product], rng: RandomStream, count: int) -> List[Product]:
    """Persist ``count`` products; returns them in creation order."""
    return [repo.save(make_product(rng)) for _ in range(count)]


def create_pickup_locations(repo: Repository[PickupLocation]) -> List[PickupLocation]:
    return [repo.save(PickupLocation(name=name)) for name in vocab.PICKUP_LOCATIONS]


def random_phone(rng: RandomStream) -> str:
    return "+1-555-%04d" % rng.next_int(10000)


def make_customer(rng: RandomStream) -> Customer:
    full_name = f"{rng.choice(vocab.FIRST_NAME)} {rng.choice(vocab.LAST_NAME)}"
    phone = random_phone(rng)
    details = vocab.VIP_DETAILS if rng.next_int(10) == 0 else None
    return Customer(full_name=full_name, phone_number=phone, details=details)


# (email, first name, last name, password, role, locked)
BAKER = ("baker@vaadin.com", "Heidi", "Carter", "baker", Role.BAKER, False)
BARISTA = ("barista@vaadin.com", "Malin", "Castro", "barista", Role.BARISTA, True)
ADMIN = ("admin@vaadin.com", "Göran", "Rich", "admin", Role.ADMIN, True)
DELETABLE_USERS = (
    ("peter@vaadin.com", "Peter", "Bush", "peter", Role.BARISTA, False),
    ("mary@vaadin.com", "Mary", "Ocon", "mary", Role.BAKER, True),
)


def create_user(repo: Repository[User], hasher: PasswordHasher, email: str, first_name: str,
                last_name: str, password: str, role: Role, locked: bool) -> User:
    user = User(email=email, first_name=first_name, last_name=last_name,
                password_hash=hasher.encode(password), role=role, locked=locked)
    return repo.save(user)


def create_baker(repo: Repository[User], hasher: PasswordHasher) -> User:
    return create_user(repo, hasher, *BAKER)


def create_barista(repo: Repository[User], hasher: PasswordHasher) -> User:
    return create_user(repo, hasher, *BARISTA)


def create_admin(repo: Repository[User], hasher: PasswordHasher) -> User:
    return create_user(repo, hasher, *ADMIN)


def create_deletable_users(repo: Repository[User], hasher: PasswordHasher) -> List[User]:
    """Users without any order relationships, safe to delete in tests."""
    return [create_user(repo, hasher, *fields) for fields in DELETABLE_USERS]
