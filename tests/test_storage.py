import pytest

from bakery_data.model import PickupLocation, Role, User
from bakery_data.storage import DemoStore, DuplicateEntityError, InMemoryRepository, StorageError


def test_save_assigns_ids_and_keeps_order():
    repo = InMemoryRepository("locations")
    a = repo.save(PickupLocation("Store"))
    b = repo.save(PickupLocation("Bakery"))
    assert (a.id, b.id) == (1, 2)
    assert repo.all() == [a, b]
    assert repo.get(2) is b
    assert repo.get(3) is None
    assert repo.count() == 2


def test_save_does_not_touch_input():
    repo = InMemoryRepository("locations")
    loc = PickupLocation("Store")
    repo.save(loc)
    assert loc.id is None


def test_duplicate_email_rejected():
    store = DemoStore()
    user = User("baker@vaadin.com", "Heidi", "Carter", "h", Role.BAKER)
    store.users.save(user)
    with pytest.raises(DuplicateEntityError):
        store.users.save(User("Baker@vaadin.com", "Other", "Person", "h", Role.ADMIN))
    assert store.users.count() == 1
    assert issubclass(DuplicateEntityError, StorageError)


def test_counts():
    assert DemoStore().counts() == {"products": 0, "users": 0, "pickup_locations": 0, "orders": 0}
