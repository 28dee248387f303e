from datetime import date, time

import pytest

from bakery_data.factory import create_pickup_locations, create_products
from bakery_data.model import OrderState, Role, User
from bakery_data.storage import DemoStore
from bakery_data.timeline import create_fixture_order, create_order, create_orders, date_window, orders_for_day

from conftest import TODAY, ScriptedStream

BARISTA = User("barista@vaadin.com", "Malin", "Castro", "x", Role.BARISTA, True, id=2)
BAKER = User("baker@vaadin.com", "Heidi", "Carter", "x", Role.BAKER, False, id=1)


@pytest.fixture
def catalogue(rng):
    store = DemoStore()
    return store, create_products(store.products, rng, 8), create_pickup_locations(store.pickup_locations)


@pytest.mark.parametrize("day,draw,expected", [
    # months since the start of the window, trend added to the draw
    (date(2022, 1, 1), 0, 1),    # 1.03
    (date(2022, 1, 1), 9, 10),
    (date(2023, 5, 10), 3, 4),   # 17 months -> 1.51
    (date(2024, 4, 14), 0, 1),   # 28 months -> 1.84
    (date(2024, 4, 14), 9, 10),
])
def test_orders_for_day(day, draw, expected):
    assert orders_for_day(day, TODAY, ScriptedStream(ints=[draw])) == expected


def test_orders_for_day_reaches_two_late_in_window():
    # 34 months -> 2.02
    assert orders_for_day(date(2024, 10, 1), TODAY, ScriptedStream(ints=[0])) == 2


@pytest.mark.parametrize("today,oldest,newest", [
    (date(2024, 3, 15), date(2022, 1, 1), date(2024, 4, 15)),
    (date(2024, 1, 31), date(2022, 1, 1), date(2024, 2, 29)),
    (date(2026, 12, 5), date(2024, 1, 1), date(2027, 1, 5)),
])
def test_date_window(today, oldest, newest):
    assert date_window(today) == (oldest, newest)


def test_order_shape(catalogue, rng):
    _, products, locations = catalogue
    for _ in range(500):
        order = create_order(products, locations, BARISTA, BAKER, date(2023, 6, 1), TODAY, rng)
        assert 1 <= len(order.items) <= 4
        assert len({i.product.id for i in order.items}) == len(order.items)
        assert all(1 <= i.quantity <= 10 for i in order.items)
        assert all(i.product in products[:8] for i in order.items)
        assert order.due_time in (time(8), time(12), time(16))
        assert order.pickup_location in locations
        assert order.state in (OrderState.DELIVERED, OrderState.CANCELLED)
        assert order.state is order.history[-1].new_state
        assert order.created_by is BARISTA


def test_fixture_order(catalogue, rng):
    _, products, locations = catalogue
    order = create_fixture_order(products, locations, BARISTA, BAKER, TODAY, rng)
    assert order.due_date == TODAY
    assert order.due_time == time(8, 0)
    assert len(order.items) == 1
    assert len(order.history) == 1
    assert order.state is order.history[0].new_state is OrderState.NEW


def test_create_orders_saves_fixture_first(catalogue, rng):
    store, products, locations = catalogue
    today = date(2024, 12, 10)
    n = create_orders(store.orders, products, locations, BARISTA, BAKER, rng, today, years_to_include=0)
    orders = store.orders.all()
    assert n == len(orders) > 300
    assert orders[0].due_date == today and len(orders[0].history) == 1
    due_dates = [o.due_date for o in orders[1:]]
    assert due_dates == sorted(due_dates)
    assert due_dates[0] == date(2024, 1, 1)
    assert due_dates[-1] < date(2025, 1, 10)
