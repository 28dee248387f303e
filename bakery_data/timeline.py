"""
Order timeline: a slowly growing number of orders per day, from January 1st
two years back until one month ahead of today.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, time, timedelta
from typing import List, Sequence

import pandas as pd

from . import vocabulary as vocab
from .factory import make_customer
from .history import build_history
from .model import Order, OrderItem, PickupLocation, Product, User
from .random_stream import RandomStream
from .selector import select
from .states import resolve_state
from .storage import Repository

logger = logging.getLogger(__name__)

FIXTURE_DUE_TIME = time(8, 0)
MAX_ITEMS = 4


def random_due_time(rng: RandomStream) -> time:
    return time(8 + 4 * rng.next_int(3), 0)


def orders_for_day(day: date, today: date, rng: RandomStream, years_to_include: int = 2) -> int:
    relative_year = day.year - today.year + years_to_include
    relative_month = relative_year * 12 + day.month
    multiplier = 1.0 + 0.03 * relative_month
    # the trend is added to the draw, not multiplied into it
    return int(rng.next_int(10) + 1 * multiplier)


def _random_items(products: Sequence[Product], rng: RandomStream) -> List[OrderItem]:
    items: List[OrderItem] = []
    for _ in range(rng.next_int(MAX_ITEMS) + 1):
        product = select(products, rng)
        while any(item.product is product for item in items):
            product = select(products, rng)
        comment = None
        if rng.next_int(5) == 0:
            comment = vocab.LACTOSE_FREE if rng.next_bool() else vocab.GLUTEN_FREE
        items.append(OrderItem(product=product, quantity=rng.next_int(10) + 1, comment=comment))
    return items


def create_order(products: Sequence[Product], locations: Sequence[PickupLocation], barista: User,
                 baker: User, due_date: date, today: date, rng: RandomStream) -> Order:
    """Build one order (not yet persisted). Every draw happens in a fixed order."""
    due_time = random_due_time(rng)
    customer = make_customer(rng)
    location = select(locations, rng)
    state = resolve_state(due_date, today, rng)
    items = _random_items(products, rng)
    history = build_history(state, due_date, due_time, barista, baker, rng)
    return Order(created_by=barista, customer=customer, pickup_location=location, due_date=due_date,
                 due_time=due_time, state=state, items=tuple(items), history=history)


def create_fixture_order(products: Sequence[Product], locations: Sequence[PickupLocation], barista: User,
                         baker: User, today: date, rng: RandomStream) -> Order:
    """Today's 08:00 order with a single item, still in its placed state."""
    order = create_order(products, locations, barista, baker, today, today, rng)
    first = order.history[0]
    return replace(order, due_time=FIXTURE_DUE_TIME, state=first.new_state,
                   items=order.items[:1], history=(first,))


def date_window(today: date, years_to_include: int = 2):
    oldest = date(today.year - years_to_include, 1, 1)
    newest = (pd.Timestamp(today) + pd.DateOffset(months=1)).date()
    return oldest, newest


def create_orders(repo: Repository[Order], products: Sequence[Product], locations: Sequence[PickupLocation],
                  barista: User, baker: User, rng: RandomStream, today: date,
                  years_to_include: int = 2) -> int:
    """Persist the fixture order plus the whole timeline; returns the number of orders saved."""
    oldest, newest = date_window(today, years_to_include)

    repo.save(create_fixture_order(products, locations, barista, baker, today, rng))
    saved = 1

    day = oldest
    month_start, month_saved = day, 0
    while day < newest:
        for _ in range(orders_for_day(day, today, rng, years_to_include)):
            repo.save(create_order(products, locations, barista, baker, day, today, rng))
            saved += 1
            month_saved += 1
        day += timedelta(days=1)
        if day.month != month_start.month or day >= newest:
            logger.debug("... %s: %d orders", month_start.strftime("%Y-%m"), month_saved)
            month_start, month_saved = day, 0

    return saved
