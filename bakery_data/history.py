"""
Reconstruct the lifecycle events that lead an order to its final state.

The chain always starts with NEW and follows

    NEW -> CONFIRMED -> READY -> DELIVERED
                     -> PROBLEM
    NEW -> CANCELLED

stopping at the requested final state. Timestamps never decrease along the
chain.
"""
from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import List, Tuple

from . import vocabulary as vocab
from .model import HistoryItem, OrderState, User
from .random_stream import RandomStream

FULFILLED = (OrderState.CONFIRMED, OrderState.READY, OrderState.PROBLEM, OrderState.DELIVERED)


def _at(day: date, hour: int, minute: int = 0) -> datetime:
    return datetime.combine(day, time(hour, minute))


def build_history(state: OrderState, due_date: date, due_time: time, creator: User,
                  fulfiller: User, rng: RandomStream) -> Tuple[HistoryItem, ...]:
    due_at = datetime.combine(due_date, due_time)
    placed = _at(due_date - timedelta(days=rng.next_int(5) + 2), rng.next_int(10) + 7)
    history: List[HistoryItem] = [HistoryItem(creator, vocab.MSG_PLACED, OrderState.NEW, placed)]

    if state is OrderState.CANCELLED:
        # whole hours, at least one after placing and one before due
        span_hours = int((due_at - placed).total_seconds() // 3600)
        cancelled = placed + timedelta(hours=1 + rng.next_int(span_hours - 1))
        history.append(HistoryItem(creator, vocab.MSG_CANCELLED, OrderState.CANCELLED, cancelled))
    elif state in FULFILLED:
        confirmed = placed + timedelta(days=rng.next_int(2), hours=rng.next_int(5))
        history.append(HistoryItem(fulfiller, vocab.MSG_CONFIRMED, OrderState.CONFIRMED, confirmed))

        if state is OrderState.PROBLEM:
            problem = _at(due_date, rng.next_int(4) + 4)
            history.append(HistoryItem(fulfiller, vocab.MSG_PROBLEM, OrderState.PROBLEM, problem))
        elif state in (OrderState.READY, OrderState.DELIVERED):
            ready = _at(due_date, rng.next_int(2) + 8, 0 if rng.next_bool() else 30)
            history.append(HistoryItem(fulfiller, vocab.MSG_READY, OrderState.READY, ready))
            if state is OrderState.DELIVERED:
                # an 08:00 pickup can be "delivered" before the 09:30 ready mark
                delivered = max(ready, due_at - timedelta(minutes=rng.next_int(120)))
                history.append(HistoryItem(fulfiller, vocab.MSG_DELIVERED, OrderState.DELIVERED, delivered))

    return tuple(history)
