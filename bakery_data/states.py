from datetime import date, timedelta
from typing import Sequence, Tuple

from .model import OrderState
from .random_stream import RandomStream

# (cumulative upper bound, state), checked with `<` against one uniform draw
PAST = ((0.9, OrderState.DELIVERED), (1.0, OrderState.CANCELLED))
IN_TWO_DAYS = ((0.8, OrderState.NEW), (0.9, OrderState.PROBLEM), (1.0, OrderState.CANCELLED))
DUE_NOW = ((0.6, OrderState.READY), (0.8, OrderState.DELIVERED), (0.9, OrderState.PROBLEM),
           (1.0, OrderState.CANCELLED))


def _draw(table: Sequence[Tuple[float, OrderState]], rng: RandomStream) -> OrderState:
    resolution = rng.next_double()
    for bound, state in table:
        if resolution < bound:
            return state
    return table[-1][1]


def resolve_state(due: date, today: date, rng: RandomStream) -> OrderState:
    """
    Final lifecycle state for an order due on ``due``, as seen from ``today``.

    - past orders: 90% delivered, 10% cancelled
    - due later than two days out: always new, no draw
    - due in exactly two days: 80% new, 10% problem, 10% cancelled
    - due today or tomorrow: 60% ready, 20% delivered, 10% problem, 10% cancelled
    """
    tomorrow = today + timedelta(days=1)
    in_2_days = today + timedelta(days=2)

    if due < today:
        return _draw(PAST, rng)
    if due > in_2_days:
        return OrderState.NEW
    if due > tomorrow:
        return _draw(IN_TWO_DAYS, rng)
    return _draw(DUE_NOW, rng)
