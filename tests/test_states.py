from datetime import timedelta

import pytest

from bakery_data.model import OrderState
from bakery_data.random_stream import RandomStream
from bakery_data.states import resolve_state

from conftest import TODAY, ScriptedStream


def days(n):
    return TODAY + timedelta(days=n)


@pytest.mark.parametrize("offset", [3, 4, 30])
def test_far_future_is_new_without_draw(offset):
    stream = ScriptedStream()
    assert resolve_state(days(offset), TODAY, stream) is OrderState.NEW


def test_far_future_leaves_stream_untouched():
    used, fresh = RandomStream(5), RandomStream(5)
    resolve_state(days(10), TODAY, used)
    assert used.next_double() == fresh.next_double()


@pytest.mark.parametrize("draw,expected", [
    (0.0, OrderState.DELIVERED),
    (0.8999, OrderState.DELIVERED),
    (0.9, OrderState.CANCELLED),
    (0.9999, OrderState.CANCELLED),
])
def test_past(draw, expected):
    assert resolve_state(days(-1), TODAY, ScriptedStream(doubles=[draw])) is expected


@pytest.mark.parametrize("draw,expected", [
    (0.1, OrderState.NEW),
    (0.8, OrderState.PROBLEM),
    (0.89, OrderState.PROBLEM),
    (0.9, OrderState.CANCELLED),
])
def test_exactly_two_days_out(draw, expected):
    assert resolve_state(days(2), TODAY, ScriptedStream(doubles=[draw])) is expected


@pytest.mark.parametrize("offset", [0, 1])
@pytest.mark.parametrize("draw,expected", [
    (0.0, OrderState.READY),
    (0.6, OrderState.DELIVERED),
    (0.79, OrderState.DELIVERED),
    (0.8, OrderState.PROBLEM),
    (0.9, OrderState.CANCELLED),
])
def test_today_and_tomorrow(offset, draw, expected):
    assert resolve_state(days(offset), TODAY, ScriptedStream(doubles=[draw])) is expected


def test_past_distribution(rng):
    states = [resolve_state(days(-100), TODAY, rng) for _ in range(5_000)]
    delivered = states.count(OrderState.DELIVERED) / len(states)
    assert set(states) == {OrderState.DELIVERED, OrderState.CANCELLED}
    assert 0.87 < delivered < 0.93
