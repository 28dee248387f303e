from typing import Sequence, TypeVar

from .random_stream import RandomStream

T = TypeVar("T")

CUTOFF = 2.5


def select(collection: Sequence[T], rng: RandomStream) -> T:
    """
    Pick one element with a bell-shaped bias toward the middle of the sequence.

    A standard-normal draw is clipped to [-2.5, 2.5] and mapped onto [0, 1],
    so elements near the centre are "popular" and the ends are rarely hit.
    The result depends on the order of ``collection``.
    """
    if not collection:
        raise ValueError("cannot select from an empty collection")
    g = rng.next_gaussian()
    g = min(CUTOFF, g)
    g = max(-CUTOFF, g)
    g += CUTOFF
    g /= CUTOFF * 2.0
    return collection[int(g * (len(collection) - 1))]
