"""Shuffling and sampling for ballot order and the randomizer."""

from collections.abc import Sequence
from typing import TypeVar

from rankpoll.errors import InputError
from rankpoll.rng import RandomSource, make_source

T = TypeVar("T")


def _resolve(seed: str | None, source: RandomSource | None) -> RandomSource:
    return source if source is not None else make_source(seed)


def _fisher_yates(items: Sequence[T], source: RandomSource) -> list[T]:
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = int(source.random() * (i + 1))
        out[i], out[j] = out[j], out[i]
    return out


def shuffle(
    items: Sequence[T],
    seed: str | None = None,
    source: RandomSource | None = None,
) -> list[T]:
    """Return a shuffled copy of items.

    Args:
        items: Anything to permute; not modified
        seed: Makes the order reproducible when non-empty
        source: Explicit random source, overrides seed

    Returns:
        A new list holding the same elements in Fisher-Yates order
    """
    return _fisher_yates(items, _resolve(seed, source))


def sample(
    items: Sequence[T],
    k: int,
    with_replacement: bool = False,
    seed: str | None = None,
    source: RandomSource | None = None,
) -> list[T]:
    """Draw k items.

    Without replacement the result is the first k elements of
    ``shuffle(items, seed)``, so a large k doubles as a full order preview.
    With replacement, k indices are drawn one after another from a single
    stream; the first m draws for a seed never depend on k.

    Raises:
        InputError: If items is empty
    """
    if not items:
        raise InputError("Cannot sample from an empty list")
    if k <= 0:
        return []
    rng = _resolve(seed, source)
    if not with_replacement:
        return _fisher_yates(items, rng)[:k]
    n = len(items)
    return [items[int(rng.random() * n)] for _ in range(k)]


def pick_winner(
    items: Sequence[T],
    seed: str | None = None,
    source: RandomSource | None = None,
) -> tuple[T, list[T]]:
    """Pick one winner and return it with the other items in shuffled order.

    Both the winning draw and the reveal order come from the same stream.

    Raises:
        InputError: If items is empty
    """
    if not items:
        raise InputError("Cannot pick a winner from an empty list")
    rng = _resolve(seed, source)
    index = int(rng.random() * len(items))
    others = [item for i, item in enumerate(items) if i != index]
    return items[index], _fisher_yates(others, rng)
