"""Helpers for creating polls and preparing ballots."""

from collections.abc import Iterable, Sequence
from datetime import timedelta

from rankpoll.errors import InputError
from rankpoll.rng import RandomSource, make_source

MIN_OPTIONS = 2
MAX_OPTIONS = 10
MAX_OPTION_LENGTH = 30

CODE_LENGTH = 6
# No 0/O or 1/I, which are easy to misread off a projector
CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"


def normalize_options(texts: Iterable[str | None]) -> list[str]:
    """Trim, drop blanks and remove case-insensitive duplicates.

    The first spelling of each option wins, e.g. ["Pizza", " pizza ",
    "Tacos"] becomes ["Pizza", "Tacos"].
    """
    seen: set[str] = set()
    options = []
    for text in texts:
        clean = str(text or "").strip()
        key = clean.lower()
        if not clean or key in seen:
            continue
        seen.add(key)
        options.append(clean)
    return options


def validate_options(options: Sequence[str]) -> None:
    """Check an already-normalized option list can be used for a poll.

    Raises:
        InputError: If there are too few or too many options, or one is too long
    """
    if len(options) < MIN_OPTIONS:
        raise InputError(f"Add at least {MIN_OPTIONS} options.")
    if len(options) > MAX_OPTIONS:
        raise InputError(f"Max {MAX_OPTIONS} options.")
    for option in options:
        if len(option) > MAX_OPTION_LENGTH:
            raise InputError(
                f"Option {option!r} is longer than {MAX_OPTION_LENGTH} characters."
            )


def generate_room_code(source: RandomSource | None = None) -> str:
    """Return a random six-character room code."""
    rng = source if source is not None else make_source()
    n = len(CODE_ALPHABET)
    return "".join(CODE_ALPHABET[int(rng.random() * n)] for _ in range(CODE_LENGTH))


def normalize_code(code: str | None) -> str:
    return (code or "").strip().upper()


def format_remaining(delta: timedelta) -> str:
    """Minutes-only countdown text, e.g. "1h 5m"."""
    ms = int(delta.total_seconds() * 1000)
    if ms <= 0:
        return "0h 0m"
    total_minutes = ms // 60000
    return f"{total_minutes // 60}h {total_minutes % 60}m"


def is_complete_ballot(ranks: Sequence[str | None], options: Sequence[str]) -> bool:
    """True if every rank slot is filled and the ranks are a permutation of options."""
    if len(ranks) != len(options) or any(r is None for r in ranks):
        return False
    return sorted(ranks) == sorted(options)
