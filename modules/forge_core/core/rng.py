"""Randomness sources shared by the generators.

A seeded source replays the same passphrases; without a seed the operating
system's generator is used.
"""

from __future__ import annotations

import random
from typing import Any, Tuple

RandomSource = random.Random


def parse_seed(value: Any, *, label: str = "Seed") -> Tuple[int | None, str | None]:
    """Read an optional integer seed from form, CLI or query input."""
    raw = "" if value is None else str(value).strip()
    if raw == "":
        return None, None
    try:
        seed = int(raw)
    except ValueError:
        return None, f"{label} must be a whole number."
    return seed, None


def make_rng(seed: int | None = None) -> RandomSource:
    return random.SystemRandom() if seed is None else random.Random(seed)


def ensure_rng(rng: RandomSource | None) -> RandomSource:
    if rng is None:
        return make_rng()
    return rng


def source_from_input(
    value: Any,
    *,
    label: str = "Seed",
) -> Tuple[RandomSource | None, int | None, str | None]:
    """Parse ``value`` and build the matching source.

    Returns ``(rng, seed, error)``; ``rng`` is None only when ``error`` is set.
    """
    seed, error = parse_seed(value, label=label)
    if error:
        return None, None, error
    return make_rng(seed), seed, None
