from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from modules.forge_core.core.rng import RandomSource

# Widest digit block that still samples from a 64-bit range.
MAX_DIGITS = 20
_U64_MAX = 2**64 - 1

UNCHANGED = "unchanged"
PAD = "pad"
TRIM = "trim"


@dataclass(frozen=True)
class PaddingResult:
    action: str = UNCHANGED
    symbols: str = ""
    length: int = 0

    @classmethod
    def unchanged(cls) -> "PaddingResult":
        return cls()

    @classmethod
    def pad(cls, symbols: str) -> "PaddingResult":
        return cls(action=PAD, symbols=symbols)

    @classmethod
    def trim_to(cls, length: int) -> "PaddingResult":
        return cls(action=TRIM, length=length)

    def apply(self, passwd: str) -> str:
        if self.action == PAD:
            return passwd + self.symbols
        if self.action == TRIM:
            return passwd[: self.length]
        return passwd


def rand_chars(pool: str, count: int, rng: RandomSource) -> str:
    """One character from ``pool`` repeated ``count`` times."""
    if not pool or count <= 0:
        return ""
    return rng.choice(pool) * count


def rand_digits(count: int, rng: RandomSource) -> str:
    if count <= 0:
        return ""

    width = min(count, MAX_DIGITS)
    lower = 10 ** (width - 1)
    upper = _U64_MAX if width == MAX_DIGITS else 10**width
    return str(rng.randrange(lower, upper))


def rand_separator(settings: Any, rng: RandomSource) -> str:
    return rand_chars(settings.separators, 1, rng)


def rand_prefix(settings: Any, rng: RandomSource) -> Tuple[str, str]:
    """Return ``(symbols, digits)``, in the order they precede the words."""
    prefix_digits, _ = settings.padding_digits
    prefix_symbols, _ = settings.padding_symbol_lengths
    return (
        rand_chars(settings.padding_symbols, prefix_symbols, rng),
        rand_digits(prefix_digits, rng),
    )


def rand_suffix(settings: Any, rng: RandomSource) -> Tuple[str, str]:
    """Return ``(digits, symbols)``, in the order they follow the words."""
    _, suffix_digits = settings.padding_digits
    _, suffix_symbols = settings.padding_symbol_lengths
    return (
        rand_digits(suffix_digits, rng),
        rand_chars(settings.padding_symbols, suffix_symbols, rng),
    )


def adjust_padding(settings: Any, pass_length: int, rng: RandomSource) -> PaddingResult:
    strategy = settings.padding_strategy
    if not strategy.is_adaptive:
        return PaddingResult.unchanged()

    target: int = strategy.adaptive_length
    if target > pass_length:
        return PaddingResult.pad(rand_chars(settings.padding_symbols, target - pass_length, rng))
    return PaddingResult.trim_to(target)
