from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

from modules.forge_core.core.rng import RandomSource, ensure_rng, source_from_input
from modules.passphrase.core.padding import adjust_padding, rand_prefix, rand_separator, rand_suffix
from modules.passphrase.core.settings import PaddingStrategy, Preset, Settings
from modules.passphrase.core.transforms import apply_transforms, build_transforms_list, parse_transforms
from modules.passphrase.core.words import (
    DEFAULT_DICT_PATH,
    Dictionary,
    build_words_list,
    load_dict_file,
    words_pool,
)

MAX_COUNT = 200
MAX_WORDS = 255
MAX_SEPARATORS = 32
MAX_PADDING = 32
MAX_ADAPTIVE_LENGTH = 256


def rand_words(settings: Settings, pool: Sequence[str], rng: RandomSource) -> List[str]:
    words = build_words_list(settings, pool, rng)
    transforms = build_transforms_list(settings, rng)
    return apply_transforms(words, transforms)


class PassphraseGenerator:
    """Builds passphrases from a loaded dictionary."""

    def __init__(self, dictionary: Dictionary) -> None:
        self.dictionary = dictionary

    @classmethod
    def from_file(cls, path: str | Path = DEFAULT_DICT_PATH) -> "PassphraseGenerator":
        return cls(load_dict_file(path))

    def pool_for(self, settings: Settings) -> List[str]:
        return words_pool(self.dictionary, settings.word_length_range())

    def gen_pass(self, settings: Settings, rng: RandomSource | None = None) -> str:
        rng = ensure_rng(rng)

        words = rand_words(settings, self.pool_for(settings), rng)
        separator = rand_separator(settings, rng)
        prefix_symbols, prefix_digits = rand_prefix(settings, rng)
        suffix_digits, suffix_symbols = rand_suffix(settings, rng)

        passwd = (
            f"{prefix_symbols}{prefix_digits}"
            f"{separator.join(words)}"
            f"{suffix_digits}{suffix_symbols}"
        )
        return adjust_padding(settings, len(passwd), rng).apply(passwd)


def _parse_int(value: Any, *, label: str, default: int | None = None) -> Tuple[int | None, str | None]:
    if value is None or str(value).strip() == "":
        if default is None:
            return None, f"{label} is required."
        return default, None
    raw = str(value).strip()
    try:
        number = int(raw)
    except ValueError:
        return None, f"{label} must be a whole number."
    return number, None


def _parse_optional_int(
    value: Any,
    *,
    label: str,
    minimum: int = 0,
    maximum: int | None = None,
) -> Tuple[int | None, str | None]:
    if value is None or str(value).strip() == "":
        return None, None
    number, error = _parse_int(value, label=label)
    if error or number is None:
        return None, error
    if number < minimum or (maximum is not None and number > maximum):
        if maximum is None:
            return None, f"{label} must be at least {minimum}."
        return None, f"{label} must be between {minimum} and {maximum}."
    return number, None


def _parse_chars(value: Any, *, label: str) -> Tuple[str | None, str | None]:
    if value is None:
        return None, None
    raw = str(value)
    if raw == "":
        return None, None
    if raw.strip().lower() == "none":
        return "", None
    if len(raw) > MAX_SEPARATORS:
        return None, f"{label} must be {MAX_SEPARATORS} characters or less."
    return raw, None


def _parse_preset(value: Any) -> Tuple[Preset | None, str | None]:
    if value is None or str(value).strip() == "":
        return Preset.DEFAULT, None
    key = str(value).strip().lower().replace("-", "_")
    try:
        return Preset(key), None
    except ValueError:
        names = ", ".join(preset.value for preset in Preset)
        return None, f"Preset must be one of: {names}."


def build_settings(
    preset: Any = None,
    *,
    words: Any = None,
    min_length: Any = None,
    max_length: Any = None,
    transforms: Any = None,
    separators: Any = None,
    digits_before: Any = None,
    digits_after: Any = None,
    symbols: Any = None,
    symbols_before: Any = None,
    symbols_after: Any = None,
    adaptive_length: Any = None,
) -> Tuple[Settings | None, str | None]:
    """Start from a preset and apply every provided override through the builder.

    Blank values keep the preset's own setting.
    """
    preset_value, error = _parse_preset(preset)
    if error or preset_value is None:
        return None, error
    settings = Settings.from_preset(preset_value)

    words_int, error = _parse_optional_int(words, label="Words", maximum=MAX_WORDS)
    if error:
        return None, error
    if words_int is not None:
        settings, failure = settings.with_words_count(words_int)
        if failure:
            return None, failure.value

    min_int, error = _parse_optional_int(min_length, label="Min length")
    if error:
        return None, error
    max_int, error = _parse_optional_int(max_length, label="Max length")
    if error:
        return None, error
    if min_int is not None or max_int is not None:
        settings, failure = settings.with_word_lengths(min_int, max_int)
        if failure:
            return None, failure.value

    flags, error = parse_transforms(transforms)
    if error:
        return None, error
    if flags is not None:
        settings, failure = settings.with_word_transforms(flags)
        if failure:
            return None, failure.value

    separators_value, error = _parse_chars(separators, label="Separators")
    if error:
        return None, error
    if separators_value is not None:
        settings = settings.with_separators(separators_value)

    padding: Dict[str, int | None] = {}
    for label, key, raw in (
        ("Digits before", "digits_before", digits_before),
        ("Digits after", "digits_after", digits_after),
        ("Symbols before", "symbols_before", symbols_before),
        ("Symbols after", "symbols_after", symbols_after),
    ):
        padding[key], error = _parse_optional_int(raw, label=label, maximum=MAX_PADDING)
        if error:
            return None, error
    settings = settings.with_padding_digits(padding["digits_before"], padding["digits_after"])

    symbols_value, error = _parse_chars(symbols, label="Symbols")
    if error:
        return None, error
    if symbols_value is not None:
        settings = settings.with_padding_symbols(symbols_value)

    adaptive_int, error = _parse_optional_int(
        adaptive_length,
        label="Adaptive length",
        maximum=MAX_ADAPTIVE_LENGTH,
    )
    if error:
        return None, error
    if adaptive_int is not None:
        settings, failure = settings.with_padding_strategy(PaddingStrategy.adaptive(adaptive_int))
        if failure:
            return None, failure.value

    # explicit symbol blocks switch the policy back to fixed padding
    settings = settings.with_padding_symbol_lengths(
        padding["symbols_before"],
        padding["symbols_after"],
    )
    return settings, None


def generate_passphrases(
    preset: Any = None,
    count: Any = None,
    *,
    seed: Any = None,
    max_count: int = MAX_COUNT,
    generator: PassphraseGenerator | None = None,
    **overrides: Any,
) -> Tuple[Dict[str, Any] | None, str | None]:
    count_int, error = _parse_int(count, label="Count", default=5)
    if error or count_int is None:
        return None, error
    if count_int <= 0 or count_int > max_count:
        return None, f"Count must be between 1 and {max_count}."

    settings, error = build_settings(preset, **overrides)
    if error or settings is None:
        return None, error

    rng, seed_int, error = source_from_input(seed)
    if error or rng is None:
        return None, error

    generator = generator or PassphraseGenerator.from_file()
    values = [generator.gen_pass(settings, rng) for _ in range(count_int)]

    return {
        "preset": _parse_preset(preset)[0].value,
        "count": count_int,
        "words": settings.words_count,
        "padding": str(settings.padding_strategy),
        "seed": seed_int,
        "values": values,
    }, None
