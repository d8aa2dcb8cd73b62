from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple

from modules.passphrase.core.transforms import WordTransform, has_single_word

MIN_WORD_LENGTH = 4
MAX_WORD_LENGTH = 10

DEFAULT_WORDS_COUNT = 3
DEFAULT_WORD_LENGTHS = (MIN_WORD_LENGTH, MAX_WORD_LENGTH)
DEFAULT_WORD_TRANSFORMS = WordTransform.LOWERCASE | WordTransform.UPPERCASE
DEFAULT_SEPARATORS = ".-_~"
DEFAULT_SYMBOLS = "~@$%^&*-_+=:|~?/.;"
DEFAULT_PADDING_LENGTH = 2


class SettingsError(str, Enum):
    INVALID_WORDS_COUNT = "only positive integer is allowed for words count"
    WORD_LENGTH_TOO_SHORT = f"min word length must be {MIN_WORD_LENGTH} or higher"
    WORD_LENGTH_TOO_LONG = f"max word length must be {MAX_WORD_LENGTH} or lower"
    INVALID_TRANSFORM = "invalid transform"
    INVALID_ADAPTIVE_TARGET = "invalid adaptive padding number"


class Preset(str, Enum):
    APPLE_ID = "apple_id"
    DEFAULT = "default"
    WINDOWS_NTLM_V1 = "windows_ntlm_v1"
    SECURITY_QUESTIONS = "security_questions"
    WEB16 = "web16"
    WEB32 = "web32"
    WIFI = "wifi"
    XKCD = "xkcd"


@dataclass(frozen=True)
class PaddingStrategy:
    """Fixed padding keeps the assembled length; adaptive pads or trims to a target."""

    adaptive_length: int | None = None

    @classmethod
    def fixed(cls) -> "PaddingStrategy":
        return cls()

    @classmethod
    def adaptive(cls, length: int) -> "PaddingStrategy":
        return cls(adaptive_length=length)

    @property
    def is_adaptive(self) -> bool:
        return self.adaptive_length is not None

    def __str__(self) -> str:
        if self.adaptive_length is None:
            return "fixed"
        return f"adaptive({self.adaptive_length})"


SettingsResult = Tuple["Settings | None", "SettingsError | None"]


@dataclass(frozen=True)
class Settings:
    """Immutable generation policy.

    Builder methods never touch the instance they are called on: infallible
    ones return a new ``Settings``, fallible ones return ``(settings, error)``
    with exactly one side set.
    """

    words_count: int = DEFAULT_WORDS_COUNT
    word_lengths: Tuple[int, int] = DEFAULT_WORD_LENGTHS
    word_transforms: WordTransform = DEFAULT_WORD_TRANSFORMS
    separators: str = DEFAULT_SEPARATORS
    padding_digits: Tuple[int, int] = (0, DEFAULT_PADDING_LENGTH)
    padding_symbols: str = DEFAULT_SYMBOLS
    padding_symbol_lengths: Tuple[int, int] = (0, DEFAULT_PADDING_LENGTH)
    padding_strategy: PaddingStrategy = field(default_factory=PaddingStrategy.fixed)

    def __post_init__(self) -> None:
        # builder methods report these as SettingsError; reaching here means
        # the value was constructed by hand
        if self.words_count < 1:
            raise ValueError(SettingsError.INVALID_WORDS_COUNT.value)

        min_length, max_length = self.word_lengths
        if min_length > max_length:
            raise ValueError(f"word lengths out of order: {self.word_lengths}")
        if min_length < MIN_WORD_LENGTH:
            raise ValueError(SettingsError.WORD_LENGTH_TOO_SHORT.value)
        if max_length > MAX_WORD_LENGTH:
            raise ValueError(SettingsError.WORD_LENGTH_TOO_LONG.value)

        transforms = self.word_transforms
        if transforms & WordTransform.ALTERCASE:
            if transforms not in (
                WordTransform.ALTERCASE_LOWER_FIRST,
                WordTransform.ALTERCASE_UPPER_FIRST,
            ):
                raise ValueError(SettingsError.INVALID_TRANSFORM.value)
        elif not has_single_word(transforms):
            raise ValueError(SettingsError.INVALID_TRANSFORM.value)

        strategy = self.padding_strategy
        if strategy.is_adaptive and (strategy.adaptive_length or 0) <= 0:
            raise ValueError(SettingsError.INVALID_ADAPTIVE_TARGET.value)

    def word_length_range(self) -> range:
        min_length, max_length = self.word_lengths
        return range(min_length, max_length + 1)

    def with_words_count(self, words_count: int) -> SettingsResult:
        if words_count <= 0:
            return None, SettingsError.INVALID_WORDS_COUNT
        return replace(self, words_count=words_count), None

    def with_word_lengths(
        self,
        min_length: int | None = None,
        max_length: int | None = None,
    ) -> SettingsResult:
        if min_length is None:
            min_length = self.word_lengths[0]
        if max_length is None:
            max_length = self.word_lengths[1]

        low, high = min(min_length, max_length), max(min_length, max_length)
        if low < MIN_WORD_LENGTH:
            return None, SettingsError.WORD_LENGTH_TOO_SHORT
        if high > MAX_WORD_LENGTH:
            return None, SettingsError.WORD_LENGTH_TOO_LONG
        return replace(self, word_lengths=(low, high)), None

    def with_separators(self, separators: str) -> "Settings":
        return replace(self, separators=separators)

    def with_padding_digits(
        self,
        prefix: int | None = None,
        suffix: int | None = None,
    ) -> "Settings":
        if prefix is None and suffix is None:
            return self
        current_prefix, current_suffix = self.padding_digits
        return replace(
            self,
            padding_digits=(
                current_prefix if prefix is None else prefix,
                current_suffix if suffix is None else suffix,
            ),
        )

    def with_padding_symbols(self, symbols: str) -> "Settings":
        return replace(self, padding_symbols=symbols)

    def with_padding_symbol_lengths(
        self,
        prefix: int | None = None,
        suffix: int | None = None,
    ) -> "Settings":
        if prefix is None and suffix is None:
            return self
        current_prefix, current_suffix = self.padding_symbol_lengths
        return replace(
            self,
            padding_symbol_lengths=(
                current_prefix if prefix is None else prefix,
                current_suffix if suffix is None else suffix,
            ),
            padding_strategy=PaddingStrategy.fixed(),
        )

    def with_padding_strategy(self, strategy: PaddingStrategy) -> SettingsResult:
        if strategy.is_adaptive and (strategy.adaptive_length or 0) <= 0:
            return None, SettingsError.INVALID_ADAPTIVE_TARGET
        # adaptive trimming and explicit symbol blocks are mutually exclusive
        return replace(self, padding_strategy=strategy, padding_symbol_lengths=(0, 0)), None

    def with_word_transforms(self, transforms: WordTransform) -> SettingsResult:
        # group transforms win over any single-word flags passed with them
        if WordTransform.ALTERCASE_LOWER_FIRST in transforms:
            return replace(self, word_transforms=WordTransform.ALTERCASE_LOWER_FIRST), None
        if WordTransform.ALTERCASE_UPPER_FIRST in transforms:
            return replace(self, word_transforms=WordTransform.ALTERCASE_UPPER_FIRST), None

        if not has_single_word(transforms):
            return None, SettingsError.INVALID_TRANSFORM
        return replace(self, word_transforms=transforms & WordTransform.SINGLE_WORD), None

    @classmethod
    def from_preset(cls, preset: "Preset | str") -> "Settings":
        key = preset.value if isinstance(preset, Preset) else str(preset).strip().lower()
        settings = PRESETS.get(key)
        if settings is None:
            return cls()
        return settings


_WEB_SEPARATORS = "-+=.*_|~,"
_WEB_SYMBOLS = "!@$%^&*+=:|~?"

PRESETS: Mapping[str, Settings] = MappingProxyType(
    {
        Preset.APPLE_ID.value: Settings(
            words_count=3,
            word_lengths=(5, 7),
            word_transforms=WordTransform.LOWERCASE | WordTransform.UPPERCASE,
            separators="-:.,",
            padding_digits=(2, 2),
            padding_symbols="!?@&",
            padding_symbol_lengths=(1, 1),
        ),
        Preset.DEFAULT.value: Settings(),
        Preset.WINDOWS_NTLM_V1.value: Settings(
            words_count=2,
            word_lengths=(5, 5),
            word_transforms=WordTransform.INVERSED_TITLECASE,
            separators=_WEB_SEPARATORS,
            padding_digits=(1, 0),
            padding_symbols=_WEB_SYMBOLS,
            padding_symbol_lengths=(0, 1),
        ),
        Preset.SECURITY_QUESTIONS.value: Settings(
            words_count=6,
            word_lengths=(4, 8),
            word_transforms=WordTransform.LOWERCASE,
            separators=" ",
            padding_digits=(0, 0),
            padding_symbols=".!?",
            padding_symbol_lengths=(0, 1),
        ),
        Preset.WEB16.value: Settings(
            words_count=3,
            word_lengths=(4, 4),
            word_transforms=WordTransform.LOWERCASE | WordTransform.UPPERCASE,
            separators=_WEB_SEPARATORS,
            padding_digits=(0, 0),
            padding_symbols=_WEB_SYMBOLS,
            padding_symbol_lengths=(1, 1),
        ),
        Preset.WEB32.value: Settings(
            words_count=4,
            word_lengths=(4, 5),
            word_transforms=WordTransform.ALTERCASE_UPPER_FIRST,
            separators=_WEB_SEPARATORS,
            padding_digits=(2, 2),
            padding_symbols=_WEB_SYMBOLS,
            padding_symbol_lengths=(1, 1),
        ),
        Preset.WIFI.value: Settings(
            words_count=6,
            word_lengths=(4, 8),
            word_transforms=WordTransform.LOWERCASE | WordTransform.UPPERCASE,
            separators=_WEB_SEPARATORS,
            padding_digits=(4, 4),
            padding_symbols=_WEB_SYMBOLS,
            padding_symbol_lengths=(0, 0),
            padding_strategy=PaddingStrategy.adaptive(63),
        ),
        Preset.XKCD.value: Settings(
            words_count=4,
            word_lengths=(4, 8),
            word_transforms=WordTransform.LOWERCASE | WordTransform.UPPERCASE,
            separators="-",
            padding_digits=(0, 0),
            padding_symbols="",
            padding_symbol_lengths=(0, 0),
        ),
    }
)
