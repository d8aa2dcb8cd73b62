from __future__ import annotations

from enum import Flag
from typing import Any, List, Sequence, Tuple

from modules.forge_core.core.rng import RandomSource


class WordTransform(Flag):
    LOWERCASE = 1
    TITLECASE = 2
    UPPERCASE = 4
    INVERSED_TITLECASE = 8
    ALTERCASE_LOWER_FIRST = 16
    ALTERCASE_UPPER_FIRST = 32

    SINGLE_WORD = LOWERCASE | TITLECASE | UPPERCASE | INVERSED_TITLECASE
    ALTERCASE = ALTERCASE_LOWER_FIRST | ALTERCASE_UPPER_FIRST


# Selection order for independent per-word transforms.
SINGLE_WORD_TRANSFORMS: Tuple[WordTransform, ...] = (
    WordTransform.LOWERCASE,
    WordTransform.TITLECASE,
    WordTransform.UPPERCASE,
    WordTransform.INVERSED_TITLECASE,
)

TRANSFORM_NAMES = {
    "lower": WordTransform.LOWERCASE,
    "title": WordTransform.TITLECASE,
    "upper": WordTransform.UPPERCASE,
    "inversed_title": WordTransform.INVERSED_TITLECASE,
    "altercase_lower_first": WordTransform.ALTERCASE_LOWER_FIRST,
    "altercase_upper_first": WordTransform.ALTERCASE_UPPER_FIRST,
}


def has_single_word(flags: WordTransform) -> bool:
    return bool(flags & WordTransform.SINGLE_WORD)


def enabled_transforms(flags: WordTransform) -> List[WordTransform]:
    return [transform for transform in SINGLE_WORD_TRANSFORMS if transform in flags]


def parse_transforms(value: Any) -> Tuple[WordTransform | None, str | None]:
    """Parse a comma separated list of transform names into one flag value.

    Blank input yields ``None`` without an error so callers can keep the
    transforms they already have.
    """
    if value is None:
        return None, None
    raw = str(value).strip().lower()
    if not raw:
        return None, None

    flags = WordTransform(0)
    for chunk in raw.replace(" ", ",").split(","):
        key = chunk.strip().replace("-", "_")
        if not key:
            continue
        transform = TRANSFORM_NAMES.get(key)
        if transform is None:
            allowed = ", ".join(TRANSFORM_NAMES)
            return None, f"Unknown transform '{key}'. Use one of: {allowed}."
        flags |= transform
    return flags, None


def _altercase(count: int, even: WordTransform, odd: WordTransform) -> List[WordTransform]:
    return [even if idx % 2 == 0 else odd for idx in range(count)]


def build_transforms_list(settings: Any, rng: RandomSource) -> List[WordTransform]:
    flags: WordTransform = settings.word_transforms
    count: int = settings.words_count

    if WordTransform.ALTERCASE_LOWER_FIRST in flags:
        return _altercase(count, WordTransform.LOWERCASE, WordTransform.UPPERCASE)

    if WordTransform.ALTERCASE_UPPER_FIRST in flags:
        return _altercase(count, WordTransform.UPPERCASE, WordTransform.LOWERCASE)

    allowed = enabled_transforms(flags)
    if not allowed:
        # builder never lets this through; render as lowercase
        allowed = [WordTransform.LOWERCASE]
    return [rng.choice(allowed) for _ in range(count)]


def transform_word(word: str, transform: WordTransform) -> str:
    if transform == WordTransform.TITLECASE:
        return word[:1].upper() + word[1:]
    if transform == WordTransform.UPPERCASE:
        return word.upper()
    if transform == WordTransform.INVERSED_TITLECASE:
        return word[:1].lower() + word[1:].upper()
    return word.lower()


def apply_transforms(words: Sequence[str], transforms: Sequence[WordTransform]) -> List[str]:
    return [transform_word(word, transform) for word, transform in zip(words, transforms)]
