from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from modules.forge_core.core.rng import RandomSource

logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).resolve().parents[1] / "assets"
DEFAULT_DICT_PATH = ASSETS_DIR / "dict_en.txt"

Dictionary = Mapping[int, Sequence[str]]


def load_dict(text: str) -> Dict[int, List[str]]:
    """Parse ``length:word,word,...`` lines into a length → words mapping.

    Blank lines are ignored; lines without a numeric length are skipped with
    a warning. Repeated lengths extend the existing bucket.
    """
    dictionary: Dict[int, List[str]] = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        length_raw, _, words_csv = line.partition(":")
        try:
            length = int(length_raw.strip())
        except ValueError:
            logger.warning("Skipping dictionary line %d: invalid length %r.", lineno, length_raw)
            continue
        words = [word.strip() for word in words_csv.split(",") if word.strip()]
        dictionary.setdefault(length, []).extend(words)
    return dictionary


@lru_cache(maxsize=8)
def load_dict_file(path: str | Path = DEFAULT_DICT_PATH) -> Dictionary:
    """Load and cache a dictionary file.

    The cached value is shared by every caller, so it is returned read-only.
    """
    dict_path = Path(path)
    text = dict_path.read_text(encoding="utf-8")
    dictionary = load_dict(text)
    logger.info(
        "Loaded %d words in %d length buckets from %s.",
        sum(len(words) for words in dictionary.values()),
        len(dictionary),
        dict_path.name,
    )
    return MappingProxyType({length: tuple(words) for length, words in dictionary.items()})


def words_pool(dictionary: Dictionary, lengths: Iterable[int]) -> List[str]:
    pool: List[str] = []
    for length in lengths:
        pool.extend(dictionary.get(length, ()))
    return pool


def build_words_list(settings: Any, pool: Sequence[str], rng: RandomSource) -> List[str]:
    """Pick ``settings.words_count`` words from ``pool``.

    Small pools are sampled with replacement. Otherwise indices are drawn
    until enough distinct ones are seen; the loop has no attempt cap and
    terminates with probability 1 since ``len(pool) >= words_count``.
    """
    if not pool:
        return []

    count: int = settings.words_count
    size = len(pool)

    # not enough words to distinguishably randomize
    if size < count:
        return [pool[rng.randrange(size)] for _ in range(count)]

    seen: set[int] = set()
    words: List[str] = []
    while len(words) < count:
        index = rng.randrange(size)
        if index in seen:
            continue
        seen.add(index)
        words.append(pool[index])
    return words
