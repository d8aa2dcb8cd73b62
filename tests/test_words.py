"""Tests for dictionary loading and word sampling."""

import logging
import random

import pytest

from modules.passphrase.core.settings import Settings
from modules.passphrase.core.words import (
    DEFAULT_DICT_PATH,
    build_words_list,
    load_dict,
    load_dict_file,
    words_pool,
)


def _settings(words_count: int) -> Settings:
    settings, error = Settings().with_words_count(words_count)
    assert error is None
    return settings


def test_load_dict_parses_buckets(caplog):
    text = "4:able,bake\n5:apple\n\nxx:broken,line\n4:cake,\n# comment\n"

    with caplog.at_level(logging.WARNING):
        dictionary = load_dict(text)

    assert dictionary == {4: ["able", "bake", "cake"], 5: ["apple"]}
    assert "invalid length" in caplog.text


def test_load_dict_file_default_asset():
    dictionary = load_dict_file(DEFAULT_DICT_PATH)

    assert sorted(dictionary) == list(range(4, 11))
    for length, words in dictionary.items():
        assert words
        assert all(len(word) == length for word in words)


def test_cached_dictionary_is_read_only():
    dictionary = load_dict_file(DEFAULT_DICT_PATH)

    with pytest.raises(TypeError):
        dictionary[4] = ["zzzz"]
    with pytest.raises(AttributeError):
        dictionary[4].append("zzzz")
    assert all(isinstance(words, tuple) for words in dictionary.values())

    # later callers see the same untouched buckets
    assert load_dict_file(DEFAULT_DICT_PATH) is dictionary
    assert "zzzz" not in dictionary[4]


def test_load_dict_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dict_file(tmp_path / "missing.txt")


def test_words_pool_restricts_lengths(small_dictionary):
    pool = words_pool(small_dictionary, range(4, 6))

    assert pool
    assert all(len(word) in (4, 5) for word in pool)
    assert words_pool(small_dictionary, range(11, 13)) == []


def test_empty_pool_returns_no_words(rng):
    assert build_words_list(_settings(4), [], rng) == []


def test_large_pool_has_no_duplicates():
    pool = [f"word{idx}" for idx in range(12)]
    for seed in range(50):
        words = build_words_list(_settings(6), pool, random.Random(seed))
        assert len(words) == 6
        assert len(set(words)) == 6
        assert set(words) <= set(pool)


def test_pool_equal_to_count_is_a_permutation(rng):
    pool = ["alpha", "bravo", "charlie", "delta"]
    words = build_words_list(_settings(4), pool, rng)

    assert sorted(words) == sorted(pool)


def test_duplicate_text_at_distinct_indices_is_allowed(rng):
    pool = ["echo", "echo", "fern"]
    words = build_words_list(_settings(3), pool, rng)

    assert sorted(words) == ["echo", "echo", "fern"]


def test_small_pool_samples_with_replacement(rng):
    pool = ["able", "bake"]
    words = build_words_list(_settings(10), pool, rng)

    assert len(words) == 10
    assert set(words) <= set(pool)
    # ten draws from two words must repeat
    assert len(set(words)) < len(words)


def test_sampling_is_reproducible_with_seed():
    pool = [f"word{idx}" for idx in range(40)]
    first = build_words_list(_settings(5), pool, random.Random(99))
    second = build_words_list(_settings(5), pool, random.Random(99))

    assert first == second
