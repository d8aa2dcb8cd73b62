import random

from modules.forge_core.core.rng import ensure_rng, make_rng, parse_seed, source_from_input


def test_parse_seed():
    assert parse_seed(None) == (None, None)
    assert parse_seed("  ") == (None, None)
    assert parse_seed(" 42 ") == (42, None)
    assert parse_seed("-3") == (-3, None)
    assert parse_seed(7) == (7, None)
    assert parse_seed("4.5") == (None, "Seed must be a whole number.")
    assert parse_seed("x", label="Run") == (None, "Run must be a whole number.")


def test_make_rng_seeded_is_reproducible():
    first = make_rng(11)
    second = make_rng(11)
    assert [first.randrange(1000) for _ in range(5)] == [second.randrange(1000) for _ in range(5)]


def test_make_rng_without_seed_uses_system_source():
    assert isinstance(make_rng(None), random.SystemRandom)
    assert isinstance(make_rng(), random.SystemRandom)


def test_ensure_rng_keeps_given_source():
    source = random.Random(0)
    assert ensure_rng(source) is source
    assert isinstance(ensure_rng(None), random.SystemRandom)


def test_source_from_input():
    rng, seed, error = source_from_input(" 5 ")
    assert error is None
    assert seed == 5
    assert rng.random() == random.Random(5).random()

    rng, seed, error = source_from_input("")
    assert error is None
    assert seed is None
    assert isinstance(rng, random.SystemRandom)

    assert source_from_input("abc") == (None, None, "Seed must be a whole number.")
