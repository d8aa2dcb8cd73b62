#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from typing import List

from modules.forge_core.core.rng import RandomSource, source_from_input
from modules.passphrase.core.generate import PassphraseGenerator, generate_passphrases
from modules.passphrase.core.settings import PaddingStrategy, Preset, Settings
from modules.passphrase.core.transforms import WordTransform
from modules.passphrase.core.words import DEFAULT_DICT_PATH


def custom_settings() -> Settings:
    settings, error = Settings().with_words_count(3)
    if error is None:
        settings, error = settings.with_word_lengths(4, 8)
    if error is None:
        # strategy first: choosing one clears the symbol lengths set below
        settings, error = settings.with_padding_strategy(PaddingStrategy.fixed())
    if error is None:
        settings, error = settings.with_word_transforms(
            WordTransform.LOWERCASE | WordTransform.UPPERCASE
        )
    if error is not None:
        raise SystemExit(f"Invalid settings: {error.value}")
    return (
        settings.with_separators(".")
        .with_padding_digits(0, 2)
        .with_padding_symbols("!@#$%^&*-_=+:|~?/;")
        .with_padding_symbol_lengths(0, 2)
    )


def showcase(generator: PassphraseGenerator, rng: RandomSource) -> List[str]:
    lines = [f"custom: {generator.gen_pass(custom_settings(), rng)}"]
    for preset in Preset:
        lines.append(f"{preset.value}: {generator.gen_pass(Settings.from_preset(preset), rng)}")
    return lines


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate memorable passphrases.")
    parser.add_argument("--preset", help="Preset name; omit to show every preset.")
    parser.add_argument("-c", "--count", default="1", help="Passphrases to print (default: 1).")
    parser.add_argument("--seed", help="Seed for reproducible output.")
    parser.add_argument("--dict", dest="dict_path", default=str(DEFAULT_DICT_PATH),
                        help="Path to a length:word,... dictionary.")
    args = parser.parse_args(argv)

    generator = PassphraseGenerator.from_file(args.dict_path)

    if not args.preset:
        rng, _, error = source_from_input(args.seed)
        if error or rng is None:
            print(f"Error: {error}", file=sys.stderr)
            return 1
        for line in showcase(generator, rng):
            print(line)
        return 0

    result, error = generate_passphrases(
        args.preset,
        args.count,
        seed=args.seed,
        generator=generator,
    )
    if error or result is None:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    for value in result["values"]:
        print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
