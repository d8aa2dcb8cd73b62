from modules.passphrase.core.settings import Preset
from scripts.passphrase import custom_settings, main


def test_custom_settings_keeps_symbol_padding():
    settings = custom_settings()

    assert settings.words_count == 3
    assert settings.word_lengths == (4, 8)
    assert settings.separators == "."
    assert settings.padding_symbol_lengths == (0, 2)
    assert not settings.padding_strategy.is_adaptive


def test_showcase_prints_every_preset(capsys):
    assert main(["--seed", "3"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(Preset) + 1
    assert lines[0].startswith("custom: ")
    assert lines[-1].startswith("xkcd: ")


def test_preset_count(capsys):
    assert main(["--preset", "xkcd", "--count", "2", "--seed", "3"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert all(line.count("-") == 3 for line in lines)


def test_invalid_input_returns_error(capsys):
    assert main(["--preset", "nope"]) == 1
    assert "Preset must be one of" in capsys.readouterr().err

    assert main(["--seed", "abc"]) == 1
    assert "Seed must be a whole number." in capsys.readouterr().err
