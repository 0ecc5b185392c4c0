import logging

from consolekit import console as console_module
from consolekit.config import ConsoleSettings
from consolekit.console import Console, get_console, reset_console
from consolekit.symbols import SymbolSet
from consolekit.theme import Theme


def test_defaults():
    settings = ConsoleSettings()
    assert settings.to_dict() == {"symbol_set": "auto", "theme_name": "default", "log_level": "WARNING"}
    assert settings.symbols is SymbolSet.AUTO


def test_from_env():
    settings = ConsoleSettings.from_env({
        "CONSOLEKIT_SYMBOLS": "ASCII",
        "CONSOLEKIT_THEME": " Nord ",
        "CONSOLEKIT_LOG_LEVEL": "debug",
    })
    assert settings.symbols is SymbolSet.ASCII
    assert settings.theme_name == "nord"
    assert settings.log_level == "DEBUG"


def test_invalid_values_fall_back_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="consolekit.config"):
        settings = ConsoleSettings.from_env({
            "CONSOLEKIT_SYMBOLS": "emoji",
            "CONSOLEKIT_THEME": "neon",
            "CONSOLEKIT_LOG_LEVEL": "loud",
        })
    assert settings == ConsoleSettings()
    assert len(caplog.records) == 3


def test_from_dict_ignores_unknown_keys():
    settings = ConsoleSettings.from_dict({"theme_name": "dracula", "font_size": 14})
    assert settings.theme_name == "dracula"


def test_console_from_settings():
    console = Console.from_settings(ConsoleSettings(symbol_set="ascii", theme_name="dracula"))
    assert console.theme == Theme.dracula()
    assert console.glyphs.check == "[OK]"


def test_shared_console(monkeypatch):
    monkeypatch.setattr(console_module, "_console", None)
    monkeypatch.setenv("CONSOLEKIT_THEME", "nord")
    first = get_console()
    assert get_console() is first
    assert first.theme == Theme.nord()

    reset_console()
    assert get_console() is not first
    reset_console()
