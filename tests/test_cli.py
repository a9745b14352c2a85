"""
Tests for the command-line interface and settings.
"""

import json

import pytest

from htmldecks.cli import main
from htmldecks.config import EditorSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in (
        "HTMLDECKS_DEBOUNCE_MS",
        "HTMLDECKS_WATERMARK",
        "HTMLDECKS_OUTPUT_DIR",
        "HTMLDECKS_DEFAULT_THEME",
        "HTMLDECKS_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    # Relative default paths land in the test directory
    monkeypatch.chdir(tmp_path)


def test_settings_defaults():
    settings = EditorSettings.from_env()
    assert settings.debounce_ms == 300
    assert settings.watermark is True
    assert settings.default_theme == "startup-pitch"
    assert str(settings.output_dir) == "output"
    assert settings.debug is False


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("HTMLDECKS_DEBOUNCE_MS", "50")
    monkeypatch.setenv("HTMLDECKS_WATERMARK", "false")
    monkeypatch.setenv("HTMLDECKS_DEBUG", "1")
    settings = EditorSettings.from_env()
    assert settings.debounce_ms == 50
    assert settings.watermark is False
    assert settings.debug is True


def test_themes_command(capsys):
    assert main(["themes"]) == 0
    out = capsys.readouterr().out
    assert "startup-pitch" in out
    assert "swiss-modern" in out


def test_init_then_export(tmp_path, capsys):
    """Test writing a deck file and exporting it."""
    deck_path = tmp_path / "pitch.json"
    assert main(["init", "--theme", "swiss-modern", "-o", str(deck_path)]) == 0

    data = json.loads(deck_path.read_text(encoding="utf-8"))
    assert data["companyName"] == "Studio Grid"

    out_dir = tmp_path / "site"
    assert main(["export", str(deck_path), "-t", "swiss-modern", "-o", str(out_dir), "--no-watermark"]) == 0

    html = (out_dir / "studio-grid-swiss-modern.html").read_text(encoding="utf-8")
    assert "Form Follows Function" in html
    assert "Made with HTML Decks" not in html


def test_export_uses_watermark_setting(tmp_path):
    deck_path = tmp_path / "deck.json"
    main(["init", "-o", str(deck_path)])
    main(["export", str(deck_path), "-o", str(tmp_path)])

    html = (tmp_path / "acme-corp-startup-pitch.html").read_text(encoding="utf-8")
    assert "Made with HTML Decks" in html


def test_unknown_theme_is_an_error(capsys):
    assert main(["init", "--theme", "nope"]) == 1
    assert "Error: Unknown theme: nope" in capsys.readouterr().err


def test_missing_deck_file(tmp_path, capsys):
    assert main(["export", str(tmp_path / "missing.json")]) == 1
    assert "Error: Deck file not found" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
