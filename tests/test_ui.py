import pytest

from ferrules import ui


@pytest.fixture
def plain(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")


@pytest.fixture
def fancy(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert ui.no_emoji() is False


def test_warn_without_emoji(plain, capsys):
    line = ui.warn("careful now")
    assert line == "! careful now"
    assert "! careful now" in capsys.readouterr().out


def test_success_without_emoji(plain, capsys):
    line = ui.success("all good")
    assert line == "✓ all good"
    assert "✓ all good" in capsys.readouterr().out


def test_warn_with_emoji(fancy, capsys):
    line = ui.warn("careful now")
    assert line.startswith("⚠️")
    assert line.endswith(" careful now")
    assert "careful now" in capsys.readouterr().out


def test_success_with_emoji(fancy, capsys):
    line = ui.success("all good")
    assert line.startswith("✅ ")
    assert "all good" in capsys.readouterr().out


def test_message_brackets_are_kept_verbatim(plain, capsys):
    line = ui.warn("[bold]x[/bold]")
    assert line.endswith("[bold]x[/bold]")
    assert "[bold]x[/bold]" in capsys.readouterr().out