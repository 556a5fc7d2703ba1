import pytest

from rustdrills.ui import no_emoji, success, warn


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "1")
    assert no_emoji() is True
    monkeypatch.delenv("NO_EMOJI")
    assert no_emoji() is False


def test_no_emoji_set_but_empty_still_counts(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "")
    assert no_emoji() is True


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("Ran exercises/a.rs with errors")
    assert capsys.readouterr().out == "! Ran exercises/a.rs with errors\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("Successfully ran exercises/a.rs")
    assert capsys.readouterr().out == "✓ Successfully ran exercises/a.rs\n"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("careful")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert out.endswith(" careful\n")


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("done")
    assert capsys.readouterr().out == "✅ done\n"


def test_markup_is_not_interpreted(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("[bold]literal[/bold] :smile:")
    assert capsys.readouterr().out == "! [bold]literal[/bold] :smile:\n"