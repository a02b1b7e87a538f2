"""
Tests for the command-line interface.
"""

import pytest

from ..cli import main


class TestCli:
    """Tests for the non-interactive commands."""

    def test_score(self, capsys):
        main(["score", "cat", "cats", "--keys", "S"])
        out = capsys.readouterr().out
        assert "CAT → CATS: 2 point(s)" in out
        assert "Add: +1, Key Usage: +1" in out

    def test_validate_ok(self, capsys):
        main(["validate", "word"])
        assert "WORD: valid" in capsys.readouterr().out

    def test_validate_failure_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["validate", "c4t"])
        assert exc_info.value.code == 1
        assert "only letters allowed" in capsys.readouterr().out

    def test_bot_with_word_file(self, tmp_path, capsys):
        words = tmp_path / "words.txt"
        words.write_text("CAT\nCATS\nBAT\n", encoding="utf-8")
        main(["--words", str(words), "--seed", "1", "bot", "cat"])
        out = capsys.readouterr().out
        assert "Selected move: CAT → BAT (2 points)" in out

    def test_play_quits_on_eof(self, monkeypatch, capsys):
        def no_input(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", no_input)
        main(["--seed", "1", "play", "--word", "cat"])
        out = capsys.readouterr().out
        assert "Starting word: CAT" in out
        assert "Bye!" in out

    def test_no_command_prints_help(self):
        with pytest.raises(SystemExit):
            main([])
