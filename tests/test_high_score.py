"""
Tests for high score persistence.
"""

import logging
from unittest.mock import patch

import pytest

from data_access.high_score import load_high_score, save_high_score


class TestLoadHighScore:
    """Tests for load_high_score()."""

    def test_reads_stored_value(self, tmp_path):
        path = tmp_path / "highscore.txt"
        path.write_text("120")
        assert load_high_score(path) == 120

    def test_tolerates_surrounding_whitespace(self, tmp_path):
        path = tmp_path / "highscore.txt"
        path.write_text("  70\n")
        assert load_high_score(path) == 70

    def test_missing_file_is_zero(self, tmp_path):
        assert load_high_score(tmp_path / "nope.txt") == 0

    @pytest.mark.parametrize("content", ["", "abc", "12.5", "-40"])
    def test_corrupt_content_is_zero(self, tmp_path, content, caplog):
        path = tmp_path / "highscore.txt"
        path.write_text(content)

        with caplog.at_level(logging.WARNING):
            assert load_high_score(path) == 0
        assert "high score" in caplog.text

    def test_undecodable_bytes_are_zero(self, tmp_path, caplog):
        path = tmp_path / "highscore.txt"
        path.write_bytes(b"\xff\xfe12")

        with caplog.at_level(logging.WARNING):
            assert load_high_score(path) == 0
        assert "Could not read high score file" in caplog.text

    def test_unreadable_file_is_zero(self, tmp_path):
        path = tmp_path / "highscore.txt"
        path.write_text("10")
        with patch("pathlib.Path.read_text", side_effect=PermissionError("denied")):
            assert load_high_score(path) == 0

    def test_accepts_str_path(self, tmp_path):
        path = tmp_path / "highscore.txt"
        path.write_text("30")
        assert load_high_score(str(path)) == 30


class TestSaveHighScore:
    """Tests for save_high_score()."""

    def test_overwrites_file(self, tmp_path):
        path = tmp_path / "highscore.txt"
        path.write_text("99999 old junk")

        assert save_high_score(path, 40) is True
        assert path.read_text() == "40"

    def test_write_failure_is_logged_not_raised(self, tmp_path, caplog):
        path = tmp_path / "missing_dir" / "highscore.txt"

        with caplog.at_level(logging.WARNING):
            assert save_high_score(path, 10) is False
        assert "Failed to save high score" in caplog.text

    def test_value_survives_round_trip(self, tmp_path):
        path = tmp_path / "highscore.txt"
        save_high_score(path, 250)
        assert load_high_score(path) == 250
