# tests/unit/test_aphorism_service.py
import logging

import pytest

from movie_service_api.app.services.aphorism_service import (
    DEFAULT_APHORISMS,
    AphorismService,
)


class TestReadAphorisms:

    def test_splits_on_percent(self, tmp_path):
        path = tmp_path / "aphorisms.txt"
        path.write_text("First - A\n%\n  Second - B  \n%\n\n%\nThird - C\n", encoding="utf-8")

        assert AphorismService.read_aphorisms(str(path)) == ["First - A", "Second - B", "Third - C"]

    def test_missing_file_uses_defaults(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            aphorisms = AphorismService.read_aphorisms(str(tmp_path / "missing.txt"))

        assert aphorisms == DEFAULT_APHORISMS
        assert "Failed to read aphorisms" in caplog.text

    def test_defaults_are_copied(self, tmp_path):
        aphorisms = AphorismService.read_aphorisms(str(tmp_path / "missing.txt"))
        aphorisms.clear()

        assert DEFAULT_APHORISMS

    def test_empty_file(self, tmp_path):
        path = tmp_path / "aphorisms.txt"
        path.write_text("%\n%\n", encoding="utf-8")

        assert AphorismService.read_aphorisms(str(path)) == []


class TestRandomAphorism:

    def test_empty_list(self):
        assert AphorismService.random_aphorism([]) == "No aphorisms available"

    def test_picks_from_list(self):
        choices = ["a - b", "c - d"]

        for _ in range(10):
            assert AphorismService.random_aphorism(choices) in choices


class TestFormatAphorism:

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Optimism is the faith that leads to achievement. - Helen Keller",
             ("Optimism is the faith that leads to achievement.", "Helen Keller")),
            ("Keep going. - Jackie Joyner-Kersee", ("Keep going.", "Jackie Joyner-Kersee")),
            ("Well-known words - hard won - Someone", ("Well-known words - hard won", "Someone")),
            ("No author here", ("No author here", "Unknown")),
            ("Dangling - ", ("Dangling -", "Unknown")),
        ],
    )
    def test_split(self, text, expected):
        assert AphorismService.format_aphorism(text) == expected

    def test_empty_placeholder_still_has_two_parts(self):
        message, author = AphorismService.format_aphorism(AphorismService.random_aphorism([]))

        assert message == "No aphorisms available"
        assert author == "Unknown"

    def test_random_quote(self, aphorisms_file):
        assert AphorismService.random_quote(str(aphorisms_file)) == ("Stay hungry, stay foolish.", "Steve Jobs")
