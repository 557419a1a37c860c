"""Tests for sheet slug sanitization and the sheet repository."""

import pytest

from boekhouding.services.sheets import SheetRepository, sanitize_slug


@pytest.mark.parametrize("raw, expected", [
    ("dashboard", "dashboard"),
    ("winst-verlies_2025", "winst-verlies_2025"),
    ("../etc", "etc"),
    ("../../passwd", "passwd"),
    ("Q1-report", "1-report"),
    ("btw rapport!", "btwrapport"),
    ("a/b\\c", "abc"),
    ("", None),
    ("*!*", None),
    ("../", None),
    ("ABC", None),
    (None, None),
    (42, None),
])
def test_sanitize_slug(raw, expected):
    assert sanitize_slug(raw) == expected


class TestSheetRepository:

    def test_round_trip(self, sheets):
        html = "<h1>Winst &amp; verlies</h1>\r\n<p>€ 12,50</p>\n"
        assert sheets.save("winst-verlies", html) is True
        assert sheets.load("winst-verlies") == html

    def test_file_layout(self, sheets):
        sheets.save("btw", "<p>x</p>")
        path = sheets.directory / "btw.html"
        assert path.is_file()
        assert path.read_bytes() == b"<p>x</p>"

    def test_load_uses_sanitized_name(self, sheets):
        sheets.save("relaties", "list")
        assert sheets.load("relaties!") == "list"
        assert sheets.load("../relaties") == "list"

    def test_traversal_stays_inside_directory(self, sheets):
        sheets.save("../escape", "nope")
        assert not (sheets.directory.parent / "escape.html").exists()
        assert (sheets.directory / "escape.html").read_text(encoding="utf-8") == "nope"

    def test_save_replaces_content(self, sheets):
        sheets.save("dash", "first version, much longer")
        sheets.save("dash", "second")
        assert sheets.load("dash") == "second"

    def test_none_payload_saved_as_empty(self, sheets):
        assert sheets.save("empty", None) is True
        assert sheets.load("empty") == ""

    @pytest.mark.parametrize("slug", ["", "*!*", "...", None])
    def test_invalid_slug(self, sheets, slug):
        assert sheets.save(slug, "<p>x</p>") is False
        assert sheets.load(slug) is None
        assert not sheets.directory.exists()

    def test_missing_sheet_is_none(self, sheets):
        assert sheets.load("nothing-here") is None

    def test_unreadable_sheet_is_none(self, sheets):
        (sheets.directory / "broken.html").mkdir(parents=True)
        assert sheets.load("broken") is None

    def test_write_failure_returns_false(self, tmp_path):
        blocker = tmp_path / "sheets"
        blocker.write_text("a file where the directory should be", encoding="utf-8")
        repo = SheetRepository(blocker)
        assert repo.save("dash", "<p/>") is False
        assert repo.load("dash") is None

    def test_custom_extension(self, tmp_path):
        repo = SheetRepository(tmp_path, extension=".txt")
        repo.save("note", "hi")
        assert (tmp_path / "note.txt").read_text(encoding="utf-8") == "hi"
