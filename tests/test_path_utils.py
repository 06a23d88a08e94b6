"""パスの正規化と相対解決のテスト"""

from __future__ import annotations

import pytest

from resloc.path_utils import (
    get_directory_name,
    is_anchored,
    normalize_path,
    relative_path,
    strip_drive_slash,
)


class TestGetDirectoryName:
    def test_nested_path(self):
        assert get_directory_name("a/b/c.txt") == "a/b/"

    def test_bare_name_returns_root(self):
        assert get_directory_name("c.txt") == "/"

    def test_none_returns_root(self):
        assert get_directory_name(None) == "/"

    def test_empty_returns_root(self):
        assert get_directory_name("") == "/"

    def test_backslashes_are_normalized(self):
        assert get_directory_name("a\\b\\c.txt") == "a/b/"

    def test_mixed_separators(self):
        assert get_directory_name("a\\b/c\\d.tpl") == "a/b/c/"

    def test_trailing_separator_is_kept(self):
        assert get_directory_name("a/b/") == "a/b/"

    def test_root_file(self):
        assert get_directory_name("/c.txt") == "/"


class TestRelativePath:
    def test_resolves_against_base_directory(self):
        assert relative_path("a/b/base.tpl", "inc.tpl") == "a/b/inc.tpl"

    def test_anchored_candidate_is_unchanged(self):
        assert relative_path("a/b/base.tpl", "/abs.tpl") == "/abs.tpl"

    def test_backslash_anchored_candidate_is_unchanged(self):
        assert relative_path("a/b/base.tpl", "\\abs.tpl") == "\\abs.tpl"

    def test_none_base_returns_base(self):
        assert relative_path(None, "x") is None

    @pytest.mark.parametrize("candidate", [None, ""])
    def test_missing_candidate_returns_base(self, candidate):
        assert relative_path("a/b/base.tpl", candidate) == "a/b/base.tpl"

    def test_empty_base_returns_base(self):
        assert relative_path("", "x") == ""

    def test_base_without_directory_uses_root(self):
        assert relative_path("base.tpl", "inc.tpl") == "/inc.tpl"

    def test_windows_base(self):
        assert relative_path("a\\b\\base.tpl", "sub/inc.tpl") == "a/b/sub/inc.tpl"

    def test_relative_segments_are_not_collapsed(self):
        assert relative_path("a/b/base.tpl", "../inc.tpl") == "a/b/../inc.tpl"


def test_normalize_path():
    assert normalize_path("C:\\templates\\a.tpl") == "C:/templates/a.tpl"
    assert normalize_path(None) == ""
    assert "\\" not in normalize_path("\\\\server\\share")


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/C:/templates/a.jar", "C:/templates/a.jar"),
        ("/c:/a.jar", "c:/a.jar"),
        ("/templates/a.jar", "/templates/a.jar"),
        ("C:/a.jar", "C:/a.jar"),
        ("", ""),
    ],
)
def test_strip_drive_slash(path, expected):
    assert strip_drive_slash(path) == expected


def test_is_anchored():
    assert is_anchored("/a")
    assert is_anchored("\\a")
    assert not is_anchored("a/b")
    assert not is_anchored("")
