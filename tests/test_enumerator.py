"""アーカイブエントリ列挙のテスト"""

from __future__ import annotations

import zipfile

import pytest

from resloc.entry import ArchiveEntry
from resloc.enumerator import EntryEnumerator, normalize_root


@pytest.fixture
def enumerator() -> EntryEnumerator:
    return EntryEnumerator()


@pytest.mark.parametrize(
    ("root", "expected"),
    [
        ("templates", "templates/"),
        ("templates/", "templates/"),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_root(root, expected):
    assert normalize_root(root) == expected


def test_filters_by_root_and_suffix(enumerator, template_zip):
    with zipfile.ZipFile(template_zip) as zf:
        assert enumerator.enumerate(zf, "templates/", [".tpl"]) == ["a.tpl", "sub/c.tpl"]


def test_single_suffix_string_is_not_split(enumerator, template_zip):
    with zipfile.ZipFile(template_zip) as zf:
        assert enumerator.enumerate(zf, "templates/", ".tpl") == ["a.tpl", "sub/c.tpl"]


def test_root_without_trailing_slash(enumerator, template_zip):
    with zipfile.ZipFile(template_zip) as zf:
        assert enumerator.enumerate(zf, "templates", [".tpl"]) == ["a.tpl", "sub/c.tpl"]


def test_empty_suffixes_accept_nothing(enumerator, template_zip):
    with zipfile.ZipFile(template_zip) as zf:
        assert enumerator.enumerate(zf, "templates/", []) == []
        assert enumerator.enumerate(zf, "templates/", None) == []


def test_entry_matching_several_suffixes_is_repeated(enumerator, template_zip):
    with zipfile.ZipFile(template_zip) as zf:
        result = enumerator.enumerate(zf, "templates/", [".tpl", "tpl"])
    assert result == ["a.tpl", "a.tpl", "sub/c.tpl", "sub/c.tpl"]


def test_sibling_with_same_prefix_is_excluded(enumerator, make_zip):
    path = make_zip(["templates/a.tpl", "templates2/b.tpl", "templatesX.tpl"])
    with zipfile.ZipFile(path) as zf:
        assert enumerator.enumerate(zf, "templates", [".tpl"]) == ["a.tpl"]


def test_keeps_archive_order(enumerator, make_zip):
    names = ["t/z.tpl", "t/a.tpl", "t/m/b.tpl", "t/c.tpl"]
    path = make_zip(names)
    with zipfile.ZipFile(path) as zf:
        assert enumerator.enumerate(zf, "t/", [".tpl"]) == ["z.tpl", "a.tpl", "m/b.tpl", "c.tpl"]


def test_only_entries_under_root_with_prefix_removed(enumerator, make_zip):
    inside = [f"web/views/page{i}.html" for i in range(5)]
    outside = ["web/index.html", "views/page0.html", "other/web/views/x.html"]
    path = make_zip(outside[:1] + inside + outside[1:])
    with zipfile.ZipFile(path) as zf:
        result = enumerator.enumerate(zf, "web/views", [".html"])
    assert result == [f"page{i}.html" for i in range(5)]


def test_empty_root_lists_whole_archive(enumerator, template_zip):
    with zipfile.ZipFile(template_zip) as zf:
        assert enumerator.enumerate(zf, "", [".txt"]) == ["templates/b.txt"]


def test_directory_entries_do_not_match_file_suffix(enumerator, make_zip):
    path = make_zip(["templates/", "templates/sub/", "templates/sub/c.tpl"])
    with zipfile.ZipFile(path) as zf:
        assert enumerator.enumerate(zf, "templates/", [".tpl"]) == ["sub/c.tpl"]


def test_iter_entries(enumerator, template_zip):
    with zipfile.ZipFile(template_zip) as zf:
        entries = list(enumerator.iter_entries(zf, "templates/sub"))
    assert entries == [ArchiveEntry("templates/sub/c.tpl", "c.tpl")]


def test_works_with_any_namelist_handle(enumerator):
    class FakeArchive:
        def namelist(self):
            return ["res/a.vm", "res/b.tpl"]

    assert enumerator.enumerate(FakeArchive(), "res", [".vm"]) == ["a.vm"]
