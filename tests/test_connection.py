"""URL接続のテスト"""

from __future__ import annotations

import pytest

from resloc.connection import ArchiveUrlConnection, UrlConnection, clear_cache, open_connection
from resloc.errors import ResourceNotFoundError


def test_open_connection_selects_class(template_zip):
    assert isinstance(open_connection(f"jar:{template_zip.as_uri()}!/templates"), ArchiveUrlConnection)
    assert type(open_connection(f"zip:{template_zip}!/templates")) is UrlConnection
    assert type(open_connection(template_zip.as_uri())) is UrlConnection


def test_connection_parts(template_zip):
    conn = ArchiveUrlConnection(f"jar:{template_zip.as_uri()}!/templates/sub")
    assert conn.get_archive_file_url() == template_zip.as_uri()
    assert conn.get_entry_name() == "templates/sub"


def test_connection_to_archive_root(template_zip):
    conn = ArchiveUrlConnection(f"jar:{template_zip.as_uri()}!/")
    assert conn.get_entry_name() is None
    assert conn.get_entry() is None


def test_entry_name_is_unescaped(template_zip):
    conn = ArchiveUrlConnection(f"jar:{template_zip.as_uri()}!/my%20templates/sub")
    assert conn.get_entry_name() == "my templates/sub"


def test_get_entry(make_zip):
    path = make_zip(["templates/", "templates/a.tpl"])
    with ArchiveUrlConnection(f"jar:{path.as_uri()}!/templates") as conn:
        conn.use_caches = False
        assert conn.get_entry().filename == "templates/"
    with ArchiveUrlConnection(f"jar:{path.as_uri()}!/templates/a.tpl") as conn:
        conn.use_caches = False
        assert conn.get_entry().filename == "templates/a.tpl"
    with ArchiveUrlConnection(f"jar:{path.as_uri()}!/missing") as conn:
        conn.use_caches = False
        assert conn.get_entry() is None


def test_cached_handles_are_shared(template_zip):
    url = f"jar:{template_zip.as_uri()}!/templates"
    first = ArchiveUrlConnection(url)
    second = ArchiveUrlConnection(url)
    archive = first.get_archive_file()
    assert second.get_archive_file() is archive

    # キャッシュしたハンドルは接続を閉じても開いたまま
    first.close()
    assert archive.fp is not None

    clear_cache()
    assert archive.fp is None


def test_uncached_handle_is_closed_with_connection(template_zip):
    conn = ArchiveUrlConnection(f"jar:{template_zip.as_uri()}!/templates")
    conn.use_caches = False
    archive = conn.get_archive_file()
    assert conn.get_archive_file() is archive
    conn.close()
    assert archive.fp is None


def test_missing_separator(template_zip):
    with pytest.raises(ResourceNotFoundError):
        open_connection(f"jar:{template_zip.as_uri()}")


def test_non_local_archive_url():
    conn = ArchiveUrlConnection("jar:http://example.com/a.jar!/templates")
    with pytest.raises(ResourceNotFoundError):
        conn.get_archive_file()


def test_escaped_archive_path(make_zip, tmp_path):
    path = make_zip(["t/a.tpl"], directory=tmp_path / "my templates")
    conn = ArchiveUrlConnection(f"jar:{path.as_uri()}!/t")
    conn.use_caches = False
    assert conn.get_archive_file().namelist() == ["t/a.tpl"]
    conn.close()
