"""テスト共通のフィクスチャ"""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from resloc import connection

TEMPLATE_ENTRIES = [
    "templates/a.tpl",
    "templates/b.txt",
    "templates/sub/c.tpl",
]


@pytest.fixture
def make_zip(tmp_path: Path):
    """エントリ名のリストからZIPファイルを作るファクトリ"""

    def _make(names, name: str = "templates.zip", directory: Path | None = None) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        with zipfile.ZipFile(path, "w") as zf:
            for entry in names:
                zf.writestr(entry, "" if entry.endswith("/") else f"content of {entry}")
        return path

    return _make


@pytest.fixture
def template_zip(make_zip) -> Path:
    return make_zip(TEMPLATE_ENTRIES)


@pytest.fixture(autouse=True)
def _clear_connection_cache():
    yield
    connection.clear_cache()
