"""
URL接続の抽象化

URLの参照先を表す接続オブジェクト。jar: URL はアーカイブを理解する
ArchiveUrlConnection で開き、それ以外は汎用の UrlConnection で開く
"""

import threading
from typing import Any, Dict, Optional
from urllib.parse import unquote

from logutils import log_print, DEBUG

from .errors import ResourceNotFoundError
from .handler import open_archive
from .path_utils import strip_drive_slash
from .uri import FILE_URL_PREFIX, JAR_URL_SEPARATOR, file_url_to_path, get_file, get_protocol

# アーカイブURL接続で開くプロトコル
ARCHIVE_PROTOCOLS = ('jar',)

# アーカイブURLごとに共有するハンドルのキャッシュ
_handle_cache: Dict[str, Any] = {}
_cache_lock = threading.Lock()

_LOG_NAME = "resloc.connection"


class UrlConnection:
    """
    URLの参照先への汎用接続

    アーカイブを理解しないため、呼び出し側はURL文字列を自分で解析する必要がある
    """

    def __init__(self, url: str):
        self.url = url
        self.use_caches = True

    def close(self) -> None:
        """接続を閉じる（汎用接続では何もしない）"""

    def __enter__(self) -> "UrlConnection":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.url!r})"


class ArchiveUrlConnection(UrlConnection):
    """
    jar:<アーカイブURL>!/<エントリ> 形式のURLへの接続

    アーカイブハンドルは接続が所有する。use_caches がTrueの間はプロセス全体で
    共有されるキャッシュから取得するため、取得したハンドルを閉じてはならない。
    """

    def __init__(self, url: str):
        super().__init__(url)
        spec = get_file(url)
        separator_index = spec.find(JAR_URL_SEPARATOR)
        if separator_index == -1:
            raise ResourceNotFoundError(url, f"'{JAR_URL_SEPARATOR}' がありません")

        self._archive_file_url = spec[:separator_index]
        entry_name = spec[separator_index + len(JAR_URL_SEPARATOR):]
        # エントリ名もアーカイブURLと同様にパーセントエスケープをデコードする
        self._entry_name = unquote(entry_name) or None
        self._archive = None
        self._cached = False

    def get_archive_file_url(self) -> str:
        """アーカイブ自体のURLを取得する"""
        return self._archive_file_url

    def get_entry_name(self) -> Optional[str]:
        """URLが指すアーカイブ内のエントリ名（アーカイブ自体を指す場合はNone）"""
        return self._entry_name

    def _archive_path(self) -> str:
        """アーカイブURLをローカルパスに変換する"""
        if not self._archive_file_url.startswith(FILE_URL_PREFIX):
            raise ResourceNotFoundError(self._archive_file_url, "ローカルファイル以外のアーカイブは開けません")
        return strip_drive_slash(file_url_to_path(self._archive_file_url))

    def get_archive_file(self) -> Any:
        """
        アーカイブハンドルを取得する

        Returns:
            開いているアーカイブハンドル（ZipFile または RarFile）

        Raises:
            ResourceNotFoundError: アーカイブを開けない場合
        """
        if self._archive is not None:
            return self._archive

        if self.use_caches:
            with _cache_lock:
                archive = _handle_cache.get(self._archive_file_url)
                if archive is None:
                    archive = open_archive(self._archive_path())
                    _handle_cache[self._archive_file_url] = archive
            self._cached = True
        else:
            archive = open_archive(self._archive_path())
            log_print(DEBUG, f"キャッシュを使わずにアーカイブを開きました: {self._archive_file_url}",
                      name=_LOG_NAME)

        self._archive = archive
        return archive

    def get_entry(self) -> Any:
        """
        URLが指すエントリの情報を取得する

        Returns:
            エントリ情報（ZipInfo または RarInfo）。アーカイブ自体を指す場合や
            該当エントリが格納されていない場合はNone
        """
        if self._entry_name is None:
            return None
        archive = self.get_archive_file()
        names = set(archive.namelist())
        for name in (self._entry_name, self._entry_name.rstrip('/') + '/'):
            if name in names:
                return archive.getinfo(name)
        return None

    def close(self) -> None:
        """キャッシュしていないハンドルを閉じる"""
        if self._archive is not None and not self._cached:
            self._archive.close()
        self._archive = None


def open_connection(url: str) -> UrlConnection:
    """
    URLのプロトコルに応じた接続を開く

    Args:
        url: 接続先のURL

    Returns:
        jar: URL なら ArchiveUrlConnection、それ以外は UrlConnection

    Raises:
        ResourceNotFoundError: jar: URL の形式が正しくない場合
    """
    if get_protocol(url) in ARCHIVE_PROTOCOLS:
        return ArchiveUrlConnection(url)
    return UrlConnection(url)


def clear_cache() -> None:
    """キャッシュしているアーカイブハンドルをすべて閉じて破棄する"""
    with _cache_lock:
        archives = list(_handle_cache.values())
        _handle_cache.clear()
    for archive in archives:
        archive.close()
