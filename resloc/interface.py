"""
リソース探索インターフェース

共有の ResourceLister に処理を委ねるモジュールレベル関数を提供
"""

from typing import Any, Iterable, List, Optional

from .handler import FileSystemHandler, RarHandler, ZipHandler
from .lister import ResourceLister
from .path_utils import get_directory_name, relative_path
from .uri import UriReference, to_uri

# 状態を持たないので共有してよい
_lister = ResourceLister()
_fs_handler = FileSystemHandler()
_zip_handler = ZipHandler()
_rar_handler = RarHandler()


def get_resource_lister() -> ResourceLister:
    """共有の ResourceLister を取得する"""
    return _lister


def list_url(url: str, suffixes: Optional[Iterable[str]] = None) -> List[str]:
    """
    URLが指すディレクトリまたはアーカイブ内ディレクトリを列挙する

    Args:
        url: file: URL、またはアーカイブ内を指すURL
        suffixes: 接尾辞フィルタ

    Returns:
        パスのリスト
    """
    return _lister.list(url, suffixes)


def list_file(path: str, suffixes: Optional[Iterable[str]] = None) -> List[str]:
    """ディレクトリ直下のエントリ名を接尾辞でフィルタして返す（未指定ならすべて）"""
    return _fs_handler.list_entries(path, suffixes)


def list_zip(zip_file: Any, suffixes: Optional[Iterable[str]] = None) -> List[str]:
    """ZIP内の全エントリ名を返す（suffixes は適用されない）"""
    return _zip_handler.list_entries(zip_file, suffixes)


def list_rar(rar_file: Any, suffixes: Optional[Iterable[str]] = None) -> List[str]:
    """RAR内の全エントリ名を返す（suffixes は適用されない）"""
    return _rar_handler.list_entries(rar_file, suffixes)


def relative_url(base_path: Optional[str], candidate_path: Optional[str]) -> Optional[str]:
    """基準テンプレート名に対して候補名を解決する"""
    return relative_path(base_path, candidate_path)


def directory_of(path: Optional[str]) -> str:
    """ファイル名を除いたディレクトリ部分を返す"""
    return get_directory_name(path)


def uri_of(location: str) -> UriReference:
    """場所文字列をURIとして解釈する（空白はエスケープする）"""
    return to_uri(location)
