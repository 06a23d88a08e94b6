"""
リソースハンドラ

ディレクトリとアーカイブ形式ごとのハンドラ、および拡張子によるハンドラ選択
"""
from typing import Any

from .handler import ResourceHandler
from .fs_handler import FileSystemHandler, matches_suffix, suffix_list
from .zip_handler import ZipHandler
from .rar_handler import RarHandler

# 拡張子で判定するアーカイブハンドラ（該当しなければZIPとして扱う）
_ARCHIVE_HANDLERS = [RarHandler(), ZipHandler()]
_DEFAULT_ARCHIVE_HANDLER = _ARCHIVE_HANDLERS[-1]


def get_archive_handler(path: str) -> ResourceHandler:
    """
    パスの拡張子から使用するアーカイブハンドラを選択する

    Args:
        path: アーカイブのパス

    Returns:
        アーカイブハンドラ
    """
    for handler in _ARCHIVE_HANDLERS:
        if handler.can_handle(path):
            return handler
    return _DEFAULT_ARCHIVE_HANDLER


def open_archive(path: str) -> Any:
    """
    パスのアーカイブを適切なハンドラで開く

    Raises:
        ResourceNotFoundError: アーカイブを開けない場合
    """
    return get_archive_handler(path).open(path)


__all__ = [
    'ResourceHandler', 'FileSystemHandler', 'ZipHandler', 'RarHandler',
    'matches_suffix', 'suffix_list', 'get_archive_handler', 'open_archive'
]
