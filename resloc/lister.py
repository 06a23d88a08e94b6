"""
リソース一覧の取得

URLのプロトコルに応じてディレクトリ列挙とアーカイブ列挙を振り分け、
アーカイブハンドルの後始末を一箇所で行う
"""

from typing import Iterable, List, Optional

from logutils import log_print, DEBUG

from .enumerator import EntryEnumerator
from .handler import FileSystemHandler
from .locator import ArchiveLocator
from .uri import FILE_URL_PREFIX, file_url_to_path, get_protocol

_LOG_NAME = "resloc.lister"

# ディレクトリとして直接列挙するプロトコル
FILE_PROTOCOL = FILE_URL_PREFIX[:-1]


class ResourceLister:
    """
    テンプレートリソースの一覧を取得するファサード

    内部状態を持たないため、1つのインスタンスを複数の呼び出しで共有してよい
    """

    def __init__(self,
                 fs_handler: Optional[FileSystemHandler] = None,
                 locator: Optional[ArchiveLocator] = None,
                 enumerator: Optional[EntryEnumerator] = None):
        self.fs_handler = fs_handler or FileSystemHandler()
        self.locator = locator or ArchiveLocator()
        self.enumerator = enumerator or EntryEnumerator()

    def list(self, url: str, suffixes: Optional[Iterable[str]] = None) -> List[str]:
        """
        URLが指すディレクトリ（またはアーカイブ内の仮想ディレクトリ）を列挙する

        Args:
            url: file: URL、またはアーカイブ内を指すURL
            suffixes: 接尾辞フィルタ

        Returns:
            パスのリスト。ディレクトリならエントリ名、アーカイブならルートからの相対パス

        Raises:
            ResourceNotFoundError: ディレクトリやアーカイブを開けない場合
        """
        if get_protocol(url) == FILE_PROTOCOL:
            log_print(DEBUG, f"ディレクトリとして列挙: {url}", name=_LOG_NAME)
            return self.fs_handler.list_entries(file_url_to_path(url), suffixes)
        return self.list_archive_url(url, suffixes)

    def list_archive_url(self, url: str, suffixes: Optional[Iterable[str]] = None) -> List[str]:
        """
        アーカイブ内を指すURLを列挙する

        自前で開いたハンドルだけを列挙後（失敗時も）に閉じる
        """
        reference = self.locator.resolve(url)
        with reference:
            return self.enumerator.enumerate(reference.archive, reference.root_entry_path, suffixes)
