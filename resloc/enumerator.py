"""
アーカイブエントリの列挙

開いているアーカイブからルートエントリパス配下のエントリを取り出し、
接尾辞でフィルタした相対パスを返す
"""

from typing import Any, Iterable, Iterator, List, Optional

from logutils import log_print, DEBUG

from .entry import ArchiveEntry
from .handler import suffix_list
from .path_utils import PATH_SEPARATOR

_LOG_NAME = "resloc.enumerator"


def normalize_root(root_entry_path: Optional[str]) -> str:
    """
    ルートエントリパスの末尾を区切り文字にそろえる

    末尾に区切りがないと "templates" が "templates2/..." にも前方一致してしまう
    """
    if root_entry_path and not root_entry_path.endswith(PATH_SEPARATOR):
        return root_entry_path + PATH_SEPARATOR
    return root_entry_path or ""


class EntryEnumerator:
    """アーカイブ内エントリの列挙処理"""

    def iter_entries(self, archive: Any, root_entry_path: Optional[str]) -> Iterator[ArchiveEntry]:
        """
        ルートエントリパス配下のエントリを格納順に返す

        Args:
            archive: namelist() を持つアーカイブハンドル
            root_entry_path: 列挙の起点

        Yields:
            ルートを取り除いた相対パス付きのエントリ
        """
        root = normalize_root(root_entry_path)
        for entry_path in archive.namelist():
            if entry_path.startswith(root):
                yield ArchiveEntry(entry_path, entry_path[len(root):])

    def enumerate(self, archive: Any, root_entry_path: Optional[str],
                  suffixes: Optional[Iterable[str]]) -> List[str]:
        """
        ルート配下で接尾辞に一致するエントリの相対パスを列挙する

        一致した接尾辞ごとに1回ずつ追加するため、複数の接尾辞に一致したエントリは
        重複して含まれる。接尾辞が指定されていない場合は何も返さない

        Args:
            archive: namelist() を持つアーカイブハンドル
            root_entry_path: 列挙の起点
            suffixes: 接尾辞フィルタ

        Returns:
            相対パスのリスト（アーカイブの格納順）
        """
        suffixes = suffix_list(suffixes)
        result = []
        for entry in self.iter_entries(archive, root_entry_path):
            for suffix in suffixes:
                if entry.relative_path.endswith(suffix):
                    result.append(entry.relative_path)
        log_print(DEBUG, f"アーカイブ列挙: ルート '{root_entry_path}' -> {len(result)} エントリ",
                  name=_LOG_NAME)
        return result
