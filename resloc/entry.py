"""
アーカイブ参照とエントリ情報の型定義

一回の列挙処理の間だけ存在するアーカイブ参照と、列挙結果のエントリを表すクラス
"""

from enum import Enum, auto
from typing import Any, Optional

from logutils import log_trace, WARNING


class ArchiveStrategy(Enum):
    """アーカイブ参照をどの方法で取得したかを表す列挙型"""
    CONNECTION = auto()     # アーカイブURL接続からハンドルを取得（接続側が所有）
    STRING_PARSED = auto()  # URL文字列を解析して自前で開いた（呼び出し側が所有）


class ArchiveEntry:
    """
    アーカイブ内のエントリ

    アーカイブ内での完全なパスと、ルートエントリパスを取り除いた相対パスを保持します。
    """

    def __init__(self, full_path: str, relative_path: str):
        """
        エントリ情報を初期化する

        Args:
            full_path: アーカイブに格納されているパス
            relative_path: ルートエントリパスを取り除いたパス
        """
        self.full_path = full_path
        self.relative_path = relative_path

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ArchiveEntry):
            return NotImplemented
        return self.full_path == other.full_path and self.relative_path == other.relative_path

    def __repr__(self) -> str:
        return f"ArchiveEntry(full_path={self.full_path!r}, relative_path={self.relative_path!r})"


class ArchiveReference:
    """
    列挙対象のアーカイブへの参照

    owns_handle がTrueの場合に限り、このオブジェクトがハンドルを閉じる責任を持つ。
    接続から取得したハンドルは接続側でキャッシュされている可能性があるため閉じない。
    """

    def __init__(self,
                 archive: Any,
                 archive_url: str,
                 root_entry_path: str = "",
                 owns_handle: bool = False,
                 strategy: Optional[ArchiveStrategy] = None):
        """
        アーカイブ参照を初期化する

        Args:
            archive: 開いているアーカイブハンドル（ZipFile または RarFile）
            archive_url: アーカイブ自体の場所
            root_entry_path: 列挙の起点となるアーカイブ内パス
            owns_handle: ハンドルを閉じる責任があるかどうか
            strategy: 参照の取得方法
        """
        self.archive = archive
        self.archive_url = archive_url
        self.root_entry_path = root_entry_path or ""
        self.owns_handle = owns_handle
        if strategy is None:
            strategy = ArchiveStrategy.STRING_PARSED if owns_handle else ArchiveStrategy.CONNECTION
        self.strategy = strategy
        self._closed = False

    def close(self) -> None:
        """
        所有しているハンドルを一度だけ閉じる

        クローズ時のエラーはログに残して無視する（列挙結果を上書きさせない）
        """
        if not self.owns_handle or self._closed:
            return
        self._closed = True
        try:
            self.archive.close()
        except Exception as e:
            log_trace(e, WARNING, f"アーカイブのクローズに失敗しました: {self.archive_url}",
                      name="resloc.entry")

    def __enter__(self) -> "ArchiveReference":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (f"ArchiveReference(archive_url={self.archive_url!r}, "
                f"root_entry_path={self.root_entry_path!r}, owns_handle={self.owns_handle})")
