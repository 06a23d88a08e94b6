"""
RARアーカイブハンドラ

rarfileパッケージを使用してRARアーカイブのエントリ名を列挙するハンドラ
"""
from typing import Iterable, List, Optional

import rarfile

from ..errors import ResourceNotFoundError
from .handler import ResourceHandler


class RarHandler(ResourceHandler):
    """
    rarfileパッケージを使用したRARアーカイブハンドラ
    """

    supported_extensions: List[str] = ['.rar']

    def open(self, path: str) -> rarfile.RarFile:
        """
        RARファイルを読み取り用に開く

        Args:
            path: RARファイルのパス

        Returns:
            開いたRarFile（閉じるのは呼び出し側の責任）

        Raises:
            ResourceNotFoundError: ファイルが存在しない・RARとして読めない場合
        """
        try:
            rf = rarfile.RarFile(path)
        except (OSError, rarfile.Error) as e:
            self.debug_error(f"RARファイルを開けません: {path}, {e}")
            raise ResourceNotFoundError(path, str(e)) from e
        self.debug_debug(f"RARファイルを開きました: {path}")
        return rf

    def list_entries(self, rar_file: rarfile.RarFile, suffixes: Optional[Iterable[str]] = None) -> List[str]:
        """
        RAR内の全エントリ名を格納順に取得する

        接尾辞フィルタは受け付けるが適用しない（全件を返す）

        Args:
            rar_file: 開いているRarFile
            suffixes: 未使用

        Returns:
            エントリ名のリスト
        """
        return rar_file.namelist()
