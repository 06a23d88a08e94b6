"""
ZIPアーカイブハンドラ

ZIP/JARアーカイブを開き、格納されているエントリ名を列挙するハンドラ
"""
import zipfile
from typing import Iterable, List, Optional

from ..errors import ResourceNotFoundError
from .handler import ResourceHandler


class ZipHandler(ResourceHandler):
    """
    ZIPアーカイブハンドラ

    JARもZIP形式なのでこのハンドラで扱う
    """

    supported_extensions: List[str] = ['.zip', '.jar', '.war', '.ear']

    def open(self, path: str) -> zipfile.ZipFile:
        """
        ZIPファイルを読み取り用に開く

        Args:
            path: ZIPファイルのパス

        Returns:
            開いたZipFile（閉じるのは呼び出し側の責任）

        Raises:
            ResourceNotFoundError: ファイルが存在しない・ZIPとして読めない場合
        """
        try:
            zf = zipfile.ZipFile(path, 'r')
        except (OSError, zipfile.BadZipFile) as e:
            self.debug_error(f"ZIPファイルを開けません: {path}, {e}")
            raise ResourceNotFoundError(path, str(e)) from e
        self.debug_debug(f"ZIPファイルを開きました: {path}")
        return zf

    def list_entries(self, zip_file: zipfile.ZipFile, suffixes: Optional[Iterable[str]] = None) -> List[str]:
        """
        ZIP内の全エントリ名を格納順に取得する

        接尾辞フィルタは受け付けるが適用しない（全件を返す）

        Args:
            zip_file: 開いているZipFile
            suffixes: 未使用

        Returns:
            エントリ名のリスト
        """
        return [info.filename for info in zip_file.infolist()]
