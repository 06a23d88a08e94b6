"""
物理ファイルシステムハンドラ

ローカルディレクトリ直下のエントリ名を列挙するハンドラ
"""

import os
from typing import Iterable, List, Optional

from ..errors import ResourceNotFoundError
from .handler import ResourceHandler


def suffix_list(suffixes: Optional[Iterable[str]]) -> List[str]:
    """接尾辞フィルタをリストにそろえる（文字列1つだけの指定も1要素として扱う）"""
    if not suffixes:
        return []
    if isinstance(suffixes, str):
        return [suffixes]
    return list(suffixes)


def matches_suffix(name: str, suffixes: Optional[Iterable[str]]) -> bool:
    """
    名前が接尾辞のいずれかで終わるかどうか

    接尾辞が指定されていない（Noneまたは空）場合はすべて受け入れる
    """
    suffixes = suffix_list(suffixes)
    if not suffixes:
        return True
    return any(name.endswith(suffix) for suffix in suffixes)


class FileSystemHandler(ResourceHandler):
    """
    物理ファイルシステムへのアクセスを提供するハンドラ

    ディレクトリ直下のエントリ名をプラットフォームが返す順序のまま返す
    """

    # 物理ファイルシステムには拡張子の概念がない
    supported_extensions: List[str] = []

    def can_handle(self, path: str) -> bool:
        """
        指定されたパスを処理できるかどうかを判定する

        Args:
            path: 判定対象のパス

        Returns:
            既存のディレクトリであればTrue
        """
        try:
            return bool(path) and os.path.isdir(path)
        except (OSError, ValueError):
            return False

    def list_entries(self, path: str, suffixes: Optional[Iterable[str]] = None) -> List[str]:
        """
        指定されたディレクトリ直下のエントリ名のリストを取得する

        Args:
            path: 列挙するディレクトリのパス
            suffixes: 接尾辞フィルタ（Noneまたは空ならすべて）

        Returns:
            エントリ名のリスト

        Raises:
            ResourceNotFoundError: ディレクトリを列挙できない場合
        """
        suffixes = suffix_list(suffixes)
        try:
            names = os.listdir(path)
        except OSError as e:
            self.debug_error(f"ディレクトリの読み取りエラー: {path}, {e}")
            raise ResourceNotFoundError(path, str(e)) from e

        result = [name for name in names if matches_suffix(name, suffixes)]
        self.debug_debug(f"ディレクトリ列挙: {path} -> {len(result)}/{len(names)} エントリ")
        return result
