"""
リソースハンドラ基底クラス

ディレクトリ・アーカイブを列挙するハンドラの抽象基底クラスを定義
"""
import os
from typing import Any, Iterable, List, Optional

from logutils import log_print, log_trace, DEBUG, INFO, ERROR


class ResourceHandler:
    """
    リソースハンドラの抽象基底クラス

    すべてのハンドラはこのクラスを継承する必要があります。
    対応する形式に応じて、適切なメソッドをオーバーライドしてください。
    """

    # このハンドラがサポートするファイル拡張子のリスト
    supported_extensions: List[str] = []

    def debug_print(self, message: Any, *args, level: int = INFO, trace: bool = False, **kwargs):
        """
        デバッグ出力のラッパーメソッド

        Args:
            message: 出力するメッセージ
            *args: メッセージのフォーマット用引数
            level: ログレベル（デフォルトはINFO）
            trace: Trueならスタックトレース情報も出力する（デフォルトはFalse）
            **kwargs: 追加のキーワード引数
        """
        # クラス名をログの名前空間として使用
        name = f"resloc.handler.{self.__class__.__name__}"

        if trace:
            log_trace(None, level, message, *args, name=name, **kwargs)
        else:
            log_print(level, message, *args, name=name, **kwargs)

    def debug_debug(self, message: Any, *args, trace: bool = False, **kwargs):
        """DEBUGレベルのログ出力"""
        self.debug_print(message, *args, level=DEBUG, trace=trace, **kwargs)

    def debug_error(self, message: Any, *args, trace: bool = False, **kwargs):
        """ERRORレベルのログ出力"""
        self.debug_print(message, *args, level=ERROR, trace=trace, **kwargs)

    def can_handle(self, path: str) -> bool:
        """
        指定されたパスがこのハンドラで処理可能かどうか

        Args:
            path: 処理するファイルのパス

        Returns:
            拡張子が supported_extensions に含まれていればTrue
        """
        if not path:
            return False
        norm_path = path.replace('\\', '/').rstrip('/')
        _, ext = os.path.splitext(norm_path.lower())
        return ext in self.supported_extensions

    def list_entries(self, source: Any, suffixes: Optional[Iterable[str]] = None) -> List[str]:
        """
        エントリ名の一覧を取得する

        Args:
            source: 列挙対象（パスまたは開いているハンドル）
            suffixes: 接尾辞フィルタ

        Returns:
            エントリ名のリスト
        """
        # サブクラスで実装
        raise NotImplementedError
