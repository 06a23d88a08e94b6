"""
リソース探索の例外定義

呼び出し元へ伝播する例外と、内部で回復される例外を定義する
"""
from typing import Optional


class ResourceError(Exception):
    """resloc が送出する例外の基底クラス"""

    def __init__(self, message: str, location: Optional[str] = None):
        super().__init__(message)
        self.location = location


class ResourceNotFoundError(ResourceError, OSError):
    """アーカイブまたはディレクトリを開けない・列挙できない場合の例外"""

    def __init__(self, location: str, reason: str = ""):
        message = f"リソースを開けません: {location}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, location)
        self.reason = reason

    def __str__(self) -> str:
        # OSError.__str__ は errno 形式になるため元のメッセージを返す
        return self.args[0]


class UriSyntaxError(ResourceError, ValueError):
    """URIとして構文的に正しくない場所文字列の例外"""

    def __init__(self, location: str, reason: str, index: int = -1):
        message = f"URI構文エラー: {reason}: {location}"
        if index >= 0:
            message = f"{message} (位置 {index})"
        super().__init__(message, location)
        self.reason = reason
        self.index = index
