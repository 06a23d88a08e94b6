"""
リソースパスのユーティリティ

区切り文字の正規化とテンプレート名の相対解決を行うヘルパー関数
"""

import re
from typing import Optional

# パス区切り文字
PATH_SEPARATOR = '/'
PATH_SEPARATOR_CHAR = '/'
WINDOWS_PATH_SEPARATOR_CHAR = '\\'

# URL形式のWindowsドライブレター（例: /C:/path）
_DRIVE_SLASH_PATTERN = re.compile(r'^/[A-Za-z]:')


def normalize_path(path: Optional[str]) -> str:
    """
    OSに依存しないパス正規化関数

    Args:
        path: 正規化する元のパス文字列

    Returns:
        バックスラッシュをスラッシュに置き換えたパス文字列。Noneの場合は空文字列
    """
    if path is None:
        return ""

    return path.replace(WINDOWS_PATH_SEPARATOR_CHAR, PATH_SEPARATOR_CHAR)


def strip_drive_slash(path: str) -> str:
    """
    URL由来のWindowsドライブレター表現を修正する（例: /C:/path → C:/path）

    Args:
        path: 対象のパス

    Returns:
        修正したパス。ドライブレター表現でなければそのまま
    """
    if path and _DRIVE_SLASH_PATTERN.match(path):
        return path[1:]
    return path


def get_directory_name(path: Optional[str]) -> str:
    """
    ファイル名を除いたディレクトリ部分を取得する

    Args:
        path: 対象のパス

    Returns:
        末尾の区切り文字を含むディレクトリ部分。
        Noneまたは区切り文字を含まない場合はルート "/"
    """
    if path is not None:
        path = normalize_path(path)
        idx = path.rfind(PATH_SEPARATOR_CHAR)
        if idx >= 0:
            return path[:idx + 1]
    return PATH_SEPARATOR


def is_anchored(path: str) -> bool:
    """区切り文字（どちらの形式でも）で始まるパスかどうか"""
    return bool(path) and path[0] in (PATH_SEPARATOR_CHAR, WINDOWS_PATH_SEPARATOR_CHAR)


def relative_path(base_path: Optional[str], candidate_path: Optional[str]) -> Optional[str]:
    """
    基準テンプレートのディレクトリを起点に候補名を解決する

    候補名が区切り文字で始まる場合はルートからの指定とみなしてそのまま返す。
    どちらかが空の場合は解決対象がないので基準名をそのまま返す

    Args:
        base_path: 基準となるテンプレート名
        candidate_path: 解決するテンプレート名

    Returns:
        解決したテンプレート名
    """
    if not base_path or not candidate_path:
        return base_path

    if is_anchored(candidate_path):
        return candidate_path

    return get_directory_name(base_path) + candidate_path
