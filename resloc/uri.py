"""
URL/URI 文字列のユーティリティ

URLからのスキーム・ファイル部の取り出しと、URIとしての構文検証を行う
"""

import re
from typing import Optional
from urllib.parse import unquote, urlsplit
from urllib.request import url2pathname

from .errors import UriSyntaxError

# プロトコルの区切り
PROTOCOL_SEPARATOR = '://'

# アーカイブパスとアーカイブ内パスの区切り（例: jar:file:/a.jar!/templates）
JAR_URL_SEPARATOR = '!/'

# ファイルシステムから読み込むURLの接頭辞
FILE_URL_PREFIX = 'file:'

_SCHEME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*$')
_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')

# URIにそのまま書ける ASCII 文字（英数字・非予約記号・予約記号）
_URI_CHARS = frozenset(
    'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789'
    "-_.!~*'()"
    ';/?:@&=+$,'
    '[]'
)


class UriReference:
    """
    構文検証済みのURI

    スキーム固有部はパーセントエスケープをデコードした値を保持する
    """

    def __init__(self, location: str, scheme: Optional[str], raw_scheme_specific_part: str):
        self.location = location
        self.scheme = scheme
        self.raw_scheme_specific_part = raw_scheme_specific_part
        self.scheme_specific_part = unquote(raw_scheme_specific_part)

    def __str__(self) -> str:
        return self.location

    def __repr__(self) -> str:
        return f"UriReference({self.location!r})"


def _check_chars(location: str, text: str, offset: int) -> None:
    """URIに使用できない文字や不正なエスケープがないか検査する"""
    i = 0
    while i < len(text):
        c = text[i]
        if c == '%':
            escape = text[i + 1:i + 3]
            if len(escape) < 2 or not all(h in _HEX_DIGITS for h in escape):
                raise UriSyntaxError(location, "不正なエスケープシーケンス", offset + i)
            i += 3
            continue
        if c in _URI_CHARS:
            i += 1
            continue
        # ASCII以外は空白・制御文字でなければ許可する
        if ord(c) > 0x7f and c.isprintable() and not c.isspace():
            i += 1
            continue
        raise UriSyntaxError(location, "使用できない文字", offset + i)


def to_uri(location: str) -> UriReference:
    """
    場所文字列をURIとして解釈する

    空白は %20 にエスケープしてから検証する

    Args:
        location: URL文字列

    Returns:
        検証済みのURI

    Raises:
        UriSyntaxError: URIとして構文的に正しくない場合
    """
    if location is None:
        raise UriSyntaxError("None", "場所が指定されていません")

    escaped = location.replace(' ', '%20')

    body, sep, fragment = escaped.partition('#')
    if sep:
        _check_chars(escaped, fragment, len(body) + 1)

    scheme = None
    ssp = body
    # 最初の区切り記号より前にある ':' だけをスキームの区切りとみなす
    colon = body.find(':')
    if colon >= 0 and not any(c in body[:colon] for c in '/?#'):
        candidate = body[:colon]
        if not _SCHEME_PATTERN.match(candidate):
            raise UriSyntaxError(escaped, "スキーム名に使用できない文字", 0)
        scheme = candidate
        ssp = body[colon + 1:]
        if not ssp:
            raise UriSyntaxError(escaped, "スキーム固有部がありません", colon + 1)

    _check_chars(escaped, ssp, len(body) - len(ssp))

    return UriReference(escaped, scheme, ssp)


def get_protocol(url: str) -> str:
    """
    URLのプロトコル（小文字のスキーム名）を取得する

    Args:
        url: URL文字列

    Returns:
        スキーム名。スキームがなければ空文字列
    """
    return urlsplit(url).scheme


def get_file(url: str) -> str:
    """
    URLのファイル部（パスとクエリ）を取得する

    jar:file:/a.jar!/t のような不透明URLではスキームより後ろ全体がファイル部になる

    Args:
        url: URL文字列

    Returns:
        ファイル部の文字列
    """
    parts = urlsplit(url)
    if parts.query:
        return f"{parts.path}?{parts.query}"
    return parts.path


def file_url_to_path(url: str) -> str:
    """
    file: URL をローカルパスに変換する

    Args:
        url: file: で始まるURL

    Returns:
        ローカルファイルシステムのパス
    """
    return url2pathname(urlsplit(url).path)
