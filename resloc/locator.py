"""
アーカイブ位置の解決

URLから列挙対象のアーカイブハンドルとアーカイブ内のルートエントリパスを求める。
アーカイブURL接続が使える場合は接続から、使えない場合はURL文字列を解析して取得する
"""

from typing import Any

from logutils import log_print, DEBUG

from .connection import ArchiveUrlConnection, UrlConnection, open_connection
from .entry import ArchiveReference, ArchiveStrategy
from .errors import UriSyntaxError
from .handler import open_archive
from .path_utils import strip_drive_slash
from .uri import FILE_URL_PREFIX, JAR_URL_SEPARATOR, get_file, to_uri

_LOG_NAME = "resloc.locator"


def get_archive_file(archive_file_url: str) -> Any:
    """
    アーカイブの場所文字列からアーカイブを開く

    file: で始まる場合は接頭辞を外したローカルパスで開く。URIとしてデコードできない
    場合（不正なエスケープなど）はデコードせずに接頭辞を外しただけの文字列で開く

    Args:
        archive_file_url: アーカイブの場所

    Returns:
        開いたアーカイブハンドル（閉じるのは呼び出し側の責任）

    Raises:
        ResourceNotFoundError: アーカイブを開けない場合
    """
    if archive_file_url.startswith(FILE_URL_PREFIX):
        try:
            path = to_uri(archive_file_url).scheme_specific_part
        except UriSyntaxError as e:
            log_print(DEBUG, f"URIとして解釈できないため生のパスで開きます: {e}", name=_LOG_NAME)
            path = archive_file_url[len(FILE_URL_PREFIX):]
        return open_archive(strip_drive_slash(path))

    return open_archive(archive_file_url)


class ConnectionStrategy:
    """アーカイブURL接続からハンドルとルートエントリパスを取得する"""

    strategy = ArchiveStrategy.CONNECTION

    def resolve(self, connection: ArchiveUrlConnection) -> ArchiveReference:
        # 呼び出しごとに新しいハンドルを使う
        connection.use_caches = False
        archive = connection.get_archive_file()
        archive_url = connection.get_archive_file_url()
        root_entry_path = connection.get_entry_name() or ""
        log_print(DEBUG, f"接続からアーカイブを取得: {archive_url}, ルート: '{root_entry_path}'",
                  name=_LOG_NAME)
        # ハンドルは接続側のものなので閉じない
        return ArchiveReference(archive, archive_url, root_entry_path,
                                owns_handle=False, strategy=self.strategy)


class StringParseStrategy:
    """
    URLのファイル部を解析してアーカイブを自前で開く

    "<任意のプロトコル>:<アーカイブ>!/<エントリ>" 形式を想定し、file: 接頭辞の
    有無はどちらも扱う。区切りがなければファイル部全体をアーカイブとみなす
    """

    strategy = ArchiveStrategy.STRING_PARSED

    def resolve(self, url: str) -> ArchiveReference:
        url_file = get_file(url)
        separator_index = url_file.find(JAR_URL_SEPARATOR)
        if separator_index != -1:
            archive_url = url_file[:separator_index]
            root_entry_path = url_file[separator_index + len(JAR_URL_SEPARATOR):]
        else:
            archive_url = url_file
            root_entry_path = ""

        archive = get_archive_file(archive_url)
        log_print(DEBUG, f"URL解析でアーカイブを取得: {archive_url}, ルート: '{root_entry_path}'",
                  name=_LOG_NAME)
        return ArchiveReference(archive, archive_url, root_entry_path,
                                owns_handle=True, strategy=self.strategy)


class ArchiveLocator:
    """
    URLからアーカイブ参照を解決する

    接続がアーカイブURL接続であれば ConnectionStrategy、そうでなければ
    StringParseStrategy を使う
    """

    def __init__(self):
        self.connection_strategy = ConnectionStrategy()
        self.string_parse_strategy = StringParseStrategy()

    def resolve(self, url: str) -> ArchiveReference:
        """
        URLのアーカイブ参照を解決する

        Args:
            url: アーカイブ内を指すURL

        Returns:
            アーカイブ参照

        Raises:
            ResourceNotFoundError: アーカイブを開けない場合
        """
        connection: UrlConnection = open_connection(url)
        if isinstance(connection, ArchiveUrlConnection):
            return self.connection_strategy.resolve(connection)
        return self.string_parse_strategy.resolve(url)
