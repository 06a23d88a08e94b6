"""
resloc テンプレートリソース探索モジュール

ファイルシステム上のディレクトリと、アーカイブ内の仮想ディレクトリにある
テンプレートリソースを統一的に列挙する
"""

from .entry import ArchiveEntry, ArchiveReference, ArchiveStrategy
from .errors import ResourceError, ResourceNotFoundError, UriSyntaxError
from .interface import (
    get_resource_lister,
    list_url,
    list_file,
    list_zip,
    list_rar,
    relative_url,
    directory_of,
    uri_of,
)
from .lister import ResourceLister

__version__ = "0.1.0"

__all__ = [
    'ArchiveEntry', 'ArchiveReference', 'ArchiveStrategy',
    'ResourceError', 'ResourceNotFoundError', 'UriSyntaxError',
    'ResourceLister', 'get_resource_lister',
    'list_url', 'list_file', 'list_zip', 'list_rar',
    'relative_url', 'directory_of', 'uri_of',
]
