"""
resloc コマンドラインツール

URLの一覧表示とテンプレート名の解決をコマンドラインから行う
"""

import argparse
import sys
from typing import List, Optional

from logutils import setup_logging, log_trace, DEBUG, ERROR

from .errors import ResourceError
from .interface import directory_of, list_url, relative_url


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを作成する"""
    parser = argparse.ArgumentParser(prog="resloc", description="テンプレートリソース探索ツール")
    parser.add_argument('-d', '--debug', action='store_true', help="デバッグログを有効化")
    parser.add_argument('-l', '--log-file', help="ログの出力先ファイル")

    subparsers = parser.add_subparsers(dest='command')
    subparsers.required = True

    list_parser = subparsers.add_parser('list', help="URLが指すディレクトリ/アーカイブ内を一覧表示")
    list_parser.add_argument('url', help="file: URL、またはアーカイブ内を指すURL（jar:file:/a.jar!/templates など）")
    list_parser.add_argument('-s', '--suffix', action='append', default=[], dest='suffixes',
                             help="接尾辞フィルタ（複数指定可。アーカイブ内では未指定だと何も表示しない）")

    resolve_parser = subparsers.add_parser('resolve', help="基準テンプレートに対して名前を解決")
    resolve_parser.add_argument('base', help="基準テンプレート名")
    resolve_parser.add_argument('name', help="解決するテンプレート名")

    dirname_parser = subparsers.add_parser('dirname', help="パスのディレクトリ部分を表示")
    dirname_parser.add_argument('path', help="対象のパス")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    メインエントリポイント

    Args:
        argv: コマンドライン引数（Noneなら sys.argv を使う）

    Returns:
        終了コード
    """
    args = build_parser().parse_args(argv)
    setup_logging(DEBUG if args.debug else ERROR, args.log_file)

    try:
        if args.command == 'list':
            for path in list_url(args.url, args.suffixes):
                print(path)
        elif args.command == 'resolve':
            print(relative_url(args.base, args.name))
        elif args.command == 'dirname':
            print(directory_of(args.path))
    except ResourceError as e:
        log_trace(e, DEBUG, "コマンドの実行に失敗しました", name="resloc.cli")
        print(f"エラー: {e}", file=sys.stderr)
        return 1

    return 0
