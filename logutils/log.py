"""
ロギング用ユーティリティ

リソース探索処理全体でのログ出力を統一的に扱うためのユーティリティ関数群
"""
import os
import sys
import traceback
from typing import Optional, Any

# Pythonの標準loggingモジュールをインポート
import logging as py_logging

# ログレベルの定数定義
DEBUG = 10
INFO = 20
WARNING = 30
ERROR = 40
CRITICAL = 50

# 既定のログレベル
_log_level = ERROR

# 生成済みロガーの格納用辞書
_loggers = {}

# ログファイルのパス（未設定ならNone）
_log_file: Optional[str] = None

# 全ロガー共通のフォーマット
_FORMAT = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'


def setup_logging(level: int = ERROR, logfile: str = None) -> None:
    """
    ロギングシステムをセットアップする

    既に生成済みのロガーにもレベルとファイル出力先を反映する

    Args:
        level: ログレベル（デフォルトはERROR）
        logfile: ログの出力先ファイル（デフォルトはNone）
    """
    global _log_level, _log_file
    _log_level = level

    if logfile:
        try:
            log_dir = os.path.dirname(logfile)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir)
            # 書き込み可能かどうかを先に確認する
            with open(logfile, 'a', encoding='utf-8'):
                pass
            _log_file = logfile
        except OSError as e:
            sys.stderr.write(f"ログファイルを開けませんでした: {e}\n")
            _log_file = None
    else:
        _log_file = None

    for logger in _loggers.values():
        logger.setLevel(_log_level)
        _attach_file_handler(logger)


def _attach_file_handler(logger: py_logging.Logger) -> None:
    """設定済みのログファイルへのハンドラをロガーに付け替える"""
    for handler in list(logger.handlers):
        if isinstance(handler, py_logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()

    if _log_file:
        file_handler = py_logging.FileHandler(_log_file, encoding='utf-8')
        file_handler.setFormatter(py_logging.Formatter(_FORMAT))
        logger.addHandler(file_handler)


def get_logger(name: str) -> py_logging.Logger:
    """
    名前付きのロガーを取得する

    Args:
        name: ロガー名

    Returns:
        設定済みのロガーオブジェクト
    """
    if name in _loggers:
        return _loggers[name]

    logger = py_logging.getLogger(name)
    logger.setLevel(_log_level)
    # 親ロガーへの伝播で二重出力しないようにする
    logger.propagate = False

    console = py_logging.StreamHandler()
    console.setFormatter(py_logging.Formatter(_FORMAT))
    logger.addHandler(console)

    _attach_file_handler(logger)

    _loggers[name] = logger
    return logger


def _dispatch(logger: py_logging.Logger, level: int, message: Any, *args, **kwargs) -> None:
    """レベルに応じたログメソッドを呼び出す"""
    if level >= CRITICAL:
        logger.critical(message, *args, **kwargs)
    elif level >= ERROR:
        logger.error(message, *args, **kwargs)
    elif level >= WARNING:
        logger.warning(message, *args, **kwargs)
    elif level >= INFO:
        logger.info(message, *args, **kwargs)
    else:
        logger.debug(message, *args, **kwargs)


def log_print(level: int, message: Any, *args, name: str = None, **kwargs) -> None:
    """
    指定したレベルでメッセージをログに出力する

    Args:
        level: ログレベル
        message: 出力するメッセージ
        *args: メッセージのフォーマット引数
        name: ロガー名（デフォルトは'resloc'）
        **kwargs: その他のキーワード引数
    """
    if level < _log_level:
        return

    _dispatch(get_logger(name or 'resloc'), level, message, *args, **kwargs)


def log_trace(e: Optional[BaseException], level: int, message: Any, *args, name: str = None, **kwargs) -> None:
    """
    例外のトレース情報を含めてログに出力する

    Args:
        e: 例外オブジェクト（NoneならTraceback代わりに呼び出し元のスタックを出力）
        level: ログレベル
        message: 出力するメッセージ
        *args: メッセージのフォーマット引数
        name: ロガー名（デフォルトは'resloc'）
        **kwargs: その他のキーワード引数
    """
    if level < _log_level:
        return

    log_print(level, message, *args, name=name, **kwargs)

    if e is not None:
        stack = ''.join(traceback.format_exception(type(e), e, e.__traceback__))
    else:
        stack = ''.join(traceback.format_stack()[:-1])

    _dispatch(get_logger(name or 'resloc'), level, "スタックトレース:\n%s", stack)
