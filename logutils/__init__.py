"""
ロギングモジュール

resloc 全体で使用するロギング機能を提供します
"""

from .log import (
    setup_logging,
    get_logger,
    log_print,
    log_trace,
    DEBUG,
    INFO,
    WARNING,
    ERROR,
    CRITICAL
)

__all__ = [
    'setup_logging', 'get_logger', 'log_print', 'log_trace',
    'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'
]
