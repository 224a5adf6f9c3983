import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from config import settings

LOG_FILE_NAME = "song_catalog.log"

# get_logger で作成したロガー名
_managed_loggers = set()


def _resolve_level(level_name: str) -> int:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        return logging.INFO
    return level


def get_logger(name: str):
    """
    ファイル出力とコンソール出力を併用するロガーを取得する
    """
    logger = logging.getLogger(name)

    # ハンドラが重複して追加されないようにチェック
    if not logger.handlers:
        level = _resolve_level(settings.LOG_LEVEL)
        logger.setLevel(level)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        # 1. ファイルハンドラ (10MBごとにローテーション, 最大5世代)
        try:
            os.makedirs(settings.LOG_DIR, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(settings.LOG_DIR, LOG_FILE_NAME),
                maxBytes=10*1024*1024,
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            file_handler.setLevel(level)
            logger.addHandler(file_handler)
        except OSError as e:
            # 権限エラーなどでファイル作成できない場合はコンソールのみ
            print(f"Failed to set up file logging: {e}", file=sys.stderr)

        # 2. コンソールハンドラ (Docker logs / ターミナル確認用)
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)
        _managed_loggers.add(name)

    return logger


def set_log_level(level_name: str):
    """作成済みのロガーとハンドラのレベルをまとめて変更する"""
    level = _resolve_level(level_name)
    for name in _managed_loggers:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
