"""ログ設定"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False
_handler: logging.Handler | None = None


def configure_logging(level: str = "INFO") -> None:
    """ルートロガーにハンドラを一度だけ設定する"""

    global _configured, _handler
    if _configured:
        set_level(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(_resolve(level))

    _handler = handler
    _configured = True


def set_level(level_name: str) -> None:
    """実行中にログレベルを変える（不明な名前は ValueError）"""

    if not level_name:
        return
    level = _resolve(level_name)
    logging.getLogger().setLevel(level)
    if _handler:
        _handler.setLevel(level)


def _resolve(level_name: str) -> int:
    level = getattr(logging, str(level_name).upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {level_name}")
    return level
