"""
どこで: `common` パッケージのロギング初期化。
何を: CLI 起動時に 1 度だけ `basicConfig` を適用する。レベル未指定時は `HUEPAL_LOG_LEVEL`（settings）に従う。
なぜ: 各モジュールは `logging.getLogger(__name__)` だけを使い、出力先とレベルの決定を入口に集約するため。
"""

from __future__ import annotations

import logging
from typing import Optional

from . import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: Optional[int | str] = None) -> int:
    """レベル指定を logging の数値レベルへ変換する。

    - None のときは `settings.get().LOG_LEVEL` を使う
    - 未知の名前は WARNING に落とす
    """
    if level is None:
        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        value = logging.getLevelName(level.strip().upper())
        return value if isinstance(value, int) else logging.WARNING
    return int(level)


def setup_default_logging(level: Optional[int | str] = None) -> None:
    """ルートロガーが未設定なら最小構成を適用する（既にハンドラがあれば no-op）。"""
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT)


__all__ = ["LOG_FORMAT", "resolve_level", "setup_default_logging"]
