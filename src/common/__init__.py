"""
どこで: `common` パッケージ。
何を: palette/CLI 双方で使う軽量ユーティリティ（環境変数設定・ロギング）。
なぜ: ドメイン層から I/O 設定を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
