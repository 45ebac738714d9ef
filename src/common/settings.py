"""
どこで: `common.settings`
何を: huepal の環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # Logging
    LOG_LEVEL: str = "INFO"

    # 乱数（None ならエントロピーから初期化）
    SEED: int | None = None

    # Export（None なら config / `data/palette` にフォールバック）
    EXPORT_DIR: str | None = None
    EXPORT_OVERWRITE: bool = True


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `HUEPAL_LOG_LEVEL`: ロギングレベル名（既定 INFO）。
    - `HUEPAL_SEED`: 既定乱数生成器のシード（0 以上）。
    - `HUEPAL_EXPORT_DIR`: エクスポート先ディレクトリ。
    - `HUEPAL_EXPORT_OVERWRITE`: 同名ファイルの上書き可否。
    """
    _settings.LOG_LEVEL = (env_str("HUEPAL_LOG_LEVEL", "INFO") or "INFO").upper()
    _settings.SEED = env_int("HUEPAL_SEED", None, min_value=0)
    _settings.EXPORT_DIR = env_str("HUEPAL_EXPORT_DIR", None)
    _settings.EXPORT_OVERWRITE = env_bool("HUEPAL_EXPORT_OVERWRITE", True)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
