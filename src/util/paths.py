"""
どこで: `util.paths`。
何を: パレットのエクスポート先ディレクトリの生成と解決ユーティリティを提供する。
なぜ: CLI/ライブラリから簡潔に保存先を扱え、並行呼び出しでも安全に作成できるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from common import settings

from .utils import load_config, project_root


def resolve_palette_dir() -> Path:
    """エクスポート先を解決して返す（作成はしない）。

    優先順:
    1) 環境変数 `HUEPAL_EXPORT_DIR`
    2) 設定ファイルの `export.directory`
    3) プロジェクトルート直下の `data/palette`

    相対パスはプロジェクトルート基準で解釈する。
    """
    raw = settings.get().EXPORT_DIR
    if raw is None:
        cfg = load_config()
        section = cfg.get("export", {})
        if isinstance(section, dict) and section.get("directory"):
            raw = str(section["directory"])
    out = Path(raw) if raw else Path("data") / "palette"
    if not out.is_absolute():
        out = project_root() / out
    return out


def ensure_palette_dir() -> Path:
    """パレット出力先を作成して返す。

    - 親ディレクトリも同時に作成される。
    - 既存の場合もそのまま Path を返す。
    - 並行呼び出しに対して `exist_ok=True` で安全。
    """
    out = resolve_palette_dir()
    out.mkdir(parents=True, exist_ok=True)
    return out
