"""共通フィクスチャ。

- 乱数ソース（シード固定の NumPy Generator / 固定値スタブ）
- HUEPAL_* 環境変数の分離
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings
from palette import harmony


class FixedRandom:
    """常に同じ値を返す乱数ソース（`RandomSource` 互換）。

    - `random()` は `value` を返す。
    - `integers(low, high)` は `offset` を区間内に丸めて `low + offset` を返す。
    """

    def __init__(self, value: float = 0.5, offset: int = 0) -> None:
        self.value = value
        self.offset = offset
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value

    def integers(self, low: int, high: int) -> int:
        self.calls += 1
        return low + min(max(self.offset, 0), high - low - 1)


@pytest.fixture()
def rng() -> np.random.Generator:
    """シード固定の Generator。"""
    return np.random.default_rng(12345)


@pytest.fixture()
def fixed_random() -> FixedRandom:
    return FixedRandom()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """HUEPAL_* を消した状態で設定と既定乱数を読み直す。"""
    for name in (
        "HUEPAL_LOG_LEVEL",
        "HUEPAL_SEED",
        "HUEPAL_EXPORT_DIR",
        "HUEPAL_EXPORT_OVERWRITE",
    ):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    harmony.reset_default_rng()
    yield
    monkeypatch.undo()
    settings.reload_from_env()
    harmony.reset_default_rng()
