"""共通フィクスチャ。

- 小さな矩形試料
- 標本化カーネル（numba / numpy）の切り替え
- 設定の環境変数リセット
- プリセット設定キャッシュの破棄（各テストで load_config を差し替えるため）
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from common.types import Rect
from shapes import presets


@pytest.fixture(autouse=True)
def _fresh_preset_cache() -> Iterator[None]:
    presets.reload_presets()
    yield
    presets.reload_presets()


@pytest.fixture()
def rect_200x100() -> Rect:
    return Rect.from_size(200.0, 100.0)


@pytest.fixture()
def rect_empty() -> Rect:
    return Rect.from_size(0.0, 100.0)


@pytest.fixture(params=["numba", "numpy"])
def kernel(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> str:
    """標本化カーネルを切り替えてテストを 2 通り実行する。"""
    monkeypatch.setattr(settings.get(), "USE_NUMBA", request.param == "numba")
    return request.param


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("SWS_SAMPLE_STEP", "SWS_USE_NUMBA", "SWS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()
