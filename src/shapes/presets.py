"""
どこで: `shapes.presets`
何を: 名前付きの `SineWave` パラメータ集（組込み + 設定ファイル `sine_wave.presets`）。
なぜ: よく使う見た目（プレビュー用の作例）を名前で再現できるようにするため。

設定例（`configs/default.yaml` または ルート `config.yaml`）:

    sine_wave:
      presets:
        calm:
          amplitude_ratio: 0.2
          frequency: 2
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import Any, Mapping

from util.utils import load_config

from .sine_wave import SineWave

logger = logging.getLogger(__name__)

_BUILTIN_PRESETS: dict[str, dict[str, Any]] = {
    "default": {},
    "edges_offset": {
        "phase": math.pi / 6,
        "amplitude_ratio": 0.75,
        "frequency": 1.0,
        "amplitude_modulation": "edges",
    },
    "edges_dense": {"amplitude_ratio": 0.75, "frequency": 8.0, "amplitude_modulation": "edges"},
    "center_dense": {"amplitude_ratio": 0.75, "frequency": 18.0, "amplitude_modulation": "center"},
    "edges_double": {"amplitude_ratio": 0.75, "frequency": 2.0, "amplitude_modulation": "edges"},
    "tall": {"amplitude_ratio": 0.75},
}


@lru_cache(maxsize=1)
def _config_presets() -> dict[str, dict[str, Any]]:
    # 設定ファイルは初回参照時に 1 度だけ読む（再読込は reload_presets）
    cfg = load_config()
    section = cfg.get("sine_wave")
    raw = section.get("presets") if isinstance(section, Mapping) else None
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        logger.warning("sine_wave.presets must be a mapping; ignoring %r", type(raw).__name__)
        return {}

    out: dict[str, dict[str, Any]] = {}
    for name, entry in raw.items():
        if not isinstance(entry, Mapping):
            logger.warning("preset %r is not a mapping; skipped", name)
            continue
        try:
            SineWave(**entry)
        except (TypeError, ValueError) as exc:
            logger.warning("preset %r is invalid (%s); skipped", name, exc)
            continue
        out[str(name)] = dict(entry)
    return out


def _all_presets() -> dict[str, dict[str, Any]]:
    merged = dict(_BUILTIN_PRESETS)
    merged.update(_config_presets())
    return merged


def reload_presets() -> None:
    """設定ファイル由来のプリセットを破棄し、次回参照時に読み直す。"""
    _config_presets.cache_clear()


def list_presets() -> list[str]:
    return sorted(_all_presets())


def get_preset(name: str) -> SineWave:
    """名前付きプリセットから新しい `SineWave` を生成する。

    例外:
        KeyError: 未知のプリセット名。
    """
    presets = _all_presets()
    if name not in presets:
        raise KeyError(f"'{name}' は登録されていません")
    return SineWave(**presets[name])


__all__ = ["get_preset", "list_presets", "reload_presets"]
