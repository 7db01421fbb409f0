"""
どこで: `api` 入口（高レベル公開 API）。
何を: 形状 `G`・装飾子 `shape`・`Geometry`・波形パラメータ/標本化/補間・トランジションを再輸出。
なぜ: 利用者が単一名前空間から形状生成→補間→描画用点列の取得まで完結できるようにするため。

Usage:
    from api import G, SineWave, Transition, interpolate, sample

    a = SineWave(amplitude_ratio=0.2)
    b = SineWave(amplitude_ratio=0.9, frequency=4, amplitude_modulation="edges")
    points = sample(interpolate(a, b, 0.5), (320, 120))

    tr = Transition(0.9, easing="ease_in_out", repeat=True, autoreverse=True)
    g = tr.apply(a, b, t=1.2).path((320, 120))
"""

from common.logging import setup_default_logging
from common.transition import Transition, ease
from common.types import Rect
from engine.core.geometry import Geometry
from shapes.presets import get_preset, list_presets, reload_presets
from shapes.registry import shape as shape  # 公開唯一経路（api.shape）
from shapes.registry import shape_params
from shapes.sine_wave import AmplitudeModulation, SineWave, envelope, interpolate, sample

from .shapes import G, ShapesAPI

__all__ = [
    # メインAPI
    "G",
    "shape",
    "SineWave",
    "AmplitudeModulation",
    "sample",
    "interpolate",
    "envelope",
    "Transition",
    "ease",
    "get_preset",
    "list_presets",
    "reload_presets",
    "shape_params",
    "setup_default_logging",
    # クラス（高度な使用）
    "ShapesAPI",
    "Geometry",
    "Rect",
]

__version__ = "0.1.0"
