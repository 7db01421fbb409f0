"""
どこで: `shapes` パッケージ（関数登録）。
何を: ビルトイン shape を import 副作用で登録し、`api.shapes` から解決できるようにする。
なぜ: 生成ステージの拡張点を一箇所に集約するため。
"""

# 関数版 shape 定義を import して登録（副作用）
from . import sine_wave as _register_sine_wave  # noqa: F401
from . import wave_stack as _register_wave_stack  # noqa: F401
from .registry import get_shape, is_shape_registered, list_shapes, shape  # re-export

__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
]
