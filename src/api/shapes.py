"""
どこで: `api.shapes`（形状生成の高レベル API）。
何を: 登録済み shape 関数を解決して `Geometry` を返す薄いファサード。
なぜ: 利用者が `G.sine_wave(rect, ...)` の形で関数的に形状を生成できる統一入口を提供するため。

Notes
-----
- 実体はレジストリ（`shapes.registry`）に登録済みの shape 関数を解決し、
  `fn(*args, **params)` を直接呼ぶ。キャッシュは持たない（各シェイプは純関数）。
- 例外方針: 未登録名は `AttributeError`。生成器側の失敗は各シェイプが責任。

Examples
--------
    from api import G

    g = G.sine_wave((300, 200), amplitude_ratio=0.75, frequency=8, amplitude_modulation="edges")
    stack = G.wave_stack((300, 200), count=5, frequency_step=1.0)
"""

from __future__ import annotations

from typing import Any, Callable

# レジストリ登録の副作用を発火させるため、shapes パッケージを 1 度だけ import すれば十分
import shapes  # noqa: F401  (登録目的の副作用)
from engine.core.geometry import Geometry
from shapes.registry import get_shape as get_shape_generator
from shapes.registry import is_shape_registered
from shapes.registry import list_shapes as list_registered_shapes


class ShapesAPI:
    """形状 API（`G` の実体）。

    責務:
    - 形状名→生成関数の動的ディスパッチ（インスタンス属性で遅延解決）
    - 生成結果の型統一（`Geometry` を返す）

    使い方:
        from api import G
        g = G.sine_wave((320, 120), frequency=3)
    """

    def _build_shape_method(self, name: str) -> Callable[..., Geometry]:
        def _shape_method(*args: Any, **params: Any) -> Geometry:
            if not is_shape_registered(name):
                # 登録解除と整合を取るため、キャッシュ済みの属性を破棄して AttributeError を送出
                self.__dict__.pop(name, None)
                raise AttributeError(f"'{self.__class__.__name__}' has no attribute '{name}'")
            fn = get_shape_generator(name)
            out = fn(*args, **params)
            if not isinstance(out, Geometry):
                out = Geometry.from_lines(out)
            return out

        _shape_method.__name__ = name
        _shape_method.__doc__ = getattr(get_shape_generator(name), "__doc__", None)
        return _shape_method

    def __getattr__(self, name: str) -> Callable[..., Geometry]:
        if name.startswith("_") or not is_shape_registered(name):
            raise AttributeError(f"'{self.__class__.__name__}' has no attribute '{name}'")
        method = self._build_shape_method(name)
        # 次回以降は通常の属性解決で取得できるようにメモ化
        self.__dict__[name] = method
        return method

    def list(self) -> list[str]:
        """登録済み shape 名の一覧。"""
        return list_registered_shapes()

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(list_registered_shapes()))


G = ShapesAPI()

__all__ = ["G", "ShapesAPI"]
