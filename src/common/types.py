"""
どこで: `common` の型定義。
何を: Vec2 エイリアスと描画先の矩形 `Rect`。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

Vec2 = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """描画先の矩形（左上原点、x は右、y は下向き）。

    `width`/`height` は負値も保持する（サンプラ側で空パスとして扱う）。
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_size(cls, width: float, height: float) -> "Rect":
        return cls(0.0, 0.0, float(width), float(height))

    @classmethod
    def coerce(cls, obj: Any) -> "Rect":
        """`Rect` / `(width, height)` / `(x, y, width, height)` を `Rect` に正規化する。

        Raises
        ------
        TypeError
            シーケンスでも `Rect` でもない場合。
        ValueError
            要素数が 2 または 4 でない場合。
        """
        if isinstance(obj, Rect):
            return obj
        if not isinstance(obj, (tuple, list)):
            raise TypeError(f"Rect または数値タプルを指定してください: got {obj!r}")
        vals = [float(v) for v in obj]
        if len(vals) == 2:
            return cls(0.0, 0.0, vals[0], vals[1])
        if len(vals) == 4:
            return cls(vals[0], vals[1], vals[2], vals[3])
        raise ValueError("矩形は (width, height) または (x, y, width, height) で指定してください")

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2.0

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.x, self.y, self.width, self.height))


__all__ = ["Vec2", "Rect"]
