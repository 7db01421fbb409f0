"""
どこで: `common` のパラメータ正規化ユーティリティ。
何を: 範囲クランプ（NaN 透過）と線形補間。
なぜ: 形状パラメータの「常に有効」不変条件と補間を一箇所で定義するため。
"""

from __future__ import annotations

import math


def clamp(x: float, lo: float, hi: float = math.inf) -> float:
    """`x` を `[lo, hi]` に飽和させる。NaN はそのまま返す。"""
    x = float(x)
    if math.isnan(x):
        return x
    return lo if x <= lo else hi if x >= hi else x


def clamp01(x: float) -> float:
    return clamp(x, 0.0, 1.0)


def lerp(a: float, b: float, p: float) -> float:
    """`a·(1-p) + b·p`。端点 p=0/p=1 では a/b をそのまま返す。"""
    if p == 0.0:
        return a
    if p == 1.0:
        return b
    return a * (1.0 - p) + b * p


def all_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


__all__ = ["clamp", "clamp01", "lerp", "all_finite"]
