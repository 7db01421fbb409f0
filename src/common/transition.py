"""
どこで: `common.transition`
何を: 経過時間 t [秒] を 0.0〜1.0 の進捗 p へ写像するイージング/トランジションの純粋ロジック。
なぜ: 補間（`interpolate(a, b, p)`）を外部クロックから駆動する際の、
      イージング・繰り返し・往復の扱いを再利用可能な部品として切り出すため。

設計方針:
- 純粋・決定的。時計は持たない（t は呼び出し側が渡す）。
- イージング: linear/ease_in/ease_out/ease_in_out。端点 0/1 は厳密に保存。
- 繰り返し: `repeat=True` で周期化、`autoreverse=True` で往復（周期は 2×duration）。
"""

from __future__ import annotations

import math
from typing import Any, Callable


def _linear(p: float) -> float:
    return p


def _ease_in(p: float) -> float:
    return p * p


def _ease_out(p: float) -> float:
    q = 1.0 - p
    return 1.0 - q * q


def _ease_in_out(p: float) -> float:
    # smoothstep
    return p * p * (3.0 - 2.0 * p)


_EASINGS: dict[str, Callable[[float], float]] = {
    "linear": _linear,
    "ease_in": _ease_in,
    "ease_out": _ease_out,
    "ease_in_out": _ease_in_out,
}


def list_easings() -> list[str]:
    return sorted(_EASINGS)


def ease(name: str, p: float) -> float:
    """進捗 `p` にイージング `name` を適用する（入力は [0,1] に clamp）。

    Raises
    ------
    ValueError
        未知のイージング名。
    """
    key = (name or "linear").lower()
    fn = _EASINGS.get(key)
    if fn is None:
        raise ValueError(f"未知のイージングです: {name!r}（{', '.join(list_easings())}）")
    p = 0.0 if p <= 0.0 else 1.0 if p >= 1.0 else float(p)
    return fn(p)


class Transition:
    """トランジション。`__call__(t)` で 0..1 の進捗を返す。

    引数:
        duration: 片道の所要時間 [秒]（> 0）。
        easing: イージング名。
        repeat: True で無限に繰り返す。False なら t >= duration で 1.0 に留まる。
        autoreverse: repeat 時に往復させる（偶数周回は 0→1、奇数周回は 1→0）。
    """

    __slots__ = ("_duration", "_easing", "_repeat", "_autoreverse")

    def __init__(
        self,
        duration: float,
        *,
        easing: str = "linear",
        repeat: bool = False,
        autoreverse: bool = False,
    ) -> None:
        d = float(duration)
        if not math.isfinite(d) or d <= 0.0:
            raise ValueError("duration は正の有限値が必要")
        if easing.lower() not in _EASINGS:
            raise ValueError(f"未知のイージングです: {easing!r}")
        self._duration = d
        self._easing = easing.lower()
        self._repeat = bool(repeat)
        self._autoreverse = bool(autoreverse)

    @property
    def duration(self) -> float:
        return self._duration

    def __call__(self, t: float) -> float:
        if not math.isfinite(t):
            raise ValueError("t は有限値が必要")
        cycle = float(t) / self._duration
        if not self._repeat:
            return ease(self._easing, cycle)
        k = math.floor(cycle)
        frac = cycle - k
        if self._autoreverse and int(k) % 2 == 1:
            frac = 1.0 - frac
        return ease(self._easing, frac)

    def apply(self, a: Any, b: Any, t: float) -> Any:
        """`a.interpolated(b, p)` を時刻 t の進捗で評価する。"""
        return a.interpolated(b, self(t))

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return (
            f"Transition(duration={self._duration}, easing={self._easing!r}, "
            f"repeat={self._repeat}, autoreverse={self._autoreverse})"
        )


__all__ = ["Transition", "ease", "list_easings"]
