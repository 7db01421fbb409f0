"""
どこで: `engine.core.geometry`
何を: 波形ポリラインの格納型 `Geometry`（2D 点列の連結配列 + 区切り index）。
なぜ: `sine_wave` は 1 本、`wave_stack` は複数本の波を返すため、本数に依らない
      単一の出力型で `api.G` から扱えるようにする。

格納形式:
- `coords: float64 (N, 2)` 全波の点を左端→右端の順に連結したもの。
- `offsets: int32 (M+1,)` i 本目の波は `coords[offsets[i]:offsets[i+1]]`。`offsets[0] == 0`、`offsets[-1] == N`。
- 波を持たない場合は `coords.shape == (0, 2)`、`offsets == [0]`。

    # 3 点の波と 2 点の波
    # coords  = [[0,5], [1,6], [2,5], [0,1], [1,2]]
    # offsets = [0, 3, 5]
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

LineLike = np.ndarray | Sequence[Sequence[float]]


class Geometry:
    """2D ポリライン集合（波 1 本 = ポリライン 1 本）。"""

    __slots__ = ("coords", "offsets")

    coords: np.ndarray
    offsets: np.ndarray

    def __init__(self, coords: np.ndarray, offsets: np.ndarray) -> None:
        pts = np.ascontiguousarray(coords, dtype=np.float64)
        idx = np.asarray(offsets, dtype=np.int32)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"coords は (N, 2) が必要: got {pts.shape}")
        if idx.ndim != 1 or idx.size == 0:
            raise ValueError("offsets は 1 要素以上の 1 次元配列が必要")
        if idx[0] != 0 or idx[-1] != pts.shape[0]:
            raise ValueError(f"offsets は 0 で始まり N={pts.shape[0]} で終わる必要があります")
        if np.any(np.diff(idx) < 0):
            raise ValueError("offsets は単調非減少である必要があります")
        self.coords = pts
        self.offsets = idx

    @classmethod
    def empty(cls) -> "Geometry":
        return cls(np.empty((0, 2), dtype=np.float64), np.zeros(1, dtype=np.int32))

    @classmethod
    def from_lines(cls, lines: Iterable[LineLike]) -> "Geometry":
        """点列の並びから `Geometry` を作る。点を持たない線（退化した波）は捨てる。

        Raises
        ------
        ValueError
            `(K, 2)` でない点列が含まれる場合。
        """
        kept: list[np.ndarray] = []
        for line in lines:
            arr = np.asarray(line, dtype=np.float64)
            if arr.size == 0:
                continue
            if arr.ndim != 2 or arr.shape[1] != 2:
                raise ValueError(f"点列は (K, 2) が必要: got {arr.shape}")
            kept.append(arr)
        if not kept:
            return cls.empty()
        counts = [arr.shape[0] for arr in kept]
        offsets = np.concatenate([[0], np.cumsum(counts)]).astype(np.int32)
        return cls(np.concatenate(kept, axis=0), offsets)

    def concat(self, other: "Geometry") -> "Geometry":
        """`other` の波を後ろに連ねた新しい `Geometry` を返す。"""
        if other.is_empty:
            return Geometry(self.coords.copy(), self.offsets.copy())
        shifted = other.offsets[1:] + self.coords.shape[0]
        return Geometry(
            np.concatenate([self.coords, other.coords], axis=0),
            np.concatenate([self.offsets, shifted]),
        )

    def __add__(self, other: "Geometry") -> "Geometry":
        return self.concat(other)

    @property
    def is_empty(self) -> bool:
        return self.coords.shape[0] == 0

    def __len__(self) -> int:
        return int(self.offsets.shape[0] - 1)

    @property
    def n_vertices(self) -> int:
        return int(self.coords.shape[0])

    @property
    def n_lines(self) -> int:
        return len(self)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Geometry(N={self.n_vertices}, M={self.n_lines})"


__all__ = ["Geometry"]
