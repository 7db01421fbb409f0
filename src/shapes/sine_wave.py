"""
どこで: `shapes.sine_wave`
何を: 正弦波シェイプ。パラメータモデル `SineWave`、矩形への標本化 `sample`、
      2 つのパラメータ間の補間 `interpolate`、登録 shape `sine_wave` を提供。
なぜ: 矩形に収まる変調付き正弦波の輪郭を、UI やアニメーション時計から独立した
      純関数として計算できるようにするため。

アルゴリズム（各サンプル x について）:
- `wavelength = width / (2π·frequency)`
- `y = sin(x / wavelength + phase) · (height/2 · amplitude_ratio) · envelope(x) + height/2`
- x は `rect.min_x` から `rect.max_x` まで `step` 刻み（両端含む）。点数は `floor(width/step) + 1`。

振幅変調（`u = (x - mid_x) / (width/2)`、矩形内で範囲 [-1, 1]）:
- none:   1
- center: |u|      （中央で 0、端で最大）
- edges:  1 - u²   （中央で最大、端で 0）

退化ケース:
- 幅 <= 0、または phase/amplitude_ratio/frequency/矩形に非有限値 → 空パス。
- 位相引数 `x / wavelength` が浮動小数の範囲を超える（巨大な x と周波数）→ 空パス。
- 高さ 0 → 全点 y=0 の退化パス（正常）。
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from common import settings
from common.param_utils import all_finite, clamp, lerp
from common.types import Rect
from engine.core.geometry import Geometry

from .registry import shape

logger = logging.getLogger(__name__)

# width/step が整数直下に丸められた場合の吸収幅（相対）
_COUNT_REL_TOL = 1e-12


class AmplitudeModulation(str, Enum):
    """振幅変調モード（x 方向の包絡線）。"""

    NONE = "none"
    # 中央で振幅を縮め、端に向かって伸ばす
    CENTER = "center"
    # 端で振幅を縮め、中央に向かって伸ばす
    EDGES = "edges"

    @classmethod
    def coerce(cls, value: "AmplitudeModulation | str") -> "AmplitudeModulation":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"amplitude_modulation は {choices} のいずれか: got {value!r}")


_MODE_CODES = {
    AmplitudeModulation.NONE: 0,
    AmplitudeModulation.CENTER: 1,
    AmplitudeModulation.EDGES: 2,
}


class SineWave:
    """正弦波パラメータ（常に有効な値のみを保持する値オブジェクト）。

    - `phase`: ラジアン。検証なし（周期的なので任意の実数が有効）。
    - `amplitude_ratio`: 矩形の高さの半分に対する振幅比。代入のたびに [0, 1] へ飽和。
    - `frequency`: 矩形幅あたりの周期数。代入のたびに [1, +inf) へ飽和。
    - `amplitude_modulation`: `AmplitudeModulation` のいずれか。

    NaN は飽和させずにそのまま保持し、標本化時に空パスとして扱う。
    """

    __slots__ = ("_phase", "_amplitude_ratio", "_frequency", "_amplitude_modulation")

    def __init__(
        self,
        phase: float = 0.0,
        amplitude_ratio: float = 0.25,
        frequency: float = 1.0,
        amplitude_modulation: AmplitudeModulation | str = AmplitudeModulation.NONE,
    ) -> None:
        self.set_phase(phase)
        self.set_amplitude_ratio(amplitude_ratio)
        self.set_frequency(frequency)
        self.set_modulation_mode(amplitude_modulation)

    # ── 明示セッタ ─────────────────────
    def set_phase(self, value: float) -> None:
        self._phase = float(value)

    def set_amplitude_ratio(self, value: float) -> None:
        self._amplitude_ratio = clamp(value, 0.0, 1.0)

    def set_frequency(self, value: float) -> None:
        self._frequency = clamp(value, 1.0)

    def set_modulation_mode(self, mode: AmplitudeModulation | str) -> None:
        self._amplitude_modulation = AmplitudeModulation.coerce(mode)

    # ── プロパティ（セッタ経由で同じ飽和規則） ──
    @property
    def phase(self) -> float:
        return self._phase

    @phase.setter
    def phase(self, value: float) -> None:
        self.set_phase(value)

    @property
    def amplitude_ratio(self) -> float:
        return self._amplitude_ratio

    @amplitude_ratio.setter
    def amplitude_ratio(self, value: float) -> None:
        self.set_amplitude_ratio(value)

    @property
    def frequency(self) -> float:
        return self._frequency

    @frequency.setter
    def frequency(self, value: float) -> None:
        self.set_frequency(value)

    @property
    def amplitude_modulation(self) -> AmplitudeModulation:
        return self._amplitude_modulation

    @amplitude_modulation.setter
    def amplitude_modulation(self, mode: AmplitudeModulation | str) -> None:
        self.set_modulation_mode(mode)

    @property
    def animatable_data(self) -> tuple[float, float, float]:
        """補間対象の連続成分 `(phase, amplitude_ratio, frequency)`。"""
        return (self._phase, self._amplitude_ratio, self._frequency)

    @animatable_data.setter
    def animatable_data(self, values: tuple[float, float, float]) -> None:
        phase, amplitude_ratio, frequency = values
        self.set_phase(phase)
        self.set_amplitude_ratio(amplitude_ratio)
        self.set_frequency(frequency)

    # ── 派生値 ─────────────────────────
    def wavelength(self, width: float) -> float:
        """矩形幅に対する波長（`x / wavelength` がラジアン位相になる長さ）。"""
        return float(width) / (2.0 * math.pi * self._frequency)

    def is_finite(self) -> bool:
        return all_finite(self._phase, self._amplitude_ratio, self._frequency)

    # ── 複製/比較 ───────────────────────
    def copy(self) -> "SineWave":
        return SineWave(*self.animatable_data, self._amplitude_modulation)

    def replace(self, **changes: Any) -> "SineWave":
        """指定フィールドだけを差し替えた新しいインスタンスを返す。"""
        fields = {
            "phase": self._phase,
            "amplitude_ratio": self._amplitude_ratio,
            "frequency": self._frequency,
            "amplitude_modulation": self._amplitude_modulation,
        }
        unknown = set(changes) - set(fields)
        if unknown:
            raise TypeError(f"未知のフィールドです: {sorted(unknown)}")
        fields.update(changes)
        return SineWave(**fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SineWave):
            return NotImplemented
        return (
            self.animatable_data == other.animatable_data
            and self._amplitude_modulation is other._amplitude_modulation
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"SineWave(phase={self._phase!r}, amplitude_ratio={self._amplitude_ratio!r}, "
            f"frequency={self._frequency!r}, "
            f"amplitude_modulation={self._amplitude_modulation.value!r})"
        )

    # ── 生成/補間 ───────────────────────
    def points(self, rect: Rect | tuple, step: float | None = None) -> np.ndarray:
        return sample(self, rect, step)

    def path(self, rect: Rect | tuple, step: float | None = None) -> Geometry:
        """標本化結果を 1 本のポリラインとして `Geometry` に包んで返す。"""
        return Geometry.from_lines([sample(self, rect, step)])

    def interpolated(self, other: "SineWave", p: float) -> "SineWave":
        return interpolate(self, other, p)


# ── 包絡線 ─────────────────────────────────


def _envelope_denominator(rect: Rect) -> float:
    # 半幅で正規化する（x=0 起点の矩形では mid_x と一致）
    return rect.width / 2.0


def envelope(
    mode: AmplitudeModulation | str, x: float | np.ndarray, rect: Rect | tuple
) -> float | np.ndarray:
    """x 位置における振幅変調係数を返す（スカラー/配列の双方に対応）。

    Parameters
    ----------
    mode : AmplitudeModulation | str
        変調モード。
    x : float | np.ndarray
        x 座標（矩形と同じ座標系）。
    rect : Rect | tuple
        描画先矩形。

    Returns
    -------
    float | np.ndarray
        `x` がスカラーなら float、配列なら同形状の float64 配列。
    """
    m = AmplitudeModulation.coerce(mode)
    r = Rect.coerce(rect)
    xs = np.asarray(x, dtype=np.float64)
    if m is AmplitudeModulation.NONE:
        out = np.ones_like(xs)
    else:
        denom = _envelope_denominator(r)
        u = (xs - r.mid_x) / denom if denom != 0.0 else np.zeros_like(xs)
        out = np.abs(u) if m is AmplitudeModulation.CENTER else 1.0 - u * u
    return float(out) if out.ndim == 0 else out


# ── 標本化 ─────────────────────────────────


@njit(cache=True)  # type: ignore[misc]
def _wave_points_kernel(
    xs: np.ndarray,
    wavelength: float,
    phase: float,
    mid_height: float,
    max_amplitude: float,
    mode: int,
    mid_x: float,
    denom: float,
) -> np.ndarray:
    n = xs.shape[0]
    out = np.empty((n, 2), dtype=np.float64)
    for i in range(n):
        x = xs[i]
        factor = 1.0
        if mode != 0:
            u = 0.0
            if denom != 0.0:
                u = (x - mid_x) / denom
            if mode == 1:
                factor = abs(u)
            else:
                factor = 1.0 - u * u
        out[i, 0] = x
        out[i, 1] = math.sin(x / wavelength + phase) * max_amplitude * factor + mid_height
    return out


def _wave_points_numpy(
    xs: np.ndarray,
    wavelength: float,
    phase: float,
    mid_height: float,
    max_amplitude: float,
    mode: AmplitudeModulation,
    rect: Rect,
) -> np.ndarray:
    factor = envelope(mode, xs, rect)
    ys = np.sin(xs / wavelength + phase) * max_amplitude * factor + mid_height
    return np.stack([xs, ys], axis=1)


def _sample_positions(rect: Rect, step: float) -> np.ndarray:
    q = rect.width / step
    n = math.floor(q)
    if math.isclose(q, n + 1, rel_tol=_COUNT_REL_TOL):
        n += 1
    count = int(n) + 1
    return rect.min_x + np.arange(count, dtype=np.float64) * step


def sample(
    parameters: SineWave, rect: Rect | tuple, step: float | None = None
) -> np.ndarray:
    """波形パラメータと矩形から、左端→右端の点列 `(N, 2) float64` を生成する。

    Parameters
    ----------
    parameters : SineWave
        波形パラメータ。呼び出し開始時に一度だけ読み出す。
    rect : Rect | tuple
        描画先矩形。`(width, height)` / `(x, y, width, height)` も可。
    step : float | None, default None
        x 方向のサンプル間隔。None で `SWS_SAMPLE_STEP`（既定 1.0）。

    Returns
    -------
    np.ndarray
        新規に確保した `(N, 2)` 配列。退化ケースでは `(0, 2)`。

    Raises
    ------
    ValueError
        `step` が正の有限値でない場合。
    """
    step = settings.get().SAMPLE_STEP if step is None else float(step)
    if not math.isfinite(step) or step <= 0.0:
        raise ValueError(f"step は正の有限値が必要: got {step!r}")
    r = Rect.coerce(rect)

    # パラメータはここで一度だけ読み出す（以降は局所変数のみ参照）
    phase, amplitude_ratio, frequency = parameters.animatable_data
    mode = parameters.amplitude_modulation

    if not (r.is_finite and all_finite(phase, amplitude_ratio, frequency)):
        logger.debug("non-finite input; returning empty path: %r rect=%r", parameters, r)
        return np.empty((0, 2), dtype=np.float64)
    if r.width <= 0.0:
        logger.debug("non-positive width %r; returning empty path", r.width)
        return np.empty((0, 2), dtype=np.float64)

    wavelength = r.width / (2.0 * math.pi * frequency)
    if wavelength <= 0.0:
        # frequency が極端に大きく波長がアンダーフローした場合
        logger.debug("wavelength underflow (frequency=%r); returning empty path", frequency)
        return np.empty((0, 2), dtype=np.float64)

    xs = _sample_positions(r, step)
    if not math.isfinite(float(max(abs(xs[0]), abs(xs[-1]))) / wavelength):
        # sin(inf) は NaN になるため、位相引数が溢れる組み合わせは描かない
        logger.debug("phase argument overflow (x/wavelength); returning empty path")
        return np.empty((0, 2), dtype=np.float64)

    mid_height = r.height / 2.0
    max_amplitude = mid_height * amplitude_ratio

    if settings.get().USE_NUMBA:
        return _wave_points_kernel(
            xs,
            wavelength,
            phase,
            mid_height,
            max_amplitude,
            _MODE_CODES[mode],
            r.mid_x,
            _envelope_denominator(r),
        )
    return _wave_points_numpy(xs, wavelength, phase, mid_height, max_amplitude, mode, r)


# ── 補間 ───────────────────────────────────


def interpolate(a: SineWave, b: SineWave, p: float) -> SineWave:
    """2 つのパラメータを進捗 `p` で補間した新しい `SineWave` を返す。

    - phase/amplitude_ratio/frequency は成分ごとの線形補間（phase の 2π 折り返し補正はしない）。
    - amplitude_modulation は離散値: `p < 1.0` で a、`p >= 1.0` で b。
    - `p` は clamp しない（オーバーシュートするイージングを許容）。結果はセッタで飽和される。
    """
    p = float(p)
    pa, aa, fa = a.animatable_data
    pb, ab, fb = b.animatable_data
    mode = b.amplitude_modulation if p >= 1.0 else a.amplitude_modulation
    return SineWave(
        phase=lerp(pa, pb, p),
        amplitude_ratio=lerp(aa, ab, p),
        frequency=lerp(fa, fb, p),
        amplitude_modulation=mode,
    )


# ── 登録 shape ─────────────────────────────


@shape
def sine_wave(
    rect: Rect | tuple,
    *,
    phase: float = 0.0,
    amplitude_ratio: float = 0.25,
    frequency: float = 1.0,
    amplitude_modulation: AmplitudeModulation | str = AmplitudeModulation.NONE,
    step: float | None = None,
    **params: Any,
) -> Geometry:
    """矩形に収まる正弦波のポリラインを生成します。

    Parameters
    ----------
    rect : Rect | tuple
        描画先矩形。
    phase : float, default 0.0
        位相（ラジアン）。
    amplitude_ratio : float, default 0.25
        振幅比。[0, 1] に飽和。
    frequency : float, default 1.0
        矩形幅あたりの周期数。1 未満は 1 に飽和。
    amplitude_modulation : str, default "none"
        "none" / "center" / "edges"。
    step : float | None, default None
        サンプル間隔。

    Returns
    -------
    Geometry
        1 本のポリライン（退化ケースでは空）。
    """
    if params:
        logger.debug("sine_wave ignores unknown parameter(s): %s", ", ".join(sorted(params)))
    wave = SineWave(phase, amplitude_ratio, frequency, amplitude_modulation)
    return wave.path(rect, step)


sine_wave.__param_meta__ = {
    "phase": {"type": "number", "min": 0.0, "max": math.tau},
    "amplitude_ratio": {"type": "number", "min": 0.0, "max": 1.0},
    "frequency": {"type": "number", "min": 1.0, "max": 30.0},
    "amplitude_modulation": {"type": "enum", "choices": [m.value for m in AmplitudeModulation]},
    "step": {"type": "number", "min": 0.25, "max": 8.0},
}


__all__ = [
    "AmplitudeModulation",
    "SineWave",
    "envelope",
    "sample",
    "interpolate",
    "sine_wave",
]
