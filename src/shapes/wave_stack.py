from __future__ import annotations

import logging
import math
from typing import Any

from common.types import Rect
from engine.core.geometry import Geometry

from .registry import shape
from .sine_wave import AmplitudeModulation, SineWave

logger = logging.getLogger(__name__)


def stack_parameters(
    count: int,
    *,
    phase: float = 0.0,
    phase_step: float = 0.0,
    amplitude_ratio: float = 0.25,
    frequency: float = 1.0,
    frequency_step: float = 0.0,
    amplitude_modulation: AmplitudeModulation | str = AmplitudeModulation.NONE,
) -> list[SineWave]:
    """重ね合わせる各波のパラメータ列を返す（i 本目は phase + i·phase_step, frequency + i·frequency_step）。"""
    if count < 0:
        raise ValueError("count は 0 以上が必要")
    return [
        SineWave(
            phase=phase + i * phase_step,
            amplitude_ratio=amplitude_ratio,
            frequency=frequency + i * frequency_step,
            amplitude_modulation=amplitude_modulation,
        )
        for i in range(int(count))
    ]


@shape
def wave_stack(
    rect: Rect | tuple,
    *,
    count: int = 5,
    phase: float = 0.0,
    phase_step: float = 0.0,
    amplitude_ratio: float = 0.25,
    frequency: float = 1.0,
    frequency_step: float = 0.0,
    amplitude_modulation: AmplitudeModulation | str = AmplitudeModulation.NONE,
    step: float | None = None,
    **params: Any,
) -> Geometry:
    """同じ矩形に重ねた複数の正弦波を生成します。

    Parameters
    ----------
    rect : Rect | tuple
        全波で共有する描画先矩形。
    count : int, default 5
        波の本数。
    phase, phase_step : float
        i 本目の位相は `phase + i * phase_step`。
    frequency, frequency_step : float
        i 本目の周波数は `frequency + i * frequency_step`。

    Returns
    -------
    Geometry
        波ごとに 1 本のポリライン。空の波（退化ケース）は含めない。
    """
    waves = stack_parameters(
        count,
        phase=phase,
        phase_step=phase_step,
        amplitude_ratio=amplitude_ratio,
        frequency=frequency,
        frequency_step=frequency_step,
        amplitude_modulation=amplitude_modulation,
    )
    if params:
        logger.debug("wave_stack ignores unknown parameter(s): %s", ", ".join(sorted(params)))
    g = Geometry.empty()
    for w in waves:
        g = g + w.path(rect, step)
    if len(g) < len(waves):
        logger.debug("wave_stack skipped %d empty wave(s)", len(waves) - len(g))
    return g


wave_stack.__param_meta__ = {
    "count": {"type": "integer", "min": 1, "max": 12},
    "phase": {"type": "number", "min": 0.0, "max": math.tau},
    "phase_step": {"type": "number", "min": 0.0, "max": 10.0},
    "amplitude_ratio": {"type": "number", "min": 0.0, "max": 1.0},
    "frequency": {"type": "number", "min": 1.0, "max": 30.0},
    "frequency_step": {"type": "number", "min": 0.0, "max": 5.0},
}
