import math

import numpy as np
import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, settings as hsettings, strategies as st  # type: ignore

from common.types import Rect
from shapes.sine_wave import AmplitudeModulation, SineWave, envelope, interpolate, sample

finite = st.floats(allow_nan=False, allow_infinity=False, min_value=-1e6, max_value=1e6)
modes = st.sampled_from(list(AmplitudeModulation))


@given(v=finite)
def test_amplitude_ratio_always_in_unit_interval(v):
    w = SineWave(amplitude_ratio=v)
    assert 0.0 <= w.amplitude_ratio <= 1.0
    if 0.0 <= v <= 1.0:
        assert w.amplitude_ratio == v


@given(v=finite)
def test_frequency_never_below_one(v):
    w = SineWave(frequency=v)
    assert w.frequency >= 1.0
    if v >= 1.0:
        assert w.frequency == v


@hsettings(deadline=None, max_examples=50)
@given(
    width=st.integers(0, 800).map(lambda k: k / 2.0),
    height=st.floats(0.0, 200.0),
    amp=st.floats(0.0, 1.0),
    freq=st.floats(1.0, 40.0),
    phase=st.floats(-20.0, 20.0),
    mode=modes,
)
def test_sample_count_and_bounds(width, height, amp, freq, phase, mode):
    w = SineWave(phase=phase, amplitude_ratio=amp, frequency=freq, amplitude_modulation=mode)
    pts = sample(w, Rect.from_size(width, height))
    if width <= 0.0:
        assert pts.shape == (0, 2)
        return
    assert pts.shape == (math.floor(width) + 1, 2)
    assert np.all(np.isfinite(pts))
    assert pts[:, 1].min() >= -1e-9
    assert pts[:, 1].max() <= height + 1e-9


@given(
    a=st.tuples(finite, st.floats(0.0, 1.0), st.floats(1.0, 100.0), modes),
    b=st.tuples(finite, st.floats(0.0, 1.0), st.floats(1.0, 100.0), modes),
)
def test_interpolate_endpoints(a, b):
    wa, wb = SineWave(*a), SineWave(*b)
    assert interpolate(wa, wb, 0.0) == wa
    assert interpolate(wa, wb, 1.0) == wb


@given(x=st.floats(0.0, 100.0), mode=modes)
def test_envelope_in_unit_interval_inside_rect(x, mode):
    f = envelope(mode, x, Rect.from_size(100.0, 10.0))
    assert 0.0 <= f <= 1.0


@given(
    x0=st.floats(-1e4, 1e4),
    width=st.floats(1.0, 500.0),
    t=st.floats(0.0, 1.0),
    mode=modes,
)
def test_envelope_in_unit_interval_for_offset_rects(x0, width, t, mode):
    rect = Rect(x0, 0.0, width, 10.0)
    f = envelope(mode, rect.min_x + t * rect.width, rect)
    assert -1e-9 <= f <= 1.0 + 1e-9


@hsettings(max_examples=60, deadline=None)
@given(
    x0=st.floats(-1e300, 1e300),
    width=st.floats(1.0, 100.0),
    frequency=st.floats(1.0, 1e300),
    mode=modes,
)
def test_sampled_points_are_always_finite(x0, width, frequency, mode):
    w = SineWave(amplitude_ratio=1.0, frequency=frequency, amplitude_modulation=mode)
    pts = sample(w, Rect(x0, 0.0, width, 10.0))
    assert np.isfinite(pts).all()
