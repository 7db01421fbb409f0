from __future__ import annotations

import pytest

import shapes  # noqa: F401  (ビルトイン登録)
from engine.core.geometry import Geometry
from shapes.registry import (
    get_registry,
    get_shape,
    is_shape_registered,
    list_shapes,
    shape,
    shape_params,
    unregister,
)


def test_builtin_shapes_registered() -> None:
    assert is_shape_registered("sine_wave")
    assert is_shape_registered("SineWave")
    assert is_shape_registered("wave_stack")
    assert {"sine_wave", "wave_stack"} <= set(list_shapes())


def test_shape_decorator_supports_name_keyword() -> None:
    @shape(name="custom_test_shape")
    def custom_test_shape(**params: object) -> Geometry:
        return Geometry.from_lines([])

    assert is_shape_registered("custom_test_shape")
    unregister("custom_test_shape")
    assert not is_shape_registered("custom_test_shape")


def test_shape_decorator_supports_positional_name_and_bare() -> None:
    @shape("positional_named_shape")
    def positional_named_shape(**params: object) -> Geometry:
        return Geometry.from_lines([])

    @shape
    def bare_shape(**params: object) -> Geometry:
        return Geometry.from_lines([])

    assert get_shape("positional_named_shape") is positional_named_shape
    assert get_shape("bare_shape") is bare_shape
    unregister("positional_named_shape")
    unregister("bare_shape")


def test_shape_decorator_rejects_non_function_with_message() -> None:
    class NotFunc:  # noqa: N801 (テスト用の簡易クラス)
        pass

    deco = shape(name="bad")
    with pytest.raises(TypeError) as ei:
        deco(NotFunc)
    assert "got" in str(ei.value)


def test_duplicate_name_rejected() -> None:
    with pytest.raises(ValueError):

        @shape(name="sine_wave")
        def other(**params: object) -> Geometry:
            return Geometry.from_lines([])


def test_get_registry_returns_copy() -> None:
    snap = get_registry()
    assert isinstance(snap, dict)
    snap["bogus"] = object()
    assert not is_shape_registered("bogus")


def test_unknown_shape_raises_key_error() -> None:
    with pytest.raises(KeyError):
        get_shape("no_such_shape")


@pytest.mark.parametrize("alias", ["SineWave", "sine-wave", "SINE_WAVE", "sine_wave"])
def test_name_normalization_resolves_aliases(alias: str) -> None:
    assert get_shape(alias) is get_shape("sine_wave")


def test_camel_case_function_name_is_registered_as_snake_case() -> None:
    @shape
    def StackedRibbon(**params: object) -> Geometry:  # noqa: N802 (テスト用)
        return Geometry.from_lines([])

    try:
        assert "stacked_ribbon" in list_shapes()
        assert get_shape("StackedRibbon") is StackedRibbon
    finally:
        unregister("stacked_ribbon")


def test_reregistering_same_function_is_allowed() -> None:
    def ripple_once(**params: object) -> Geometry:
        return Geometry.from_lines([])

    shape("ripple_once")(ripple_once)
    shape("ripple-once")(ripple_once)
    assert list_shapes().count("ripple_once") == 1
    unregister("ripple_once")


def test_empty_and_non_str_names_raise() -> None:
    with pytest.raises(ValueError):
        shape("")(lambda: None)
    with pytest.raises(ValueError):
        shape(name="")(lambda: None)
    with pytest.raises(TypeError):
        get_shape(123)  # type: ignore[arg-type]


def test_unregister_missing_name_is_noop() -> None:
    unregister("never_registered_shape")
    assert not is_shape_registered("never_registered_shape")


def test_shape_params_merge_defaults_and_meta() -> None:
    params = shape_params("sine_wave")
    assert set(params) == {"phase", "amplitude_ratio", "frequency", "amplitude_modulation", "step"}
    assert params["frequency"]["default"] == 1.0
    assert (params["frequency"]["min"], params["frequency"]["max"]) == (1.0, 30.0)
    assert params["amplitude_modulation"]["choices"] == ["none", "center", "edges"]
    assert params["step"]["default"] is None


def test_shape_params_of_wave_stack_cover_every_meta_key() -> None:
    params = shape_params("wave_stack")
    assert params["count"]["default"] == 5
    assert params["count"]["type"] == "integer"
    # メタを持たない引数は既定値のみ
    assert params["amplitude_modulation"] == {"default": "none"}


def test_shape_params_rejects_meta_for_unknown_argument() -> None:
    @shape(name="meta_mismatch_shape")
    def meta_mismatch_shape(rect: object, *, frequency: float = 1.0) -> Geometry:
        return Geometry.from_lines([])

    meta_mismatch_shape.__param_meta__ = {"frequncy": {"type": "number", "min": 1.0}}
    try:
        with pytest.raises(ValueError, match="frequncy"):
            shape_params("meta_mismatch_shape")
    finally:
        unregister("meta_mismatch_shape")
