"""
どこで: `shapes.registry`（shape 関数の登録表）。
何を: `@shape` で波形ジェネレータを名前付き登録し、取得/一覧/解除と
      スライダ用パラメータ記述（シグネチャ既定値 + `__param_meta__`）の解決を提供。
なぜ: `api.G` からの動的解決と、デモ UI が参照するパラメータ範囲を一箇所で管理するため。

名前の正規化:
- `"SineWave"` / `"sine-wave"` / `"sine_wave"` はすべて `"sine_wave"` として扱う。
- 空文字は ValueError、str 以外は TypeError。
"""

from __future__ import annotations

import inspect
import re
from typing import Any, Callable, Mapping

ShapeFn = Callable[..., Any]

_shapes: dict[str, ShapeFn] = {}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def _normalize_name(name: str) -> str:
    if not isinstance(name, str):
        raise TypeError(f"shape 名は str である必要があります: got {name!r}")
    if not name:
        raise ValueError("shape 名は空であってはなりません")
    name = name.replace("-", "_")
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def _register(fn: Any, name: str | None) -> ShapeFn:
    if not inspect.isfunction(fn):
        raise TypeError(f"@shape は関数のみ登録可能です: got {fn!r}")
    key = _normalize_name(fn.__name__ if name is None else name)
    current = _shapes.get(key)
    if current is not None and current is not fn:
        raise ValueError(f"shape '{key}' は既に登録されています")
    _shapes[key] = fn
    return fn


def shape(arg: Any | None = None, /, name: str | None = None):
    """波形ジェネレータ関数を登録するデコレータ。

    - `@shape` / `@shape()`                        → 関数名から自動推論。
    - `@shape("custom")` / `@shape(name="custom")` → 明示名で登録。

    同一関数の再登録は許容、別関数で同名は ValueError、関数以外は TypeError。
    """
    if inspect.isfunction(arg) and name is None:
        return _register(arg, None)
    if isinstance(arg, str) and name is None:
        return lambda fn: _register(fn, arg)
    if arg is not None:
        # 関数でも名前でもない位置引数（クラス等の直付け）
        return _register(arg, name)
    return lambda fn: _register(fn, name)


def get_shape(name: str) -> ShapeFn:
    """登録済み shape 関数を返す。未登録は KeyError。"""
    key = _normalize_name(name)
    try:
        return _shapes[key]
    except KeyError:
        raise KeyError(f"shape '{name}' は登録されていません") from None


def list_shapes() -> list[str]:
    return sorted(_shapes)


def is_shape_registered(name: str) -> bool:
    return _normalize_name(name) in _shapes


def unregister(name: str) -> None:
    """登録を解除する（未登録なら何もしない）。"""
    _shapes.pop(_normalize_name(name), None)


def get_registry() -> Mapping[str, ShapeFn]:
    """登録表のコピーを返す。"""
    return dict(_shapes)


def shape_params(name: str) -> dict[str, dict[str, Any]]:
    """shape のキーワード引数ごとに `{"default": ..., **__param_meta__[p]}` を返す。

    先頭の位置引数（矩形）と `**params` は対象外。`__param_meta__` は
    関数定義後に付与されるため、登録時ではなくここで照合する。

    Raises
    ------
    KeyError
        未登録の shape。
    ValueError
        `__param_meta__` がシグネチャに存在しない引数名を含む場合。
    """
    fn = get_shape(name)
    sig = inspect.signature(fn)
    params: dict[str, dict[str, Any]] = {}
    for p in sig.parameters.values():
        if p.kind is inspect.Parameter.KEYWORD_ONLY:
            default = None if p.default is inspect.Parameter.empty else p.default
            params[p.name] = {"default": default}

    meta = getattr(fn, "__param_meta__", None) or {}
    unknown = sorted(set(meta) - set(params))
    if unknown:
        raise ValueError(f"shape '{name}' の __param_meta__ に未知の引数があります: {unknown}")
    for pname, entry in meta.items():
        params[pname].update(entry)
    return params


__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "unregister",
    "get_registry",
    "shape_params",
]
