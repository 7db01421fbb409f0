"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float, env_str


@dataclass
class _Settings:
    # サンプリング（x 方向の刻み幅）
    SAMPLE_STEP: float = 1.0

    # カーネル
    USE_NUMBA: bool = True

    # ロギング
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `SWS_SAMPLE_STEP` は正の有限値のみ採用し、それ以外は 1.0。
    - bool は `env_bool`、文字列は `env_str` を使用。
    """
    _settings.SAMPLE_STEP = env_float("SWS_SAMPLE_STEP", 1.0, min_exclusive=0.0) or 1.0
    _settings.USE_NUMBA = env_bool("SWS_USE_NUMBA", True)
    _settings.LOG_LEVEL = env_str("SWS_LOG_LEVEL", "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
