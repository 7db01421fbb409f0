"""
どこで: `common` パッケージ。
何を: shapes/api 双方で使う軽量ユーティリティ（Rect・設定・補間・ログ設定など）。
なぜ: API 層から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .types import Rect

__all__ = [
    "Rect",
]
