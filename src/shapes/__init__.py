"""
どこで: `shapes` パッケージ（prefab 関数登録）。
何を: ビルトイン prefab（目盛り・針）を import 副作用で登録し、名前から解決できるようにする。
なぜ: 時計コンポーネントが具体的な形状を知らずに、設定ファイルの名前だけで生成できるようにするため。
"""

# 関数版 shape 定義を import して登録（副作用）
from . import hands as _register_hands  # noqa: F401
from . import ticks as _register_ticks  # noqa: F401
from .registry import build_shape, get_shape, is_shape_registered, list_shapes, shape  # re-export

__all__ = [
    "shape",
    "get_shape",
    "build_shape",
    "list_shapes",
    "is_shape_registered",
]
