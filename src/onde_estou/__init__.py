# onde_estou/__init__.py
"""
Onde Estou? - 地図をタップしてマーカーを置き、一覧・削除する単一画面アプリ。

- model: Marker / MarkerStore / AppState
- location: 端末の位置取得（権限要求 + 一回きりの測位）
- controller: ジェスチャ → 状態遷移
- view: AppState -> ViewDescription と matplotlib 描画
"""
from .model.models import Coordinate, Marker, Region, UIMode
from .model.store import MarkerStore
from .controller import InteractionController

__version__ = "0.1.0"

__all__ = ["Coordinate", "Marker", "Region", "UIMode", "MarkerStore", "InteractionController"]
