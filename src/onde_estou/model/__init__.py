# model/__init__.py
"""
データモデル層。

- models: Coordinate / Region / Marker / UIMode / Notice
- store: MarkerStore（追加・一覧・削除）
- state: AppState（コントローラが持つ画面状態）
"""
from .models import Coordinate, Region, Marker, UIMode, Notice
from .store import MarkerStore
from .state import AppState

__all__ = ["Coordinate", "Region", "Marker", "UIMode", "Notice", "MarkerStore", "AppState"]
