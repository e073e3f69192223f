# view/__init__.py
"""
表示層。

- render: AppState -> ViewDescription（純関数）
- projection: 緯度経度 <-> WebMercator
- overlay: 背景地図タイル
- renderer: ViewDescription を matplotlib に描く
"""
from .render import render, ViewDescription

__all__ = ["render", "ViewDescription"]
