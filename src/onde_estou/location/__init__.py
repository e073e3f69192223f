# location/__init__.py
"""
位置取得層: 端末の位置情報サービスとの境界。

- LocationProvider: 権限要求と現在地取得のプロトコル
- StaticLocationProvider: 設定ファイルから作る固定座標プロバイダ
- acquire_location: 一回きりの取得を LocationResult にまとめる
"""
from .provider import Accuracy, LocationProvider, PermissionStatus, StaticLocationProvider
from .acquisition import acquire_location

__all__ = ["Accuracy", "LocationProvider", "PermissionStatus", "StaticLocationProvider", "acquire_location"]
