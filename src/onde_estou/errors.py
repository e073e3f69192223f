# errors.py
"""
例外の階層。

- ValidationError: フォーム入力の不正（タイトル空など）。フォームは開いたまま
- LocationError: 位置取得の失敗。通知を出して地図は未測位のまま続行
- ConfigError: 設定ファイルの不正。CLI起動時のみ致命的
"""


class OndeEstouError(Exception):
    """このパッケージが送出する例外の基底クラス"""


class ValidationError(OndeEstouError):
    pass


class LocationError(OndeEstouError):
    pass


class PermissionDenied(LocationError):
    """位置情報の権限が拒否された"""


class LocationUnavailable(LocationError):
    """現在地を取得できなかった"""


class ConfigError(OndeEstouError):
    pass


__all__ = [
    "OndeEstouError",
    "ValidationError",
    "LocationError",
    "PermissionDenied",
    "LocationUnavailable",
    "ConfigError",
]
