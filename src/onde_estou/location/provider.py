# location/provider.py
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Protocol, Dict, Any

from onde_estou.errors import LocationUnavailable
from onde_estou.model.models import Coordinate


class PermissionStatus(Enum):
    GRANTED = "granted"
    DENIED = "denied"


class Accuracy(IntEnum):
    LOWEST = 1
    LOW = 2
    BALANCED = 3
    HIGH = 4
    HIGHEST = 5
    BEST_FOR_NAVIGATION = 6


class LocationProvider(Protocol):
    """端末の位置情報サービス。どちらも一回きりの非同期呼び出し"""
    async def request_foreground_permission(self) -> PermissionStatus: ...
    async def get_current_position(self, accuracy: Accuracy = Accuracy.HIGH) -> Coordinate: ...


@dataclass
class StaticLocationProvider:
    """
    固定座標を返すプロバイダ（デスクトップ/テスト用）。
    - coordinate: None なら測位失敗（LocationUnavailable）
    - permission: 権限要求への応答
    """
    coordinate: Optional[Coordinate] = None
    permission: PermissionStatus = PermissionStatus.GRANTED
    permission_requests: int = 0
    position_requests: int = 0

    async def request_foreground_permission(self) -> PermissionStatus:
        self.permission_requests += 1
        return self.permission

    async def get_current_position(self, accuracy: Accuracy = Accuracy.HIGH) -> Coordinate:
        self.position_requests += 1
        if self.coordinate is None:
            raise LocationUnavailable("no position fix available")
        return self.coordinate

    @classmethod
    def from_config(cls, permission: str, location: Optional[Dict[str, Any]]) -> "StaticLocationProvider":
        coord = None
        if location:
            coord = Coordinate(latitude=float(location["lat"]), longitude=float(location["lon"]))
        return cls(coordinate=coord, permission=PermissionStatus(permission))
