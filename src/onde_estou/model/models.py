from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


# --- 座標 -------------------------------------------------------------

@dataclass(frozen=True)
class Coordinate:
    """WGS84 の緯度経度 [deg]"""
    latitude: float
    longitude: float

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude out of range: {self.longitude}")


@dataclass(frozen=True)
class Region:
    """地図の表示範囲（中心 + 幅）"""
    center: Coordinate
    latitude_delta: float = 0.01
    longitude_delta: float = 0.01

    @classmethod
    def around(cls, center: Coordinate, delta: float = 0.01) -> "Region":
        return cls(center=center, latitude_delta=delta, longitude_delta=delta)

    def bounds(self) -> Tuple[float, float, float, float]:
        """(lat_min, lon_min, lat_max, lon_max)。極・日付変更線で丸める"""
        half_lat = self.latitude_delta * 0.5
        half_lon = self.longitude_delta * 0.5
        c = self.center
        return (
            max(-85.0, c.latitude - half_lat),
            max(-180.0, c.longitude - half_lon),
            min(85.0, c.latitude + half_lat),
            min(180.0, c.longitude + half_lon),
        )


# --- マーカー ---------------------------------------------------------

@dataclass(frozen=True)
class Marker:
    id: str
    coordinate: Coordinate
    title: str
    description: str = ""
    created_at: str = ""


# --- 位置取得の結果 ---------------------------------------------------

class LocationStatus(Enum):
    PENDING = "pending"
    LOCATED = "located"
    DENIED = "denied"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class LocationResult:
    """
    一回きりの位置取得の結果。
    PENDING か、解決済み（LOCATED + coordinate / DENIED / UNAVAILABLE + error）のどちらか。
    """
    status: LocationStatus = LocationStatus.PENDING
    coordinate: Optional[Coordinate] = None
    error: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.status is not LocationStatus.PENDING

    @property
    def located(self) -> bool:
        return self.status is LocationStatus.LOCATED


# --- UI 状態 -----------------------------------------------------------

class UIMode(Enum):
    IDLE = "idle"
    ADDING_MARKER = "adding_marker"
    VIEWING_LIST = "viewing_list"


@dataclass(frozen=True)
class Notice:
    """ユーザに一度だけ見せるアラート"""
    title: str
    message: str


__all__ = [
    "Coordinate",
    "Region",
    "Marker",
    "UIMode",
    "LocationStatus",
    "LocationResult",
    "Notice",
]
