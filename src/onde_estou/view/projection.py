# projection.py
from dataclasses import dataclass
from typing import Tuple

from onde_estou.model.models import Coordinate, Region


@dataclass(frozen=True)
class WebMercatorProjection:
    """EPSG:4326 <-> EPSG:3857"""
    def __post_init__(self):
        from pyproj import Transformer
        object.__setattr__(self, "_to_merc",
            Transformer.from_crs("EPSG:4326", "EPSG:3857", always_xy=True))
        object.__setattr__(self, "_to_geo",
            Transformer.from_crs("EPSG:3857", "EPSG:4326", always_xy=True))
    def lonlat_to_xy(self, lon, lat):
        return self._to_merc.transform(lon, lat)
    def xy_to_lonlat(self, x, y):
        return self._to_geo.transform(x, y)


@dataclass(frozen=True)
class MapProjector:
    """
    地図の描画座標（WebMercator [m]）と緯度経度の相互変換。
    タイル画像（EPSG:3857）と同じ座標で描くので、クリック位置もそのまま戻せる。
    """

    def __post_init__(self):
        object.__setattr__(self, "proj", WebMercatorProjection())

    def coordinate_to_xy(self, coord: Coordinate) -> Tuple[float, float]:
        return self.proj.lonlat_to_xy(coord.longitude, coord.latitude)

    def xy_to_coordinate(self, x: float, y: float) -> Coordinate:
        lon, lat = self.proj.xy_to_lonlat(x, y)
        # 地図外クリックで範囲を超えないよう丸める
        lat = min(90.0, max(-90.0, lat))
        lon = min(180.0, max(-180.0, lon))
        return Coordinate(latitude=lat, longitude=lon)

    # Region -> (Xmin, Ymin, Xmax, Ymax) in EPSG:3857
    def region_extent(self, region: Region) -> Tuple[float, float, float, float]:
        lat_min, lon_min, lat_max, lon_max = region.bounds()
        Xmin, Ymin = self.proj.lonlat_to_xy(lon_min, lat_min)
        Xmax, Ymax = self.proj.lonlat_to_xy(lon_max, lat_max)
        return Xmin, Ymin, Xmax, Ymax
