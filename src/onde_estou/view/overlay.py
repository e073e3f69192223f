# overlay.py
import logging
from dataclasses import dataclass, field
from typing import Dict, Tuple, Any

import numpy as np
import contextily as ctx

logger = logging.getLogger(__name__)

INITIAL_RES = 156543.03392804097  # m/px at z=0 (3857, 256px)


@dataclass
class TileOverlay:
    """背景地図タイル（contextily）。同じ範囲・ズームは再取得しない"""
    tiles: str = "OpenStreetMap.Mapnik"
    zoom: int | None = None
    target_px: int = 800
    max_px: int = 4096
    max_cached: int = 4
    _cache: Dict[Tuple, Tuple[Any, Any, int]] = field(default_factory=dict, repr=False)

    def _resolve(self):
        if self.tiles.startswith(("http://", "https://")):
            return self.tiles
        prov = ctx.providers
        for p in self.tiles.split("."):
            if p: prov = getattr(prov, p)
        return prov

    def auto_zoom(self, width_m: float, provider) -> int:
        """横幅 width_m を target_px 程度で表示できるズーム"""
        target_m_per_px = max(1e-9, width_m / max(1, self.target_px))
        zoom = int(round(np.log2(INITIAL_RES / target_m_per_px)))
        zmin = getattr(provider, "min_zoom", 0)
        zmax = getattr(provider, "max_zoom", 19)
        return int(np.clip(zoom, zmin, zmax))

    def cap_zoom(self, xmin, ymin, xmax, ymax, zoom) -> int:
        m_per_px = INITIAL_RES / (2 ** zoom)
        w_px = (xmax - xmin) / m_per_px
        while w_px > self.max_px and zoom > 0:
            zoom -= 1; m_per_px *= 2; w_px /= 2
        return zoom

    def fetch(self, Xmin, Ymin, Xmax, Ymax):
        provider = self._resolve()
        z = self.zoom
        if z is None:
            z = self.auto_zoom(Xmax - Xmin, provider)
            z = self.cap_zoom(Xmin, Ymin, Xmax, Ymax, z)
        key = (round(Xmin, 1), round(Ymin, 1), round(Xmax, 1), round(Ymax, 1), z)
        if key not in self._cache:
            logger.debug("fetching tiles %s zoom=%d", self.tiles, z)
            img, extent_wm = ctx.bounds2img(Xmin, Ymin, Xmax, Ymax, source=provider, zoom=z, ll=False)
            self._cache[key] = (img, extent_wm, z)
            while len(self._cache) > self.max_cached:
                self._cache.pop(next(iter(self._cache)))  # 古い順に捨てる
        return self._cache[key]
