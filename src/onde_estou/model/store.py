from __future__ import annotations
import logging
from datetime import datetime
from typing import Callable, Iterator, List, Optional, Tuple

from onde_estou.errors import ValidationError
from .models import Coordinate, Marker

logger = logging.getLogger(__name__)

# pt-BR の toLocaleString と同じ並び
TIMESTAMP_FORMAT = "%d/%m/%Y, %H:%M:%S"


class MarkerStore:
    """
    マーカーのインメモリ順序付きコレクション。
    挿入順 = 一覧の表示順。アプリの寿命と同じだけ生きる（永続化しない）。
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now,
                 timestamp_format: str = TIMESTAMP_FORMAT):
        self._clock = clock
        self._timestamp_format = timestamp_format
        self._markers: List[Marker] = []
        self._last_id = 0

    # --- 内部 ---------------------------------------------------------

    def _next_id(self, now: datetime) -> str:
        """作成時刻[ms]から ID を作る。同一ミリ秒なら +1 して重複させない"""
        candidate = int(now.timestamp() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

    # --- 公開API ------------------------------------------------------

    def add(self, coordinate: Coordinate, title: str, description: str = "") -> Marker:
        if not title or not title.strip():
            raise ValidationError("marker title must not be empty")

        now = self._clock()
        marker = Marker(
            id=self._next_id(now),
            coordinate=coordinate,
            title=title,
            description=description or "",
            created_at=now.strftime(self._timestamp_format),
        )
        self._markers.append(marker)
        logger.info("added marker id=%s title=%r at (%.6f, %.6f)",
                    marker.id, marker.title, coordinate.latitude, coordinate.longitude)
        return marker

    def remove(self, marker_id: str) -> bool:
        """該当IDを削除。無ければ何もしないで False"""
        for i, m in enumerate(self._markers):
            if m.id == marker_id:
                del self._markers[i]
                logger.info("removed marker id=%s", marker_id)
                return True
        logger.debug("remove: unknown marker id=%s", marker_id)
        return False

    def list(self) -> Tuple[Marker, ...]:
        return tuple(self._markers)

    def get(self, marker_id: str) -> Optional[Marker]:
        for m in self._markers:
            if m.id == marker_id:
                return m
        return None

    def __len__(self) -> int:
        return len(self._markers)

    def __iter__(self) -> Iterator[Marker]:
        return iter(self.list())

    def __contains__(self, marker_id: object) -> bool:
        return any(m.id == marker_id for m in self._markers)
