from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from .models import Coordinate, LocationResult, Notice, Region, UIMode
from .store import MarkerStore


@dataclass
class AppState:
    """
    画面ひとつ分の状態。InteractionController だけが書き換え、
    render() はこれを読むだけ。
    """
    store: MarkerStore = field(default_factory=MarkerStore)
    mode: UIMode = UIMode.IDLE
    pending_selection: Optional[Coordinate] = None
    draft_title: str = ""
    draft_description: str = ""
    form_error: Optional[str] = None
    pending_removal: Optional[str] = None
    location: LocationResult = field(default_factory=LocationResult)
    region: Optional[Region] = None
    region_revision: int = 0          # 表示範囲を明示的に設定し直した回数
    notices: List[Notice] = field(default_factory=list)

    def clear_form(self) -> None:
        self.pending_selection = None
        self.draft_title = ""
        self.draft_description = ""
        self.form_error = None

    def set_region(self, region: Region) -> None:
        """表示範囲を設定し直す。同じ範囲でも revision は進む（再センタリング）"""
        self.region = region
        self.region_revision += 1
