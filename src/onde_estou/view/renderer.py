# renderer.py
from typing import List, Optional

import matplotlib.pyplot as plt
from matplotlib.text import Text

from .overlay import TileOverlay
from .projection import MapProjector
from .render import ViewDescription, MapPanel, AddMarkerForm, MarkerListPanel, ConfirmDialog
from onde_estou import messages
from onde_estou.model.models import Notice

PANEL_BOX = dict(boxstyle="round,pad=0.6", fc="white", ec="#e9ecef", alpha=0.95)


class PlotRenderer:
    """ViewDescription を matplotlib の Axes に描く。状態は持たない"""

    def __init__(self, projector: MapProjector, overlay: Optional[TileOverlay]):
        self.p = projector
        self.ov = overlay

    def draw(self, ax: plt.Axes, view: ViewDescription, keep_limits: bool = False) -> List[Text]:
        """描画して、一覧の削除ボタン（pick 可能な Text）を返す"""
        limits = (ax.get_xlim(), ax.get_ylim()) if keep_limits else None
        ax.clear()
        ax.set_title(view.header, fontsize=16, fontweight="bold", color="#2c3e50", loc="left")

        self._draw_map(ax, view.map)
        if limits and view.map.located:
            ax.set_xlim(*limits[0]); ax.set_ylim(*limits[1])

        pickers: List[Text] = []
        if view.marker_list:
            pickers = self._draw_list(ax, view.marker_list)
        if view.add_form:
            self._draw_form(ax, view.add_form)
        if view.confirm:
            self._draw_confirm(ax, view.confirm)
        if view.notice:
            self._draw_notice(ax, view.notice)
        return pickers

    # --- 地図 ---

    def _draw_map(self, ax: plt.Axes, m: MapPanel) -> None:
        if not m.located or m.region is None:
            ax.set_axis_off()
            ax.text(0.5, 0.5, m.status_text or "", transform=ax.transAxes,
                    ha="center", va="center", fontsize=14, color="#007AFF")
            return

        Xmin, Ymin, Xmax, Ymax = self.p.region_extent(m.region)

        # 背景地図
        if self.ov:
            img, extent, _ = self.ov.fetch(Xmin, Ymin, Xmax, Ymax)
            ax.imshow(img, extent=extent, interpolation="bilinear", zorder=0)

        # 現在地
        if m.user_location:
            ux, uy = self.p.coordinate_to_xy(m.user_location)
            ax.plot(ux, uy, marker='o', markersize=9, mec='white', mfc='#007AFF', zorder=5)

        # マーカー
        for pin in m.pins:
            x, y = self.p.coordinate_to_xy(pin.coordinate)
            ax.plot(x, y, marker='o', markersize=8, mec='black', mfc='#ff4444', zorder=6)
            ax.annotate(pin.title, (x, y),
                        xytext=(5, 8), textcoords='offset points',
                        fontsize=10,
                        bbox=dict(boxstyle="round,pad=0.25",
                                  fc="white", ec="gray", alpha=0.85),
                        zorder=7)

        # 追加待ちの位置
        if m.pending_pin:
            x, y = self.p.coordinate_to_xy(m.pending_pin)
            ax.plot(x, y, marker='o', markersize=8, mec='black', mfc='yellow', zorder=6)

        ax.set_xlim(Xmin, Xmax)
        ax.set_ylim(Ymin, Ymax)
        ax.set_aspect("equal", adjustable="datalim")
        ax.set_xticks([]); ax.set_yticks([])

    # --- パネル ---

    def _draw_form(self, ax: plt.Axes, form: AddMarkerForm) -> None:
        lines = [
            form.heading,
            "",
            form.title or form.title_placeholder,
            form.description or form.description_placeholder,
        ]
        if form.error:
            lines += ["", form.error]
        ax.text(0.5, 0.5, "\n".join(lines), transform=ax.transAxes,
                ha="center", va="center", fontsize=11, bbox=PANEL_BOX, zorder=20)

    def _draw_list(self, ax: plt.Axes, panel: MarkerListPanel) -> List[Text]:
        ax.text(0.05, 0.95, panel.heading, transform=ax.transAxes,
                ha="left", va="top", fontsize=13, fontweight="bold", bbox=PANEL_BOX, zorder=20)
        if not panel.items:
            ax.text(0.5, 0.6, f"{panel.empty_text}\n{panel.empty_hint}", transform=ax.transAxes,
                    ha="center", va="center", fontsize=11, color="#666", bbox=PANEL_BOX, zorder=20)
            return []

        pickers: List[Text] = []
        step = min(0.12, 0.8 / len(panel.items))
        for i, item in enumerate(panel.items):
            y = 0.85 - i * step
            label = item.title if not item.description else f"{item.title} - {item.description}"
            ax.text(0.05, y, f"{label}\n{item.created_at}", transform=ax.transAxes,
                    ha="left", va="top", fontsize=10, bbox=PANEL_BOX, zorder=20)
            trash = ax.text(0.95, y, messages.REMOVE_BUTTON, transform=ax.transAxes,
                            ha="right", va="top", fontsize=12, color="#ff4444",
                            picker=True, gid=item.marker_id, zorder=21)
            pickers.append(trash)
        return pickers

    def _draw_confirm(self, ax: plt.Axes, dialog: ConfirmDialog) -> None:
        ax.text(0.5, 0.5, f"{dialog.title}\n\n{dialog.message}", transform=ax.transAxes,
                ha="center", va="center", fontsize=11, bbox=PANEL_BOX, zorder=30)

    def _draw_notice(self, ax: plt.Axes, notice: Notice) -> None:
        ax.text(0.5, 0.5, f"{notice.title}\n\n{notice.message}", transform=ax.transAxes,
                ha="center", va="center", fontsize=11, bbox=PANEL_BOX, zorder=40)
