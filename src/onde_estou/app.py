# app.py
"""
matplotlib 版の画面。
クリック・pick・テキストボックス・ボタンを InteractionController のイベントに変換し、
返ってきた ViewDescription で描き直す。
"""
import logging
from typing import NamedTuple, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.widgets import Button, TextBox

from onde_estou import messages
from onde_estou.controller import InteractionController
from onde_estou.events import (
    MapTapped, TitleChanged, DescriptionChanged, SubmitPressed, CancelPressed,
    ListClosed, ListToggled, RemoveRequested, RemoveConfirmed, RemoveCancelled,
    RecenterPressed, NoticeDismissed,
)
from onde_estou.view.projection import MapProjector
from onde_estou.view.render import ViewDescription
from onde_estou.view.renderer import PlotRenderer

logger = logging.getLogger(__name__)

Action = Optional[Tuple[str, object]]


class ButtonActions(NamedTuple):
    primary: Action
    secondary: Action


def button_actions(view: ViewDescription) -> ButtonActions:
    """いま一番手前にあるパネルに応じて下部ボタン2つの (ラベル, イベント) を決める"""
    if view.notice:
        return ButtonActions((messages.OK_BUTTON, NoticeDismissed()), None)
    if view.confirm:
        return ButtonActions((view.confirm.confirm_label, RemoveConfirmed()),
                             (view.confirm.cancel_label, RemoveCancelled()))
    if view.add_form:
        return ButtonActions((view.add_form.submit_label, SubmitPressed()),
                             (view.add_form.cancel_label, CancelPressed()))
    if view.marker_list:
        return ButtonActions((messages.CLOSE_BUTTON, ListClosed()), None)
    return ButtonActions(None, None)


def accepts_map_taps(view: ViewDescription) -> bool:
    """地図が見えていて、上に何も被っていないときだけタップを受け付ける"""
    return (view.map.located and view.notice is None and view.confirm is None
            and view.add_form is None and view.marker_list is None)


class MapApp:

    def __init__(self, controller: InteractionController, renderer: PlotRenderer,
                 projector: MapProjector):
        self.controller = controller
        self.renderer = renderer
        self.projector = projector

        self.fig = plt.figure(figsize=(7, 9))
        self.ax = self.fig.add_axes((0.05, 0.25, 0.9, 0.66))

        self.title_box = TextBox(self.fig.add_axes((0.3, 0.16, 0.65, 0.04)), messages.TITLE_PLACEHOLDER)
        self.desc_box = TextBox(self.fig.add_axes((0.3, 0.10, 0.65, 0.04)), messages.DESCRIPTION_PLACEHOLDER)
        self.btn_primary = Button(self.fig.add_axes((0.52, 0.03, 0.2, 0.05)), "")
        self.btn_secondary = Button(self.fig.add_axes((0.75, 0.03, 0.2, 0.05)), "")
        self.btn_list = Button(self.fig.add_axes((0.62, 0.94, 0.15, 0.04)), messages.LIST_BUTTON)
        self.btn_recenter = Button(self.fig.add_axes((0.79, 0.94, 0.18, 0.04)), messages.RECENTER_BUTTON)

        self.title_box.on_text_change(self._on_title)
        self.desc_box.on_text_change(self._on_description)
        self.btn_primary.on_clicked(lambda _: self._press(self.actions.primary))
        self.btn_secondary.on_clicked(lambda _: self._press(self.actions.secondary))
        self.btn_list.on_clicked(lambda _: self.dispatch(ListToggled()))
        self.btn_recenter.on_clicked(lambda _: self.dispatch(RecenterPressed()))
        self.fig.canvas.mpl_connect("button_press_event", self._on_click)
        self.fig.canvas.mpl_connect("pick_event", self._on_pick)

        self.actions = ButtonActions(None, None)
        self.view: ViewDescription = controller.view()
        self._syncing = False
        self._last_revision = None
        self.refresh(self.view)

    # --- 公開API ------------------------------------------------------

    def dispatch(self, event) -> ViewDescription:
        logger.debug("event %s", event)
        self.refresh(self.controller.dispatch(event))
        return self.view

    def refresh(self, view: ViewDescription) -> None:
        self.view = view
        keep = view.map.region_revision == self._last_revision
        self._last_revision = view.map.region_revision
        self.renderer.draw(self.ax, view, keep_limits=keep)

        form = view.add_form
        self._syncing = True
        try:
            for box, value in ((self.title_box, form.title if form else ""),
                               (self.desc_box, form.description if form else "")):
                if box.text != value:
                    box.set_val(value)
                box.ax.set_visible(form is not None)
        finally:
            self._syncing = False

        self.actions = button_actions(view)
        for btn, action in ((self.btn_primary, self.actions.primary),
                            (self.btn_secondary, self.actions.secondary)):
            btn.label.set_text(action[0] if action else "")
            btn.ax.set_visible(action is not None)

        self.fig.canvas.draw_idle()

    def show(self) -> None:
        plt.show()

    def save(self, path: str) -> None:
        self.fig.savefig(path, dpi=120)

    # --- matplotlib コールバック ---------------------------------------

    def _press(self, action: Action) -> None:
        if action is not None:
            self.dispatch(action[1])

    def _on_title(self, text: str) -> None:
        if not self._syncing:
            self.dispatch(TitleChanged(text))

    def _on_description(self, text: str) -> None:
        if not self._syncing:
            self.dispatch(DescriptionChanged(text))

    def _on_click(self, event) -> None:
        if event.inaxes is not self.ax or event.button != 1 or event.xdata is None:
            return
        toolbar = getattr(self.fig.canvas, "toolbar", None)
        if toolbar is not None and toolbar.mode:
            return  # パン/ズーム中
        if not accepts_map_taps(self.view):
            return
        self.dispatch(MapTapped(self.projector.xy_to_coordinate(event.xdata, event.ydata)))

    def _on_pick(self, event) -> None:
        marker_id = event.artist.get_gid()
        if marker_id and self.view.marker_list and self.view.confirm is None:
            self.dispatch(RemoveRequested(marker_id))
