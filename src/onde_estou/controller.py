# controller.py
"""
InteractionController: 画面のジェスチャを MarkerStore の更新と一時的な UI 状態に変換する。

状態遷移（UIMode）:
  IDLE          --MapTapped(P)-->        ADDING_MARKER   (P を pending_selection に保持)
  ADDING_MARKER --SubmitPressed-->       IDLE            (store.add、タイトル空ならフォームに留まる)
  ADDING_MARKER --CancelPressed-->       IDLE            (store は変更しない)
  IDLE          --ListOpened-->          VIEWING_LIST
  VIEWING_LIST  --ListClosed-->          IDLE
  VIEWING_LIST  --RemoveRequested(X)-->  VIEWING_LIST    (確認待ち)
  VIEWING_LIST  --RemoveConfirmed-->     VIEWING_LIST    (store.remove(X))
現在のモードで意味を持たないイベントは無視する。
"""
import logging
from typing import Optional

from onde_estou import messages
from onde_estou.errors import ValidationError
from onde_estou.events import (
    MapTapped, TitleChanged, DescriptionChanged, SubmitPressed, CancelPressed,
    ListOpened, ListClosed, ListToggled, RemoveRequested, RemoveConfirmed,
    RemoveCancelled, RecenterPressed, NoticeDismissed, LocationResolved,
)
from onde_estou.location.acquisition import acquire_location
from onde_estou.location.provider import LocationProvider
from onde_estou.model.models import LocationStatus, Notice, Region, UIMode
from onde_estou.model.state import AppState
from onde_estou.model.store import MarkerStore
from onde_estou.view.render import ViewDescription, render

logger = logging.getLogger(__name__)


class InteractionController:

    def __init__(self, store: Optional[MarkerStore] = None, region_delta: float = 0.01):
        self.state = AppState(store=store if store is not None else MarkerStore())
        self.region_delta = region_delta
        self._mounted = False
        self._handlers = {
            MapTapped: self._on_map_tapped,
            TitleChanged: self._on_title_changed,
            DescriptionChanged: self._on_description_changed,
            SubmitPressed: self._on_submit,
            CancelPressed: self._on_cancel,
            ListOpened: self._on_list_opened,
            ListClosed: self._on_list_closed,
            ListToggled: self._on_list_toggled,
            RemoveRequested: self._on_remove_requested,
            RemoveConfirmed: self._on_remove_confirmed,
            RemoveCancelled: self._on_remove_cancelled,
            RecenterPressed: self._on_recenter,
            NoticeDismissed: self._on_notice_dismissed,
            LocationResolved: self._on_location_resolved,
        }

    @property
    def store(self) -> MarkerStore:
        return self.state.store

    @property
    def mode(self) -> UIMode:
        return self.state.mode

    # --- 公開API ------------------------------------------------------

    async def mount(self, provider: LocationProvider) -> ViewDescription:
        """起動時に一度だけ現在地を取得する"""
        if self._mounted:
            logger.warning("mount() called twice; location is fetched only once")
            return self.view()
        self._mounted = True
        result = await acquire_location(provider)
        return self.dispatch(LocationResolved(result))

    def dispatch(self, event) -> ViewDescription:
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"unsupported event: {event!r}")
        handler(event)
        return self.view()

    def view(self) -> ViewDescription:
        return render(self.state)

    # --- 内部 ---------------------------------------------------------

    def _ignore(self, event) -> None:
        logger.debug("ignored %s in mode %s", type(event).__name__, self.state.mode.value)

    def _notify(self, title: str, message: str) -> None:
        self.state.notices.append(Notice(title=title, message=message))

    # --- 追加フォーム ---

    def _on_map_tapped(self, event: MapTapped) -> None:
        s = self.state
        if s.mode is not UIMode.IDLE:
            return self._ignore(event)
        s.clear_form()
        s.pending_selection = event.coordinate
        s.mode = UIMode.ADDING_MARKER

    def _on_title_changed(self, event: TitleChanged) -> None:
        s = self.state
        if s.mode is not UIMode.ADDING_MARKER:
            return self._ignore(event)
        s.draft_title = event.text
        s.form_error = None

    def _on_description_changed(self, event: DescriptionChanged) -> None:
        s = self.state
        if s.mode is not UIMode.ADDING_MARKER:
            return self._ignore(event)
        s.draft_description = event.text

    def _on_submit(self, event: SubmitPressed) -> None:
        s = self.state
        if s.mode is not UIMode.ADDING_MARKER or s.pending_selection is None:
            return self._ignore(event)
        try:
            s.store.add(s.pending_selection, s.draft_title, s.draft_description)
        except ValidationError as e:
            logger.info("rejected marker: %s", e)
            s.form_error = messages.EMPTY_TITLE_MESSAGE
            return
        s.clear_form()
        s.mode = UIMode.IDLE

    def _on_cancel(self, event: CancelPressed) -> None:
        s = self.state
        if s.mode is not UIMode.ADDING_MARKER:
            return self._ignore(event)
        s.clear_form()
        s.mode = UIMode.IDLE

    # --- 一覧 ---

    def _on_list_opened(self, event: ListOpened) -> None:
        if self.state.mode is not UIMode.IDLE:
            return self._ignore(event)
        self.state.mode = UIMode.VIEWING_LIST

    def _on_list_closed(self, event: ListClosed) -> None:
        if self.state.mode is not UIMode.VIEWING_LIST:
            return self._ignore(event)
        self.state.pending_removal = None
        self.state.mode = UIMode.IDLE

    def _on_list_toggled(self, event: ListToggled) -> None:
        if self.state.mode is UIMode.VIEWING_LIST:
            self._on_list_closed(ListClosed())
        else:
            self._on_list_opened(ListOpened())

    def _on_remove_requested(self, event: RemoveRequested) -> None:
        s = self.state
        if s.mode is not UIMode.VIEWING_LIST or event.marker_id not in s.store:
            return self._ignore(event)
        s.pending_removal = event.marker_id

    def _on_remove_confirmed(self, event: RemoveConfirmed) -> None:
        s = self.state
        if s.mode is not UIMode.VIEWING_LIST or s.pending_removal is None:
            return self._ignore(event)
        s.store.remove(s.pending_removal)
        s.pending_removal = None

    def _on_remove_cancelled(self, event: RemoveCancelled) -> None:
        if self.state.pending_removal is None:
            return self._ignore(event)
        self.state.pending_removal = None

    # --- 地図・通知 ---

    def _on_recenter(self, event: RecenterPressed) -> None:
        s = self.state
        if not s.location.located:
            self._notify(messages.RECENTER_TITLE, messages.RECENTER_UNAVAILABLE_MESSAGE)
            return
        s.set_region(Region.around(s.location.coordinate, self.region_delta))

    def _on_notice_dismissed(self, event: NoticeDismissed) -> None:
        if not self.state.notices:
            return self._ignore(event)
        self.state.notices.pop(0)

    def _on_location_resolved(self, event: LocationResolved) -> None:
        s = self.state
        result = event.result
        if not result.resolved:
            return self._ignore(event)
        s.location = result
        if result.status is LocationStatus.LOCATED:
            s.set_region(Region.around(result.coordinate, self.region_delta))
        elif result.status is LocationStatus.DENIED:
            self._notify(messages.PERMISSION_DENIED_TITLE, messages.PERMISSION_DENIED_MESSAGE)
        else:
            self._notify(messages.ERROR_TITLE, messages.LOCATION_ERROR_MESSAGE)
