# render.py
"""
AppState → ViewDescription の純関数。
描画系（matplotlib）はこの結果だけを見て描く。
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from onde_estou import messages
from onde_estou.model.models import Coordinate, LocationStatus, Marker, Notice, Region, UIMode
from onde_estou.model.state import AppState


@dataclass(frozen=True)
class Pin:
    marker_id: str
    coordinate: Coordinate
    title: str
    description: str
    created_at: str


@dataclass(frozen=True)
class MapPanel:
    located: bool
    status_text: Optional[str]        # 未測位のとき地図の代わりに出す文言
    region: Optional[Region]
    region_revision: int
    user_location: Optional[Coordinate]
    pins: Tuple[Pin, ...]
    pending_pin: Optional[Coordinate]


@dataclass(frozen=True)
class AddMarkerForm:
    heading: str
    title: str
    description: str
    title_placeholder: str
    description_placeholder: str
    error: Optional[str]
    submit_label: str = messages.ADD_BUTTON
    cancel_label: str = messages.CANCEL_BUTTON


@dataclass(frozen=True)
class ListItem:
    marker_id: str
    title: str
    description: str
    created_at: str


@dataclass(frozen=True)
class MarkerListPanel:
    heading: str
    items: Tuple[ListItem, ...]
    empty_text: Optional[str]
    empty_hint: Optional[str]


@dataclass(frozen=True)
class ConfirmDialog:
    title: str
    message: str
    marker_id: str
    confirm_label: str = messages.REMOVE_BUTTON
    cancel_label: str = messages.CANCEL_BUTTON


@dataclass(frozen=True)
class ViewDescription:
    header: str
    mode: UIMode
    map: MapPanel
    add_form: Optional[AddMarkerForm] = None
    marker_list: Optional[MarkerListPanel] = None
    confirm: Optional[ConfirmDialog] = None
    notice: Optional[Notice] = None


def _pin(m: Marker) -> Pin:
    return Pin(marker_id=m.id, coordinate=m.coordinate, title=m.title,
               description=m.description, created_at=m.created_at)


def _map_panel(state: AppState, markers: Tuple[Marker, ...]) -> MapPanel:
    loc = state.location
    if loc.status is LocationStatus.PENDING:
        status_text = messages.LOCATING
    elif loc.located:
        status_text = None
    else:
        status_text = messages.UNLOCATED
    return MapPanel(
        located=loc.located,
        status_text=status_text,
        region=state.region,
        region_revision=state.region_revision,
        user_location=loc.coordinate,
        pins=tuple(_pin(m) for m in markers),
        pending_pin=state.pending_selection,
    )


def render(state: AppState) -> ViewDescription:
    markers = state.store.list()

    add_form = None
    if state.mode is UIMode.ADDING_MARKER:
        add_form = AddMarkerForm(
            heading=messages.ADD_FORM_HEADING,
            title=state.draft_title,
            description=state.draft_description,
            title_placeholder=messages.TITLE_PLACEHOLDER,
            description_placeholder=messages.DESCRIPTION_PLACEHOLDER,
            error=state.form_error,
        )

    marker_list = None
    confirm = None
    if state.mode is UIMode.VIEWING_LIST:
        items = tuple(ListItem(m.id, m.title, m.description, m.created_at) for m in markers)
        marker_list = MarkerListPanel(
            heading=messages.LIST_HEADING,
            items=items,
            empty_text=None if items else messages.LIST_EMPTY,
            empty_hint=None if items else messages.LIST_EMPTY_HINT,
        )
        if state.pending_removal is not None:
            confirm = ConfirmDialog(
                title=messages.REMOVE_TITLE,
                message=messages.REMOVE_MESSAGE,
                marker_id=state.pending_removal,
            )

    return ViewDescription(
        header=messages.APP_TITLE,
        mode=state.mode,
        map=_map_panel(state, markers),
        add_form=add_form,
        marker_list=marker_list,
        confirm=confirm,
        notice=state.notices[0] if state.notices else None,
    )
