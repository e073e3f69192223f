import asyncio

import pytest

from onde_estou import messages
from onde_estou.controller import InteractionController
from onde_estou.events import (
    MapTapped, TitleChanged, DescriptionChanged, SubmitPressed, CancelPressed,
    ListOpened, ListClosed, ListToggled, RemoveRequested, RemoveConfirmed,
    RemoveCancelled, RecenterPressed, NoticeDismissed,
)
from onde_estou.location.provider import PermissionStatus, StaticLocationProvider
from onde_estou.model.models import Coordinate, LocationStatus, Region, UIMode

HOME = Coordinate(10.0, 20.0)


def add_marker(controller, coord, title, description=""):
    controller.dispatch(MapTapped(coord))
    controller.dispatch(TitleChanged(title))
    controller.dispatch(DescriptionChanged(description))
    return controller.dispatch(SubmitPressed())


def test_tap_opens_form_with_pending_selection(controller):
    view = controller.dispatch(MapTapped(HOME))

    assert controller.mode is UIMode.ADDING_MARKER
    assert controller.state.pending_selection == HOME
    assert view.add_form is not None
    assert view.map.pending_pin == HOME


def test_submit_adds_marker_and_returns_to_idle(controller):
    view = add_marker(controller, HOME, "Home", "casa")

    assert controller.mode is UIMode.IDLE
    assert controller.state.pending_selection is None
    assert view.add_form is None
    (m,) = controller.store.list()
    assert (m.coordinate, m.title, m.description) == (HOME, "Home", "casa")
    assert [p.marker_id for p in view.map.pins] == [m.id]


def test_submit_with_blank_title_keeps_form_open(controller):
    controller.dispatch(MapTapped(HOME))
    controller.dispatch(TitleChanged("   "))
    view = controller.dispatch(SubmitPressed())

    assert len(controller.store) == 0
    assert controller.mode is UIMode.ADDING_MARKER
    assert controller.state.pending_selection == HOME
    assert view.add_form.error == messages.EMPTY_TITLE_MESSAGE


def test_editing_title_clears_inline_error(controller):
    controller.dispatch(MapTapped(HOME))
    controller.dispatch(SubmitPressed())
    view = controller.dispatch(TitleChanged("H"))
    assert view.add_form.error is None


def test_cancel_discards_selection_and_drafts(controller):
    controller.dispatch(MapTapped(HOME))
    controller.dispatch(TitleChanged("Home"))
    controller.dispatch(DescriptionChanged("x"))
    view = controller.dispatch(CancelPressed())

    assert len(controller.store) == 0
    assert controller.mode is UIMode.IDLE
    assert controller.state.pending_selection is None
    assert controller.state.draft_title == ""
    assert controller.state.draft_description == ""
    assert view.map.pending_pin is None


def test_next_form_starts_empty_after_cancel(controller):
    controller.dispatch(MapTapped(HOME))
    controller.dispatch(TitleChanged("stale"))
    controller.dispatch(CancelPressed())
    view = controller.dispatch(MapTapped(Coordinate(1.0, 2.0)))
    assert view.add_form.title == ""


def test_tap_ignored_outside_idle(controller):
    controller.dispatch(ListOpened())
    controller.dispatch(MapTapped(HOME))
    assert controller.mode is UIMode.VIEWING_LIST
    assert controller.state.pending_selection is None


def test_list_open_close_and_toggle(controller):
    assert controller.dispatch(ListOpened()).marker_list is not None
    assert controller.dispatch(ListClosed()).marker_list is None
    controller.dispatch(ListToggled())
    assert controller.mode is UIMode.VIEWING_LIST
    controller.dispatch(ListToggled())
    assert controller.mode is UIMode.IDLE


def test_list_cannot_open_while_adding(controller):
    controller.dispatch(MapTapped(HOME))
    controller.dispatch(ListOpened())
    assert controller.mode is UIMode.ADDING_MARKER


def test_remove_requires_confirmation(controller):
    add_marker(controller, HOME, "a")
    add_marker(controller, HOME, "b")
    a, b = controller.store.list()

    controller.dispatch(ListOpened())
    view = controller.dispatch(RemoveRequested(a.id))
    assert view.confirm is not None and view.confirm.marker_id == a.id
    assert len(controller.store) == 2

    view = controller.dispatch(RemoveConfirmed())
    assert controller.store.list() == (b,)
    assert view.confirm is None
    assert controller.mode is UIMode.VIEWING_LIST


def test_remove_cancelled_leaves_store_unchanged(controller):
    add_marker(controller, HOME, "a")
    (a,) = controller.store.list()
    controller.dispatch(ListOpened())
    controller.dispatch(RemoveRequested(a.id))
    view = controller.dispatch(RemoveCancelled())

    assert controller.store.list() == (a,)
    assert view.confirm is None


def test_remove_unknown_marker_is_ignored(controller):
    controller.dispatch(ListOpened())
    view = controller.dispatch(RemoveRequested("nope"))
    assert view.confirm is None
    controller.dispatch(RemoveConfirmed())
    assert len(controller.store) == 0


def test_closing_list_drops_pending_removal(controller):
    add_marker(controller, HOME, "a")
    (a,) = controller.store.list()
    controller.dispatch(ListOpened())
    controller.dispatch(RemoveRequested(a.id))
    controller.dispatch(ListClosed())
    assert controller.state.pending_removal is None
    assert len(controller.store) == 1


def test_unknown_event_type_raises(controller):
    with pytest.raises(TypeError):
        controller.dispatch(object())


def test_end_to_end_add_then_delete(controller):
    controller.dispatch(MapTapped(Coordinate(latitude=10.0, longitude=20.0)))
    controller.dispatch(TitleChanged("Home"))
    controller.dispatch(DescriptionChanged(""))
    controller.dispatch(SubmitPressed())

    (m,) = controller.store.list()
    assert m.coordinate == Coordinate(10.0, 20.0)
    assert m.title == "Home"
    assert m.description == ""
    assert m.created_at

    controller.dispatch(ListOpened())
    controller.dispatch(RemoveRequested(m.id))
    view = controller.dispatch(RemoveConfirmed())
    assert len(controller.store) == 0
    assert view.marker_list.empty_text == messages.LIST_EMPTY


def test_end_to_end_permission_denied(controller):
    provider = StaticLocationProvider(coordinate=HOME, permission=PermissionStatus.DENIED)
    view = asyncio.run(controller.mount(provider))

    assert len(controller.store) == 0
    assert controller.state.location.status is LocationStatus.DENIED
    assert not view.map.located
    assert view.map.region is None
    assert view.map.status_text == messages.UNLOCATED
    assert view.notice.title == messages.PERMISSION_DENIED_TITLE
    assert provider.position_requests == 0


def test_mount_located_sets_initial_region(controller):
    view = asyncio.run(controller.mount(StaticLocationProvider(coordinate=HOME)))
    assert view.map.located
    assert view.map.region == Region.around(HOME, 0.01)
    assert view.map.user_location == HOME
    assert view.notice is None


def test_mount_unavailable_shows_error_notice(controller):
    view = asyncio.run(controller.mount(StaticLocationProvider(coordinate=None)))
    assert controller.state.location.status is LocationStatus.UNAVAILABLE
    assert view.notice.title == messages.ERROR_TITLE
    assert not view.map.located


def test_mount_fetches_location_only_once(controller):
    provider = StaticLocationProvider(coordinate=HOME)
    asyncio.run(controller.mount(provider))
    asyncio.run(controller.mount(provider))
    assert provider.permission_requests == 1
    assert provider.position_requests == 1


def test_before_mount_map_is_pending(controller):
    view = controller.view()
    assert view.map.status_text == messages.LOCATING
    assert not view.map.located


def test_recenter_restores_region_around_user(store):
    controller = InteractionController(store, region_delta=0.05)
    asyncio.run(controller.mount(StaticLocationProvider(coordinate=HOME)))
    before = controller.view().map.region_revision

    view = controller.dispatch(RecenterPressed())
    assert view.map.region == Region.around(HOME, 0.05)
    assert view.map.region_revision == before + 1


def test_recenter_when_unlocated_queues_notice(controller):
    view = controller.dispatch(RecenterPressed())
    assert view.notice.title == messages.RECENTER_TITLE
    assert view.map.region is None


def test_notices_are_shown_oldest_first_and_dismissed(controller):
    controller.dispatch(RecenterPressed())
    asyncio.run(controller.mount(StaticLocationProvider(permission=PermissionStatus.DENIED)))

    assert controller.view().notice.title == messages.RECENTER_TITLE
    view = controller.dispatch(NoticeDismissed())
    assert view.notice.title == messages.PERMISSION_DENIED_TITLE
    view = controller.dispatch(NoticeDismissed())
    assert view.notice is None
    controller.dispatch(NoticeDismissed())
