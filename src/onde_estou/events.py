# events.py
"""画面から InteractionController へ渡すイベント"""
from dataclasses import dataclass

from onde_estou.model.models import Coordinate, LocationResult


@dataclass(frozen=True)
class MapTapped:
    coordinate: Coordinate


@dataclass(frozen=True)
class TitleChanged:
    text: str


@dataclass(frozen=True)
class DescriptionChanged:
    text: str


@dataclass(frozen=True)
class SubmitPressed:
    pass


@dataclass(frozen=True)
class CancelPressed:
    pass


@dataclass(frozen=True)
class ListOpened:
    pass


@dataclass(frozen=True)
class ListClosed:
    pass


@dataclass(frozen=True)
class ListToggled:
    pass


@dataclass(frozen=True)
class RemoveRequested:
    marker_id: str


@dataclass(frozen=True)
class RemoveConfirmed:
    pass


@dataclass(frozen=True)
class RemoveCancelled:
    pass


@dataclass(frozen=True)
class RecenterPressed:
    pass


@dataclass(frozen=True)
class NoticeDismissed:
    pass


@dataclass(frozen=True)
class LocationResolved:
    result: LocationResult
