# construction/progress.py
"""
Service progress model.

Maps a service's live status onto the ordered status catalog of its type and
derives which step the tracker highlights, how far the progress bar is filled
and the state of every step. Everything here is pure: no database, no I/O.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from .constants import (
    PROGRESS_COLORS,
    STATUS_ACTIVADO,
    STATUS_CANCELADO,
    STATUS_EN_REVISION,
    STATUS_SIN_GESTIONAR,
)


@dataclass(frozen=True)
class StatusDefinition:
    id: int
    name: str
    is_final: bool = False
    is_incidence: bool = False
    service_type_id: Optional[int] = None
    order: int = 0


# Filtered to one service type and sorted by `order` by whoever builds it
StatusCatalog = Sequence[StatusDefinition]


@dataclass(frozen=True)
class ServiceSnapshot:
    id: Optional[int]
    type_id: Optional[int]
    status_id: Optional[int]
    previous_status_id: Optional[int] = None
    comment: Optional[str] = None
    construction_id: Optional[int] = None

    @classmethod
    def from_model(cls, service):
        return cls(
            id=service.id,
            type_id=service.type_id,
            status_id=service.status_id,
            previous_status_id=service.previous_status_id,
            comment=service.comment,
            construction_id=service.construction_id,
        )


@dataclass(frozen=True)
class StepState:
    status_id: int
    is_active: bool
    is_passed: bool

    @property
    def state(self) -> str:
        if self.is_active:
            return 'active'
        if self.is_passed:
            return 'passed'
        return 'pending'


@dataclass(frozen=True)
class ProgressView:
    tracker_status_id: Optional[int]
    step_states: tuple
    fill_percent: float


@dataclass(frozen=True)
class Palette:
    show_bar: bool
    color: str


def _index_of(catalog: StatusCatalog, status_id) -> int:
    for i, definition in enumerate(catalog):
        if definition.id == status_id:
            return i
    return -1


def project(service: ServiceSnapshot, catalog: StatusCatalog, is_incidence: bool = False) -> ProgressView:
    """
    Project a service onto its status catalog.

    When the live status is not one of the catalog steps (an off-track
    incidence state, for instance), the previous status is used instead, as
    a full substitution. `is_incidence` only matters for `progress_palette`.
    """
    tracker_status_id = service.status_id
    idx = _index_of(catalog, tracker_status_id)

    # An empty catalog has nothing to fall back onto; the live id is kept
    if idx == -1 and catalog and service.previous_status_id is not None:
        tracker_status_id = service.previous_status_id
        idx = _index_of(catalog, tracker_status_id)

    if idx == -1 or len(catalog) <= 1:
        fill_percent = 0.0
    else:
        fill_percent = idx / (len(catalog) - 1) * 100

    step_states = tuple(
        StepState(
            status_id=definition.id,
            is_active=definition.id == tracker_status_id,
            is_passed=i < idx,
        )
        for i, definition in enumerate(catalog)
    )

    return ProgressView(
        tracker_status_id=tracker_status_id,
        step_states=step_states,
        fill_percent=fill_percent,
    )


def progress_palette(view: ProgressView, live_status_name: Optional[str], is_incidence: bool = False) -> Palette:
    """Pick bar visibility and color for a projected view."""
    no_active_step = not any(step.is_active for step in view.step_states)

    if live_status_name == STATUS_SIN_GESTIONAR:
        return Palette(show_bar=True, color=PROGRESS_COLORS['unmanaged'])
    if live_status_name in (STATUS_EN_REVISION, STATUS_CANCELADO) or no_active_step:
        return Palette(show_bar=False, color=PROGRESS_COLORS['default'])
    if live_status_name == STATUS_ACTIVADO:
        return Palette(show_bar=True, color=PROGRESS_COLORS['activated'])
    if is_incidence:
        return Palette(show_bar=True, color=PROGRESS_COLORS['incidence'])
    return Palette(show_bar=True, color=PROGRESS_COLORS['default'])
