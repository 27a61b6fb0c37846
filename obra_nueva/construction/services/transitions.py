# construction/services/transitions.py
"""Service status changes."""

import logging
from dataclasses import dataclass
from typing import Optional

from django.utils import timezone

from ..exceptions import StatusTransitionError
from .catalog import load_status_catalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransitionResult:
    transitioned: bool
    new_status_id: Optional[int]
    message: str
    new_status_name: Optional[str] = None


def set_service_status(service, status_id=None, comment=None) -> dict:
    """
    Apply a status and/or comment change to a service and save it.

    The replaced status is remembered in `previous_status` so the progress
    tracker can fall back onto it, but only when it is one of the catalog
    steps; leaving an off-track status keeps the last on-track one.
    Returns which fields actually changed.
    """
    status_changed = status_id is not None and service.status_id != status_id
    comment_changed = comment is not None and service.comment != comment

    update_fields = ['updated_at']
    if status_changed:
        catalog_ids = {definition.id for definition in load_status_catalog(service.type_id)}
        if service.status_id in catalog_ids:
            service.previous_status_id = service.status_id
        service.status_id = status_id
        update_fields += ['status', 'previous_status']
    if comment is not None:
        service.comment = comment
        update_fields.append('comment')

    service.updated_at = timezone.now()
    service.save(update_fields=update_fields)

    return {'status_changed': status_changed, 'comment_changed': comment_changed}


def advance_to_next_status(service) -> TransitionResult:
    """
    Move a service to the step that follows its current one in the catalog.

    A service sitting in an off-track status resumes from the step after
    its previous (on-track) status.
    """
    catalog = load_status_catalog(service.type_id)
    if not catalog:
        return TransitionResult(False, service.status_id, "No hay estados configurados para este tipo de servicio")

    ids = [definition.id for definition in catalog]
    anchor = service.status_id
    if anchor not in ids and service.previous_status_id in ids:
        anchor = service.previous_status_id
    if anchor not in ids:
        raise StatusTransitionError(f"No se encontró configuración para el estado actual: {service.status_id}")

    idx = ids.index(anchor)
    if idx + 1 >= len(catalog):
        logger.info(f"[Transition] ℹ️ Service {service.id} already at final status {anchor}")
        return TransitionResult(False, service.status_id, "El servicio ya está en el estado final")

    target = catalog[idx + 1]
    from_status_id = service.status_id
    set_service_status(service, status_id=target.id)

    logger.info(f"[Transition] ✅ Service {service.id}: {from_status_id} → {target.id} ({target.name})")
    return TransitionResult(
        True,
        target.id,
        f"Servicio transicionado al estado \"{target.name}\"",
        new_status_name=target.name,
    )
