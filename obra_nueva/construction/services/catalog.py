# construction/services/catalog.py
"""Status catalog loading."""

from django.db.models import Q

from ..models import ServiceTypeStatus
from ..progress import StatusDefinition


def load_status_catalog(service_type_id) -> tuple:
    """
    Ordered status definitions that apply to a service type: the shared
    steps (no service type) plus the type's own, sorted by `orden`. A status
    listed more than once keeps only its first step.
    """
    scope = Q(service_type_id__isnull=True)
    if service_type_id is not None:
        scope |= Q(service_type_id=service_type_id)

    rows = (
        ServiceTypeStatus.objects
        .filter(scope)
        .select_related('status')
        .order_by('orden', 'id')
    )
    catalog = []
    seen = set()
    for row in rows:
        if row.status_id in seen:
            continue
        seen.add(row.status_id)
        catalog.append(StatusDefinition(
            id=row.status.id,
            name=row.status.name,
            is_final=row.status.is_final,
            is_incidence=row.status.is_incidence,
            service_type_id=row.service_type_id,
            order=row.orden,
        ))
    return tuple(catalog)
