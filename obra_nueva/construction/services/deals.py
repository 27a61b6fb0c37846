# construction/services/deals.py
"""Build HubSpot deal payloads from construction data."""

import logging

from ..constants import CONSTRUCTION_DEAL_FIELDS, SERVICE_TYPE_DEAL_FIELDS
from ..utils import parse_int, parse_positive_int

logger = logging.getLogger(__name__)


def _join_services(value) -> str:
    if isinstance(value, (list, tuple)):
        return ';'.join(str(v) for v in value)
    return value or ''


def build_service_id_properties(service_ids) -> dict:
    """
    Map {serviceTypeId: serviceId} onto the deal's per-type service id fields.

    Unknown or non-positive type ids, and non-positive service ids, are
    skipped and logged.
    """
    properties = {}
    if not service_ids:
        return properties

    for raw_type_id, raw_service_id in dict(service_ids).items():
        type_id = parse_int(raw_type_id)
        field = SERVICE_TYPE_DEAL_FIELDS.get(type_id) if type_id and type_id > 0 else None
        if not field:
            logger.warning(f"[HubSpot] ⏭️ No deal field for service type {raw_type_id!r}, skipping")
            continue

        service_id = parse_positive_int(raw_service_id)
        if service_id is None:
            logger.warning(f"[HubSpot] ⏭️ Invalid service id {raw_service_id!r} for type {type_id}, skipping")
            continue

        properties[field] = str(service_id)
    return properties


def build_deal_properties(construction_data: dict, config, service_ids=None) -> dict:
    properties = {
        'dealname': construction_data['name'],
        'dealstage': config.hubspot_deal_stage,
        'hubspot_owner_id': config.hubspot_owner_id,
        'enviar_presupuesto': True,
    }
    for source_key, deal_field, default in CONSTRUCTION_DEAL_FIELDS:
        properties[deal_field] = construction_data.get(source_key) or default

    properties['servicios_obra'] = _join_services(construction_data.get('servicios_obra'))
    properties.update(build_service_id_properties(service_ids))
    return properties
