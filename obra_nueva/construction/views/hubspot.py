# construction/views/hubspot.py
"""HubSpot endpoints: deal creation and updates, and service updates coming from HubSpot workflows."""

import logging

from rest_framework import serializers

from ..clients import HubSpotClient
from ..models import Construction, Service
from ..serializers import DealCreateSerializer, DealFieldUpdateSerializer
from ..services import build_deal_properties, set_service_status
from ..utils import parse_positive_int
from .base import ActionView, envelope, error_envelope

logger = logging.getLogger(__name__)


class HubSpotDealCreateView(ActionView):
    """Create a HubSpot deal for a new construction."""

    def post(self, request, format=None):
        ser = DealCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        properties = build_deal_properties(data['constructionData'], self.config, data.get('serviceIds'))
        logger.info(f"[HubSpot] 🏗️ Creating deal '{properties['dealname']}'")

        deal = HubSpotClient(self.config).create_deal(properties)
        deal_id = deal.get('id')

        construction_id = data.get('constructionId')
        if construction_id and deal_id:
            updated = Construction.objects.filter(id=construction_id).update(hubspot_deal_id=str(deal_id))
            if not updated:
                logger.warning(f"[HubSpot] ⚠️ Construction {construction_id} not found, deal {deal_id} not linked")

        logger.info(f"[HubSpot] ✅ Deal {deal_id} created")
        return envelope(dealId=deal_id, message='Deal creado exitosamente')


class HubSpotDealUpdateView(ActionView):
    """Set a single property on an existing deal."""

    def post(self, request, format=None):
        ser = DealFieldUpdateSerializer(data=request.data)
        if not ser.is_valid():
            return error_envelope(
                'Faltan parámetros: dealId, propertyName, propertyValue',
                400,
                details=', '.join(sorted(ser.errors)),
            )
        data = ser.validated_data

        HubSpotClient(self.config).update_deal(data['dealId'], {data['propertyName']: data['propertyValue']})

        logger.info(f"[HubSpot] ✅ Deal {data['dealId']}.{data['propertyName']} updated")
        return envelope(dealId=data['dealId'], message='Deal actualizado exitosamente')


class HubSpotServiceUpdateView(ActionView):
    """
    Called from HubSpot workflows to update a service's status and/or comment.

    Body: {serviceId | service_id, statusId? | status_id?, comment?}
    """

    def post(self, request, format=None):
        body = request.data if hasattr(request.data, 'get') else {}

        raw_service_id = body.get('serviceId', body.get('service_id'))
        if raw_service_id in (None, ''):
            raise serializers.ValidationError({'service_id': ['service_id is required']})
        service_id = parse_positive_int(raw_service_id)
        if service_id is None:
            raise serializers.ValidationError({'service_id': ['service_id must be a valid positive number']})

        raw_status_id = body.get('statusId', body.get('status_id'))
        status_id = None
        if raw_status_id not in (None, ''):
            status_id = parse_positive_int(raw_status_id)
            if status_id is None:
                raise serializers.ValidationError({'status_id': ['status_id must be a valid positive number']})

        comment = body.get('comment')
        if comment is not None:
            comment = str(comment)

        service = Service.objects.filter(id=service_id).first()
        if service is None:
            return error_envelope('Service not found', 404, details=f"No service with id {service_id}")

        changes = set_service_status(service, status_id=status_id, comment=comment)
        logger.info(f"[HubSpot] 🔄 Service {service_id} updated from HubSpot: {changes}")

        return envelope(
            message='Service updated successfully',
            service={
                'id': service.id,
                'status_id': service.status_id,
                'comment': service.comment,
                'construction_id': service.construction_id,
            },
            changes=changes,
        )
