# construction/views/privileged.py
"""Back-office updates, gated by the internal bearer token."""

import logging

from ..models import Construction, Service
from ..serializers import (
    ConstructionSerializer,
    DistributorAssignmentSerializer,
    ServiceSerializer,
    ServiceTypeAssignmentSerializer,
)
from .base import ActionView, envelope, error_envelope

logger = logging.getLogger(__name__)


class ConstructionDistributorView(ActionView):
    """Assign (or clear) the distributor of a construction."""
    requires_token = True

    def post(self, request, format=None):
        ser = DistributorAssignmentSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        construction_id = ser.validated_data['construction_id']
        distributor_id = ser.validated_data['distributor_id']

        updated = Construction.objects.filter(id=construction_id).update(distributor_id=distributor_id)
        if not updated:
            return error_envelope('Obra no encontrada', 404, details=f"No construction with id {construction_id}")

        construction = Construction.objects.get(id=construction_id)
        logger.info(f"[Admin] 🏢 Construction {construction_id} → distributor {distributor_id}")
        return envelope(
            message='Distribuidora actualizada correctamente',
            data=ConstructionSerializer(construction).data,
        )


class ServiceTypeView(ActionView):
    """Change the type of a service."""
    requires_token = True

    def post(self, request, format=None):
        ser = ServiceTypeAssignmentSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        service_id = ser.validated_data['service_id']
        type_id = ser.validated_data['type_id']

        updated = Service.objects.filter(id=service_id).update(type_id=type_id)
        if not updated:
            return error_envelope('Servicio no encontrado', 404, details=f"No service with id {service_id}")

        service = Service.objects.get(id=service_id)
        logger.info(f"[Admin] 🔧 Service {service_id} → type {type_id}")
        return envelope(
            message='Tipo de servicio actualizado correctamente',
            data=ServiceSerializer(service).data,
        )
