# construction/views/progress.py
"""Read-only progress endpoints for the service tracker."""

from django.shortcuts import get_object_or_404

from ..models import Service
from ..serializers import ServiceProgressSerializer, StatusDefinitionSerializer
from ..services import load_status_catalog
from .base import ActionView, envelope


class ServiceProgressView(ActionView):
    """
    GET /api/services/<id>/progress/

    `?incidence=1` forces the incidence palette; otherwise the live status's
    own flag decides.
    """

    def get(self, request, service_id, format=None):
        service = get_object_or_404(Service.objects.select_related('status'), id=service_id)
        catalog = load_status_catalog(service.type_id)

        is_incidence = None
        if request.query_params.get('incidence') in ('1', 'true', 'True'):
            is_incidence = True

        ser = ServiceProgressSerializer.from_service(service, catalog, is_incidence=is_incidence)
        return envelope(**ser.data)


class StatusCatalogView(ActionView):

    def get(self, request, type_id, format=None):
        catalog = load_status_catalog(type_id)
        return envelope(
            service_type_id=type_id,
            statuses=StatusDefinitionSerializer(catalog, many=True).data,
        )
