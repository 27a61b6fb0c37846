# construction/views/documents.py
import logging

from django.shortcuts import get_object_or_404
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser

from ..constants import UPLOAD_STEP_MESSAGES
from ..clients import SlackNotifier
from ..exceptions import UploadError
from ..models import Service
from ..serializers import DocumentUploadSerializer
from ..services import upload_document
from .base import ActionView, envelope, error_envelope

logger = logging.getLogger(__name__)


def _banner(kind, title, body):
    return {'type': kind, 'title': title, 'body': body}


class DocumentUploadView(ActionView):
    """
    Upload a document (file and/or text) for a service.

    store file → insert record → [advance status] → Slack → HubSpot sync.
    The response always carries a `notification` banner for the UI.
    """
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def post(self, request, service_id, format=None):
        service = get_object_or_404(Service.objects.select_related('construction'), id=service_id)

        ser = DocumentUploadSerializer(data=request.data)
        if not ser.is_valid():
            banner = _banner('error', 'Datos incompletos', 'Selecciona un archivo o escribe el contenido del documento')
            return error_envelope('Datos inválidos', 400, details=str(dict(ser.errors)), notification=banner)
        data = ser.validated_data

        try:
            result = upload_document(
                service,
                SlackNotifier(self.config),
                document_type_id=data['document_type_id'],
                upload=data.get('file'),
                document_status_id=data.get('document_status_id'),
                content_text=data.get('content_text'),
                uploaded_by={'name': data.get('user_name'), 'email': data.get('user_email')},
                is_incidence_resolution=data.get('is_incidence_resolution', False),
            )
        except UploadError as e:
            banner = _banner('error', 'Error al subir el documento', UPLOAD_STEP_MESSAGES.get(e.step, e.message))
            return error_envelope(e.message, 500, details=e.details, step=e.step, notification=banner)

        document = result.document
        body = 'El documento se ha subido correctamente'
        if result.transition and result.transition.transitioned:
            body += f". {result.transition.message}"

        payload = {
            'message': 'Documento subido correctamente',
            'document': {
                'id': document.id,
                'service_id': document.service_id,
                'document_type_id': document.document_type_id,
                'document_status_id': document.document_status_id,
                'link': document.link,
                'content_text': document.content_text,
            },
            'downloadUrl': result.download_url,
            'notification': _banner('success', 'Documento subido', body),
        }
        if result.transition is not None:
            payload['transition'] = {
                'transitioned': result.transition.transitioned,
                'new_status_id': result.transition.new_status_id,
                'message': result.transition.message,
            }
        return envelope(**payload)
