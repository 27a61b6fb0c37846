# construction/views/slack.py
import logging

from ..clients import SlackNotifier
from ..exceptions import SlackError
from ..services import UploadNotice, notify_document_uploaded
from .base import ActionView, envelope, error_envelope

logger = logging.getLogger(__name__)


class SlackNotifyView(ActionView):
    """Post an upload alert to the team channel (plain-text retry on failure)."""

    def post(self, request, format=None):
        body = request.data if hasattr(request.data, 'get') else {}
        notice = UploadNotice.from_payload(body)

        try:
            used_fallback = notify_document_uploaded(SlackNotifier(self.config), notice)
        except SlackError as e:
            return error_envelope('Error al enviar a Slack', 500, details=e.details)

        return envelope(message='Notificación enviada a Slack', fallback=used_fallback)
