# construction/services/notifications.py
"""Slack notifications for uploaded documents."""

import logging
from dataclasses import dataclass
from typing import Optional

from django.utils import timezone

from ..exceptions import SlackError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadNotice:
    obra_name: str = ''
    document_name: str = ''
    user_name: str = ''
    user_email: str = ''
    categoria: str = ''
    archivo: str = ''
    download_url: str = ''
    text: Optional[str] = None

    @classmethod
    def from_payload(cls, data: dict):
        """Accept both field sets the front end has sent over time (obraName / obra, ...)."""
        return cls(
            obra_name=data.get('obraName') or data.get('obra') or '',
            document_name=data.get('documentName') or data.get('documento') or '',
            user_name=data.get('userName') or '',
            user_email=data.get('userEmail') or '',
            categoria=data.get('categoria') or '',
            archivo=data.get('archivo') or '',
            download_url=data.get('downloadUrl') or '',
            text=data.get('text') or None,
        )


def build_upload_message(notice: UploadNotice) -> dict:
    fields = [
        {"type": "mrkdwn", "text": f"*🏗️ Obra:*\n{notice.obra_name or 'No especificada'}"},
        {"type": "mrkdwn", "text": f"*📄 Documento:*\n{notice.document_name or 'No especificado'}"},
    ]
    if notice.user_name or notice.user_email:
        fields.append({"type": "mrkdwn", "text": f"*👤 Usuario:*\n{notice.user_name}\n{notice.user_email}".rstrip()})
    if notice.categoria:
        fields.append({"type": "mrkdwn", "text": f"*📂 Categoría:*\n{notice.categoria}"})
    if notice.archivo:
        fields.append({"type": "mrkdwn", "text": f"*📎 Archivo:*\n{notice.archivo}"})
    fields.append({"type": "mrkdwn", "text": f"*📅 Fecha:*\n{timezone.localtime().strftime('%d/%m/%Y %H:%M')}"})

    blocks = [
        {"type": "header", "text": {"type": "plain_text", "text": "📋 Nuevo documento subido"}},
        {"type": "section", "fields": fields},
    ]

    summary = notice.text or (
        f"✅ Documento *{notice.archivo or notice.document_name or 'archivo'}* "
        f"subido en la obra *{notice.obra_name or 'obra'}*"
    )
    blocks.append({"type": "section", "text": {"type": "mrkdwn", "text": summary}})

    if notice.download_url:
        blocks.append({
            "type": "section",
            "text": {"type": "mrkdwn", "text": f"*🔗 Enlace:* <{notice.download_url}|Ver documento>"},
        })

    return {"text": "📋 *Nuevo documento subido*", "blocks": blocks}


def build_simple_message(notice: UploadNotice) -> dict:
    """Plain-text fallback without blocks."""
    lines = [
        "📋 Nuevo documento subido",
        f"Obra: {notice.obra_name or 'No especificada'}",
        f"Documento: {notice.document_name or notice.archivo or 'No especificado'}",
    ]
    if notice.user_name:
        lines.append(f"Usuario: {notice.user_name}")
    if notice.download_url:
        lines.append(f"Enlace: {notice.download_url}")
    return {"text": "\n".join(lines)}


def notify_document_uploaded(notifier, notice: UploadNotice) -> bool:
    """
    Send the upload alert. When Slack rejects the formatted message, one
    more attempt is made with the plain-text version.

    Returns True when the fallback was needed. Raises SlackError when both fail.
    """
    try:
        notifier.post(build_upload_message(notice))
        logger.info(f"[Slack] ✅ Upload notification sent for '{notice.obra_name}'")
        return False
    except SlackError as e:
        logger.warning(f"[Slack] ⚠️ Formatted message rejected ({e.details}), retrying with plain text")

    notifier.post(build_simple_message(notice))
    logger.info(f"[Slack] ✅ Plain-text upload notification sent for '{notice.obra_name}'")
    return True
