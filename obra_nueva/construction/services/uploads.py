# construction/services/uploads.py
"""
Document upload chain.

store file → insert `documents` row → (incidence resolution: advance status)
→ Slack alert → queue HubSpot sync.

The chain stops at the first failing step and raises UploadError; whatever
the earlier steps did (a stored file, an inserted row) stays in place.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.db import transaction

from ..constants import (
    UPLOAD_STEP_MESSAGES,
    UPLOAD_STEP_NOTIFY,
    UPLOAD_STEP_RECORD,
    UPLOAD_STEP_STORE,
)
from ..exceptions import SlackError, StatusTransitionError, UploadError
from ..models import Document, DocumentationType
from .notifications import UploadNotice, notify_document_uploaded
from .transitions import TransitionResult, advance_to_next_status

logger = logging.getLogger(__name__)


@dataclass
class UploadResult:
    document: Document
    download_url: Optional[str]
    transition: Optional[TransitionResult] = None
    used_fallback_notification: bool = False


def _store_file(document, upload) -> str:
    try:
        document.file.save(upload.name, upload, save=False)
    except Exception as e:
        logger.exception(f"[Upload] ❌ Storing '{upload.name}' for service {document.service_id} failed: {e}")
        raise UploadError(UPLOAD_STEP_STORE, UPLOAD_STEP_MESSAGES[UPLOAD_STEP_STORE], details=str(e)) from e

    url = document.file.url
    return url if url.startswith('http') else settings.BASE_URL.rstrip('/') + url


def _insert_record(document):
    try:
        with transaction.atomic():
            document.save()
    except Exception as e:
        logger.exception(f"[Upload] ❌ Inserting document row for service {document.service_id} failed: {e}")
        raise UploadError(UPLOAD_STEP_RECORD, UPLOAD_STEP_MESSAGES[UPLOAD_STEP_RECORD], details=str(e)) from e


def document_display_name(document_type_id) -> str:
    name = DocumentationType.objects.filter(id=document_type_id).values_list('name', flat=True).first()
    return name or f"Documento {document_type_id}"


def upload_document(
    service,
    notifier,
    document_type_id: int,
    upload=None,
    document_status_id: Optional[int] = None,
    content_text: Optional[str] = None,
    uploaded_by: Optional[dict] = None,
    is_incidence_resolution: bool = False,
) -> UploadResult:
    uploaded_by = uploaded_by or {}
    document = Document(
        service=service,
        document_type_id=document_type_id,
        document_status_id=document_status_id,
        content_text=content_text or None,
    )

    download_url = None
    if upload is not None:
        download_url = _store_file(document, upload)
        document.link = download_url
        logger.info(f"[Upload] 📎 Stored {document.file.name}")

    _insert_record(document)
    logger.info(f"[Upload] 💾 Document {document.id} recorded for service {service.id}")

    transition = None
    if is_incidence_resolution:
        try:
            transition = advance_to_next_status(service)
        except StatusTransitionError as e:
            logger.warning(f"[Upload] ⚠️ Could not advance service {service.id} after incidence resolution: {e}")

    document_name = document_display_name(document_type_id)
    notice = UploadNotice(
        obra_name=service.construction.name,
        document_name=document_name,
        user_name=uploaded_by.get('name') or '',
        user_email=uploaded_by.get('email') or '',
        archivo=upload.name if upload is not None else '',
        download_url=download_url or '',
    )
    try:
        used_fallback = notify_document_uploaded(notifier, notice)
    except SlackError as e:
        logger.error(f"[Upload] ❌ Slack notification for document {document.id} failed: {e.details}")
        raise UploadError(UPLOAD_STEP_NOTIFY, UPLOAD_STEP_MESSAGES[UPLOAD_STEP_NOTIFY], details=e.details) from e

    # Import here: tasks pulls in the Celery app
    from ..tasks import sync_document_to_hubspot_task
    try:
        sync_document_to_hubspot_task.delay(document.id)
    except Exception:
        logger.exception(f"[Upload] Failed to queue HubSpot sync for document {document.id}")

    return UploadResult(
        document=document,
        download_url=download_url,
        transition=transition,
        used_fallback_notification=used_fallback,
    )
