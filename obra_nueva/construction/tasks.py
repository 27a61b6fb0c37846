# construction/tasks.py
import logging

from celery import shared_task

from .apps import get_integration_config
from .clients import HubSpotClient
from .services.document_sync import sync_document_to_hubspot

logger = logging.getLogger(__name__)


@shared_task
def sync_document_to_hubspot_task(document_id: int) -> bool:
    """Best effort: a failed sync is logged, never retried."""
    logger.info(f"[Celery] sync_document_to_hubspot_task: document_id={document_id}")
    try:
        return sync_document_to_hubspot(HubSpotClient(get_integration_config()), document_id)
    except Exception as e:
        logger.exception(f"[Celery] Exception syncing document {document_id} to HubSpot: {e}")
        return False
