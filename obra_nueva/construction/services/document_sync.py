# construction/services/document_sync.py
"""
Copy an uploaded document onto its construction's HubSpot deal.

Each documentation type names the deal property that receives the document
(its public link, its text content, or both separated by a newline).
"""

import logging
from typing import Optional

from ..exceptions import HubSpotError
from ..models import Document, DocumentationType

logger = logging.getLogger(__name__)


def prepare_document_content(link: Optional[str], content_text: Optional[str]) -> Optional[str]:
    has_link = bool(link and link.strip())
    has_content = bool(content_text and content_text.strip())

    if has_link and has_content:
        return f"{link}\n{content_text}"
    if has_link:
        return link
    if has_content:
        return content_text
    return None


def sync_document_to_hubspot(hubspot, document_id) -> bool:
    """
    Returns True when the deal was updated, False when there was nothing to
    sync (no deal, no property mapping, no content) or HubSpot refused it.
    """
    document = (
        Document.objects
        .select_related('service__construction')
        .filter(id=document_id)
        .first()
    )
    if not document:
        logger.warning(f"[DocSync] Document {document_id} not found")
        return False

    deal_id = document.service.construction.hubspot_deal_id
    if not deal_id:
        logger.warning(f"[DocSync] ⚠️ No hubspot_deal_id for service {document.service_id}, skipping")
        return False

    property_name = (
        DocumentationType.objects
        .filter(id=document.document_type_id)
        .values_list('hubspot_document', flat=True)
        .first()
    )
    if not property_name:
        logger.warning(f"[DocSync] ⚠️ No HubSpot property for document type {document.document_type_id}, skipping")
        return False

    value = prepare_document_content(document.link, document.content_text)
    if not value:
        logger.warning(f"[DocSync] ⚠️ Document {document_id} has no content to sync")
        return False

    try:
        hubspot.update_deal(deal_id, {property_name: value})
    except HubSpotError as e:
        logger.error(f"[DocSync] ❌ Failed to update deal {deal_id}.{property_name}: {e.details}")
        return False

    logger.info(f"[DocSync] ✅ Document {document_id} synced to deal {deal_id}.{property_name}")
    return True
