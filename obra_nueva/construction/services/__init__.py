from .catalog import load_status_catalog
from .deals import build_deal_properties, build_service_id_properties
from .document_sync import prepare_document_content, sync_document_to_hubspot
from .notifications import UploadNotice, build_simple_message, build_upload_message, notify_document_uploaded
from .saga import CompensatedStep, run_compensated
from .transitions import TransitionResult, advance_to_next_status, set_service_status
from .uploads import UploadResult, upload_document
from .users import create_user_with_profile

__all__ = [
    'load_status_catalog',
    # HubSpot
    'build_deal_properties',
    'build_service_id_properties',
    'prepare_document_content',
    'sync_document_to_hubspot',
    # Slack
    'UploadNotice',
    'build_upload_message',
    'build_simple_message',
    'notify_document_uploaded',
    # Flows
    'CompensatedStep',
    'run_compensated',
    'TransitionResult',
    'advance_to_next_status',
    'set_service_status',
    'UploadResult',
    'upload_document',
    'create_user_with_profile',
]
