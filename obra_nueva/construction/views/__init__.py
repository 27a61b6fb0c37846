from .base import ActionView, envelope_exception_handler
from .documents import DocumentUploadView
from .hubspot import HubSpotDealCreateView, HubSpotDealUpdateView, HubSpotServiceUpdateView
from .privileged import ConstructionDistributorView, ServiceTypeView
from .progress import ServiceProgressView, StatusCatalogView
from .slack import SlackNotifyView
from .users import CreateUserView

__all__ = [
    'ActionView',
    'envelope_exception_handler',
    # HubSpot
    'HubSpotDealCreateView',
    'HubSpotDealUpdateView',
    'HubSpotServiceUpdateView',
    # Back office
    'ConstructionDistributorView',
    'ServiceTypeView',
    'CreateUserView',
    # Documents
    'SlackNotifyView',
    'DocumentUploadView',
    # Tracker
    'ServiceProgressView',
    'StatusCatalogView',
]
