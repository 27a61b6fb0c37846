# construction/urls.py
from django.urls import path

from .apps import get_integration_config
from .views import (
    HubSpotDealCreateView,
    HubSpotDealUpdateView,
    HubSpotServiceUpdateView,

    ConstructionDistributorView,
    ServiceTypeView,
    CreateUserView,

    SlackNotifyView,
    DocumentUploadView,

    ServiceProgressView,
    StatusCatalogView,
)

config = get_integration_config()

urlpatterns = [
    path('hubspot/deals/', HubSpotDealCreateView.as_view(config=config), name='hubspot_deal_create'),
    path('hubspot/deals/update/', HubSpotDealUpdateView.as_view(config=config), name='hubspot_deal_update'),
    path('hubspot/service-update/', HubSpotServiceUpdateView.as_view(config=config), name='hubspot_service_update'),

    path('construction/distributor/', ConstructionDistributorView.as_view(config=config), name='construction_distributor'),
    path('services/type/', ServiceTypeView.as_view(config=config), name='service_type'),
    path('users/', CreateUserView.as_view(config=config), name='create_user'),

    path('slack/notify/', SlackNotifyView.as_view(config=config), name='slack_notify'),
    path('services/<int:service_id>/documents/', DocumentUploadView.as_view(config=config), name='service_documents'),

    path('services/<int:service_id>/progress/', ServiceProgressView.as_view(config=config), name='service_progress'),
    path('service-types/<int:type_id>/statuses/', StatusCatalogView.as_view(config=config), name='service_type_statuses'),
]
