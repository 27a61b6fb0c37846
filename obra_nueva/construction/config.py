# construction/config.py
"""Integration configuration, read once from Django settings at startup."""

from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

REQUIRED_SETTINGS = (
    'HUBSPOT_ACCESS_TOKEN',
    'SLACK_WEBHOOK_URL',
    'SUPABASE_URL',
    'SUPABASE_SERVICE_ROLE_KEY',
    'INTERNAL_API_TOKEN',
)


@dataclass(frozen=True)
class IntegrationConfig:
    hubspot_access_token: str
    hubspot_owner_id: str
    hubspot_deal_stage: str
    hubspot_api_base: str
    slack_webhook_url: str
    supabase_url: str
    supabase_service_role_key: str
    internal_api_token: str
    timeout: int = 30


def load_integration_config(source=None) -> IntegrationConfig:
    """
    Build and validate the integration config.

    Raises ImproperlyConfigured listing every missing value.
    """
    source = source or settings

    missing = [name for name in REQUIRED_SETTINGS if not getattr(source, name, '')]
    if missing:
        raise ImproperlyConfigured(
            f"Missing integration settings: {', '.join(missing)}. "
            f"Set them in the environment or in .env"
        )

    timeout = int(getattr(source, 'INTEGRATION_TIMEOUT', 30))
    if timeout < 1:
        raise ImproperlyConfigured("INTEGRATION_TIMEOUT must be >= 1")

    return IntegrationConfig(
        hubspot_access_token=source.HUBSPOT_ACCESS_TOKEN,
        hubspot_owner_id=str(getattr(source, 'HUBSPOT_OWNER_ID', '') or '158118434'),
        hubspot_deal_stage=str(getattr(source, 'HUBSPOT_DEAL_STAGE', '') or '205747816'),
        hubspot_api_base=getattr(source, 'HUBSPOT_API_BASE', 'https://api.hubapi.com').rstrip('/'),
        slack_webhook_url=source.SLACK_WEBHOOK_URL,
        supabase_url=source.SUPABASE_URL.rstrip('/'),
        supabase_service_role_key=source.SUPABASE_SERVICE_ROLE_KEY,
        internal_api_token=source.INTERNAL_API_TOKEN,
        timeout=timeout,
    )
