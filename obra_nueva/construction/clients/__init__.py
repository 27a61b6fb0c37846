from .hubspot import HubSpotClient
from .slack import SlackNotifier
from .supabase_auth import SupabaseAuthAdmin

__all__ = [
    'HubSpotClient',
    'SlackNotifier',
    'SupabaseAuthAdmin',
]
