import logging

from config.settings import Settings
from providers.base import HousingDataProvider
from providers.demo import DemoProvider
from providers.supabase import SupabaseProvider

logger = logging.getLogger(__name__)


def get_provider(settings: Settings) -> HousingDataProvider:
    """Use the hosted backend when it is configured, the demo catalog otherwise."""
    if settings.is_backend_configured:
        return SupabaseProvider(settings)
    logger.warning("Supabase not configured (SUPABASE_URL / SUPABASE_ANON_KEY); using demo data")
    return DemoProvider(settings)
