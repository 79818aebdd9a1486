# core/settings/app.py
from functools import lru_cache

# Sections
from core.settings.sections.api import ApiSettings
from core.settings.sections.database import DatabaseSettings
from core.settings.sections.payments import PaymentSettings


class AppSettings:
    """
    Central application settings aggregator.
    Settings are loaded lazily inside __init__
    to prevent eager evaluation at import time.
    """

    def __init__(self):
        # Load each settings class ONLY when AppSettings is instantiated
        self.api = ApiSettings()
        self.database = DatabaseSettings()
        self.payments = PaymentSettings()


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()
