"""
Application settings service.

Settings are stored one JSON value per key. Reads merge the stored keys over
the built-in defaults, and the first read persists the defaults.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.repositories.activity_logs import ActivityLogRepository
from loungeos.core.database.repositories.settings import AppSettingRepository
from loungeos.core.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SETTINGS: Dict[str, Any] = {
    "platformName": "LoungeOS",
    "platformLogo": "",
    "organizationName": "LoungeOS Inc.",
    "contactAddress": "123 Tech Street, Silicon Valley",
    "contactPhone": "+1 234 567 890",
    "activeTheme": "Default",
    "themes": [
        {
            "name": "Default",
            "colors": {"primary": "#E11D48", "background": "#09090B", "accent": "#27272A"},
        }
    ],
    "receiptHeader": "Welcome to our establishment!",
    "receiptFooter": "Thank you for your visit! Come again!",
    "receiptShowWaiter": True,
    "receiptCustomFields": [{"label": "NIU", "value": "P123456789012"}],
    "receiptLineSpacing": 1.5,
    "receiptFont": "mono",
    "defaultCurrency": {"code": "XAF", "name": "Central African Franc", "symbol": "FCFA", "position": "before"},
    "availableCurrencies": [
        {"code": "XAF", "name": "Central African Franc", "symbol": "FCFA", "position": "before"},
        {"code": "USD", "name": "United States Dollar", "symbol": "$", "position": "before"},
        {"code": "EUR", "name": "Euro", "symbol": "€", "position": "before"},
        {"code": "GBP", "name": "British Pound", "symbol": "£", "position": "before"},
        {"code": "NGN", "name": "Nigerian Naira", "symbol": "₦", "position": "before"},
        {"code": "GHS", "name": "Ghanaian Cedi", "symbol": "₵", "position": "before"},
    ],
    "taxEnabled": True,
    "taxRates": [
        {"id": "VAT", "name": "Value Added Tax (VAT)", "rate": 19, "isDefault": True},
        {"id": "GST", "name": "Goods and Services Tax (GST)", "rate": 10, "isDefault": False},
        {"id": "PST", "name": "Property Tax (PST)", "rate": 5, "isDefault": False},
    ],
    "discountEnabled": True,
    "discountRules": [
        {"id": "1", "name": "No Discount", "type": "percentage", "value": 0, "isActive": True},
        {"id": "2", "name": "10% Discount", "type": "percentage", "value": 10, "isActive": True},
        {"id": "3", "name": "20% Discount", "type": "percentage", "value": 20, "isActive": True},
        {"id": "4", "name": "Fixed 1000 FCFA", "type": "fixed", "value": 1000, "isActive": True},
    ],
}


class SettingsService:
    """Service for the application settings document."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.settings = AppSettingRepository(session)
        self.activity = ActivityLogRepository(session)

    async def get_settings(self) -> Dict[str, Any]:
        stored = await self.settings.load_all()
        if not stored:
            logger.info("No stored settings, persisting defaults")
            await self.settings.replace_all(DEFAULT_SETTINGS)
            return copy.deepcopy(DEFAULT_SETTINGS)
        merged = copy.deepcopy(DEFAULT_SETTINGS)
        merged.update(stored)
        return merged

    async def replace_settings(self, values: Dict[str, Any], actor_id: Optional[int] = None) -> Dict[str, Any]:
        """Replace the stored settings and return the merged view."""
        await self.activity.record(actor_id, "SETTINGS_UPDATE", f"Updated {len(values)} settings")
        await self.settings.replace_all(values)
        return await self.get_settings()
