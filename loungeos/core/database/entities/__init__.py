"""
Database entity models.

This package contains all database entity models organized by business domain.
Each module represents either a single table or a business domain spanning
several related tables.

Modules:
- staff: Staff member accounts
- menu: Menu categories and products
- floors: Floors and dining tables
- orders: Orders and order lines
- suppliers: Product suppliers
- inventory: Inventory items, movements, categories and suppliers
- tickets: Support tickets and comments
- notifications: In-app notifications
- activity_logs: User activity audit trail
- settings: Key/value application settings
- accounting: Chart of accounts and journal entries
- backups: Backup records and schedule
- events: Calendar events
- notes: Sticky notes
"""

from . import (
    accounting,
    activity_logs,
    backups,
    events,
    floors,
    inventory,
    menu,
    notes,
    notifications,
    orders,
    settings,
    staff,
    suppliers,
    tickets,
)

__all__ = [
    "accounting",
    "activity_logs",
    "backups",
    "events",
    "floors",
    "inventory",
    "menu",
    "notes",
    "notifications",
    "orders",
    "settings",
    "staff",
    "suppliers",
    "tickets",
]
