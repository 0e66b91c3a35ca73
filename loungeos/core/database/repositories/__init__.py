"""
Database repository layer using SQLModel.

This package contains all repository classes organized by business domain.
Each module provides typed data access operations for its corresponding
SQLModel entity models on top of an async SQLAlchemy session.

Modules:
- base: AsyncBaseRepository interface, SQLModelRepository and AsyncQueryBuilder
- staff: Staff member accounts
- menu: Menu categories and products
- floors: Floors and dining tables
- orders: Orders, order lines and sales aggregates
- suppliers: Product suppliers
- inventory: Inventory items, movements, categories and suppliers
- tickets: Support tickets and comments
- notifications: In-app notifications
- activity_logs: Activity audit trail
- settings: Key/value application settings
- accounting: Chart of accounts, journal entries and ledger aggregates
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
