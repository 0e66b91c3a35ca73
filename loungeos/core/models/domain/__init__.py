"""Domain enums and rules shared by repositories, services and the API layer.

The enums are ``str`` subclasses so they serialize to the exact values stored
in the database (for example ``"In Progress"``).
"""

from .enums import (
    AccountType,
    BackupFrequency,
    BackupType,
    EntryType,
    JournalStatus,
    MovementType,
    OrderItemType,
    OrderStatus,
    ReferenceType,
    StaffRole,
    StaffStatus,
    StockStatus,
    TableStatus,
    TicketPriority,
    TicketStatus,
)
from .lifecycle import ORDER_TRANSITIONS, can_transition, is_terminal
from .schedule import next_backup_time

__all__ = [
    "AccountType",
    "BackupFrequency",
    "BackupType",
    "EntryType",
    "JournalStatus",
    "MovementType",
    "OrderItemType",
    "OrderStatus",
    "ReferenceType",
    "StaffRole",
    "StaffStatus",
    "StockStatus",
    "TableStatus",
    "TicketPriority",
    "TicketStatus",
    "ORDER_TRANSITIONS",
    "can_transition",
    "is_terminal",
    "next_backup_time",
]
