"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts.

Modules:
- staff: Staff and authentication I/O models
- floors: Floor and dining table I/O models
- menu: Menu category and product I/O models
- orders: Order, split/merge and display board I/O models
- suppliers: Supplier I/O models
- inventory: Inventory item, movement, category and supplier I/O models
- tickets: Support ticket I/O models
- notifications: Notification and activity log I/O models
- accounting: Ledger, expense and sync I/O models
- backups: Backup and storage I/O models
- events: Calendar event I/O models
- notes: Sticky note I/O models
"""

from .accounting import (
    AccountCreate,
    AccountRead,
    ExpenseCreate,
    JournalEntryCreate,
    JournalEntryRead,
    JournalEntryUpdate,
    JournalLineIn,
    JournalLineRead,
    SyncAllResult,
    SyncResult,
    SyncStatus,
)
from .backups import BackupCreate, BackupRead, BackupSettingsRead, BackupSettingsUpdate, SystemStats
from .events import EventCreate, EventRead, EventUpdate
from .floors import FloorCreate, FloorRead, TableCreate, TableRead, TableStats, TableUpdate
from .inventory import (
    BulkItemCreate,
    BulkMovementCreate,
    InventoryCategoryCreate,
    InventoryCategoryRead,
    InventoryItemCreate,
    InventoryItemRead,
    InventoryItemUpdate,
    InventorySupplierCreate,
    InventorySupplierRead,
    InventorySupplierUpdate,
    MovementCreate,
    MovementRead,
)
from .menu import CategoryCreate, CategoryRead, CategoryUpdate, ProductCreate, ProductRead, ProductUpdate, StockUpdate
from .notes import NoteCreate, NotePin, NoteRead, NoteUpdate
from .notifications import ActivityLogCreate, ActivityLogRead, NotificationCreate, NotificationRead
from .orders import (
    DisplayBoard,
    MergeRequest,
    OrderCreate,
    OrderItemIn,
    OrderItemRead,
    OrderRead,
    OrderStatusUpdate,
    OrderUpdate,
    SplitItem,
    SplitRequest,
    SplitResult,
)
from .staff import (
    LoginRequest,
    PasswordResetRequest,
    SetupRequest,
    SetupStatus,
    StaffCreate,
    StaffPerformance,
    StaffRead,
    StaffUpdate,
)
from .suppliers import SupplierCreate, SupplierRead, SupplierUpdate
from .tickets import TicketCommentCreate, TicketCommentRead, TicketCreate, TicketRead, TicketUpdate

__all__ = [
    "AccountCreate",
    "AccountRead",
    "ActivityLogCreate",
    "ActivityLogRead",
    "BackupCreate",
    "BackupRead",
    "BackupSettingsRead",
    "BackupSettingsUpdate",
    "BulkItemCreate",
    "BulkMovementCreate",
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "DisplayBoard",
    "EventCreate",
    "EventRead",
    "EventUpdate",
    "ExpenseCreate",
    "FloorCreate",
    "FloorRead",
    "InventoryCategoryCreate",
    "InventoryCategoryRead",
    "InventoryItemCreate",
    "InventoryItemRead",
    "InventoryItemUpdate",
    "InventorySupplierCreate",
    "InventorySupplierRead",
    "InventorySupplierUpdate",
    "JournalEntryCreate",
    "JournalEntryRead",
    "JournalEntryUpdate",
    "JournalLineIn",
    "JournalLineRead",
    "LoginRequest",
    "MergeRequest",
    "MovementCreate",
    "MovementRead",
    "NoteCreate",
    "NotePin",
    "NoteRead",
    "NoteUpdate",
    "NotificationCreate",
    "NotificationRead",
    "OrderCreate",
    "OrderItemIn",
    "OrderItemRead",
    "OrderRead",
    "OrderStatusUpdate",
    "OrderUpdate",
    "PasswordResetRequest",
    "ProductCreate",
    "ProductRead",
    "ProductUpdate",
    "SetupRequest",
    "SetupStatus",
    "SplitItem",
    "SplitRequest",
    "SplitResult",
    "StaffCreate",
    "StaffPerformance",
    "StaffRead",
    "StaffUpdate",
    "StockUpdate",
    "SupplierCreate",
    "SupplierRead",
    "SupplierUpdate",
    "SyncAllResult",
    "SyncResult",
    "SyncStatus",
    "SystemStats",
    "TableCreate",
    "TableRead",
    "TableStats",
    "TableUpdate",
    "TicketCommentCreate",
    "TicketCommentRead",
    "TicketCreate",
    "TicketRead",
    "TicketUpdate",
]
