"""Domain enums for LoungeOS models."""

from __future__ import annotations

from enum import Enum


class StaffRole(str, Enum):
    """Roles a staff member can hold."""

    super_admin = "Super Admin"
    manager = "Manager"
    accountant = "Accountant"
    stock_manager = "Stock Manager"
    chef = "Chef"
    waiter = "Waiter"
    cashier = "Cashier"
    bartender = "Bartender"


class StaffStatus(str, Enum):
    active = "Active"
    away = "Away"


class TableStatus(str, Enum):
    available = "Available"
    occupied = "Occupied"
    reserved = "Reserved"


class OrderStatus(str, Enum):
    """
    Lifecycle of an order on the kitchen and bar boards.

    Completed and Canceled are terminal.
    """

    pending = "Pending"
    in_progress = "In Progress"
    ready = "Ready"
    completed = "Completed"
    canceled = "Canceled"


class OrderItemType(str, Enum):
    """What an order line's ``product_id`` points at."""

    product = "product"
    inventory_item = "inventory_item"


class MovementType(str, Enum):
    stock_in = "IN"
    stock_out = "OUT"
    adjustment = "ADJUSTMENT"
    transfer = "TRANSFER"


class ReferenceType(str, Enum):
    purchase_order = "PURCHASE_ORDER"
    sales_order = "SALES_ORDER"
    adjustment = "ADJUSTMENT"
    transfer = "TRANSFER"
    waste = "WASTE"
    theft = "THEFT"
    damage = "DAMAGE"


class StockStatus(str, Enum):
    """Derived stock level of an inventory item."""

    in_stock = "In Stock"
    low_stock = "Low Stock"
    out_of_stock = "Out of Stock"


class TicketPriority(str, Enum):
    low = "Low"
    medium = "Medium"
    high = "High"
    urgent = "Urgent"
    critical = "Critical"


class TicketStatus(str, Enum):
    open = "Open"
    in_progress = "In Progress"
    resolved = "Resolved"
    closed = "Closed"


class AccountType(str, Enum):
    asset = "asset"
    liability = "liability"
    equity = "equity"
    revenue = "revenue"
    expense = "expense"


class JournalStatus(str, Enum):
    """Only posted entries count in financial reports."""

    draft = "draft"
    posted = "posted"


class EntryType(str, Enum):
    general = "general"
    sales = "sales"
    expense = "expense"


class BackupFrequency(str, Enum):
    hourly = "hourly"
    daily = "daily"
    weekly = "weekly"
    monthly = "monthly"
    disabled = "disabled"


class BackupType(str, Enum):
    manual = "manual"
    automatic = "automatic"
