"""Initial schema and seed data for LoungeOS

Revision ID: 20260301_000000
Revises: None
Create Date: 2026-03-01 00:00:00.000000

Creates every LoungeOS table and seeds:
- The default chart of accounts
- The single backup schedule row (daily, disabled)

Revision format: YYYYMMDD_HHMMSS_description

"""

from datetime import datetime, timezone
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20260301_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CHART_OF_ACCOUNTS = [
    ("1000", "Cash", "asset"),
    ("1100", "Accounts Receivable", "asset"),
    ("1200", "Inventory", "asset"),
    ("1300", "Prepaid Expenses", "asset"),
    ("1400", "Equipment", "asset"),
    ("1500", "Accumulated Depreciation", "asset"),
    ("2000", "Accounts Payable", "liability"),
    ("2100", "Accrued Expenses", "liability"),
    ("2200", "Loans Payable", "liability"),
    ("2300", "Taxes Payable", "liability"),
    ("3000", "Owner's Equity", "equity"),
    ("3100", "Retained Earnings", "equity"),
    ("3900", "Current Year Earnings", "equity"),
    ("4000", "Sales Revenue", "revenue"),
    ("4100", "Service Revenue", "revenue"),
    ("4200", "Other Revenue", "revenue"),
    ("5000", "Cost of Goods Sold", "expense"),
    ("5100", "Salaries & Wages", "expense"),
    ("5200", "Rent Expense", "expense"),
    ("5300", "Utilities", "expense"),
    ("5400", "Supplies", "expense"),
    ("5500", "Depreciation", "expense"),
    ("5600", "Marketing & Advertising", "expense"),
    ("5900", "Miscellaneous Expenses", "expense"),
]


def upgrade() -> None:
    """Create all tables and seed initial data."""

    # Staff and floor plan
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("role", sa.String(32), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("avatar", sa.String(512), nullable=True),
        sa.Column("floor", sa.String(128), nullable=True),
        sa.Column("phone", sa.String(64), nullable=True),
        sa.Column("hire_date", sa.DateTime(), nullable=True),
        sa.Column("force_password_change", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_users_email", "email", unique=True),
        sa.Index("ix_users_role", "role"),
    )

    op.create_table(
        "floors",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(128), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_floors_name", "name", unique=True),
    )

    op.create_table(
        "tables",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("floor_id", sa.Integer(), sa.ForeignKey("floors.id"), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_tables_name", "name", unique=True),
        sa.Index("ix_tables_floor_id", "floor_id"),
    )

    # Menu
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("is_food", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_categories_name", "name", unique=True),
    )

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("category", sa.String(128), nullable=False),
        sa.Column("image", sa.String(512), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_products_category", "category"),
    )

    op.create_table(
        "suppliers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("contact_person", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(64), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    # Orders
    op.create_table(
        "orders",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("table_name", sa.String(128), nullable=False),
        sa.Column("status", sa.String(32), nullable=False),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
        sa.Column("subtotal", sa.Float(), nullable=False),
        sa.Column("discount", sa.Float(), nullable=False),
        sa.Column("discount_name", sa.String(128), nullable=True),
        sa.Column("tax", sa.Float(), nullable=False),
        sa.Column("total", sa.Float(), nullable=False),
        sa.Column("waiter_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("cancelled_by", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("cancellation_reason", sa.String(512), nullable=True),
        sa.Column("cancelled_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_orders_table_name", "table_name"),
        sa.Index("ix_orders_status", "status"),
        sa.Index("ix_orders_timestamp", "timestamp"),
        sa.Index("ix_orders_waiter_id", "waiter_id"),
    )

    op.create_table(
        "order_items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("order_id", sa.String(64), sa.ForeignKey("orders.id"), nullable=False),
        sa.Column("product_id", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("item_type", sa.String(32), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_order_items_order_id", "order_id"),
        sa.Index("ix_order_items_product_id", "product_id"),
    )

    # Inventory
    op.create_table(
        "inventory_suppliers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("contact_person", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(64), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "inventory_categories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("color", sa.String(16), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_inventory_categories_name", "name", unique=True),
    )

    op.create_table(
        "inventory_items",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("sku", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("category", sa.String(128), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("unit", sa.String(32), nullable=False),
        sa.Column("min_stock_level", sa.Integer(), nullable=False),
        sa.Column("max_stock_level", sa.Integer(), nullable=True),
        sa.Column("current_stock", sa.Integer(), nullable=False),
        sa.Column("cost_per_unit", sa.Float(), nullable=True),
        sa.Column("supplier_id", sa.Integer(), sa.ForeignKey("inventory_suppliers.id"), nullable=True),
        sa.Column("image", sa.String(512), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_inventory_items_sku", "sku", unique=True),
        sa.Index("ix_inventory_items_category", "category"),
    )

    op.create_table(
        "inventory_movements",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("item_id", sa.Integer(), sa.ForeignKey("inventory_items.id"), nullable=False),
        sa.Column("movement_type", sa.String(16), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("unit_cost", sa.Float(), nullable=True),
        sa.Column("total_cost", sa.Float(), nullable=True),
        sa.Column("reference_number", sa.String(128), nullable=True),
        sa.Column("reference_type", sa.String(32), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("movement_date", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_inventory_movements_item_id", "item_id"),
        sa.Index("ix_inventory_movements_movement_type", "movement_type"),
        sa.Index("ix_inventory_movements_movement_date", "movement_date"),
    )

    # Support and communication
    op.create_table(
        "tickets",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("priority", sa.String(16), nullable=False),
        sa.Column("category", sa.String(64), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("creator_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("assignee_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("resolved_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_tickets_priority", "priority"),
        sa.Index("ix_tickets_category", "category"),
        sa.Index("ix_tickets_status", "status"),
        sa.Index("ix_tickets_creator_id", "creator_id"),
        sa.Index("ix_tickets_assignee_id", "assignee_id"),
        sa.Index("ix_tickets_updated_at", "updated_at"),
    )

    op.create_table(
        "ticket_comments",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("ticket_id", sa.Integer(), sa.ForeignKey("tickets.id"), nullable=False),
        sa.Column("author_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_ticket_comments_ticket_id", "ticket_id"),
    )

    op.create_table(
        "notifications",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("type", sa.String(32), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_notifications_is_read", "is_read"),
        sa.Index("ix_notifications_created_at", "created_at"),
        sa.Index("ix_notifications_user_id", "user_id"),
    )

    op.create_table(
        "activity_logs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("action", sa.String(64), nullable=False),
        sa.Column("details", sa.Text(), nullable=False),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_activity_logs_user_id", "user_id"),
        sa.Index("ix_activity_logs_action", "action"),
        sa.Index("ix_activity_logs_timestamp", "timestamp"),
    )

    op.create_table(
        "settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("key", sa.String(128), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_settings_key", "key", unique=True),
    )

    # Accounting
    chart_of_accounts = op.create_table(
        "chart_of_accounts",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("code", sa.String(16), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("account_type", sa.String(16), nullable=False),
        sa.Column("parent_code", sa.String(16), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_chart_of_accounts_code", "code", unique=True),
        sa.Index("ix_chart_of_accounts_account_type", "account_type"),
    )

    op.create_table(
        "journal_entries",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("entry_date", sa.Date(), nullable=False),
        sa.Column("entry_type", sa.String(16), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("reference", sa.String(128), nullable=False),
        sa.Column("total_amount", sa.Float(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("created_by", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_journal_entries_entry_date", "entry_date"),
        sa.Index("ix_journal_entries_entry_type", "entry_type"),
        sa.Index("ix_journal_entries_reference", "reference"),
        sa.Index("ix_journal_entries_status", "status"),
    )

    op.create_table(
        "journal_entry_lines",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("journal_entry_id", sa.Integer(), sa.ForeignKey("journal_entries.id"), nullable=False),
        sa.Column("account_code", sa.String(16), nullable=False),
        sa.Column("account_name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("debit", sa.Float(), nullable=False),
        sa.Column("credit", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_journal_entry_lines_journal_entry_id", "journal_entry_id"),
        sa.Index("ix_journal_entry_lines_account_code", "account_code"),
    )

    # Backups
    op.create_table(
        "backups",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("filename", sa.String(255), nullable=False),
        sa.Column("size", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("type", sa.String(16), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_backups_created_at", "created_at"),
    )

    backup_settings = op.create_table(
        "backup_settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("frequency", sa.String(16), nullable=False),
        sa.Column("last_backup", sa.DateTime(), nullable=True),
        sa.Column("next_backup", sa.DateTime(), nullable=True),
        sa.Column("enabled", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # Seed the chart of accounts and the backup schedule
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    op.bulk_insert(
        chart_of_accounts,
        [
            {
                "code": code,
                "name": name,
                "account_type": account_type,
                "parent_code": None,
                "is_active": True,
                "created_at": now,
                "updated_at": now,
            }
            for code, name, account_type in CHART_OF_ACCOUNTS
        ],
    )
    op.bulk_insert(backup_settings, [{"id": 1, "frequency": "daily", "enabled": False}])


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("backup_settings")
    op.drop_table("backups")
    op.drop_table("journal_entry_lines")
    op.drop_table("journal_entries")
    op.drop_table("chart_of_accounts")
    op.drop_table("settings")
    op.drop_table("activity_logs")
    op.drop_table("notifications")
    op.drop_table("ticket_comments")
    op.drop_table("tickets")
    op.drop_table("inventory_movements")
    op.drop_table("inventory_items")
    op.drop_table("inventory_categories")
    op.drop_table("inventory_suppliers")
    op.drop_table("order_items")
    op.drop_table("orders")
    op.drop_table("suppliers")
    op.drop_table("products")
    op.drop_table("categories")
    op.drop_table("tables")
    op.drop_table("floors")
    op.drop_table("users")
