"""LoungeOS.

This package contains the point-of-sale and back-office server used by
restaurants and lounges to take orders, route them to the kitchen and bar,
track stock, run the books and keep the database safely backed up.

High-level architecture
-----------------------

The codebase is organized as a thin HTTP layer over a relational store:

- **API routers** validate requests and shape responses.
- **Services** hold the business rules that span several tables (order
  lifecycle, stock movements, double-entry bookkeeping, backups).
- **Repositories** own the SQL for a single aggregate.

Core subpackages
----------------

- ``loungeos.core``:

  - Logging and optional Logfire monitoring.
  - The domain error hierarchy.
  - SQLModel entities, async repositories and engine/session helpers.
  - Domain enums and the API I/O schemas.

- ``loungeos.server``:

  - The FastAPI application, routers, middleware and exception handlers.
  - Services for orders, inventory, accounting sync and reports, backups.

Typical workflow
----------------

1. A waiter creates an order; stock for each line is deducted.
2. The kitchen and bar boards move the order through its statuses.
3. Completed orders and priced stock movements are synced into the journal.
4. Reports aggregate the posted journal into P&L, balance sheet and cash flow.
"""
