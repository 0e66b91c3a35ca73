"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS,
request monitoring), registers exception handlers and includes all API
routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from loungeos.core.database import async_session_maker, init_db
from loungeos.core.logging_config import get_logger, setup_logging
from loungeos.core.monitoring import initialize_monitoring

from .api.v1 import (
    accounting,
    activity_logs,
    auth,
    backup,
    categories,
    dashboard,
    display,
    events,
    floors,
    health,
    inventory,
    notes,
    notifications,
    orders,
    products,
    settings as app_settings,
    staff,
    suppliers,
    system,
    tables,
    tickets,
)
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestMonitoringMiddleware
from .services.backup import BackupScheduler

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    On startup the database schema is created and seeded, and the automatic
    backup scheduler is started when enabled. On shutdown the scheduler is
    stopped.
    """
    # Startup
    logger.info("Starting up LoungeOS Server...")
    try:
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    scheduler = None
    if settings.backup.scheduler_enabled:
        scheduler = BackupScheduler(async_session_maker)
        scheduler.start()
    app.state.backup_scheduler = scheduler

    yield

    # Shutdown
    logger.info("Shutting down LoungeOS Server...")
    if scheduler is not None:
        await scheduler.stop()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    LoungeOS Server API

    Point-of-sale and back-office API for restaurants and lounges: staff and
    floor plans, menu and orders with kitchen and bar boards, inventory,
    double-entry accounting with automatic sync and reports, support tickets,
    notifications and database backups.
    """,
    version=constant.VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(RequestMonitoringMiddleware)

setup_exception_handlers(app)
initialize_monitoring(app)

API = constant.API_V1_STR

app.include_router(health.router, tags=["health"])
app.include_router(auth.router, prefix=f"{API}/auth", tags=["auth"])
app.include_router(staff.router, prefix=f"{API}/staff", tags=["staff"])
app.include_router(floors.router, prefix=f"{API}/floors", tags=["floors"])
app.include_router(tables.router, prefix=f"{API}/tables", tags=["tables"])
app.include_router(categories.router, prefix=f"{API}/categories", tags=["menu"])
app.include_router(products.router, prefix=f"{API}/products", tags=["menu"])
app.include_router(orders.router, prefix=f"{API}/orders", tags=["orders"])
app.include_router(display.router, prefix=f"{API}/display", tags=["display"])
app.include_router(inventory.router, prefix=f"{API}/inventory", tags=["inventory"])
app.include_router(suppliers.router, prefix=f"{API}/suppliers", tags=["suppliers"])
app.include_router(tickets.router, prefix=f"{API}/tickets", tags=["tickets"])
app.include_router(notifications.router, prefix=f"{API}/notifications", tags=["notifications"])
app.include_router(activity_logs.router, prefix=f"{API}/activity-logs", tags=["activity-logs"])
app.include_router(app_settings.router, prefix=f"{API}/settings", tags=["settings"])
app.include_router(accounting.router, prefix=f"{API}/accounting", tags=["accounting"])
app.include_router(backup.router, prefix=f"{API}/backup", tags=["backup"])
app.include_router(dashboard.router, prefix=f"{API}/dashboard-stats", tags=["dashboard"])
app.include_router(system.router, prefix=f"{API}/system-stats", tags=["backup"])
app.include_router(events.router, prefix=f"{API}/events", tags=["calendar"])
app.include_router(notes.router, prefix=f"{API}/notes", tags=["notes"])
