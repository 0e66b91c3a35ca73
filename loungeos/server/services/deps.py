"""
Service Dependencies.

Provides request-scoped service instances for API endpoints. Each service is
built on the request's database session, so overriding ``get_session``
swaps the database for every service at once.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database import get_session
from loungeos.server.services.accounting import LedgerService
from loungeos.server.services.accounting_sync import AccountingSyncService
from loungeos.server.services.backup import BackupService
from loungeos.server.services.catalog import CatalogService
from loungeos.server.services.dashboard import DashboardService
from loungeos.server.services.events import EventService
from loungeos.server.services.floors import FloorPlanService
from loungeos.server.services.inventory import InventoryService
from loungeos.server.services.notes import NoteService
from loungeos.server.services.notifications import NotificationService
from loungeos.server.services.orders import OrderService
from loungeos.server.services.reports import ReportService
from loungeos.server.services.settings import SettingsService
from loungeos.server.services.staff import AuthService, StaffService
from loungeos.server.services.tickets import TicketService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_auth_service(session: SessionDep) -> AuthService:
    return AuthService(session)


def get_staff_service(session: SessionDep) -> StaffService:
    return StaffService(session)


def get_floor_plan_service(session: SessionDep) -> FloorPlanService:
    return FloorPlanService(session)


def get_catalog_service(session: SessionDep) -> CatalogService:
    return CatalogService(session)


def get_order_service(session: SessionDep) -> OrderService:
    return OrderService(session)


def get_inventory_service(session: SessionDep) -> InventoryService:
    return InventoryService(session)


def get_ticket_service(session: SessionDep) -> TicketService:
    return TicketService(session)


def get_notification_service(session: SessionDep) -> NotificationService:
    return NotificationService(session)


def get_event_service(session: SessionDep) -> EventService:
    return EventService(session)


def get_note_service(session: SessionDep) -> NoteService:
    return NoteService(session)


def get_settings_service(session: SessionDep) -> SettingsService:
    return SettingsService(session)


def get_ledger_service(session: SessionDep) -> LedgerService:
    return LedgerService(session)


def get_sync_service(session: SessionDep) -> AccountingSyncService:
    return AccountingSyncService(session)


def get_report_service(session: SessionDep) -> ReportService:
    return ReportService(session)


def get_dashboard_service(session: SessionDep) -> DashboardService:
    return DashboardService(session)


def get_backup_service(session: SessionDep) -> BackupService:
    return BackupService(session)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
StaffServiceDep = Annotated[StaffService, Depends(get_staff_service)]
FloorPlanServiceDep = Annotated[FloorPlanService, Depends(get_floor_plan_service)]
CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]
InventoryServiceDep = Annotated[InventoryService, Depends(get_inventory_service)]
TicketServiceDep = Annotated[TicketService, Depends(get_ticket_service)]
NotificationServiceDep = Annotated[NotificationService, Depends(get_notification_service)]
EventServiceDep = Annotated[EventService, Depends(get_event_service)]
NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]
SettingsServiceDep = Annotated[SettingsService, Depends(get_settings_service)]
LedgerServiceDep = Annotated[LedgerService, Depends(get_ledger_service)]
SyncServiceDep = Annotated[AccountingSyncService, Depends(get_sync_service)]
ReportServiceDep = Annotated[ReportService, Depends(get_report_service)]
DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]
BackupServiceDep = Annotated[BackupService, Depends(get_backup_service)]


def get_actor_id(x_actor_id: Annotated[Optional[int], Header()] = None) -> Optional[int]:
    """Staff member performing the request, taken from the ``X-Actor-Id`` header."""
    return x_actor_id


ActorDep = Annotated[Optional[int], Depends(get_actor_id)]
