"""
Staff and authentication services.

Staff members sign in with their email and a bcrypt-hashed password. New
accounts get the configured default password and must change it on their
first login; the Super Admin created by the initial setup does not.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from loungeos.core.database.entities.staff import StaffMember
from loungeos.core.database.repositories.activity_logs import ActivityLogRepository
from loungeos.core.database.repositories.orders import OrderRepository
from loungeos.core.database.repositories.staff import StaffRepository
from loungeos.core.errors import AuthenticationError, ConflictError, InvalidOperationError, NotFoundError
from loungeos.core.logging_config import get_logger
from loungeos.core.models.domain import StaffRole, StaffStatus
from loungeos.core.models.io.staff import StaffCreate, StaffPerformance, StaffUpdate
from loungeos.core.security import hash_password, verify_password
from loungeos.server.core.config import settings

logger = get_logger(__name__)

DEFAULT_AVATAR = "https://placehold.co/100x100.png"


class StaffService:
    """Service for staff accounts and their performance figures."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.staff = StaffRepository(session)
        self.activity = ActivityLogRepository(session)

    async def list_staff(self) -> List[StaffMember]:
        return await self.staff.list()

    async def get_by_email(self, email: str) -> StaffMember:
        member = await self.staff.get_by_email(email)
        if member is None:
            raise NotFoundError("Staff member", email)
        return member

    async def create_staff(self, data: StaffCreate, actor_id: Optional[int] = None) -> StaffMember:
        """
        Create a staff member with the default password.

        Args:
            data: Staff details
            actor_id: Staff member performing the change, for the activity log

        Returns:
            The persisted staff member

        Raises:
            ConflictError: If the email is already registered
        """
        if await self.staff.get_by_email(data.email) is not None:
            raise ConflictError(f"A staff member with email {data.email} already exists")

        member = StaffMember(
            name=data.name,
            email=data.email,
            password=hash_password(settings.default_password),
            role=data.role.value,
            status=data.status.value,
            avatar=data.avatar or DEFAULT_AVATAR,
            floor=data.floor,
            phone=data.phone,
            hire_date=data.hire_date,
            force_password_change=True,
        )
        try:
            await self.staff.add(member)
            await self.activity.record(actor_id, "STAFF_CREATE", f"Created staff member {data.name} ({data.role.value})")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(member)
        logger.info(f"Created staff member {member.id} ({member.email})")
        return member

    async def update_staff(self, email: str, data: StaffUpdate, actor_id: Optional[int] = None) -> StaffMember:
        member = await self.get_by_email(email)
        for key, value in data.model_dump(exclude_unset=True).items():
            if isinstance(value, Enum):
                value = value.value
            setattr(member, key, value)
        try:
            await self.activity.record(actor_id, "STAFF_UPDATE", f"Updated staff member {member.name}")
            self.session.add(member)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(member)
        return member

    async def delete_staff(self, email: str, actor_id: Optional[int] = None) -> None:
        member = await self.get_by_email(email)
        try:
            await self.staff.remove(member)
            await self.activity.record(actor_id, "STAFF_DELETE", f"Deleted staff member {member.name}")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info(f"Deleted staff member {email}")

    async def performance(self) -> List[StaffPerformance]:
        """
        Compute order throughput per staff member, ranked by completed revenue.

        Staff members without any order are included with zero figures.
        """
        members = await self.staff.list()
        rows = {row["waiter_id"]: row for row in await OrderRepository(self.session).waiter_performance()}

        ranking: List[StaffPerformance] = []
        for member in members:
            row = rows.get(member.id, {})
            processed = row.get("orders_processed", 0)
            completed = row.get("completed_orders", 0)
            revenue = row.get("total_revenue", 0.0)
            ranking.append(
                StaffPerformance(
                    id=member.id,
                    name=member.name,
                    role=member.role,
                    avatar=member.avatar,
                    orders_processed=processed,
                    completed_orders=completed,
                    total_revenue=round(revenue, 2),
                    average_order_value=round(revenue / completed, 2) if completed else 0.0,
                    completion_rate=round(completed * 100.0 / processed, 1) if processed else 0.0,
                )
            )
        ranking.sort(key=lambda entry: entry.total_revenue, reverse=True)
        return ranking


class AuthService:
    """Service for sign-in, first-run setup and password resets."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.staff = StaffRepository(session)
        self.activity = ActivityLogRepository(session)

    async def login(self, email: str, password: str) -> StaffMember:
        """
        Authenticate a staff member.

        Raises:
            AuthenticationError: For an unknown email or a wrong password
        """
        member = await self.staff.get_by_email(email)
        if member is None or not verify_password(password, member.password):
            logger.warning(f"Failed login attempt for {email}")
            raise AuthenticationError()
        try:
            await self.activity.record(member.id, "LOGIN", f"{member.name} signed in")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return member

    async def is_setup(self) -> bool:
        return await self.staff.count_by_role(StaffRole.super_admin.value) > 0

    async def setup(self, name: str, email: str, password: str) -> StaffMember:
        """
        Create the first Super Admin account.

        Raises:
            InvalidOperationError: If a Super Admin already exists
            ConflictError: If the email is already registered
        """
        if await self.is_setup():
            raise InvalidOperationError("Setup has already been completed")
        if await self.staff.get_by_email(email) is not None:
            raise ConflictError(f"A staff member with email {email} already exists")

        admin = StaffMember(
            name=name,
            email=email,
            password=hash_password(password),
            role=StaffRole.super_admin.value,
            status=StaffStatus.active.value,
            avatar=DEFAULT_AVATAR,
            force_password_change=False,
        )
        admin = await self.staff.create(admin)
        logger.info(f"Initial setup completed with Super Admin {email}")
        return admin

    async def reset_password(self, email: str, new_password: str) -> None:
        member = await self.staff.get_by_email(email)
        if member is None:
            raise NotFoundError("Staff member", email)
        member.password = hash_password(new_password)
        member.force_password_change = False
        try:
            await self.activity.record(member.id, "PASSWORD_RESET", f"Password changed for {email}")
            self.session.add(member)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
