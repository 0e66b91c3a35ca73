"""
Authentication API Endpoints.

Email and password sign-in, the one-time initial setup that creates the
first Super Admin, and password resets.
"""

from fastapi import APIRouter, status

from loungeos.core.models.io.staff import LoginRequest, PasswordResetRequest, SetupRequest, SetupStatus, StaffRead
from loungeos.server.services.deps import AuthServiceDep

router = APIRouter()


@router.post(
    "/login",
    response_model=StaffRead,
    summary="Sign In",
    description="Check a staff member's email and password.",
    response_description="The signed-in staff member, without password.",
    responses={
        200: {"description": "Credentials accepted"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(credentials: LoginRequest, auth: AuthServiceDep) -> StaffRead:
    """
    Sign in with email and password.

    The response carries `force_password_change`; when it is true the client
    must send the user through the password reset before anything else.
    """
    member = await auth.login(credentials.email, credentials.password)
    return StaffRead.model_validate(member)


@router.get(
    "/setup-check",
    response_model=SetupStatus,
    summary="Check Initial Setup",
    description="Tell whether a Super Admin account exists yet.",
)
async def setup_check(auth: AuthServiceDep) -> SetupStatus:
    return SetupStatus(is_setup=await auth.is_setup())


@router.post(
    "/setup",
    response_model=StaffRead,
    status_code=status.HTTP_201_CREATED,
    summary="Initial Setup",
    description="Create the first Super Admin account. Only allowed once.",
    response_description="The created Super Admin.",
    responses={
        201: {"description": "Super Admin created"},
        400: {"description": "The system is already set up"},
    },
)
async def setup(data: SetupRequest, auth: AuthServiceDep) -> StaffRead:
    member = await auth.setup(data.name, data.email, data.password)
    return StaffRead.model_validate(member)


@router.post(
    "/reset-password",
    summary="Reset Password",
    description="Store a new password and clear the forced password change flag.",
    responses={
        200: {"description": "Password updated"},
        404: {"description": "Unknown email"},
    },
)
async def reset_password(data: PasswordResetRequest, auth: AuthServiceDep):
    await auth.reset_password(data.email, data.new_password)
    return {"message": "Password updated successfully"}
