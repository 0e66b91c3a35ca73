"""
Application Settings API Endpoints.

Settings are a flat document of JSON values keyed by name. Stored values
are merged over the built-in defaults on every read.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body

from loungeos.server.services.deps import ActorDep, SettingsServiceDep

router = APIRouter()


@router.get(
    "",
    summary="Get Settings",
    description="Return the stored settings merged over the defaults. The first read stores the defaults.",
)
async def get_settings(service: SettingsServiceDep) -> Dict[str, Any]:
    return await service.get_settings()


@router.put(
    "",
    summary="Replace Settings",
    description="Replace the whole stored settings document.",
    response_description="The settings after the change, merged over the defaults.",
)
async def replace_settings(
    service: SettingsServiceDep, actor_id: ActorDep, values: Dict[str, Any] = Body(...)
) -> Dict[str, Any]:
    return await service.replace_settings(values, actor_id)
