"""
Floor and dining table I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from loungeos.core.models.domain import TableStatus


class FloorRead(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class FloorCreate(BaseModel):
    name: str = Field(min_length=1)


class TableRead(BaseModel):
    """Schema for reading a dining table, with the name of its floor."""

    id: int
    name: str
    capacity: int
    status: str
    floor_id: Optional[int] = None
    floor: Optional[str] = Field(default=None, description="Name of the floor the table is on")

    model_config = ConfigDict(from_attributes=True)


class TableCreate(BaseModel):
    """Schema for creating a dining table; the floor is referenced by name."""

    name: str = Field(min_length=1)
    capacity: int = Field(default=4, ge=1)
    floor: str = Field(description="Floor name")


class TableUpdate(BaseModel):
    name: Optional[str] = None
    capacity: Optional[int] = Field(default=None, ge=1)
    status: Optional[TableStatus] = None
    floor: Optional[str] = Field(default=None, description="Floor name")


class TableStats(BaseModel):
    totalTables: int
    occupiedTables: int
    availableTables: int
    activeTables: str = Field(description="'{occupied} / {total}'")
