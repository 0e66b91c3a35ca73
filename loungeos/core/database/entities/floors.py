"""
Floor plan entity models.

Floors group the dining tables of the venue. A table belongs to exactly one
floor and carries its own occupancy status.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class Floor(Base, table=True):
    """Entity for a floor of the venue.

    Table: floors
    """

    __tablename__ = "floors"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=128, unique=True, index=True)


class DiningTable(Base, table=True):
    """Entity for a dining table.

    Table: tables
    """

    __tablename__ = "tables"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=128, unique=True, index=True)
    capacity: int = Field(default=4)
    status: str = Field(default="Available", max_length=16)
    floor_id: Optional[int] = Field(default=None, foreign_key="floors.id", index=True)
