"""
Supplier entity model for the menu side of the business.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class Supplier(Base, table=True):
    """Entity for a product supplier.

    Table: suppliers
    """

    __tablename__ = "suppliers"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    contact_person: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=64)
    email: Optional[str] = Field(default=None, max_length=255)
