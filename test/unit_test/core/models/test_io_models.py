"""Unit tests for I/O model configuration."""

from datetime import date

from loungeos.core.database.entities.staff import StaffMember
from loungeos.core.models.io.accounting import ExpenseCreate
from loungeos.core.models.io.staff import StaffRead


def test_read_models_validate_from_entities():
    member = StaffMember(id=4, name="Ada", email="ada@lounge.test", password="hash", role="Waiter")
    read = StaffRead.model_validate(member)
    assert read.id == 4
    assert read.email == "ada@lounge.test"
    assert "password" not in read.model_dump()


def test_expense_accepts_alias_and_field_name():
    by_alias = ExpenseCreate.model_validate(
        {"description": "Ice", "amount": 12.0, "account_code": "5300", "date": "2026-03-01"}
    )
    by_name = ExpenseCreate(description="Ice", amount=12.0, account_code="5300", expense_date=date(2026, 3, 1))
    assert by_alias.expense_date == by_name.expense_date == date(2026, 3, 1)
