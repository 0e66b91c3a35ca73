"""Unit tests for the journal lines built from stock movements."""

import pytest

from loungeos.core.database.entities.inventory import InventoryMovement
from loungeos.server.services.accounting_sync import movement_lines


def _movement(movement_type: str, quantity: int, unit_cost=2.5) -> InventoryMovement:
    return InventoryMovement(item_id=1, movement_type=movement_type, quantity=quantity, unit_cost=unit_cost)


def _summary(lines):
    return [(line.account_code, line.debit, line.credit, line.description) for line in lines]


class TestMovementLines:
    def test_stock_in_is_a_cash_purchase(self):
        assert _summary(movement_lines(_movement("IN", 4), "Lime")) == [
            ("1200", 10.0, 0.0, "Purchase: Lime"),
            ("1000", 0.0, 10.0, "Payment for inventory"),
        ]

    def test_stock_out_is_cost_of_goods_sold(self):
        assert _summary(movement_lines(_movement("OUT", 2), "Lime")) == [
            ("5000", 5.0, 0.0, "Usage: Lime"),
            ("1200", 0.0, 5.0, "Inventory reduction"),
        ]

    def test_positive_adjustment_is_a_gain(self):
        lines = movement_lines(_movement("ADJUSTMENT", 3), "Lime")
        assert [(line.account_code, line.debit, line.credit) for line in lines] == [
            ("1200", 7.5, 0.0),
            ("5000", 0.0, 7.5),
        ]

    def test_negative_adjustment_is_a_loss(self):
        lines = movement_lines(_movement("ADJUSTMENT", -3), "Lime")
        assert [(line.account_code, line.debit, line.credit) for line in lines] == [
            ("5000", 7.5, 0.0),
            ("1200", 0.0, 7.5),
        ]

    @pytest.mark.parametrize("movement", [_movement("TRANSFER", 5), _movement("ADJUSTMENT", 0)])
    def test_movements_without_postings(self, movement):
        assert movement_lines(movement, "Lime") is None

    def test_amount_rounded_to_cents(self):
        lines = movement_lines(_movement("IN", 3, unit_cost=0.333), "Mint")
        assert lines[0].debit == 1.0
