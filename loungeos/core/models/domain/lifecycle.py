"""Order lifecycle rules.

Orders move along Pending → In Progress → Ready → Completed. Kitchen and bar
staff may drag a card one column back, and any order that is not finished
may be canceled. Re-applying the current status is not a move.
"""

from __future__ import annotations

from typing import Dict, FrozenSet

from .enums import OrderStatus

ORDER_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.pending: frozenset({OrderStatus.in_progress, OrderStatus.canceled}),
    OrderStatus.in_progress: frozenset({OrderStatus.pending, OrderStatus.ready, OrderStatus.canceled}),
    OrderStatus.ready: frozenset({OrderStatus.in_progress, OrderStatus.completed, OrderStatus.canceled}),
    OrderStatus.completed: frozenset(),
    OrderStatus.canceled: frozenset(),
}


def is_terminal(status: OrderStatus) -> bool:
    return not ORDER_TRANSITIONS[status]


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    """Return whether an order in ``current`` may move to ``target``."""
    return target in ORDER_TRANSITIONS[current]
