# hospital_core/ledger/values.py
"""
Value type for funds crossing the ledger boundary.

Stands in for the external coin substrate: deposits arrive as Funds,
pay_expense hands Funds back out. Amounts are unsigned integers in the
smallest currency unit and never exceed MAX_AMOUNT.
"""
from __future__ import annotations

from dataclasses import dataclass

from hospital_core.common.exceptions import BalanceOverflow, InsufficientBalance, InvalidAmount
from hospital_core.common.models import MAX_AMOUNT


def as_amount(value, *, field: str = "amount") -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmount({field: "Must be an integer amount in the smallest currency unit."})
    if value < 0:
        raise InvalidAmount({field: "Must not be negative."})
    if value > MAX_AMOUNT:
        raise InvalidAmount({field: f"Must not exceed {MAX_AMOUNT}."})
    return value


def credit(balance, amount: int) -> int:
    """
    balance + amount, rejected rather than wrapped past MAX_AMOUNT.
    """
    total = int(balance) + amount
    if total > MAX_AMOUNT:
        raise BalanceOverflow()
    return total


def debit(balance, amount: int) -> int:
    if int(balance) < amount:
        raise InsufficientBalance(
            f"Insufficient balance: available {int(balance)}, requested {amount}."
        )
    return int(balance) - amount


@dataclass(frozen=True)
class Funds:
    amount: int = 0

    def __post_init__(self):
        as_amount(self.amount)

    @classmethod
    def zero(cls) -> "Funds":
        return cls(0)

    def value(self) -> int:
        return self.amount

    def split(self, amount: int) -> tuple["Funds", "Funds"]:
        """
        Take `amount` out. Returns (taken, remainder).
        """
        remainder = debit(self.amount, as_amount(amount))
        return Funds(amount), Funds(remainder)

    def join(self, other: "Funds") -> "Funds":
        return Funds(credit(self.amount, other.amount))
