"""Shared-expense ledger between users."""

from __future__ import annotations

from collections.abc import Iterable


class ExpenseManager:
    """Tracks who owes whom after expenses are split evenly.

    ``balances()[a][b]`` is positive when ``b`` owes ``a`` that amount and
    negative when ``a`` owes ``b``.
    """

    def __init__(self) -> None:
        self._ledger: dict[str, dict[str, float]] = {}

    def add_user(self, name: str) -> None:
        """Register ``name`` with an empty ledger, clearing any earlier one."""
        self._ledger[name] = {}

    def add_expense(self, amount: float, paid_by: str, paid_to: Iterable[str]) -> None:
        """Split ``amount`` evenly between the payer and everyone in ``paid_to``."""
        debtors = list(paid_to)
        share = amount / (len(debtors) + 1)
        for debtor in debtors:
            owed = self._ledger.setdefault(paid_by, {})
            owed[debtor] = owed.get(debtor, 0.0) + share
            owing = self._ledger.setdefault(debtor, {})
            owing[paid_by] = owing.get(paid_by, 0.0) - share

    def balances(self) -> dict[str, dict[str, float]]:
        """A copy of every user's balances with the others."""
        return {user: dict(entries) for user, entries in self._ledger.items()}