"""Fluent builder for ``Account``."""
from pattern_gallery.domain.account.account import Account


class AccountBuilder:
    """
    Collects account fields through chained calls.

    Every setter returns the builder. Calling a setter twice keeps the last
    value. ``build`` returns a new frozen ``Account`` each time, so later
    setter calls never touch an account already built.
    """

    def __init__(self, account_number: str):
        self._account_number = account_number
        self._interest_rate = 0.0
        self._opening_branch = ""
        self._opening_balance = 0.0
        self._owner_name = ""

    def with_owner(self, owner_name: str) -> "AccountBuilder":
        self._owner_name = owner_name
        return self

    def at_rate(self, rate: float) -> "AccountBuilder":
        self._interest_rate = rate
        return self

    def at_branch(self, branch_name: str) -> "AccountBuilder":
        self._opening_branch = branch_name
        return self

    def with_opening_balance(self, balance: float) -> "AccountBuilder":
        self._opening_balance = balance
        return self

    def build(self) -> Account:
        return Account(
            account_number=self._account_number,
            interest_rate=self._interest_rate,
            opening_branch=self._opening_branch,
            opening_balance=self._opening_balance,
            owner_name=self._owner_name,
        )


def new_account_builder(account_number: str) -> AccountBuilder:
    """Start building an account with the given number."""
    return AccountBuilder(account_number)
