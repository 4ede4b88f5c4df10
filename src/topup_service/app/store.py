import dataclasses
from decimal import Decimal
from typing import Iterable, Protocol

from .models import Account


class AccountStore(Protocol):
    def find(self, user_id: str) -> Account | None: ...

    def update(self, user_id: str, balance: Decimal) -> Account: ...


class InMemoryAccountStore:
    """Process-local account table.

    No locking: two concurrent read-modify-write cycles on the same account
    can lose an update.
    """

    def __init__(self, accounts: Iterable[Account] = ()) -> None:
        self._accounts: dict[str, Account] = {acc.id: acc for acc in accounts}

    def find(self, user_id: str) -> Account | None:
        return self._accounts.get(user_id)

    def update(self, user_id: str, balance: Decimal) -> Account:
        acc = self._accounts.get(user_id)
        if acc is None:
            raise KeyError(user_id)
        updated = dataclasses.replace(acc, balance=balance)
        self._accounts[user_id] = updated
        return updated
