"""Balances computed from a list of transactions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from .functional import reduce


@dataclass(frozen=True)
class Transaction:
    """A transfer of ``amount`` from one named account to another."""

    sender: str
    receiver: str
    amount: float


@dataclass(frozen=True)
class Account:
    """A named account and its balance."""

    name: str
    balance: float = 0.0


def new_transaction(sender: Account, receiver: Account, amount: float) -> Transaction:
    """Build a transaction between two accounts."""
    return Transaction(sender=sender.name, receiver=receiver.name, amount=amount)


def _apply_transaction(account: Account, transaction: Transaction) -> Account:
    balance = account.balance
    if transaction.sender == account.name:
        balance -= transaction.amount
    if transaction.receiver == account.name:
        balance += transaction.amount
    return replace(account, balance=balance)


def new_balance_for(account: Account, transactions: Iterable[Transaction]) -> Account:
    """Return ``account`` with every transaction applied to its balance."""
    return reduce(transactions, _apply_transaction, account)