"""A wallet holding bitcoins."""

from __future__ import annotations


class Bitcoin(int):
    """An amount of bitcoin."""

    def __str__(self) -> str:
        return f"{int(self)} BTC"

    def __repr__(self) -> str:
        return f"Bitcoin({int(self)})"


class InsufficientFundsError(Exception):
    """Raised when a withdrawal exceeds the balance."""

    def __init__(self, message: str = "cannot withdraw, insufficient funds") -> None:
        super().__init__(message)


class Wallet:
    """Holds a bitcoin balance."""

    def __init__(self, balance: int = 0) -> None:
        self._balance = Bitcoin(balance)

    def deposit(self, amount: int) -> None:
        self._balance = Bitcoin(self._balance + amount)

    def withdraw(self, amount: int) -> None:
        """Take ``amount`` out; raise InsufficientFundsError if it is not there."""
        if self._balance < amount:
            raise InsufficientFundsError()
        self._balance = Bitcoin(self._balance - amount)

    def balance(self) -> Bitcoin:
        return self._balance