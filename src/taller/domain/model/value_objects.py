"""Value objects for prices and labour time."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import total_ordering
from typing import Iterable

from taller.domain.exceptions import ValidationError

CURRENCY = "PEN"
CURRENCY_SYMBOL = "S/"


@total_ordering
@dataclass(frozen=True)
class Money:
    """A non-negative amount in soles.

    Amounts are kept as exact Decimals through every sum and product;
    rounding to two places only happens when the value is displayed.
    """

    amount: Decimal
    currency: str = CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Price must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Price must be a finite number, got {self.amount}")
        if self.amount.is_signed() and self.amount != 0:
            raise ValidationError(f"Price cannot be negative, got {self.amount}")

    @classmethod
    def of(cls, amount: str | float | int | Decimal) -> Money:
        """Build from user or backend input; floats go through ``str``."""
        try:
            return cls(Decimal(str(amount).strip()))
        except InvalidOperation as exc:
            raise ValidationError(f"Invalid price: {amount!r}") from exc

    @classmethod
    def zero(cls) -> Money:
        return cls(Decimal("0.00"))

    @classmethod
    def sum(cls, amounts: Iterable[Money]) -> Money:
        total = cls.zero()
        for amount in amounts:
            total = total + amount
        return total

    def __add__(self, other: Money) -> Money:
        self._check_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Prices scale by whole quantities, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    def __str__(self) -> str:
        return f"{CURRENCY_SYMBOL} {self.amount:,.2f}"

    def _check_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(f"Cannot combine {self.currency} with {other.currency}")


@dataclass(frozen=True)
class Duration:
    """Estimated labour time, in whole minutes."""

    minutes: int

    def __post_init__(self) -> None:
        if not isinstance(self.minutes, int) or self.minutes < 0:
            raise ValidationError(
                f"Duration must be a non-negative number of minutes, got {self.minutes!r}"
            )

    def __str__(self) -> str:
        if self.minutes < 60:
            return f"{self.minutes} min"
        hours, rest = divmod(self.minutes, 60)
        if rest == 0:
            return f"{hours}h"
        return f"{hours}h {rest}min"
