"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Context, Decimal, InvalidOperation

from edu_records.domain.exceptions import ValidationError

CENT = Decimal("0.01")
# Amounts stay below 10**41 and balances below 10**51, in whole cents;
# 60 digits of precision keep every sum and difference exact.
MAX_AMOUNT_EXPONENT = 40
MAX_BALANCE_EXPONENT = 50
_MONEY_CONTEXT = Context(prec=60)


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Decimal keeps deposits and withdrawals exact; a balance built from
    Money can therefore never drift below zero through rounding.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.amount.adjusted() > MAX_BALANCE_EXPONENT:
            raise ValidationError("Money amount exceeds the supported maximum")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(_MONEY_CONTEXT.add(self.amount, other.amount), self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = _MONEY_CONTEXT.subtract(self.amount, other.amount)
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    @property
    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0.00"), currency)

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(to_decimal(amount))


def to_decimal(amount: str | float | int | Decimal) -> Decimal:
    """Coerce user input to a finite Decimal in whole cents, or raise ValidationError.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")``.
    """
    if isinstance(amount, bool):
        raise ValidationError(f"Invalid money amount: {amount!r}")
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid money amount: {amount!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid money amount: {amount!r}")
    if value.adjusted() > MAX_AMOUNT_EXPONENT:
        raise ValidationError(f"Money amount too large: {amount!r}")
    if value != _MONEY_CONTEXT.quantize(value, CENT):
        raise ValidationError(f"Money amount must be in whole cents: {amount!r}")
    return value
