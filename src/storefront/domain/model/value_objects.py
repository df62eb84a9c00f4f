"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.exceptions import ValidationError

CURRENCY_SYMBOLS = {
    "EUR": "€",
    "USD": "$",
    "BGN": "лв.",
}


@dataclass(frozen=True)
class Money:
    """Monetary amount in integer minor units (cents) with currency.

    Prices arrive from the payment provider as minor units, so keeping
    them as ``int`` avoids any rounding until display time.
    """

    amount: int
    currency: str = "EUR"

    def __post_init__(self) -> None:
        # bool is an int subclass but never a valid amount
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise ValidationError(
                f"Money amount must be an integer of minor units, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    # --- Display --------------------------------------------------------------

    @property
    def major(self) -> Decimal:
        """The amount in major units, e.g. ``Money(850).major == Decimal("8.50")``."""
        return (Decimal(self.amount) / 100).quantize(Decimal("0.01"))

    def __str__(self) -> str:
        symbol = CURRENCY_SYMBOLS.get(self.currency, self.currency)
        return f"{self.major:.2f} {symbol}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero(currency: str = "EUR") -> Money:
        return Money(0, currency)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    A line item can never sit in the cart at zero: it is removed instead.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __str__(self) -> str:
        return str(self.value)
