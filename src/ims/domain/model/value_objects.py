"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate coercion so a malformed number never reaches the API.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from ims.domain.exceptions import ValidationError

# Quantities are integers in practice, but fractional input is not
# rejected, so a quantity is either an int or a Decimal.
Number = int | Decimal

# Largest accepted magnitude: 18 integer digits.
MAX_DIGITS = 18

CENT = Decimal("0.01")


def _check_magnitude(number: Decimal, field: str) -> None:
    if number and number.adjusted() >= MAX_DIGITS:
        raise ValidationError(f"{field.capitalize()} is too large: {number}")


def to_number(value: str | float | int | Decimal, field: str) -> Number:
    """Coerce user or API input to an int when integral, else a Decimal."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field}: {value!r}")
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {field}: {value!r}") from exc
    if not number.is_finite():
        raise ValidationError(f"Invalid {field}: {value!r}")
    _check_magnitude(number, field)
    if number == number.to_integral_value():
        return int(number)
    return number


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors. The amount may
    be negative: the inventory total is a plain sum of ``quantity * price``
    and negative quantities are accepted as typed.
    """

    amount: Decimal
    currency: str = "BRL"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: Number) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    @property
    def is_negative(self) -> bool:
        return self.amount < Decimal("0")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        """Brazilian currency format, e.g. ``R$ 1.234,50``."""
        with localcontext() as ctx:
            # products of two large amounts can exceed the default precision
            ctx.prec = max(ctx.prec, self.amount.adjusted() + 3)
            cents = abs(self.amount).quantize(CENT, rounding=ROUND_HALF_UP)
        grouped = f"{cents:,.2f}"
        # 1,234.50 -> 1.234,50
        local = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
        sign = "-" if self.is_negative else ""
        return f"{sign}R$ {local}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        _check_magnitude(value, "amount")
        return Money(value)

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))
