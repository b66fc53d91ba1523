"""
Money Utilities - exact Decimal arithmetic for cart amounts.

Sums and products run with unlimited precision so no digit is lost before
the final rounding to cents.
"""
from contextlib import contextmanager
from decimal import Decimal, MAX_PREC, ROUND_HALF_DOWN, ROUND_HALF_UP, InvalidOperation, localcontext
from typing import Iterator, Union

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

# Average ticket rounds ties toward zero: 10.005 -> 10.00
TICKET_ROUNDING = ROUND_HALF_DOWN

Number = Union[str, int, float, Decimal]


@contextmanager
def _exact() -> Iterator[None]:
    # Only for terminating operations: + - * and integer division
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        yield


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal, falling back to Decimal("0") if None/invalid.

    Floats are converted through their string form.
    """
    try:
        return parse_decimal(value)
    except ValueError:
        return Decimal("0")


def parse_decimal(value: Union[Number, None]) -> Decimal:
    """
    Strict conversion to a finite Decimal.

    Raises:
        ValueError: value is None, a bool, of another type, unparsable, NaN or infinite
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise ValueError(f"not a number: {value!r}")

    try:
        result = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except InvalidOperation as e:
        raise ValueError(f"not a number: {value!r}") from e

    if not result.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return result


def round_money(value: Number, rounding: str = ROUND_HALF_UP) -> Decimal:
    """Round monetary value to cents (ROUND_HALF_UP by default)."""
    with _exact():
        return to_decimal(value).quantize(MONEY_PRECISION, rounding=rounding)


def add(a: Number, b: Number) -> Decimal:
    """Exact addition of monetary values."""
    with _exact():
        return to_decimal(a) + to_decimal(b)


def multiply(value: Number, factor: Number) -> Decimal:
    """Exact multiplication of monetary value by a factor."""
    with _exact():
        return to_decimal(value) * to_decimal(factor)


def divide_money(value: Number, divisor: Number, rounding: str = ROUND_HALF_UP) -> Decimal:
    """
    value / divisor rounded to cents, decided on the exact quotient.

    The quotient is never truncated before rounding, so a result just above
    a tie is not mistaken for one. Dividing by zero returns Decimal("0").
    Rounding modes must be symmetric around zero (HALF_*, UP, DOWN).
    """
    d = to_decimal(divisor)
    if d == 0:
        return Decimal("0")

    v = to_decimal(value)
    with _exact():
        cents, remainder = divmod(abs(v).scaleb(2), abs(d))
        # Stand-in fraction with the same position relative to the half
        twice = remainder * 2
        if remainder == 0:
            fraction = Decimal("0")
        elif twice < abs(d):
            fraction = Decimal("0.25")
        elif twice == abs(d):
            fraction = Decimal("0.5")
        else:
            fraction = Decimal("0.75")
        rounded = (cents + fraction).quantize(Decimal("1"), rounding=rounding).scaleb(-2)

    negative = (v < 0) != (d < 0)
    return round_money(-rounded if negative else rounded)
