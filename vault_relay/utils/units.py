"""Conversion between human readable token amounts and their fixed-point integers.

The USDx token uses 6 decimals, hence ``"1.5"`` is sent to the contract as
``1500000`` and a balance of ``1500000`` is displayed as ``"1.5"``.
"""
from decimal import Decimal, InvalidOperation
from typing import Union

from vault_relay.constants import USDX_DECIMALS
from vault_relay.exceptions import AmountTooPrecise, InvalidAmount

Amount = Union[str, int, float, Decimal]

UINT256_MAX = 2 ** 256 - 1
#: Number of decimal digits of UINT256_MAX.
UINT256_DIGITS = len(str(UINT256_MAX))


def to_decimal(value: Amount) -> Decimal:
    """Parse `value` into a finite :class:`Decimal`.

    Floats are parsed from their string representation, so ``0.1`` becomes
    ``Decimal("0.1")`` rather than its binary approximation. Digit group
    separators (``"1_000"``) are not accepted.

    :raises InvalidAmount: if `value` is not numeric, or not finite.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        raise InvalidAmount(f"Invalid amount: {value!r}")
    text = str(value).strip()
    if "_" in text:
        raise InvalidAmount(f"Invalid amount: {value!r}")
    try:
        parsed = Decimal(text)
    except InvalidOperation:
        raise InvalidAmount(f"Invalid amount: {value!r}")
    if not parsed.is_finite():
        raise InvalidAmount(f"Invalid amount: {value!r}")
    return parsed


def to_fixed_point(value: Amount, decimals: int = USDX_DECIMALS) -> int:
    """Scale `value` by ``10 ** decimals`` and return it as an :class:`int`.

    The scaling is exact, it is done on the digits of `value` and never
    rounds, whatever the number of significant digits.

    :raises InvalidAmount:
        if `value` is not numeric, or its magnitude does not fit into a ``uint256``.
    :raises AmountTooPrecise: if `value` has more fractional digits than `decimals`.
    """
    parsed = to_decimal(value)
    sign, digits, exponent = parsed.as_tuple()
    coefficient = int("".join(map(str, digits)))
    if coefficient == 0:
        return 0

    shift = exponent + decimals
    if shift >= 0:
        if parsed.adjusted() + decimals >= UINT256_DIGITS:
            raise InvalidAmount(f"Amount {value} is too large")
        scaled = coefficient * 10 ** shift
    else:
        # A non-zero coefficient with fewer digits than the shift is never divisible.
        if -shift > len(digits) or coefficient % 10 ** -shift:
            raise AmountTooPrecise(f"Amount {value} exceeds {decimals} decimal places")
        scaled = coefficient // 10 ** -shift

    if scaled > UINT256_MAX:
        raise InvalidAmount(f"Amount {value} is too large")
    return -scaled if sign else scaled


def from_fixed_point(value: int, decimals: int = USDX_DECIMALS) -> str:
    """Render the fixed-point integer `value` as a decimal string.

    Trailing zeros are dropped, but at least one fractional digit is kept::

        >>> from_fixed_point(1500000)
        '1.5'
        >>> from_fixed_point(2000000)
        '2.0'
    """
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(int(value)), 10 ** decimals)
    fraction_digits = str(fraction).rjust(decimals, "0").rstrip("0") or "0"
    return f"{sign}{whole}.{fraction_digits}"
