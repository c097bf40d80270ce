"""
Integer helpers for size formatting.

Digit counting for zero-padding of fractional parts and the first fractional
digit of exabyte-range values. Both operate on plain Python ints and keep every
intermediate product inside the signed 64-bit range.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Final

# Local ----------------------------------------------------------------------------------------------------------------
from .units import Base, SizeUnit
from .utils import fmt_type, fmt_value

# Constants ------------------------------------------------------------------------------------------------------------

MAX_INT64: Final[int] = 2 ** 63 - 1
"""Largest supported magnitude, the maximum signed 64-bit value."""

DIGIT_COUNT_LIMIT: Final[int] = 10 ** 12
"""digit_count() accepts absolute values strictly below this limit."""

POWERS_OF_TEN: Final[tuple[int, ...]] = tuple(10 ** n for n in range(19))


def _exa_boundaries(divider: int) -> tuple[int, ...]:
    # Smallest remainder whose first fractional digit is k: ceil(divider * k / 10)
    return tuple(-(-divider * k // 10) for k in range(1, 10))


# @formatter:off
EXA_BOUNDARIES: Final[dict[Base, tuple[int, ...]]] = {
    Base.DECIMAL: (
        100_000_000_000_000_000,
        200_000_000_000_000_000,
        300_000_000_000_000_000,
        400_000_000_000_000_000,
        500_000_000_000_000_000,
        600_000_000_000_000_000,
        700_000_000_000_000_000,
        800_000_000_000_000_000,
        900_000_000_000_000_000,
    ),
    Base.BINARY: (
        115_292_150_460_684_698,    # ~102.4 PiB
        230_584_300_921_369_396,    # ~204.8 PiB
        345_876_451_382_054_093,    # ~307.2 PiB
        461_168_601_842_738_791,    # ~409.6 PiB
        576_460_752_303_423_488,    # 512 PiB
        691_752_902_764_108_186,    # ~614.4 PiB
        807_045_053_224_792_884,    # ~716.8 PiB
        922_337_203_685_477_581,    # ~819.2 PiB
        1_037_629_354_146_162_279,  # ~921.6 PiB
    ),
}
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def digit_count(value: int) -> int:
    """
    Count decimal digits of an integer, ignoring its sign.

    Optimized for small magnitudes: a fixed comparison tree instead of str()
    or log10. Zero has one digit.

    Args:
        value: Integer with absolute value below 10**12.

    Returns:
        Number of decimal digits, 1 to 12.

    Raises:
        TypeError: If value is not an int.
        ValueError: If abs(value) has 13 or more digits.

    Examples:
        >>> digit_count(9)
        1
        >>> digit_count(-100)
        3
        >>> digit_count(999_999_999_999)
        12
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be int, got {fmt_type(value)}")

    x = abs(value)
    if x < 1_000_000:
        if x < 1_000:
            if x < 10:
                return 1
            return 2 if x < 100 else 3
        if x < 10_000:
            return 4
        return 5 if x < 100_000 else 6

    if x < 1_000_000_000:
        if x < 10_000_000:
            return 7
        return 8 if x < 100_000_000 else 9
    if x < 10_000_000_000:
        return 10
    if x < 100_000_000_000:
        return 11
    if x < DIGIT_COUNT_LIMIT:
        return 12

    raise ValueError(f"value is too large for digit_count, abs(value) must be < 10**12, got {fmt_value(value)}")


def exa_minor_digit(remainder: int, base: Base) -> int:
    """
    First fractional digit of remainder / EXA threshold, truncated.

    Used for exabyte-range values where `remainder * 10` would leave the signed
    64-bit range. The result is a bucket index against precomputed boundaries,
    so only a single digit is available and there is no carry.

    Args:
        remainder: Value below one exa unit, 0 <= remainder < EXA.threshold(base).
        base: Decimal or binary thresholds.

    Returns:
        Digit in range [0, 9].

    Raises:
        ValueError: If remainder is negative or not below one exa unit.

    Examples:
        >>> exa_minor_digit(250_000_000_000_000_000, Base.DECIMAL)
        2
        >>> exa_minor_digit(PEBI * 103, Base.BINARY)
        1
    """
    divider = SizeUnit.EXA.threshold(base)
    if not 0 <= remainder < divider:
        raise ValueError(
            f"remainder must be in range [0, {divider}) for {base} exa unit, got {fmt_value(remainder)}"
        )

    digit = 0
    for boundary in EXA_BOUNDARIES[base]:
        if remainder < boundary:
            break
        digit += 1
    return digit


# Module Sanity Checks -------------------------------------------------------------------------------------------------

for _base in Base:
    if EXA_BOUNDARIES[_base] != _exa_boundaries(SizeUnit.EXA.threshold(_base)):
        raise AssertionError(f"Configuration Error: exa boundaries for {_base} do not match the exa threshold.")
