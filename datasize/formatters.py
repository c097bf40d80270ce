"""
Human-readable formatting of byte counts.

Renders a byte count with the largest fitting unit, e.g. 2_000_000 bytes as
"1.9 MiB" (binary) or "2.0 MB" (decimal). Fractional digits are TRUNCATED,
never rounded: 1099 bytes with one kilo decimal is "1.0 kB", not "1.1 kB", and
1023 bytes is never promoted to "1.0 KiB".

All functions are pure and safe for concurrent use.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import locale
from typing import Final

# Local ----------------------------------------------------------------------------------------------------------------
from .decimals import UnitDecimals
from .numeric import POWERS_OF_TEN, digit_count, exa_minor_digit
from .sentinels import UNSET, UnsetType, ifnotunset
from .suffixes import ISO80000, SI, UnitSuffixes
from .units import Base, SizeUnit, select_unit
from .utils import fmt_type, fmt_value

FALLBACK_DECIMAL_SEPARATOR: Final[str] = "."


# Methods --------------------------------------------------------------------------------------------------------------

def locale_decimal_point() -> str:
    """
    Decimal point of the current LC_NUMERIC locale, '.' if the locale defines none.

    Read on every call, so a locale.setlocale() made after import takes effect.
    """
    return locale.localeconv()["decimal_point"] or FALLBACK_DECIMAL_SEPARATOR


def fmt_size(
        value: int,
        use_binary: bool,
        suffixes: UnitSuffixes,
        decimal_separator: str | UnsetType = UNSET,
        decimals: UnitDecimals | None = None,
) -> str:
    """
    Format a byte count as a human-readable string.

    The unit is the largest one whose threshold does not exceed value. The
    integral part is value // threshold; the fractional part shows
    decimals[unit] digits, truncated. Zero is always "0" + byte suffix.

    Args:
        value: Byte count, 0 <= value <= 2**63 - 1.
        use_binary: Use 1024-based thresholds if True, 1000-based otherwise.
        suffixes: Unit suffixes, e.g. ISO80000 or SI.
        decimal_separator: Separator between integral and fractional digits.
            UNSET uses the decimal point of the locale current at call time.
        decimals: Fractional digits per unit, None uses UnitDecimals.DEFAULT.

    Returns:
        Formatted size, never empty.

    Raises:
        TypeError: If value is not an int, suffixes is None or not UnitSuffixes,
            or decimals is neither None nor UnitDecimals.
        ValueError: If value is negative.

    Examples:
        >>> fmt_size(2_000_000, True, ISO80000, ".")
        '1.9 MiB'
        >>> fmt_size(2_000_000, False, SI, ",")
        '2,0 MB'
        >>> fmt_size(1256, True, ISO80000, ".")
        '1 KiB'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be int, got {fmt_type(value)}")
    if value < 0:
        raise ValueError(f"value must be >= 0, got {fmt_value(value)}")
    if suffixes is None:
        raise TypeError("suffixes must be supplied")
    if not isinstance(suffixes, UnitSuffixes):
        raise TypeError(f"suffixes must be UnitSuffixes, got {fmt_type(suffixes)}")
    if decimals is None:
        decimals = UnitDecimals.DEFAULT
    elif not isinstance(decimals, UnitDecimals):
        raise TypeError(f"decimals must be UnitDecimals or None, got {fmt_type(decimals)}")

    if value == 0:
        return "0" + suffixes.byte

    base = Base.of(use_binary)
    unit = select_unit(value, base)
    divider = unit.threshold(base)
    suffix = suffixes[unit]
    major = value // divider

    places = decimals[unit]
    if places == 0:
        return f"{major}{suffix}"

    remainder = value - major * divider
    if unit is SizeUnit.EXA:
        minor = exa_minor_digit(remainder, base)
    else:
        minor = remainder * POWERS_OF_TEN[places] // divider

    separator = ifnotunset(decimal_separator, default_factory=locale_decimal_point)
    padding = "0" * max(0, places - digit_count(minor))
    return f"{major}{separator}{padding}{minor}{suffix}"


def fmt_size_binary(value: int) -> str:
    """
    Format with 1024-based units, ISO 80000 suffixes, '.' separator and default decimals.

    Examples:
        >>> fmt_size_binary(9 * 1024 ** 3)
        '9.00 GiB'
    """
    return fmt_size(value, True, ISO80000, ".", UnitDecimals.DEFAULT)


def fmt_size_decimal(value: int) -> str:
    """
    Format with 1000-based units, SI suffixes, '.' separator and default decimals.

    Examples:
        >>> fmt_size_decimal(1000)
        '1 kB'
    """
    return fmt_size(value, False, SI, ".", UnitDecimals.DEFAULT)
