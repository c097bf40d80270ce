#
# Datasize Units of Measurement
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import Enum, StrEnum, unique
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type, fmt_value

# @formatter:off

KIBI = 1024
MEBI = 1024 * KIBI
GIBI = 1024 * MEBI
TEBI = 1024 * GIBI
PEBI = 1024 * TEBI
EXBI = 1024 * PEBI

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Base(StrEnum):
    """
    Interpretation of unit thresholds.

    Attributes:
        DECIMAL (str) : Thresholds are powers of 1000 - kB, MB, GB
        BINARY (str)  : Thresholds are powers of 1024 - KiB, MiB, GiB
    """
    DECIMAL = "decimal"
    BINARY = "binary"

    @classmethod
    def of(cls, use_binary: bool) -> Self:
        """Map the `use_binary` flag of the formatting API to a Base."""
        return cls.BINARY if use_binary else cls.DECIMAL


# @formatter:off
@unique
class SizeUnit(Enum):
    """
    Size classes from byte to exabyte.

    Each member carries an explicit table `index` used by suffix and decimal
    tables, its decimal and binary thresholds, and the base-10 exponent of the
    decimal threshold.
    """
    #       index  decimal                     binary  exponent
    BYTE  = (0,    1,                          1,      0)
    KILO  = (1,    1_000,                      KIBI,   3)
    MEGA  = (2,    1_000_000,                  MEBI,   6)
    GIGA  = (3,    1_000_000_000,              GIBI,   9)
    TERA  = (4,    1_000_000_000_000,          TEBI,   12)
    PETA  = (5,    1_000_000_000_000_000,      PEBI,   15)
    EXA   = (6,    1_000_000_000_000_000_000,  EXBI,   18)

    def __init__(self, index: int, decimal: int, binary: int, exponent: int):
        self.index = index
        self.decimal = decimal
        self.binary = binary
        self.exponent = exponent
# @formatter:on

    @classmethod
    def ordered(cls) -> tuple["SizeUnit", ...]:
        """Units ascending by magnitude."""
        return _UNITS_ASCENDING

    @classmethod
    def from_index(cls, index: int) -> "SizeUnit":
        """Unit at the given table index, 0 is BYTE and 6 is EXA."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"unit index must be int, got {fmt_type(index)}")
        if not 0 <= index < len(_UNITS_ASCENDING):
            raise ValueError(f"unit index must be in range [0, {len(_UNITS_ASCENDING) - 1}], got {fmt_value(index)}")
        return _UNITS_ASCENDING[index]

    def threshold(self, base: Base) -> int:
        """Smallest magnitude displayed in this unit for the given base."""
        return self.binary if base is Base.BINARY else self.decimal


# Methods --------------------------------------------------------------------------------------------------------------

def select_unit(magnitude: int, base: Base) -> SizeUnit:
    """
    Pick the largest unit whose threshold does not exceed magnitude.

    BYTE is always eligible, so 0 selects BYTE. Anything at or above the EXA
    threshold selects EXA.

    Examples:
        >>> select_unit(1023, Base.BINARY)
        <SizeUnit.BYTE: (0, 1, 1, 0)>
        >>> select_unit(1024, Base.BINARY)
        <SizeUnit.KILO: (1, 1000, 1024, 3)>
        >>> select_unit(1024, Base.DECIMAL)
        <SizeUnit.KILO: (1, 1000, 1024, 3)>
    """
    for lower, upper in zip(_UNITS_ASCENDING, _UNITS_ASCENDING[1:]):
        if magnitude < upper.threshold(base):
            return lower
    return SizeUnit.EXA


# Module Sanity Checks -------------------------------------------------------------------------------------------------

_UNITS_ASCENDING = tuple(sorted(SizeUnit, key=lambda u: u.index))

# Table indices must be 0..6 without gaps, thresholds strictly ascending.
if [u.index for u in _UNITS_ASCENDING] != list(range(len(_UNITS_ASCENDING))):
    raise AssertionError("Configuration Error: SizeUnit indices must be contiguous from 0.")
for _lower, _upper in zip(_UNITS_ASCENDING, _UNITS_ASCENDING[1:]):
    if not (_lower.decimal < _upper.decimal and _lower.binary < _upper.binary):
        raise AssertionError(f"Configuration Error: thresholds must ascend from {_lower.name} to {_upper.name}.")
