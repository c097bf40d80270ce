"""
Datasize: human-readable byte counts.

    >>> from datasize import fmt_size_binary, fmt_size_decimal
    >>> fmt_size_binary(2_000_000)
    '1.9 MiB'
    >>> fmt_size_decimal(2_000_000)
    '2.0 MB'

Fractions are truncated, never rounded.
"""

from .decimals import UnitDecimals
from .formatters import fmt_size, fmt_size_binary, fmt_size_decimal
from .sentinels import UNSET
from .size import DataSize
from .suffixes import CUSTOMARY, GNU, GNU_SI, ISO80000, SI, UnitSuffixes
from .units import Base, SizeUnit, select_unit

__all__ = [
    "Base",
    "CUSTOMARY",
    "DataSize",
    "GNU",
    "GNU_SI",
    "ISO80000",
    "SI",
    "SizeUnit",
    "UNSET",
    "UnitDecimals",
    "UnitSuffixes",
    "fmt_size",
    "fmt_size_binary",
    "fmt_size_decimal",
    "select_unit",
]
