#
# Datasize Sortable Byte Count
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, InitVar, field
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .decimals import UnitDecimals
from .formatters import fmt_size
from .sentinels import UNSET, UnsetType
from .suffixes import ISO80000, SI, UnitSuffixes


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, order=True)
class DataSize:
    """
    A byte count with its pre-rendered human-readable string.

    Formats once at construction, then displays by the string and sorts,
    compares and hashes by the numeric value. Useful for table cells and
    listings that are rendered and re-sorted many times.

    Formatting arguments are the same as fmt_size() and are not stored.

    Examples:
        >>> sizes = [DataSize(2_000_000), DataSize(950), DataSize(1256)]
        >>> [str(s) for s in sorted(sizes)]
        ['950 B', '1 KiB', '1.9 MiB']
    """

    value: int

    use_binary: InitVar[bool] = True
    suffixes: InitVar[UnitSuffixes] = ISO80000
    decimal_separator: InitVar[str | UnsetType] = UNSET
    decimals: InitVar[UnitDecimals | None] = None

    as_str: str = field(init=False, compare=False, default="")

    def __post_init__(
            self,
            use_binary: bool,
            suffixes: UnitSuffixes,
            decimal_separator: str | UnsetType,
            decimals: UnitDecimals | None,
    ):
        object.__setattr__(self, 'as_str', fmt_size(self.value, use_binary, suffixes, decimal_separator, decimals))

    @classmethod
    def binary(cls, value: int) -> Self:
        """Binary units with ISO 80000 suffixes, same as fmt_size_binary()."""
        return cls(value, True, ISO80000, ".", UnitDecimals.DEFAULT)

    @classmethod
    def decimal(cls, value: int) -> Self:
        """Decimal units with SI suffixes, same as fmt_size_decimal()."""
        return cls(value, False, SI, ".", UnitDecimals.DEFAULT)

    @property
    def sort_key(self) -> int:
        """The raw byte count."""
        return self.value

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.as_str
