#
# Datasize Decimal Places per Unit
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, fields, replace
from typing import ClassVar, Iterator, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .units import SizeUnit
from .utils import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class UnitDecimals:
    """
    Number of fractional digits displayed for each SizeUnit.

    Bytes never show a fractional part, so `byte` is a read-only 0. The other
    units are range-limited (inclusive):

        kilo, mega, giga, tera : 0..6
        peta                   : 0..3
        exa                    : 0..1

    The exa cap is 1 because exabyte-range fractions are resolved to a single
    digit only, see numeric.exa_minor_digit().

    Examples:
        >>> UnitDecimals.DEFAULT.as_tuple()
        (0, 0, 1, 2, 3, 3, 1)
        >>> UnitDecimals.builder().with_mega(3).build()[SizeUnit.MEGA]
        3
    """

    kilo: int = 0
    mega: int = 1
    giga: int = 2
    tera: int = 3
    peta: int = 3
    exa: int = 1

    # @formatter:off
    LIMITS: ClassVar[dict[str, tuple[int, int]]] = {
        "kilo": (0, 6), "mega": (0, 6), "giga": (0, 6),
        "tera": (0, 6), "peta": (0, 3), "exa":  (0, 1),
    }
    # @formatter:on

    DEFAULT: ClassVar["UnitDecimals"]

    def __post_init__(self):
        for f in fields(self):
            _validate_decimals(getattr(self, f.name), f.name, *self.LIMITS[f.name])

    @property
    def byte(self) -> int:
        """Always 0, bytes are whole numbers."""
        return 0

    def __getitem__(self, key: SizeUnit | int) -> int:
        unit = key if isinstance(key, SizeUnit) else SizeUnit.from_index(key)
        return getattr(self, unit.name.lower())

    def __iter__(self) -> Iterator[int]:
        return iter(self.as_tuple())

    def __len__(self) -> int:
        return len(SizeUnit)

    def as_tuple(self) -> tuple[int, ...]:
        """Decimal places ordered from BYTE to EXA."""
        return tuple(self[unit] for unit in SizeUnit.ordered())

    @classmethod
    def builder(cls) -> "UnitDecimalsBuilder":
        """Start a builder with the DEFAULT decimal places."""
        return UnitDecimalsBuilder()


class UnitDecimalsBuilder:
    """
    Step-by-step composition of a UnitDecimals, each with_*() call is range-checked.

    Raises:
        TypeError: If decimals is not an int.
        ValueError: If decimals is out of range for the unit.
    """

    def __init__(self) -> None:
        self._decimals = UnitDecimals.DEFAULT

    def with_kilo(self, decimals: int) -> Self:
        return self._with(kilo=decimals)

    def with_mega(self, decimals: int) -> Self:
        return self._with(mega=decimals)

    def with_giga(self, decimals: int) -> Self:
        return self._with(giga=decimals)

    def with_tera(self, decimals: int) -> Self:
        return self._with(tera=decimals)

    def with_peta(self, decimals: int) -> Self:
        return self._with(peta=decimals)

    def with_exa(self, decimals: int) -> Self:
        return self._with(exa=decimals)

    def build(self) -> UnitDecimals:
        return self._decimals

    def _with(self, **kwargs: int) -> Self:
        self._decimals = replace(self._decimals, **kwargs)
        return self


# Methods --------------------------------------------------------------------------------------------------------------

def _validate_decimals(decimals: int, unit_name: str, min_: int, max_: int):
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise TypeError(f"{unit_name} decimals must be int, got {fmt_type(decimals)}")
    if not min_ <= decimals <= max_:
        raise ValueError(f"{unit_name} decimals must be in range [{min_}, {max_}], got {fmt_value(decimals)}")


UnitDecimals.DEFAULT = UnitDecimals()
DEFAULT = UnitDecimals.DEFAULT
