#
# Datasize Unit Suffixes
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, fields, replace
from typing import ClassVar, Iterator, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .units import SizeUnit
from .utils import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class UnitSuffixes:
    """
    Display strings appended after the number, one per SizeUnit.

    Suffixes include any leading space, e.g. " MiB" renders "1.9 MiB" while the
    dense GNU style "M" renders "1.9M". Index by SizeUnit or by table index.

    Prefer the presets SI, ISO80000, CUSTOMARY, GNU, GNU_SI, or compose a custom
    set with UnitSuffixes.builder(), which starts from CUSTOMARY.

    Examples:
        >>> ISO80000[SizeUnit.MEGA]
        ' MiB'
        >>> UnitSuffixes.builder().with_kilo(" kB").build().kilo
        ' kB'
    """

    byte: str
    kilo: str
    mega: str
    giga: str
    tera: str
    peta: str
    exa: str

    PRESETS: ClassVar[dict[str, "UnitSuffixes"]]

    def __post_init__(self):
        for f in fields(self):
            _validate_suffix(getattr(self, f.name), f.name)

    def __getitem__(self, key: SizeUnit | int) -> str:
        unit = key if isinstance(key, SizeUnit) else SizeUnit.from_index(key)
        return getattr(self, unit.name.lower())

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_tuple())

    def __len__(self) -> int:
        return len(SizeUnit)

    def as_tuple(self) -> tuple[str, ...]:
        """Suffixes ordered from BYTE to EXA."""
        return tuple(self[unit] for unit in SizeUnit.ordered())

    @classmethod
    def builder(cls) -> "UnitSuffixesBuilder":
        """Start a builder with every suffix set to the CUSTOMARY preset."""
        return UnitSuffixesBuilder()

    @classmethod
    def preset(cls, name: str) -> Self:
        """
        Lookup a preset by case-insensitive name: si, iso80000, customary, gnu, gnu_si.

        Raises:
            ValueError: If no preset has that name.
        """
        if not isinstance(name, str):
            raise TypeError(f"preset name must be str, got {fmt_type(name)}")
        key = name.strip().lower().replace("-", "_")
        try:
            return cls.PRESETS[key]
        except KeyError:
            raise ValueError(f"unknown suffixes preset {fmt_value(name)}, expected one of {sorted(cls.PRESETS)}") from None


class UnitSuffixesBuilder:
    """
    Step-by-step composition of a UnitSuffixes.

    Every with_*() call rejects None and returns the builder for chaining.
    """

    def __init__(self) -> None:
        self._suffixes = CUSTOMARY

    def with_byte(self, suffix: str) -> Self:
        return self._with(byte=suffix)

    def with_kilo(self, suffix: str) -> Self:
        return self._with(kilo=suffix)

    def with_mega(self, suffix: str) -> Self:
        return self._with(mega=suffix)

    def with_giga(self, suffix: str) -> Self:
        return self._with(giga=suffix)

    def with_tera(self, suffix: str) -> Self:
        return self._with(tera=suffix)

    def with_peta(self, suffix: str) -> Self:
        return self._with(peta=suffix)

    def with_exa(self, suffix: str) -> Self:
        return self._with(exa=suffix)

    def build(self) -> UnitSuffixes:
        return self._suffixes

    def _with(self, **kwargs: str) -> Self:
        self._suffixes = replace(self._suffixes, **kwargs)
        return self


# Methods --------------------------------------------------------------------------------------------------------------

def _validate_suffix(suffix: str, unit_name: str):
    if suffix is None:
        raise TypeError(f"{unit_name} suffix cannot be None")
    if not isinstance(suffix, str):
        raise TypeError(f"{unit_name} suffix must be str, got {fmt_type(suffix)}")


# Presets --------------------------------------------------------------------------------------------------------------

# @formatter:off
SI = UnitSuffixes(" B", " kB", " MB", " GB", " TB", " PB", " EB")
"""SI prefixes, kB is 1000 bytes. Also used for binary calculation when that is the local custom."""

ISO80000 = UnitSuffixes(" B", " KiB", " MiB", " GiB", " TiB", " PiB", " EiB")
"""ISO/IEC 80000 binary prefixes, KiB is 1024 bytes."""

CUSTOMARY = UnitSuffixes(" B", " KB", " MB", " GB", " TB", " PB", " EB")
"""Customary notation with uppercase K, ambiguous between 1000 and 1024."""

GNU = UnitSuffixes("", "K", "M", "G", "T", "P", "E")
"""Dense single-letter style of GNU tools, e.g. 'ls -h'."""

GNU_SI = UnitSuffixes("", "k", "M", "G", "T", "P", "E")
"""Dense GNU style with SI lowercase k, e.g. 'ls -h --si'."""
# @formatter:on

UnitSuffixes.PRESETS = {
    "si": SI,
    "iso80000": ISO80000,
    "customary": CUSTOMARY,
    "gnu": GNU,
    "gnu_si": GNU_SI,
}
