"""
Datasize display preferences from TOML.

Applications keep their formatting preferences in a TOML file under a
[datasize] table (a file holding only the keys at top level is accepted too):

    [datasize]
    base = "binary"            # or "decimal"
    suffixes = "iso80000"      # preset name, or a table with byte..exa keys
    decimal_separator = ","

    [datasize.decimals]
    mega = 2
    exa = 0

Missing keys keep their defaults. Without a suffixes key the suffixes follow
the base: ISO80000 for binary, SI for decimal. Unknown keys and invalid values raise
ConfigError naming the offending key.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

# Third-party ----------------------------------------------------------------------------------------------------------
import toml

# Local ----------------------------------------------------------------------------------------------------------------
from .decimals import UnitDecimals
from .formatters import fmt_size
from .sentinels import UNSET, UnsetType, ifnotunset
from .suffixes import ISO80000, SI, UnitSuffixes
from .units import Base
from .utils import fmt_type, fmt_value

TABLE_NAME = "datasize"
KNOWN_KEYS = ("base", "suffixes", "decimal_separator", "decimals")


# Classes --------------------------------------------------------------------------------------------------------------

class ConfigError(ValueError):
    """Invalid datasize configuration."""


@dataclass(frozen=True)
class FormatOptions:
    """
    Bundle of fmt_size() arguments.

    Examples:
        >>> FormatOptions().format(2_000_000)
        '1.9 MiB'
        >>> FormatOptions(use_binary=False, suffixes=SI, decimal_separator=",").format(2_000_000)
        '2,0 MB'
    """
    use_binary: bool = True
    suffixes: UnitSuffixes | UnsetType = UNSET
    decimal_separator: str | UnsetType = UNSET
    decimals: UnitDecimals = UnitDecimals.DEFAULT

    @property
    def unit_suffixes(self) -> UnitSuffixes:
        """Suffixes in effect, UNSET follows the base: ISO80000 for binary, SI for decimal."""
        return ifnotunset(self.suffixes, default_factory=lambda: ISO80000 if self.use_binary else SI)

    def format(self, value: int) -> str:
        return fmt_size(value, self.use_binary, self.unit_suffixes, self.decimal_separator, self.decimals)


# Methods --------------------------------------------------------------------------------------------------------------

def load_options(path: str | os.PathLike[str]) -> FormatOptions:
    """
    Read FormatOptions from a TOML file.

    Raises:
        OSError: If the file cannot be read.
        ConfigError: If the file is not valid TOML or holds invalid options.
    """
    try:
        data = toml.load(os.fspath(path))
    except toml.TomlDecodeError as e:
        raise ConfigError(f"invalid TOML in {os.fspath(path)}: {e}") from e
    return options_from_dict(data)


def loads_options(text: str) -> FormatOptions:
    """Read FormatOptions from a TOML document string."""
    try:
        data = toml.loads(text)
    except toml.TomlDecodeError as e:
        raise ConfigError(f"invalid TOML: {e}") from e
    return options_from_dict(data)


def options_from_dict(data: Mapping[str, Any]) -> FormatOptions:
    """
    Build FormatOptions from already parsed configuration data.

    Uses data["datasize"] when present, otherwise data itself.

    Raises:
        ConfigError: On unknown keys, unknown presets, bad types or out-of-range decimals.
    """
    if not isinstance(data, Mapping):
        raise ConfigError(f"configuration must be a mapping, got {fmt_type(data)}")

    table = data.get(TABLE_NAME, data)
    if not isinstance(table, Mapping):
        raise ConfigError(f"[{TABLE_NAME}] must be a table, got {fmt_type(table)}")

    unknown = sorted(set(table) - set(KNOWN_KEYS))
    if unknown:
        raise ConfigError(f"unknown {TABLE_NAME} option(s) {unknown}, expected any of {list(KNOWN_KEYS)}")

    kwargs: dict[str, Any] = {}
    if "base" in table:
        kwargs["use_binary"] = _parse_base(table["base"])
    if "suffixes" in table:
        kwargs["suffixes"] = _parse_suffixes(table["suffixes"])
    if "decimal_separator" in table:
        kwargs["decimal_separator"] = _parse_separator(table["decimal_separator"])
    if "decimals" in table:
        kwargs["decimals"] = _parse_decimals(table["decimals"])
    return FormatOptions(**kwargs)


def _parse_base(value: Any) -> bool:
    try:
        return Base(str(value).lower()) is Base.BINARY
    except ValueError:
        raise ConfigError(
            f"base must be one of {[b.value for b in Base]}, got {fmt_value(value)}"
        ) from None


def _parse_suffixes(value: Any) -> UnitSuffixes:
    if isinstance(value, str):
        try:
            return UnitSuffixes.preset(value)
        except ValueError as e:
            raise ConfigError(f"suffixes: {e}") from None

    if isinstance(value, Mapping):
        builder = UnitSuffixes.builder()
        for name, suffix in value.items():
            setter = getattr(builder, f"with_{name}", None)
            if setter is None:
                raise ConfigError(f"suffixes: unknown unit {fmt_value(name)}")
            try:
                setter(suffix)
            except TypeError as e:
                raise ConfigError(f"suffixes.{name}: {e}") from e
        return builder.build()

    raise ConfigError(f"suffixes must be a preset name or a table, got {fmt_type(value)}")


def _parse_separator(value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"decimal_separator must be str, got {fmt_type(value)}")
    return value


def _parse_decimals(value: Any) -> UnitDecimals:
    if not isinstance(value, Mapping):
        raise ConfigError(f"decimals must be a table, got {fmt_type(value)}")

    settable = {f.name for f in fields(UnitDecimals)}
    builder = UnitDecimals.builder()
    for name, places in value.items():
        if name not in settable:
            raise ConfigError(f"decimals: unit {fmt_value(name)} is not configurable, expected any of {sorted(settable)}")
        try:
            getattr(builder, f"with_{name}")(places)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"decimals.{name}: {e}") from e
    return builder.build()
