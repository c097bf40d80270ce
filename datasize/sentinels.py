"""
Sentinel object for distinguishing an unprovided argument from None.

Sentinels:
    UNSET: Represents an unprovided optional argument (distinguishes from None)

Helper Functions:
    ifnotunset: Return default if value is UNSET, otherwise return value

Example:
    >>> def fmt_size(value, ..., decimal_separator: str | UnsetType = UNSET) -> str:
    ...     sep = ifnotunset(decimal_separator, default_factory=locale_decimal_point)
"""

from typing import Any, Callable, Final

__all__ = [
    'UNSET',
    'UnsetType',
    'ifnotunset',
]


# Sentinel Type --------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Sentinel type for UNSET.

    Singleton optimized for identity checks: `if arg is UNSET:`. Falsy, pickles
    back to the same instance.
    """
    __slots__ = ()

    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNSET: Final[UnsetType] = UnsetType()
"""
Sentinel representing an unprovided optional argument.

Used where None is not a meaningful "use the default" marker, e.g. the decimal
separator of the size formatters.
"""


# Helper Functions -----------------------------------------------------------------------------------------------------

def ifnotunset(value: Any, *, default: Any = None, default_factory: Callable[[], Any] | None = None) -> Any:
    """
    Return value if it's not UNSET, otherwise return default.

    Args:
        value: The value to check. If not UNSET, this value is returned.
        default: The fallback value when value is UNSET.
        default_factory: Callable returning the fallback value. Takes precedence over default.

    Raises:
        ValueError: If both default and default_factory are provided.

    Example:
        >>> ifnotunset(UNSET, default=".")
        '.'
        >>> ifnotunset(",", default=".")
        ','
    """
    if value is not UNSET:
        return value

    if default_factory is not None and default is not None:
        raise ValueError("Cannot specify both default and default_factory")

    if default_factory is not None:
        return default_factory()

    return default
