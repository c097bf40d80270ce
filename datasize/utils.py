"""
Datasize utilities shared across the package.

Contains the small formatting helpers used in exception messages.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any) -> str:
    """
    Get the class name of an object or a class.

    Both `class_name(10)` and `class_name(int)` return 'int'.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(UnitSuffixes)
        'UnitSuffixes'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    return cls.__name__


def fmt_type(obj: Any) -> str:
    """Format type information for exception messages.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(None)
        '<NoneType>'
    """
    return f"<{class_name(obj)}>"


def fmt_value(obj: Any, max_repr: int = 80) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Long reprs are truncated to `max_repr` characters followed by '...'.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("MiB")
        "<str: 'MiB'>"
    """
    repr_ = _safe_repr(obj)
    if len(repr_) > max_repr:
        repr_ = repr_[:max(1, max_repr)] + "..."
    return f"<{type(obj).__name__}: {repr_}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _safe_repr(obj: Any) -> str:
    """
    Defensive repr() call - handle broken __repr__ methods gracefully
    """
    try:
        return repr(obj)
    except Exception as e:
        return f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"
