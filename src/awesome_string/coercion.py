"""Conversion of loosely-typed subjects to text and numbers.

Every public function in this package coerces its subject with
`coerce_to_string` before doing any work, so all of them accept `None`,
numbers, lists and arbitrary objects as well as `str`.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'Textual',

    # Functions
    'coerce_to_string',
    'coerce_to_number'
]

import math
from typing import Any, Protocol, Union, runtime_checkable
from awesome_string.patterns import NUMERIC_PATTERN

@runtime_checkable
class Textual(Protocol):
    """Capability of any type that knows its own canonical text form.

    Objects implementing `to_text` are coerced with it; all other objects
    fall back to `__str__`.

    Example:
        >>> class Planet:
        ...     def to_text(self):
        ...         return 'Saturn'
        >>> coerce_to_string(Planet())
        'Saturn'
    """
    def to_text(self) -> str:
        ...

def _format_number(value: Union[int, float]) -> str:
    if isinstance(value, float) and math.isnan(value):
        return 'NaN'
    if isinstance(value, float) and math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)

def coerce_to_string(value: Any, default_value: str = '') -> str:
    """
    Get the text representation of `value`.

    Args:
        value: Any value
        default_value: Text returned when `value` is None

    Returns:
        Canonical text of `value`

    Example:
        >>> coerce_to_string(None)
        ''
        >>> coerce_to_string(1500.0)
        '1500'
        >>> coerce_to_string(['bird', 'flight', None])
        'bird,flight,'
    """
    if value is None:
        return default_value
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return _format_number(value)
    if isinstance(value, (list, tuple)):
        return ','.join(coerce_to_string(item) for item in value)
    if isinstance(value, Textual):
        return value.to_text()
    return str(value)

def coerce_to_number(value: Any, default_value: Union[int, float] = 0) -> Union[int, float]:
    """
    Get the numeric value of `value`.

    Args:
        value: Any value
        default_value: Number returned when `value` is None or not numeric

    Returns:
        `value` itself for numbers, the parsed value for numeric text,
        otherwise `default_value`

    Example:
        >>> coerce_to_number('12.5')
        12.5
        >>> coerce_to_number('0xff')
        255
        >>> coerce_to_number('twelve', 1)
        1
    """
    if value is None:
        return default_value
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    text = coerce_to_string(value).strip()
    if NUMERIC_PATTERN.fullmatch(text) is None:
        return default_value
    if text[:2].lower() == '0x':
        return int(text, 16)
    return float(text)
