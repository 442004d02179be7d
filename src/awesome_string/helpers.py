"""Internal helpers shared by the string functions.

The folds in this module reject bad arguments instead of coercing them away:
they are building blocks for the public functions, not part of the public
surface.
"""

__docformat__ = 'google'

__all__ = [
    'string_reduce',
    'string_reduce_right',
    'to_integer',
    'clip_number',
    'build_padding',
    'compile_pattern'
]

import math
import re
from typing import Any, Callable, Optional, Union
from awesome_string.coercion import coerce_to_number, coerce_to_string
from awesome_string.patterns import MAX_SAFE_INTEGER, REGEXP_FLAGS

def _check_callable(callback: Callable) -> None:
    if not callable(callback):
        raise TypeError(f'{callback!r} is not callable')

def string_reduce(subject: Any, callback: Callable, initial_value: Any = None) -> Any:
    """
    Fold the characters of `subject` from left to right.

    Args:
        subject: Value whose text is folded
        callback: Called as `callback(accumulator, character, index, characters)`
        initial_value: Starting accumulator. If None, the first character is used.

    Returns:
        The final accumulator

    Raises:
        TypeError: If `callback` is not callable, or if `subject` is empty and
            no `initial_value` is given.

    Example:
        >>> string_reduce('abc', lambda acc, character, index, characters: character + acc)
        'cba'
    """
    _check_callable(callback)
    characters = list(coerce_to_string(subject))
    if initial_value is None and not characters:
        raise TypeError('reduce of empty string with no initial value')

    accumulator = characters[0] if initial_value is None else initial_value
    start = 1 if initial_value is None else 0
    for index in range(start, len(characters)):
        accumulator = callback(accumulator, characters[index], index, characters)
    return accumulator

def string_reduce_right(subject: Any, callback: Callable, initial_value: Any = None) -> Any:
    """
    Fold the characters of `subject` from right to left.

    Same contract as `string_reduce`.

    Example:
        >>> string_reduce_right('abc', lambda acc, character, index, characters: acc + character)
        'cba'
    """
    _check_callable(callback)
    characters = list(coerce_to_string(subject))
    if initial_value is None and not characters:
        raise TypeError('reduce of empty string with no initial value')

    accumulator = characters[-1] if initial_value is None else initial_value
    start = len(characters) - (2 if initial_value is None else 1)
    for index in range(start, -1, -1):
        accumulator = callback(accumulator, characters[index], index, characters)
    return accumulator

def to_integer(value: Any, default_value: int = 0) -> int:
    """
    Truncate `value` to an integer towards zero.

    Non-numeric values and NaN become `default_value`; infinities become
    `MAX_SAFE_INTEGER` with the matching sign.

    Example:
        >>> to_integer(-4.7)
        -4
        >>> to_integer(float('nan'))
        0
    """
    number = coerce_to_number(value, default_value)
    if isinstance(number, float):
        if math.isnan(number):
            return default_value
        if math.isinf(number):
            return MAX_SAFE_INTEGER if number > 0 else -MAX_SAFE_INTEGER
    return int(number)

def clip_number(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))

def build_padding(pad: str, length: int) -> str:
    """
    Repeat `pad` and cut it to exactly `length` characters.

    Example:
        >>> build_padding('-=', 5)
        '-=-=-'
    """
    if pad == '' or length <= 0:
        return ''
    times = length // len(pad) + 1
    return (pad * times)[:length]

def compile_pattern(pattern: Union[str, re.Pattern], flags: Optional[str] = '') -> re.Pattern:
    """
    Resolve a pattern given as text or as a compiled regex.

    Args:
        pattern: Regex text, or an already compiled pattern used verbatim
        flags: JavaScript-style flag letters applied to text patterns (e.g. `'gi'`)

    Returns:
        Compiled pattern

    Example:
        >>> compile_pattern('PACIFIC', 'i').search('pacific ocean') is not None
        True
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    compiled_flags = 0
    for letter in coerce_to_string(flags):
        compiled_flags |= REGEXP_FLAGS.get(letter, 0)
    return re.compile(coerce_to_string(pattern), compiled_flags)
