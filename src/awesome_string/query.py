"""Predicates over text.

Every predicate tests the whole coerced subject and returns a bool; none of
them raises for missing or oddly-typed input.
"""

__docformat__ = 'google'

__all__ = [
    'is_alpha',
    'is_alpha_digit',
    'is_digit',
    'is_empty',
    'is_blank',
    'is_numeric',
    'is_lower_case',
    'is_upper_case',
    'is_string',
    'starts_with',
    'ends_with',
    'includes',
    'matches'
]

import math
import re
from typing import Any, Optional, Union
from awesome_string.coercion import coerce_to_string
from awesome_string.helpers import clip_number, compile_pattern, to_integer
from awesome_string.patterns import (
    ALPHA_PATTERN,
    ALPHA_DIGIT_PATTERN,
    BLANK_PATTERN,
    DIGIT_PATTERN,
    NUMERIC_PATTERN
)

def is_alpha(subject: Any = None) -> bool:
    """
    Check whether `subject` contains only letters.

    Combining marks following a letter are accepted.

    Example:
        >>> is_alpha('bart')
        True
        >>> is_alpha('lisa and bart')
        False
        >>> is_alpha('')
        False
    """
    return ALPHA_PATTERN.fullmatch(coerce_to_string(subject)) is not None

def is_alpha_digit(subject: Any = None) -> bool:
    """
    Check whether `subject` contains only letters and digits.

    Example:
        >>> is_alpha_digit('year2020')
        True
        >>> is_alpha_digit('40-20')
        False
    """
    return ALPHA_DIGIT_PATTERN.fullmatch(coerce_to_string(subject)) is not None

def is_digit(subject: Any = None) -> bool:
    """
    Check whether `subject` contains only the digits 0-9.

    Example:
        >>> is_digit('35')
        True
        >>> is_digit('1.5')
        False
    """
    return DIGIT_PATTERN.fullmatch(coerce_to_string(subject)) is not None

def is_empty(subject: Any = None) -> bool:
    return coerce_to_string(subject) == ''

def is_blank(subject: Any = None) -> bool:
    """
    Check whether `subject` is empty or contains only whitespace.

    Example:
        >>> is_blank(' \\t')
        True
    """
    return BLANK_PATTERN.fullmatch(coerce_to_string(subject)) is not None

def is_numeric(subject: Any = None) -> bool:
    """
    Check whether `subject` is a finite number or text representing one.

    Booleans are not numeric.

    Example:
        >>> is_numeric('-20.5')
        True
        >>> is_numeric('1.5E+2')
        True
        >>> is_numeric('five')
        False
    """
    if subject is None or isinstance(subject, bool):
        return False
    if isinstance(subject, (int, float)):
        return math.isfinite(subject)
    return NUMERIC_PATTERN.fullmatch(coerce_to_string(subject)) is not None

def is_lower_case(subject: Any = None) -> bool:
    """
    Check whether `subject` contains only lower case letters.

    Example:
        >>> is_lower_case('motorcycle')
        True
        >>> is_lower_case('T1000')
        False
    """
    subject_string = coerce_to_string(subject)
    return is_alpha(subject_string) and subject_string.lower() == subject_string

def is_upper_case(subject: Any = None) -> bool:
    """
    Check whether `subject` contains only upper case letters.

    Example:
        >>> is_upper_case('ACDC')
        True
    """
    subject_string = coerce_to_string(subject)
    return is_alpha(subject_string) and subject_string.upper() == subject_string

def is_string(subject: Any = None) -> bool:
    """
    Check whether `subject` itself is a `str`. The subject is not coerced.

    Example:
        >>> is_string('vacation')
        True
        >>> is_string(560)
        False
    """
    return isinstance(subject, str)

def starts_with(subject: Any = None, start: Any = None, position: Any = 0) -> bool:
    """
    Check whether `subject` starts with `start` at `position`.

    Example:
        >>> starts_with('say hello to my little friend', 'say hello')
        True
        >>> starts_with('say hello to my little friend', 'hello', 4)
        True
    """
    subject_string = coerce_to_string(subject)
    begin = clip_number(to_integer(position), 0, len(subject_string))
    return subject_string.startswith(coerce_to_string(start), begin)

def ends_with(subject: Any = None, end: Any = None, position: Any = None) -> bool:
    """
    Check whether `subject` ends with `end`, considering only the text before `position`.

    Example:
        >>> ends_with('the world is yours', 'is yours')
        True
        >>> ends_with('the world is yours', 'world', 9)
        True
    """
    subject_string = coerce_to_string(subject)
    size = len(subject_string)
    finish = size if position is None else clip_number(to_integer(position, size), 0, size)
    return subject_string.endswith(coerce_to_string(end), 0, finish)

def includes(subject: Any = None, search: Any = None, position: Any = 0) -> bool:
    """
    Check whether `subject` contains `search` at or after `position`.

    Example:
        >>> includes('galaxy', 'alax')
        True
        >>> includes('galaxy', 'gal', 1)
        False
    """
    subject_string = coerce_to_string(subject)
    begin = clip_number(to_integer(position), 0, len(subject_string))
    return coerce_to_string(search) in subject_string[begin:]

def matches(subject: Any = None, pattern: Optional[Union[str, re.Pattern]] = None, flags: str = '') -> bool:
    """
    Check whether `pattern` matches anywhere in `subject`.

    Args:
        subject: Text to test
        pattern: Regex text or compiled pattern. If None, nothing matches.
        flags: JavaScript-style flag letters for a text `pattern`

    Returns:
        True if `pattern` matches, else False

    Example:
        >>> matches('pacific ocean', 'PACIFIC', 'i')
        True
    """
    if pattern is None:
        return False
    return compile_pattern(pattern, flags).search(coerce_to_string(subject)) is not None
