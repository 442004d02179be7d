"""Functions that extract characters and substrings.

Positions are 0-based. Out-of-range positions and lengths are clipped, never
raised: the worst case is an empty string.
"""

__docformat__ = 'google'

__all__ = [
    'char_at',
    'code_point_at',
    'grapheme_at',
    'substr',
    'substring',
    'slice',
    'first',
    'last',
    'truncate',
    'prune'
]

from typing import Any, Optional
from awesome_string.coercion import coerce_to_string
from awesome_string.helpers import clip_number, to_integer
from awesome_string.patterns import GRAPHEME_PATTERN, MAX_SAFE_INTEGER, WORD_PATTERN

def char_at(subject: Any = None, position: Any = 0) -> str:
    """
    Get the character of `subject` at `position`.

    Example:
        >>> char_at('helicopter', 0)
        'h'
        >>> char_at('helicopter', 100)
        ''
    """
    subject_string = coerce_to_string(subject)
    index = to_integer(position)
    if index < 0 or index >= len(subject_string):
        return ''
    return subject_string[index]

def code_point_at(subject: Any = None, position: Any = 0) -> Optional[int]:
    """
    Get the code point of the character of `subject` at `position`.

    Returns:
        Code point, or None if `position` is out of range

    Example:
        >>> code_point_at('rain', 1)
        97
    """
    character = char_at(subject, position)
    if character == '':
        return None
    return ord(character)

def grapheme_at(subject: Any = None, position: Any = 0) -> str:
    """
    Get the user-perceived character of `subject` at `position`.

    Positions count graphemes, so a letter and its combining marks take one
    position.

    Example:
        >>> grapheme_at('cafe\\u0301', 3)
        'e\\u0301'
    """
    index = to_integer(position)
    if index < 0:
        return ''
    for current, match in enumerate(GRAPHEME_PATTERN.finditer(coerce_to_string(subject))):
        if current == index:
            return match.group()
    return ''

def substr(subject: Any = None, start: Any = 0, length: Any = None) -> str:
    """
    Extract `length` characters of `subject` starting at `start`.

    Args:
        subject: Text to extract from
        start: Start position. Negative values count from the end.
        length: Number of characters to extract. If None, extract to the end.

    Returns:
        Extracted text

    Example:
        >>> substr('infinite loop', 9)
        'loop'
        >>> substr('dreams', 2, 2)
        'ea'
        >>> substr('infinite loop', -4, 1)
        'l'
    """
    subject_string = coerce_to_string(subject)
    size = len(subject_string)
    begin = to_integer(start)
    if begin < 0:
        begin = max(size + begin, 0)
    count = size if length is None else to_integer(length)
    if count <= 0:
        return ''
    return subject_string[begin:begin + count]

def substring(subject: Any = None, start: Any = 0, end: Any = None) -> str:
    """
    Extract the characters of `subject` between `start` and `end`.

    Negative positions are treated as 0 and the two positions are swapped
    when `start` is greater than `end`.

    Example:
        >>> substring('infinite loop', 9, 12)
        'loo'
        >>> substring('infinite loop', 12, 9)
        'loo'
    """
    subject_string = coerce_to_string(subject)
    size = len(subject_string)
    begin = clip_number(to_integer(start), 0, size)
    finish = size if end is None else clip_number(to_integer(end), 0, size)
    if begin > finish:
        begin, finish = finish, begin
    return subject_string[begin:finish]

def slice(subject: Any = None, start: Any = 0, end: Any = None) -> str:
    """
    Extract a slice of `subject`; negative positions count from the end.

    Example:
        >>> slice('infinite loop', -4, -1)
        'loo'
    """
    subject_string = coerce_to_string(subject)
    finish = None if end is None else to_integer(end)
    return subject_string[to_integer(start):finish]

def first(subject: Any = None, length: Any = 1) -> str:
    """
    Get the first `length` characters of `subject`.

    Example:
        >>> first('Good day', 4)
        'Good'
    """
    subject_string = coerce_to_string(subject)
    count = to_integer(length, 1)
    if count <= 0:
        return ''
    return subject_string[:count]

def last(subject: Any = None, length: Any = 1) -> str:
    """
    Get the last `length` characters of `subject`.

    Example:
        >>> last('Good day', 4)
        ' day'
    """
    subject_string = coerce_to_string(subject)
    count = to_integer(length, 1)
    if count <= 0:
        return ''
    return subject_string[-count:]

def _truncation_limits(subject_string: str, length: Any, end: Any):
    if length is None:
        limit = len(subject_string)
    else:
        limit = clip_number(to_integer(length, len(subject_string)), 0, MAX_SAFE_INTEGER)
    return limit, coerce_to_string(end, '...')

def truncate(subject: Any = None, length: Any = None, end: Any = '...') -> str:
    """
    Cut `subject` to `length` characters, ending it with `end`.

    The result, `end` included, is at most `length` characters long unless
    `end` alone is longer.

    Args:
        subject: Text to truncate
        length: Maximum length. If None, the text is returned unchanged.
        end: Text appended to the truncated text

    Returns:
        Truncated text

    Example:
        >>> truncate('Once upon a time there lived in a certain village', 7)
        'Once...'
        >>> truncate('Little Red Riding Hood', 9, '...')
        'Little...'
    """
    subject_string = coerce_to_string(subject)
    limit, end_string = _truncation_limits(subject_string, length, end)
    if limit >= len(subject_string):
        return subject_string
    return subject_string[:max(limit - len(end_string), 0)] + end_string

def prune(subject: Any = None, length: Any = None, end: Any = '...') -> str:
    """
    Cut `subject` at a word boundary so the result fits in `length` characters.

    Unlike `truncate`, words are never split.

    Example:
        >>> prune('Once upon a time there lived in a certain village', 7)
        'Once...'
        >>> prune('Little Red Riding Hood', 20)
        'Little Red Riding...'
    """
    subject_string = coerce_to_string(subject)
    limit, end_string = _truncation_limits(subject_string, length, end)
    if limit >= len(subject_string):
        return subject_string

    available = limit - len(end_string)
    cut = 0
    for match in WORD_PATTERN.finditer(subject_string):
        if match.end() > available:
            break
        cut = match.end()
    return subject_string[:cut] + end_string
