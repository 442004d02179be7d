"""Functions that split text into words, characters and substrings."""

__docformat__ = 'google'

__all__ = [
    'words',
    'chars',
    'code_points',
    'graphemes',
    'split'
]

import re
from typing import Any, List, Optional, Union
from awesome_string.coercion import coerce_to_string
from awesome_string.helpers import compile_pattern, to_integer
from awesome_string.patterns import GRAPHEME_PATTERN, WORD_PATTERN

def words(subject: Any = None, pattern: Optional[Union[str, re.Pattern]] = None, flags: str = '') -> List[str]:
    """
    Split `subject` into words.

    Words are separated by punctuation, whitespace, case transitions and
    digit transitions. Letters carrying combining marks stay in one word.

    Args:
        subject: Text to split
        pattern: Optional regex (text or compiled) matching a single word.
            Text patterns are compiled with `flags`.
        flags: JavaScript-style flag letters for a text `pattern`

    Returns:
        Every match of the word pattern, in order

    Example:
        >>> words('GoodbyeBlueSky')
        ['Goodbye', 'Blue', 'Sky']
        >>> words('-Goodbye-Blue-Sky-')
        ['Goodbye', 'Blue', 'Sky']
        >>> words('XMLHttpRequest')
        ['XML', 'Http', 'Request']
        >>> words('gravity', '\\\\w{1,2}')
        ['gr', 'av', 'it', 'y']
    """
    subject_string = coerce_to_string(subject)
    word_pattern = WORD_PATTERN if pattern is None else compile_pattern(pattern, flags)
    return [match.group() for match in word_pattern.finditer(subject_string)]

def chars(subject: Any = None) -> List[str]:
    """
    Split `subject` into characters.

    Example:
        >>> chars('cloud')
        ['c', 'l', 'o', 'u', 'd']
    """
    return list(coerce_to_string(subject))

def code_points(subject: Any = None) -> List[int]:
    """
    Get the Unicode code point of every character in `subject`.

    Example:
        >>> code_points('cafe\\u0301')
        [99, 97, 102, 101, 769]
    """
    return [ord(character) for character in coerce_to_string(subject)]

def graphemes(subject: Any = None) -> List[str]:
    """
    Split `subject` into user-perceived characters.

    A base character and the combining marks that follow it stay together.

    Example:
        >>> graphemes('man\\u0303ana')
        ['m', 'a', 'n\\u0303', 'a', 'n', 'a']
    """
    return GRAPHEME_PATTERN.findall(coerce_to_string(subject))

def split(subject: Any = None, separator: Optional[Union[str, re.Pattern]] = None, limit: Optional[int] = None) -> List[str]:
    """
    Split `subject` on `separator`.

    Args:
        subject: Text to split
        separator: Literal text or compiled regex to split on. If None, the
            whole text is returned as a single item. An empty separator
            splits into characters.
        limit: Maximum number of items returned. None or a negative value
            returns every item.

    Returns:
        List of substrings

    Example:
        >>> split('rage against the dying of the light', ' ', 3)
        ['rage', 'against', 'the']
        >>> split('*dying*star*', re.compile('\\\\*'))
        ['', 'dying', 'star', '']
    """
    subject_string = coerce_to_string(subject)
    if separator is None:
        parts = [subject_string]
    elif isinstance(separator, re.Pattern):
        parts = separator.split(subject_string)
    elif coerce_to_string(separator) == '':
        parts = list(subject_string)
    else:
        parts = subject_string.split(coerce_to_string(separator))

    limit_int = None if limit is None else to_integer(limit)
    if limit_int is None or limit_int < 0:
        return parts
    return parts[:limit_int]
