"""Functions that count characters, words and substrings."""

__docformat__ = 'google'

__all__ = [
    'count',
    'count_graphemes',
    'count_words',
    'count_substrings',
    'count_where'
]

import re
from typing import Any, Callable, Optional, Union
from awesome_string.coercion import coerce_to_string
from awesome_string.helpers import string_reduce
from awesome_string.split import graphemes, words

def count(subject: Any = None) -> int:
    return len(coerce_to_string(subject))

def count_graphemes(subject: Any = None) -> int:
    """
    Count the user-perceived characters in `subject`.

    Example:
        >>> count_graphemes('cafe\\u0301')
        4
    """
    return len(graphemes(subject))

def count_words(subject: Any = None, pattern: Optional[Union[str, re.Pattern]] = None, flags: str = '') -> int:
    """
    Count the words in `subject`.

    Takes the same arguments as `awesome_string.split.words`.

    Example:
        >>> count_words('GravityCanCrossDimensions')
        4
        >>> count_words('Earth gravity', '[^\\\\s]+')
        2
    """
    return len(words(subject, pattern, flags))

def count_substrings(subject: Any = None, substring: Any = None) -> int:
    """
    Count the non-overlapping occurrences of `substring` in `subject`.

    Example:
        >>> count_substrings('******', '**')
        3
        >>> count_substrings('bird', '')
        0
    """
    subject_string = coerce_to_string(subject)
    substring_string = coerce_to_string(substring)
    if subject_string == '' or substring_string == '':
        return 0
    return subject_string.count(substring_string)

def count_where(subject: Any = None, predicate: Optional[Callable[[str], Any]] = None) -> int:
    """
    Count the characters of `subject` for which `predicate` is truthy.

    Args:
        subject: Text whose characters are tested
        predicate: Called with one argument, the character. Single-argument
            tests such as `str.isalpha` or `awesome_string.query.is_digit`
            can be passed as they are. If not callable, nothing is counted.

    Returns:
        Number of matching characters

    Example:
        >>> count_where('africa654', str.isalpha)
        6
    """
    subject_string = coerce_to_string(subject)
    if subject_string == '' or not callable(predicate):
        return 0
    return string_reduce(
        subject_string,
        lambda total, character, index, characters: total + 1 if predicate(character) else total,
        0
    )
