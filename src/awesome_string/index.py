"""Functions that find the position of a substring or pattern.

All of them return -1 when nothing is found.
"""

__docformat__ = 'google'

__all__ = [
    'index_of',
    'last_index_of',
    'search'
]

import re
from typing import Any, Union
from awesome_string.coercion import coerce_to_string
from awesome_string.helpers import clip_number, compile_pattern, to_integer

def index_of(subject: Any = None, search: Any = None, from_index: Any = 0) -> int:
    """
    Get the position of the first occurrence of `search` in `subject`.

    Args:
        subject: Text to search in
        search: Text to search for
        from_index: Position to start searching from

    Returns:
        Position of the occurrence, or -1

    Example:
        >>> index_of('we have a mission', 'a', 6)
        8
    """
    subject_string = coerce_to_string(subject)
    start = clip_number(to_integer(from_index), 0, len(subject_string))
    return subject_string.find(coerce_to_string(search), start)

def last_index_of(subject: Any = None, search: Any = None, from_index: Any = None) -> int:
    """
    Get the position of the last occurrence of `search` in `subject`.

    Args:
        subject: Text to search in
        search: Text to search for
        from_index: Last position at which an occurrence may start. If None,
            the whole text is searched.

    Returns:
        Position of the occurrence, or -1

    Example:
        >>> last_index_of('we have a mission', 'a')
        8
        >>> last_index_of('we have a mission', 'a', 7)
        4
    """
    subject_string = coerce_to_string(subject)
    search_string = coerce_to_string(search)
    size = len(subject_string)
    start = size if from_index is None else clip_number(to_integer(from_index, size), 0, size)
    return subject_string.rfind(search_string, 0, start + len(search_string))

def search(subject: Any = None, pattern: Union[str, re.Pattern] = '', from_index: Any = 0) -> int:
    """
    Get the position of the first match of `pattern` in `subject`.

    Text patterns are compiled as regular expressions. The match is searched
    for in the text starting at `from_index`, so `^` anchors to that position.

    Example:
        >>> import re
        >>> search('we have a mission', re.compile('\\\\s'))
        2
        >>> search('we have a mission', 'a', 6)
        8
    """
    subject_string = coerce_to_string(subject)
    start = clip_number(to_integer(from_index), 0, len(subject_string))
    match = compile_pattern(pattern).search(subject_string[start:])
    if match is None:
        return -1
    return match.start() + start
