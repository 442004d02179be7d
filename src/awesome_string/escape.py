"""HTML and regular expression escaping."""

__docformat__ = 'google'

__all__ = [
    'escape_html',
    'unescape_html',
    'escape_reg_exp'
]

from typing import Any
from awesome_string.coercion import coerce_to_string
from awesome_string.patterns import (
    HTML_ESCAPE,
    HTML_SPECIAL_CHARACTERS_PATTERN,
    HTML_UNESCAPE,
    REGEXP_SPECIAL_CHARACTERS_PATTERN
)

def escape_html(subject: Any = None) -> str:
    """
    Escape the HTML special characters `< > & " ' \\`` in `subject`.

    Example:
        >>> escape_html('<p>wonderful world</p>')
        '&lt;p&gt;wonderful world&lt;/p&gt;'
    """
    return HTML_SPECIAL_CHARACTERS_PATTERN.sub(
        lambda match: HTML_ESCAPE[match.group()],
        coerce_to_string(subject)
    )

def unescape_html(subject: Any = None) -> str:
    """
    Unescape named, decimal and hexadecimal references to the HTML special characters.

    Example:
        >>> unescape_html('&lt;p&gt;wonderful world&lt;/p&gt;')
        '<p>wonderful world</p>'
        >>> unescape_html('&#x003C;b&#0062;')
        '<b>'
    """
    unescaped = coerce_to_string(subject)
    for character, pattern in HTML_UNESCAPE.items():
        unescaped = pattern.sub(character, unescaped)
    return unescaped

def escape_reg_exp(subject: Any = None) -> str:
    """
    Escape the regular expression special characters `-[]/{}()*+?.\\\\^$|` in `subject`.

    Example:
        >>> escape_reg_exp('(hours)[minutes]{seconds}')
        '\\\\(hours\\\\)\\\\[minutes\\\\]\\\\{seconds\\\\}'
    """
    return REGEXP_SPECIAL_CHARACTERS_PATTERN.sub(
        lambda match: '\\' + match.group(),
        coerce_to_string(subject)
    )
