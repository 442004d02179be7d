"""Regex patterns and constants shared by the string functions.

Building blocks are kept as uncompiled strings so they can be combined;
compiled patterns are documented with the functions that use them.
"""

__docformat__ = 'google'

import re
import regex
import unicodedata
from typing import Dict, List

## Numbers
MAX_SAFE_INTEGER: int = 2 ** 53 - 1
"""Largest integer accepted as a length, position or repeat count.

Larger values (including infinity) are clipped to this one."""

## Character classes
def category_ranges(categories: List[str], stop: int = 0x10000) -> str:
    """Build a character class body covering every code point in `categories`.

    Args:
        categories: Unicode general categories, e.g. `['Lu', 'Lt']`
        stop: First code point not tabulated. Defaults to the end of the BMP.

    Returns:
        Uncompiled character class body (without brackets) of `\\uXXXX` ranges

    Example:
        >>> category_ranges(['Nd'], stop=0x80)
        '\\\\u0030-\\\\u0039'
    """
    ranges = []
    start = None
    for code in range(stop + 1):
        inside = code < stop and unicodedata.category(chr(code)) in categories
        if inside and start is None:
            start = code
        elif not inside and start is not None:
            end = code - 1
            ranges.append(f'\\u{start:04x}' if start == end else f'\\u{start:04x}-\\u{end:04x}')
            start = None
    return ''.join(ranges)

# Building blocks
UPPER_CASE_LETTER: str = category_ranges(['Lu', 'Lt'])
""" Uncompiled character class body of upper and title case letters."""

LOWER_CASE_LETTER: str = category_ranges(['Ll'])
""" Uncompiled character class body of lower case letters."""

LETTER: str = category_ranges(['Lu', 'Ll', 'Lt', 'Lm', 'Lo'])
""" Uncompiled character class body of letters of any case or script."""

DIACRITICAL_MARK: str = '\\u0300-\\u036f\\u1ab0-\\u1aff\\u1dc0-\\u1dff\\u20d0-\\u20ff\\ufe20-\\ufe2f'
""" Uncompiled character class body of combining diacritical marks.

Covers the Combining Diacritical Marks block and its Extended, Supplement,
for Symbols and Half Marks companions."""

DIGIT: str = '0-9'
NON_CHARACTER: str = '\\x00-\\x2f\\x3a-\\x40\\x5b-\\x60\\x7b-\\xbf\\xd7\\xf7'
""" ASCII and Latin-1 code points that are never part of a word."""

GENERAL_PUNCTUATION: str = '\\u2000-\\u206f'
DINGBATS: str = '\\u2700-\\u27bf'
WHITESPACE: str = '\\s\\ufeff'

WORD: str = (
    f'(?:[{UPPER_CASE_LETTER}][{DIACRITICAL_MARK}]*)?(?:[{LOWER_CASE_LETTER}][{DIACRITICAL_MARK}]*)+'
    f'|(?:[{UPPER_CASE_LETTER}][{DIACRITICAL_MARK}]*)+(?![{LOWER_CASE_LETTER}])'
    f'|[{DIGIT}]+'
    f'|[{DINGBATS}]'
    f'|[^{NON_CHARACTER}{GENERAL_PUNCTUATION}{WHITESPACE}]+'
)
""" Uncompiled regex matching a single word.

Alternatives, tried in order:
    * an optional capital followed by lower case letters (`Gravity`, `can`)
    * a run of capitals not followed by a lower case letter (`XML` in `XMLHttp`)
    * a run of digits
    * a single dingbat
    * any other run of characters that are not punctuation or whitespace"""

# Patterns
WORD_PATTERN: re.Pattern = re.compile(WORD)
"""Compiled regex matching words, splitting on case and digit transitions.

Used in `awesome_string.split.words` and every word-based case conversion."""

ALPHA_PATTERN: re.Pattern = re.compile(f'(?:[{LETTER}][{DIACRITICAL_MARK}]*)+')
"""Matches text made only of letters, each optionally followed by combining marks.

Used with `fullmatch` in `awesome_string.query.is_alpha`."""

ALPHA_DIGIT_PATTERN: re.Pattern = re.compile(f'(?:[{LETTER}][{DIACRITICAL_MARK}]*|[{DIGIT}])+')
"""Matches text made only of letters (with combining marks) and digits.

Used with `fullmatch` in `awesome_string.query.is_alpha_digit`."""

DIGIT_PATTERN: re.Pattern = re.compile(f'[{DIGIT}]+')
"""Used with `fullmatch` in `awesome_string.query.is_digit`."""

BLANK_PATTERN: re.Pattern = re.compile(f'[{WHITESPACE}]*')
"""Used with `fullmatch` in `awesome_string.query.is_blank`."""

NUMERIC_PATTERN: re.Pattern = re.compile(
    '\\s*(?:[+-]?(?:[0-9]+\\.?[0-9]*|\\.[0-9]+)(?:[eE][+-]?[0-9]+)?|0[xX][0-9a-fA-F]+)\\s*'
    )
"""Matches decimal literals with optional sign, fraction and exponent, and
unsigned hexadecimal literals.

Used with `fullmatch` in `awesome_string.query.is_numeric` and
`awesome_string.coercion.coerce_to_number`."""

NON_LATIN_PATTERN: re.Pattern = re.compile('[^\\x00-\\x7e]')
"""Matches every character outside printable ASCII.

Used in `awesome_string.manipulate.latinise` and `awesome_string.manipulate.slugify`."""

DIACRITICAL_MARK_PATTERN: re.Pattern = re.compile(f'[{DIACRITICAL_MARK}]+')
"""Used in `awesome_string.manipulate.latinise`."""

APOSTROPHES: List[str] = ["'", '’']
"""Characters that glue a suffix to the previous word (`Newton's`).

Used in `awesome_string.case.title_case`."""

## Escaping
HTML_ESCAPE: Dict[str, str] = {
    '<': '&lt;',
    '>': '&gt;',
    '&': '&amp;',
    '"': '&quot;',
    "'": '&#x27;',
    '`': '&#x60;'
}
"""Characters escaped by `awesome_string.escape.escape_html` and their references."""

HTML_SPECIAL_CHARACTERS_PATTERN: re.Pattern = re.compile(
    f"[{''.join(map(re.escape, HTML_ESCAPE))}]"
    )
"""Used in `awesome_string.escape.escape_html`."""

HTML_UNESCAPE: Dict[str, re.Pattern] = {
    '<': re.compile('(&lt;)|(&#x0*3c;)|(&#0*60;)', re.I),
    '>': re.compile('(&gt;)|(&#x0*3e;)|(&#0*62;)', re.I),
    '&': re.compile('(&amp;)|(&#x0*26;)|(&#0*38;)', re.I),
    '"': re.compile('(&quot;)|(&#x0*22;)|(&#0*34;)', re.I),
    "'": re.compile('(&#x0*27;)|(&#0*39;)', re.I),
    '`': re.compile('(&#x0*60;)|(&#0*96;)', re.I)
}
"""Character references recognized by `awesome_string.escape.unescape_html`.

Applied in insertion order: `&` comes after `<` and `>` so that an escaped
reference such as `&amp;lt;` is unescaped only once."""

REGEXP_SPECIAL_CHARACTERS: str = '-[]/{}()*+?.\\^$|'
"""Characters prefixed with a backslash by `awesome_string.escape.escape_reg_exp`."""

REGEXP_SPECIAL_CHARACTERS_PATTERN: re.Pattern = re.compile(
    f"[{''.join(map(re.escape, REGEXP_SPECIAL_CHARACTERS))}]"
    )
"""Used in `awesome_string.escape.escape_reg_exp`."""

## Flags
REGEXP_FLAGS: Dict[str, int] = {
    'i': re.I,
    'm': re.M,
    's': re.S,
    'x': re.X,
    'u': 0,
    'g': 0,
    'y': 0
}
"""JavaScript-style flag letters accepted alongside text patterns.

`g`, `u` and `y` have no `re` counterpart and are accepted as no-ops.

Used in `awesome_string.helpers.compile_pattern`."""

## Graphemes
GRAPHEME_PATTERN: regex.Pattern = regex.compile('\\X')
"""Matches one extended grapheme cluster: a base character with its combining
marks, or an astral character with its marks.

Used in `awesome_string.split.graphemes` and the functions built on it."""

## Formatting
CONVERSION_SPECIFICATION_PATTERN: re.Pattern = re.compile(
    "(%{1,2})(?:([0-9]+)\\$)?(\\+)?([ 0]|'.)?(-)?([0-9]+)?(?:\\.([0-9]+))?([bcdiouxXeEfgGs])?"
    )
"""Matches a conversion specification of a format string.

Groups, in order: percent signs, argument position, sign, padding, alignment,
width, precision and type. Two percent signs form a literal percent.

Used in `awesome_string.format.sprintf`."""

PARSE_INT_PATTERN: re.Pattern = re.compile('\\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|([0-9]+))')
"""Matches the leading integer of a text, ignoring whatever follows (`'15NN'`).

Used in `awesome_string.format.sprintf`."""

PARSE_FLOAT_PATTERN: re.Pattern = re.compile(
    '\\s*[+-]?(?:Infinity|(?:[0-9]+\\.?[0-9]*|\\.[0-9]+)(?:[eE][+-]?[0-9]+)?)'
    )
"""Matches the leading decimal literal of a text, ignoring whatever follows (`'-15.67TUU'`).

Used in `awesome_string.format.sprintf`."""

## Tags
TAG_LIST_PATTERN: re.Pattern = re.compile('<([A-Za-z0-9]+)>')
"""Matches one tag name of an allowed tags list written as `'<b><a>'`.

Used in `awesome_string.strip.strip_tags`."""
