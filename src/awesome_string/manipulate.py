"""Functions that build a modified copy of the subject.

This module provides padding, trimming, word wrapping, replacement, reversal
and transliteration. Transliteration (`latinise`, `slugify`) is driven by the
packaged diacritics table, see `awesome_string.lookups.DiacriticsData`.
"""

__docformat__ = 'google'

__all__ = [
    'pad',
    'pad_left',
    'pad_right',
    'trim',
    'trim_left',
    'trim_right',
    'repeat',
    'insert',
    'splice',
    'word_wrap',
    'replace',
    'replace_all',
    'reverse',
    'reverse_grapheme',
    'latinise',
    'slugify'
]

import re
from functools import cache
from typing import Any, Callable, Union
from awesome_string.case import kebab_case
from awesome_string.coercion import coerce_to_string
from awesome_string.helpers import (
    build_padding,
    clip_number,
    string_reduce,
    string_reduce_right,
    to_integer
)
from awesome_string.lookups import DiacriticsData
from awesome_string.patterns import (
    DIACRITICAL_MARK_PATTERN,
    MAX_SAFE_INTEGER,
    NON_LATIN_PATTERN
)
from awesome_string.split import graphemes

## Padding
def _pad_arguments(subject: Any, length: Any, pad_string: Any):
    subject_string = coerce_to_string(subject)
    length_int = 0 if length is None else clip_number(to_integer(length), 0, MAX_SAFE_INTEGER)
    return subject_string, length_int, coerce_to_string(pad_string, ' ')

def pad_left(subject: Any = None, length: Any = 0, pad_string: Any = ' ') -> str:
    """
    Pad `subject` from the left to a new `length`.

    Args:
        subject: Text to pad
        length: Length of the padded text. Nothing changes if `length` is not
            greater than the length of `subject`.
        pad_string: Text repeated to fill the gap

    Returns:
        Left padded text

    Example:
        >>> pad_left('dog', 5)
        '  dog'
        >>> pad_left('cat', 6, '-=')
        '-=-cat'
    """
    subject_string, length_int, pad_text = _pad_arguments(subject, length, pad_string)
    if length_int <= len(subject_string):
        return subject_string
    return build_padding(pad_text, length_int - len(subject_string)) + subject_string

def pad_right(subject: Any = None, length: Any = 0, pad_string: Any = ' ') -> str:
    """
    Pad `subject` from the right to a new `length`.

    Example:
        >>> pad_right('bird', 6, '-')
        'bird--'
        >>> pad_right('cat', 6, '-=')
        'cat-=-'
    """
    subject_string, length_int, pad_text = _pad_arguments(subject, length, pad_string)
    if length_int <= len(subject_string):
        return subject_string
    return subject_string + build_padding(pad_text, length_int - len(subject_string))

def pad(subject: Any = None, length: Any = 0, pad_string: Any = ' ') -> str:
    """
    Pad `subject` from both sides to a new `length`.

    When the gap is odd, the extra character goes to the right side.

    Example:
        >>> pad('dog', 5)
        ' dog '
        >>> pad('Alien', 10, '-=')
        '-=Alien-=-'
    """
    subject_string, length_int, pad_text = _pad_arguments(subject, length, pad_string)
    if length_int <= len(subject_string):
        return subject_string
    gap = length_int - len(subject_string)
    return build_padding(pad_text, gap // 2) + subject_string + build_padding(pad_text, gap - gap // 2)

## Trimming
def trim_left(subject: Any = None, whitespace: Any = None) -> str:
    """
    Remove whitespace from the left side of `subject`.

    Args:
        subject: Text to trim
        whitespace: Characters to remove. If None, Unicode whitespace is
            removed; if empty, nothing is.

    Returns:
        Trimmed text

    Example:
        >>> trim_left('  Starship Troopers')
        'Starship Troopers'
        >>> trim_left('***Mobile Infantry', '*')
        'Mobile Infantry'
    """
    subject_string = coerce_to_string(subject)
    if subject_string == '' or whitespace == '':
        return subject_string
    if whitespace is None:
        return subject_string.lstrip()

    trim_characters = coerce_to_string(whitespace)
    trimming = True

    def keep(trimmed: str, character: str, index: int, characters: list) -> str:
        nonlocal trimming
        if trimming and character in trim_characters:
            return trimmed
        trimming = False
        return trimmed + character

    return string_reduce(subject_string, keep, '')

def trim_right(subject: Any = None, whitespace: Any = None) -> str:
    """
    Remove whitespace from the right side of `subject`.

    Takes the same arguments as `trim_left`.

    Example:
        >>> trim_right('the fire rises   ')
        'the fire rises'
        >>> trim_right('do you feel in charge?!!!', '!')
        'do you feel in charge?'
    """
    subject_string = coerce_to_string(subject)
    if subject_string == '' or whitespace == '':
        return subject_string
    if whitespace is None:
        return subject_string.rstrip()

    trim_characters = coerce_to_string(whitespace)
    trimming = True

    def keep(trimmed: str, character: str, index: int, characters: list) -> str:
        nonlocal trimming
        if trimming and character in trim_characters:
            return trimmed
        trimming = False
        return character + trimmed

    return string_reduce_right(subject_string, keep, '')

def trim(subject: Any = None, whitespace: Any = None) -> str:
    """
    Remove whitespace from both sides of `subject`.

    Example:
        >>> trim(' Mother nature ')
        'Mother nature'
        >>> trim('--Earth--', '-')
        'Earth'
    """
    return trim_right(trim_left(subject, whitespace), whitespace)

## Building
def repeat(subject: Any = None, times: Any = 1) -> str:
    """
    Repeat `subject` a number of `times`.

    Example:
        >>> repeat('w', 3)
        'www'
    """
    subject_string = coerce_to_string(subject)
    times_int = 1 if times is None else clip_number(to_integer(times), 0, MAX_SAFE_INTEGER)
    return subject_string * times_int

def insert(subject: Any = None, to_insert: Any = '', position: Any = 0) -> str:
    """
    Insert `to_insert` into `subject` at `position`.

    Nothing is inserted if `position` is outside the text.

    Example:
        >>> insert('ct', 'a', 1)
        'cat'
        >>> insert('sunny', ' day', 5)
        'sunny day'
    """
    subject_string = coerce_to_string(subject)
    to_insert_string = coerce_to_string(to_insert)
    position_int = to_integer(position)
    if position_int < 0 or position_int > len(subject_string) or to_insert_string == '':
        return subject_string
    return subject_string[:position_int] + to_insert_string + subject_string[position_int:]

def splice(subject: Any = None, start: Any = 0, delete_count: Any = None, to_add: Any = '') -> str:
    """
    Remove `delete_count` characters at `start` and insert `to_add` in their place.

    Args:
        subject: Text to splice
        start: Position to start changing. Negative values count from the end.
        delete_count: Number of characters to remove. If None, remove to the end.
        to_add: Text inserted at `start`

    Returns:
        Spliced text

    Example:
        >>> splice('new year', 0, 4)
        'year'
        >>> splice('new year', 0, 3, 'happy')
        'happy year'
        >>> splice('new year', -4, 4, 'day')
        'new day'
    """
    subject_string = coerce_to_string(subject)
    to_add_string = coerce_to_string(to_add)
    size = len(subject_string)
    start_int = to_integer(start)
    if start_int < 0:
        start_int = max(size + start_int, 0)
    else:
        start_int = min(start_int, size)

    if delete_count is None:
        delete_int = size - start_int
    else:
        delete_int = clip_number(to_integer(delete_count), 0, size - start_int)
    return subject_string[:start_int] + to_add_string + subject_string[start_int + delete_int:]

## Wrapping
def word_wrap(subject: Any = None, width: Any = 75, new_line: Any = '\n', indent: Any = '', cut: bool = False) -> str:
    """
    Wrap `subject` to lines of at most `width` characters.

    Lines break at spaces, and the space a line breaks at is dropped. A
    word longer than `width` stays whole on its own line unless `cut` is set.

    Args:
        subject: Text to wrap
        width: Maximum line length. Nothing but `indent` is returned when
            `width` is not positive.
        new_line: Text inserted between lines
        indent: Text put before every line
        cut: Whether words longer than `width` are broken

    Returns:
        Wrapped text

    Example:
        >>> word_wrap('Hello world', 5)
        'Hello\\nworld'
        >>> word_wrap('Hello world', 5, '<br/>', '__')
        '__Hello<br/>__world'
        >>> word_wrap('Wonderful world', 6, cut=True)
        'Wonder\\nful\\nworld'
    """
    subject_string = coerce_to_string(subject)
    width_int = 75 if width is None else to_integer(width)
    new_line_string = coerce_to_string(new_line, '\n')
    indent_string = coerce_to_string(indent)
    if subject_string == '' or width_int <= 0:
        return indent_string

    size = len(subject_string)
    offset = 0
    wrapped = ''
    while size - offset > width_int:
        if subject_string[offset] == ' ':
            offset += 1
            continue
        space_at = subject_string.rfind(' ', 0, width_int + offset + 1)
        if space_at >= offset:
            wrapped += indent_string + subject_string[offset:space_at] + new_line_string
            offset = space_at + 1
        elif cut:
            wrapped += indent_string + subject_string[offset:offset + width_int] + new_line_string
            offset += width_int
        else:
            space_at = subject_string.find(' ', width_int + offset)
            if space_at < 0:
                wrapped += indent_string + subject_string[offset:]
                offset = size
            else:
                wrapped += indent_string + subject_string[offset:space_at] + new_line_string
                offset = space_at + 1
    if offset < size:
        wrapped += indent_string + subject_string[offset:]
    return wrapped

## Replacing
def _group_replacement(replacement: Callable) -> Callable:
    return lambda match: coerce_to_string(replacement(match.group(), *match.groups()))

def replace(subject: Any = None, pattern: Union[str, re.Pattern] = '', replacement: Any = '', count: int = 1) -> str:
    """
    Replace matches of `pattern` in `subject` with `replacement`.

    Args:
        subject: Text to change
        pattern: Literal text, or a compiled regex
        replacement: Text, or a callable invoked as `replacement(match, *groups)`
            whose result replaces the match. For compiled patterns, text
            replacements may reference groups (`\\1`, `\\g<name>`).
        count: Maximum number of replacements; 0 replaces every match.

    Returns:
        Text with the replacements applied

    Example:
        >>> replace('swan', 'wa', 'u')
        'sun'
        >>> import re
        >>> replace('domestic duck', re.compile('domestic\\\\s'), '')
        'duck'
        >>> replace('nice duck', re.compile('(nice) (duck)'), lambda match, nice, duck: f'the {duck} is {nice}')
        'the duck is nice'
    """
    subject_string = coerce_to_string(subject)
    if isinstance(pattern, re.Pattern):
        compiled = pattern
    else:
        compiled = re.compile(re.escape(coerce_to_string(pattern)))
        if not callable(replacement):
            replacement = coerce_to_string(replacement).replace('\\', '\\\\')

    if callable(replacement):
        return compiled.sub(_group_replacement(replacement), subject_string, count=count)
    return compiled.sub(coerce_to_string(replacement), subject_string, count=count)

def replace_all(subject: Any = None, pattern: Union[str, re.Pattern] = '', replacement: Any = '') -> str:
    """
    Replace every match of `pattern` in `subject` with `replacement`.

    An empty text pattern leaves the subject unchanged.

    Example:
        >>> replace_all('good morning, good evening', 'good', 'bad')
        'bad morning, bad evening'
    """
    if not isinstance(pattern, re.Pattern) and coerce_to_string(pattern) == '':
        return coerce_to_string(subject)
    return replace(subject, pattern, replacement, count=0)

def reverse(subject: Any = None) -> str:
    """
    Reverse the characters of `subject`.

    Example:
        >>> reverse('winter')
        'retniw'
    """
    return coerce_to_string(subject)[::-1]

def reverse_grapheme(subject: Any = None) -> str:
    """
    Reverse the user-perceived characters of `subject`.

    Combining marks stay after the character they belong to.

    Example:
        >>> reverse_grapheme('man\\u0303ana')
        'anan\\u0303am'
    """
    return ''.join(reversed(graphemes(subject)))

## Transliteration
@cache
def _diacritics() -> DiacriticsData:
    return DiacriticsData()

def latinise(subject: Any = None) -> str:
    """
    Transliterate `subject` to Latin letters and drop diacritical marks.

    Characters missing from the diacritics table pass through unchanged.

    Example:
        >>> latinise('cafe\\u0301')
        'cafe'
        >>> latinise('août décembre')
        'aout decembre'
        >>> latinise('как прекрасен этот мир')
        'kak prekrasen etot mir'
    """
    subject_string = coerce_to_string(subject)
    if subject_string == '':
        return ''
    character_to_latin = _diacritics().character_to_latin
    latin = NON_LATIN_PATTERN.sub(
        lambda match: character_to_latin.get(match.group(), match.group()),
        subject_string
    )
    return DIACRITICAL_MARK_PATTERN.sub('', latin)

def slugify(subject: Any = None) -> str:
    """
    Convert `subject` to a URL slug.

    Example:
        >>> slugify('Italian cappuccino drink')
        'italian-cappuccino-drink'
        >>> slugify('caffé latté')
        'caffe-latte'
    """
    subject_string = coerce_to_string(subject)
    if subject_string == '':
        return ''
    return kebab_case(NON_LATIN_PATTERN.sub('-', latinise(subject_string)))
