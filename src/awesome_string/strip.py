"""Removal of HTML and PHP tags.

`strip_tags` scans the subject one character at a time and tracks whether it
is in plain text, inside a tag, or inside a comment or declaration. Quoted
attribute values are skipped as a whole, so `<img title=">">` is one tag.
"""

__docformat__ = 'google'

__all__ = [
    'strip_tags'
]

from enum import Enum
from typing import Any, Iterable, List, Optional, Union
from awesome_string.coercion import coerce_to_string
from awesome_string.patterns import TAG_LIST_PATTERN

class ScanState(Enum):
    """
    Position of the `strip_tags` scanner relative to markup.
    """
    OUTPUT = "output"
    HTML = "html"
    EXCLAMATION = "exclamation"
    COMMENT = "comment"

def _has_substring_at(subject: str, substring: str, index: int, look_behind: bool = True) -> bool:
    start = index - len(substring) + 1 if look_behind else index
    if start < 0:
        return False
    return subject[start:start + len(substring)].lower() == substring

def _parse_tag_name(tag: str) -> str:
    name = ''
    started = False
    for character in tag.lower():
        if character == '<':
            continue
        if character == '>':
            break
        if character.isspace():
            if started:
                break
            continue
        started = True
        if character != '/':
            name += character
    return name

def _allowable_tag_names(allowable_tags: Optional[Union[str, Iterable[str]]]) -> List[str]:
    if isinstance(allowable_tags, (list, tuple, set, frozenset)):
        return [coerce_to_string(tag).lower() for tag in allowable_tags]
    return [tag.lower() for tag in TAG_LIST_PATTERN.findall(coerce_to_string(allowable_tags))]

def strip_tags(
        subject: Any = None,
        allowable_tags: Optional[Union[str, Iterable[str]]] = None,
        replacement: Any = ''
        ) -> str:
    """
    Remove HTML and PHP tags from `subject`.

    Comments (`<!-- -->`) and declarations (`<!doctype html>`) are removed
    along with tags. Text between tags is kept, including the body of
    `<script>` elements.

    Args:
        subject: Text to strip
        allowable_tags: Tags to keep, either as text (`'<b><a>'`) or as a
            list of names (`['b', 'a']`). Names are compared without case.
        replacement: Text put in place of every removed tag

    Returns:
        Text without tags

    Example:
        >>> strip_tags('<span class="italic"><b>Hello world!</b></span>')
        'Hello world!'
        >>> strip_tags('<b class="red">Hello</b> <span>world!</span>', '<b><a>')
        '<b class="red">Hello</b> world!'
        >>> strip_tags('Line<br/>break', ['i'], ' ')
        'Line break'
    """
    subject_string = coerce_to_string(subject)
    if subject_string == '':
        return ''
    allowed = _allowable_tag_names(allowable_tags)
    replacement_string = coerce_to_string(replacement)

    state = ScanState.OUTPUT
    depth = 0
    quote = None
    tag = ''
    output = ''
    for index, character in enumerate(subject_string):
        advance = False
        if character == '<':
            if quote:
                pass
            elif _has_substring_at(subject_string, '< ', index, look_behind=False):
                advance = True
            elif state == ScanState.OUTPUT:
                advance = True
                state = ScanState.HTML
            elif state == ScanState.HTML:
                depth += 1
            else:
                advance = True
        elif character == '!':
            if state == ScanState.HTML and _has_substring_at(subject_string, '<!', index):
                state = ScanState.EXCLAMATION
            else:
                advance = True
        elif character == '-':
            if state == ScanState.EXCLAMATION and _has_substring_at(subject_string, '!--', index):
                state = ScanState.COMMENT
            else:
                advance = True
        elif character in ('"', "'"):
            if state == ScanState.HTML:
                if quote == character:
                    quote = None
                elif not quote:
                    quote = character
            advance = True
        elif character in ('e', 'E'):
            if state == ScanState.EXCLAMATION and _has_substring_at(subject_string, 'doctype', index):
                state = ScanState.HTML
            else:
                advance = True
        elif character == '>':
            if depth > 0:
                depth -= 1
            elif quote:
                pass
            elif state == ScanState.HTML:
                state = ScanState.OUTPUT
                if allowed:
                    tag += '>'
                    output += tag if _parse_tag_name(tag) in allowed else replacement_string
                    tag = ''
                else:
                    output += replacement_string
            elif state == ScanState.EXCLAMATION or (
                    state == ScanState.COMMENT and _has_substring_at(subject_string, '-->', index)):
                state = ScanState.OUTPUT
                tag = ''
            else:
                advance = True
        else:
            advance = True

        if advance:
            if state == ScanState.OUTPUT:
                output += character
            elif state == ScanState.HTML and allowed:
                tag += character
    return output
