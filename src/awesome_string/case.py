"""Case conversion functions.

Word-based conversions (kebab, snake, camel, pascal, title) split the
subject with `awesome_string.split.words`, so punctuation, whitespace and
case transitions all act as word boundaries.
"""

__docformat__ = 'google'

__all__ = [
    'lower_case',
    'upper_case',
    'capitalize',
    'decapitalize',
    'kebab_case',
    'snake_case',
    'camel_case',
    'pascal_case',
    'title_case'
]

from typing import Any, Iterable, Optional
from awesome_string.coercion import coerce_to_string
from awesome_string.patterns import APOSTROPHES, WORD_PATTERN
from awesome_string.split import words

def lower_case(subject: Any = None) -> str:
    return coerce_to_string(subject).lower()

def upper_case(subject: Any = None) -> str:
    return coerce_to_string(subject).upper()

def capitalize(subject: Any = None, rest_to_lower: bool = False) -> str:
    """
    Convert the first character of `subject` to upper case.

    Args:
        subject: Text to capitalize
        rest_to_lower: If True, convert the remaining characters to lower case

    Returns:
        Capitalized text

    Example:
        >>> capitalize('macBook')
        'MacBook'
        >>> capitalize('APPLE', True)
        'Apple'
    """
    subject_string = coerce_to_string(subject)
    if subject_string == '':
        return ''
    rest = subject_string[1:]
    if rest_to_lower:
        rest = rest.lower()
    return subject_string[0].upper() + rest

def decapitalize(subject: Any = None) -> str:
    """
    Convert the first character of `subject` to lower case.

    Example:
        >>> decapitalize('Sun')
        'sun'
    """
    subject_string = coerce_to_string(subject)
    if subject_string == '':
        return ''
    return subject_string[0].lower() + subject_string[1:]

def kebab_case(subject: Any = None) -> str:
    """
    Convert `subject` to kebab case (also called spinal or lisp case).

    Example:
        >>> kebab_case('goodbye blue sky')
        'goodbye-blue-sky'
        >>> kebab_case('GoodbyeBlueSky')
        'goodbye-blue-sky'
        >>> kebab_case('-Goodbye-Blue-Sky-')
        'goodbye-blue-sky'
    """
    subject_string = coerce_to_string(subject)
    if subject_string == '':
        return ''
    return '-'.join(map(lower_case, words(subject_string)))

def snake_case(subject: Any = None) -> str:
    """
    Convert `subject` to snake case.

    Example:
        >>> snake_case('learning to fly')
        'learning_to_fly'
        >>> snake_case('XMLHttpRequest')
        'xml_http_request'
    """
    subject_string = coerce_to_string(subject)
    if subject_string == '':
        return ''
    return '_'.join(map(lower_case, words(subject_string)))

def camel_case(subject: Any = None) -> str:
    """
    Convert `subject` to camel case.

    Example:
        >>> camel_case('bird flight')
        'birdFlight'
        >>> camel_case('XMLHttpRequest')
        'xmlHttpRequest'
    """
    subject_string = coerce_to_string(subject)
    if subject_string == '':
        return ''
    return ''.join(
        word.lower() if index == 0 else capitalize(word, True)
        for index, word in enumerate(words(subject_string))
    )

def pascal_case(subject: Any = None) -> str:
    """
    Convert `subject` to pascal case (camel case with a leading capital).

    Example:
        >>> pascal_case('bird flight')
        'BirdFlight'
    """
    subject_string = coerce_to_string(subject)
    if subject_string == '':
        return ''
    return ''.join(capitalize(word, True) for word in words(subject_string))

def title_case(subject: Any = None, ignore_words: Optional[Iterable[str]] = None) -> str:
    """
    Capitalize every word of `subject`, keeping the text between words as-is.

    A word glued to the previous one by an apostrophe (the `s` in `Newton's`)
    is lower-cased instead.

    Args:
        subject: Text to convert
        ignore_words: Words left unchanged

    Returns:
        Title case text

    Example:
        >>> title_case('learning to fly')
        'Learning To Fly'
        >>> title_case("newton's third law", ['law'])
        "Newton's Third law"
    """
    subject_string = coerce_to_string(subject)
    if subject_string == '':
        return ''
    ignored = set(ignore_words or [])

    def title_word(match) -> str:
        word = match.group()
        if word in ignored:
            return word
        start = match.start()
        if start > 0 and subject_string[start - 1] in APOSTROPHES:
            return word.lower()
        return capitalize(word, True)

    return WORD_PATTERN.sub(title_word, subject_string)
