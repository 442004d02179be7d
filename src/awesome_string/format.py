"""Formatting with `printf`-style conversion specifications.

A conversion specification is written as
`%[position$][+][padding][-][width][.precision]type`:

- `position$` picks an argument by its 1-based number instead of the next one.
- `+` shows the sign of positive numbers.
- `padding` is `0`, a space, or any character after a quote (`'*`).
- `-` aligns to the left inside `width`.
- `precision` sets the digits of a float, or cuts a text argument.
- `type` is one of `s`, `d`, `i`, `b`, `c`, `o`, `u`, `x`, `X`, `e`, `E`,
  `f`, `g` or `G`. `%%` is a literal percent sign.

Numeric arguments are read the way JavaScript's `parseInt` and `parseFloat`
read them: leading whitespace is skipped, the leading number is used, and the
rest is ignored (`'15NN'` reads as 15). Unreadable values count as zero.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'ConversionSpecification',

    # Functions
    'sprintf',
    'vprintf'
]

import math
import re
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Iterable, Optional, Tuple
from awesome_string.coercion import coerce_to_string
from awesome_string.manipulate import pad_left, pad_right
from awesome_string.patterns import (
    CONVERSION_SPECIFICATION_PATTERN,
    PARSE_FLOAT_PATTERN,
    PARSE_INT_PATTERN
)

@dataclass
class ConversionSpecification:
    """
    One parsed conversion specification of a format string.

    Args:
        percent: The leading percent signs, `'%'` or `'%%'`
        position: 1-based argument number, or None to use the next argument
        sign_specifier: `'+'` to show the sign of positive numbers
        padding_specifier: `'0'`, `' '` or a quote followed by the padding character
        alignment_specifier: `'-'` for left alignment
        width: Minimum width of the formatted argument
        precision: Float digits, or the maximum length of a text argument
        type_specifier: Conversion type letter
    """
    percent: str = '%'
    position: Optional[int] = None
    sign_specifier: Optional[str] = None
    padding_specifier: Optional[str] = None
    alignment_specifier: Optional[str] = None
    width: Optional[int] = None
    precision: Optional[int] = None
    type_specifier: Optional[str] = None

    @classmethod
    def from_match(cls, match: re.Match) -> 'ConversionSpecification':
        percent, position, sign, padding, alignment, width, precision, type_specifier = match.groups()
        return cls(
            percent=percent,
            position=None if position is None else int(position),
            sign_specifier=sign,
            padding_specifier=padding,
            alignment_specifier=alignment,
            width=None if width is None else int(width),
            precision=None if precision is None else int(precision),
            type_specifier=type_specifier
        )

    def is_percent_literal(self) -> bool:
        return len(self.percent) == 2

    def padding_character(self) -> str:
        padding = ' ' if self.padding_specifier is None else self.padding_specifier
        if len(padding) == 2 and padding[0] == "'":
            return padding[1]
        return padding

## Reading numbers
def _parse_int(value: Any) -> int:
    match = PARSE_INT_PATTERN.match(coerce_to_string(value))
    if match is None:
        return 0
    sign, hexadecimal, decimal = match.groups()
    number = int(hexadecimal, 16) if hexadecimal is not None else int(decimal)
    return -number if sign == '-' else number

def _parse_float(value: Any) -> float:
    match = PARSE_FLOAT_PATTERN.match(coerce_to_string(value))
    if match is None:
        return 0.0
    return float(match.group().strip())

## Rendering floats
def _quantum(digits: int) -> Decimal:
    return Decimal(1).scaleb(-digits)

def _context(digits: int) -> Context:
    return Context(prec=1000 + digits)

def _to_fixed(number: float, digits: int) -> str:
    if abs(number) >= 1e21:
        return coerce_to_string(number)
    sign = '-' if number < 0 else ''
    with localcontext(_context(digits)):
        rounded = Decimal(abs(number)).quantize(_quantum(digits), rounding=ROUND_HALF_UP)
    return sign + format(rounded, 'f')

def _exponential_parts(number: float, digits: int) -> Tuple[Decimal, int]:
    """
    Split the magnitude of `number` into a mantissa in `[1, 10)` rounded to
    `digits` fraction digits and a power of ten.
    """
    with localcontext(_context(digits)):
        if number == 0:
            return Decimal(0).quantize(_quantum(digits)), 0
        exact = Decimal(abs(number))
        exponent = exact.adjusted()
        mantissa = exact.scaleb(-exponent).quantize(_quantum(digits), rounding=ROUND_HALF_UP)
        if mantissa >= 10:
            exponent += 1
            mantissa = exact.scaleb(-exponent).quantize(_quantum(digits), rounding=ROUND_HALF_UP)
    return mantissa, exponent

def _exponential_text(sign: str, mantissa: Decimal, exponent: int) -> str:
    exponent_sign = '+' if exponent >= 0 else '-'
    return f'{sign}{format(mantissa, "f")}e{exponent_sign}{abs(exponent)}'

def _to_exponential(number: float, digits: int) -> str:
    mantissa, exponent = _exponential_parts(number, digits)
    return _exponential_text('-' if number < 0 else '', mantissa, exponent)

def _to_shortest(number: float, significant: int) -> str:
    """
    Render `number` with `significant` digits, in exponential form for very
    small or large magnitudes, and drop trailing fraction zeros.
    """
    if number == 0:
        return '0'
    significant = max(significant, 1)
    sign = '-' if number < 0 else ''
    mantissa, exponent = _exponential_parts(number, significant - 1)
    if exponent < -6 or exponent >= significant:
        text = _exponential_text(sign, mantissa, exponent)
        mantissa_text, exponent_text = text.split('e')
        if '.' in mantissa_text:
            mantissa_text = mantissa_text.rstrip('0').rstrip('.')
        return f'{mantissa_text}e{exponent_text}'
    text = _to_fixed(number, significant - 1 - exponent)
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text

## Conversions
def _format_string(replacement: Any, conversion: ConversionSpecification) -> str:
    text = coerce_to_string(replacement)
    if conversion.precision is not None:
        text = text[:conversion.precision]
    return text

def _format_decimal(replacement: Any, conversion: ConversionSpecification) -> str:
    number = _parse_int(replacement)
    if conversion.sign_specifier == '+' and number >= 0:
        return f'+{number}'
    return str(number)

def _format_integer_base(replacement: Any, conversion: ConversionSpecification) -> str:
    number = _parse_int(replacement) % 2 ** 32
    type_specifier = conversion.type_specifier
    if type_specifier == 'c':
        return chr(number % 0x10000)
    if type_specifier == 'u':
        return str(number)
    return format(number, type_specifier)

def _format_float(replacement: Any, conversion: ConversionSpecification) -> str:
    number = _parse_float(replacement)
    precision = 6 if conversion.precision is None else conversion.precision
    type_specifier = conversion.type_specifier
    if math.isinf(number):
        text = coerce_to_string(number)
    elif type_specifier == 'f':
        text = _to_fixed(number, precision)
    elif type_specifier in ('e', 'E'):
        text = _to_exponential(number, precision)
    else:
        text = _to_shortest(number, precision)
    if type_specifier in ('E', 'G'):
        text = text.upper()
    if conversion.sign_specifier == '+' and number >= 0:
        text = '+' + text
    return text

_FORMATTERS = {
    's': _format_string,
    'd': _format_decimal,
    'i': _format_decimal,
    'b': _format_integer_base,
    'c': _format_integer_base,
    'o': _format_integer_base,
    'u': _format_integer_base,
    'x': _format_integer_base,
    'X': _format_integer_base,
    'e': _format_float,
    'E': _format_float,
    'f': _format_float,
    'g': _format_float,
    'G': _format_float
}

def _align_and_pad(text: str, conversion: ConversionSpecification) -> str:
    if conversion.width is None or len(text) >= conversion.width:
        return text
    pad = pad_right if conversion.alignment_specifier == '-' else pad_left
    return pad(text, conversion.width, conversion.padding_character())

def _validate(index: int, replacements_length: int, conversion: ConversionSpecification) -> None:
    if conversion.type_specifier is None:
        raise ValueError('sprintf(): Unknown type specifier')
    if index > replacements_length - 1:
        raise ValueError('sprintf(): Too few arguments')
    if index < 0:
        raise ValueError('sprintf(): Argument number must be greater than zero')

def sprintf(format_string: Any = None, *replacements: Any) -> str:
    """
    Format `replacements` according to `format_string`.

    Args:
        format_string: Text with conversion specifications
        *replacements: Arguments taken in order, or by their `position$`

    Returns:
        Formatted text

    Raises:
        ValueError: A specification has no valid type, refers to argument
            zero, or there are fewer arguments than specifications.

    Example:
        >>> sprintf('%s costs $%.2f', 'Coffee', 2)
        'Coffee costs $2.00'
        >>> sprintf('%2$s the %1$s', 'Great', 'Alexander')
        'Alexander the Great'
        >>> sprintf("%'*10s|%-6d|%+05.1f", 'star', 42, 3.14159)
        '******star|42    |0+3.1'
    """
    format_text = coerce_to_string(format_string)
    if format_text == '':
        return format_text
    next_index = 0

    def replace(match: re.Match) -> str:
        nonlocal next_index
        conversion = ConversionSpecification.from_match(match)
        if conversion.is_percent_literal():
            return match.group()[1:]
        if conversion.position is None:
            index = next_index
            next_index += 1
        else:
            index = conversion.position - 1
        _validate(index, len(replacements), conversion)
        formatted = _FORMATTERS[conversion.type_specifier](replacements[index], conversion)
        return _align_and_pad(formatted, conversion)

    return CONVERSION_SPECIFICATION_PATTERN.sub(replace, format_text)

def vprintf(format_string: Any = None, replacements: Optional[Iterable[Any]] = None) -> str:
    """
    Format the items of `replacements` according to `format_string`.

    Same as `sprintf`, with the arguments given as one list.

    Example:
        >>> vprintf('%s costs $%.2f', ['Coffee', 2])
        'Coffee costs $2.00'
    """
    return sprintf(format_string, *(replacements or []))
