import math
import re
import unittest
from awesome_string import manipulate

class TestPad(unittest.TestCase):
    def test_pad_left(self):
        self.assertEqual(manipulate.pad_left('dog', 5), '  dog')
        self.assertEqual(manipulate.pad_left('cat', 6, '-='), '-=-cat')

    def test_pad_right(self):
        self.assertEqual(manipulate.pad_right('bird', 6, '-'), 'bird--')
        self.assertEqual(manipulate.pad_right('cat', 6, '-='), 'cat-=-')

    def test_pad(self):
        self.assertEqual(manipulate.pad('dog', 5), ' dog ')
        self.assertEqual(manipulate.pad('Alien', 10, '-='), '-=Alien-=-')

    def test_shorter_length(self):
        self.assertEqual(manipulate.pad('dog', 2), 'dog')
        self.assertEqual(manipulate.pad_left('dog', -5), 'dog')

    def test_padded_length(self):
        for length in range(0, 12):
            self.assertEqual(len(manipulate.pad('Alien', length, '-=')), max(length, 5))

    def test_empty_pad_string(self):
        self.assertEqual(manipulate.pad('Hello World', 20, ''), 'Hello World')
        self.assertEqual(manipulate.pad_left('Hello World', 20, ''), 'Hello World')
        self.assertEqual(manipulate.pad_right('Hello World', 20, ''), 'Hello World')

    def test_pad_string_cycles(self):
        self.assertEqual(manipulate.pad('FF', 4, '0'), '0FF0')
        self.assertEqual(manipulate.pad('ab', 10, '012'), '0120ab0120')
        self.assertEqual(manipulate.pad('', 10, '01'), '0101001010')

    def test_coerced_length(self):
        self.assertEqual(manipulate.pad('dog', '5'), ' dog ')
        self.assertEqual(manipulate.pad('dog', 5.9), ' dog ')
        self.assertEqual(manipulate.pad_left('dog', '5.5', '*'), '**dog')
        self.assertEqual(manipulate.pad('dog', -math.inf), 'dog')
        self.assertEqual(manipulate.pad_right('dog', 'wide'), 'dog')

    def test_empty_subject(self):
        self.assertEqual(manipulate.pad(''), '')
        self.assertEqual(manipulate.pad(None), '')
        self.assertEqual(manipulate.pad_left(None, 3), '   ')

    def test_none_length(self):
        self.assertEqual(manipulate.pad('dog', None), 'dog')
        self.assertEqual(manipulate.pad_left('dog', None), 'dog')
        self.assertEqual(manipulate.pad_right('dog', None), 'dog')

class TestTrim(unittest.TestCase):
    def test_trim(self):
        self.assertEqual(manipulate.trim(' Mother nature '), 'Mother nature')
        self.assertEqual(manipulate.trim('--Earth--', '-'), 'Earth')

    def test_trim_left(self):
        self.assertEqual(manipulate.trim_left('  Starship Troopers'), 'Starship Troopers')
        self.assertEqual(manipulate.trim_left('***Mobile Infantry', '*'), 'Mobile Infantry')

    def test_trim_right(self):
        self.assertEqual(manipulate.trim_right('the fire rises   '), 'the fire rises')
        self.assertEqual(manipulate.trim_right('do you feel in charge?!!!', '!'), 'do you feel in charge?')

    def test_empty_whitespace(self):
        self.assertEqual(manipulate.trim('  Earth  ', ''), '  Earth  ')

    def test_coerced_whitespace(self):
        self.assertEqual(manipulate.trim(-115, -1), '5')

class TestRepeat(unittest.TestCase):
    def test_repeat(self):
        self.assertEqual(manipulate.repeat('w', 3), 'www')
        self.assertEqual(manipulate.repeat('w', 0), '')
        self.assertEqual(manipulate.repeat('w', None), 'w')

class TestInsert(unittest.TestCase):
    def test_insert(self):
        self.assertEqual(manipulate.insert('ct', 'a', 1), 'cat')
        self.assertEqual(manipulate.insert('sunny', ' day', 5), 'sunny day')

    def test_out_of_range(self):
        self.assertEqual(manipulate.insert('cat', 's', 10), 'cat')
        self.assertEqual(manipulate.insert('cat', 's', -1), 'cat')

class TestSplice(unittest.TestCase):
    def test_splice(self):
        self.assertEqual(manipulate.splice('new year', 0, 4), 'year')
        self.assertEqual(manipulate.splice('new year', 0, 3, 'happy'), 'happy year')
        self.assertEqual(manipulate.splice('new year', -4, 4, 'day'), 'new day')

    def test_delete_to_end(self):
        self.assertEqual(manipulate.splice('new year', 3), 'new')

class TestWordWrap(unittest.TestCase):
    def test_default_width(self):
        self.assertEqual(manipulate.word_wrap('Yes. The fire rises. '), 'Yes. The fire rises. ')
        text = ("Theatricality and deception are powerful agents to the uninitiated... but we are initiated, "
                "aren't we Bruce? Members of the League of Shadows!")
        self.assertEqual(
            manipulate.word_wrap(text),
            "Theatricality and deception are powerful agents to the uninitiated... but\n"
            "we are initiated, aren't we Bruce? Members of the League of Shadows!"
        )
        long_word = 'Theatricality-and-deception-are-powerful-agents-to-the-uninitiated...-but-we-are-initiated'
        self.assertEqual(manipulate.word_wrap(long_word), long_word)

    def test_width(self):
        self.assertEqual(manipulate.word_wrap('Hello', 4), 'Hello')
        self.assertEqual(manipulate.word_wrap('  Hello  ', 4), 'Hello\n ')
        self.assertEqual(manipulate.word_wrap('Yes. The fire rises.', 4), 'Yes.\nThe\nfire\nrises.')
        self.assertEqual(
            manipulate.word_wrap('And I think to myself what a wonderful world.', 10),
            'And I\nthink to\nmyself\nwhat a\nwonderful\nworld.'
        )

    def test_non_positive_width(self):
        self.assertEqual(manipulate.word_wrap('Hello World', 0), '')
        self.assertEqual(manipulate.word_wrap('Hello World', -5), '')
        self.assertEqual(manipulate.word_wrap('Wonderful world', 0, indent='000'), '000')

    def test_indent(self):
        self.assertEqual(manipulate.word_wrap('Hello', 4, indent='***'), '***Hello')
        self.assertEqual(manipulate.word_wrap('Hello World', 4, indent='  '), '  Hello\n  World')
        self.assertEqual(manipulate.word_wrap('', 5, indent='000'), '000')

    def test_new_line(self):
        self.assertEqual(manipulate.word_wrap('What A Wonderful World', 10, '+', '  '), '  What A+  Wonderful+  World')
        self.assertEqual(
            manipulate.word_wrap('I hear babies crying, I watch them grow', 5, '<br/>', '-'),
            '-I<br/>-hear<br/>-babies<br/>-crying,<br/>-I<br/>-watch<br/>-them<br/>-grow'
        )

    def test_cut(self):
        self.assertEqual(manipulate.word_wrap('Hello', 4, cut=True), 'Hell\no')
        self.assertEqual(
            manipulate.word_wrap('I hear babies crying, I watch them grow', 5, cut=True),
            'I\nhear\nbabie\ns\ncryin\ng, I\nwatch\nthem\ngrow'
        )

    def test_none(self):
        self.assertEqual(manipulate.word_wrap(), '')
        self.assertEqual(manipulate.word_wrap(None), '')

class TestReplace(unittest.TestCase):
    def test_literal(self):
        self.assertEqual(manipulate.replace('swan', 'wa', 'u'), 'sun')
        self.assertEqual(manipulate.replace('a.b.c', '.', '-'), 'a-b.c')

    def test_first_match_only(self):
        self.assertEqual(manipulate.replace('duck duck', 'duck', 'goose'), 'goose duck')

    def test_literal_backslash(self):
        self.assertEqual(manipulate.replace('path', 'a', '\\1'), 'p\\1th')

    def test_compiled_pattern(self):
        self.assertEqual(manipulate.replace('domestic duck', re.compile('domestic\\s'), ''), 'duck')

    def test_group_reference(self):
        result = manipulate.replace('nice duck', re.compile('(nice) (duck)'), '\\2 is \\1')
        self.assertEqual(result, 'duck is nice')

    def test_callable(self):
        result = manipulate.replace(
            'nice duck',
            re.compile('(nice) (duck)'),
            lambda match, nice, duck: f'the {duck} is {nice}'
            )
        self.assertEqual(result, 'the duck is nice')

    def test_replace_all(self):
        result = manipulate.replace_all('good morning, good evening', 'good', 'bad')
        self.assertEqual(result, 'bad morning, bad evening')
        self.assertEqual(manipulate.replace_all('apple', re.compile('[aeiou]'), '*'), '*ppl*')

    def test_replace_all_empty_pattern(self):
        self.assertEqual(manipulate.replace_all('apple', '', '*'), 'apple')

class TestReverse(unittest.TestCase):
    def test_reverse(self):
        self.assertEqual(manipulate.reverse('winter'), 'retniw')
        self.assertEqual(manipulate.reverse(None), '')

    def test_double_reverse(self):
        for subject in ['winter', 'cafe\u0301', '\U0001f600 smile', 123]:
            self.assertEqual(manipulate.reverse(manipulate.reverse(subject)), str(subject))

    def test_reverse_grapheme(self):
        self.assertEqual(manipulate.reverse_grapheme('green tree'), 'eert neerg')
        self.assertEqual(manipulate.reverse_grapheme('man\u0303ana'), 'anan\u0303am')
        self.assertEqual(manipulate.reverse_grapheme('foo\u0303\u035c\u035d\u035ebar'), 'rabo\u0303\u035c\u035d\u035eof')
        self.assertEqual(
            manipulate.reverse_grapheme('foo\U0001d306\u0303\u035c\u035d\u035ebar'),
            'rab\U0001d306\u0303\u035c\u035d\u035eoof'
        )
        self.assertEqual(manipulate.reverse_grapheme('\n\t'), '\t\n')

    def test_reverse_grapheme_coerced(self):
        self.assertEqual(manipulate.reverse_grapheme(-1.5), '5.1-')
        self.assertEqual(manipulate.reverse_grapheme(['flower']), 'rewolf')
        self.assertEqual(manipulate.reverse_grapheme(None), '')

class TestLatinise(unittest.TestCase):
    def test_latin_diacritics(self):
        self.assertEqual(manipulate.latinise('café'), 'cafe')
        self.assertEqual(manipulate.latinise('août décembre'), 'aout decembre')

    def test_combining_marks(self):
        self.assertEqual(manipulate.latinise('cafe\u0301'), 'cafe')

    def test_cyrillic(self):
        self.assertEqual(manipulate.latinise('как прекрасен этот мир'), 'kak prekrasen etot mir')

    def test_unknown_characters(self):
        self.assertEqual(manipulate.latinise('日本'), '日本')

    def test_empty(self):
        self.assertEqual(manipulate.latinise(None), '')

class TestSlugify(unittest.TestCase):
    def test_slugify(self):
        self.assertEqual(manipulate.slugify('Italian cappuccino drink'), 'italian-cappuccino-drink')
        self.assertEqual(manipulate.slugify('caffé latté'), 'caffe-latte')

    def test_unknown_characters(self):
        self.assertEqual(manipulate.slugify('日本 tea'), 'tea')
