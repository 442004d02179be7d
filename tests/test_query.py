import math
import re
import unittest
from awesome_string import query

class TestCharacterClasses(unittest.TestCase):
    def test_is_alpha(self):
        self.assertTrue(query.is_alpha('bart'))
        self.assertTrue(query.is_alpha('Café'))
        self.assertTrue(query.is_alpha('cafe\u0301'))
        self.assertFalse(query.is_alpha('lisa and bart'))
        self.assertFalse(query.is_alpha(''))

    def test_is_alpha_digit(self):
        self.assertTrue(query.is_alpha_digit('year2020'))
        self.assertFalse(query.is_alpha_digit('40-20'))
        self.assertFalse(query.is_alpha_digit(''))

    def test_is_digit(self):
        self.assertTrue(query.is_digit('35'))
        self.assertTrue(query.is_digit(35))
        self.assertFalse(query.is_digit('1.5'))
        self.assertFalse(query.is_digit(''))

    def test_is_lower_case(self):
        self.assertTrue(query.is_lower_case('motorcycle'))
        self.assertFalse(query.is_lower_case('John'))
        self.assertFalse(query.is_lower_case('T1000'))

    def test_is_upper_case(self):
        self.assertTrue(query.is_upper_case('ACDC'))
        self.assertFalse(query.is_upper_case('AcDc'))

class TestEmptiness(unittest.TestCase):
    def test_is_empty(self):
        self.assertTrue(query.is_empty(''))
        self.assertTrue(query.is_empty(None))
        self.assertFalse(query.is_empty(' '))

    def test_is_blank(self):
        self.assertTrue(query.is_blank(''))
        self.assertTrue(query.is_blank(' \t\n'))
        self.assertFalse(query.is_blank('sun'))

class TestIsNumeric(unittest.TestCase):
    def test_numeric_text(self):
        self.assertTrue(query.is_numeric('350'))
        self.assertTrue(query.is_numeric('-20.5'))
        self.assertTrue(query.is_numeric('1.5E+2'))
        self.assertTrue(query.is_numeric('0xFF'))

    def test_numbers(self):
        self.assertTrue(query.is_numeric(0))
        self.assertTrue(query.is_numeric(-1.5))
        self.assertFalse(query.is_numeric(math.inf))
        self.assertFalse(query.is_numeric(math.nan))

    def test_not_numeric(self):
        self.assertFalse(query.is_numeric('five'))
        self.assertFalse(query.is_numeric(''))
        self.assertFalse(query.is_numeric(None))
        self.assertFalse(query.is_numeric(True))

    def test_non_ascii_digits(self):
        self.assertFalse(query.is_numeric('\u0663'))
        self.assertFalse(query.is_numeric('\u0661\u0662'))
        self.assertFalse(query.is_numeric('\uff15'))

class TestIsString(unittest.TestCase):
    def test_is_string(self):
        self.assertTrue(query.is_string('vacation'))
        self.assertTrue(query.is_string(''))
        self.assertFalse(query.is_string(560))
        self.assertFalse(query.is_string(None))

class TestPositions(unittest.TestCase):
    def test_starts_with(self):
        self.assertTrue(query.starts_with('say hello to my little friend', 'say hello'))
        self.assertTrue(query.starts_with('say hello to my little friend', 'hello', 4))
        self.assertFalse(query.starts_with('say hello to my little friend', 'hello'))

    def test_ends_with(self):
        self.assertTrue(query.ends_with('the world is yours', 'is yours'))
        self.assertTrue(query.ends_with('the world is yours', 'world', 9))
        self.assertFalse(query.ends_with('the world is yours', 'world'))

    def test_includes(self):
        self.assertTrue(query.includes('galaxy', 'alax'))
        self.assertFalse(query.includes('galaxy', 'gal', 1))
        self.assertTrue(query.includes('galaxy', ''))

class TestMatches(unittest.TestCase):
    def test_text_pattern(self):
        self.assertTrue(query.matches('pacific ocean', 'ocean'))
        self.assertTrue(query.matches('pacific ocean', 'PACIFIC', 'i'))
        self.assertFalse(query.matches('pacific ocean', 'PACIFIC'))

    def test_compiled_pattern(self):
        self.assertTrue(query.matches('pacific ocean', re.compile('^pac')))

    def test_no_pattern(self):
        self.assertFalse(query.matches('pacific ocean', None))
