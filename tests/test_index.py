import re
import unittest
from awesome_string import index

class TestIndexOf(unittest.TestCase):
    def test_index_of(self):
        self.assertEqual(index.index_of('morning', 'n'), 3)
        self.assertEqual(index.index_of('we have a mission', 'a', 6), 8)

    def test_not_found(self):
        self.assertEqual(index.index_of('evening', 'o'), -1)

class TestLastIndexOf(unittest.TestCase):
    def test_last_index_of(self):
        self.assertEqual(index.last_index_of('we have a mission', 'a'), 8)

    def test_from_index(self):
        self.assertEqual(index.last_index_of('we have a mission', 'a', 7), 4)

    def test_not_found(self):
        self.assertEqual(index.last_index_of('evening', 'o'), -1)

class TestSearch(unittest.TestCase):
    def test_compiled_pattern(self):
        self.assertEqual(index.search('we have a mission', re.compile('\\s')), 2)

    def test_from_index(self):
        self.assertEqual(index.search('we have a mission', 'a', 6), 8)

    def test_not_found(self):
        self.assertEqual(index.search('we have a mission', '\\d'), -1)
