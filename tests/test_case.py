import unittest
from awesome_string import case

class TestLowerUpperCase(unittest.TestCase):
    def test_lower_case(self):
        self.assertEqual(case.lower_case('Green'), 'green')
        self.assertEqual(case.lower_case(None), '')

    def test_lower_case_idempotent(self):
        for subject in ['BART', 'Café', 'ДОБРО']:
            once = case.lower_case(subject)
            self.assertEqual(case.lower_case(once), once)

    def test_upper_case(self):
        self.assertEqual(case.upper_case('school'), 'SCHOOL')

class TestCapitalize(unittest.TestCase):
    def test_capitalize(self):
        self.assertEqual(case.capitalize('macBook'), 'MacBook')

    def test_rest_to_lower(self):
        self.assertEqual(case.capitalize('APPLE', True), 'Apple')

    def test_empty(self):
        self.assertEqual(case.capitalize(''), '')

    def test_decapitalize(self):
        self.assertEqual(case.decapitalize('Sun'), 'sun')
        self.assertEqual(case.decapitalize(None), '')

class TestKebabCase(unittest.TestCase):
    def test_kebab_case(self):
        self.assertEqual(case.kebab_case('goodbye blue sky'), 'goodbye-blue-sky')
        self.assertEqual(case.kebab_case('GoodbyeBlueSky'), 'goodbye-blue-sky')
        self.assertEqual(case.kebab_case('-Goodbye-Blue-Sky-'), 'goodbye-blue-sky')

    def test_digits(self):
        self.assertEqual(case.kebab_case('Goodbye2Blue'), 'goodbye-2-blue')

    def test_empty(self):
        self.assertEqual(case.kebab_case(None), '')

class TestSnakeCase(unittest.TestCase):
    def test_snake_case(self):
        self.assertEqual(case.snake_case('learning to fly'), 'learning_to_fly')
        self.assertEqual(case.snake_case('XMLHttpRequest'), 'xml_http_request')

class TestCamelCase(unittest.TestCase):
    def test_camel_case(self):
        self.assertEqual(case.camel_case('bird flight'), 'birdFlight')
        self.assertEqual(case.camel_case('-BIRD-FLIGHT-'), 'birdFlight')
        self.assertEqual(case.camel_case('XMLHttpRequest'), 'xmlHttpRequest')

    def test_pascal_case(self):
        self.assertEqual(case.pascal_case('bird flight'), 'BirdFlight')
        self.assertEqual(case.pascal_case('__bird_flight__'), 'BirdFlight')

class TestTitleCase(unittest.TestCase):
    def test_title_case(self):
        self.assertEqual(case.title_case('learning to fly'), 'Learning To Fly')

    def test_keeps_separators(self):
        self.assertEqual(case.title_case('jean-luc picard'), 'Jean-Luc Picard')

    def test_apostrophe(self):
        self.assertEqual(case.title_case("newton's third law"), "Newton's Third Law")

    def test_ignore_words(self):
        self.assertEqual(case.title_case("newton's third law", ['law']), "Newton's Third law")
