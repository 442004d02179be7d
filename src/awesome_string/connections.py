from importlib import resources
from functools import cache

class DiacriticsDataSource:
    @classmethod
    @cache
    def csv_path(cls):
        """ Latin letters and the characters that transliterate to them """
        return resources.files('awesome_string.data').joinpath('diacritics.csv')
