import logging
import pandas as pd
from functools import cached_property
from keyword import iskeyword
from typing import Dict
from awesome_string.connections import DiacriticsDataSource

logger = logging.getLogger(__name__)

class DiacriticsData(DiacriticsDataSource):
    """Transliteration table used by `awesome_string.manipulate.latinise`.

    Each row of the source file holds a Latin replacement (one or more
    letters, or nothing) and every character that transliterates to it.
    """
    def __init__(self):
        with self.csv_path().open('r', encoding='utf-8') as f:
            data = pd.read_csv(f, dtype=str, keep_default_na=False)
            for column in data.columns:
                if not iskeyword(column):
                    setattr(self, column, data[column])
        logger.debug('Loaded %d diacritics rows', len(data))

    @cached_property
    def character_to_latin(self) -> Dict[str, str]:
        return {
            character: latin
            for latin, characters in zip(self.latin, self.characters)
            for character in characters
        }
