from .pattern import parse
from .matcher import matches
from .utils import comparison_form

import logging
logger = logging.getLogger()

def find(dictionary, raw_query):
    """
    yield every word in dictionary that matches raw_query, as spelled in the
    dictionary (diacritics and case intact), in dictionary order
    """
    query = parse(raw_query)
    logger.debug(f"{raw_query!r} -> {query!r}")

    for word in dictionary:
        if matches(query, comparison_form(word)):
            yield word


class Lookup:

    def __init__(self, provider):
        self.provider = provider
        self.reload()

    @property
    def words(self):
        """
        the loaded {word: senses} dictionary
        """
        return self._words

    @words.setter
    def words(self, words):
        self._words = words

    @property
    def length(self):
        return len(self.words)

    def reload(self):
        self.words = self.provider.load()
        logger.debug(f"dictionary contains {self.length} words")

    def find(self, raw_query, sort=False):
        found = list(find(self.words, raw_query))

        if sort:
            found.sort()

        return found
