import os
import random

import logging
logger = logging.getLogger(__name__)

from .errors import DictionaryError, EmptyDictionaryError
from .wordle import WORD_LENGTH

# soft cap on how many words we keep from the dictionary file
WORDS_CAPACITY = 2272


def make_rng(seed=None):
    """
    random generator for picking the secret, seeded once per run.
    without a seed we use our pid so every run differs.
    """
    if seed is None:
        seed = os.getpid()

    logger.debug(f"seeding random generator with {seed}")
    return random.Random(seed)


class Dictionary:
    """
    read-only, ordered list of the words a guess may be
    """

    def __init__(self, words):
        self._words = tuple(words)
        self._lookup = frozenset(self._words)

    @property
    def words(self):
        return self._words

    def __contains__(self, word):
        return word in self._lookup

    def __len__(self):
        return len(self._words)

    def __repr__(self):
        return f"{self.__class__.__name__}({len(self)} words)"

    @classmethod
    def read_dict(cls, dictpath, wordlen=WORD_LENGTH, capacity=WORDS_CAPACITY):
        """
        return the first `capacity` lines of dictpath that are exactly
        wordlen characters long, in file order. capacity=None means no limit.
        """
        try:
            with open(dictpath) as f:
                dictionary = f.read().splitlines()
        except OSError as e:
            raise DictionaryError(f"failed to load dictionary from {dictpath}: {e.strerror or e}") from e

        logger.debug(f"starting dictionary contains {len(dictionary)} lines")

        words = []

        for word in dictionary:
            if len(word) != wordlen:
                continue

            words.append(word)

            if capacity is not None and len(words) >= capacity:
                logger.debug(f"dictionary capacity of {capacity} reached, ignoring the rest")
                break

        logger.debug(f"our word list contains {len(words)}, {wordlen} letter words")
        return words

    @classmethod
    def load(cls, dictpath, wordlen=WORD_LENGTH, capacity=WORDS_CAPACITY):
        words = cls.read_dict(dictpath, wordlen, capacity)

        if not words:
            raise EmptyDictionaryError(f"no {wordlen}-letter words found in {dictpath}")

        return cls(words)

    def pick_word(self, rng):
        """
        uniformly pick one word using the given random.Random
        """
        if not self._words:
            raise EmptyDictionaryError("can't pick a word from an empty dictionary")

        word = rng.choice(self._words)
        logger.debug(f"picked word {self._words.index(word)} of {len(self)}")
        return word
