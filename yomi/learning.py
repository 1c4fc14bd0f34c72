"""Adaptive learning from committed candidates."""

from typing import Optional

from yomi.dictionary import BaseDictionaryInterface
from yomi.logger import logger
from yomi.nlp.base import BaseTransliterator
from yomi.nlp.japanese.phonetics import has_punctuation, is_hiragana_or_prolonged
from yomi.nlp.japanese.romanizer import RomajiTransliterator
from yomi.schema import CONNECTION_SEPARATOR, Candidate, connection_key, encode_candidate


class LearningManager:
    """Update the learning and connection dictionaries from user commits.

    All methods return True when a dictionary was updated and False when a
    guard skipped the update or the store refused it. They never raise.
    """

    def __init__(
        self,
        learning: BaseDictionaryInterface,
        connection: BaseDictionaryInterface,
        transliterator: Optional[BaseTransliterator] = None,
    ):
        self.learning = learning
        self.connection = connection
        self.transliterator = transliterator or RomajiTransliterator()

    def commit(self, key: str, word: str) -> bool:
        """Learn *word* as the most recent conversion of the reading of *key*."""
        if not key or not word:
            logger.debug(f"Skipped learning empty key/word ({key!r}, {word!r})")
            return False
        reading = self.transliterator.transliterate(key)
        return self.learning.upsert(reading, word)

    def commit_concatenation(self, left: Candidate, right: Candidate) -> bool:
        """Learn ``left + right`` as one word when *right* looks like okurigana.

        Guards: the left key is at least as long as the right one, neither
        value contains punctuation, and the right value is hiragana (or 'ー')
        only.
        """
        if len(left.key) < len(right.key):
            logger.debug(f"Skipped concatenation {left.value}+{right.value}: right key is longer")
            return False
        if has_punctuation(left.value) or has_punctuation(right.value):
            logger.debug(f"Skipped concatenation {left.value}+{right.value}: punctuation")
            return False
        if not is_hiragana_or_prolonged(right.value):
            logger.debug(f"Skipped concatenation {left.value}+{right.value}: right value is not hiragana")
            return False
        return self.commit(left.key + right.key, left.value + right.value)

    def commit_connection(self, prev: Candidate, following: Candidate) -> bool:
        """Record that *following* was committed right after *prev*."""
        if has_punctuation(prev.value):
            logger.debug(f"Skipped connection after '{prev.value}': punctuation")
            return False
        if CONNECTION_SEPARATOR in following.key:
            logger.debug(f"Skipped connection to key '{following.key}': contains separator")
            return False
        return self.connection.upsert(connection_key(prev), encode_candidate(following))
