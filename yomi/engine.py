"""Candidate search over the system and learning dictionaries."""

from typing import Iterable, List, Optional, Set

from yomi.config import DEFAULT_SETTINGS, EngineSettings
from yomi.dictionary import BaseDictionaryInterface
from yomi.logger import logger
from yomi.nlp.base import BaseTransliterator
from yomi.nlp.japanese.phonetics import to_half_katakana, to_wide_katakana, to_wide_latin
from yomi.nlp.japanese.romanizer import RomajiTransliterator
from yomi.schema import Candidate


class CandidateCollector:
    """Ordered candidate list that drops repeated (key, value) pairs.

    One instance per search call, so ``search`` keeps no state between calls.
    """

    def __init__(self):
        self.candidates: List[Candidate] = []
        self._seen: Set[Candidate] = set()

    def add(self, key: str, value: str) -> bool:
        candidate = Candidate(key=key, value=value)
        if candidate in self._seen:
            return False
        self._seen.add(candidate)
        self.candidates.append(candidate)
        return True

    def add_words(self, key: str, words: Optional[Iterable[str]]) -> int:
        if not words:
            return 0
        return sum(1 for word in words if self.add(key, word))


class DictionaryEngine:
    """Compose the read-only system dictionary and the learning dictionary
    into a ranked candidate list for one typed key.

    Order of the result:
      1. learning hits for the reading
      2. learning hits for the literal key
      3. system hits for the reading
      4. bounded completions from the system dictionary
      5. the reading itself, in katakana and (optionally) halfwidth katakana
      6. the literal key and its fullwidth form
    Steps 1, 3, 4 and 5 only run when the key transliterated completely.
    """

    def __init__(
        self,
        system: BaseDictionaryInterface,
        learning: BaseDictionaryInterface,
        settings: EngineSettings = DEFAULT_SETTINGS,
        transliterator: Optional[BaseTransliterator] = None,
    ):
        self.system = system
        self.learning = learning
        self.settings = settings
        self.transliterator = transliterator or RomajiTransliterator()

    def search(self, key: str) -> List[Candidate]:
        """Return ordered, deduplicated candidates for *key*; never raises."""
        if not key:
            return []
        try:
            return self._search(key)
        except Exception:
            logger.exception(f"Search failed for key '{key}', returning literal candidates")
            collector = CandidateCollector()
            self._add_literal(collector, key)
            return collector.candidates

    def _search(self, key: str) -> List[Candidate]:
        reading = self.transliterator.transliterate(key)
        hiragana_only = self.transliterator.is_resolved(reading)
        collector = CandidateCollector()

        if hiragana_only:
            collector.add_words(reading, self.learning.find_exact(reading))
        collector.add_words(key, self.learning.find_exact(key))
        if hiragana_only:
            collector.add_words(reading, self.system.find_exact(reading))
            self._add_completions(collector, reading)
            self._add_reading(collector, reading)
        self._add_literal(collector, key)

        logger.debug(f"search '{key}' -> '{reading}': {len(collector.candidates)} candidates")
        return collector.candidates

    def _add_completions(self, collector: CandidateCollector, reading: str) -> int:
        """Append system entries whose key starts with *reading*.

        Stops at the first key that no longer matches, is longer than
        ``len(reading) + completion_length_delta``, or once ``search_limit``
        completions were added.
        """
        limit = self.settings.search_limit
        max_length = len(reading) + self.settings.completion_length_delta
        added = 0
        scan = self.system.scan_prefix(reading)
        try:
            for stored_key, words in scan:
                if not stored_key.startswith(reading) or len(stored_key) > max_length:
                    break
                for word in words:
                    if collector.add(stored_key, word):
                        added += 1
                        if added >= limit:
                            return added
        finally:
            scan.close()
        return added

    def _add_reading(self, collector: CandidateCollector, reading: str) -> None:
        collector.add(reading, reading)
        collector.add(reading, to_wide_katakana(reading))
        if self.settings.convert_halfkana:
            collector.add(reading, to_half_katakana(reading))

    @staticmethod
    def _add_literal(collector: CandidateCollector, key: str) -> None:
        collector.add(key, key)
        collector.add(key, to_wide_latin(key))
