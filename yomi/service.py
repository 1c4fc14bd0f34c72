import os
import sqlite3
from typing import IO, Dict, Iterable, List, Optional

from yomi import (
    CONNECTION_DICTIONARY,
    DICTIONARY_NAMES,
    LEARNING_DICTIONARY,
    SEED_PATH,
    SYSTEM_DICTIONARY,
)
from yomi.config import EngineSettings
from yomi.dictionary import (
    BaseDictionaryInterface,
    NullDictionary,
    SqliteDictionary,
    TsvDictionaryParser,
    open_dictionary,
)
from yomi.engine import DictionaryEngine
from yomi.errors import StoreUnavailable
from yomi.interchange import ImportReport, export_dictionary, import_lines
from yomi.learning import LearningManager
from yomi.logger import logger
from yomi.nlp.japanese.romanizer import RomajiTransliterator
from yomi.prediction import PredictionEngine
from yomi.schema import Candidate


def dictionary_path(directory: str, name: str) -> str:
    return os.path.join(directory, f"{name}.sqlite")


def install_system_dictionary(target: str, seed_path: str = SEED_PATH) -> bool:
    """Build the system dictionary from *seed_path* unless *target* already exists.

    Returns True when a new dictionary was built.
    """
    if os.path.exists(target) and os.path.getsize(target) > 0:
        return False
    if not os.path.exists(seed_path):
        logger.warning(f"System dictionary seed not found: {seed_path}")
        return False
    try:
        with SqliteDictionary(target, name=SYSTEM_DICTIONARY) as db:
            keys = db.build(TsvDictionaryParser(seed_path).parse())
    except (StoreUnavailable, OSError, sqlite3.Error) as e:
        logger.warning(f"Could not install system dictionary: {e}")
        if os.path.exists(target):
            os.remove(target)
        return False
    logger.info(f"✅ System dictionary with {keys} keys created at: {target}")
    return True


class ConversionService:
    """Everything one input method needs: search, learn, predict, import/export.

    Dictionaries are opened once and reused for the life of the service. A
    dictionary that cannot be opened is replaced by an empty stand-in, so the
    service keeps working in a degraded mode.
    """

    def __init__(self, settings: Optional[EngineSettings] = None,
                 dictionaries: Optional[Dict[str, BaseDictionaryInterface]] = None):
        self.settings = settings or EngineSettings.from_env()
        if dictionaries is None:
            dictionaries = self._open_dictionaries()
        # a store left out of *dictionaries* behaves like one that failed to open
        self.dictionaries = {
            name: dictionaries[name] if name in dictionaries else NullDictionary(name)
            for name in DICTIONARY_NAMES
        }
        transliterator = RomajiTransliterator()
        self.engine = DictionaryEngine(
            self.dictionaries[SYSTEM_DICTIONARY],
            self.dictionaries[LEARNING_DICTIONARY],
            self.settings,
            transliterator,
        )
        self.learning = LearningManager(
            self.dictionaries[LEARNING_DICTIONARY],
            self.dictionaries[CONNECTION_DICTIONARY],
            transliterator,
        )
        self.prediction = PredictionEngine(self.dictionaries[CONNECTION_DICTIONARY])

    def _open_dictionaries(self) -> Dict[str, BaseDictionaryInterface]:
        directory = self.settings.dictionaries_dir
        system_path = dictionary_path(directory, SYSTEM_DICTIONARY)
        install_system_dictionary(system_path)
        return {
            SYSTEM_DICTIONARY: open_dictionary(system_path, SYSTEM_DICTIONARY, readonly=True),
            LEARNING_DICTIONARY: open_dictionary(
                dictionary_path(directory, LEARNING_DICTIONARY), LEARNING_DICTIONARY),
            CONNECTION_DICTIONARY: open_dictionary(
                dictionary_path(directory, CONNECTION_DICTIONARY), CONNECTION_DICTIONARY),
        }

    # ---------------------------------------------------------------------
    # conversion cycle
    # ---------------------------------------------------------------------

    def search(self, key: str) -> List[Candidate]:
        return self.engine.search(key)

    def predict(self, last: Optional[Candidate]) -> Optional[List[Candidate]]:
        return self.prediction.predict(last)

    def commit(self, candidate: Candidate, previous: Optional[Candidate] = None) -> None:
        """Learn *candidate*; with a *previous* commit also learn the bigram
        and the concatenated word, in that order."""
        self.learning.commit(candidate.key, candidate.value)
        if previous is not None:
            self.learning.commit_connection(previous, candidate)
            self.learning.commit_concatenation(previous, candidate)

    # ---------------------------------------------------------------------
    # import / export
    # ---------------------------------------------------------------------

    def get_dictionary(self, name: str) -> BaseDictionaryInterface:
        if name not in DICTIONARY_NAMES:
            raise ValueError(f"Unknown dictionary: {name}")
        return self.dictionaries[name]

    @staticmethod
    def default_file_name(name: str) -> str:
        return f"{name}_dic.txt"

    def export_dictionary(self, name: str, fp: IO[str]) -> int:
        return export_dictionary(self.get_dictionary(name), fp)

    def import_dictionary(self, name: str, lines: Iterable[str]) -> ImportReport:
        dictionary = self.get_dictionary(name)
        if dictionary.readonly:
            raise ValueError(f"Dictionary '{name}' is read-only")
        return import_lines(dictionary, lines)

    def close(self) -> None:
        for dictionary in self.dictionaries.values():
            dictionary.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
