from abc import ABC, abstractmethod


class BaseTransliterator(ABC):
    """Abstract base class for input-to-reading transliteration"""

    @abstractmethod
    def transliterate(self, text: str) -> str:
        """Return the reading of *text*. Must be total: never raises."""
        pass

    def is_resolved(self, reading: str) -> bool:
        """True when transliteration left no untranslated ASCII behind."""
        return not any(ch.isascii() for ch in reading)

    def __call__(self, text: str) -> str:
        return self.transliterate(text)
