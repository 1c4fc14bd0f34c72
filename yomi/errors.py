"""Error taxonomy for dictionary stores and learning.

None of these escape ``search``/``predict``; stores raise them from their
private helpers and turn them into plain result values (``False``, ``None``,
an empty scan) at the public boundary.
"""


class DictionaryError(Exception):
    """Base class for all dictionary-layer failures."""


class StoreUnavailable(DictionaryError):
    """Raised when a backing store cannot be opened."""
    def __init__(self, name: str, reason: str):
        super().__init__(f"Dictionary '{name}' is unavailable: {reason}")
        self.name = name
        self.reason = reason


class FlushFailure(DictionaryError):
    """Raised when a mutation could not be made durable."""
    def __init__(self, name: str, reason: str):
        super().__init__(f"Failed to flush dictionary '{name}': {reason}")
        self.name = name
        self.reason = reason


class MalformedImportLine(DictionaryError):
    """Raised for an interchange line with fewer than two fields."""
    def __init__(self, line_number: int, line: str):
        super().__init__(f"Malformed line {line_number}: {line!r}")
        self.line_number = line_number
        self.line = line


class InvalidEntry(DictionaryError):
    """Raised when a key or word cannot be stored."""
    def __init__(self, key: str, word: str, reason: str):
        super().__init__(f"Invalid entry ({key!r}, {word!r}): {reason}")
        self.key = key
        self.word = word
        self.reason = reason


class EmptyKeyOrWord(InvalidEntry):
    """Raised when a commit carries an empty key or word."""
    def __init__(self, key: str, word: str):
        super().__init__(key, word, "key and word must be non-empty")
