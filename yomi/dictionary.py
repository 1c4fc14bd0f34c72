import bisect
import json
import os
import sqlite3
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import jaconv
from pykakasi import kakasi

from yomi.errors import (
    EmptyKeyOrWord,
    FlushFailure,
    InvalidEntry,
    MalformedImportLine,
    StoreUnavailable,
)
from yomi.logger import logger

FIELD_SEPARATOR = "\t"
_FORBIDDEN_CHARS = ("\t", "\n", "\r")

Entry = Tuple[str, "WordList"]


# ──────────────────────────────────────────────────────────────────────────────
# WORD LISTS
# ──────────────────────────────────────────────────────────────────────────────
class WordList(tuple):
    """Ordered, duplicate-free words of one dictionary key.

    The first word is the most recently learned one. Instances are immutable;
    ``promote`` returns a new list.
    """

    def __new__(cls, words: Iterable[str] = ()):
        seen = set()
        unique = []
        for word in words:
            if word not in seen:
                seen.add(word)
                unique.append(word)
        return super().__new__(cls, unique)

    def promote(self, word: str) -> "WordList":
        """Move (or insert) *word* to the front, keeping the others in order."""
        return WordList([word, *(w for w in self if w != word)])

    def with_appended(self, word: str) -> "WordList":
        """Add *word* at the back unless it is already present."""
        if word in self:
            return self
        return WordList([*self, word])

    def __repr__(self) -> str:
        return f"WordList({list(self)!r})"


def parse_entry_line(line: str, line_number: int = 0) -> Tuple[str, List[str]]:
    """Split an interchange line ``key<TAB>word[<TAB>word...]``.

    Raises MalformedImportLine when the line has fewer than two fields.
    """
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) < 2:
        raise MalformedImportLine(line_number, line)
    return fields[0], fields[1:]


def format_entry_line(key: str, words: Iterable[str]) -> str:
    return FIELD_SEPARATOR.join([key, *words])


# ──────────────────────────────────────────────────────────────────────────────
# STORES
# ──────────────────────────────────────────────────────────────────────────────
class BaseDictionaryInterface(ABC):
    """Persistent sorted map of key -> WordList (unified API).

    Keys are ordered by Unicode code point. ``scan_prefix`` yields entries
    from the first key >= *key* onwards; callers stop once a key no longer
    starts with the prefix, which keeps iteration lazy.
    """

    name: str = "dictionary"
    readonly: bool = False
    available: bool = True

    @abstractmethod
    def find_exact(self, key: str) -> Optional[WordList]:
        """Return the word list stored under *key*, or None."""
        pass

    @abstractmethod
    def scan_prefix(self, key: str) -> Iterator[Entry]:
        """Yield (stored_key, words) in key order starting at *key*."""
        pass

    @abstractmethod
    def scan_all(self) -> Iterator[Entry]:
        """Yield every (key, words) in key order."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close database connection or cleanup resources."""
        pass

    @abstractmethod
    def _store(self, key: str, words: WordList) -> None:
        """Write *words* under *key*; raise FlushFailure if the write fails."""
        pass

    @abstractmethod
    def _commit(self) -> None:
        """Make pending writes durable; raise FlushFailure on error."""
        pass

    def _validate(self, key: str, word: str) -> None:
        if not key or not word:
            raise EmptyKeyOrWord(key, word)
        for ch in _FORBIDDEN_CHARS:
            if ch in key or ch in word:
                raise InvalidEntry(key, word, "tabs and newlines cannot be stored")

    def upsert(self, key: str, word: str) -> bool:
        """Store *word* as the most recent word of *key*.

        Returns True once the change is flushed. Invalid input, a read-only
        store or a failed flush return False; nothing is raised.
        """
        if self.readonly:
            logger.warning(f"Refusing to write to read-only dictionary '{self.name}'")
            return False
        try:
            self._validate(key, word)
            current = self.find_exact(key)
            words = WordList([word]) if current is None else current.promote(word)
            self._store(key, words)
            self._commit()
        except InvalidEntry as e:
            logger.debug(f"Skipped upsert into '{self.name}': {e}")
            return False
        except FlushFailure as e:
            logger.warning(str(e))
            return False
        return True

    def flush(self) -> None:
        try:
            self._commit()
        except FlushFailure as e:
            logger.warning(str(e))

    def count(self) -> int:
        return sum(1 for _ in self.scan_all())

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class SqliteDictionary(BaseDictionaryInterface):
    schema = """
    CREATE TABLE IF NOT EXISTS entries (
        key TEXT PRIMARY KEY,
        words TEXT NOT NULL
    );
    """
    _UPSERT_SQL = "INSERT OR REPLACE INTO entries (key, words) VALUES (?, ?)"

    def __init__(self, path: str, name: Optional[str] = None, readonly: bool = False):
        self.path = path
        self.name = name or os.path.splitext(os.path.basename(path))[0]
        self.readonly = readonly
        self.conn = self._connect()

    def _connect(self) -> sqlite3.Connection:
        conn = None
        try:
            if self.readonly:
                # BINARY collation on UTF-8 text == code point order
                uri = Path(self.path).resolve().as_uri() + "?mode=ro"
                conn = sqlite3.connect(uri, uri=True)
                conn.execute("SELECT key, words FROM entries LIMIT 1").fetchall()
            else:
                directory = os.path.dirname(os.path.abspath(self.path))
                os.makedirs(directory, exist_ok=True)
                conn = sqlite3.connect(self.path)
                conn.execute(self.schema)
                conn.commit()
        except (sqlite3.Error, OSError) as e:
            if conn is not None:
                conn.close()
            raise StoreUnavailable(self.name, str(e)) from e
        return conn

    def close(self):
        if self.conn:
            self.conn.close()
            self.conn = None

    def _decode(self, key: str, raw: str) -> Optional[WordList]:
        try:
            return WordList(json.loads(raw))
        except (ValueError, TypeError):
            logger.warning(f"Corrupt word list for key '{key}' in dictionary '{self.name}'")
            return None

    def _iterate(self, sql: str, params: tuple = ()) -> Iterator[Entry]:
        try:
            cursor = self.conn.execute(sql, params)
            for key, raw in cursor:
                words = self._decode(key, raw)
                if words is not None:
                    yield key, words
        except sqlite3.Error as e:
            logger.warning(f"Scan of dictionary '{self.name}' failed: {e}")

    def find_exact(self, key: str) -> Optional[WordList]:
        try:
            row = self.conn.execute("SELECT words FROM entries WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            logger.warning(f"Lookup of '{key}' in dictionary '{self.name}' failed: {e}")
            return None
        if row is None:
            return None
        return self._decode(key, row[0])

    def scan_prefix(self, key: str) -> Iterator[Entry]:
        yield from self._iterate("SELECT key, words FROM entries WHERE key >= ? ORDER BY key", (key,))

    def scan_all(self) -> Iterator[Entry]:
        yield from self._iterate("SELECT key, words FROM entries ORDER BY key")

    def count(self) -> int:
        try:
            return self.conn.execute("SELECT COUNT(*) FROM entries").fetchone()[0]
        except sqlite3.Error:
            return 0

    @staticmethod
    def _encode(words: WordList) -> str:
        return json.dumps(list(words), ensure_ascii=False)

    def _store(self, key: str, words: WordList) -> None:
        try:
            self.conn.execute(self._UPSERT_SQL, (key, self._encode(words)))
        except sqlite3.Error as e:
            self.conn.rollback()
            raise FlushFailure(self.name, str(e)) from e

    def _commit(self) -> None:
        try:
            self.conn.commit()
        except sqlite3.Error as e:
            raise FlushFailure(self.name, str(e)) from e

    def build(self, rows: Iterable["SeedRow"], batch_size: int = 1000) -> int:
        """Bulk load seed rows; the first word seen for a key ranks first.

        Intended for creating a fresh store. Returns the number of keys written.
        """
        if self.readonly:
            raise StoreUnavailable(self.name, "cannot build a read-only dictionary")
        grouped: Dict[str, WordList] = {}
        for row in rows:
            if not row.reading or not row.word:
                continue
            current = grouped.get(row.reading)
            grouped[row.reading] = WordList([row.word]) if current is None else current.with_appended(row.word)

        self.conn.execute("PRAGMA synchronous=OFF")
        buf = []
        for key, words in grouped.items():
            buf.append((key, self._encode(words)))
            if len(buf) >= batch_size:
                self.conn.executemany(self._UPSERT_SQL, buf)
                buf.clear()
        if buf:
            self.conn.executemany(self._UPSERT_SQL, buf)
        self.conn.commit()
        self.conn.execute("PRAGMA synchronous=FULL")
        return len(grouped)


class InMemoryDictionary(BaseDictionaryInterface):
    """Sorted in-process store; same semantics as SqliteDictionary, no persistence."""

    def __init__(self, name: str = "memory", entries: Optional[Dict[str, Iterable[str]]] = None):
        self.name = name
        self._entries: Dict[str, WordList] = {}
        self._keys: List[str] = []
        for key, words in (entries or {}).items():
            self._store(key, WordList(words))

    def find_exact(self, key: str) -> Optional[WordList]:
        return self._entries.get(key)

    def scan_prefix(self, key: str) -> Iterator[Entry]:
        i = bisect.bisect_left(self._keys, key)
        while i < len(self._keys):
            stored = self._keys[i]
            yield stored, self._entries[stored]
            i += 1

    def scan_all(self) -> Iterator[Entry]:
        yield from self.scan_prefix("")

    def count(self) -> int:
        return len(self._keys)

    def _store(self, key: str, words: WordList) -> None:
        if key not in self._entries:
            bisect.insort(self._keys, key)
        self._entries[key] = words

    def _commit(self) -> None:
        pass

    def close(self) -> None:
        pass


class NullDictionary(BaseDictionaryInterface):
    """Stand-in for a store that failed to open: always empty, ignores writes."""

    available = False

    def __init__(self, name: str = "unavailable"):
        self.name = name

    def find_exact(self, key: str) -> Optional[WordList]:
        return None

    def scan_prefix(self, key: str) -> Iterator[Entry]:
        yield from ()

    def scan_all(self) -> Iterator[Entry]:
        yield from ()

    def upsert(self, key: str, word: str) -> bool:
        return False

    def _store(self, key: str, words: WordList) -> None:
        pass

    def _commit(self) -> None:
        pass

    def close(self) -> None:
        pass


def open_dictionary(path: str, name: Optional[str] = None, readonly: bool = False) -> BaseDictionaryInterface:
    """Open a SqliteDictionary, degrading to a NullDictionary if that fails."""
    try:
        dictionary = SqliteDictionary(path, name=name, readonly=readonly)
    except StoreUnavailable as e:
        logger.warning(f"{e}; continuing without it")
        return NullDictionary(e.name)
    logger.debug(f"Opened dictionary '{dictionary.name}' at {path} (readonly={readonly})")
    return dictionary


# ──────────────────────────────────────────────────────────────────────────────
# SEED PARSERS
# ──────────────────────────────────────────────────────────────────────────────
@dataclass
class SeedRow:
    reading: str
    word: str


class BaseDictionaryParser(ABC):
    """Abstract base class for seed parsers feeding the system dictionary."""

    def __init__(self, source_path: str):
        self.source_path = source_path

    @abstractmethod
    def parse(self) -> Iterable[SeedRow]:
        """Parse the dictionary source and yield SeedRow objects."""
        pass

    def normalize_reading(self, text: str) -> str:
        """Readings are stored as hiragana; fold katakana and trim whitespace."""
        return jaconv.kata2hira(text.strip())


class XMLParserMixin:
    """Mixin for XML parsing utilities."""

    def extract_xml_text_list(self, parent_element, xpath: str) -> List[str]:
        """Extract list of text content from XML elements."""
        return [elem.text for elem in parent_element.findall(xpath) if elem.text]


class TsvDictionaryParser(BaseDictionaryParser):
    """Seed in the interchange format: ``reading<TAB>word[<TAB>word...]``."""

    def parse(self) -> Iterable[SeedRow]:
        with open(self.source_path, "r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, 1):
                if not line.strip() or line.startswith("#"):
                    continue
                try:
                    key, words = parse_entry_line(line, line_number)
                except MalformedImportLine as e:
                    logger.debug(str(e))
                    continue
                reading = self.normalize_reading(key)
                for word in words:
                    if word:
                        yield SeedRow(reading=reading, word=word)


class JapaneseJMDictParser(BaseDictionaryParser, XMLParserMixin):
    """JMdict XML: each reading paired with the kanji spellings it applies to.

    Readings marked ``re_nokanji`` and entries without kanji map to the kana
    spelling itself; ``re_restr`` limits a reading to the listed kanji.
    """

    def readings_for(self, ent) -> Iterable[Tuple[str, List[str]]]:
        kanjis = self.extract_xml_text_list(ent, "k_ele/keb")
        for r_ele in ent.findall("r_ele"):
            reb = r_ele.findtext("reb")
            if not reb:
                continue
            if not kanjis or r_ele.find("re_nokanji") is not None:
                yield reb, [reb]
                continue
            restricted = self.extract_xml_text_list(r_ele, "re_restr")
            yield reb, restricted or kanjis

    def parse(self) -> Iterable[SeedRow]:
        # Stream parse XML
        for event, ent in ET.iterparse(self.source_path, events=("end",)):
            if ent.tag != "entry":
                continue
            for reb, words in self.readings_for(ent):
                reading = self.normalize_reading(reb)
                for word in words:
                    yield SeedRow(reading=reading, word=word)
            ent.clear()


class WordListParser(BaseDictionaryParser):
    """Plain word list, one word per line; readings come from pykakasi."""

    def __init__(self, source_path: str):
        super().__init__(source_path)
        self._kks = kakasi()

    def to_reading(self, word: str) -> str:
        return "".join(item["hira"] for item in self._kks.convert(word))

    def parse(self) -> Iterable[SeedRow]:
        with open(self.source_path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if not word or word.startswith("#"):
                    continue
                reading = self.normalize_reading(self.to_reading(word))
                if reading:
                    yield SeedRow(reading=reading, word=word)
