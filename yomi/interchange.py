"""Line-oriented import/export of dictionaries.

Format: UTF-8, one entry per line, ``key<TAB>word[<TAB>word...]``.
Import replays every word through ``upsert`` so existing entries are merged,
never overwritten.
"""

from dataclasses import dataclass
from typing import IO, Iterable, Iterator

from yomi.dictionary import BaseDictionaryInterface, format_entry_line, parse_entry_line
from yomi.errors import MalformedImportLine
from yomi.logger import logger


@dataclass
class ImportReport:
    imported: int = 0   # words stored
    rejected: int = 0   # words the store refused (empty, invalid, flush failure)
    skipped_lines: int = 0

    def __str__(self) -> str:
        return f"{self.imported} imported, {self.rejected} rejected, {self.skipped_lines} lines skipped"


def export_lines(dictionary: BaseDictionaryInterface) -> Iterator[str]:
    """Yield one interchange line (without newline) per key, in key order."""
    for key, words in dictionary.scan_all():
        yield format_entry_line(key, words)


def export_dictionary(dictionary: BaseDictionaryInterface, fp: IO[str]) -> int:
    """Write *dictionary* to the text stream *fp*; returns the number of lines."""
    count = 0
    for line in export_lines(dictionary):
        fp.write(line + "\n")
        count += 1
    return count


def import_lines(dictionary: BaseDictionaryInterface, lines: Iterable[str]) -> ImportReport:
    """Replay interchange *lines* into *dictionary*.

    Lines with fewer than two fields are skipped. Words of one line are
    replayed last-to-first, so on an empty store the stored order equals the
    file order.
    """
    report = ImportReport()
    for line_number, line in enumerate(lines, 1):
        try:
            key, words = parse_entry_line(line, line_number)
        except MalformedImportLine as e:
            logger.debug(str(e))
            report.skipped_lines += 1
            continue
        for word in reversed(words):
            if dictionary.upsert(key, word):
                report.imported += 1
            else:
                report.rejected += 1
    logger.info(f"Import into dictionary '{dictionary.name}': {report}")
    return report


def import_dictionary(dictionary: BaseDictionaryInterface, fp: IO[str]) -> ImportReport:
    return import_lines(dictionary, fp)
