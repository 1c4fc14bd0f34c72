import argparse
import itertools
import os

from yomi import DICTIONARIES_DIR, SEED_PATH, SYSTEM_DICTIONARY
from yomi.dictionary import (
    JapaneseJMDictParser,
    SqliteDictionary,
    TsvDictionaryParser,
    WordListParser,
)
from yomi.logger import logger


def main():
    parser = argparse.ArgumentParser(
        description="Build the read-only system dictionary from seed sources."
    )
    parser.add_argument(
        "--output",
        default=os.path.join(DICTIONARIES_DIR, f"{SYSTEM_DICTIONARY}.sqlite"),
        help="Path of the SQLite dictionary to create",
    )
    parser.add_argument(
        "--tsv", action="append", default=[],
        help="Seed file in interchange format (reading<TAB>word...); repeatable",
    )
    parser.add_argument(
        "--jmdict", action="append", default=[],
        help="JMdict XML file (e.g. JMdict_e.xml); repeatable",
    )
    parser.add_argument(
        "--wordlist", action="append", default=[],
        help="Plain word list, one word per line; readings derived automatically",
    )
    parser.add_argument(
        "--force", action="store_true",
        help="Replace the output file if it already exists",
    )
    args = parser.parse_args()

    sources = (
        [TsvDictionaryParser(path) for path in args.tsv]
        + [JapaneseJMDictParser(path) for path in args.jmdict]
        + [WordListParser(path) for path in args.wordlist]
    )
    if not sources:
        logger.info(f"No sources given, using bundled seed: {SEED_PATH}")
        sources = [TsvDictionaryParser(SEED_PATH)]

    if os.path.exists(args.output):
        if not args.force:
            parser.error(f"{args.output} already exists (use --force to replace it)")
        os.remove(args.output)

    logger.info("Creating dictionary entries...")
    with SqliteDictionary(args.output, name=SYSTEM_DICTIONARY) as db:
        keys = db.build(itertools.chain.from_iterable(p.parse() for p in sources))
    logger.info(f"✅ System dictionary with {keys} keys created at: {args.output}")


if __name__ == "__main__":
    main()
