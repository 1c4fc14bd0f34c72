import argparse
import sys

from yomi import DICTIONARY_NAMES
from yomi.logger import log_to_stderr, logger
from yomi.service import ConversionService

STDOUT = "-"


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(
        description="Export a dictionary in interchange format (key<TAB>word...)."
    )
    parser.add_argument("dictionary", choices=DICTIONARY_NAMES, help="Dictionary to export")
    parser.add_argument(
        "output", nargs="?",
        help="Output file (defaults to <dictionary>_dic.txt, '-' for stdout)",
    )
    args = parser.parse_args(argv)

    path = args.output or ConversionService.default_file_name(args.dictionary)
    if path == STDOUT:
        # stdout carries the entries only
        log_to_stderr()

    with ConversionService() as service:
        if path == STDOUT:
            count = service.export_dictionary(args.dictionary, sys.stdout)
            sys.stdout.flush()
        else:
            with open(path, "w", encoding="utf-8") as f:
                count = service.export_dictionary(args.dictionary, f)
    logger.info(f"✅ Exported {count} entries from dictionary '{args.dictionary}' to {path}")


if __name__ == "__main__":
    main()
