import argparse

from yomi import CONNECTION_DICTIONARY, LEARNING_DICTIONARY
from yomi.logger import logger
from yomi.service import ConversionService


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(
        description="Import an interchange file (key<TAB>word...) into a user dictionary."
    )
    parser.add_argument(
        "dictionary", choices=[LEARNING_DICTIONARY, CONNECTION_DICTIONARY],
        help="Dictionary to import into",
    )
    parser.add_argument(
        "input", nargs="?",
        help="Input file (defaults to <dictionary>_dic.txt)",
    )
    args = parser.parse_args(argv)

    path = args.input or ConversionService.default_file_name(args.dictionary)
    with ConversionService() as service:
        with open(path, "r", encoding="utf-8") as f:
            report = service.import_dictionary(args.dictionary, f)
    logger.info(f"🎉 Finished importing {path}: {report}")


if __name__ == "__main__":
    main()
