#!/usr/bin/env python3
"""Interactive console for trying out conversion, learning and prediction.

Type romaji and press enter to list candidates, then enter the number of the
candidate to commit. An empty line ends the current sentence; ``:q`` quits.
"""
import argparse
from typing import List, Optional

from yomi.config import EngineSettings
from yomi.logger import set_verbose
from yomi.schema import Candidate
from yomi.service import ConversionService

PROMPT = "yomi> "
MAX_SHOWN = 20


def show(candidates: List[Candidate], title: str) -> None:
    print(title)
    for i, candidate in enumerate(candidates[:MAX_SHOWN]):
        print(f"  {i:2d}: {candidate.value}  ({candidate.key})")


def choose(candidates: List[Candidate]) -> Optional[Candidate]:
    answer = input("pick> ").strip()
    if not answer:
        return None
    if answer.isdigit() and int(answer) < len(candidates):
        return candidates[int(answer)]
    print("⚠️ No such candidate")
    return None


def main():
    parser = argparse.ArgumentParser(description="Romaji to Japanese conversion console.")
    parser.add_argument("--data-dir", help="Directory holding the dictionaries")
    parser.add_argument("--halfkana", action="store_true", help="Also offer halfwidth katakana")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped learning steps")
    args = parser.parse_args()
    if args.verbose:
        set_verbose()

    settings = EngineSettings.from_env()
    overrides = {}
    if args.data_dir:
        overrides["data_dir"] = args.data_dir
    if args.halfkana:
        overrides["convert_halfkana"] = True
    if overrides:
        settings = settings.model_copy(update=overrides)

    previous: Optional[Candidate] = None
    sentence = ""
    with ConversionService(settings) as service:
        while True:
            try:
                key = input(PROMPT).strip()
            except (EOFError, KeyboardInterrupt):
                print()
                break
            if key == ":q":
                break
            if not key:
                if sentence:
                    print(f"📝 {sentence}")
                previous, sentence = None, ""
                continue

            candidates = service.search(key)
            show(candidates, "Candidates:")
            selected = choose(candidates)
            if selected is None:
                continue

            service.commit(selected, previous)
            previous = selected
            sentence += selected.value

            predictions = service.predict(previous)
            if predictions:
                show(predictions, "Next:")


if __name__ == "__main__":
    main()
