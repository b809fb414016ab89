"""
Print every scorable word on a board, with its path, and the total score.

Usage:
    python -m scripts.find_words <dictionary> <tile> [<tile> ...] [--min-length N]

Examples:
    python -m scripts.find_words words.txt E E C A A L E P H N B O QU T T Y
    python -m scripts.find_words words.txt C A T S --min-length 2
"""
import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordsearch.engine import WordSearchEngine
from wordsearch.errors import InvalidInputError, NotReadyError
from wordsearch.settings import settings


def main(argv=None):
    parser = argparse.ArgumentParser(description="Find and score dictionary words on a square board")
    parser.add_argument("dictionary", help="Path to a dictionary file (first token of each line is a word)")
    parser.add_argument("tiles", nargs="+", help="Board tiles in row-major order, e.g. E E C A ... QU")
    parser.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH,
                        help=f"Minimum word length (default: {settings.MIN_WORD_LENGTH})")
    parser.add_argument("--verbose", action="store_true", help="Log each path search")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(name)s %(levelname)s %(message)s")

    engine = WordSearchEngine()
    try:
        engine.load_lexicon(args.dictionary)
        engine.set_board(args.tiles)
        words = engine.all_scorable_words(args.min_length)
        total = engine.score_for_words(words, args.min_length)
    except (InvalidInputError, NotReadyError) as e:
        parser.error(str(e))

    print(engine.board_text)
    print()
    for word in words:
        print(f"  {word:<16} {engine.is_on_board(word)}")
    print()
    print(f"{len(words)} words, score {total}")


if __name__ == "__main__":
    main()
