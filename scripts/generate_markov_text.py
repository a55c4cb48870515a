"""CLI entry point to build a Markov chain and generate sentences from it."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from markov_text import (
    REPRESENTATIONS,
    ChainConfig,
    MarkovTextError,
    SentenceGenerator,
    build,
    from_seed,
    load_corpus,
)
from markov_text.random_source import random_seed_text


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate sentences with a word-level Markov chain")
    parser.add_argument(
        "--corpus",
        type=Path,
        action="append",
        help="Path to a plain-text corpus (repeat to join several files)",
        default=None,
    )
    parser.add_argument("-o", "--order", type=int, default=2, help="Words per chain state")
    parser.add_argument(
        "-s",
        "--seed",
        type=str,
        default=None,
        help="Seed text for the random number generator",
    )
    parser.add_argument("--count", type=int, default=1, help="Number of sentences to generate")
    parser.add_argument(
        "--representation",
        choices=sorted(REPRESENTATIONS),
        default="span",
        help="State representation used by the model",
    )
    parser.add_argument("--max-word-count", type=int, default=1000)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    seed = args.seed or random_seed_text()

    try:
        corpus = load_corpus(args.corpus)
        config = ChainConfig(order=args.order, max_word_count=args.max_word_count)
        model = build(corpus, representation=args.representation, config=config)
        generator = SentenceGenerator(model)
        random = from_seed(seed)
        for _ in range(args.count):
            print()
            print(generator.generate(random))
    except (MarkovTextError, FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print()
    print(f"Seed: {seed}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
