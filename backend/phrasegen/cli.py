"""
Terminal front end - prints a batch of passphrases
"""

import random
import sys
from argparse import ArgumentParser

from phrasegen.config import ALLOWED_WORD_SOURCES, settings, validate_settings
from phrasegen.exceptions import InvalidLengthError
from phrasegen.services.batch import PassphraseBatch
from phrasegen.services.generator import PassphraseGenerator, SHUFFLE_MODES
from phrasegen.wordlist import build_word_source


def build_parser() -> ArgumentParser:
    p = ArgumentParser(
        prog="phrasegen",
        description="Generate passphrases from BIP39 words, one per length.",
    )
    p.add_argument(
        "lengths", nargs="*", type=int,
        help="passphrase lengths (default: the configured batch)",
    )
    p.add_argument("--seed", type=int, default=settings.RANDOM_SEED, help="seed for reproducible output")
    p.add_argument("--shuffle", choices=SHUFFLE_MODES, default=settings.SHUFFLE_MODE)
    p.add_argument("--source", choices=ALLOWED_WORD_SOURCES, default=settings.WORD_SOURCE)
    return p


def main(argv=None, out=None) -> int:
    out = out or sys.stdout
    p = build_parser()
    args = p.parse_args(argv)

    try:
        validate_settings(settings)
    except ValueError as e:
        p.error(str(e))

    word_source = build_word_source(settings.model_copy(update={"WORD_SOURCE": args.source}))
    generator = PassphraseGenerator(
        rng=random.Random(args.seed),
        word_source=word_source,
        shuffle_mode=args.shuffle,
    )

    try:
        batch = PassphraseBatch(args.lengths or settings.passphrase_lengths, generator)
    except InvalidLengthError as e:
        p.error(str(e))

    width = max(len(str(length)) for length in batch.lengths)
    for length, passphrase in batch.passphrases.items():
        out.write(f"{length:>{width}}  {passphrase}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
