"""
Passphrase generation from BIP39 words

A passphrase is a handful of words drawn from the wordlist, each cut to
10 or 15 characters, joined by "_", "-" or a digit, topped up with digits
until at least two are present, then cut to the requested length.
"""

import logging
import random
from functools import cmp_to_key
from typing import List, Optional, Sequence

from phrasegen.exceptions import InvalidLengthError
from phrasegen.limits import (
    DIGIT_MARKER,
    FALLBACK_SEPARATOR,
    LONG_WORD_CAP,
    MAX_WORD_COUNT,
    MIN_DIGITS,
    SEPARATORS,
    SHORT_WORD_CAP,
    WORD_COUNT_TIERS,
)
from phrasegen.wordlist import RandomWordSource

logger = logging.getLogger(__name__)

SHUFFLE_MODES = ("uniform", "comparator")


def validate_length(length) -> int:
    """Return length if it is a positive int, raise InvalidLengthError otherwise"""
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InvalidLengthError(length)
    return length


def word_count_for_length(length: int) -> int:
    """Number of words used for a requested passphrase length"""
    for upper_bound, count in WORD_COUNT_TIERS:
        if length <= upper_bound:
            return count
    return MAX_WORD_COUNT


def _random_digit(rng: random.Random) -> str:
    return str(rng.randrange(10))


def select_words(
    words: Sequence[str],
    count: int,
    rng: random.Random,
    shuffle_mode: str = "uniform",
) -> List[str]:
    """
    Permute the whole draw and keep the first count words.

    "uniform" is a Fisher-Yates shuffle. "comparator" sorts with a random
    comparator, which is biased toward the original order.
    """
    pool = list(words)
    if shuffle_mode == "uniform":
        rng.shuffle(pool)
    elif shuffle_mode == "comparator":
        pool = sorted(pool, key=cmp_to_key(lambda _a, _b: rng.random() - 0.5))
    else:
        raise ValueError(f"unknown shuffle mode: {shuffle_mode}")
    return pool[:count]


def transform_word(word: str, index: int, rng: random.Random) -> str:
    """Cut a word to 10 or 15 characters and apply the casing rule for its position"""
    cap = SHORT_WORD_CAP if rng.random() > 0.5 else LONG_WORD_CAP
    segment = word[:cap]
    if index == 0:
        return segment.lower()
    return segment.upper() if rng.random() > 0.5 else segment


def join_words(words: Sequence[str], rng: random.Random) -> str:
    """Join words with separators, then append digits until MIN_DIGITS are present"""
    result = words[0]
    digit_count = 0

    for word in words[1:]:
        separator = rng.choice(SEPARATORS)
        if separator == DIGIT_MARKER and digit_count < MIN_DIGITS:
            result += _random_digit(rng)
            digit_count += 1
        else:
            result += FALLBACK_SEPARATOR if separator == DIGIT_MARKER else separator
        result += word

    while digit_count < MIN_DIGITS:
        result += _random_digit(rng)
        digit_count += 1

    return result


class PassphraseGenerator:
    """
    Builds passphrases from an injected random generator and word source

    The generator object is the only state shared between calls.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        word_source=None,
        shuffle_mode: str = "uniform",
    ):
        if shuffle_mode not in SHUFFLE_MODES:
            raise ValueError(f"unknown shuffle mode: {shuffle_mode}")
        self.rng = rng if rng is not None else random.Random()
        self.word_source = word_source if word_source is not None else RandomWordSource()
        self.shuffle_mode = shuffle_mode

    def generate(self, target_length: int) -> str:
        """Generate one passphrase no longer than target_length"""
        validate_length(target_length)

        words = self.word_source.draw(self.rng)
        # Never ask for more words than the draw supplies
        word_count = min(word_count_for_length(target_length), len(words))

        selected = select_words(words, word_count, self.rng, self.shuffle_mode)
        transformed = [
            transform_word(word, index, self.rng) for index, word in enumerate(selected)
        ]
        result = join_words(transformed, self.rng)[:target_length]

        logger.debug(
            "Generated length %d passphrase from %d words (%d chars)",
            target_length,
            word_count,
            len(result),
        )
        return result


def generate(
    target_length: int,
    *,
    rng: Optional[random.Random] = None,
    word_source=None,
    shuffle_mode: str = "uniform",
) -> str:
    """Generate one passphrase without keeping a generator around"""
    return PassphraseGenerator(
        rng=rng, word_source=word_source, shuffle_mode=shuffle_mode
    ).generate(target_length)
