"""
BIP39 wordlist (2048 words) and the word sources drawn from it
Uses the official mnemonic package for the wordlist
"""

import random
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from mnemonic import Mnemonic

from phrasegen.exceptions import WordlistError
from phrasegen.limits import DEFAULT_DRAW_SIZE, WORDLIST_SIZE


@lru_cache()
def load_wordlist(language: str = "english") -> Tuple[str, ...]:
    """Load and validate the BIP39 wordlist for a language"""
    try:
        words = Mnemonic(language).wordlist
    except Exception as e:
        raise WordlistError(f"Wordlist for '{language}' could not be loaded: {e}") from e

    if len(words) != WORDLIST_SIZE:
        raise WordlistError(f"Wordlist must contain exactly {WORDLIST_SIZE} words")
    if len(set(words)) != WORDLIST_SIZE:
        raise WordlistError("Wordlist must contain unique words")
    return tuple(words)


BIP39_WORDLIST = load_wordlist("english")


class RandomWordSource:
    """
    Draws distinct words uniformly without replacement
    Deterministic when the generator passed to draw() is seeded
    """

    def __init__(self, size: int = DEFAULT_DRAW_SIZE, language: str = "english"):
        if not 1 <= size <= WORDLIST_SIZE:
            raise ValueError(f"draw size must be between 1 and {WORDLIST_SIZE}")
        self.size = size
        self.language = language

    def draw(self, rng: random.Random) -> List[str]:
        return rng.sample(load_wordlist(self.language), self.size)


class MnemonicWordSource:
    """
    Draws the words of a checksummed BIP39 mnemonic
    The mnemonic package uses OS randomness, so rng is not consulted
    """

    def __init__(self, strength: int = 128, language: str = "english"):
        self.strength = strength
        self.language = language
        self._mnemo = Mnemonic(language)

    def draw(self, rng: Optional[random.Random] = None) -> List[str]:
        # Japanese mnemonics are joined with an ideographic space
        return self._mnemo.generate(strength=self.strength).split()


class FixedWordSource:
    """Always returns the same words, for reproducible runs"""

    def __init__(self, words: Sequence[str]):
        if not words:
            raise ValueError("fixed word source needs at least one word")
        self.words = list(words)

    def draw(self, rng: Optional[random.Random] = None) -> List[str]:
        return list(self.words)


def build_word_source(active_settings):
    """Build the word source named by WORD_SOURCE"""
    if active_settings.WORD_SOURCE == "mnemonic":
        return MnemonicWordSource(
            strength=active_settings.MNEMONIC_STRENGTH,
            language=active_settings.MNEMONIC_LANGUAGE,
        )
    return RandomWordSource(
        size=active_settings.DRAW_SIZE,
        language=active_settings.MNEMONIC_LANGUAGE,
    )
