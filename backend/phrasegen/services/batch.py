"""
Batch of passphrases, one per configured length
"""

import random
from datetime import datetime, timezone
from functools import lru_cache
from threading import Lock
from typing import Dict, Iterable, Optional, Tuple

from phrasegen.config import get_settings
from phrasegen.exceptions import InvalidLengthError, UnknownLengthError
from phrasegen.limits import DEFAULT_LENGTHS
from phrasegen.logging_config import log_batch_refreshed, log_unknown_length
from phrasegen.services.generator import PassphraseGenerator, validate_length
from phrasegen.services.telemetry import (
    BATCH_REFRESHES,
    PASSPHRASES_GENERATED,
    increment_counter,
)
from phrasegen.wordlist import build_word_source


class PassphraseBatch:
    """
    Holds one passphrase per length, in configured order

    Entries are generated on first access and replaced together by refresh().
    """

    def __init__(
        self,
        lengths: Iterable[int] = DEFAULT_LENGTHS,
        generator: Optional[PassphraseGenerator] = None,
    ):
        lengths = tuple(lengths)
        if not lengths:
            raise ValueError("batch needs at least one length")
        for length in lengths:
            validate_length(length)
        if len(set(lengths)) != len(lengths):
            raise InvalidLengthError(lengths, "batch lengths must not repeat")

        self._lengths = lengths
        self.generator = generator or PassphraseGenerator()
        self._passphrases: Dict[int, str] = {}
        self.generated_at: Optional[datetime] = None
        self._lock = Lock()

    @property
    def lengths(self) -> Tuple[int, ...]:
        return self._lengths

    @property
    def passphrases(self) -> Dict[int, str]:
        """Current passphrases keyed by length, generated on first access"""
        with self._lock:
            if not self._passphrases:
                self._refresh_locked()
            return dict(self._passphrases)

    def refresh(self) -> Dict[int, str]:
        """Regenerate every entry"""
        with self._lock:
            self._refresh_locked()
            return dict(self._passphrases)

    def _refresh_locked(self) -> None:
        self._passphrases = {
            length: self.generator.generate(length) for length in self._lengths
        }
        self.generated_at = datetime.now(timezone.utc)
        increment_counter(BATCH_REFRESHES)
        increment_counter(PASSPHRASES_GENERATED, len(self._lengths))
        log_batch_refreshed(len(self._lengths))

    def get(self, length: int) -> str:
        """Passphrase for one configured length"""
        if length not in self._lengths:
            log_unknown_length(length)
            raise UnknownLengthError(length)
        return self.passphrases[length]

    def regenerate(self, length: int) -> str:
        """Replace the passphrase for one configured length"""
        if length not in self._lengths:
            log_unknown_length(length)
            raise UnknownLengthError(length)
        with self._lock:
            if not self._passphrases:
                self._refresh_locked()
            self._passphrases[length] = self.generator.generate(length)
            increment_counter(PASSPHRASES_GENERATED)
            return self._passphrases[length]


def build_generator(active_settings) -> PassphraseGenerator:
    """Generator wired from settings"""
    return PassphraseGenerator(
        rng=random.Random(active_settings.RANDOM_SEED),
        word_source=build_word_source(active_settings),
        shuffle_mode=active_settings.SHUFFLE_MODE,
    )


@lru_cache()
def get_batch() -> PassphraseBatch:
    """Process-wide batch built from settings"""
    active_settings = get_settings()
    return PassphraseBatch(
        lengths=active_settings.passphrase_lengths,
        generator=build_generator(active_settings),
    )
