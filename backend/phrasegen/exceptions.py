"""
Domain errors raised by the generator, batch and wordlist layers.
"""


class PhrasegenError(Exception):
    """Base class for passphrase generator errors"""


class InvalidLengthError(PhrasegenError, ValueError):
    """Requested passphrase length is not usable"""

    def __init__(self, length, message=None):
        self.length = length
        super().__init__(message or f"length must be a positive integer, got {length!r}")


class UnknownLengthError(PhrasegenError, KeyError):
    """Length is not part of the configured batch"""

    def __init__(self, length):
        self.length = length
        super().__init__(length)

    def __str__(self) -> str:
        return f"no passphrase configured for length {self.length}"


class WordlistError(PhrasegenError, RuntimeError):
    """Wordlist could not be loaded or failed validation"""
