"""
Passphrase shape constants shared by the generator, batch and API layers.
"""

# Lengths shown by default, shortest first.
# 16: minimum most services recommend
# 20: NIST recommended length
# 28: high-security accounts
DEFAULT_LENGTHS = (12, 16, 18, 20, 24, 28, 32)

# (upper bound on requested length, words used), checked in order.
WORD_COUNT_TIERS = ((12, 3), (18, 4), (24, 5))
MAX_WORD_COUNT = 6

# Each selected word is cut to one of these caps, picked per word.
SHORT_WORD_CAP = 10
LONG_WORD_CAP = 15

# Digits inserted between words or appended at the end.
MIN_DIGITS = 2

DIGIT_MARKER = "digit"
SEPARATORS = ("_", "-", DIGIT_MARKER)
FALLBACK_SEPARATOR = "_"

# BIP39 shape.
WORDLIST_SIZE = 2048
DEFAULT_DRAW_SIZE = 12
MNEMONIC_STRENGTHS = (128, 160, 192, 224, 256)

# API bound on a single requested length.
MAX_PASSPHRASE_LENGTH = 256
