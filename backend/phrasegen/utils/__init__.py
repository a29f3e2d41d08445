# Phrasegen Utilities
