# Phrasegen API Routers
from phrasegen.routers import health, passphrases

__all__ = ["health", "passphrases"]
