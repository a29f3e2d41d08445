# Phrasegen Pydantic Schemas
from phrasegen.schemas.passphrase import (
    GenerateRequest,
    PassphraseBatchResponse,
    PassphraseEntry,
)

__all__ = ["GenerateRequest", "PassphraseBatchResponse", "PassphraseEntry"]
