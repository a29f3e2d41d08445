"""
Passphrase request and response schemas
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from phrasegen.config import settings


class GenerateRequest(BaseModel):
    """Request a single fresh passphrase"""
    length: int = Field(..., ge=1, le=settings.MAX_PASSPHRASE_LENGTH)


class PassphraseEntry(BaseModel):
    """One passphrase and the length it was generated for"""
    length: int
    passphrase: str


class PassphraseBatchResponse(BaseModel):
    """All passphrases in configured order"""
    passphrases: List[PassphraseEntry]
    generated_at: Optional[datetime] = None
