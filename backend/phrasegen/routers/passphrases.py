"""
Passphrase REST endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from phrasegen.exceptions import UnknownLengthError
from phrasegen.schemas.passphrase import (
    GenerateRequest,
    PassphraseBatchResponse,
    PassphraseEntry,
)
from phrasegen.services.batch import PassphraseBatch, get_batch
from phrasegen.services.telemetry import PASSPHRASES_GENERATED, increment_counter

router = APIRouter()


def _batch_response(batch: PassphraseBatch, passphrases) -> PassphraseBatchResponse:
    return PassphraseBatchResponse(
        passphrases=[
            PassphraseEntry(length=length, passphrase=passphrases[length])
            for length in batch.lengths
        ],
        generated_at=batch.generated_at,
    )


@router.get("/passphrases", response_model=PassphraseBatchResponse)
async def list_passphrases(batch: PassphraseBatch = Depends(get_batch)):
    return _batch_response(batch, batch.passphrases)


@router.post("/passphrases/refresh", response_model=PassphraseBatchResponse)
async def refresh_passphrases(batch: PassphraseBatch = Depends(get_batch)):
    return _batch_response(batch, batch.refresh())


@router.post("/passphrases/generate", response_model=PassphraseEntry)
async def generate_passphrase(
    request: GenerateRequest,
    batch: PassphraseBatch = Depends(get_batch),
):
    passphrase = batch.generator.generate(request.length)
    increment_counter(PASSPHRASES_GENERATED)
    return PassphraseEntry(length=request.length, passphrase=passphrase)


@router.get("/passphrases/{length}", response_model=PassphraseEntry)
async def get_passphrase(length: int, batch: PassphraseBatch = Depends(get_batch)):
    try:
        passphrase = batch.get(length)
    except UnknownLengthError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return PassphraseEntry(length=length, passphrase=passphrase)


@router.post("/passphrases/{length}/refresh", response_model=PassphraseEntry)
async def regenerate_passphrase(length: int, batch: PassphraseBatch = Depends(get_batch)):
    try:
        passphrase = batch.regenerate(length)
    except UnknownLengthError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return PassphraseEntry(length=length, passphrase=passphrase)
