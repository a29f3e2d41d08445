"""
Tests for the passphrase batch
"""

import random

import pytest

from phrasegen.config import Settings
from phrasegen.exceptions import InvalidLengthError, UnknownLengthError
from phrasegen.limits import DEFAULT_LENGTHS
from phrasegen.services import telemetry
from phrasegen.services.batch import PassphraseBatch, build_generator
from phrasegen.services.generator import PassphraseGenerator
from phrasegen.wordlist import MnemonicWordSource


def test_batch_keys_follow_configured_order(stub_batch):
    assert list(stub_batch.passphrases) == [12, 20]


def test_default_batch_covers_default_lengths():
    batch = PassphraseBatch(generator=PassphraseGenerator(rng=random.Random(1)))
    passphrases = batch.passphrases

    assert tuple(passphrases) == DEFAULT_LENGTHS
    for length, passphrase in passphrases.items():
        assert 0 < len(passphrase) <= length


def test_passphrases_are_generated_once_until_refresh(stub_batch, counting_generator):
    first = stub_batch.passphrases
    second = stub_batch.passphrases

    assert first == second
    assert counting_generator.calls == 2


def test_refresh_replaces_every_entry(stub_batch):
    before = stub_batch.passphrases
    generated_at = stub_batch.generated_at

    after = stub_batch.refresh()

    assert all(after[length] != before[length] for length in stub_batch.lengths)
    assert stub_batch.generated_at >= generated_at


def test_returned_mapping_is_a_copy(stub_batch):
    stub_batch.passphrases[12] = "tampered"
    assert stub_batch.get(12) != "tampered"


def test_regenerate_replaces_one_entry(stub_batch):
    before = stub_batch.passphrases

    new_value = stub_batch.regenerate(20)

    after = stub_batch.passphrases
    assert after[20] == new_value != before[20]
    assert after[12] == before[12]


def test_get_unknown_length_raises(stub_batch):
    with pytest.raises(UnknownLengthError) as exc:
        stub_batch.get(99)

    assert isinstance(exc.value, KeyError)
    assert "99" in str(exc.value)


def test_regenerate_unknown_length_raises(stub_batch):
    with pytest.raises(UnknownLengthError):
        stub_batch.regenerate(99)


@pytest.mark.parametrize("lengths", [(12, 12), (0, 12), (-4,)])
def test_batch_rejects_bad_lengths(lengths):
    with pytest.raises(InvalidLengthError):
        PassphraseBatch(lengths=lengths)


def test_batch_rejects_empty_lengths():
    with pytest.raises(ValueError):
        PassphraseBatch(lengths=())


def test_refresh_updates_telemetry(stub_batch):
    telemetry.reset_counters()

    stub_batch.refresh()

    counters = telemetry.get_counters_snapshot()
    assert counters[telemetry.BATCH_REFRESHES] == 1
    assert counters[telemetry.PASSPHRASES_GENERATED] == 2


def test_build_generator_uses_seed_and_source():
    settings = Settings(RANDOM_SEED=5, WORD_SOURCE="mnemonic", SHUFFLE_MODE="comparator")
    generator = build_generator(settings)

    assert isinstance(generator.word_source, MnemonicWordSource)
    assert generator.shuffle_mode == "comparator"


def test_seeded_batches_match():
    settings = Settings(RANDOM_SEED=5)
    first = PassphraseBatch(generator=build_generator(settings)).passphrases
    second = PassphraseBatch(generator=build_generator(settings)).passphrases
    assert first == second
