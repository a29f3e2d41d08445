# Phrasegen Services
from phrasegen.services.batch import PassphraseBatch, get_batch
from phrasegen.services.generator import PassphraseGenerator, generate

__all__ = ["PassphraseBatch", "get_batch", "PassphraseGenerator", "generate"]
