# Phrasegen - BIP39 word based passphrase generator
__version__ = "1.0.0"
