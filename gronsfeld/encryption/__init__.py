from gronsfeld.encryption.cipher import (
    ALPHA_NUM,
    ALPHABET,
    MODULUS,
    Cipher,
    CipherAlgorithm,
    CipherError,
    CipherInfo,
    normalize_open_text,
)

__all__ = [
    "ALPHA_NUM",
    "ALPHABET",
    "MODULUS",
    "Cipher",
    "CipherAlgorithm",
    "CipherError",
    "CipherInfo",
    "normalize_open_text",
]
