from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict

from gronsfeld.encryption.cipher import ALPHABET, Cipher

logger = logging.getLogger(__name__)


class EncryptionService:
    """Keyed access to :class:`Cipher` instances.

    Ciphers never change after construction, so one instance per key is
    built and shared between requests.
    """

    def __init__(self, cache_size: int = 128) -> None:
        self._cached_cipher = lru_cache(maxsize=cache_size)(Cipher)

    def get_cipher(self, key: str) -> Cipher:
        return self._cached_cipher(key)

    def encrypt(self, key: str, open_text: str) -> str:
        cipher = self.get_cipher(key)
        result = cipher.encrypt(open_text)
        logger.debug("Encrypted %d letters", len(result))
        return result

    def decrypt(self, key: str, cipher_text: str) -> str:
        cipher = self.get_cipher(key)
        result = cipher.decrypt(cipher_text)
        logger.debug("Decrypted %d letters", len(result))
        return result

    def verify(self, key: str, open_text: str, cipher_text: str) -> bool:
        return self.get_cipher(key).matches(open_text, cipher_text)

    def describe(self, lang: str) -> Dict[str, Any]:
        info = Cipher.info
        return {
            "slug": info.slug,
            "name": info.name,
            "category": info.category,
            "alphabet": ALPHABET,
            "key_label": Cipher.get_key_label(lang),
            "key_hint": Cipher.get_key_hint(lang),
        }
