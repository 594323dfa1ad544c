"""Gronsfeld cipher over the 33-letter Russian alphabet."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple

logger = logging.getLogger(__name__)

ALPHABET = "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"
MODULUS = len(ALPHABET)
ALPHA_NUM: Mapping[str, int] = MappingProxyType(
    {letter: index for index, letter in enumerate(ALPHABET)}
)


class CipherError(ValueError):
    """Rejected key or text."""

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


@dataclass(frozen=True)
class CipherInfo:
    slug: str
    name: str
    category: str


class CipherAlgorithm(ABC):
    info: CipherInfo
    key_label_en: str = "Key"
    key_label_ru: str = "Ключ"
    key_hint_en: str = ""
    key_hint_ru: str = ""

    @classmethod
    def get_key_label(cls, lang: str) -> str:
        return cls.key_label_ru if lang == "ru" else cls.key_label_en

    @classmethod
    def get_key_hint(cls, lang: str) -> str:
        return cls.key_hint_ru if lang == "ru" else cls.key_hint_en

    @abstractmethod
    def encrypt(self, open_text: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def decrypt(self, cipher_text: str) -> str:
        raise NotImplementedError

    def matches(self, open_text: str, cipher_text: str) -> bool:
        return self.encrypt(open_text) == cipher_text


def normalize_open_text(text: str) -> str:
    """Uppercase ``text`` and drop everything outside the alphabet."""
    return "".join(ch for ch in text.upper() if ch in ALPHA_NUM)


def to_indices(text: str) -> List[int]:
    return [ALPHA_NUM[ch] for ch in text]


def to_text(indices: Sequence[int]) -> str:
    return "".join(ALPHABET[i] for i in indices)


class Cipher(CipherAlgorithm):
    """Gronsfeld cipher with a key fixed at construction.

    The key letters are turned into their alphabet positions, and those
    numbers are added to (encrypt) or subtracted from (decrypt) the text
    positions modulo 33, cycling the key over the text.
    """

    info = CipherInfo("gronsfeld", "Gronsfeld (Russian alphabet)", "symmetric")
    key_label_en = "Key word"
    key_label_ru = "Ключевое слово"
    key_hint_en = "Russian letters only, e.g. КЛЮЧ"
    key_hint_ru = "Только русские буквы, например КЛЮЧ"

    def __init__(self, key: str) -> None:
        self._key: Tuple[int, ...] = tuple(to_indices(self._valid_key(key)))
        logger.debug("Cipher created with key of length %d", len(self._key))

    @property
    def key(self) -> Tuple[int, ...]:
        return self._key

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key_length={len(self._key)})"

    def encrypt(self, open_text: str) -> str:
        indices = to_indices(self._valid_open_text(open_text))
        size = len(self._key)
        for i, value in enumerate(indices):
            indices[i] = (value + self._key[i % size]) % MODULUS
        return to_text(indices)

    def decrypt(self, cipher_text: str) -> str:
        indices = to_indices(self._valid_cipher_text(cipher_text))
        size = len(self._key)
        for i, value in enumerate(indices):
            indices[i] = ((value - self._key[i % size]) % MODULUS + MODULUS) % MODULUS
        return to_text(indices)

    @staticmethod
    def _valid_key(key: str) -> str:
        if not isinstance(key, str):
            raise CipherError("Key must be a string", "invalid_key")
        if not key:
            raise CipherError("Empty key", "empty_key")
        normalized = key.upper()
        for ch in normalized:
            if ch not in ALPHA_NUM:
                raise CipherError(f"Invalid key: symbol {ch!r} is not a Russian letter", "invalid_key")
        return normalized

    @staticmethod
    def _valid_open_text(text: str) -> str:
        normalized = normalize_open_text(text)
        if not normalized:
            raise CipherError("Empty open text", "empty_open_text")
        return normalized

    @staticmethod
    def _valid_cipher_text(text: str) -> str:
        if not text:
            raise CipherError("Empty cipher text", "empty_cipher_text")
        for ch in text:
            if ch not in ALPHA_NUM:
                raise CipherError(
                    f"Invalid cipher text: symbol {ch!r} is not an uppercase Russian letter",
                    "invalid_cipher_text",
                )
        return text
