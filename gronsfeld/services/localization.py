from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass
class Localization:
    translations: Dict[str, Dict[str, str]]

    def gettext(self, key: str, lang: str) -> str:
        default_lang = "en"
        lang = lang if lang in {"en", "ru"} else default_lang
        if key in self.translations and lang in self.translations[key]:
            return self.translations[key][lang]
        return self.translations.get(key, {}).get(default_lang, key)


TRANSLATIONS = Localization(
    translations={
        "app_title": {"en": "Gronsfeld cipher", "ru": "Шифр Гронсфельда"},
        "language_changed": {"en": "Language changed.", "ru": "Язык изменён."},
        "empty_key": {
            "en": "The key is empty.",
            "ru": "Пустой ключ.",
        },
        "invalid_key": {
            "en": "The key must contain Russian letters only.",
            "ru": "Ключ должен состоять только из букв русского алфавита.",
        },
        "empty_open_text": {
            "en": "The open text contains no Russian letters.",
            "ru": "Открытый текст не содержит букв русского алфавита.",
        },
        "empty_cipher_text": {
            "en": "The cipher text is empty.",
            "ru": "Пустой зашифрованный текст.",
        },
        "invalid_cipher_text": {
            "en": "The cipher text must contain uppercase Russian letters only.",
            "ru": "Зашифрованный текст должен состоять только из прописных букв русского алфавита.",
        },
    }
)
