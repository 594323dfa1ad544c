from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from flask import Flask, current_app, jsonify, request, session

from gronsfeld.config import get_config
from gronsfeld.encryption.cipher import Cipher, CipherError
from gronsfeld.services.encryption_service import EncryptionService
from gronsfeld.services.localization import TRANSLATIONS

__all__ = ["Cipher", "CipherError", "create_app"]

logger = logging.getLogger(__name__)


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(get_config())
    if config:
        app.config.update(config)
    app.json.ensure_ascii = False
    app.logger.setLevel(app.config["LOG_LEVEL"])

    encryption_service = EncryptionService(app.config["CIPHER_CACHE_SIZE"])
    app.extensions["encryption_service"] = encryption_service

    @app.before_request
    def ensure_language() -> None:
        if "lang" not in session:
            session["lang"] = app.config["DEFAULT_LANGUAGE"]

    def get_lang() -> str:
        return session.get("lang", app.config["DEFAULT_LANGUAGE"])

    def get_fields(*names: str) -> Dict[str, str]:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = request.form
        return {name: str(payload.get(name) or "") for name in names}

    def cipher_error_response(exc: CipherError) -> Tuple[Any, int]:
        current_app.logger.info("Rejected %s request: %s", request.path, exc.code)
        return (
            jsonify(
                {
                    "error": TRANSLATIONS.gettext(exc.code, get_lang()),
                    "code": exc.code,
                }
            ),
            400,
        )

    @app.route("/")
    def home() -> Any:
        lang = get_lang()
        description = encryption_service.describe(lang)
        description["title"] = TRANSLATIONS.gettext("app_title", lang)
        return jsonify(description)

    @app.route("/set-language/<lang>")
    def set_language(lang: str) -> Any:
        session["lang"] = "en" if lang == "en" else "ru"
        return jsonify(
            {
                "lang": session["lang"],
                "message": TRANSLATIONS.gettext("language_changed", session["lang"]),
            }
        )

    @app.route("/encrypt", methods=["POST"])
    def encrypt() -> Any:
        fields = get_fields("key", "text")
        try:
            result = encryption_service.encrypt(fields["key"], fields["text"])
        except CipherError as exc:
            return cipher_error_response(exc)
        return jsonify({"result": result})

    @app.route("/decrypt", methods=["POST"])
    def decrypt() -> Any:
        fields = get_fields("key", "text")
        try:
            result = encryption_service.decrypt(fields["key"], fields["text"])
        except CipherError as exc:
            return cipher_error_response(exc)
        return jsonify({"result": result})

    @app.route("/verify", methods=["POST"])
    def verify() -> Any:
        fields = get_fields("key", "text", "cipher_text")
        try:
            matches = encryption_service.verify(
                fields["key"], fields["text"], fields["cipher_text"]
            )
        except CipherError as exc:
            return cipher_error_response(exc)
        return jsonify({"matches": matches})

    logger.debug("Application created")
    return app
