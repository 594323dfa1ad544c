import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key")
    DEFAULT_LANGUAGE = os.environ.get("DEFAULT_LANGUAGE", "ru")
    CIPHER_CACHE_SIZE = int(os.environ.get("CIPHER_CACHE_SIZE", "128"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    LOG_LEVEL = "DEBUG"


def get_config():
    env = os.environ.get("FLASK_ENV", "development").lower()
    if env == "testing":
        return TestingConfig()
    return Config()
