from enum import StrEnum


class Shortcode:
    """Short key generation parameters."""

    LENGTH = 6
    # 26 lowercase + 26 uppercase + 10 digits
    ALPHABET = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789'


class Defaults:
    """Built-in configuration values (overridable, see utils/config.py)."""

    ACTIVE_BACKEND = 'mongo'
    HOST = '0.0.0.0'  # noqa: S104
    PORT = 3030
    BASE_URL = 'http://localhost:3030'

    MONGO_URI = 'mongodb://localhost:27017'
    MONGO_DATABASE = 'urlshortener'
    MONGO_COLLECTION = 'urls'
    MONGO_TIMEOUT_MS = 5000

    REDIS_HOST = 'localhost'
    REDIS_PORT = 6379
    REDIS_DB = 0
    REDIS_TIMEOUT_MS = 5000


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        LOG_LEVEL = 'LOG_LEVEL'
        CONFIG_PATH = 'CONFIG_PATH'

    class Overrides(StrEnum):
        ACTIVE_BACKEND = 'ACTIVE_BACKEND'
        HOST = 'HOST'
        PORT = 'PORT'
        BASE_URL = 'BASE_URL'
        MONGO_URI = 'MONGO_URI'


# Path prefix under which short links are served
SHORT_PATH_PREFIX = '/short/'
