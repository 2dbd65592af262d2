"""Utility functions for application configuration management.

The whole application is configured by a single JSON document. Built-in
defaults reproduce a standalone local setup (MongoDB on localhost, HTTP on
port 3030). A JSON file named by `CONFIG_PATH` is merged over the defaults,
and a handful of environment variables override individual values last.

The configuration JSON follows this structure:

    {
        "active_backend": "mongo",
        "server": {
            "host": "0.0.0.0",
            "port": 3030,
            "base_url": "http://localhost:3030"
        },
        "configs": {
            "mongo": {"uri": ..., "database": ..., "collection": ..., "timeout_ms": ...},
            "redis": {"host": ..., "port": ..., "db": ..., "timeout_ms": ...}
        }
    }

Only the section of the active backend is used to build the link DAO.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return application prefix for DAOs, or None if `APP_NAME` is not set.

    default_config() -> dict
        Return a fresh copy of the built-in configuration document.

    load_config(path: str | None = None) -> dict
        Build the effective configuration document.

    backend_config(config: dict) -> tuple[str, dict]
        Return the active backend name and its connection parameters.

Example:
    >>> from urlshortener.utils.config import load_config
    >>> config = load_config()
    >>> config['server']['port']
    3030
"""

import os
import copy
import json
import logging
from typing import Any

from urlshortener.constants import ENV, Defaults
from urlshortener.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = frozenset({'mongo', 'redis'})

# Backend settings coerced to int before they reach the DAO constructors
_INTEGER_SETTINGS = {
    'mongo': ('timeout_ms',),
    'redis': ('port', 'db', 'timeout_ms'),
}

_DEFAULT_CONFIG = {
    'active_backend': Defaults.ACTIVE_BACKEND,
    'server': {
        'host': Defaults.HOST,
        'port': Defaults.PORT,
        'base_url': Defaults.BASE_URL,
    },
    'configs': {
        'mongo': {
            'uri': Defaults.MONGO_URI,
            'database': Defaults.MONGO_DATABASE,
            'collection': Defaults.MONGO_COLLECTION,
            'timeout_ms': Defaults.MONGO_TIMEOUT_MS,
        },
        'redis': {
            'host': Defaults.REDIS_HOST,
            'port': Defaults.REDIS_PORT,
            'db': Defaults.REDIS_DB,
            'timeout_ms': Defaults.REDIS_TIMEOUT_MS,
        },
    },
}


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'

    Returns:
        str:
            Value of `APP_NAME` environment variable.
            None if variable is not set.
    """
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'urlshortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'urlshortener:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def default_config() -> dict[str, Any]:
    return copy.deepcopy(_DEFAULT_CONFIG)


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def _read_config_file(path: str) -> dict[str, Any]:
    try:
        with open(path, encoding='utf-8') as f:
            document = json.load(f)
    except OSError as e:
        raise BadConfigurationError(f"Can't read configuration file '{path}'.") from e
    except json.JSONDecodeError as e:
        raise BadConfigurationError(f"Configuration file '{path}' is not valid JSON.") from e

    if not isinstance(document, dict):
        raise BadConfigurationError(f"Configuration file '{path}' must contain a JSON object.")
    return document


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    overrides = ENV.Overrides

    if backend := os.getenv(overrides.ACTIVE_BACKEND):
        config['active_backend'] = backend.lower()
    if host := os.getenv(overrides.HOST):
        config['server']['host'] = host
    if port := os.getenv(overrides.PORT):
        config['server']['port'] = port
    if base_url := os.getenv(overrides.BASE_URL):
        config['server']['base_url'] = base_url
    if mongo_uri := os.getenv(overrides.MONGO_URI):
        config['configs']['mongo']['uri'] = mongo_uri

    return config


def _validate(config: dict[str, Any]) -> dict[str, Any]:
    backend = config.get('active_backend')
    if backend not in SUPPORTED_BACKENDS:
        raise BadConfigurationError(f"Unsupported backend '{backend}' (expected one of: {', '.join(sorted(SUPPORTED_BACKENDS))}).")
    if not isinstance(config['configs'].get(backend), dict):
        raise BadConfigurationError(f"Missing configuration section for backend '{backend}'.")

    try:
        config['server']['port'] = int(config['server']['port'])
    except (TypeError, ValueError) as e:
        raise BadConfigurationError(f"Invalid server port '{config['server']['port']}'.") from e

    section = config['configs'][backend]
    for key in _INTEGER_SETTINGS[backend]:
        if key not in section:
            continue
        try:
            section[key] = int(section[key])
        except (TypeError, ValueError) as e:
            raise BadConfigurationError(f"Invalid {backend} setting '{key}': '{section[key]}' is not an integer.") from e

    return config


def load_config(path: str | None = None) -> dict[str, Any]:
    """Build the effective configuration document

    Precedence (lowest to highest): built-in defaults, JSON file, environment overrides.

    Environment variables used:
        CONFIG_PATH     – JSON configuration file (used when `path` is not given).
        ACTIVE_BACKEND  – 'mongo' or 'redis'.
        HOST, PORT      – HTTP listen address.
        BASE_URL        – Public address prepended to short URLs.
        MONGO_URI       – MongoDB connection string.

    Args:
        path (str | None):
            Configuration file to merge over the defaults. Falls back to `CONFIG_PATH`.

    Returns:
        dict: The configuration document.

    Raises:
        BadConfigurationError:
            If the file can't be read or parsed, the active backend is unknown,
            or a port, db or timeout is not an integer.
    """
    config = default_config()

    path = path or os.getenv(ENV.App.CONFIG_PATH)
    if path:
        logger.debug('Loading configuration file.', extra={'configPath': path})
        _merge(config, _read_config_file(path))

    return _validate(_apply_env_overrides(config))


def backend_config(config: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    """Return the active backend and its DAO keyword arguments

    Keys of the backend section are prefixed with the backend name to match
    the DAO constructor parameters, e.g. {'uri': ...} -> {'mongo_uri': ...}.

    Example:
        >>> backend_config({'active_backend': 'redis', 'configs': {'redis': {'host': 'cache'}}})
        ('redis', {'redis_host': 'cache'})
    """
    backend = config['active_backend']
    return backend, {f'{backend}_{k}': v for k, v in config['configs'][backend].items()}
