import logging
from typing import Any

import pymongo.errors

from urlshortener.dao.base import LinkBaseDAO
from urlshortener.dao.mongo import LinkMongoDAO
from urlshortener.dao.redis import LinkRedisDAO
from urlshortener.exceptions import BadConfigurationError
from urlshortener.utils.config import app_prefix, backend_config


logger = logging.getLogger(__name__)


def create_link_dao(config: dict[str, Any]) -> LinkBaseDAO:
    """Build the link DAO of the configured active backend

    The DAO pings its data store on construction, so this doubles as the
    startup connectivity check.

    Args:
        config (dict): configuration document (see utils/config.py)

    Returns:
        LinkBaseDAO: LinkMongoDAO or LinkRedisDAO

    Raises:
        BadConfigurationError:
            If the active backend is unknown, the backend section holds an
            unknown setting, or the driver rejects a setting (e.g. a malformed URI).
        DataStoreError: If the data store is unreachable.
    """
    backend, dao_kwargs = backend_config(config)
    logger.debug('Creating link DAO.', extra={'backend': backend})

    try:
        match backend:
            case 'mongo':
                return LinkMongoDAO(**dao_kwargs)
            case 'redis':
                return LinkRedisDAO(**dao_kwargs, prefix=app_prefix())
    except (TypeError, ValueError, pymongo.errors.ConfigurationError) as e:
        raise BadConfigurationError(f"Invalid configuration for backend '{backend}': {e}") from e

    raise BadConfigurationError(f"Unsupported backend '{backend}'.")
