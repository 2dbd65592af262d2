"""Process entry point: python -m urlshortener

Startup procedure:
- Step 1: Initialize logging
- Step 2: Load configuration
- Step 3: Connect to the data store (fatal if unreachable)
- Step 4: Wire services into the Flask app and serve requests, one thread per request
"""

import sys
import logging

from urlshortener.dao import create_link_dao
from urlshortener.dao.exceptions import DataStoreError
from urlshortener.exceptions import ConfigurationError
from urlshortener.services import ShortenService, RedirectResolver
from urlshortener.utils import initialize_logging, load_config
from urlshortener.web import create_app


logger = logging.getLogger('urlshortener')


def build_app(config: dict):
    dao = create_link_dao(config)
    logger.info('Connected to data store.', extra={'backend': config['active_backend']})

    shortener = ShortenService(dao, base_url=config['server']['base_url'])
    resolver = RedirectResolver(dao)
    return create_app(shortener, resolver)


def main() -> int:
    initialize_logging()

    try:
        config = load_config()
        app = build_app(config)
    except ConfigurationError:
        logger.exception('Invalid configuration. Exiting.')
        return 1
    except DataStoreError:
        logger.exception('Data store is unreachable. Exiting.')
        return 1

    host, port = config['server']['host'], config['server']['port']
    logger.info('URL Shortener is running.', extra={'host': host, 'port': port})
    app.run(host=host, port=port, threaded=True)
    return 0


if __name__ == '__main__':
    sys.exit(main())
