"""Link shortening and redirect resolution.

Classes:
    ShortenService:
        Generate a short key for a URL and persist the mapping.

    RedirectResolver:
        Look up the original URL behind a short key.

Both services receive the link DAO at construction time. The DAO (and the
client it wraps) is created once at process startup and shared by every
request thread.

Example:
    >>> shortener = ShortenService(dao, base_url='http://localhost:3030')
    >>> shortener.shorten('https://example.com')
    'http://localhost:3030/short/aZ3kT9'
    >>> RedirectResolver(dao).resolve('aZ3kT9')
    'https://example.com'
"""

import logging
from collections.abc import Callable

from urlshortener.constants import Defaults
from urlshortener.models import LinkRecord
from urlshortener.dao.base import LinkBaseDAO
from urlshortener.exceptions import ValidationError
from urlshortener.utils.helpers import get_short_url
from urlshortener.utils.shortener import generate_shortcode


logger = logging.getLogger(__name__)


class ShortenService:
    def __init__(
        self,
        dao: LinkBaseDAO,
        base_url: str = Defaults.BASE_URL,
        generate: Callable[[], str] = generate_shortcode,
    ):
        self.dao = dao
        self.base_url = base_url
        self.generate = generate

    def shorten(self, original_url: str) -> str:
        """Create a new link record and return its short URL

        A single short key is generated per call; an existing record with the
        same key is not detected.

        Args:
            original_url (str):
                URL to shorten. Stored verbatim, only emptiness is checked.

        Returns:
            str: <base_url>/short/<short key>

        Raises:
            ValidationError: If original_url is empty.
            DataStoreError: If the record could not be persisted.
        """
        if not original_url:
            raise ValidationError('URL parameter is missing')

        record = LinkRecord(short_key=self.generate(), original_url=original_url)
        self.dao.insert(record)

        logger.debug('Stored link record.', extra={'shortKey': record.short_key})
        return get_short_url(record.short_key, self.base_url)


class RedirectResolver:
    def __init__(self, dao: LinkBaseDAO):
        self.dao = dao

    def resolve(self, short_key: str) -> str:
        """Return the original URL for a short key

        Raises:
            LinkNotFoundError: If the short key is unknown.
            DataStoreError: If the data store could not be queried.
        """
        return self.dao.get(short_key).original_url
