"""Helper utilities for building short URLs.

Functions:
    get_short_url(short_key: str, base_url: str) -> str
        Get string representation of short URL for a given short key

Example:
    >>> from urlshortener.utils.helpers import get_short_url
    >>> get_short_url('aZ3kT9', 'http://localhost:3030/')
    'http://localhost:3030/short/aZ3kT9'
"""

from urlshortener.constants import SHORT_PATH_PREFIX


def get_short_url(short_key: str, base_url: str) -> str:
    """Get string representation of shortened URL

    Args:
        short_key (str): short key
        base_url (str): public address of the service, trailing slash optional

    Returns:
        str: short url string representation
    """
    return f'{base_url.rstrip("/")}{SHORT_PATH_PREFIX}{short_key}'
