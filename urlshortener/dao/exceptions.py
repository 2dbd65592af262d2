"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    LinkNotFoundError:
        Raised when a LinkRecord is not found in the data store.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, write failures, etc.).

Example:
    >>> from urlshortener.dao.exceptions import LinkNotFoundError
    >>> raise LinkNotFoundError("Link with short key 'aZ3kT9' not found.")
    Traceback (most recent call last):
        ...
    urlshortener.dao.exceptions.LinkNotFoundError: Link with short key 'aZ3kT9' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class LinkNotFoundError(DAOError):
    """Exception raised when a LinkRecord is not found in the data store."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, failed writes, etc.
    """

    pass
