"""Abstract base class for LinkRecord data access objects (DAOs).

This class establishes a consistent contract for all link DAO implementations,
regardless of the underlying storage mechanism (e.g., MongoDB, Redis).

Responsibilities:
    - Provide an interface for inserting and retrieving LinkRecord objects.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from urlshortener.models import LinkRecord
        >>> from urlshortener.dao.mongo import LinkMongoDAO

        >>> dao = LinkMongoDAO(...)

        >>> record = LinkRecord(short_key='aZ3kT9', original_url='https://example.com/blog/article-123')
        >>> dao.insert(record)

        >>> dao.get('aZ3kT9').original_url
        'https://example.com/blog/article-123'
"""

from abc import ABC, abstractmethod

from urlshortener.models import LinkRecord


class LinkBaseDAO(ABC):
    """Interface for LinkRecord data access objects (DAOs).

    Methods:
        insert(record: LinkRecord, **kwargs) -> LinkBaseDAO:
            Insert a new LinkRecord into the data store.
            Raises DataStoreError on connection or write failure.

        get(short_key: str, **kwargs) -> LinkRecord:
            Retrieve a LinkRecord from the data store by short key.
            Raises LinkNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

    Subclassing:
        Datastore-specific implementations (e.g., LinkMongoDAO or
        LinkRedisDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - insert() does not check whether the short key is already taken.
          What happens on a collision is up to the data store.
        - Records are never updated or deleted.
    """

    @abstractmethod
    def insert(self, record: LinkRecord, **kwargs) -> 'LinkBaseDAO':
        """Insert a new LinkRecord into the data store.

        Args:
            record (LinkRecord):
                The LinkRecord instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            LinkBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, short_key: str, **kwargs) -> LinkRecord:
        """Retrieve a LinkRecord from the data store by its short key.

        Args:
            short_key (str):
                The short key of the LinkRecord to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            LinkRecord: The stored record.

        Raises:
            LinkNotFoundError:
                If no LinkRecord with the given short key exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
