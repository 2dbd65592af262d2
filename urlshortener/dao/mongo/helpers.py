import functools
from typing import TypeVar, Any
from collections.abc import Callable

import pymongo.errors

from urlshortener.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_mongo_error(method: F) -> F:
    """Wrap MongoDB-interacting DAO methods to handle driver errors

    Connectivity problems (server selection timeouts, network errors) and any
    other failed operation (e.g. a rejected write) both surface as DataStoreError.

    Args:
        method (Callable[..., Any]):
            DAO method performing MongoDB operations which may raise pymongo.errors.PyMongoError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on MongoDB failures.

    Example:
        >>> @handle_mongo_error
        ... def count(self):
        ...     return self.collection.count_documents({})
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except pymongo.errors.ConnectionFailure as e:
            raise DataStoreError(f"Can't connect to MongoDB collection '{self.collection.full_name}'.") from e
        except pymongo.errors.PyMongoError as e:
            raise DataStoreError(f"MongoDB operation on collection '{self.collection.full_name}' failed: {e}") from e

    return wrapper
