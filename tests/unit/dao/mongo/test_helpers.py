"""Unit tests for handle_mongo_error decorator.

Test coverage includes:
    1. Normal function execution
    2. Error handling
       - Connection failures and other driver errors become DataStoreError.
       - Non-driver exceptions pass through untouched.
    3. Function metadata preservation
"""

from unittest.mock import MagicMock

import pytest
import pymongo.errors

from urlshortener.dao.mongo.helpers import handle_mongo_error
from urlshortener.dao.exceptions import DataStoreError, LinkNotFoundError


class DummyDAO:
    def __init__(self, error=None):
        self.collection = MagicMock(full_name='urlshortener.urls')
        self.error = error

    @handle_mongo_error
    def lookup(self):
        """Look something up."""
        if self.error is not None:
            raise self.error
        return 'OK'


# -------------------------------
# 1. Normal execution
# -------------------------------


def test_decorator_allows_normal_execution():
    assert DummyDAO().lookup() == 'OK'


# -------------------------------
# 2. Error handling
# -------------------------------


@pytest.mark.parametrize(
    'error',
    [
        pymongo.errors.ServerSelectionTimeoutError('timed out'),
        pymongo.errors.NetworkTimeout('timed out'),
        pymongo.errors.ConnectionFailure('refused'),
    ],
)
def test_decorator_converts_connection_errors(error):
    with pytest.raises(DataStoreError, match="Can't connect to MongoDB collection 'urlshortener.urls'.") as exc_info:
        DummyDAO(error).lookup()
    assert exc_info.value.__cause__ is error


def test_decorator_converts_operation_errors():
    with pytest.raises(DataStoreError, match="MongoDB operation on collection 'urlshortener.urls' failed: disk full"):
        DummyDAO(pymongo.errors.OperationFailure('disk full')).lookup()


def test_decorator_does_not_touch_other_errors():
    with pytest.raises(LinkNotFoundError):
        DummyDAO(LinkNotFoundError('missing')).lookup()


# -------------------------------
# 3. Metadata preservation
# -------------------------------


def test_decorator_preserves_metadata():
    assert DummyDAO.lookup.__name__ == 'lookup'
    assert DummyDAO.lookup.__doc__ == 'Look something up.'
