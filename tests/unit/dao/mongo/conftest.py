from unittest.mock import MagicMock

import pytest
import pymongo
import pymongo.collection


@pytest.fixture
def collection():
    """Mock the links collection."""
    _collection = MagicMock(spec=pymongo.collection.Collection)
    _collection.full_name = 'urlshortener.urls'
    return _collection


@pytest.fixture
def mongo_client(collection):
    """Mock a MongoClient whose 'urlshortener.urls' collection is `collection`."""
    _mongo_client = MagicMock(spec=pymongo.MongoClient)
    _mongo_client.admin = MagicMock()
    _mongo_client.admin.command.return_value = {'ok': 1.0}
    _mongo_client.get_database.return_value.get_collection.return_value = collection
    return _mongo_client
