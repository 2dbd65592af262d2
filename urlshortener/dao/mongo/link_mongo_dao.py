"""Data Access Object (DAO) implementation for managing short links in MongoDB

Each LinkRecord is stored as a single document:

    {"short_key": "aZ3kT9", "original_url": "https://example.com"}

The collection carries no unique index on `short_key`. Inserting a key that
already exists creates a second document, and lookups return whichever
document MongoDB finds first.

Classes:
    LinkMongoDAO:
        DAO for storing and retrieving LinkRecord in a MongoDB collection.

Example:
    >>> from urlshortener.models import LinkRecord
    >>> from urlshortener.dao.mongo import LinkMongoDAO

    >>> dao = LinkMongoDAO(mongo_uri='mongodb://localhost:27017')
    >>> dao.insert(LinkRecord(short_key='aZ3kT9', original_url='https://example.com'))
    <LinkMongoDAO>
    >>> dao.get('aZ3kT9').original_url
    'https://example.com'
"""

from beartype import beartype

from urlshortener.models import LinkRecord
from urlshortener.dao.base import LinkBaseDAO
from urlshortener.dao.mongo.mixins import MongoClientMixin
from urlshortener.dao.mongo.helpers import handle_mongo_error
from urlshortener.dao.exceptions import LinkNotFoundError


class LinkMongoDAO(MongoClientMixin, LinkBaseDAO):
    """MongoDB-based Data Access Object (DAO) for managing short link mappings

    Attributes (see MongoClientMixin):
        mongo (pymongo.MongoClient):
            MongoDB client shared by all requests.
        collection (pymongo.collection.Collection):
            Collection holding link documents.

    Methods:
        insert(record: LinkRecord, **kwargs) -> LinkMongoDAO:
            Insert a link document.
            Raises DataStoreError on MongoDB failures.

        get(short_key: str, **kwargs) -> LinkRecord:
            Retrieve a link document by short key.
            Raises LinkNotFoundError when the short key doesn't exist.
            Raises DataStoreError on MongoDB failures.
    """

    @handle_mongo_error
    @beartype
    def insert(self, record: LinkRecord, **kwargs) -> 'LinkMongoDAO':
        # insert_one() adds '_id' to the document it is given
        self.collection.insert_one(record.to_document())
        return self

    @handle_mongo_error
    @beartype
    def get(self, short_key: str, **kwargs) -> LinkRecord:
        document = self.collection.find_one({'short_key': short_key}, projection={'_id': False})
        if document is None:
            raise LinkNotFoundError(f"Link with short key '{short_key}' not found.")
        return LinkRecord.from_document(document)
