"""MongoDB mixin providing shared client initialization and connectivity checks.

Responsibilities:
    - Initialize MongoDB client and resolve the links collection
    - Healthcheck MongoDB client (see StoreHealthcheckMixin)

Classes:
    - MongoClientMixin: Base mixin to inject MongoDB client setup & healthcheck.

Example:
    Typical usage with a DAO implementation:

        >>> class LinkMongoDAO(MongoClientMixin, LinkBaseDAO):
        ...     pass
        ...
        >>> dao = LinkMongoDAO(mongo_uri='mongodb://localhost:27017')
        >>> dao._healthcheck()
        True
"""

from typing import Optional

import pymongo
import pymongo.errors

from urlshortener.constants import Defaults
from urlshortener.dao.mixins import StoreHealthcheckMixin


class MongoClientMixin(StoreHealthcheckMixin):
    """Mixin MongoDB client setup and health check for MongoDB-backed DAOs.

    Attributes:
        mongo (pymongo.MongoClient):
            Active MongoDB client instance. Holds its own connection pool and is
            safe to share between request threads.

        collection (pymongo.collection.Collection):
            Collection holding the DAO's documents.

    Methods:
        _healthcheck(raise_error: bool = True) -> bool:
            Run the `ping` admin command. Any PyMongoError counts as unreachable.
    """

    driver_error = pymongo.errors.PyMongoError

    def __init__(
        self,
        mongo_uri: Optional[str] = Defaults.MONGO_URI,
        mongo_database: Optional[str] = Defaults.MONGO_DATABASE,
        mongo_collection: Optional[str] = Defaults.MONGO_COLLECTION,
        mongo_timeout_ms: Optional[int] = Defaults.MONGO_TIMEOUT_MS,
        mongo_client: Optional[pymongo.MongoClient] = None,
    ):
        """Initialize a MongoDB-based DAO

        The option is given to either use an existing MongoClient instance or
        create one via the appropriate connection parameters.

        Args:
            mongo_uri (Optional[str]):
                MongoDB connection string. Defaults to 'mongodb://localhost:27017'.

            mongo_database (Optional[str]):
                Database name. Defaults to 'urlshortener'.

            mongo_collection (Optional[str]):
                Collection name. Defaults to 'urls'.

            mongo_timeout_ms (Optional[int]):
                Server selection timeout in milliseconds. Defaults to 5000.

            mongo_client (Optional[pymongo.MongoClient]):
                Pre-initialized MongoDB client. If None, a new client is created.

        Raises:
            DataStoreError:
                If MongoDB healthcheck fails (connectivity issues).
        """
        if mongo_client is None:
            mongo_client = pymongo.MongoClient(mongo_uri, serverSelectionTimeoutMS=int(mongo_timeout_ms))

        self.mongo = mongo_client
        self.collection = mongo_client.get_database(mongo_database).get_collection(mongo_collection)

        self._healthcheck()

    def _ping(self) -> None:
        self.mongo.admin.command('ping')

    def _store_description(self) -> str:
        return f"MongoDB collection '{self.collection.full_name}'"
