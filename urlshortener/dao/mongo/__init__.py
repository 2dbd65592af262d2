from urlshortener.dao.mongo.mixins import MongoClientMixin
from urlshortener.dao.mongo.link_mongo_dao import LinkMongoDAO


__all__ = [
    'MongoClientMixin',
    'LinkMongoDAO',
]
