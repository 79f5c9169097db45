"""
Built-in extension parsers registered by ``Extensions.add_default_extensions``.
"""
from .mongo import MongoDataStoreParser

__all__ = ["MongoDataStoreParser"]
