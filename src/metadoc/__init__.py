"""metadoc - converts entity metadata to and from BSON-like document trees.

Enumerations, data-store configuration and custom properties are written to
a generic tree document and read back, with a registry of pluggable parsers
for anything the core model does not know about.
"""

__version__ = "0.1.0"

from .config import Config
from .converter import MetadataConverter
from .document import DocumentAdapter, DocumentNode
from .enum_codec import EnumCodec
from .exceptions import (
    DuplicateEnumValueError,
    MalformedDocumentError,
    MetadataError,
    ReservedPropertyError,
    UnknownExtensionError,
)
from .extensions import DataStoreParser, Extensions, PropertyParser
from .models import DataStore, EntityInfo, Enum, Enums, EnumValue, MongoDataStore

__all__ = [
    "Config",
    "DataStore",
    "DataStoreParser",
    "DocumentAdapter",
    "DocumentNode",
    "DuplicateEnumValueError",
    "EntityInfo",
    "Enum",
    "EnumCodec",
    "EnumValue",
    "Enums",
    "Extensions",
    "MalformedDocumentError",
    "MetadataConverter",
    "MetadataError",
    "MongoDataStore",
    "PropertyParser",
    "ReservedPropertyError",
    "UnknownExtensionError",
]
