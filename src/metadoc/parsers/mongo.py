"""Built-in data-store parser for MongoDB-backed entities."""
from typing import TYPE_CHECKING

from ..models import DataStore, MongoDataStore

if TYPE_CHECKING:
    from ..converter import MetadataConverter
    from ..document import DocumentNode


class MongoDataStoreParser:
    """Reads and writes ``{"backend": "mongo", "database", "collection", "datasource"}``."""

    default_name = "mongo"

    def parse(self, name: str, converter: "MetadataConverter", node: "DocumentNode") -> MongoDataStore:
        return MongoDataStore(
            backend=name,
            database=converter.get_string_property(node, "database"),
            collection=converter.get_required_string_property(node, "collection"),
            datasource=converter.get_string_property(node, "datasource"),
        )

    def convert(self, converter: "MetadataConverter", node: "DocumentNode", datastore: DataStore) -> None:
        if not isinstance(datastore, MongoDataStore):
            raise TypeError(f"mongo parser cannot write {type(datastore).__name__}")
        if datastore.database is not None:
            converter.put_string(node, "database", datastore.database)
        converter.put_string(node, "collection", datastore.collection)
        if datastore.datasource is not None:
            converter.put_string(node, "datasource", datastore.datasource)
