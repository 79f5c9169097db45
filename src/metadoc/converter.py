"""
Converts the entity metadata object graph to a document tree and back.

Enumerations go through the EnumCodec; data stores and custom properties
are dispatched by type name to parsers registered in ``Extensions``.
"""
from typing import Any, Collection, Dict, Mapping, Optional

import structlog

from .config import Config, ConverterConfig
from .document import DocumentAdapter, DocumentNode
from .enum_codec import ENUMS, EnumCodec
from .exceptions import ReservedPropertyError
from .extensions import Extensions
from .models import DataStore, EntityInfo, Enum, Enums

logger = structlog.get_logger(__name__)

NAME = "name"
DEFAULT_VERSION = "defaultVersion"
DATASTORE = "datastore"
BACKEND = "backend"

ENTITY_INFO_KEYS = frozenset({NAME, DEFAULT_VERSION, ENUMS, DATASTORE})


class MetadataConverter(DocumentAdapter):
    """
    Orchestrates conversion between EntityInfo and DocumentNode trees.

    A conversion either completes or raises; on failure any partially built
    output node should be discarded.
    """

    def __init__(self, extensions: Extensions, converter_config: Optional[ConverterConfig] = None):
        self.extensions = extensions
        self.converter_config = converter_config or ConverterConfig()
        self.enum_codec = EnumCodec(self)
        self.logger = logger.bind(component="MetadataConverter")

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "MetadataConverter":
        config = config or Config()
        extensions = Extensions()
        if config.converter.register_default_extensions:
            extensions.add_default_extensions()
        return cls(extensions, config.converter)

    def _start_conversion(self) -> None:
        if self.converter_config.seal_extensions_on_first_use:
            self.extensions.seal()

    # --- Enumerations ---

    def convert_enums(self, target: DocumentNode, enums: Enums) -> None:
        self._start_conversion()
        self.enum_codec.convert_enums(target, enums)

    def parse_enum(self, node: DocumentNode) -> Enum:
        self._start_conversion()
        return self.enum_codec.parse_enum(node)

    def parse_enums(self, node: DocumentNode) -> Enums:
        self._start_conversion()
        return self.enum_codec.parse_enums(node)

    # --- Custom properties ---

    def convert_property(self, parent: DocumentNode, name: str, value: Any) -> None:
        self._start_conversion()
        parser = self.extensions.get_property_parser(name)
        parser.convert(self, parent, value)

    def parse_property(self, name: str, node: Any) -> Any:
        self._start_conversion()
        parser = self.extensions.get_property_parser(name)
        return parser.parse(name, self, node)

    def convert_properties(self, parent: DocumentNode, properties: Mapping[str, Any]) -> None:
        for name, value in properties.items():
            self.convert_property(parent, name, value)

    def parse_properties(self, node: DocumentNode, reserved: Collection[str] = ()) -> Dict[str, Any]:
        """Parses every key of ``node`` outside ``reserved`` as a custom property."""
        properties: Dict[str, Any] = {}
        for name in self.get_child_names(node):
            if name in reserved:
                continue
            properties[name] = self.parse_property(name, node.get(name))
        return properties

    # --- Data stores ---

    def convert_datastore(self, parent: DocumentNode, datastore: DataStore) -> None:
        self._start_conversion()
        parser = self.extensions.get_datastore_parser(datastore.backend)
        node = self.new_node()
        self.put_string(node, BACKEND, datastore.backend)
        parser.convert(self, node, datastore)
        self.put_object(parent, DATASTORE, node)

    def parse_datastore(self, node: DocumentNode) -> DataStore:
        self._start_conversion()
        backend = self.get_required_string_property(node, BACKEND)
        parser = self.extensions.get_datastore_parser(backend)
        return parser.parse(backend, self, node)

    # --- Entity info ---

    def convert_entity_info(self, entity_info: EntityInfo) -> DocumentNode:
        self._start_conversion()
        log = self.logger.bind(entity_name=entity_info.name)
        for name in entity_info.properties:
            if name in ENTITY_INFO_KEYS:
                raise ReservedPropertyError(name)
        node = self.new_node()
        self.put_string(node, NAME, entity_info.name)
        if entity_info.default_version is not None:
            self.put_string(node, DEFAULT_VERSION, entity_info.default_version)
        self.convert_enums(node, entity_info.enums)
        if entity_info.datastore is not None:
            self.convert_datastore(node, entity_info.datastore)
        self.convert_properties(node, entity_info.properties)
        log.debug("Converted entity info.", enum_count=len(entity_info.enums), property_count=len(entity_info.properties))
        return node

    def parse_entity_info(self, node: DocumentNode) -> EntityInfo:
        self._start_conversion()
        name = self.get_required_string_property(node, NAME)
        log = self.logger.bind(entity_name=name)

        datastore = None
        datastore_node = self.get_object_property(node, DATASTORE)
        if datastore_node is not None:
            datastore = self.parse_datastore(datastore_node)

        entity_info = EntityInfo(
            name=name,
            default_version=self.get_string_property(node, DEFAULT_VERSION),
            enums=self.parse_enums(node),
            datastore=datastore,
            properties=self.parse_properties(node, reserved=ENTITY_INFO_KEYS),
        )
        log.debug("Parsed entity info.", enum_count=len(entity_info.enums), property_count=len(entity_info.properties))
        return entity_info
