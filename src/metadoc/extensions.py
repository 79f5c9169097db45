"""
Extension registry for property and data-store parsers.

Parsers are looked up by the type name that keys their subtree in the
document. Any object with conformant ``parse``/``convert`` methods satisfies
the protocols below; no base class is needed.

The registry is populated during setup and then treated as read-only. It
does no locking: registering from one thread while another converts needs
external synchronization.
"""
from typing import TYPE_CHECKING, Any, Dict, Protocol, runtime_checkable

import structlog

from .exceptions import UnknownExtensionError

if TYPE_CHECKING:
    from .converter import MetadataConverter
    from .document import DocumentNode
    from .models import DataStore

logger = structlog.get_logger(__name__)


@runtime_checkable
class PropertyParser(Protocol):
    """Bidirectional converter for one custom property type.

    ``parse`` receives the subtree stored under the property's name and
    returns the domain value. ``convert`` must write the exact structural
    inverse under ``parent``, keyed by the same name, using a node obtained
    from ``converter.new_node()``.
    """

    def parse(self, name: str, converter: "MetadataConverter", node: Any) -> Any: ...

    def convert(self, converter: "MetadataConverter", parent: "DocumentNode", value: Any) -> None: ...


@runtime_checkable
class DataStoreParser(Protocol):
    """Bidirectional converter for one data-store backend.

    ``convert`` writes into the ``datastore`` node itself; the converter has
    already stored the ``backend`` key there.
    """

    default_name: str

    def parse(self, name: str, converter: "MetadataConverter", node: "DocumentNode") -> "DataStore": ...

    def convert(self, converter: "MetadataConverter", node: "DocumentNode", datastore: "DataStore") -> None: ...


class Extensions:
    """Name-keyed registry of property and data-store parsers.

    Registration is last-writer-wins per type name and there is no removal.
    """

    def __init__(self) -> None:
        self._property_parsers: Dict[str, PropertyParser] = {}
        self._datastore_parsers: Dict[str, DataStoreParser] = {}
        self._sealed = False
        self.logger = logger.bind(component="Extensions")

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """Marks setup as finished. Later registrations still apply but are logged."""
        if not self._sealed:
            self._sealed = True
            self.logger.debug(
                "Extension registry sealed.",
                property_parsers=sorted(self._property_parsers),
                datastore_parsers=sorted(self._datastore_parsers),
            )

    def _check_late_registration(self, kind: str, type_name: str) -> None:
        if self._sealed:
            self.logger.warning(
                "Parser registered after the registry was sealed; concurrent conversions may not see it.",
                kind=kind,
                type_name=type_name,
            )

    def register_property_parser(self, type_name: str, parser: PropertyParser) -> None:
        self._check_late_registration("property", type_name)
        if type_name in self._property_parsers:
            self.logger.debug("Overriding property parser.", type_name=type_name)
        self._property_parsers[type_name] = parser

    def register_datastore_parser(self, type_name: str, parser: DataStoreParser) -> None:
        self._check_late_registration("datastore", type_name)
        if type_name in self._datastore_parsers:
            self.logger.debug("Overriding datastore parser.", type_name=type_name)
        self._datastore_parsers[type_name] = parser

    def get_property_parser(self, type_name: str) -> PropertyParser:
        try:
            return self._property_parsers[type_name]
        except KeyError:
            self.logger.warning("No parser registered.", kind="property", type_name=type_name)
            raise UnknownExtensionError("property", type_name) from None

    def get_datastore_parser(self, type_name: str) -> DataStoreParser:
        try:
            return self._datastore_parsers[type_name]
        except KeyError:
            self.logger.warning("No parser registered.", kind="datastore", type_name=type_name)
            raise UnknownExtensionError("datastore", type_name) from None

    def has_property_parser(self, type_name: str) -> bool:
        return type_name in self._property_parsers

    def has_datastore_parser(self, type_name: str) -> bool:
        return type_name in self._datastore_parsers

    def add_default_extensions(self) -> None:
        """Registers the built-in parsers shipped with metadoc."""
        from .parsers import MongoDataStoreParser

        mongo = MongoDataStoreParser()
        self.register_datastore_parser(mongo.default_name, mongo)
