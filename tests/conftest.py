"""Shared fixtures: a converter with a fake property parser and a fake data store."""
from typing import Any

import pytest

from metadoc.converter import MetadataConverter
from metadoc.document import DocumentNode
from metadoc.extensions import Extensions
from metadoc.models import DataStore


class FakePropertyParser:
    """Stores an integer answer as ``{"fake": {"answer": "<n>"}}``."""

    def parse(self, name: str, converter: MetadataConverter, node: Any) -> int:
        return int(converter.get_required_string_property(node, "answer"))

    def convert(self, converter: MetadataConverter, parent: DocumentNode, value: Any) -> None:
        t = converter.new_node()
        converter.put_object(parent, "fake", t)
        converter.put_string(t, "answer", str(value))


class FakeDataStoreParser:
    def __init__(self, backend: str):
        self.default_name = backend

    def parse(self, name: str, converter: MetadataConverter, node: DocumentNode) -> DataStore:
        return DataStore(backend=name)

    def convert(self, converter: MetadataConverter, node: DocumentNode, datastore: DataStore) -> None:
        pass


@pytest.fixture
def extensions() -> Extensions:
    ext = Extensions()
    ext.add_default_extensions()
    ext.register_datastore_parser("empty", FakeDataStoreParser("empty"))
    ext.register_property_parser("fake", FakePropertyParser())
    return ext


@pytest.fixture
def converter(extensions: Extensions) -> MetadataConverter:
    return MetadataConverter(extensions)
