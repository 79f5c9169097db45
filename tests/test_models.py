"""
Unit tests for the metadata models in src/metadoc/models/
"""
import pytest
from pydantic import ValidationError

from metadoc.exceptions import DuplicateEnumValueError
from metadoc.models import DataStore, EntityInfo, Enum, Enums, EnumValue, MongoDataStore


def test_enum_value_equality_includes_description() -> None:
    assert EnumValue(label="a") == EnumValue(label="a", description=None)
    assert EnumValue(label="a") != EnumValue(label="a", description="")
    assert EnumValue(label="a", description="x") != EnumValue(label="a", description="y")
    assert len({EnumValue(label="a"), EnumValue(label="a")}) == 1


def test_enum_value_requires_label() -> None:
    with pytest.raises(ValidationError):
        EnumValue(label="")


def test_enum_value_is_frozen() -> None:
    value = EnumValue(label="a")
    with pytest.raises(ValidationError):
        value.label = "b"


def test_enum_coerces_strings_and_dicts() -> None:
    e = Enum(name="Color", values=["red", {"label": "green", "description": "go"}, EnumValue(label="blue")])
    assert e.labels == frozenset({"red", "green", "blue"})
    assert e.get_value("green").description == "go"
    assert e.get_value("purple") is None
    assert e.has_annotations


def test_enum_without_descriptions_has_no_annotations() -> None:
    e = Enum(name="Color", values=["red", "green"])
    assert not e.has_annotations


def test_enum_identical_values_collapse() -> None:
    e = Enum(name="Color", values=[EnumValue(label="red"), EnumValue(label="red")])
    assert len(e.values) == 1


def test_enum_duplicate_label_rejected() -> None:
    with pytest.raises(DuplicateEnumValueError) as exc_info:
        Enum(name="Color", values=[EnumValue(label="red"), EnumValue(label="red", description="warm")])
    assert exc_info.value.enum_name == "Color"
    assert exc_info.value.labels == ["red"]


def test_enum_set_values_revalidates() -> None:
    e = Enum(name="Color")
    e.set_values(["red", "green"])
    assert e.labels == frozenset({"red", "green"})
    with pytest.raises(DuplicateEnumValueError):
        e.set_values([EnumValue(label="red", description="a"), EnumValue(label="red", description="b")])


def test_enum_requires_name() -> None:
    with pytest.raises(ValidationError):
        Enum(name="", values=["a"])


def test_enums_collection() -> None:
    enums = Enums()
    assert enums.is_empty()
    enums.add_enum(Enum(name="A", values=["x"]))
    enums.add_enum(Enum(name="B", values=["y"]))
    enums.add_enum(Enum(name="A", values=["z"]))

    assert len(enums) == 2
    assert not enums.is_empty()
    assert enums.get_enum("A").labels == frozenset({"z"})
    assert sorted(e.name for e in enums) == ["A", "B"]


def test_entity_info_keeps_datastore_subclass() -> None:
    info = EntityInfo(name="user", datastore=MongoDataStore(database="db", collection="users"))
    assert isinstance(info.datastore, MongoDataStore)
    assert info.datastore.backend == "mongo"
    assert info.properties == {}
    assert info.enums.is_empty()


def test_datastore_requires_backend() -> None:
    with pytest.raises(ValidationError):
        DataStore(backend="")
