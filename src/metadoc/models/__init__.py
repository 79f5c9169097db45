"""
Pydantic models for the metadata object graph.
"""
from .common import BasePydanticModel
from .enums import Enum, Enums, EnumValue
from .metadata import DataStore, EntityInfo, MongoDataStore

__all__ = [
    "BasePydanticModel",
    "DataStore",
    "EntityInfo",
    "Enum",
    "EnumValue",
    "Enums",
    "MongoDataStore",
]
