from typing import Any, Dict, Optional

from pydantic import Field

from .common import BasePydanticModel
from .enums import Enums


class DataStore(BasePydanticModel):
    """Data-store configuration. ``backend`` names the registered parser."""
    backend: str = Field(..., min_length=1)

    model_config = {
        "extra": "allow",
        "populate_by_name": True,
    }


class MongoDataStore(DataStore):
    backend: str = "mongo"
    database: Optional[str] = None
    collection: str = Field(..., min_length=1)
    datasource: Optional[str] = None


class EntityInfo(BasePydanticModel):
    name: str = Field(..., min_length=1)
    default_version: Optional[str] = None
    enums: Enums = Field(default_factory=Enums)
    datastore: Optional[DataStore] = None
    # Keyed by registered property type name; values are owned by their parser.
    properties: Dict[str, Any] = Field(default_factory=dict)
