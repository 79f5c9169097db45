from collections import Counter
from typing import Any, Dict, FrozenSet, Iterator, Optional

from pydantic import Field, field_validator

from ..exceptions import DuplicateEnumValueError
from .common import BasePydanticModel


class EnumValue(BasePydanticModel):
    """One label of an enumeration. A None description means "no description",
    which is not the same as an empty one."""
    label: str = Field(..., min_length=1)
    description: Optional[str] = None

    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
        "frozen": True,
    }


class Enum(BasePydanticModel):
    name: str = Field(..., min_length=1, description="Enumeration name, unique within an Enums set.")
    values: FrozenSet[EnumValue] = Field(default_factory=frozenset)

    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
        "validate_assignment": True,
    }

    @field_validator("values", mode="before")
    @classmethod
    def _coerce_unique_values(cls, value: Any, info) -> FrozenSet[EnumValue]:
        if value is None:
            return frozenset()
        if isinstance(value, (str, EnumValue, dict)):
            value = [value]
        values = set()
        for item in value:
            if isinstance(item, EnumValue):
                values.add(item)
            elif isinstance(item, str):
                values.add(EnumValue(label=item))
            else:
                values.add(EnumValue.model_validate(item))
        counts = Counter(v.label for v in values)
        duplicates = [label for label, count in counts.items() if count > 1]
        if duplicates:
            raise DuplicateEnumValueError((info.data or {}).get("name"), duplicates)
        return frozenset(values)

    def set_values(self, values: Any) -> None:
        self.values = values

    @property
    def labels(self) -> FrozenSet[str]:
        return frozenset(v.label for v in self.values)

    @property
    def has_annotations(self) -> bool:
        return any(v.description is not None for v in self.values)

    def get_value(self, label: str) -> Optional[EnumValue]:
        for v in self.values:
            if v.label == label:
                return v
        return None


class Enums(BasePydanticModel):
    """Enumerations keyed by name."""
    enums: Dict[str, Enum] = Field(default_factory=dict)

    def add_enum(self, enum: Enum) -> None:
        self.enums[enum.name] = enum

    def get_enum(self, name: str) -> Optional[Enum]:
        return self.enums.get(name)

    def is_empty(self) -> bool:
        return not self.enums

    def __iter__(self) -> Iterator[Enum]:  # type: ignore[override]
        return iter(self.enums.values())

    def __len__(self) -> int:
        return len(self.enums)
