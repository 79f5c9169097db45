"""
Encodes enumerations to document subtrees and back.

Two shapes exist for one enumeration:

    {"name": "E", "values": ["a", "b"]}
    {"name": "E", "annotatedValues": [{"name": "a", "description": "..."}, "b"]}

The encoder picks ``annotatedValues`` when any value carries a description,
and then writes undescribed values as bare strings inside that list. The
decoder accepts either key, or both, and takes the union.
"""
from typing import Any, Dict, List

import structlog

from .document import DocumentAdapter, DocumentNode
from .exceptions import MalformedDocumentError
from .models import Enum, Enums, EnumValue

logger = structlog.get_logger(__name__)

ENUMS = "enums"
NAME = "name"
VALUES = "values"
ANNOTATED_VALUES = "annotatedValues"
DESCRIPTION = "description"


def _merge(values: Dict[str, EnumValue], conflicts: List[EnumValue], value: EnumValue) -> None:
    # A bare label folds into a described entry for the same label.
    existing = values.get(value.label)
    if existing is None or existing.description is None:
        values[value.label] = value
    elif value.description is not None and value != existing:
        # Left for Enum to reject as a duplicate label.
        conflicts.append(value)


class EnumCodec:
    def __init__(self, adapter: DocumentAdapter):
        self.adapter = adapter
        self.logger = logger.bind(component="EnumCodec")

    def convert_enums(self, target: DocumentNode, enums: Enums) -> None:
        """Writes an ``enums`` list on ``target``. Nothing is written for an empty set."""
        if enums.is_empty():
            return
        nodes = [self.convert_enum(enum) for enum in sorted(enums, key=lambda e: e.name)]
        self.adapter.put_list(target, ENUMS, nodes)

    def convert_enum(self, enum: Enum) -> DocumentNode:
        node = self.adapter.new_node()
        self.adapter.put_string(node, NAME, enum.name)
        ordered = sorted(enum.values, key=lambda v: v.label)
        if enum.has_annotations:
            items: List[Any] = []
            for value in ordered:
                if value.description is None:
                    items.append(value.label)
                else:
                    value_node = self.adapter.new_node()
                    self.adapter.put_string(value_node, NAME, value.label)
                    self.adapter.put_string(value_node, DESCRIPTION, value.description)
                    items.append(value_node)
            self.adapter.put_list(node, ANNOTATED_VALUES, items)
        else:
            self.adapter.put_list(node, VALUES, [value.label for value in ordered])
        self.logger.debug(
            "Converted enum.",
            enum_name=enum.name,
            value_count=len(ordered),
            annotated=enum.has_annotations,
        )
        return node

    def parse_enum(self, node: DocumentNode) -> Enum:
        if not isinstance(node, DocumentNode):
            raise MalformedDocumentError(ENUMS, f"expected an enum object, got {type(node).__name__}")
        name = self.adapter.get_required_string_property(node, NAME)
        values: Dict[str, EnumValue] = {}
        conflicts: List[EnumValue] = []

        for item in self.adapter.get_list_property(node, VALUES) or []:
            if not isinstance(item, str) or not item:
                raise MalformedDocumentError(VALUES, f"enum '{name}' has a non-string or empty value", node)
            _merge(values, conflicts, EnumValue(label=item))

        for item in self.adapter.get_list_property(node, ANNOTATED_VALUES) or []:
            if isinstance(item, str):
                if not item:
                    raise MalformedDocumentError(ANNOTATED_VALUES, f"enum '{name}' has an empty value", node)
                _merge(values, conflicts, EnumValue(label=item))
            elif isinstance(item, DocumentNode):
                _merge(values, conflicts, EnumValue(
                    label=self.adapter.get_required_string_property(item, NAME),
                    description=self.adapter.get_string_property(item, DESCRIPTION),
                ))
            else:
                raise MalformedDocumentError(
                    ANNOTATED_VALUES,
                    f"enum '{name}' has an annotated value of type {type(item).__name__}",
                    node,
                )

        return Enum(name=name, values=[*values.values(), *conflicts])

    def parse_enums(self, node: DocumentNode) -> Enums:
        enums = Enums()
        for item in self.adapter.get_list_property(node, ENUMS) or []:
            enum = self.parse_enum(item)
            if enums.get_enum(enum.name) is not None:
                raise MalformedDocumentError(ENUMS, f"enum '{enum.name}' is defined more than once", node)
            enums.add_enum(enum)
        return enums
