"""
Custom exceptions for metadata conversion.
"""
from typing import Any, Iterable, Optional


class MetadataError(Exception):
    """Base class for all metadata conversion errors."""
    pass


class MalformedDocumentError(MetadataError):
    """Raised when a document is missing a required key or a value has the
    wrong shape (e.g. an enumeration node without a 'name')."""
    def __init__(self, key: str, message: str, node: Optional[Any] = None):
        super().__init__(f"Malformed document at '{key}': {message}")
        self.key = key
        self.node = node


class UnknownExtensionError(MetadataError):
    """Raised when no parser is registered for a property or data-store type name."""
    def __init__(self, kind: str, type_name: str):
        super().__init__(f"No {kind} parser registered for '{type_name}'")
        self.kind = kind
        self.type_name = type_name


class DuplicateEnumValueError(MetadataError):
    """Raised when two values of one enumeration share a label.

    Detected while building the in-memory Enum, never by the codec.
    """
    def __init__(self, enum_name: Optional[str], labels: Iterable[str]):
        self.enum_name = enum_name
        self.labels = sorted(labels)
        super().__init__(
            f"Duplicate enum value label(s) {', '.join(self.labels)} in enum '{enum_name or '<unnamed>'}'"
        )


class ReservedPropertyError(MetadataError):
    """Raised on encode when a custom property is named like a core entity key."""
    def __init__(self, name: str):
        super().__init__(f"Custom property '{name}' collides with a core entity key")
        self.name = name
