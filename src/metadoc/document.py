"""
Document tree primitives.

``DocumentNode`` is a BSON-like keyed container (ordered like a BSON
document) and ``DocumentAdapter`` is the small read/write surface that the
enum codec, the metadata converter and extension parsers compose against.
"""
import json
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence

import structlog

from .exceptions import MalformedDocumentError

logger = structlog.get_logger(__name__)


def _wrap(value: Any) -> Any:
    """Turns plain mappings (and mappings inside lists) into DocumentNodes."""
    if isinstance(value, DocumentNode):
        return value
    if isinstance(value, Mapping):
        return DocumentNode.from_dict(value)
    if isinstance(value, (list, tuple)):
        return [_wrap(item) for item in value]
    return value


def _unwrap(value: Any) -> Any:
    if isinstance(value, DocumentNode):
        return value.to_dict()
    if isinstance(value, list):
        return [_unwrap(item) for item in value]
    return value


class DocumentNode:
    """Mutable, insertion-ordered tree node.

    Values are scalars (str, int, float, bool, None), child nodes, or lists
    of either. Plain dicts handed to ``put`` are converted to child nodes.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: Dict[str, Any] = {}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DocumentNode":
        node = cls()
        for key, value in data.items():
            node.put(key, value)
        return node

    def put(self, key: str, value: Any) -> None:
        self._data[key] = _wrap(value)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def items(self):
        return self._data.items()

    def to_dict(self) -> Dict[str, Any]:
        return {key: _unwrap(value) for key, value in self._data.items()}

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.put(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DocumentNode):
            return self.to_dict() == other.to_dict()
        if isinstance(other, Mapping):
            return self.to_dict() == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DocumentNode({self.to_dict()!r})"

    def __str__(self) -> str:
        return json.dumps(self.to_dict())


class DocumentAdapter:
    """
    Read/write helpers over DocumentNode. Writes mutate the node passed in;
    reads only check shape, never content.
    """

    def new_node(self) -> DocumentNode:
        return DocumentNode()

    def put_string(self, node: DocumentNode, key: str, value: str) -> None:
        node.put(key, value)

    def put_object(self, node: DocumentNode, key: str, child: DocumentNode) -> None:
        node.put(key, child)

    def put_list(self, node: DocumentNode, key: str, items: Sequence[Any]) -> None:
        node.put(key, list(items))

    def get_string_property(self, node: DocumentNode, key: str) -> Optional[str]:
        value = node.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise MalformedDocumentError(key, f"expected a string, got {type(value).__name__}", node)
        return value

    def get_required_string_property(self, node: DocumentNode, key: str) -> str:
        value = self.get_string_property(node, key)
        if value is None:
            raise MalformedDocumentError(key, "required property is missing", node)
        if not value:
            raise MalformedDocumentError(key, "required property is empty", node)
        return value

    def get_object_property(self, node: DocumentNode, key: str) -> Optional[DocumentNode]:
        value = node.get(key)
        if value is None:
            return None
        if not isinstance(value, DocumentNode):
            raise MalformedDocumentError(key, f"expected an object, got {type(value).__name__}", node)
        return value

    def get_list_property(self, node: DocumentNode, key: str) -> Optional[List[Any]]:
        value = node.get(key)
        if value is None:
            return None
        if not isinstance(value, list):
            raise MalformedDocumentError(key, f"expected a list, got {type(value).__name__}", node)
        return value

    def get_child_names(self, node: DocumentNode) -> List[str]:
        return node.keys()

    def to_json(self, node: DocumentNode, indent: Optional[int] = None) -> str:
        return json.dumps(node.to_dict(), indent=indent)

    def from_json(self, text: str) -> DocumentNode:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning("Document text is not valid JSON.", error=str(e))
            raise MalformedDocumentError("$", f"invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise MalformedDocumentError("$", f"expected a JSON object, got {type(data).__name__}")
        return DocumentNode.from_dict(data)
