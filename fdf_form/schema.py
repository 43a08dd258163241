from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Literal, Tuple, Union

# string => text fields, combo boxes, list boxes
# name   => checkboxes and radio buttons (/Yes, /Off)
FieldKind = Literal["string", "name"]

FIELD_NAME_DELIMITER = "."


@dataclass(frozen=True)
class FieldLeaf:
    """A terminal field holding one raw value; coerced to text when serialized."""
    value: Any


@dataclass
class FieldBranch:
    """A parent field whose children are keyed by partial field name.

    Children keep the order in which their names were first seen, so serialized output
    is stable for identical input.
    """
    children: Dict[str, "FieldNode"] = field(default_factory=dict)

    def items(self) -> Iterator[Tuple[str, "FieldNode"]]:
        return iter(self.children.items())

    def __len__(self) -> int:
        return len(self.children)

    def __getitem__(self, key: str) -> "FieldNode":
        return self.children[key]

    def __contains__(self, key: object) -> bool:
        return key in self.children

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dict view (leaves unwrapped), handy for debugging and tests."""
        out: Dict[str, Any] = {}
        for key, node in self.children.items():
            out[key] = node.to_dict() if isinstance(node, FieldBranch) else node.value
        return out


FieldNode = Union[FieldLeaf, FieldBranch]
