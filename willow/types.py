"""Checked (semantically analysed) types and declarations."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Union

from willow.ast import IdentifierNode, Span

if TYPE_CHECKING:
    from willow.cfg import ControlFlowGraph


class Primitive(enum.Enum):
    VOID = "void"
    BOOL = "bool"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    USIZE = "usize"
    ISIZE = "isize"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"
    STRING = "string"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CheckedTag:
    identifier: IdentifierNode
    value_type: Optional[Type] = None


@dataclass(frozen=True)
class CheckedParam:
    identifier: IdentifierNode
    constraint: Type


@dataclass(frozen=True)
class CheckedFnType:
    params: tuple[CheckedParam, ...]
    return_type: Type
    span: Span = field(default=Span(), compare=False)


@dataclass(frozen=True)
class CheckedTypeAliasDecl:
    """A type alias; two aliases are the same if name and module match."""

    identifier: IdentifierNode
    module_id: int
    value: Type = field(compare=False)
    documentation: Any = field(default=None, compare=False)
    span: Span = field(default=Span(), compare=False)


@dataclass
class CheckedVarDecl:
    value_id: int
    identifier: IdentifierNode
    constraint: Type
    documentation: Any = None


@dataclass(frozen=True)
class UnionType:
    """A union of tags; equality ignores the order of the tags."""

    tags: tuple[CheckedTag, ...]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnionType):
            return NotImplemented
        if len(self.tags) != len(other.tags):
            return False
        return all(tag in other.tags for tag in self.tags) and all(
            tag in self.tags for tag in other.tags
        )

    def __hash__(self) -> int:
        return hash((len(self.tags), frozenset(self.tags)))


@dataclass(frozen=True)
class ListType:
    item_type: Type


@dataclass(frozen=True)
class StructType:
    fields: tuple[CheckedParam, ...]


@dataclass(frozen=True)
class PointerType:
    inner: Type


TypeKind = Union[
    Primitive,
    UnionType,
    CheckedTag,
    ListType,
    StructType,
    CheckedTypeAliasDecl,
    CheckedFnType,
    PointerType,
]


@dataclass(frozen=True)
class Type:
    """A checked type; equality and hashing depend only on its kind."""

    kind: TypeKind
    span: Span = field(default=Span(), compare=False)


@dataclass
class CheckedModule:
    id: int
    name: str
    functions: dict[int, ControlFlowGraph] = field(default_factory=dict)
    type_declarations: dict[IdentifierNode, CheckedTypeAliasDecl] = field(default_factory=dict)
    global_variables: dict[IdentifierNode, CheckedVarDecl] = field(default_factory=dict)
    initializer_cfg: Optional[ControlFlowGraph] = None
    exports: set[IdentifierNode] = field(default_factory=set)