"""Syntax tree produced by the parser."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Position:
    line: int = 0
    col: int = 0
    byte_offset: int = 0


@dataclass(frozen=True)
class Span:
    start: Position = Position()
    end: Position = Position()


@dataclass(frozen=True)
class IdentifierNode:
    """An identifier; equality and hashing depend only on the interned name."""

    name: int
    span: Span = field(default=Span(), compare=False)


@dataclass(frozen=True)
class StringNode:
    """A string literal; equality and hashing depend only on the interned value."""

    value: int
    length: int = field(default=0, compare=False)
    span: Span = field(default=Span(), compare=False)


# ---------------------------------------------------------------- declarations


@dataclass
class Param:
    identifier: IdentifierNode
    constraint: TypeAnnotation


@dataclass
class TypeAliasDecl:
    identifier: IdentifierNode
    value: TypeAnnotation
    documentation: Any = None


@dataclass
class VarDecl:
    identifier: IdentifierNode
    constraint: Optional[TypeAnnotation] = None
    value: Optional[Expr] = None
    documentation: Any = None


# ---------------------------------------------------------------- type annotations


class PrimitiveAnnotation(enum.Enum):
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


@dataclass
class TagAnnotation:
    identifier: IdentifierNode
    value_type: Optional[TypeAnnotation] = None
    span: Span = Span()


@dataclass
class UnionAnnotation:
    tags: list[TagAnnotation]


@dataclass
class IdentifierAnnotation:
    identifier: IdentifierNode


@dataclass
class StructAnnotation:
    fields: list[Param]


@dataclass
class ListAnnotation:
    item_type: TypeAnnotation


@dataclass
class FnTypeAnnotation:
    params: list[Param]
    return_type: TypeAnnotation


TypeAnnotationKind = Union[
    PrimitiveAnnotation,
    TagAnnotation,
    UnionAnnotation,
    IdentifierAnnotation,
    StructAnnotation,
    ListAnnotation,
    FnTypeAnnotation,
]


@dataclass
class TypeAnnotation:
    kind: TypeAnnotationKind
    span: Span = Span()


# ---------------------------------------------------------------- expressions


class BinaryOperator(enum.Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    EQUAL = "=="
    NOT_EQUAL = "!="
    AND = "&&"
    OR = "||"


@dataclass
class BlockContents:
    statements: list[Stmt] = field(default_factory=list)
    final_expr: Optional[Expr] = None
    span: Span = Span()


@dataclass
class MatchArm:
    tag_name: IdentifierNode
    expr: Expr
    binding_name: Optional[IdentifierNode] = None


@dataclass
class NotExpr:
    right: Expr


@dataclass
class NegExpr:
    right: Expr


@dataclass
class BinaryExpr:
    op: BinaryOperator
    left: Expr
    right: Expr


@dataclass
class AccessExpr:
    left: Expr
    field: IdentifierNode


@dataclass
class StaticAccessExpr:
    left: Expr
    field: IdentifierNode


@dataclass
class TypeCastExpr:
    left: Expr
    target: TypeAnnotation


@dataclass
class TagExpr:
    identifier: IdentifierNode
    value: Optional[Expr] = None


@dataclass
class FnCallExpr:
    left: Expr
    args: list[Expr] = field(default_factory=list)


@dataclass
class StructLiteralExpr:
    fields: list[tuple[IdentifierNode, Expr]] = field(default_factory=list)


@dataclass
class BoolLiteralExpr:
    value: bool


@dataclass
class NumberExpr:
    value: Any


@dataclass
class StringExpr:
    value: StringNode


@dataclass
class IdentifierExpr:
    identifier: IdentifierNode


@dataclass
class FnExpr:
    name: IdentifierNode
    params: list[Param]
    return_type: TypeAnnotation
    body: BlockContents


@dataclass
class MatchExpr:
    condition: Expr
    arms: list[MatchArm] = field(default_factory=list)


@dataclass
class IfExpr:
    condition: Expr
    then_branch: BlockContents
    else_if_branches: list[tuple[Expr, BlockContents]] = field(default_factory=list)
    else_branch: Optional[BlockContents] = None


@dataclass
class ListLiteralExpr:
    items: list[Expr] = field(default_factory=list)


@dataclass
class CodeBlockExpr:
    block: BlockContents


ExprKind = Union[
    NotExpr,
    NegExpr,
    BinaryExpr,
    AccessExpr,
    StaticAccessExpr,
    TypeCastExpr,
    TagExpr,
    FnCallExpr,
    StructLiteralExpr,
    BoolLiteralExpr,
    NumberExpr,
    StringExpr,
    IdentifierExpr,
    FnExpr,
    MatchExpr,
    IfExpr,
    ListLiteralExpr,
    CodeBlockExpr,
]


@dataclass
class Expr:
    kind: ExprKind
    span: Span = Span()


# ---------------------------------------------------------------- statements


@dataclass
class ExpressionStmt:
    expr: Expr


@dataclass
class BreakStmt:
    pass


@dataclass
class ContinueStmt:
    pass


@dataclass
class ReturnStmt:
    value: Expr


@dataclass
class AssignmentStmt:
    target: Expr
    value: Expr


@dataclass
class FromStmt:
    path: StringNode
    identifiers: list[tuple[IdentifierNode, Optional[IdentifierNode]]] = field(default_factory=list)


@dataclass
class WhileStmt:
    condition: Expr
    body: BlockContents


StmtKind = Union[
    ExpressionStmt,
    TypeAliasDecl,
    VarDecl,
    BreakStmt,
    ContinueStmt,
    ReturnStmt,
    AssignmentStmt,
    FromStmt,
    WhileStmt,
]


@dataclass
class Stmt:
    kind: StmtKind
    span: Span = Span()