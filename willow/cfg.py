"""Control-flow graph intermediate representation."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from willow.types import CheckedParam, Primitive, Type, TypeKind

# ---------------------------------------------------------------- values


@dataclass(frozen=True)
class BoolValue:
    value: bool


@dataclass(frozen=True)
class NumberValue:
    value: Any


@dataclass(frozen=True)
class StringValue:
    value: int


@dataclass(frozen=True)
class FunctionAddr:
    function_id: int
    ty: Type


@dataclass(frozen=True)
class Use:
    value_id: int


Value = Union[BoolValue, NumberValue, StringValue, FunctionAddr, Use]


# ---------------------------------------------------------------- operations


class UnaryOperationKind(enum.Enum):
    NOT = "not"
    NEG = "neg"


class BinaryOperationKind(enum.Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    MODULO = "modulo"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    EQUAL = "equal"
    NOT_EQUAL = "not_equal"


# ---------------------------------------------------------------- instructions


@dataclass
class Alloc:
    destination: int
    ty: TypeKind


@dataclass
class New:
    destination: int
    allocation_site_id: int
    ty: TypeKind


@dataclass
class Store:
    destination_ptr: int
    source_val: Value


@dataclass
class Load:
    destination: int
    source_ptr: int


@dataclass
class FieldPtr:
    destination: int
    base_ptr: int
    field_index: int


@dataclass
class ElementPtr:
    destination: int
    base_ptr: int
    index: Value


@dataclass
class UnaryOp:
    op_kind: UnaryOperationKind
    destination: int
    operand: Value
    result_type: TypeKind


@dataclass
class BinaryOp:
    op_kind: BinaryOperationKind
    destination: int
    left: Value
    right: Value
    result_type: TypeKind


@dataclass
class TypeCast:
    destination: int
    operand: Value
    target_type: TypeKind


@dataclass
class FunctionCall:
    destination: Optional[int]
    function_rvalue: Value
    args: list[Value] = field(default_factory=list)


@dataclass
class Phi:
    destination: int
    sources: list[tuple[int, Value]] = field(default_factory=list)


@dataclass
class Nop:
    pass


Instruction = Union[
    Alloc, New, Store, Load, FieldPtr, ElementPtr, UnaryOp, BinaryOp, TypeCast, FunctionCall, Phi, Nop
]


# ---------------------------------------------------------------- terminators


@dataclass
class Jump:
    target: int


@dataclass
class CondJump:
    condition: Value
    true_target: int
    false_target: int


@dataclass
class Return:
    value: Optional[Value] = None


@dataclass
class Unreachable:
    pass


Terminator = Union[Jump, CondJump, Return, Unreachable]


# ---------------------------------------------------------------- graph


@dataclass
class BasicBlock:
    id: int
    instructions: list[Instruction] = field(default_factory=list)
    terminator: Terminator = field(default_factory=Unreachable)


@dataclass
class ControlFlowGraph:
    params: list[CheckedParam] = field(default_factory=list)
    return_type: TypeKind = Primitive.VOID
    entry_block: int = 0
    blocks: dict[int, BasicBlock] = field(default_factory=dict)
    value_types: dict[int, Type] = field(default_factory=dict)