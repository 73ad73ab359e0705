"""Lowering of the syntax tree into a control-flow graph."""

from __future__ import annotations

from collections.abc import Iterable

from willow.ast import (
    BinaryExpr,
    BinaryOperator,
    BoolLiteralExpr,
    Expr,
    ExpressionStmt,
    FnTypeAnnotation,
    IdentifierAnnotation,
    ListAnnotation,
    Param,
    PrimitiveAnnotation,
    Stmt,
    StructAnnotation,
    TagAnnotation,
    TypeAnnotation,
    UnionAnnotation,
)
from willow.cfg import (
    BasicBlock,
    BoolValue,
    CondJump,
    ControlFlowGraph,
    Instruction,
    Jump,
    Phi,
    Terminator,
    Use,
    Value,
)
from willow.errors import (
    CannotUseVariableDeclarationAsType,
    SemanticError,
    UndeclaredType,
)
from willow.interner import StringInterner
from willow.scope import ScopeKind, ScopeStack
from willow.types import (
    CheckedFnType,
    CheckedParam,
    CheckedTag,
    CheckedTypeAliasDecl,
    ListType,
    Primitive,
    StructType,
    Type,
    TypeKind,
    UnionType,
)


class UnsupportedConstructError(Exception):
    """Raised for syntax the builder cannot lower yet."""


class HIRBuilder:
    """Builds a control-flow graph and collects semantic errors."""

    def __init__(self, interner: StringInterner) -> None:
        self.interner = interner
        self._reset()

    def _reset(self) -> None:
        self.cfg = ControlFlowGraph()
        self.errors: list[SemanticError] = []
        self.scopes = ScopeStack(self.errors)
        self._block_counter = 0
        self._value_counter = 0
        self.current_block_id = self.new_basic_block()
        self.cfg.entry_block = self.current_block_id

    def build(self, statements: Iterable[Stmt]) -> tuple[ControlFlowGraph, list[SemanticError]]:
        """Lower ``statements`` from a fresh state; return the graph and the errors."""
        self._reset()
        self.build_statements(statements)
        return self.cfg, self.errors

    # ------------------------------------------------------------ blocks and values

    def new_basic_block(self) -> int:
        block_id = self._block_counter
        self._block_counter += 1
        self.cfg.blocks[block_id] = BasicBlock(block_id)
        return block_id

    def use_basic_block(self, block_id: int) -> None:
        if block_id not in self.cfg.blocks:
            raise KeyError(f"basic block {block_id} does not exist")
        self.current_block_id = block_id

    def _current_block(self) -> BasicBlock:
        try:
            return self.cfg.blocks[self.current_block_id]
        except KeyError:
            raise KeyError(f"basic block {self.current_block_id} does not exist") from None

    def add_instruction(self, instruction: Instruction) -> None:
        self._current_block().instructions.append(instruction)

    def set_terminator(self, terminator: Terminator) -> None:
        self._current_block().terminator = terminator

    def new_value_id(self) -> int:
        value_id = self._value_counter
        self._value_counter += 1
        return value_id

    # ------------------------------------------------------------ statements

    def build_statements(self, statements: Iterable[Stmt]) -> None:
        for statement in statements:
            kind = statement.kind
            if isinstance(kind, ExpressionStmt):
                self.build_expr(kind.expr)
            else:
                raise UnsupportedConstructError(
                    f"cannot lower statement {type(kind).__name__}"
                )

    # ------------------------------------------------------------ expressions

    def build_expr(self, expr: Expr) -> Value:
        kind = expr.kind
        if isinstance(kind, BoolLiteralExpr):
            return self.build_bool_literal(kind.value)
        if isinstance(kind, BinaryExpr) and kind.op is BinaryOperator.AND:
            return self.build_and_expr(kind.left, kind.right)
        name = type(kind).__name__
        if isinstance(kind, BinaryExpr):
            name = f"{name} {kind.op.value}"
        raise UnsupportedConstructError(f"cannot lower expression {name}")

    def build_and_expr(self, left: Expr, right: Expr) -> Value:
        """Short-circuit ``left && right`` joined by a phi in a merge block."""
        right_entry = self.new_basic_block()
        merge = self.new_basic_block()

        left_value = self.build_expr(left)
        left_exit = self.current_block_id
        self.set_terminator(CondJump(left_value, right_entry, merge))

        self.use_basic_block(right_entry)
        right_value = self.build_expr(right)
        right_exit = self.current_block_id
        self.set_terminator(Jump(merge))

        self.use_basic_block(merge)
        destination = self.new_value_id()
        self.add_instruction(
            Phi(destination, [(left_exit, BoolValue(False)), (right_exit, right_value)])
        )
        return Use(destination)

    def build_bool_literal(self, value: bool) -> Value:
        return BoolValue(value)

    # ------------------------------------------------------------ type annotations

    def check_tag_type_annotation(self, annotation: TagAnnotation) -> CheckedTag:
        value_type = (
            None
            if annotation.value_type is None
            else self.check_type_annotation(annotation.value_type)
        )
        return CheckedTag(annotation.identifier, value_type)

    def check_params(self, params: Iterable[Param]) -> list[CheckedParam]:
        return [
            CheckedParam(p.identifier, self.check_type_annotation(p.constraint))
            for p in params
        ]

    def _check_identifier(self, annotation: TypeAnnotation, node: IdentifierAnnotation) -> TypeKind:
        entry = self.scopes.lookup(node.identifier.name)
        if entry is None:
            self.errors.append(UndeclaredType(node.identifier))
            return Primitive.UNKNOWN
        if isinstance(entry, CheckedTypeAliasDecl):
            return entry
        self.errors.append(CannotUseVariableDeclarationAsType(annotation.span))
        return Primitive.UNKNOWN

    def check_type_annotation(self, annotation: TypeAnnotation) -> Type:
        node = annotation.kind
        kind: TypeKind
        if isinstance(node, PrimitiveAnnotation):
            kind = Primitive[node.name]
        elif isinstance(node, StructAnnotation):
            kind = StructType(tuple(self.check_params(node.fields)))
        elif isinstance(node, IdentifierAnnotation):
            kind = self._check_identifier(annotation, node)
        elif isinstance(node, FnTypeAnnotation):
            self.scopes.enter(ScopeKind.FN_TYPE)
            try:
                params = tuple(self.check_params(node.params))
                return_type = self.check_type_annotation(node.return_type)
            finally:
                self.scopes.exit()
            kind = CheckedFnType(params, return_type, annotation.span)
        elif isinstance(node, ListAnnotation):
            kind = ListType(self.check_type_annotation(node.item_type))
        elif isinstance(node, TagAnnotation):
            kind = self.check_tag_type_annotation(node)
        elif isinstance(node, UnionAnnotation):
            kind = UnionType(tuple(self.check_tag_type_annotation(t) for t in node.tags))
        else:
            raise TypeError(f"not a type annotation: {node!r}")
        return Type(kind, annotation.span)