import pytest

from willow.ast import IdentifierNode, Position, Span
from willow.errors import DuplicateIdentifier
from willow.scope import ScopeKind, ScopeStack
from willow.types import CheckedTypeAliasDecl, CheckedVarDecl, Primitive, Type


def var(name, value_id=0):
    return CheckedVarDecl(value_id, IdentifierNode(name), Type(Primitive.I32))


def test_starts_in_file_scope():
    stack = ScopeStack()
    assert stack.is_file_scope() is True
    assert stack.last().kind is ScopeKind.FILE
    assert len(stack) == 1


def test_insert_and_lookup():
    stack = ScopeStack()
    decl = var(1)
    stack.insert(IdentifierNode(1), decl)
    assert stack.lookup(1) is decl
    assert stack.lookup(2) is None


def test_inner_scope_shadows_and_exit_restores():
    stack = ScopeStack()
    outer = var(1, value_id=10)
    inner = var(1, value_id=20)
    stack.insert(IdentifierNode(1), outer)
    stack.enter(ScopeKind.CODE_BLOCK)
    stack.insert(IdentifierNode(1), inner)
    assert stack.lookup(1) is inner
    stack.exit()
    assert stack.lookup(1) is outer


def test_outer_symbols_visible_inside():
    stack = ScopeStack()
    alias = CheckedTypeAliasDecl(IdentifierNode(3), 0, Type(Primitive.BOOL))
    stack.insert(IdentifierNode(3), alias)
    stack.enter(ScopeKind.FUNCTION)
    assert stack.lookup(3) is alias


def test_duplicate_in_same_scope_records_error():
    errors = []
    stack = ScopeStack(errors)
    dup_span = Span(Position(2, 3, 15), Position(2, 4, 16))
    stack.insert(IdentifierNode(5), var(5, value_id=1))
    second = var(5, value_id=2)
    stack.insert(IdentifierNode(5, dup_span), second)
    assert errors == [DuplicateIdentifier(IdentifierNode(5))]
    assert errors[0].span() == dup_span
    assert stack.lookup(5) is second


def test_same_name_in_inner_scope_is_not_duplicate():
    stack = ScopeStack()
    stack.insert(IdentifierNode(5), var(5))
    stack.enter(ScopeKind.CODE_BLOCK)
    stack.insert(IdentifierNode(5), var(5))
    assert stack.errors == []


def test_within_function_scope():
    stack = ScopeStack()
    assert stack.within_function_scope() is False
    stack.enter(ScopeKind.FUNCTION)
    stack.enter(ScopeKind.CODE_BLOCK)
    assert stack.within_function_scope() is True
    assert stack.is_file_scope() is False


def test_within_loop_through_code_blocks():
    stack = ScopeStack()
    stack.enter(ScopeKind.WHILE, break_target=4, continue_target=2)
    stack.enter(ScopeKind.CODE_BLOCK)
    stack.enter(ScopeKind.CODE_BLOCK)
    assert stack.within_loop_scope() == (2, 4)


def test_loop_hidden_by_function():
    stack = ScopeStack()
    stack.enter(ScopeKind.WHILE, break_target=4, continue_target=2)
    stack.enter(ScopeKind.FUNCTION)
    assert stack.within_loop_scope() is None


def test_no_loop_at_file_scope():
    assert ScopeStack().within_loop_scope() is None


def test_while_requires_targets():
    with pytest.raises(ValueError):
        ScopeStack().enter(ScopeKind.WHILE)


def test_exit_returns_popped_scope_and_empty_raises():
    stack = ScopeStack()
    entered = stack.enter(ScopeKind.TYPE_ALIAS)
    assert stack.exit() is entered
    assert stack.exit().kind is ScopeKind.FILE
    with pytest.raises(IndexError):
        stack.exit()
    with pytest.raises(IndexError):
        stack.last()