"""Lexical scopes and symbol lookup."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union

from willow.ast import IdentifierNode
from willow.errors import DuplicateIdentifier, SemanticError
from willow.types import CheckedTypeAliasDecl, CheckedVarDecl

SymbolEntry = Union[CheckedVarDecl, CheckedTypeAliasDecl]


class ScopeKind(enum.Enum):
    FUNCTION = "function"
    WHILE = "while"
    CODE_BLOCK = "code_block"
    FILE = "file"
    TYPE_ALIAS = "type_alias"
    FN_TYPE = "fn_type"


@dataclass
class Scope:
    kind: ScopeKind
    break_target: Optional[int] = None
    continue_target: Optional[int] = None
    symbols: dict[int, SymbolEntry] = field(default_factory=dict)


class ScopeStack:
    """Stack of scopes, starting with the file scope.

    Duplicate declarations in one scope are recorded in ``errors``.
    """

    def __init__(self, errors: Optional[list[SemanticError]] = None) -> None:
        self.errors: list[SemanticError] = [] if errors is None else errors
        self._scopes: list[Scope] = [Scope(ScopeKind.FILE)]

    def __len__(self) -> int:
        return len(self._scopes)

    def enter(
        self,
        kind: ScopeKind,
        break_target: Optional[int] = None,
        continue_target: Optional[int] = None,
    ) -> Scope:
        """Push a new scope; a while scope needs both jump targets."""
        if kind is ScopeKind.WHILE and (break_target is None or continue_target is None):
            raise ValueError("a while scope needs break and continue targets")
        scope = Scope(kind, break_target, continue_target)
        self._scopes.append(scope)
        return scope

    def exit(self) -> Scope:
        """Pop and return the innermost scope."""
        if not self._scopes:
            raise IndexError("no scope to exit")
        return self._scopes.pop()

    def last(self) -> Scope:
        """The innermost scope."""
        if not self._scopes:
            raise IndexError("no scope is open")
        return self._scopes[-1]

    def insert(self, key: IdentifierNode, value: SymbolEntry) -> None:
        """Declare ``key`` in the innermost scope, replacing any earlier entry."""
        symbols = self.last().symbols
        if key.name in symbols:
            self.errors.append(DuplicateIdentifier(key))
        symbols[key.name] = value

    def lookup(self, key: int) -> Optional[SymbolEntry]:
        """Find the nearest declaration of the interned name ``key``."""
        for scope in reversed(self._scopes):
            entry = scope.symbols.get(key)
            if entry is not None:
                return entry
        return None

    def within_function_scope(self) -> bool:
        return any(scope.kind is ScopeKind.FUNCTION for scope in self._scopes)

    def within_loop_scope(self) -> Optional[tuple[int, int]]:
        """(continue_target, break_target) of the enclosing loop, if directly inside one.

        Only code blocks may lie between the current position and the loop.
        """
        for scope in reversed(self._scopes):
            if scope.kind is ScopeKind.CODE_BLOCK:
                continue
            if scope.kind is ScopeKind.WHILE:
                return scope.continue_target, scope.break_target
            return None
        return None

    def is_file_scope(self) -> bool:
        return self.last().kind is ScopeKind.FILE