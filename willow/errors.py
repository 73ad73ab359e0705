"""Semantic errors collected while building the intermediate representation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from willow.ast import IdentifierNode, Span
from willow.types import Type


@dataclass(frozen=True)
class SemanticError(ABC):
    """Base of all semantic errors; each kind has a stable numeric code."""

    CODE: ClassVar[int]

    @abstractmethod
    def span(self) -> Span:
        """The source region the error points at."""

    def code(self) -> int:
        return self.CODE


@dataclass(frozen=True)
class _Located(SemanticError):
    location: Span

    def span(self) -> Span:
        return self.location


@dataclass(frozen=True)
class _AtIdentifier(SemanticError):
    id: IdentifierNode

    def span(self) -> Span:
        return self.id.span


@dataclass(frozen=True)
class DuplicateIdentifier(_AtIdentifier):
    CODE: ClassVar[int] = 36


@dataclass(frozen=True)
class VarDeclWithoutInitializer(_Located):
    CODE: ClassVar[int] = 18


@dataclass(frozen=True)
class DuplicateStructFieldInitializer(_AtIdentifier):
    CODE: ClassVar[int] = 29


@dataclass(frozen=True)
class UnknownStructFieldInitializer(_AtIdentifier):
    CODE: ClassVar[int] = 30


@dataclass(frozen=True)
class MissingStructFieldInitializer(SemanticError):
    CODE: ClassVar[int] = 31
    missing_fields: frozenset[int]
    location: Span

    def span(self) -> Span:
        return self.location


@dataclass(frozen=True)
class CannotApplyStructInitializer(_Located):
    CODE: ClassVar[int] = 32


@dataclass(frozen=True)
class ExpectedANumericOperand(_Located):
    CODE: ClassVar[int] = 1


@dataclass(frozen=True)
class MixedSignedAndUnsigned(_Located):
    CODE: ClassVar[int] = 2


@dataclass(frozen=True)
class MixedFloatAndInteger(_Located):
    CODE: ClassVar[int] = 3


@dataclass(frozen=True)
class CannotCompareType(SemanticError):
    CODE: ClassVar[int] = 4
    of: Type
    to: Type

    def span(self) -> Span:
        return self.to.span


@dataclass(frozen=True)
class UndeclaredIdentifier(_AtIdentifier):
    CODE: ClassVar[int] = 5


@dataclass(frozen=True)
class UndeclaredType(_AtIdentifier):
    CODE: ClassVar[int] = 13


@dataclass(frozen=True)
class ReturnKeywordOutsideFunction(_Located):
    CODE: ClassVar[int] = 6


@dataclass(frozen=True)
class BreakKeywordOutsideLoop(_Located):
    CODE: ClassVar[int] = 7


@dataclass(frozen=True)
class ContinueKeywordOutsideLoop(_Located):
    CODE: ClassVar[int] = 8


@dataclass(frozen=True)
class InvalidAssignmentTarget(SemanticError):
    CODE: ClassVar[int] = 9
    target: Type

    def span(self) -> Span:
        return self.target.span


@dataclass(frozen=True)
class TypeMismatch(SemanticError):
    CODE: ClassVar[int] = 10
    expected: Type
    received: Type

    def span(self) -> Span:
        return self.received.span


@dataclass(frozen=True)
class InvalidArraySizeValue(SemanticError):
    CODE: ClassVar[int] = 21
    value: Any
    location: Span

    def span(self) -> Span:
        return self.location


@dataclass(frozen=True)
class ReturnNotLastStatement(_Located):
    CODE: ClassVar[int] = 11


@dataclass(frozen=True)
class ReturnTypeMismatch(SemanticError):
    CODE: ClassVar[int] = 12
    expected: Type
    received: Type

    def span(self) -> Span:
        return self.received.span


@dataclass(frozen=True)
class CannotAccess(SemanticError):
    CODE: ClassVar[int] = 14
    target: Type

    def span(self) -> Span:
        return self.target.span


@dataclass(frozen=True)
class CannotCall(SemanticError):
    CODE: ClassVar[int] = 15
    target: Type

    def span(self) -> Span:
        return self.target.span


@dataclass(frozen=True)
class FnArgumentCountMismatch(SemanticError):
    CODE: ClassVar[int] = 22
    expected: int
    received: int
    location: Span

    def span(self) -> Span:
        return self.location


@dataclass(frozen=True)
class CannotUseVariableDeclarationAsType(_Located):
    CODE: ClassVar[int] = 17


@dataclass(frozen=True)
class AccessToUndefinedField(SemanticError):
    CODE: ClassVar[int] = 19
    field: IdentifierNode

    def span(self) -> Span:
        return self.field.span


@dataclass(frozen=True)
class TypeAliasMustBeDeclaredAtTopLevel(_Located):
    CODE: ClassVar[int] = 27


@dataclass(frozen=True)
class StructMustBeDeclaredAtTopLevel(_Located):
    CODE: ClassVar[int] = 28