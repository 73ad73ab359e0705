"""Diagnostics for semantic errors: building, rendering and reporting them."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional, TextIO

from willow.ast import Span
from willow.errors import (
    AccessToUndefinedField,
    BreakKeywordOutsideLoop,
    CannotAccess,
    CannotApplyStructInitializer,
    CannotCall,
    CannotCompareType,
    CannotUseVariableDeclarationAsType,
    ContinueKeywordOutsideLoop,
    DuplicateIdentifier,
    DuplicateStructFieldInitializer,
    ExpectedANumericOperand,
    FnArgumentCountMismatch,
    InvalidArraySizeValue,
    InvalidAssignmentTarget,
    MissingStructFieldInitializer,
    MixedFloatAndInteger,
    MixedSignedAndUnsigned,
    ReturnKeywordOutsideFunction,
    ReturnNotLastStatement,
    ReturnTypeMismatch,
    SemanticError,
    StructMustBeDeclaredAtTopLevel,
    TypeAliasMustBeDeclaredAtTopLevel,
    TypeMismatch,
    UndeclaredIdentifier,
    UndeclaredType,
    UnknownStructFieldInitializer,
    VarDeclWithoutInitializer,
)
from willow.interner import StringInterner
from willow.typefmt import type_to_string


@dataclass(frozen=True)
class _SourceFile:
    name: str
    source: str


class SourceFiles:
    """A collection of named source texts addressed by integer ids."""

    def __init__(self) -> None:
        self._files: list[_SourceFile] = []

    def add(self, name: str, source: str) -> int:
        """Store a file and return its id."""
        self._files.append(_SourceFile(name, source))
        return len(self._files) - 1

    def _get(self, file_id: int) -> _SourceFile:
        if not 0 <= file_id < len(self._files):
            raise KeyError(f"no source file with id {file_id}")
        return self._files[file_id]

    def name(self, file_id: int) -> str:
        return self._get(file_id).name

    def source(self, file_id: int) -> str:
        return self._get(file_id).source

    def __len__(self) -> int:
        return len(self._files)


class LabelStyle(enum.Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class Label:
    """A message attached to a byte range of a source file."""

    style: LabelStyle
    file_id: int
    start: int
    end: int
    message: str = ""

    @classmethod
    def primary(cls, file_id: int, span: Span, message: str = "") -> Label:
        return cls(LabelStyle.PRIMARY, file_id, span.start.byte_offset, span.end.byte_offset, message)

    @classmethod
    def secondary(cls, file_id: int, span: Span, message: str = "") -> Label:
        return cls(LabelStyle.SECONDARY, file_id, span.start.byte_offset, span.end.byte_offset, message)


@dataclass(frozen=True)
class Diagnostic:
    """An error report with a code, a headline and labelled source ranges."""

    code: str
    message: str
    labels: tuple[Label, ...] = field(default_factory=tuple)
    severity: str = "error"


def _resolve(interner: StringInterner, name_id: int) -> str:
    name = interner.resolve(name_id)
    if name is None:
        raise KeyError(f"identifier id {name_id} is not interned")
    return name


def _describe(error: SemanticError, interner: StringInterner) -> tuple[str, str]:
    """Headline and primary label message for ``error``."""
    if isinstance(error, ExpectedANumericOperand):
        return "Expected a numeric operand", "Expected this value to have a numeric type"
    if isinstance(error, MixedSignedAndUnsigned):
        return (
            "Mixed signed and unsigned operands",
            "Mixing signed and unsigned operands in an arithmetic operation is not allowed",
        )
    if isinstance(error, MixedFloatAndInteger):
        return (
            "Mixed float and integer operands",
            "Mixing integer and floating-point numbers in an arithmetic operation is not allowed",
        )
    if isinstance(error, CannotCompareType):
        return "Cannot compare types", (
            f'Cannot compare type "{type_to_string(error.of.kind, interner)}" '
            f'to type "{type_to_string(error.to.kind, interner)}"'
        )
    if isinstance(error, UndeclaredIdentifier):
        return "Undeclared identifier", f'Undeclared identifier "{_resolve(interner, error.id.name)}"'
    if isinstance(error, UndeclaredType):
        return "Undeclared type", f'Undeclared type "{_resolve(interner, error.id.name)}"'
    if isinstance(error, ReturnKeywordOutsideFunction):
        return (
            'Keyword "return" used outside of a function scope',
            'Cannot use the "return" keyword outside of a function scope',
        )
    if isinstance(error, BreakKeywordOutsideLoop):
        return (
            'Keyword "break" used outside of a loop scope',
            'Cannot use the "break" keyword outside of a loop scope',
        )
    if isinstance(error, ContinueKeywordOutsideLoop):
        return (
            'Keyword "continue" used outside of a loop scope',
            'Cannot use the "continue" keyword outside of a loop scope',
        )
    if isinstance(error, InvalidAssignmentTarget):
        return "Invalid assignment target", "Invalid assignment target"
    if isinstance(error, TypeMismatch):
        return "Type mismatch", (
            f"Type mismatch, expected `{type_to_string(error.expected.kind, interner)}`, "
            f"instead found `{type_to_string(error.received.kind, interner)}`"
        )
    if isinstance(error, InvalidArraySizeValue):
        return "Invalid array size", f"Invalid array size: {error.value}"
    if isinstance(error, ReturnNotLastStatement):
        text = "Expected the return statement to be the last statement in the function"
        return text, text
    if isinstance(error, ReturnTypeMismatch):
        return "Return type mismatch", (
            f"Expected the return value to be assignable to "
            f"{type_to_string(error.expected.kind, interner)}, "
            f"found {type_to_string(error.received.kind, interner)}"
        )
    if isinstance(error, CannotAccess):
        return "Cannot access field", (
            f'Cannot use the access operator on the type "{type_to_string(error.target.kind, interner)}"'
        )
    if isinstance(error, CannotCall):
        return "Cannot use the function call operator", (
            f'Cannot use the function-call operator on type "{type_to_string(error.target.kind, interner)}"'
        )
    if isinstance(error, FnArgumentCountMismatch):
        plural = "s" if error.expected > 1 else ""
        return "Function argument count mismatch", (
            f"This function expects {error.expected} argument{plural}, "
            f"but instead received {error.received}"
        )
    if isinstance(error, CannotUseVariableDeclarationAsType):
        text = "Cannot use variable declaration as a type"
        return text, text
    if isinstance(error, AccessToUndefinedField):
        return "Access to an undefined field", f"Field {_resolve(interner, error.field.name)} is not defined"
    if isinstance(error, TypeAliasMustBeDeclaredAtTopLevel):
        text = "Type aliases must be declared in the file scope"
        return text, text
    if isinstance(error, StructMustBeDeclaredAtTopLevel):
        text = "Structs must be declared in the file scope"
        return text, text
    if isinstance(error, DuplicateStructFieldInitializer):
        return "Duplicate initializer for a struct field", (
            f'Struct field "{_resolve(interner, error.id.name)}" cannot be initialized multiple times'
        )
    if isinstance(error, UnknownStructFieldInitializer):
        return "Unknown field in the struct initializer", (
            f'Unknown struct field "{_resolve(interner, error.id.name)}"'
        )
    if isinstance(error, MissingStructFieldInitializer):
        joined = ", ".join(f'"{_resolve(interner, f)}"' for f in sorted(error.missing_fields))
        return "Missing field initializers", f"Missing initializers for the following struct fields {joined}"
    if isinstance(error, CannotApplyStructInitializer):
        return "Cannot apply struct initializer", "Cannot apply struct initializer to this expression"
    if isinstance(error, VarDeclWithoutInitializer):
        return (
            "Variable declarations must have an initializer",
            "This variable declaration must have an initializer",
        )
    if isinstance(error, DuplicateIdentifier):
        return "Duplicate identifier", f'Duplicate identifier declaration "{_resolve(interner, error.id.name)}"'
    raise TypeError(f"not a known semantic error: {error!r}")


def semantic_error_to_diagnostic(
    error: SemanticError, interner: StringInterner, file_id: int
) -> Diagnostic:
    """Describe a semantic error as a diagnostic pointing into ``file_id``."""
    headline, label_message = _describe(error, interner)
    labels = [Label.primary(file_id, error.span(), label_message)]
    if isinstance(error, TypeMismatch):
        expected = type_to_string(error.expected.kind, interner)
        labels.append(
            Label.secondary(file_id, error.expected.span, f'expected type "{expected}" originated here')
        )
    return Diagnostic(f"S{error.code()}", headline, tuple(labels))


def _locate(data: bytes, offset: int) -> tuple[int, int]:
    """Zero-based line index and one-based character column of a byte offset."""
    offset = max(0, min(offset, len(data)))
    line = data.count(b"\n", 0, offset)
    line_start = data.rfind(b"\n", 0, offset) + 1
    col = len(data[line_start:offset].decode("utf-8", errors="replace")) + 1
    return line, col


def _render_label(label: Label, files: SourceFiles) -> list[str]:
    source = files.source(label.file_id)
    data = source.encode("utf-8")
    start_line, start_col = _locate(data, label.start)
    end_line, end_col = _locate(data, max(label.end, label.start))
    lines = source.split("\n")
    text = lines[start_line] if start_line < len(lines) else ""
    if end_line != start_line:
        end_col = len(text) + 1
    width = max(1, end_col - start_col)
    gutter = len(str(start_line + 1))
    pad = " " * gutter
    mark = "^" if label.style is LabelStyle.PRIMARY else "-"
    underline = " " * (start_col - 1) + mark * width
    if label.message:
        underline = f"{underline} {label.message}"
    return [
        f"{pad}--> {files.name(label.file_id)}:{start_line + 1}:{start_col}",
        f"{pad} |",
        f"{start_line + 1} | {text}",
        f"{pad} | {underline}",
    ]


def render_diagnostic(diagnostic: Diagnostic, files: SourceFiles) -> str:
    """Render a diagnostic as plain text with source excerpts."""
    out = [f"{diagnostic.severity}[{diagnostic.code}]: {diagnostic.message}"]
    for label in diagnostic.labels:
        out.extend(_render_label(label, files))
    return "\n".join(out) + "\n"


def report(
    diagnostics: Iterable[Diagnostic],
    files: SourceFiles,
    file_path: str,
    stream: Optional[TextIO] = None,
) -> bool:
    """Write the diagnostics, or a success line if there are none.

    Diagnostics go to standard error and the success line to standard output
    unless ``stream`` is given. Returns True when there were no diagnostics.
    """
    collected = list(diagnostics)
    if not collected:
        print(f"Compilation successful for {file_path} (no errors found).", file=stream or sys.stdout)
        return True
    out = stream or sys.stderr
    print(file=stream or sys.stdout)
    for diagnostic in collected:
        out.write(render_diagnostic(diagnostic, files))
    return False