# willow

Front-end building blocks for a compiler of the Willow language, written as a
plain Python library with no third-party dependencies. It includes:

- a syntax tree;
- checked types and the rules for them;
- semantic error classes and text diagnostics;
- a builder that lowers statements into a control-flow graph.

## Modules

- **`willow.interner`**: `StringInterner` maps strings to integer ids. Ids
  start at 0 and are handed out in the order the strings are first seen. It
  has these members:
  - `intern`, `resolve`, `len()` and `in`;
  - `items()`;
  - `StringInterner.from_iterable(values)`.
- **`willow.ast`**: the syntax tree.
  - Location types: `Position` and `Span`.
  - Leaf nodes: `IdentifierNode` and `StringNode`. They compare only by their
    interned id.
  - Expression kinds: `BinaryExpr` with a `BinaryOperator`, `BoolLiteralExpr`,
    `IfExpr`, `FnExpr` and the others, each wrapped in `Expr`.
  - Statement kinds, each wrapped in `Stmt`.
  - Type annotation kinds, each wrapped in `TypeAnnotation`.
- **`willow.types`**: checked types. A `Type` wraps one of these kinds:
  - a `Primitive` (`I32`, `STRING`, `UNKNOWN`, …);
  - `CheckedTag`, `UnionType`, `ListType`, `StructType`, `PointerType`;
  - `CheckedFnType`;
  - `CheckedTypeAliasDecl`.

  Two `Type`s are equal when their kinds are equal. A `UnionType` ignores the
  order of its tags when compared. The module also holds `CheckedParam`,
  `CheckedVarDecl` and `CheckedModule`.
- **`willow.typeutils`**: `is_float`, `is_integer`, `is_signed`,
  `get_numeric_type_rank` (0 for non-numeric kinds) and `check_is_equatable`.
- **`willow.typefmt`**: `type_to_string(kind, interner)`.
- **`willow.assignability`**: `check_is_assignable(source, target)` and
  `check_is_tag_assignable(source_tag, target_tag)`. They follow these rules:
  - `UNKNOWN` can be assigned to anything.
  - Aliases are looked through.
  - Tag payloads and list item types must be assignable in both directions.
  - Struct fields must match in order and by name.
- **`willow.errors`**: one frozen dataclass per semantic error. Examples are
  `UndeclaredType` and `TypeMismatch`. Each one subclasses `SemanticError` and
  provides `span()` and a numeric `code()`.
- **`willow.scope`**: `ScopeStack` starts with a file scope and provides
  `enter`, `exit`, `last`, `insert` and `lookup`.
  - `insert` records a `DuplicateIdentifier` error when the name is already in
    the innermost scope.
  - `within_function_scope()` and `is_file_scope()` report where the stack
    currently is.
  - `within_loop_scope()` returns `(continue_target, break_target)` only when
    the loop is reached through code blocks alone.
- **`willow.cfg`**: the control-flow graph IR. It contains:
  - values: `BoolValue`, `Use`, …;
  - instructions: `Phi`, `BinaryOp`, `Store`, …;
  - terminators: `Jump`, `CondJump`, `Return`, `Unreachable`;
  - `BasicBlock` and `ControlFlowGraph`.
- **`willow.builder`**: `HIRBuilder` lowers statements and checks type
  annotations against its scopes.
- **`willow.diagnostics`**: `SourceFiles`, `Label`, `Diagnostic`,
  `semantic_error_to_diagnostic`, `render_diagnostic` and `report`.

## Interning names

```python
from willow.interner import StringInterner

interner = StringInterner()
point = interner.intern("Point")
assert interner.intern("Point") == point
assert interner.resolve(point) == "Point"
assert interner.resolve(99) is None

names = StringInterner.from_iterable(["x", "y", "x"])
assert len(names) == 2
```

## Types

```python
from willow.ast import IdentifierNode
from willow.assignability import check_is_assignable
from willow.typefmt import type_to_string
from willow.types import CheckedTag, ListType, Primitive, Type, UnionType

interner = StringInterner()
option = UnionType((
    CheckedTag(IdentifierNode(interner.intern("Some")), Type(Primitive.STRING)),
    CheckedTag(IdentifierNode(interner.intern("None"))),
))
assert type_to_string(option, interner) == "#Some(string) | #None"
assert type_to_string(ListType(Type(Primitive.I32)), interner) == "i32[]"

assert check_is_assignable(Type(Primitive.UNKNOWN), Type(Primitive.BOOL))
assert not check_is_assignable(Type(Primitive.I32), Type(Primitive.I64))
```

`type_to_string` raises `KeyError` when an identifier id is not in the
interner.

## Lowering to a control-flow graph

`HIRBuilder.build(statements)` starts over from a fresh state each time it is
called and returns `(cfg, errors)`. Block 0 is the entry block.

```python
from willow.ast import BinaryExpr, BinaryOperator, BoolLiteralExpr, Expr, ExpressionStmt, Stmt
from willow.builder import HIRBuilder
from willow.cfg import BoolValue, CondJump, Jump, Phi

and_expr = Expr(BinaryExpr(BinaryOperator.AND,
                           Expr(BoolLiteralExpr(True)),
                           Expr(BoolLiteralExpr(False))))
cfg, errors = HIRBuilder(StringInterner()).build([Stmt(ExpressionStmt(and_expr))])

assert cfg.blocks[0].terminator == CondJump(BoolValue(True), 1, 2)
assert cfg.blocks[1].terminator == Jump(2)
assert cfg.blocks[2].instructions == [
    Phi(0, [(0, BoolValue(False)), (1, BoolValue(False))])
]
```

Lowering covers only a small part of the language:

- expression statements;
- boolean literals;
- `&&`.

Every other statement or expression raises `UnsupportedConstructError`.

Type annotations are handled separately by `check_type_annotation`. An
identifier that is not declared records `UndeclaredType`. An identifier that
names a variable records `CannotUseVariableDeclarationAsType`. In both cases
the resulting kind is `Primitive.UNKNOWN`.

## Reporting errors

```python
from willow.ast import Position, Span
from willow.diagnostics import SourceFiles, report, semantic_error_to_diagnostic
from willow.errors import UndeclaredType

interner = StringInterner()
files = SourceFiles()
file_id = files.add("main.wl", "let x: Foo = 1")
error = UndeclaredType(IdentifierNode(interner.intern("Foo"),
                                      Span(Position(1, 8, 7), Position(1, 11, 10))))

diagnostic = semantic_error_to_diagnostic(error, interner, file_id)
assert diagnostic.code == "S13"
assert diagnostic.message == "Undeclared type"
report([diagnostic], files, "main.wl")
```

`render_diagnostic(diagnostic, files)` returns the text form of a diagnostic:

- a `error[CODE]: message` headline;
- for each label, a `--> file:line:col` line, the source line, and an
  underline (`^` for primary labels, `-` for secondary ones).

`report` works as follows:

- With diagnostics, it prints a blank line and then writes them to standard
  error, or to `stream` if one is given. It returns `False`.
- With no diagnostics, it prints `Compilation successful for <path> (no errors
  found).` and returns `True`.

## What this package does not do

- There is no tokenizer or parser. Syntax trees must be built directly from
  the `willow.ast` classes.
- There is no command-line program. Nothing here compiles a source file on
  its own.
- There is no code generation.
- Diagnostics cover semantic errors only.