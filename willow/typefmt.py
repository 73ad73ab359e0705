"""Human-readable rendering of checked types."""

from __future__ import annotations

from willow.interner import StringInterner
from willow.types import (
    CheckedFnType,
    CheckedParam,
    CheckedTag,
    CheckedTypeAliasDecl,
    ListType,
    PointerType,
    Primitive,
    StructType,
    TypeKind,
    UnionType,
)


def _name(name_id: int, interner: StringInterner) -> str:
    name = interner.resolve(name_id)
    if name is None:
        raise KeyError(f"identifier id {name_id} is not interned")
    return name


def _param(param: CheckedParam, interner: StringInterner) -> str:
    return f"{_name(param.identifier.name, interner)}: {type_to_string(param.constraint.kind, interner)}"


def _tag(tag: CheckedTag, interner: StringInterner) -> str:
    suffix = "" if tag.value_type is None else f"({type_to_string(tag.value_type.kind, interner)})"
    return f"#{_name(tag.identifier.name, interner)}{suffix}"


def type_to_string(kind: TypeKind, interner: StringInterner) -> str:
    """Render a type kind, resolving identifier names through ``interner``."""
    if isinstance(kind, Primitive):
        return kind.value
    if isinstance(kind, StructType):
        fields = ",\n".join(_param(p, interner) for p in kind.fields)
        return f"{{\n{fields}\n}}"
    if isinstance(kind, CheckedFnType):
        params = ", ".join(_param(p, interner) for p in kind.params)
        return f"fn ({params}): {type_to_string(kind.return_type.kind, interner)}"
    if isinstance(kind, CheckedTypeAliasDecl):
        name = _name(kind.identifier.name, interner)
        return f"type {name} = {type_to_string(kind.value.kind, interner)};"
    if isinstance(kind, ListType):
        return f"{type_to_string(kind.item_type.kind, interner)}[]"
    if isinstance(kind, PointerType):
        return f"ptr<{type_to_string(kind.inner.kind, interner)}>"
    if isinstance(kind, UnionType):
        return " | ".join(_tag(t, interner) for t in kind.tags)
    if isinstance(kind, CheckedTag):
        return _tag(kind, interner)
    raise TypeError(f"not a type kind: {kind!r}")