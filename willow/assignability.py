"""Assignability rules between checked types."""

from __future__ import annotations

from willow.types import (
    CheckedFnType,
    CheckedTag,
    CheckedTypeAliasDecl,
    ListType,
    PointerType,
    Primitive,
    StructType,
    Type,
    UnionType,
)


def check_is_tag_assignable(source_tag: CheckedTag, target_tag: CheckedTag) -> bool:
    """Tags match when names agree and payload types are mutually assignable."""
    if source_tag.value_type is not None and target_tag.value_type is not None:
        if source_tag.identifier != target_tag.identifier:
            return False
        return check_is_assignable(
            source_tag.value_type, target_tag.value_type
        ) and check_is_assignable(target_tag.value_type, source_tag.value_type)
    if source_tag.value_type is None and target_tag.value_type is None:
        return source_tag.identifier == target_tag.identifier
    return False


def _fn_assignable(source: CheckedFnType, target: CheckedFnType) -> bool:
    if len(source.params) != len(target.params):
        return False
    if not all(
        check_is_assignable(sp.constraint, tp.constraint)
        for sp, tp in zip(source.params, target.params)
    ):
        return False
    return check_is_assignable(source.return_type, target.return_type)


def check_is_assignable(source: Type, target: Type) -> bool:
    """Whether a value of type ``source`` may be stored where ``target`` is expected."""
    src = source.kind
    dst = target.kind

    if src is Primitive.UNKNOWN:
        return True
    if isinstance(src, Primitive) and isinstance(dst, Primitive) and src is dst:
        return True
    if isinstance(src, UnionType) and isinstance(dst, UnionType):
        return all(
            any(check_is_tag_assignable(s, t) for t in dst.tags) for s in src.tags
        )
    if isinstance(src, CheckedTag) and isinstance(dst, UnionType):
        return any(check_is_tag_assignable(src, t) for t in dst.tags)
    if isinstance(src, CheckedTag) and isinstance(dst, CheckedTag):
        return check_is_tag_assignable(src, dst)
    if isinstance(src, PointerType) and isinstance(dst, PointerType):
        return check_is_assignable(src.inner, dst.inner)
    if isinstance(src, StructType) and isinstance(dst, StructType):
        if len(src.fields) != len(dst.fields):
            return False
        return all(
            sp.identifier.name == tp.identifier.name
            and check_is_assignable(sp.constraint, tp.constraint)
            for sp, tp in zip(src.fields, dst.fields)
        )
    if isinstance(src, ListType) and isinstance(dst, ListType):
        return check_is_assignable(src.item_type, dst.item_type) and check_is_assignable(
            dst.item_type, src.item_type
        )
    if isinstance(src, CheckedFnType) and isinstance(dst, CheckedFnType):
        return _fn_assignable(src, dst)
    if isinstance(src, CheckedTypeAliasDecl):
        return check_is_assignable(src.value, target)
    if isinstance(dst, CheckedTypeAliasDecl):
        return check_is_assignable(source, dst.value)
    return False