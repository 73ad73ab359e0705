"""Classification helpers for checked type kinds."""

from __future__ import annotations

from willow.types import CheckedTag, Primitive, TypeKind

_INTEGERS = frozenset(
    {
        Primitive.I8,
        Primitive.I16,
        Primitive.I32,
        Primitive.I64,
        Primitive.U8,
        Primitive.U16,
        Primitive.U32,
        Primitive.U64,
        Primitive.ISIZE,
        Primitive.USIZE,
    }
)

_FLOATS = frozenset({Primitive.F32, Primitive.F64})

_SIGNED = frozenset(
    {
        Primitive.I8,
        Primitive.I16,
        Primitive.I32,
        Primitive.I64,
        Primitive.ISIZE,
        Primitive.F32,
        Primitive.F64,
    }
)

_NUMERIC_RANKS = {
    Primitive.I8: 1,
    Primitive.U8: 1,
    Primitive.I16: 2,
    Primitive.U16: 2,
    Primitive.I32: 3,
    Primitive.U32: 3,
    Primitive.ISIZE: 3,
    Primitive.USIZE: 3,
    Primitive.I64: 4,
    Primitive.U64: 4,
    Primitive.F32: 5,
    Primitive.F64: 6,
}


def is_float(kind: TypeKind) -> bool:
    """True for the floating-point primitives."""
    return isinstance(kind, Primitive) and kind in _FLOATS


def is_integer(kind: TypeKind) -> bool:
    """True for the signed and unsigned integer primitives."""
    return isinstance(kind, Primitive) and kind in _INTEGERS


def is_signed(kind: TypeKind) -> bool:
    """True for signed integers and floats."""
    return isinstance(kind, Primitive) and kind in _SIGNED


def get_numeric_type_rank(kind: TypeKind) -> int:
    """Width rank of a numeric type; 0 for anything that is not numeric."""
    if not isinstance(kind, Primitive):
        return 0
    return _NUMERIC_RANKS.get(kind, 0)


def check_is_equatable(left: TypeKind, right: TypeKind) -> bool:
    """Whether values of the two kinds may be compared for equality."""
    if left is Primitive.BOOL and right is Primitive.BOOL:
        return True
    if left is Primitive.STRING and right is Primitive.STRING:
        return True
    if isinstance(left, CheckedTag) and isinstance(right, CheckedTag):
        return True
    return is_integer(left) and is_integer(right)