import pytest

from willow.ast import IdentifierNode
from willow.interner import StringInterner
from willow.typefmt import type_to_string
from willow.types import (
    CheckedFnType,
    CheckedParam,
    CheckedTag,
    CheckedTypeAliasDecl,
    ListType,
    PointerType,
    Primitive,
    StructType,
    Type,
    UnionType,
)


@pytest.fixture
def interner():
    return StringInterner.from_iterable(["a", "b", "Some", "None", "Point"])


def ident(interner, name):
    return IdentifierNode(interner.intern(name))


@pytest.mark.parametrize("kind", list(Primitive))
def test_primitives_use_their_keyword(kind, interner):
    assert type_to_string(kind, interner) == kind.value


def test_pinned_primitive_names(interner):
    assert type_to_string(Primitive.USIZE, interner) == "usize"
    assert type_to_string(Primitive.UNKNOWN, interner) == "unknown"


def test_struct(interner):
    kind = StructType(
        (
            CheckedParam(ident(interner, "a"), Type(Primitive.I32)),
            CheckedParam(ident(interner, "b"), Type(Primitive.BOOL)),
        )
    )
    assert type_to_string(kind, interner) == "{\na: i32,\nb: bool\n}"


def test_fn_type(interner):
    kind = CheckedFnType(
        (
            CheckedParam(ident(interner, "a"), Type(Primitive.I32)),
            CheckedParam(ident(interner, "b"), Type(Primitive.BOOL)),
        ),
        Type(Primitive.VOID),
    )
    assert type_to_string(kind, interner) == "fn (a: i32, b: bool): void"


def test_tag_with_value(interner):
    tag = CheckedTag(ident(interner, "Some"), Type(Primitive.I32))
    assert type_to_string(tag, interner) == "#Some(i32)"


def test_tag_without_value(interner):
    tag = CheckedTag(ident(interner, "None"))
    assert type_to_string(tag, interner) == "#" + "None"


def test_union_joins_tags(interner):
    some = CheckedTag(ident(interner, "Some"), Type(Primitive.STRING))
    none = CheckedTag(ident(interner, "None"))
    union = UnionType((some, none))
    result = type_to_string(union, interner)
    assert result.split(" | ") == [type_to_string(some, interner), type_to_string(none, interner)]


def test_list_wraps_item(interner):
    inner = ListType(Type(Primitive.U8))
    nested = ListType(Type(inner))
    assert type_to_string(nested, interner) == type_to_string(inner, interner) + "[]"
    assert type_to_string(inner, interner).endswith("[]")


def test_pointer_wraps_inner(interner):
    kind = PointerType(Type(Primitive.F64))
    result = type_to_string(kind, interner)
    assert result.startswith("ptr<")
    assert result.endswith(">")
    assert Primitive.F64.value in result


def test_alias_shows_name_and_value(interner):
    decl = CheckedTypeAliasDecl(ident(interner, "Point"), 0, Type(Primitive.I64))
    result = type_to_string(decl, interner)
    assert result.startswith("type Point = ")
    assert result.endswith(";")
    assert Primitive.I64.value in result


def test_unknown_identifier_raises(interner):
    tag = CheckedTag(IdentifierNode(999))
    with pytest.raises(KeyError):
        type_to_string(tag, interner)