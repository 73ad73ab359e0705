from willow.ast import IdentifierNode, Position, Span
from willow.types import (
    CheckedFnType,
    CheckedModule,
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


def _span(offset):
    return Span(Position(0, offset, offset), Position(0, offset, offset))


def _tag(name, value=None):
    return CheckedTag(IdentifierNode(name), Type(value) if value is not None else None)


def test_type_equality_ignores_span():
    a = Type(Primitive.I32, _span(1))
    b = Type(Primitive.I32, _span(9))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Type(Primitive.U32)


def test_union_equality_is_order_insensitive():
    u1 = UnionType((_tag(0), _tag(1, Primitive.I32)))
    u2 = UnionType((_tag(1, Primitive.I32), _tag(0)))
    assert u1 == u2
    assert hash(u1) == hash(u2)


def test_union_with_different_lengths_differ():
    assert UnionType((_tag(0),)) != UnionType((_tag(0), _tag(0)))


def test_union_with_different_members_differ():
    assert UnionType((_tag(0), _tag(1))) != UnionType((_tag(0), _tag(2)))


def test_tag_compares_value_type():
    assert _tag(0, Primitive.I32) != _tag(0, Primitive.I64)
    assert _tag(0) != _tag(0, Primitive.I64)
    assert _tag(0, Primitive.BOOL) == _tag(0, Primitive.BOOL)


def test_tag_differs_from_union_of_itself():
    assert _tag(0) != UnionType((_tag(0),))


def test_alias_equality_by_identifier_and_module():
    a = CheckedTypeAliasDecl(IdentifierNode(1), 0, Type(Primitive.I32))
    b = CheckedTypeAliasDecl(IdentifierNode(1), 0, Type(Primitive.STRING))
    c = CheckedTypeAliasDecl(IdentifierNode(1), 1, Type(Primitive.I32))
    assert a == b
    assert hash(a) == hash(b)
    assert a != c


def test_fn_type_equality_ignores_span():
    params = (CheckedParam(IdentifierNode(0), Type(Primitive.I32)),)
    a = CheckedFnType(params, Type(Primitive.BOOL), _span(2))
    b = CheckedFnType(params, Type(Primitive.BOOL), _span(7))
    assert a == b
    assert a != CheckedFnType((), Type(Primitive.BOOL))


def test_struct_field_order_matters():
    x = CheckedParam(IdentifierNode(0), Type(Primitive.I32))
    y = CheckedParam(IdentifierNode(1), Type(Primitive.I32))
    assert StructType((x, y)) != StructType((y, x))
    assert StructType((x, y)) == StructType((x, y))


def test_list_and_pointer_compare_inner_type():
    assert ListType(Type(Primitive.U8)) == ListType(Type(Primitive.U8))
    assert ListType(Type(Primitive.U8)) != ListType(Type(Primitive.U16))
    assert PointerType(Type(Primitive.U8)) != ListType(Type(Primitive.U8))


def test_types_usable_as_dict_keys():
    table = {Type(UnionType((_tag(0), _tag(1)))): "u"}
    assert table[Type(UnionType((_tag(1), _tag(0))))] == "u"


def test_module_defaults_are_independent():
    m1 = CheckedModule(0, "main")
    m2 = CheckedModule(1, "lib")
    m1.exports.add(IdentifierNode(3))
    assert m2.exports == set()
    assert m1.initializer_cfg is None