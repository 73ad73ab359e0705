from willow.ast import (
    BinaryExpr,
    BinaryOperator,
    BlockContents,
    BoolLiteralExpr,
    Expr,
    ExpressionStmt,
    IdentifierExpr,
    IdentifierNode,
    Param,
    Position,
    PrimitiveAnnotation,
    Span,
    Stmt,
    StringNode,
    TypeAnnotation,
    VarDecl,
)


def _span(offset):
    return Span(Position(1, offset, offset), Position(1, offset + 1, offset + 1))


def test_identifier_equality_ignores_span():
    a = IdentifierNode(3, _span(0))
    b = IdentifierNode(3, _span(10))
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_identifiers_with_different_names_differ():
    assert IdentifierNode(1) != IdentifierNode(2)


def test_string_node_equality_ignores_length_and_span():
    a = StringNode(7, 3, _span(0))
    b = StringNode(7, 9, _span(4))
    assert a == b
    assert hash(a) == hash(b)
    assert StringNode(7) != StringNode(8)


def test_default_span_positions_match():
    span = Span()
    assert span.start == span.end == Position()


def test_nested_expression_equality():
    def build(flag):
        return Expr(
            BinaryExpr(
                BinaryOperator.AND,
                Expr(BoolLiteralExpr(True)),
                Expr(BoolLiteralExpr(flag)),
            )
        )

    assert build(False) == build(False)
    assert build(False) != build(True)


def test_block_contents_holds_statements_and_final_expr():
    stmt = Stmt(ExpressionStmt(Expr(IdentifierExpr(IdentifierNode(0)))))
    block = BlockContents([stmt], Expr(BoolLiteralExpr(True)))
    assert block.statements[0].kind.expr.kind.identifier == IdentifierNode(0)
    assert block.final_expr.kind.value is True


def test_var_decl_defaults_are_empty():
    decl = VarDecl(IdentifierNode(2))
    assert decl.constraint is None
    assert decl.value is None
    assert decl.documentation is None


def test_param_compares_constraint():
    p1 = Param(IdentifierNode(0), TypeAnnotation(PrimitiveAnnotation.I32))
    p2 = Param(IdentifierNode(0), TypeAnnotation(PrimitiveAnnotation.I64))
    assert p1 != p2
    assert p1 == Param(IdentifierNode(0), TypeAnnotation(PrimitiveAnnotation.I32))