from helpers import parse_source

from pylox import AstPrinter, Expr, Stmt


def printed(src):
    statements, errors = parse_source(src)
    assert errors == []
    printer = AstPrinter()
    return [printer.print(statement) for statement in statements]


def test_precedence_climbing():
    assert printed("print -1 + 2 * 3 == 7 or !false and x;") == [
        "(print (or (== (+ (- 1.0) (* 2.0 3.0)) 7.0) (and (! false) x)))"]


def test_assignment_is_right_associative():
    assert printed("a = b = 3;") == ["(; (= a (= b 3.0)))"]


def test_property_set_target():
    statements, _ = parse_source("a.b.c = 1;")
    assignment = statements[0].expression
    assert isinstance(assignment, Expr.Set)
    assert isinstance(assignment.object, Expr.Get)
    assert assignment.name.lexeme == "c"


def test_chained_calls_and_property_access():
    assert printed("a.b(c)(d);") == ["(; (call (call (. b a) c) d))"]


def test_for_loop_desugars_to_while():
    statements, _ = parse_source("for (var i = 0; i < 3; i = i + 1) print i;")
    block = statements[0]
    assert isinstance(block, Stmt.Block)
    initializer, loop = block.statements
    assert isinstance(initializer, Stmt.Var)
    assert isinstance(loop, Stmt.While)
    body, increment = loop.body.statements
    assert isinstance(body, Stmt.Print)
    assert isinstance(increment, Stmt.Expression)


def test_empty_for_clauses_loop_forever_on_true():
    statements, _ = parse_source("for (;;) print 1;")
    loop = statements[0]
    assert isinstance(loop, Stmt.While)
    assert loop.condition.value is True


def test_class_with_superclass_and_methods():
    assert printed("class B < A { init(x) { this.x = x; } get() { return super.get(); } }") == [
        "(class B < A (fun init (x) (; (= x this x))) (fun get () (return (call (super get)))))"]


def test_self_inheritance_is_not_a_syntax_error():
    _, errors = parse_source("class A < A {}")
    assert errors == []


def test_invalid_assignment_target_reports_without_aborting():
    statements, errors = parse_source("1 = 2; print 3;")
    assert errors == ["[line 1] Error at '=': Invalid assignment target."]
    assert len(statements) == 2


def test_synchronize_reports_several_errors():
    statements, errors = parse_source("var = 1;\nprint 2;\nvar b = ;\nprint 4;")
    assert errors == [
        "[line 1] Error at '=': Expect variable name.",
        "[line 3] Error at ';': Expect expression.",
    ]
    assert [type(s) for s in statements] == [Stmt.Print, Stmt.Print]


def test_error_at_end():
    _, errors = parse_source("print 1")
    assert errors == ["[line 1] Error at end: Expect ';' after value."]


def test_too_many_arguments_reported_but_parse_continues():
    arguments = ", ".join("1" for _ in range(256))
    statements, errors = parse_source(f"f({arguments});\nprint 2;")
    assert errors == ["[line 1] Error at '1': Can't have more than 255 arguments."]
    assert len(statements[0].expression.arguments) == 256
    assert isinstance(statements[1], Stmt.Print)


def test_too_many_parameters():
    params = ", ".join(f"p{i}" for i in range(256))
    _, errors = parse_source(f"fun f({params}) {{}}")
    assert errors == ["[line 1] Error at 'p255': Can't have more than 255 parameters."]
