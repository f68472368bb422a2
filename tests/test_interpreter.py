import io

import pytest
from helpers import errors_of, output_of, run_source

from pylox import PyLox


def test_closures_share_captured_environment():
    src = """
    fun makeCounter() {
      var count = 0;
      fun increment() { count = count + 1; }
      fun current() { return count; }
      class Pair { init(a, b) { this.increment = a; this.current = b; } }
      return Pair(increment, current);
    }
    var counter = makeCounter();
    counter.increment();
    counter.increment();
    print counter.current();
    """
    assert output_of(src) == ["2"]


def test_closure_is_lexical_not_dynamic():
    src = """
    var a = "global";
    {
      fun showA() { print a; }
      showA();
      var a = "block";
      showA();
      print a;
    }
    """
    assert output_of(src) == ["global", "global", "block"]


def test_shadowing():
    assert output_of("var a=1; { var a=2; print a; } print a;") == ["2", "1"]


@pytest.mark.parametrize("src, expected", [
    ("print 1 + 2;", "3"),
    ('print "a" + "b";', "ab"),
    ('print "x=" + 1;', "x=1"),
    ('print 1 + "x";', "1x"),
    ('print "pi=" + 3.5;', "pi=3.5"),
    ("print 7 / 2;", "3.5"),
    ("print -(2 * 3) + 10;", "4"),
    ("print 3 >= 3;", "true"),
    ("print !nil;", "true"),
    ("print 1 / 0;", "Infinity"),
    ("print -1 / 0;", "-Infinity"),
    ("print 0 / 0;", "NaN"),
])
def test_expression_values(src, expected):
    assert output_of(src) == [expected]


def test_adding_number_and_boolean_fails():
    assert errors_of("print 1 + true;") == [
        "Operands must be two numbers or two strings.\n[line 1]"]


def test_comparison_requires_numbers():
    assert errors_of('print 1 < "2";') == ["Operands must be numbers.\n[line 1]"]
    assert errors_of('print -"a";') == ["Operand must be a number.\n[line 1]"]


@pytest.mark.parametrize("src, expected", [
    ("print nil == nil;", "false"),
    ("print nil != nil;", "true"),
    ("print nil == false;", "false"),
    ("print 1 == 1;", "true"),
    ('print "a" == "a";', "true"),
    ("print true == 1;", "false"),
    ("print 0 == false;", "false"),
    ("print 0/0 == 0/0;", "true"),
    ("print -0 == 0;", "false"),
    ("print -0 != 0;", "true"),
])
def test_equality(src, expected):
    assert output_of(src) == [expected]


@pytest.mark.parametrize("value, expected", [
    ("0", "yes"),
    ('""', "yes"),
    ("false", "no"),
    ("nil", "no"),
])
def test_truthiness(value, expected):
    assert output_of(f'if ({value}) print "yes"; else print "no";') == [expected]


def test_logical_operators_short_circuit():
    src = """
    fun boom() { print "evaluated"; return true; }
    print nil or "default";
    print false and boom();
    print 1 and 2;
    print true or boom();
    """
    assert output_of(src) == ["default", "false", "2", "true"]


def test_uninitialized_variable_guard():
    out, errors = run_source("var x; print x;")
    assert out == []
    assert errors == ["Cannot use uninitialized variable 'x'.\n[line 1]"]


def test_uninitialized_guard_applies_to_expression_statements():
    assert errors_of("var x;\nx;") == [
        "Cannot use uninitialized variable 'x'.\n[line 2]"]


def test_nil_literal_and_nil_call_are_printable():
    assert output_of("fun f() {} print nil; print f();") == ["nil", "nil"]


def test_while_and_for_loops():
    src = """
    var total = 0;
    for (var i = 1; i <= 4; i = i + 1) total = total + i;
    while (total > 5) total = total - 5;
    print total;
    """
    assert output_of(src) == ["5"]


def test_recursion():
    src = """
    fun fib(n) { if (n < 2) return n; return fib(n - 1) + fib(n - 2); }
    print fib(15);
    """
    assert output_of(src) == ["610"]


def test_arity_mismatch_names_both_counts():
    assert errors_of("fun f(a, b) {} f(1);") == [
        "Expected 2 arguments but got 1.\n[line 1]"]


def test_calling_a_non_callable():
    assert errors_of('"text"();') == [
        "Can only call functions and classes.\n[line 1]"]


def test_undefined_variable():
    assert errors_of("print missing;") == [
        "Undefined variable 'missing'.\n[line 1]"]
    assert errors_of("missing = 1;") == [
        "Undefined variable 'missing'.\n[line 1]"]


def test_runtime_error_abandons_remaining_statements():
    out, errors = run_source('print "before"; print -true; print "after";')
    assert out == ["before"]
    assert len(errors) == 1


def test_environment_restored_after_runtime_error_in_block():
    lox = PyLox(out=io.StringIO(), err=io.StringIO())
    run_source('var a = "outer"; { var a = "inner"; print a + nil; }', lox)
    assert lox.interpreter.environment is lox.interpreter.globals


def test_stringify_callables_and_instances():
    src = """
    fun f() {}
    class Bagel {}
    print f;
    print clock;
    print Bagel;
    print Bagel();
    """
    assert output_of(src) == ["<fn f>", "<native fn>", "Bagel", "Bagel instance"]


def test_clock_returns_seconds():
    assert output_of("print clock() > 0;") == ["true"]
