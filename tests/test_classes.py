from helpers import errors_of, output_of


def test_inherited_method():
    src = 'class A { greet() { print "A"; } } class B < A {} B().greet();'
    assert output_of(src) == ["A"]


def test_super_call_keeps_receiver():
    src = """
    class A {
      greet() { print "A " + this.name; }
    }
    class B < A {
      init(name) { this.name = name; }
      greet() { print "B"; super.greet(); }
    }
    B("bee").greet();
    """
    assert output_of(src) == ["B", "A bee"]


def test_super_skips_overriding_class_in_deeper_chains():
    src = """
    class A { method() { print "A method"; } }
    class B < A {
      method() { print "B method"; }
      test() { super.method(); }
    }
    class C < B {}
    C().test();
    """
    assert output_of(src) == ["A method"]


def test_super_missing_method():
    src = "class A {} class B < A { m() { super.nope(); } } B().m();"
    assert errors_of(src) == ["Undefined property 'nope'.\n[line 1]"]


def test_initializer_returns_instance_even_with_bare_return():
    src = """
    class C { init() { this.ready = true; return; } }
    var c = C();
    print c;
    print c.ready;
    print c.init();
    """
    assert output_of(src) == ["C instance", "true", "C instance"]


def test_class_arity_comes_from_inherited_initializer():
    src = """
    class Point { init(x, y) { this.x = x; this.y = y; } }
    class Named < Point {}
    var p = Named(1, 2);
    print p.x + p.y;
    """
    assert output_of(src) == ["3"]
    assert errors_of("class P { init(x) {} } P();") == [
        "Expected 1 arguments but got 0.\n[line 1]"]


def test_fields_shadow_methods():
    src = """
    class Box { value() { return "method"; } }
    var box = Box();
    print box.value();
    box.value = "field";
    print box.value;
    """
    assert output_of(src) == ["method", "field"]


def test_bound_method_remembers_receiver():
    src = """
    class Person {
      init(name) { this.name = name; }
      sayName() { print this.name; }
    }
    var jane = Person("Jane");
    var method = jane.sayName;
    var bill = Person("Bill");
    bill.sayName = method;
    bill.sayName();
    """
    assert output_of(src) == ["Jane"]


def test_class_can_refer_to_itself():
    src = """
    class Node {
      init(next) { this.next = next; }
      make() { return Node(this); }
    }
    print Node(false).make().next.next;
    """
    assert output_of(src) == ["false"]


def test_property_access_errors():
    assert errors_of("var a = 1; print a.b;") == [
        "Only instances have properties.\n[line 1]"]
    assert errors_of("var a = 1; a.b = 2;") == [
        "Only instances have fields.\n[line 1]"]
    assert errors_of("class A {} print A().missing;") == [
        "Undefined property 'missing'.\n[line 1]"]


def test_superclass_must_be_a_class():
    assert errors_of('var NotAClass = "x"; class B < NotAClass {}') == [
        "Superclass must be a class.\n[line 1]"]
