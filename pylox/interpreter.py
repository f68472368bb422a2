import math
import time

from pylox.environment import Environment
from pylox.errors import LoxRuntimeError, Return
from pylox.runtime import LoxCallable, LoxClass, LoxFunction, LoxInstance, NativeFunction
from pylox.syntax import Expr, Stmt


class Interpreter(Expr.Visitor, Stmt.Visitor):
    def __init__(self, reporter, out=None):
        self.reporter = reporter
        self.out = out
        self.globals = Environment()
        self.environment = self.globals
        self.locals = {}

        self.globals.define("clock", NativeFunction("clock", 0, time.time))

    def interpret(self, stmts):
        try:
            for stmt in stmts:
                self.execute(stmt)
        except LoxRuntimeError as error:
            self.reporter.runtime_error(error)

    def stringify(self, object):
        if object is None:
            return "nil"
        if isinstance(object, bool):
            return "true" if object else "false"
        if isinstance(object, float):
            if math.isnan(object):
                return "NaN"
            if math.isinf(object):
                return "Infinity" if object > 0 else "-Infinity"
            text = repr(object)
            if text[-2:] == ".0":
                text = text[:-2]
            return text
        return str(object)

    def evaluate(self, expr):
        return expr.accept(self)

    def execute(self, stmt):
        stmt.accept(self)

    def resolve(self, expr, depth):
        self.locals[expr] = depth

    def execute_block(self, statements, environment):
        previous = self.environment
        try:
            self.environment = environment
            for statement in statements:
                self.execute(statement)
        finally:
            self.environment = previous

    def visit_block_stmt(self, stmt):
        self.execute_block(stmt.statements, Environment(self.environment))

    def visit_class_stmt(self, stmt):
        superclass = None
        if stmt.superclass:
            superclass = self.evaluate(stmt.superclass)
            if not isinstance(superclass, LoxClass):
                raise LoxRuntimeError(
                    stmt.superclass.name, "Superclass must be a class.")

        self.environment.define(stmt.name.lexeme, None)

        if superclass:
            self.environment = Environment(self.environment)
            self.environment.define("super", superclass)

        methods = {
            method.name.lexeme: LoxFunction(
                method, self.environment, method.name.lexeme == "init")
            for method in stmt.methods}

        klass = LoxClass(stmt.name.lexeme, superclass, methods)

        if superclass:
            self.environment = self.environment.enclosing

        self.environment.assign(stmt.name, klass)

    def visit_expression_stmt(self, stmt):
        value = self.evaluate(stmt.expression)
        self.check_initialized(stmt.expression, value)

    def visit_function_stmt(self, stmt):
        function = LoxFunction(stmt, self.environment, False)
        self.environment.define(stmt.name.lexeme, function)

    def visit_if_stmt(self, stmt):
        if self.is_truthy(self.evaluate(stmt.condition)):
            self.execute(stmt.then_branch)
        elif stmt.else_branch:
            self.execute(stmt.else_branch)

    def visit_print_stmt(self, stmt):
        value = self.evaluate(stmt.expression)
        self.check_initialized(stmt.expression, value)
        print(self.stringify(value), file=self.out)

    def visit_return_stmt(self, stmt):
        value = None
        if stmt.value:
            value = self.evaluate(stmt.value)
        raise Return(value)

    def visit_var_stmt(self, stmt):
        value = None
        if stmt.initializer:
            value = self.evaluate(stmt.initializer)
        self.environment.define(stmt.name.lexeme, value)

    def visit_while_stmt(self, stmt):
        while self.is_truthy(self.evaluate(stmt.condition)):
            self.execute(stmt.body)

    def visit_assign_expr(self, expr):
        value = self.evaluate(expr.value)
        distance = self.locals.get(expr)
        if distance is not None:
            self.environment.assign_at(distance, expr.name, value)
        else:
            self.globals.assign(expr.name, value)
        return value

    def visit_binary_expr(self, expr):
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        operator = expr.operator
        match operator.type:
            case "BANG_EQUAL": return not self.is_equal(left, right)
            case "EQUAL_EQUAL": return self.is_equal(left, right)
            case "GREATER":
                self.check_operands(operator, left, right)
                return left > right
            case "GREATER_EQUAL":
                self.check_operands(operator, left, right)
                return left >= right
            case "LESS":
                self.check_operands(operator, left, right)
                return left < right
            case "LESS_EQUAL":
                self.check_operands(operator, left, right)
                return left <= right
            case "MINUS":
                self.check_operands(operator, left, right)
                return left - right
            case "PLUS":
                return self.add(operator, left, right)
            case "SLASH":
                self.check_operands(operator, left, right)
                return self.divide(left, right)
            case "STAR":
                self.check_operands(operator, left, right)
                return left * right
        raise AssertionError(f"Unknown binary operator {operator.type}")

    def add(self, operator, left, right):
        left_number = self.is_number(left)
        right_number = self.is_number(right)
        if left_number and right_number:
            return left + right
        if isinstance(left, str) and isinstance(right, str):
            return left + right
        if left_number and isinstance(right, str):
            return self.stringify(left) + right
        if isinstance(left, str) and right_number:
            return left + self.stringify(right)
        raise LoxRuntimeError(
            operator, "Operands must be two numbers or two strings.")

    def divide(self, left, right):
        if right == 0.0:
            if left == 0.0 or math.isnan(left):
                return math.nan
            return math.copysign(math.inf, left) * math.copysign(1.0, right)
        return left / right

    def visit_call_expr(self, expr):
        callee = self.evaluate(expr.callee)
        arguments = [self.evaluate(argument) for argument in expr.arguments]
        if not isinstance(callee, LoxCallable):
            raise LoxRuntimeError(
                expr.paren, "Can only call functions and classes.")
        if len(arguments) != callee.arity():
            raise LoxRuntimeError(
                expr.paren, f"Expected {callee.arity()} arguments but got {len(arguments)}.")
        return callee.call(self, arguments)

    def visit_get_expr(self, expr):
        obj = self.evaluate(expr.object)
        if isinstance(obj, LoxInstance):
            return obj.get(expr.name)
        raise LoxRuntimeError(
            expr.name, "Only instances have properties.")

    def visit_grouping_expr(self, expr):
        return self.evaluate(expr.expression)

    def visit_literal_expr(self, expr):
        return expr.value

    def visit_logical_expr(self, expr):
        left = self.evaluate(expr.left)
        if expr.operator.type == "OR":
            if self.is_truthy(left):
                return left
        else:
            if not self.is_truthy(left):
                return left
        return self.evaluate(expr.right)

    def visit_set_expr(self, expr):
        obj = self.evaluate(expr.object)
        if not isinstance(obj, LoxInstance):
            raise LoxRuntimeError(
                expr.name, "Only instances have fields.")
        value = self.evaluate(expr.value)
        obj.set(expr.name, value)
        return value

    def visit_super_expr(self, expr):
        distance = self.locals[expr]
        superclass = self.environment.get_at(distance, "super")
        instance = self.environment.get_at(distance - 1, "this")

        method = superclass.find_method(expr.method.lexeme)
        if not method:
            raise LoxRuntimeError(
                expr.method, f"Undefined property '{expr.method.lexeme}'.")

        return method.bind(instance)

    def visit_this_expr(self, expr):
        return self.lookup_variable(expr.keyword, expr)

    def visit_unary_expr(self, expr):
        right = self.evaluate(expr.right)
        match expr.operator.type:
            case "BANG": return not self.is_truthy(right)
            case "MINUS":
                self.check_operands(expr.operator, right)
                return -right
        raise AssertionError(f"Unknown unary operator {expr.operator.type}")

    def visit_variable_expr(self, expr):
        return self.lookup_variable(expr.name, expr)

    def lookup_variable(self, name, expr):
        if expr in self.locals:
            return self.environment.get_at(self.locals[expr], name.lexeme)
        return self.globals.get(name)

    def check_initialized(self, expr, value):
        if value is None and isinstance(expr, Expr.Variable):
            raise LoxRuntimeError(
                expr.name, f"Cannot use uninitialized variable '{expr.name.lexeme}'.")

    def is_truthy(self, object):
        if object is None:
            return False
        if isinstance(object, bool):
            return object
        return True

    def is_equal(self, left, right):
        if left is None:
            return False
        if type(left) is not type(right):
            return False
        if isinstance(left, float):
            if math.isnan(left) or math.isnan(right):
                return math.isnan(left) and math.isnan(right)
            return left == right and math.copysign(1.0, left) == math.copysign(1.0, right)
        return left == right

    def is_number(self, object):
        return isinstance(object, float)

    def check_operands(self, operator, *operands):
        if all(self.is_number(operand) for operand in operands):
            return
        if len(operands) == 1:
            raise LoxRuntimeError(operator, "Operand must be a number.")
        raise LoxRuntimeError(operator, "Operands must be numbers.")
