from pylox.syntax import Expr, Stmt


class Resolver(Expr.Visitor, Stmt.Visitor):
    def __init__(self, interpreter, reporter):
        self.interpreter = interpreter
        self.reporter = reporter
        self.scopes = []
        self.unused = []
        self.current_function = "NONE"
        self.current_class = "NONE"

    def resolve(self, node):
        if isinstance(node, list):
            for statement in node:
                statement.accept(self)
        else:
            node.accept(self)

    def visit_block_stmt(self, stmt):
        self.begin_scope()
        self.resolve(stmt.statements)
        self.end_scope()

    def visit_class_stmt(self, stmt):
        enclosing_class = self.current_class
        self.current_class = "CLASS"

        self.declare(stmt.name)
        self.define(stmt.name)

        if stmt.superclass:
            if stmt.name.lexeme == stmt.superclass.name.lexeme:
                self.reporter.token_error(
                    stmt.superclass.name, "A class can't inherit from itself.")
            self.current_class = "SUBCLASS"
            self.resolve(stmt.superclass)

            self.begin_scope()
            self.scopes[-1]["super"] = True

        self.begin_scope()
        self.scopes[-1]["this"] = True

        for method in stmt.methods:
            kind = "METHOD"
            if method.name.lexeme == "init":
                kind = "INITIALIZER"
            self.resolve_function(method, kind)

        self.end_scope()

        if stmt.superclass:
            self.end_scope()

        self.current_class = enclosing_class

    def visit_expression_stmt(self, stmt):
        self.resolve(stmt.expression)

    def visit_function_stmt(self, stmt):
        self.declare(stmt.name)
        self.define(stmt.name)
        self.resolve_function(stmt, "FUNCTION")

    def visit_if_stmt(self, stmt):
        self.resolve(stmt.condition)
        self.resolve(stmt.then_branch)
        if stmt.else_branch:
            self.resolve(stmt.else_branch)

    def visit_print_stmt(self, stmt):
        self.resolve(stmt.expression)

    def visit_return_stmt(self, stmt):
        if self.current_function == "NONE":
            self.reporter.token_error(
                stmt.keyword, "Can't return from top-level code.")
        if stmt.value:
            if self.current_function == "INITIALIZER":
                self.reporter.token_error(
                    stmt.keyword, "Can't return a value from an initializer.")
            self.resolve(stmt.value)

    def visit_var_stmt(self, stmt):
        self.declare(stmt.name)
        if stmt.initializer:
            self.resolve(stmt.initializer)
        self.define(stmt.name)
        if self.unused:
            self.unused[-1][stmt.name.lexeme] = stmt.name

    def visit_while_stmt(self, stmt):
        self.resolve(stmt.condition)
        self.resolve(stmt.body)

    def visit_assign_expr(self, expr):
        self.resolve(expr.value)
        self.resolve_local(expr, expr.name)

    def visit_binary_expr(self, expr):
        self.resolve(expr.left)
        self.resolve(expr.right)

    def visit_call_expr(self, expr):
        self.resolve(expr.callee)
        for argument in expr.arguments:
            self.resolve(argument)

    def visit_get_expr(self, expr):
        self.resolve(expr.object)

    def visit_grouping_expr(self, expr):
        self.resolve(expr.expression)

    def visit_literal_expr(self, expr):
        pass

    def visit_logical_expr(self, expr):
        self.resolve(expr.left)
        self.resolve(expr.right)

    def visit_set_expr(self, expr):
        self.resolve(expr.value)
        self.resolve(expr.object)

    def visit_super_expr(self, expr):
        if self.current_class == "NONE":
            self.reporter.token_error(
                expr.keyword, "Can't use 'super' outside of a class.")
        elif self.current_class != "SUBCLASS":
            self.reporter.token_error(
                expr.keyword, "Can't use 'super' in a class with no superclass.")
        self.resolve_local(expr, expr.keyword)

    def visit_this_expr(self, expr):
        if self.current_class == "NONE":
            self.reporter.token_error(
                expr.keyword, "Can't use 'this' outside of a class.")
            return
        self.resolve_local(expr, expr.keyword)

    def visit_unary_expr(self, expr):
        self.resolve(expr.right)

    def visit_variable_expr(self, expr):
        if self.scopes and self.scopes[-1].get(expr.name.lexeme) is False:
            self.reporter.token_error(
                expr.name, "Can't read local variable in its own initializer.")
        if (depth := self.resolve_local(expr, expr.name)) is not None:
            self.unused[-1 - depth].pop(expr.name.lexeme, None)

    def begin_scope(self):
        self.scopes.append({})
        self.unused.append({})

    def end_scope(self):
        for name in self.unused.pop().values():
            self.reporter.token_error(name, "The variable is never used.")
        self.scopes.pop()

    def declare(self, name):
        if not self.scopes:
            return
        scope = self.scopes[-1]
        if name.lexeme in scope:
            self.reporter.token_error(
                name, "Already a variable with this name in this scope.")
        scope[name.lexeme] = False

    def define(self, name):
        if self.scopes:
            self.scopes[-1][name.lexeme] = True

    def resolve_function(self, function, kind):
        enclosing = self.current_function
        self.current_function = kind
        self.begin_scope()
        for param in function.params:
            self.declare(param)
            self.define(param)
        self.resolve(function.body)
        self.end_scope()
        self.current_function = enclosing

    def resolve_local(self, expr, name):
        for depth, scope in enumerate(reversed(self.scopes)):
            if name.lexeme in scope:
                self.interpreter.resolve(expr, depth)
                return depth
        return None
