from pylox.syntax import Expr, Stmt


class AstPrinter(Expr.Visitor, Stmt.Visitor):
    def print(self, node):
        return node.accept(self)

    def visit_block_stmt(self, stmt):
        return self.parenthesize("block", *stmt.statements)

    def visit_class_stmt(self, stmt):
        parts = ["class", stmt.name.lexeme]
        if stmt.superclass:
            parts += ["<", self.print(stmt.superclass)]
        parts += [self.print(method) for method in stmt.methods]
        return f"({' '.join(parts)})"

    def visit_expression_stmt(self, stmt):
        return self.parenthesize(";", stmt.expression)

    def visit_function_stmt(self, stmt):
        params = " ".join(param.lexeme for param in stmt.params)
        body = "".join(" " + self.print(statement) for statement in stmt.body)
        return f"(fun {stmt.name.lexeme} ({params}){body})"

    def visit_if_stmt(self, stmt):
        if stmt.else_branch:
            return self.parenthesize(
                "if-else", stmt.condition, stmt.then_branch, stmt.else_branch)
        return self.parenthesize("if", stmt.condition, stmt.then_branch)

    def visit_print_stmt(self, stmt):
        return self.parenthesize("print", stmt.expression)

    def visit_return_stmt(self, stmt):
        if stmt.value:
            return self.parenthesize("return", stmt.value)
        return "(return)"

    def visit_var_stmt(self, stmt):
        if stmt.initializer:
            return self.parenthesize(f"var {stmt.name.lexeme}", stmt.initializer)
        return f"(var {stmt.name.lexeme})"

    def visit_while_stmt(self, stmt):
        return self.parenthesize("while", stmt.condition, stmt.body)

    def visit_assign_expr(self, expr):
        return self.parenthesize(f"= {expr.name.lexeme}", expr.value)

    def visit_binary_expr(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_call_expr(self, expr):
        return self.parenthesize("call", expr.callee, *expr.arguments)

    def visit_get_expr(self, expr):
        return self.parenthesize(f". {expr.name.lexeme}", expr.object)

    def visit_grouping_expr(self, expr):
        return self.parenthesize("group", expr.expression)

    def visit_literal_expr(self, expr):
        match expr.value:
            case None: return "nil"
            case True: return "true"
            case False: return "false"
            case str(): return f"\"{expr.value}\""
        return str(expr.value)

    def visit_logical_expr(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_set_expr(self, expr):
        return self.parenthesize(f"= {expr.name.lexeme}", expr.object, expr.value)

    def visit_super_expr(self, expr):
        return f"(super {expr.method.lexeme})"

    def visit_this_expr(self, expr):
        return "this"

    def visit_unary_expr(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.right)

    def visit_variable_expr(self, expr):
        return expr.name.lexeme

    def parenthesize(self, name, *nodes):
        parts = [name] + [self.print(node) for node in nodes]
        return f"({' '.join(parts)})"
