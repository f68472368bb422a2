from pylox.environment import Environment
from pylox.errors import ErrorReporter, LoxRuntimeError, Return
from pylox.interpreter import Interpreter
from pylox.lox import PyLox
from pylox.parser import Parser
from pylox.printer import AstPrinter
from pylox.resolver import Resolver
from pylox.runtime import LoxCallable, LoxClass, LoxFunction, LoxInstance, NativeFunction
from pylox.scanner import Scanner
from pylox.syntax import Expr, Stmt
from pylox.tokens import Token

__all__ = [
    "AstPrinter",
    "Environment",
    "ErrorReporter",
    "Expr",
    "Interpreter",
    "LoxCallable",
    "LoxClass",
    "LoxFunction",
    "LoxInstance",
    "LoxRuntimeError",
    "NativeFunction",
    "Parser",
    "PyLox",
    "Resolver",
    "Return",
    "Scanner",
    "Stmt",
    "Token",
]
