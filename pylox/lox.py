import sys

from pylox.errors import ErrorReporter
from pylox.interpreter import Interpreter
from pylox.parser import Parser
from pylox.printer import AstPrinter
from pylox.resolver import Resolver
from pylox.scanner import Scanner

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_SOFTWARE = 70

RECURSION_LIMIT = 10000


class PyLox:
    def __init__(self, out=None, err=None):
        if sys.getrecursionlimit() < RECURSION_LIMIT:
            sys.setrecursionlimit(RECURSION_LIMIT)
        self.out = out
        self.reporter = ErrorReporter(err)
        self.interpreter = Interpreter(self.reporter, out)

    @property
    def had_error(self):
        return self.reporter.had_error

    @property
    def had_runtime_error(self):
        return self.reporter.had_runtime_error

    def exit_status(self):
        if self.had_error:
            return EX_DATAERR
        if self.had_runtime_error:
            return EX_SOFTWARE
        return EX_OK

    def run_file(self, filename):
        with open(filename, "r") as file:
            self.run(file.read())
        return self.exit_status()

    def run_prompt(self):
        while True:
            try:
                line = input("> ")
            except EOFError:
                print()
                break
            self.reporter.reset()
            self.run(line)

    def parse(self, source):
        tokens = Scanner(source, self.reporter).scan_tokens()
        return Parser(tokens, self.reporter).parse()

    def run(self, source):
        statements = self.parse(source)
        if self.had_error:
            return

        resolver = Resolver(self.interpreter, self.reporter)
        resolver.resolve(statements)
        if self.had_error:
            return

        self.interpreter.interpret(statements)

    def print_ast(self, source):
        statements = self.parse(source)
        if self.had_error:
            return
        printer = AstPrinter()
        for statement in statements:
            print(printer.print(statement), file=self.out)
