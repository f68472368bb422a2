import io

from pylox import ErrorReporter, Parser, PyLox, Scanner


def run_source(src, lox=None):
    out = io.StringIO()
    err = io.StringIO()
    lox = lox or PyLox(out=out, err=err)
    lox.run(src)
    return out.getvalue().splitlines(), lox.reporter.errors


def output_of(src):
    return run_source(src)[0]


def errors_of(src):
    return run_source(src)[1]


def tokens_of(src):
    reporter = ErrorReporter(io.StringIO())
    return Scanner(src, reporter).scan_tokens()


def parse_source(src):
    reporter = ErrorReporter(io.StringIO())
    tokens = Scanner(src, reporter).scan_tokens()
    return Parser(tokens, reporter).parse(), reporter.errors
