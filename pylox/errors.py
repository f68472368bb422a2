import sys


class LoxRuntimeError(RuntimeError):
    def __init__(self, token, message):
        super().__init__(message)
        self.token = token
        self.message = message


class Return(Exception):
    def __init__(self, value):
        super().__init__()
        self.value = value


class ErrorReporter:
    def __init__(self, err=None):
        self.err = err
        self.had_error = False
        self.had_runtime_error = False
        self.errors = []

    def reset(self):
        self.had_error = False
        self.had_runtime_error = False
        self.errors.clear()

    def error(self, line, message):
        self.report(line, "", message)

    def token_error(self, token, message):
        if token.type == "EOF":
            self.report(token.line, " at end", message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)

    def runtime_error(self, error):
        self.write(f"{error.message}\n[line {error.token.line}]")
        self.had_runtime_error = True

    def report(self, line, where, message):
        self.write(f"[line {line}] Error{where}: {message}")
        self.had_error = True

    def write(self, text):
        self.errors.append(text)
        print(text, file=self.err if self.err is not None else sys.stderr)
