from pylox.tokens import Token


class Scanner:
    KEYWORDS = {
        "and",
        "class",
        "else",
        "false",
        "for",
        "fun",
        "if",
        "nil",
        "or",
        "print",
        "return",
        "super",
        "this",
        "true",
        "var",
        "while",
    }

    def __init__(self, source, reporter):
        self.source = source
        self.reporter = reporter
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens = []

    def scan_tokens(self):
        while not self.at_end():
            self.start = self.current
            self.scan_token()
        self.tokens.append(Token("EOF", "", None, self.line))
        return self.tokens

    def scan_token(self):
        match c := self.advance():
            case "(": self.add_token("LEFT_PAREN")
            case ")": self.add_token("RIGHT_PAREN")
            case "{": self.add_token("LEFT_BRACE")
            case "}": self.add_token("RIGHT_BRACE")
            case ",": self.add_token("COMMA")
            case ".": self.add_token("DOT")
            case "-": self.add_token("MINUS")
            case "+": self.add_token("PLUS")
            case ";": self.add_token("SEMICOLON")
            case "*": self.add_token("STAR")
            case "!": self.add_token("BANG_EQUAL" if self.match("=") else "BANG")
            case "=": self.add_token("EQUAL_EQUAL" if self.match("=") else "EQUAL")
            case "<": self.add_token("LESS_EQUAL" if self.match("=") else "LESS")
            case ">": self.add_token("GREATER_EQUAL" if self.match("=") else "GREATER")
            case "/": self.comment() if self.match("/") else self.add_token("SLASH")
            case " " | "\r" | "\t": pass
            case "\n": self.line += 1
            case "\"": self.string()
            case _:
                if self.is_digit(c):
                    self.number()
                elif self.is_alpha(c):
                    self.identifier()
                else:
                    self.reporter.error(self.line, "Unexpected character.")

    def comment(self):
        while self.peek() != "\n" and not self.at_end():
            self.current += 1

    def string(self):
        while self.peek() != "\"" and not self.at_end():
            if self.peek() == "\n":
                self.line += 1
            self.current += 1

        if self.at_end():
            self.reporter.error(self.line, "Unterminated string.")
            return

        self.current += 1  # Closing "
        value = self.source[self.start + 1: self.current - 1]
        self.add_token("STRING", value)

    def number(self):
        while self.is_digit(self.peek()):
            self.current += 1

        if self.peek() == "." and self.is_digit(self.peek_next()):
            self.current += 1
            while self.is_digit(self.peek()):
                self.current += 1

        value = float(self.source[self.start:self.current])
        self.add_token("NUMBER", value)

    def identifier(self):
        while self.is_alpha(self.peek()) or self.is_digit(self.peek()):
            self.current += 1

        text = self.source[self.start:self.current]
        if text in Scanner.KEYWORDS:
            self.add_token(text.upper())
        else:
            self.add_token("IDENTIFIER")

    def add_token(self, type, literal=None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(type, lexeme, literal, self.line))

    def match(self, expected):
        if not self.at_end():
            if self.source[self.current] == expected:
                self.current += 1
                return True
        return False

    def advance(self):
        c = self.source[self.current]
        self.current += 1
        return c

    def peek(self):
        if self.at_end():
            return "\0"
        return self.source[self.current]

    def peek_next(self):
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def at_end(self):
        return not self.current < len(self.source)

    @staticmethod
    def is_digit(c):
        return "0" <= c <= "9"

    @staticmethod
    def is_alpha(c):
        return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"
