from typing import Any, NamedTuple


class Token(NamedTuple):
    type: str
    lexeme: str
    literal: Any
    line: int

    def __str__(self):
        return f"{self.type} {self.lexeme} {self.literal}"
