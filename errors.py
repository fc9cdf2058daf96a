class DeflangError(Exception):
    label = "Error"

    def __init__(self, message: str, column: int | None = None):
        super().__init__(message)
        self.message = message
        self.column = column

    def format(self) -> str:
        if self.column is None:
            return self.message
        return f"{self.message} at col {self.column}"

    def __str__(self) -> str:
        return self.format()


class LexError(DeflangError):
    label = "Lex error"


class ParseError(DeflangError):
    label = "Parse error"


# Raised by the generator on a node it does not know how to render.
class InternalError(DeflangError):
    label = "Internal error"
