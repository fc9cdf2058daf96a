import logging
import re

from errors import LexError

logger = logging.getLogger(__name__)

DEF = "DEF"
END = "END"
IDENT = "IDENT"
INTEGER = "INTEGER"
LPAREN = "LPAREN"
RPAREN = "RPAREN"
COMMA = "COMMA"

# Order matters: the keywords must be tried before IDENT, which also matches them.
RULES = [
    (DEF, re.compile(r"\bdef\b")),
    (END, re.compile(r"\bend\b")),
    (IDENT, re.compile(r"\b[a-zA-Z]+\b")),
    (INTEGER, re.compile(r"\b[0-9]+\b")),
    (LPAREN, re.compile(r"\(")),
    (RPAREN, re.compile(r"\)")),
    (COMMA, re.compile(r",")),
]


class Token:
    def __init__(self, type, value, column=1):
        self.type = type
        self.value = value
        self.column = column

    def __repr__(self):
        return f"{self.type}({self.value})"


class Lexer:
    def __init__(self, text):
        # the language has a single statement, so newlines carry no meaning
        self.text = text.replace("\n", "")
        self.pos = 0
        self.skip_spaces()

    # IMPORTANT: spaces only, tabs are not whitespace here
    def skip_spaces(self):
        while self.pos < len(self.text) and self.text[self.pos] == " ":
            self.pos += 1

    def at_end(self):
        return self.pos >= len(self.text)

    def get_next_token(self):
        for token_type, pattern in RULES:
            m = pattern.match(self.text, self.pos)
            if m is None:
                continue
            tok = Token(token_type, m.group(0), column=self.pos + 1)
            self.pos = m.end()
            self.skip_spaces()
            logger.debug("token %r at col %d", tok, tok.column)
            return tok

        raise LexError(f"Unknown input: {self.text[self.pos]!r}", column=self.pos + 1)

    def tokenize(self):
        tokens = []
        while not self.at_end():
            tokens.append(self.get_next_token())
        return tokens


def tokenize(source):
    return Lexer(source).tokenize()
