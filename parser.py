import logging

from ast_nodes import Definition, IntegerLiteral, Call, VariableReference
from errors import ParseError
from lexer import DEF, IDENT, INTEGER, LPAREN, RPAREN, COMMA

logger = logging.getLogger(__name__)

# Deeper call nesting is rejected before it can exhaust the Python stack.
MAX_CALL_DEPTH = 200


class Parser:
    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.pos = 0
        self.call_depth = 0

    # remove the front token, but only if it matches what we expect
    def consume(self, token_type):
        if self.pos >= len(self.tokens):
            raise ParseError(f"Expected {token_type}, got end of input")

        tok = self.tokens[self.pos]
        if tok.type != token_type:
            raise ParseError(f"Expected {token_type}, got {tok.type}", column=tok.column)

        self.pos += 1
        return tok

    # bounds-checked lookahead: past the end is never a match
    def peek(self, token_type, offset=0):
        idx = self.pos + offset
        if idx < 0 or idx >= len(self.tokens):
            return False
        return self.tokens[idx].type == token_type

    def error_here(self, message):
        if self.pos >= len(self.tokens):
            raise ParseError(f"{message}, got end of input")
        tok = self.tokens[self.pos]
        raise ParseError(f"{message}, got {tok.type}({tok.value})", column=tok.column)

    # ---------- TOP LEVEL ----------
    def parse(self, strict=False):
        node = self.definition()

        if self.pos < len(self.tokens):
            tok = self.tokens[self.pos]
            if strict:
                raise ParseError(f"Unexpected trailing token {tok!r}", column=tok.column)
            logger.warning(
                "ignoring %d trailing token(s) starting at col %d",
                len(self.tokens) - self.pos,
                tok.column,
            )

        return node

    # definition -> DEF IDENT LPAREN params? RPAREN expression
    def definition(self):
        tok = self.consume(DEF)
        name = self.consume(IDENT).value
        params = self.params()
        body = self.expression()

        node = Definition(name, params, body)
        node.column = tok.column
        return node

    # params -> IDENT (COMMA IDENT)*
    def params(self):
        self.consume(LPAREN)

        names = []
        if self.peek(IDENT):
            names.append(self.consume(IDENT).value)
            while self.peek(COMMA):
                self.consume(COMMA)
                names.append(self.consume(IDENT).value)

        self.consume(RPAREN)
        return names

    # ---------- EXPRESSIONS ----------
    # expression -> INTEGER | IDENT LPAREN args? RPAREN | IDENT
    def expression(self):
        if self.peek(INTEGER):
            return self.integer()
        if self.peek(IDENT) and self.peek(LPAREN, 1):
            return self.call()
        if self.peek(IDENT):
            return self.variable_reference()
        self.error_here("Unexpected token in expression")

    def integer(self):
        tok = self.consume(INTEGER)
        node = IntegerLiteral(tok.value)
        node.column = tok.column
        return node

    def call(self):
        tok = self.consume(IDENT)
        if self.call_depth >= MAX_CALL_DEPTH:
            raise ParseError("Expression nested too deeply", column=tok.column)

        self.call_depth += 1
        args = self.args()
        self.call_depth -= 1

        node = Call(tok.value, args)
        node.column = tok.column
        return node

    # args -> expression (COMMA expression)*
    def args(self):
        self.consume(LPAREN)

        exprs = []
        if not self.peek(RPAREN):
            exprs.append(self.expression())
            while self.peek(COMMA):
                self.consume(COMMA)
                exprs.append(self.expression())

        self.consume(RPAREN)
        return exprs

    def variable_reference(self):
        tok = self.consume(IDENT)
        node = VariableReference(tok.value)
        node.column = tok.column
        return node


def parse(tokens, strict=False):
    return Parser(tokens).parse(strict=strict)
