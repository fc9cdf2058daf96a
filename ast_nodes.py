class ASTNode:
    # Optional source column (1-based). Parser may set this.
    column: int | None = None


class Definition(ASTNode):
    def __init__(self, name, params, body):
        self.name = name      # function name
        self.params = params  # list[str], may be empty
        self.body = body      # exactly one expression


class Expression(ASTNode):
    pass


class IntegerLiteral(Expression):
    def __init__(self, value):
        self.value = value  # digit text, kept as written


class Call(Expression):
    def __init__(self, name, args):
        self.name = name
        self.args = args  # list[expr], may be empty


class VariableReference(Expression):
    def __init__(self, name):
        self.name = name
