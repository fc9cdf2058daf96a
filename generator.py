import logging

from ast_nodes import Definition, IntegerLiteral, Call, VariableReference
from errors import InternalError

logger = logging.getLogger(__name__)


class Generator:
    """Renders a parsed Definition as a JavaScript function declaration."""

    def generate(self, node):
        # entry point
        if not isinstance(node, Definition):
            raise InternalError(
                f"Generator expects a Definition node at the top, got {node.__class__.__name__}"
            )

        params = ", ".join(node.params)
        body = self.generate_expr(node.body)
        out = f"function {node.name}({params}) {{return {body}}};"
        logger.debug("generated %s", out)
        return out

    # -------- expressions --------
    def generate_expr(self, node):
        if isinstance(node, IntegerLiteral):
            return node.value

        if isinstance(node, Call):
            args = ", ".join(self.generate_expr(a) for a in node.args)
            return f"{node.name}({args})"

        if isinstance(node, VariableReference):
            return node.name

        # a node type the parser never produces
        raise InternalError(f"Cannot generate code for node type {node.__class__.__name__}")


def generate(tree):
    return Generator().generate(tree)
