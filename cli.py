import logging
import sys
import traceback

from errors import DeflangError, InternalError
from generator import Generator
from lexer import Lexer
from parser import Parser

logger = logging.getLogger(__name__)

# Fixed harness printed around the generated definition.
RUNTIME = "function add(x,y) { return x+y };"
TEST = "console.log(f(1,2));"

DEFAULT_SOURCE = "test.lang"

USAGE = """Usage:
  python cli.py                    translate test.lang
  python cli.py tokens <file.lang>
  python cli.py parse <file.lang>
  python cli.py build <file.lang>
  (optional) --strict to reject trailing tokens
  (optional) --debug to log each stage and show Python traceback"""


def read_source(path):
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def translate(source, strict=False):
    tokens = Lexer(source).tokenize()
    tree = Parser(tokens).parse(strict=strict)
    return Generator().generate(tree)


# Simple AST printer (so you can SEE what the parser built)
def ast_to_dict(node):
    t = node.__class__.__name__
    d = {"type": t}

    if t == "Definition":
        d["name"] = node.name
        d["params"] = list(node.params)
        d["body"] = ast_to_dict(node.body)
    elif t == "IntegerLiteral":
        d["value"] = node.value
    elif t == "Call":
        d["name"] = node.name
        d["args"] = [ast_to_dict(a) for a in node.args]
    elif t == "VariableReference":
        d["name"] = node.name
    else:
        raise InternalError(f"Cannot print node type {t}")

    return d


def pretty(obj, indent=0):
    sp = "  " * indent
    if isinstance(obj, dict):
        lines = []
        for k, v in obj.items():
            if isinstance(v, dict) or (isinstance(v, list) and v):
                lines.append(f"{sp}{k}:")
                lines.append(pretty(v, indent + 1))
            else:
                lines.append(f"{sp}{k}: {v}")
        return "\n".join(lines)
    if isinstance(obj, list):
        lines = []
        for item in obj:
            if isinstance(item, dict):
                lines.append(f"{sp}-")
                lines.append(pretty(item, indent + 1))
            else:
                lines.append(f"{sp}- {item}")
        return "\n".join(lines)
    return f"{sp}{obj}"


def cmd_translate(path, strict=False):
    generated = translate(read_source(path), strict=strict)
    return "\n".join([RUNTIME, generated, TEST])


def cmd_tokens(path):
    tokens = Lexer(read_source(path)).tokenize()
    return "\n".join(repr(tok) for tok in tokens)


def cmd_parse(path, strict=False):
    tokens = Lexer(read_source(path)).tokenize()
    tree = Parser(tokens).parse(strict=strict)
    return pretty(ast_to_dict(tree))


def cmd_build(path, strict=False):
    return translate(read_source(path), strict=strict)


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)

    debug = "--debug" in args
    strict = "--strict" in args
    args = [a for a in args if a not in ("--debug", "--strict")]

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args:
        cmd, path = "translate", DEFAULT_SOURCE
    elif len(args) == 2 and args[0] in ("tokens", "parse", "build"):
        cmd, path = args
    else:
        print(USAGE)
        return 1

    logger.debug("%s %s", cmd, path)
    try:
        if cmd == "translate":
            out = cmd_translate(path, strict=strict)
        elif cmd == "tokens":
            out = cmd_tokens(path)
        elif cmd == "parse":
            out = cmd_parse(path, strict=strict)
        else:
            out = cmd_build(path, strict=strict)
    except FileNotFoundError:
        print(f"File not found: {path}")
        return 1
    except DeflangError as e:
        if debug:
            traceback.print_exc()
        print(f"{e.label}: {e}")
        return 1

    print(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
