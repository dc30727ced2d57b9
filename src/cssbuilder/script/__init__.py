from cssbuilder.script.errors import ParseError
from cssbuilder.script.transformer import iter_expressions, parse_expression

__all__ = ["ParseError", "iter_expressions", "parse_expression"]
