from typing import assert_never

from tinylox.interpreter import stringify
from tinylox.syntax import (
    Assign, Binary, Block, Expression, Grouping, Literal, Print, Unary, Var, Variable)


class AstPrinter:
    """Renders syntax trees in fully parenthesized prefix form."""

    def print(self, node):
        match node:
            case Literal(value):
                return stringify(value)
            case Grouping(expression):
                return self.parenthesize("group", expression)
            case Unary(operator, right):
                return self.parenthesize(operator.lexeme, right)
            case Variable(name):
                return name.lexeme
            case Assign(name, value):
                return f"(= {name.lexeme} {self.print(value)})"
            case Binary(left, operator, right):
                return self.parenthesize(operator.lexeme, left, right)
            case Expression(expression):
                return self.parenthesize(";", expression)
            case Print(expression):
                return self.parenthesize("print", expression)
            case Var(name, None):
                return f"(var {name.lexeme})"
            case Var(name, initializer):
                return f"(var {name.lexeme} {self.print(initializer)})"
            case Block(statements):
                return self.parenthesize("block", *statements)
            case _:
                assert_never(node)

    def parenthesize(self, name, *nodes):
        parts = [name, *(self.print(node) for node in nodes)]
        return f"({' '.join(parts)})"
