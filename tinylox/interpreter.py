from typing import TypeAlias, assert_never

from tinylox.environment import Environment
from tinylox.errors import DivisionByZeroError, NestingTooDeepError, OperandTypeError
from tinylox.syntax import (
    Assign, Binary, Block, Expression, Grouping, Literal, Print, Unary, Var, Variable)
from tinylox.tokens import TokenType

Value: TypeAlias = None | bool | float | str


def is_truthy(value: Value) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(left: Value, right: Value) -> bool:
    if type(left) is not type(right):
        return False
    return left == right


def stringify(value: Value) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    text = str(value)
    if isinstance(value, float) and text[-2:] == ".0":
        text = text[:-2]
    return text


def check_number_operand(operator, operand):
    if not isinstance(operand, float):
        raise OperandTypeError(operator, "Operand must be a number.")


def check_number_operands(operator, left, right):
    if not (isinstance(left, float) and isinstance(right, float)):
        raise OperandTypeError(operator, "Operands must be numbers.")


def nesting_token(node):
    """Finds a token near the top of node to blame for running out of stack."""
    while True:
        match node:
            case Expression(expression) | Print(expression):
                node = expression
            case Var(name, _) | Variable(name) | Assign(name, _):
                return name
            case Unary(operator, _) | Binary(_, operator, _):
                return operator
            case Grouping(_, paren):
                return paren
            case Block(_, brace):
                return brace
            case _:
                return None


class Interpreter:
    def __init__(self, stdout=None):
        self.environment = Environment()
        self.stdout = stdout

    def interpret(self, statements):
        for statement in statements:
            try:
                self.execute(statement)
            except RecursionError:
                if (token := nesting_token(statement)) is None:
                    raise
                raise NestingTooDeepError(token) from None

    def execute(self, stmt):
        match stmt:
            case Expression(expression):
                self.evaluate(expression)
            case Print(expression):
                value = self.evaluate(expression)
                print(stringify(value), file=self.stdout)
            case Var(name, initializer):
                value = None
                if initializer is not None:
                    value = self.evaluate(initializer)
                self.environment.define(name.lexeme, value)
            case Block(statements):
                self.execute_block(statements)
            case _:
                assert_never(stmt)

    def execute_block(self, statements):
        with self.environment.enclosed():
            for statement in statements:
                self.execute(statement)

    def evaluate(self, expr):
        match expr:
            case Literal(value):
                return value
            case Grouping(expression):
                return self.evaluate(expression)
            case Variable(name):
                return self.environment.get(name)
            case Assign(name, value_expr):
                value = self.evaluate(value_expr)
                self.environment.assign(name, value)
                return value
            case Unary():
                return self.evaluate_unary(expr)
            case Binary():
                return self.evaluate_binary(expr)
            case _:
                assert_never(expr)

    def evaluate_unary(self, expr):
        right = self.evaluate(expr.right)
        operator = expr.operator
        match operator.type:
            case TokenType.BANG:
                return not is_truthy(right)
            case TokenType.MINUS:
                check_number_operand(operator, right)
                return -right
            case _:
                raise ValueError(f"Unknown unary operator {operator.type.name}.")

    def evaluate_binary(self, expr):
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        operator = expr.operator
        match operator.type:
            case TokenType.BANG_EQUAL:
                return not is_equal(left, right)
            case TokenType.EQUAL_EQUAL:
                return is_equal(left, right)
            case TokenType.GREATER:
                check_number_operands(operator, left, right)
                return left > right
            case TokenType.GREATER_EQUAL:
                check_number_operands(operator, left, right)
                return left >= right
            case TokenType.LESS:
                check_number_operands(operator, left, right)
                return left < right
            case TokenType.LESS_EQUAL:
                check_number_operands(operator, left, right)
                return left <= right
            case TokenType.MINUS:
                check_number_operands(operator, left, right)
                return left - right
            case TokenType.PLUS:
                if isinstance(left, float) and isinstance(right, float):
                    return left + right
                if isinstance(left, str) and isinstance(right, str):
                    return left + right
                raise OperandTypeError(
                    operator, "Operands must be two numbers or two strings.")
            case TokenType.SLASH:
                check_number_operands(operator, left, right)
                if right == 0.0:
                    raise DivisionByZeroError(operator)
                return left / right
            case TokenType.STAR:
                check_number_operands(operator, left, right)
                return left * right
            case _:
                raise ValueError(f"Unknown binary operator {operator.type.name}.")
