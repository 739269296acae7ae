"""Diagnostics shared by the scanner, the parser and the interpreter.

Static errors (scan and parse time) and runtime errors are disjoint branches
of the hierarchy so that callers can pick an exit status from the class.
"""

from tinylox.tokens import TokenType


class LoxError(Exception):
    pass


class LoxSyntaxError(LoxError):
    def __init__(self, line, where, message):
        super().__init__(message)
        self.line = line
        self.where = where
        self.message = message

    @classmethod
    def at_line(cls, line, message):
        return cls(line, "", message)

    @classmethod
    def at_token(cls, token, message):
        if token.type == TokenType.EOF:
            return cls(token.line, " at end", message)
        return cls(token.line, f" at '{token.lexeme}'", message)

    def __str__(self):
        return f"[line {self.line}] Error{self.where}: {self.message}"


class ScanError(LoxSyntaxError):
    pass


class ParseError(LoxSyntaxError):
    pass


class LoxRuntimeError(LoxError):
    def __init__(self, token, message):
        super().__init__(message)
        self.token = token
        self.message = message

    @property
    def line(self):
        return self.token.line

    def __str__(self):
        return f"{self.message}\n[line {self.token.line}]"


class UndefinedVariableError(LoxRuntimeError):
    def __init__(self, name):
        super().__init__(name, f"Undefined variable '{name.lexeme}'.")


class OperandTypeError(LoxRuntimeError):
    pass


class DivisionByZeroError(LoxRuntimeError):
    def __init__(self, operator):
        super().__init__(operator, "Division by zero.")


class NestingTooDeepError(LoxRuntimeError):
    def __init__(self, token):
        super().__init__(token, "Expression nesting too deep.")
