"""A tree-walking interpreter for a small subset of Lox."""

from tinylox.errors import (
    DivisionByZeroError, LoxError, LoxRuntimeError, LoxSyntaxError, NestingTooDeepError,
    OperandTypeError, ParseError, ScanError, UndefinedVariableError)
from tinylox.interpreter import Interpreter
from tinylox.lox import Lox
from tinylox.parser import Parser
from tinylox.scanner import Scanner, scan
from tinylox.tokens import Token, TokenType

__version__ = "0.1.0"
