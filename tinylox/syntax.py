"""Syntax tree nodes.

Both hierarchies are closed: consumers ``match`` on the concrete classes and
finish with ``assert_never`` so a type checker flags a missing variant.
"""

from dataclasses import dataclass
from typing import Any, Optional, TypeAlias

from tinylox.tokens import Token


@dataclass(frozen=True)
class Literal:
    value: Any


@dataclass(frozen=True)
class Grouping:
    expression: "Expr"
    paren: Optional[Token] = None


@dataclass(frozen=True)
class Unary:
    operator: Token
    right: "Expr"


@dataclass(frozen=True)
class Variable:
    name: Token


@dataclass(frozen=True)
class Assign:
    name: Token
    value: "Expr"


@dataclass(frozen=True)
class Binary:
    left: "Expr"
    operator: Token
    right: "Expr"


Expr: TypeAlias = Literal | Grouping | Unary | Variable | Assign | Binary


@dataclass(frozen=True)
class Expression:
    expression: Expr


@dataclass(frozen=True)
class Print:
    expression: Expr


@dataclass(frozen=True)
class Var:
    name: Token
    initializer: Optional[Expr]


@dataclass(frozen=True)
class Block:
    statements: tuple["Stmt", ...]
    brace: Optional[Token] = None


Stmt: TypeAlias = Expression | Print | Var | Block
