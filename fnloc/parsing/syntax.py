"""
Typed syntax tree for Rust function bodies.

The variants below form a closed set. The lowering step maps every
tree-sitter node onto one of them; anything the metrics have no rule for
becomes ``Other``, so new grammar constructs degrade to "no contribution"
instead of failing.

All nodes are frozen dataclasses holding tuples, which makes a parsed
body immutable and safe to share between the calculators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


LOGICAL_OPERATORS = frozenset({"&&", "||"})


@dataclass(frozen=True)
class Block:
    """An ordered sequence of statements between braces."""
    stmts: Tuple["Stmt", ...] = ()


@dataclass(frozen=True)
class FunctionItem:
    name: str
    body: Block
    owner: Optional[str] = None
    start_line: int = 0
    end_line: int = 0

    @property
    def qualified_name(self) -> str:
        if self.owner:
            return f"{self.owner}::{self.name}"
        return self.name


# Statements

@dataclass(frozen=True)
class ExprStmt:
    expr: "Expr"
    semi: bool = True


@dataclass(frozen=True)
class Local:
    """A ``let`` binding, optionally with an initializer."""
    init: Optional["Expr"] = None


@dataclass(frozen=True)
class ItemStmt:
    """An item declared inside a block (fn, struct, use, impl, ...).

    Nested items are measured on their own, so only their kind and name
    are kept here.
    """
    kind: str
    name: Optional[str] = None


@dataclass(frozen=True)
class MacroStmt:
    """A macro invocation in statement position. Never analyzed."""
    name: str = ""


# Expressions

@dataclass(frozen=True)
class If:
    cond: "Expr"
    then_branch: Block
    # Either the else block or the ``if`` of an ``else if`` chain.
    else_branch: Optional[Union[Block, "If"]] = None


@dataclass(frozen=True)
class MatchArm:
    body: "Expr"
    guard: Optional["Expr"] = None


@dataclass(frozen=True)
class Match:
    scrutinee: "Expr"
    arms: Tuple[MatchArm, ...] = ()


@dataclass(frozen=True)
class While:
    cond: "Expr"
    body: Block


@dataclass(frozen=True)
class ForLoop:
    iterable: "Expr"
    body: Block


@dataclass(frozen=True)
class Loop:
    body: Block


@dataclass(frozen=True)
class Binary:
    op: str
    left: "Expr"
    right: "Expr"

    @property
    def is_logical(self) -> bool:
        return self.op in LOGICAL_OPERATORS


@dataclass(frozen=True)
class Try:
    expr: "Expr"


@dataclass(frozen=True)
class Return:
    value: Optional["Expr"] = None


@dataclass(frozen=True)
class Break:
    value: Optional["Expr"] = None


@dataclass(frozen=True)
class Continue:
    pass


@dataclass(frozen=True)
class BlockExpr:
    """A block used as an expression: plain ``{}``, ``unsafe {}`` or ``async {}``."""
    block: Block
    kind: str = "block"


@dataclass(frozen=True)
class Closure:
    body: "Expr"


@dataclass(frozen=True)
class Call:
    func: "Expr"
    args: Tuple["Expr", ...] = ()


@dataclass(frozen=True)
class MethodCall:
    receiver: "Expr"
    method: str
    args: Tuple["Expr", ...] = ()


@dataclass(frozen=True)
class Array:
    elems: Tuple["Expr", ...] = ()


@dataclass(frozen=True)
class TupleExpr:
    elems: Tuple["Expr", ...] = ()


@dataclass(frozen=True)
class Field:
    base: "Expr"
    name: str = ""


@dataclass(frozen=True)
class Index:
    expr: "Expr"
    index: "Expr"


@dataclass(frozen=True)
class Assign:
    left: "Expr"
    right: "Expr"


@dataclass(frozen=True)
class Reference:
    expr: "Expr"


@dataclass(frozen=True)
class Unary:
    op: str
    expr: "Expr"


@dataclass(frozen=True)
class Cast:
    expr: "Expr"


@dataclass(frozen=True)
class Range:
    start: Optional["Expr"] = None
    end: Optional["Expr"] = None


@dataclass(frozen=True)
class Struct:
    fields: Tuple["Expr", ...] = ()
    rest: Optional["Expr"] = None


@dataclass(frozen=True)
class Paren:
    expr: "Expr"


@dataclass(frozen=True)
class Group:
    """Invisible grouping, as produced around macro-expanded fragments."""
    expr: "Expr"


@dataclass(frozen=True)
class Other:
    """Literals, paths, and every construct without a metric rule."""
    kind: str = "literal"


Stmt = Union[ExprStmt, Local, ItemStmt, MacroStmt]

Expr = Union[
    If, Match, While, ForLoop, Loop, Binary, Try, Return, Break, Continue,
    BlockExpr, Closure, Call, MethodCall, Array, TupleExpr, Field, Index, Assign,
    Reference, Unary, Cast, Range, Struct, Paren, Group, Other,
]
