"""
Cyclomatic complexity of a function body.

Cyclomatic complexity counts the linearly independent paths through a
function. It starts at 1 for the straight-line path and adds 1 for each
decision point:

- ``if`` conditions (``else`` alone is not a decision)
- ``match`` expressions, plus 1 for every arm, guarded or not
- ``while``, ``for`` and ``loop``
- ``&&`` and ``||``
- the ``?`` operator
- ``return``, ``break`` and ``continue``

Nested function items are measured as separate functions and add nothing
to the enclosing one. Macro invocations are opaque.
"""

from __future__ import annotations

from fnloc.parsing import syntax as ast


def calculate_cyclomatic_complexity(body: ast.Block | ast.FunctionItem) -> int:
    if isinstance(body, ast.FunctionItem):
        body = body.body
    return 1 + _block(body)


def _block(block: ast.Block) -> int:
    return sum(_statement(stmt) for stmt in block.stmts)


def _statement(stmt: ast.Stmt) -> int:
    if isinstance(stmt, ast.ExprStmt):
        return _expr(stmt.expr)
    if isinstance(stmt, ast.Local):
        return _optional(stmt.init)
    # ItemStmt and MacroStmt
    return 0


def _optional(expr) -> int:
    if expr is None:
        return 0
    return _expr(expr)


def _exprs(exprs) -> int:
    return sum(_expr(expr) for expr in exprs)


def _expr(expr: ast.Expr) -> int:
    if isinstance(expr, ast.If):
        complexity = 1 + _expr(expr.cond) + _block(expr.then_branch)
        if isinstance(expr.else_branch, ast.Block):
            complexity += _block(expr.else_branch)
        elif expr.else_branch is not None:
            complexity += _expr(expr.else_branch)
        return complexity

    if isinstance(expr, ast.Match):
        complexity = 1 + _expr(expr.scrutinee)
        for arm in expr.arms:
            complexity += 1 + _optional(arm.guard) + _expr(arm.body)
        return complexity

    if isinstance(expr, ast.While):
        return 1 + _expr(expr.cond) + _block(expr.body)
    if isinstance(expr, ast.ForLoop):
        return 1 + _expr(expr.iterable) + _block(expr.body)
    if isinstance(expr, ast.Loop):
        return 1 + _block(expr.body)

    if isinstance(expr, ast.Binary):
        decision = 1 if expr.is_logical else 0
        return decision + _expr(expr.left) + _expr(expr.right)

    if isinstance(expr, ast.Try):
        return 1 + _expr(expr.expr)
    if isinstance(expr, (ast.Return, ast.Break)):
        return 1 + _optional(expr.value)
    if isinstance(expr, ast.Continue):
        return 1

    if isinstance(expr, ast.BlockExpr):
        return _block(expr.block)
    if isinstance(expr, ast.Closure):
        return _expr(expr.body)

    if isinstance(expr, ast.Call):
        return _expr(expr.func) + _exprs(expr.args)
    if isinstance(expr, ast.MethodCall):
        return _expr(expr.receiver) + _exprs(expr.args)
    if isinstance(expr, (ast.Array, ast.TupleExpr)):
        return _exprs(expr.elems)
    if isinstance(expr, ast.Field):
        return _expr(expr.base)
    if isinstance(expr, ast.Index):
        return _expr(expr.expr) + _expr(expr.index)
    if isinstance(expr, ast.Assign):
        return _expr(expr.left) + _expr(expr.right)
    if isinstance(expr, (ast.Reference, ast.Unary, ast.Cast, ast.Paren, ast.Group)):
        return _expr(expr.expr)
    if isinstance(expr, ast.Range):
        return _optional(expr.start) + _optional(expr.end)
    if isinstance(expr, ast.Struct):
        return _exprs(expr.fields) + _optional(expr.rest)

    # Literals, paths and anything without a rule.
    return 0
