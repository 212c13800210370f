"""
Maximum nesting depth of a function body.

Every ``if``/``else`` branch, ``match`` arm, loop body, block and closure
body sits one level deeper than the construct that owns it. Conditions,
scrutinees and loop iterables stay at the owner's depth. The result is
the deepest level reached on any path, starting from 0 at the function
root.

Rough reading guide:

- 1-3: easy to follow
- 4-5: acceptable, keep an eye on it
- 6+: consider refactoring
"""

from __future__ import annotations

from fnloc.parsing import syntax as ast


def calculate_nesting_depth(body: ast.Block | ast.FunctionItem) -> int:
    if isinstance(body, ast.FunctionItem):
        body = body.body
    return _block(body, 0)


def _block(block: ast.Block, depth: int) -> int:
    deepest = depth
    for stmt in block.stmts:
        deepest = max(deepest, _statement(stmt, depth))
    return deepest


def _statement(stmt: ast.Stmt, depth: int) -> int:
    if isinstance(stmt, ast.ExprStmt):
        return _expr(stmt.expr, depth)
    if isinstance(stmt, ast.Local) and stmt.init is not None:
        return _expr(stmt.init, depth)
    # Nested items are measured separately; macros are opaque.
    return depth


def _optional(expr, depth: int) -> int:
    if expr is None:
        return depth
    return _expr(expr, depth)


def _deepest(exprs, depth: int) -> int:
    deepest = depth
    for expr in exprs:
        deepest = max(deepest, _expr(expr, depth))
    return deepest


def _expr(expr: ast.Expr, depth: int) -> int:
    nested = depth + 1

    if isinstance(expr, ast.If):
        deepest = max(nested, _expr(expr.cond, depth), _block(expr.then_branch, nested))
        if isinstance(expr.else_branch, ast.Block):
            deepest = max(deepest, _block(expr.else_branch, nested))
        elif expr.else_branch is not None:
            deepest = max(deepest, _expr(expr.else_branch, nested))
        return deepest

    if isinstance(expr, ast.Match):
        deepest = max(nested, _expr(expr.scrutinee, depth))
        for arm in expr.arms:
            # Guards are measured inside the arm, not at the match's level.
            deepest = max(deepest, _optional(arm.guard, nested), _expr(arm.body, nested))
        return deepest

    if isinstance(expr, ast.While):
        return max(nested, _expr(expr.cond, depth), _block(expr.body, nested))
    if isinstance(expr, ast.ForLoop):
        return max(nested, _expr(expr.iterable, depth), _block(expr.body, nested))
    if isinstance(expr, ast.Loop):
        return _block(expr.body, nested)
    if isinstance(expr, ast.BlockExpr):
        return _block(expr.block, nested)
    if isinstance(expr, ast.Closure):
        return _expr(expr.body, nested)

    if isinstance(expr, (ast.Binary, ast.Assign)):
        return max(_expr(expr.left, depth), _expr(expr.right, depth))
    if isinstance(expr, (ast.Try, ast.Reference, ast.Unary, ast.Cast, ast.Paren, ast.Group)):
        return _expr(expr.expr, depth)
    if isinstance(expr, (ast.Return, ast.Break)):
        return _optional(expr.value, depth)
    if isinstance(expr, ast.Call):
        return max(_expr(expr.func, depth), _deepest(expr.args, depth))
    if isinstance(expr, ast.MethodCall):
        return max(_expr(expr.receiver, depth), _deepest(expr.args, depth))
    if isinstance(expr, (ast.Array, ast.TupleExpr)):
        return _deepest(expr.elems, depth)
    if isinstance(expr, ast.Field):
        return _expr(expr.base, depth)
    if isinstance(expr, ast.Index):
        return max(_expr(expr.expr, depth), _expr(expr.index, depth))
    if isinstance(expr, ast.Range):
        return max(_optional(expr.start, depth), _optional(expr.end, depth))
    if isinstance(expr, ast.Struct):
        return max(_deepest(expr.fields, depth), _optional(expr.rest, depth))

    return depth
