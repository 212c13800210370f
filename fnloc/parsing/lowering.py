"""
Lowering of tree-sitter Rust nodes into the typed syntax tree.

Only the shapes the metrics care about are modelled; every other node is
lowered to ``Other`` carrying the tree-sitter node type. Comments and
attributes are extras in the grammar and may show up between any two
tokens, so positional lookups always go through ``_operands``.
"""

from __future__ import annotations

from functools import reduce
from typing import Callable, Dict, List, Optional

from fnloc.parsing import syntax as ast
from fnloc.parsing.treesitter import COMMENT_TYPES


SKIPPED_STATEMENT_TYPES = COMMENT_TYPES | {
    "label",
    "attribute_item",
    "inner_attribute_item",
    "empty_statement",
}

ITEM_NODE_TYPES = {
    "const_item",
    "static_item",
    "macro_definition",
    "mod_item",
    "foreign_mod_item",
    "struct_item",
    "union_item",
    "enum_item",
    "type_item",
    "function_item",
    "function_signature_item",
    "impl_item",
    "trait_item",
    "associated_type",
    "use_declaration",
    "extern_crate_declaration",
}

RANGE_OPERATORS = {"..", "...", "..="}


def lower_function(node, owner: Optional[str] = None) -> ast.FunctionItem:
    """Lower a ``function_item`` node."""
    body = node.child_by_field_name("body")
    return ast.FunctionItem(
        name=_text(node.child_by_field_name("name")),
        body=lower_block(body) if body is not None else ast.Block(),
        owner=owner,
        start_line=node.start_point[0] + 1,
        end_line=node.end_point[0] + 1,
    )


def lower_block(node) -> ast.Block:
    stmts = []
    for child in node.named_children:
        if child.type in SKIPPED_STATEMENT_TYPES:
            continue
        stmt = lower_statement(child)
        if stmt is not None:
            stmts.append(stmt)
    return ast.Block(stmts=tuple(stmts))


def lower_statement(node) -> Optional[ast.Stmt]:
    if node.type == "expression_statement":
        operands = _operands(node)
        if not operands:
            return None
        inner = operands[0]
        if inner.type == "macro_invocation":
            return ast.MacroStmt(name=_macro_name(inner))
        semi = any(child.type == ";" for child in node.children)
        return ast.ExprStmt(expr=lower_expr(inner), semi=semi)
    if node.type == "let_declaration":
        return ast.Local(init=_lower_optional(node.child_by_field_name("value")))
    if node.type == "macro_invocation":
        return ast.MacroStmt(name=_macro_name(node))
    if node.type in ITEM_NODE_TYPES:
        name_node = node.child_by_field_name("name")
        return ast.ItemStmt(kind=node.type, name=_text(name_node) if name_node is not None else None)
    # Tail expression of a block, written without a semicolon.
    return ast.ExprStmt(expr=lower_expr(node), semi=False)


def lower_expr(node) -> ast.Expr:
    if node is None:
        return ast.Other(kind="missing")
    lower = _LOWERERS.get(node.type)
    if lower is None:
        return ast.Other(kind=node.type)
    return lower(node)


def _lower_optional(node) -> Optional[ast.Expr]:
    if node is None:
        return None
    return lower_expr(node)


def _lower_if(node) -> ast.If:
    consequence = node.child_by_field_name("consequence")
    else_branch = None
    alternative = node.child_by_field_name("alternative")
    if alternative is not None:
        operands = _operands(alternative)
        if operands:
            target = operands[0]
            if target.type == "if_expression":
                else_branch = _lower_if(target)
            else:
                else_branch = lower_block(target)
    return ast.If(
        cond=lower_expr(node.child_by_field_name("condition")),
        then_branch=lower_block(consequence) if consequence is not None else ast.Block(),
        else_branch=else_branch,
    )


def _lower_match(node) -> ast.Match:
    arms = []
    body = node.child_by_field_name("body")
    if body is not None:
        for arm in body.named_children:
            if arm.type not in ("match_arm", "last_match_arm"):
                continue
            pattern = arm.child_by_field_name("pattern")
            guard = pattern.child_by_field_name("condition") if pattern is not None else None
            arms.append(
                ast.MatchArm(
                    body=lower_expr(arm.child_by_field_name("value")),
                    guard=_lower_optional(guard),
                )
            )
    return ast.Match(scrutinee=lower_expr(node.child_by_field_name("value")), arms=tuple(arms))


def _lower_while(node) -> ast.While:
    return ast.While(
        cond=lower_expr(node.child_by_field_name("condition")),
        body=_lower_body(node),
    )


def _lower_for(node) -> ast.ForLoop:
    return ast.ForLoop(
        iterable=lower_expr(node.child_by_field_name("value")),
        body=_lower_body(node),
    )


def _lower_loop(node) -> ast.Loop:
    return ast.Loop(body=_lower_body(node))


def _lower_body(node) -> ast.Block:
    body = node.child_by_field_name("body")
    return lower_block(body) if body is not None else ast.Block()


def _lower_binary(node) -> ast.Binary:
    operator = node.child_by_field_name("operator")
    return ast.Binary(
        op=operator.type if operator is not None else "",
        left=lower_expr(node.child_by_field_name("left")),
        right=lower_expr(node.child_by_field_name("right")),
    )


def _lower_let_chain(node) -> ast.Expr:
    # `if let A = a && b` chains are logical ANDs between their operands.
    operands = [lower_expr(child) for child in _operands(node)]
    if not operands:
        return ast.Other(kind=node.type)
    return reduce(lambda left, right: ast.Binary(op="&&", left=left, right=right), operands)


def _lower_try(node) -> ast.Try:
    return ast.Try(expr=lower_expr(_first_operand(node)))


def _lower_return(node) -> ast.Return:
    return ast.Return(value=_lower_optional(_first_operand(node)))


def _lower_break(node) -> ast.Break:
    values = [child for child in _operands(node) if child.type != "label"]
    return ast.Break(value=lower_expr(values[0]) if values else None)


def _lower_continue(node) -> ast.Continue:
    return ast.Continue()


def _lower_block_expr(node) -> ast.BlockExpr:
    return ast.BlockExpr(block=lower_block(node), kind="block")


def _lower_wrapped_block(kind: str) -> Callable[[object], ast.Expr]:
    def lower(node) -> ast.Expr:
        for child in node.named_children:
            if child.type == "block":
                return ast.BlockExpr(block=lower_block(child), kind=kind)
        return ast.Other(kind=node.type)

    return lower


def _lower_closure(node) -> ast.Closure:
    return ast.Closure(body=lower_expr(node.child_by_field_name("body")))


def _lower_call(node) -> ast.Expr:
    function = node.child_by_field_name("function")
    args = tuple(lower_expr(arg) for arg in _operands(node.child_by_field_name("arguments")))
    target = function
    if target is not None and target.type == "generic_function":
        target = target.child_by_field_name("function")
    if target is not None and target.type == "field_expression":
        return ast.MethodCall(
            receiver=lower_expr(target.child_by_field_name("value")),
            method=_text(target.child_by_field_name("field")),
            args=args,
        )
    return ast.Call(func=lower_expr(function), args=args)


def _lower_array(node) -> ast.Expr:
    if node.child_by_field_name("length") is not None:
        # `[value; N]` repeat arrays have no metric rule.
        return ast.Other(kind="array_repeat")
    return ast.Array(elems=tuple(lower_expr(child) for child in _operands(node)))


def _lower_tuple(node) -> ast.TupleExpr:
    return ast.TupleExpr(elems=tuple(lower_expr(child) for child in _operands(node)))


def _lower_field(node) -> ast.Field:
    return ast.Field(
        base=lower_expr(node.child_by_field_name("value")),
        name=_text(node.child_by_field_name("field")),
    )


def _lower_index(node) -> ast.Expr:
    operands = _operands(node)
    if len(operands) < 2:
        return ast.Other(kind=node.type)
    return ast.Index(expr=lower_expr(operands[0]), index=lower_expr(operands[1]))


def _lower_assign(node) -> ast.Assign:
    return ast.Assign(
        left=lower_expr(node.child_by_field_name("left")),
        right=lower_expr(node.child_by_field_name("right")),
    )


def _lower_reference(node) -> ast.Reference:
    return ast.Reference(expr=lower_expr(node.child_by_field_name("value")))


def _lower_unary(node) -> ast.Unary:
    op = node.children[0].type if node.children else ""
    return ast.Unary(op=op, expr=lower_expr(_first_operand(node)))


def _lower_cast(node) -> ast.Cast:
    return ast.Cast(expr=lower_expr(node.child_by_field_name("value")))


def _lower_range(node) -> ast.Range:
    start = end = None
    seen_operator = False
    for child in node.children:
        if child.type in RANGE_OPERATORS:
            seen_operator = True
        elif child.is_named and child.type not in COMMENT_TYPES:
            if seen_operator:
                end = lower_expr(child)
            else:
                start = lower_expr(child)
    return ast.Range(start=start, end=end)


def _lower_struct(node) -> ast.Struct:
    fields = []
    rest = None
    body = node.child_by_field_name("body")
    if body is not None:
        for child in body.named_children:
            if child.type == "field_initializer":
                fields.append(lower_expr(child.child_by_field_name("value")))
            elif child.type == "base_field_initializer":
                rest = lower_expr(_first_operand(child))
    return ast.Struct(fields=tuple(fields), rest=rest)


def _lower_paren(node) -> ast.Paren:
    return ast.Paren(expr=lower_expr(_first_operand(node)))


_LOWERERS: Dict[str, Callable[[object], ast.Expr]] = {
    "if_expression": _lower_if,
    "match_expression": _lower_match,
    "while_expression": _lower_while,
    "for_expression": _lower_for,
    "loop_expression": _lower_loop,
    "binary_expression": _lower_binary,
    "compound_assignment_expr": _lower_binary,
    "let_chain": _lower_let_chain,
    "try_expression": _lower_try,
    "return_expression": _lower_return,
    "break_expression": _lower_break,
    "continue_expression": _lower_continue,
    "block": _lower_block_expr,
    "unsafe_block": _lower_wrapped_block("unsafe"),
    "async_block": _lower_wrapped_block("async"),
    "closure_expression": _lower_closure,
    "call_expression": _lower_call,
    "array_expression": _lower_array,
    "tuple_expression": _lower_tuple,
    "field_expression": _lower_field,
    "index_expression": _lower_index,
    "assignment_expression": _lower_assign,
    "reference_expression": _lower_reference,
    "unary_expression": _lower_unary,
    "type_cast_expression": _lower_cast,
    "range_expression": _lower_range,
    "struct_expression": _lower_struct,
    "parenthesized_expression": _lower_paren,
}


def _operands(node) -> List[object]:
    if node is None:
        return []
    return [
        child
        for child in node.named_children
        if child.type not in COMMENT_TYPES and child.type not in ("attribute_item", "inner_attribute_item")
    ]


def _first_operand(node):
    operands = _operands(node)
    return operands[0] if operands else None


def _macro_name(node) -> str:
    return _text(node.child_by_field_name("macro"))


def _text(node) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")
