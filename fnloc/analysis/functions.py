"""
Discovery of function items in a parsed Rust file.

Every ``fn`` with a body is reported as its own unit: free functions,
methods in ``impl`` and ``trait`` blocks, functions inside ``mod`` blocks
and functions nested in other functions. The enclosing scopes become the
function's owner, e.g. ``Parser::next`` or ``outer::helper``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from fnloc.parsing import syntax as ast
from fnloc.parsing.lowering import lower_function
from fnloc.parsing.treesitter import (
    FUNCTION_NODE_TYPE,
    SCOPE_NODE_TYPES,
    ParsedFile,
    node_text,
    parse_source,
)


@dataclass(frozen=True)
class FunctionSpan:
    """The source lines of one function, from its ``fn`` line to its closing brace."""
    name: str
    lines: List[str] = field(default_factory=list)
    start_line: int = 0
    end_line: int = 0


def extract_functions(parsed: ParsedFile) -> List[ast.FunctionItem]:
    functions: List[ast.FunctionItem] = []
    _collect(parsed, parsed.root, [], functions)
    return functions


def extract_function_spans(source: str) -> List[FunctionSpan]:
    """Parse ``source`` and return the span of every function in it.

    Raises ``RustParseError`` when the source does not parse.
    """
    parsed = parse_source(source)
    lines = parsed.lines
    return [span_for(item, lines) for item in extract_functions(parsed)]


def span_for(item: ast.FunctionItem, lines: List[str]) -> FunctionSpan:
    return FunctionSpan(
        name=item.qualified_name,
        lines=lines[item.start_line - 1 : item.end_line],
        start_line=item.start_line,
        end_line=item.end_line,
    )


def find_function(parsed: ParsedFile, name: str, start_line: int = 0) -> Optional[ast.FunctionItem]:
    """Return the function called ``name`` (plain or qualified).

    Trait impls for one type share a name (two ``Foo::fmt`` methods), so a
    known ``start_line`` picks the right one. Otherwise the first match wins.
    """
    matches = [item for item in extract_functions(parsed) if name in (item.name, item.qualified_name)]
    for item in matches:
        if start_line and item.start_line == start_line:
            return item
    return matches[0] if matches else None


def _collect(parsed: ParsedFile, node, scope: List[str], out: List[ast.FunctionItem]) -> None:
    for child in node.named_children:
        if child.type == FUNCTION_NODE_TYPE:
            item = lower_function(child, owner="::".join(scope) or None)
            out.append(item)
            _collect(parsed, child, scope + [item.name], out)
        elif child.type in SCOPE_NODE_TYPES:
            _collect(parsed, child, scope + [_scope_name(parsed, child)], out)
        elif child.type != "token_tree":
            _collect(parsed, child, scope, out)


def _scope_name(parsed: ParsedFile, node) -> str:
    name_node = node.child_by_field_name("type") if node.type == "impl_item" else node.child_by_field_name("name")
    if name_node is None:
        return node.type
    # `impl<T> Stack<T>` is reported under `Stack`.
    return node_text(parsed, name_node).split("<", 1)[0].strip()
