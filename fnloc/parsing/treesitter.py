from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import tree_sitter_rust
from tree_sitter import Language, Parser

from fnloc.errors import RustParseError


RUST_LANGUAGE = Language(tree_sitter_rust.language())

RUST_EXTENSIONS = {".rs"}

COMMENT_TYPES = {"line_comment", "block_comment"}

# Items that open a named scope for the functions declared inside them.
SCOPE_NODE_TYPES = {"impl_item", "trait_item", "mod_item"}

FUNCTION_NODE_TYPE = "function_item"


@dataclass(frozen=True)
class ParsedFile:
    path: str
    source: bytes
    tree: object

    @property
    def text(self) -> str:
        return self.source.decode("utf-8", errors="replace")

    @property
    def lines(self) -> list[str]:
        # Split on "\n" only so indices match tree-sitter rows.
        return [line.rstrip("\r") for line in self.text.split("\n")]

    @property
    def root(self):
        return self.tree.root_node


def is_rust_path(path: str) -> bool:
    return Path(path).suffix.lower() in RUST_EXTENSIONS


def parse_source(source: str | bytes, path: str = "<string>") -> ParsedFile:
    """Parse Rust source into a tree-sitter tree.

    tree-sitter always produces a tree, recovering from bad input with
    ERROR and MISSING nodes. A tree containing any of them is rejected
    so that callers only ever see well-formed syntax.
    """
    if isinstance(source, str):
        source = source.encode("utf-8")
    parser = Parser(RUST_LANGUAGE)
    tree = parser.parse(source)
    if tree.root_node.has_error:
        line, column = _first_error_point(tree.root_node)
        raise RustParseError(path, line, column)
    return ParsedFile(path=path, source=source, tree=tree)


def iter_nodes(node) -> Iterable[object]:
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def node_text(parsed: ParsedFile, node) -> str:
    return parsed.source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def _first_error_point(root) -> tuple[int, int]:
    for node in iter_nodes(root):
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1, node.start_point[1] + 1
    return root.start_point[0] + 1, root.start_point[1] + 1

