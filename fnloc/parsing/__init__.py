from fnloc.parsing.lowering import lower_block, lower_function
from fnloc.parsing.treesitter import ParsedFile, parse_source

__all__ = ["ParsedFile", "lower_block", "lower_function", "parse_source"]
